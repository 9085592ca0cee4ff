"""Error body returned by the Notion API.

See https://developers.notion.com/reference/errors
"""

from .common import NotionModel


class ApiServerError(NotionModel):
    """Structured failure payload; every field defaults so partial bodies decode."""

    object: str = ""
    status: int = 0
    code: str = ""
    message: str = ""

    def __str__(self) -> str:
        return f"{self.code} [{self.message}]"
