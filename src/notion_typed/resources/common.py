"""Shapes shared by several Notion objects.

See https://developers.notion.com/reference/rich-text
"""

from pydantic import BaseModel, ConfigDict, Field


class NotionModel(BaseModel):
    """Base for Notion payloads; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class Annotations(NotionModel):
    """Style information applying to a whole rich text object."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = ""


class Link(NotionModel):
    url: str = ""


class Text(NotionModel):
    content: str = ""
    link: Link | None = None


class RichText(NotionModel):
    """Text content combined with style information."""

    type: str = ""
    plain_text: str = ""
    href: str | None = None
    annotations: Annotations | None = None
    text: Text | None = None


class Pagination(NotionModel):
    """Cursor-based pagination parameters.

    See https://developers.notion.com/reference/pagination
    """

    page_size: int | None = Field(default=None, ge=1, le=100)
    start_cursor: str | None = None

    def query(self) -> dict[str, str]:
        """Query parameters for a paginated GET; unset values are omitted."""
        params: dict[str, str] = {}
        if self.page_size:
            params["page_size"] = str(self.page_size)
        if self.start_cursor:
            params["start_cursor"] = self.start_cursor
        return params
