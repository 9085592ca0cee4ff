"""Database objects and their property schema.

See https://developers.notion.com/reference/database
"""

from typing import Any

from pydantic import Field

from .common import NotionModel, RichText
from .page import Page


class SelectOption(NotionModel):
    id: str = ""
    name: str = ""
    color: str = ""


class MultiSelectOption(NotionModel):
    id: str = ""
    name: str = ""
    color: str = ""


# Property configurations. Most carry no settings and arrive as ``{}``.


class TitleProperty(NotionModel):
    pass


class RichTextProperty(NotionModel):
    pass


class NumberProperty(NotionModel):
    format: str = ""


class SelectProperty(NotionModel):
    options: list[SelectOption] = Field(default_factory=list)


class MultiSelectProperty(NotionModel):
    options: list[MultiSelectOption] = Field(default_factory=list)


class CheckboxProperty(NotionModel):
    pass


class CreatedTimeProperty(NotionModel):
    pass


class LastEditedTimeProperty(NotionModel):
    pass


class DateProperty(NotionModel):
    pass


class URLProperty(NotionModel):
    pass


class EmailProperty(NotionModel):
    pass


class PhoneNumberProperty(NotionModel):
    pass


class Property(NotionModel):
    """One column of a database schema; only the field named by ``type`` is set."""

    id: str = ""
    type: str = ""
    title: TitleProperty | None = None
    rich_text: RichTextProperty | None = None
    number: NumberProperty | None = None
    select: SelectProperty | None = None
    multi_select: MultiSelectProperty | None = None
    checkbox: CheckboxProperty | None = None
    created_time: CreatedTimeProperty | None = None
    last_edited_time: LastEditedTimeProperty | None = None
    date: DateProperty | None = None
    url: URLProperty | None = None
    email: EmailProperty | None = None
    phone_number: PhoneNumberProperty | None = None


class Database(NotionModel):
    object: str = ""
    id: str = ""
    created_time: str = ""
    last_edited_time: str = ""
    title: list[RichText] = Field(default_factory=list)
    properties: dict[str, Property] = Field(default_factory=dict)

    @property
    def plain_title(self) -> str:
        return "".join(part.plain_text for part in self.title)


class DatabaseList(NotionModel):
    """Response of the list databases endpoint.

    See https://developers.notion.com/reference/get-databases
    """

    object: str = ""
    has_more: bool = False
    next_cursor: str | None = None
    results: list[Database] = Field(default_factory=list)


class DatabaseQuery(NotionModel):
    """Body of a database query.

    ``filter`` and ``sorts`` are passed through as-is.
    See https://developers.notion.com/reference/post-database-query
    """

    filter: dict[str, Any] | None = None
    sorts: list[dict[str, Any]] | None = None
    start_cursor: str | None = None
    page_size: int | None = Field(default=None, ge=1, le=100)


class PageList(NotionModel):
    """Page of results returned by a database query."""

    object: str = ""
    has_more: bool = False
    next_cursor: str | None = None
    results: list[Page] = Field(default_factory=list)
