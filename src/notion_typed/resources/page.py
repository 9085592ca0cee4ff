"""Page objects and their property values.

See https://developers.notion.com/reference/page
"""

from pydantic import Field

from .common import NotionModel, RichText


class Parent(NotionModel):
    type: str = ""
    database_id: str | None = None
    page_id: str | None = None
    workspace: bool | None = None


class SelectValue(NotionModel):
    id: str = ""
    name: str = ""
    color: str = ""


class DateValue(NotionModel):
    start: str = ""
    end: str | None = None


class PropertyValue(NotionModel):
    """Identifier, type and value of one page property."""

    id: str = ""
    type: str = ""
    title: list[RichText] | None = None
    rich_text: list[RichText] | None = None
    number: float | None = None
    select: SelectValue | None = None
    multi_select: list[SelectValue] | None = None
    checkbox: bool | None = None
    date: DateValue | None = None
    url: str | None = None
    email: str | None = None
    phone_number: str | None = None
    created_time: str | None = None
    last_edited_time: str | None = None


class Page(NotionModel):
    object: str = ""
    id: str = ""
    created_time: str = ""
    last_edited_time: str = ""
    parent: Parent = Field(default_factory=Parent)
    archived: bool = False
    url: str = ""
    properties: dict[str, PropertyValue] = Field(default_factory=dict)
