"""Typed Notion resources decoded by the client."""

from .common import Annotations, Link, NotionModel, Pagination, RichText, Text
from .database import (
    CheckboxProperty,
    CreatedTimeProperty,
    Database,
    DatabaseList,
    DatabaseQuery,
    DateProperty,
    EmailProperty,
    LastEditedTimeProperty,
    MultiSelectOption,
    MultiSelectProperty,
    NumberProperty,
    PageList,
    PhoneNumberProperty,
    Property,
    RichTextProperty,
    SelectOption,
    SelectProperty,
    TitleProperty,
    URLProperty,
)
from .errors import ApiServerError
from .page import DateValue, Page, Parent, PropertyValue, SelectValue

__all__ = [
    "Annotations",
    "ApiServerError",
    "CheckboxProperty",
    "CreatedTimeProperty",
    "Database",
    "DatabaseList",
    "DatabaseQuery",
    "DateProperty",
    "DateValue",
    "EmailProperty",
    "LastEditedTimeProperty",
    "Link",
    "MultiSelectOption",
    "MultiSelectProperty",
    "NotionModel",
    "NumberProperty",
    "Page",
    "PageList",
    "Pagination",
    "Parent",
    "PhoneNumberProperty",
    "Property",
    "PropertyValue",
    "RichText",
    "RichTextProperty",
    "SelectOption",
    "SelectProperty",
    "SelectValue",
    "Text",
    "TitleProperty",
    "URLProperty",
]
