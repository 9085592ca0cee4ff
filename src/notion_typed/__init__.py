"""Typed client for the Notion REST API."""

import importlib.metadata
import logging

from notion_typed.auth import NotionAuth
from notion_typed.config import ResolvedConfig, resolve_config
from notion_typed.exceptions import (
    ApplicationError,
    ConfigurationError,
    LocalError,
    NotionTypedError,
    TransportError,
)
from notion_typed.pipeline import Pipeline, build_request
from notion_typed.resources import (
    ApiServerError,
    Database,
    DatabaseList,
    DatabaseQuery,
    Page,
    PageList,
    Pagination,
)
from notion_typed.service import NotionClient
from notion_typed.telemetry import MemoryReporter, TelemetryContext, TelemetryReporter
from notion_typed.transport import (
    CallCancelled,
    CallContext,
    CancelToken,
    DeadlineExceeded,
    HttpxTransport,
    Transport,
)

try:
    __version__ = importlib.metadata.version("notion-typed")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Client
    "NotionClient",
    "Pipeline",
    "build_request",
    # Transport
    "Transport",
    "HttpxTransport",
    "CallContext",
    "CancelToken",
    "CallCancelled",
    "DeadlineExceeded",
    "NotionAuth",
    # Errors
    "NotionTypedError",
    "LocalError",
    "TransportError",
    "ApplicationError",
    "ConfigurationError",
    # Resources
    "ApiServerError",
    "Database",
    "DatabaseList",
    "DatabaseQuery",
    "Page",
    "PageList",
    "Pagination",
    # Configuration
    "ResolvedConfig",
    "resolve_config",
    # Telemetry
    "MemoryReporter",
    "TelemetryContext",
    "TelemetryReporter",
]
