"""Notion endpoints built on the request pipeline.

Every method is a thin mapping from arguments to ``Pipeline.execute``: a path,
an optional query or body, the resource type to decode into, and
``ApiServerError`` as the failure payload. Errors surface as the pipeline's
classified exceptions.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
from types import TracebackType
from typing import TYPE_CHECKING, Self
from urllib.parse import quote

import httpx

from notion_typed.auth import NotionAuth
from notion_typed.config import ResolvedConfig, resolve_config
from notion_typed.exceptions import ConfigurationError
from notion_typed.pipeline import Pipeline
from notion_typed.resources import (
    ApiServerError,
    Database,
    DatabaseList,
    DatabaseQuery,
    Page,
    PageList,
    Pagination,
)
from notion_typed.transport import CallContext, HttpxTransport, Transport

if TYPE_CHECKING:
    from notion_typed.telemetry import TelemetryContextProtocol

logger = logging.getLogger(__name__)


class NotionClient:
    """Facade over the Notion API.

    Args:
        token: Integration token; overrides the configured one.
        config: Resolved configuration; resolved from the environment if omitted.
        transport: Transport to use instead of one built from ``config``. It is
            used as given, so it must already add the auth headers.
        telemetry: Optional telemetry context for the pipeline.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        config: ResolvedConfig | None = None,
        transport: Transport | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        if config is None:
            config = resolve_config({"token": token} if token else None)
        elif token:
            config = config.with_overrides(token=token)
        self.config = config

        self._owns_transport = transport is None
        if transport is None:
            if not config.token:
                raise ConfigurationError(
                    "A Notion token is required. Pass token=... or set NOTION_TOKEN."
                )
            transport = HttpxTransport(
                auth=NotionAuth(config.token, config.notion_version),
                timeout=config.timeout_seconds,
            )
        self._transport = transport
        self._pipeline = Pipeline(transport, config.root_url, telemetry=telemetry)

    @classmethod
    def with_http_client(
        cls,
        token: str,
        http_client: httpx.Client,
        *,
        config: ResolvedConfig | None = None,
    ) -> NotionClient:
        """Build a client around a caller-owned ``httpx.Client``.

        The auth middleware is installed on ``http_client``; the client is not
        closed by ``close()``.
        """
        config = config or resolve_config({"token": token})
        http_client.auth = NotionAuth(token, config.notion_version)
        client = cls(token, config=config, transport=HttpxTransport(http_client))
        # HttpxTransport leaves the injected httpx.Client open on close()
        client._owns_transport = True
        return client

    # --- Databases ---

    def retrieve_database(
        self, database_id: str, *, context: CallContext | None = None
    ) -> Database:
        """GET /databases/{id}"""  # noqa: D415
        return self._pipeline.execute(
            "GET",
            f"/databases/{_segment(database_id)}",
            success_type=Database,
            failure_type=ApiServerError,
            context=context,
        )

    def list_databases(
        self,
        pagination: Pagination | None = None,
        *,
        context: CallContext | None = None,
    ) -> DatabaseList:
        """List databases shared with the integration, one page at a time."""
        return self._pipeline.execute(
            "GET",
            "/databases",
            query=pagination.query() if pagination else None,
            success_type=DatabaseList,
            failure_type=ApiServerError,
            context=context,
        )

    def iter_databases(
        self, page_size: int | None = None, *, context: CallContext | None = None
    ) -> Iterator[Database]:
        """Yield every shared database, following ``next_cursor``."""
        pagination = Pagination(page_size=page_size)
        while True:
            page = self.list_databases(pagination, context=context)
            yield from page.results
            if not page.has_more or not page.next_cursor:
                return
            logger.debug("Fetching next database page from cursor %s", page.next_cursor)
            pagination = Pagination(page_size=page_size, start_cursor=page.next_cursor)

    def query_database(
        self,
        database_id: str,
        query: DatabaseQuery | None = None,
        *,
        context: CallContext | None = None,
    ) -> PageList:
        """POST /databases/{id}/query"""  # noqa: D415
        return self._pipeline.execute(
            "POST",
            f"/databases/{_segment(database_id)}/query",
            body=query or DatabaseQuery(),
            success_type=PageList,
            failure_type=ApiServerError,
            context=context,
        )

    # --- Pages ---

    def retrieve_page(self, page_id: str, *, context: CallContext | None = None) -> Page:
        """GET /pages/{id}"""  # noqa: D415
        return self._pipeline.execute(
            "GET",
            f"/pages/{_segment(page_id)}",
            success_type=Page,
            failure_type=ApiServerError,
            context=context,
        )

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


def _segment(value: str) -> str:
    return quote(value, safe="")
