"""Authentication middleware for Notion requests."""

from collections.abc import Generator

import httpx

from notion_typed.constants import API_VERSION


class NotionAuth(httpx.Auth):
    """Adds the bearer token and API version headers to every request.

    Plugged into ``httpx.Client(auth=...)`` so the pipeline never handles the
    token itself.
    """

    def __init__(self, token: str, version: str = API_VERSION) -> None:
        self._token = token
        self._version = version

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        request.headers["Notion-Version"] = self._version
        yield request

    def __repr__(self) -> str:
        return f"NotionAuth(token='[REDACTED]', version={self._version!r})"
