"""Auth middleware adds credentials at the HTTP client layer."""

import httpx
import pytest

from notion_typed.auth import NotionAuth
from notion_typed.constants import API_VERSION
from tests.helpers import RecordingHandler, respond


@pytest.mark.unit
class TestNotionAuth:
    def test_headers_added_to_every_request(self):
        handler = RecordingHandler(respond(200, "{}"))
        with httpx.Client(
            auth=NotionAuth("secret_abc"), transport=httpx.MockTransport(handler)
        ) as client:
            client.get("https://api.notion.com/v1/databases")
            client.post("https://api.notion.com/v1/databases/x/query", json={})

        for request in handler.requests:
            assert request.headers["Authorization"] == "Bearer secret_abc"
            assert request.headers["Notion-Version"] == API_VERSION

    def test_custom_version(self):
        handler = RecordingHandler(respond(200, "{}"))
        with httpx.Client(
            auth=NotionAuth("secret_abc", "2022-06-28"),
            transport=httpx.MockTransport(handler),
        ) as client:
            client.get("https://api.notion.com/v1/pages/p")

        assert handler.last_request.headers["Notion-Version"] == "2022-06-28"

    def test_repr_hides_token(self):
        auth = NotionAuth("secret_abc")

        assert "secret_abc" not in repr(auth)
        assert "[REDACTED]" in repr(auth)
