"""
Global test configuration.
"""

import logging
import os

import httpx
import pytest

from notion_typed.pipeline import Pipeline
from notion_typed.transport import HttpxTransport
from tests.helpers import ROOT_URL, Handler, RecordingHandler


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_notion_env(request, monkeypatch):
    """Ensure a clean NOTION_* environment for each test.

    Escape hatch: tests marked with @pytest.mark.api keep the real environment
    so live calls can use NOTION_TOKEN.
    """
    if "api" in request.node.keywords:
        return
    for key in list(os.environ.keys()):
        if key.startswith("NOTION_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def quiet_http_loggers():
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Component tests wired through a stubbed HTTP layer",
        "api: Real Notion API tests (requires NOTION_TOKEN)",
        "slow: Tests that take >1 second",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Skip API tests unless a token and ENABLE_API_TESTS are present."""
    if not (os.getenv("NOTION_TOKEN") and os.getenv("ENABLE_API_TESTS")):
        skip_api = pytest.mark.skip(
            reason="API tests require NOTION_TOKEN and ENABLE_API_TESTS=1",
        )
        for item in items:
            if "api" in item.keywords:
                item.add_marker(skip_api)


# --- Stubbed HTTP ---


@pytest.fixture
def recording():
    """Factory: wrap a handler so its traffic can be inspected."""
    return RecordingHandler


@pytest.fixture
def make_transport():
    """Factory: HttpxTransport over a MockTransport handler."""
    created: list[HttpxTransport] = []

    def _make(handler: Handler) -> HttpxTransport:
        transport = HttpxTransport(httpx.Client(transport=httpx.MockTransport(handler)))
        created.append(transport)
        return transport

    yield _make
    for transport in created:
        transport.close()


@pytest.fixture
def make_pipeline(make_transport):
    """Factory: Pipeline rooted at ROOT_URL over a stubbed handler."""

    def _make(handler: Handler, root_url: str = ROOT_URL) -> Pipeline:
        return Pipeline(make_transport(handler), root_url)

    return _make
