"""Stub HTTP helpers shared by the test suite."""

from collections.abc import Callable, Iterator

import httpx

ROOT_URL = "https://api.example.com:9876"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingHandler:
    """MockTransport handler that records requests and the responses it served."""

    def __init__(self, handler: Handler):
        self._handler = handler
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        response = self._handler(request)
        self.responses.append(response)
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class TrackingStream(httpx.SyncByteStream):
    """Response body that remembers how often it was iterated and closed."""

    def __init__(self, body: bytes):
        self._body = body
        self.reads = 0
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        self.reads += 1
        yield self._body

    def close(self) -> None:
        self.closed = True


def respond(status: int, body: str | bytes) -> Handler:
    """Handler that always answers with ``status`` and a raw ``body``."""
    content = body.encode() if isinstance(body, str) else body

    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=content)

    return _handler


def fail_with(error: Exception) -> Handler:
    """Handler that raises ``error`` instead of answering."""

    def _handler(_request: httpx.Request) -> httpx.Response:
        raise error

    return _handler
