"""Classified errors raised by the request pipeline.

Three failure domains are kept apart because they call for different handling:

- ``LocalError``: something on the caller's side failed (encoding the body,
  building the request, decoding a successful response).
- ``TransportError``: no response was obtained at all.
- ``ApplicationError``: a response was obtained and the server reported a
  failure.
"""

from typing import Any


class NotionTypedError(Exception):
    """Base exception for the Notion typed client"""  # noqa: D415


class ConfigurationError(NotionTypedError):
    """Raised when client configuration is missing or invalid"""  # noqa: D415


class LocalError(NotionTypedError):
    """The request could not be built or the response could not be read."""

    def __init__(self, reason: str, cause: BaseException | None = None) -> None:
        self.reason = reason
        self.cause = cause
        if cause is not None:
            message = f"local error: {reason}: {cause}"
        else:
            message = f"local error: {reason}"
        super().__init__(message)


class TransportError(NotionTypedError):
    """The exchange failed before any response was received."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"transport error: request to {url} failed: {cause}")


class ApplicationError[E](NotionTypedError):
    """The server answered with a failure status.

    ``payload`` holds the decoded failure body, or the zero value of the
    failure type when the body could not be decoded.
    """

    def __init__(self, status_code: int, payload: E) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"application error: {status_code} {_describe(payload)}")


def _describe(payload: Any) -> str:
    if payload is None:
        return "<no payload>"
    return repr(payload)
