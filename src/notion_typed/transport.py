"""Transport adapter for the request pipeline.

The transport performs exactly one request/response exchange, body download
included. It never looks at status codes or payloads: any response from the
peer is handed back with its body read, and any failure to obtain one becomes a
``TransportError`` naming the URL and carrying the underlying cause.

Cancellation is driven by a ``CallContext``. A context that is already
cancelled or past its deadline fails before touching the network; a deadline
bounds the httpx timeouts; a cancel token makes the exchange run on a worker
thread so the caller can stop waiting once the token fires. Both apply until
the last byte of the body has arrived.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import dataclass
import logging
import math
import threading
import time
from types import TracebackType
from typing import Protocol, Self, runtime_checkable

import httpx

from notion_typed.constants import (
    CANCEL_POLL_INTERVAL,
    NETWORK_TIMEOUT,
    TRANSPORT_MAX_WORKERS,
)
from notion_typed.exceptions import TransportError

logger = logging.getLogger(__name__)


class CallCancelled(Exception):
    """Cause attached to a TransportError when a call was cancelled."""


class DeadlineExceeded(CallCancelled):
    """Cause attached to a TransportError when a call ran past its deadline."""


class CancelToken:
    """Thread-safe, one-way cancellation flag shared between caller and call."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return the flag."""
        return self._event.wait(timeout)


@dataclass(frozen=True, slots=True)
class CallContext:
    """Deadline and cancellation signal for a single call.

    ``deadline`` is an absolute ``time.monotonic()`` value.
    """

    deadline: float | None = None
    cancel_token: CancelToken | None = None

    @classmethod
    def with_timeout(
        cls, seconds: float, cancel_token: CancelToken | None = None
    ) -> CallContext:
        return cls(deadline=time.monotonic() + seconds, cancel_token=cancel_token)

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without one."""
        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    def check(self) -> None:
        """Raise ``CallCancelled`` if the call must not proceed."""
        if self.cancel_token is not None and self.cancel_token.cancelled:
            raise CallCancelled("call cancelled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise DeadlineExceeded("deadline exceeded")


BACKGROUND = CallContext()


@runtime_checkable
class Transport(Protocol):
    """Performs one HTTP exchange.

    Implementations return the raw response for any status code and raise
    ``TransportError`` when no response could be obtained. They must be safe
    for concurrent use when shared across threads.
    """

    def send(self, request: httpx.Request, context: CallContext) -> httpx.Response:
        """Send ``request`` and return the response with its body read."""
        ...

    def close(self) -> None:
        """Release pooled connections and worker threads."""
        ...


class HttpxTransport:
    """Transport backed by an ``httpx.Client``.

    The client is injectable; tests pass one built on ``httpx.MockTransport``.
    A client created here, with ``auth`` and ``timeout``, is owned and closed
    by this transport.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        auth: httpx.Auth | None = None,
        timeout: float = NETWORK_TIMEOUT,
        max_workers: int = TRANSPORT_MAX_WORKERS,
    ) -> None:
        self._owns_client = client is None
        self._client = (
            client if client is not None else httpx.Client(auth=auth, timeout=timeout)
        )
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None
        self._executor_lock = threading.Lock()

    def send(self, request: httpx.Request, context: CallContext) -> httpx.Response:
        url = str(request.url)
        try:
            context.check()
        except CallCancelled as e:
            raise TransportError(url, e) from e

        request.extensions["timeout"] = self._timeout_for(context)
        logger.debug("Sending %s %s", request.method, url)

        if context.cancel_token is None:
            response = self._exchange(request, url)
        else:
            response = self._exchange_cancellable(request, url, context)

        # A response that lands after cancellation is never handed on
        try:
            context.check()
        except CallCancelled as e:
            response.close()
            raise TransportError(url, e) from e

        logger.debug("Received %s for %s %s", response.status_code, request.method, url)
        return response

    def close(self) -> None:
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=False, cancel_futures=True)
                self._executor = None
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # --- Internals ---

    def _exchange(self, request: httpx.Request, url: str) -> httpx.Response:
        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(url, e) from e
        try:
            response.read()
        except httpx.HTTPError as e:
            response.close()
            raise TransportError(url, e) from e
        return response

    def _exchange_cancellable(
        self, request: httpx.Request, url: str, context: CallContext
    ) -> httpx.Response:
        future = self._pool().submit(self._exchange, request, url)
        while True:
            try:
                return future.result(timeout=CANCEL_POLL_INTERVAL)
            except FutureTimeout:
                pass
            try:
                context.check()
            except CallCancelled as e:
                if not future.cancel():
                    future.add_done_callback(_discard_late_response)
                logger.debug("Abandoned %s %s: %s", request.method, url, e)
                raise TransportError(url, e) from e

    def _timeout_for(self, context: CallContext) -> dict[str, float | None]:
        base = self._client.timeout
        remaining = context.remaining()
        if remaining is None:
            return base.as_dict()

        def clamp(value: float | None) -> float:
            return min(math.inf if value is None else value, remaining)

        return httpx.Timeout(
            connect=clamp(base.connect),
            read=clamp(base.read),
            write=clamp(base.write),
            pool=clamp(base.pool),
        ).as_dict()

    def _pool(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="notion-typed-transport",
                )
            return self._executor


def _discard_late_response(future: Future[httpx.Response]) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    future.result().close()
