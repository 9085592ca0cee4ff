"""Request/response pipeline with a three-tier error taxonomy.

A call flows through three steps:

1. ``build_request`` turns (method, path, query, body) into an ``httpx.Request``
   with no I/O. Anything that goes wrong here is a ``LocalError``.
2. The injected ``Transport`` performs the exchange and downloads the body. No
   complete response, or a call cancelled before the classifier runs, means a
   ``TransportError``.
3. The classifier branches on the status code and decodes the body once into
   the caller's success or failure type:

   - ``status <= 300``: decode into the success type; undecodable bodies are a
     ``LocalError`` because the call itself succeeded.
   - ``status > 300``: decode into the failure type on a best-effort basis and
     raise ``ApplicationError``. A non-conforming failure body never turns the
     outcome into a ``LocalError``; the payload falls back to the failure type's
     zero value.

The response is closed on every exit path. The pipeline keeps no per-call
state, so one instance can be shared across threads as long as its transport
can.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
import json
import logging
import re
from typing import TYPE_CHECKING, Annotated, Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from notion_typed.constants import JSON_CONTENT_TYPE, SUCCESS_STATUS_CEILING
from notion_typed.exceptions import ApplicationError, LocalError, TransportError
from notion_typed.telemetry import TelemetryContext
from notion_typed.transport import BACKGROUND, CallCancelled, CallContext, Transport

if TYPE_CHECKING:
    from notion_typed.telemetry import TelemetryContextProtocol

logger = logging.getLogger(__name__)

# RFC 9110 token characters
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

T_API_EXECUTE = "pipeline.execute"
T_API_OUTCOME = "outcome"


# --- Request construction ---


def encode_body(body: Any) -> bytes:
    """Serialise a request body to compact JSON.

    Pydantic models are dumped by alias with unset optionals dropped; anything
    else goes through ``json.dumps``. NaN and infinities are rejected.
    """
    if isinstance(body, BaseModel):
        return body.model_dump_json(exclude_none=True, by_alias=True).encode()
    return json.dumps(
        body,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_json_default,
    ).encode()


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True, by_alias=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_request(
    root_url: str,
    method: str,
    path: str,
    query: Mapping[str, str] | None = None,
    body: Any = None,
) -> httpx.Request:
    """Build the outbound request without performing any I/O.

    Raises:
        LocalError: the method is not a valid HTTP token, the URL cannot be
            parsed, or the body cannot be serialised.
    """
    if not isinstance(method, str) or not _METHOD_TOKEN.fullmatch(method):
        cause = ValueError(f"invalid method {method!r}")
        raise LocalError("failed to create request", cause) from cause

    headers: dict[str, str] = {}
    content: bytes | None = None
    if body is not None:
        try:
            content = encode_body(body)
        except (TypeError, ValueError) as e:
            raise LocalError("failed to encode the body", e) from e
        headers["Content-Type"] = JSON_CONTENT_TYPE

    # Sorted so the encoded query string is stable
    params = sorted(query.items()) if query else None

    try:
        return httpx.Request(
            method,
            root_url + path,
            params=params,
            headers=headers,
            content=content,
        )
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise LocalError("failed to create request", e) from e


# --- Response decoding ---


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode_success[T](payload: bytes, target: type[T]) -> T:
    """Decode a success body into ``target``; raises ``ValidationError``."""
    return _adapter(target).validate_json(payload)


def decode_failure[E](
    payload: bytes, target: type[E]
) -> tuple[E | None, ValidationError | None]:
    """Decode a failure body into ``target`` without ever raising.

    Returns the decoded payload and the validation error that prevented a
    clean decode, if any. For model targets, a JSON object with some invalid
    fields keeps every field that validates on its own; required fields that
    are missing or invalid get the zero value of their type. Anything else
    falls back to the target's zero value.
    """
    try:
        return _adapter(target).validate_json(payload), None
    except ValidationError as e:
        error = e

    if isinstance(target, type) and issubclass(target, BaseModel):
        try:
            data = json.loads(payload)
        except ValueError:
            data = None
        if isinstance(data, dict):
            return _salvage(target, data), error

    return zero_value(target), error


@lru_cache(maxsize=1024)
def _field_adapter(model: type[BaseModel], name: str) -> TypeAdapter[Any]:
    info = model.model_fields[name]
    if info.metadata:
        return TypeAdapter(Annotated[info.annotation, *info.metadata])
    return TypeAdapter(info.annotation)


def _salvage[M: BaseModel](model: type[M], data: dict[str, Any]) -> M:
    """Build ``model`` from the fields of ``data`` that validate one by one.

    Model-level validators do not run.
    """
    values: dict[str, Any] = {}
    for name, info in model.model_fields.items():
        key = info.alias or name
        if key in data:
            try:
                values[name] = _field_adapter(model, name).validate_python(data[key])
                continue
            except ValidationError:
                pass
        if info.is_required():
            values[name] = zero_value(info.annotation)
    return model.model_construct(**values)


def zero_value[E](target: type[E]) -> E | None:
    """Default instance of ``target``, bypassing validation for models."""
    if isinstance(target, type) and issubclass(target, BaseModel):
        return target.model_construct()
    try:
        return target()
    except TypeError:
        return None


# --- Pipeline ---


class Pipeline:
    """Executes typed calls against a fixed root URL through a transport."""

    def __init__(
        self,
        transport: Transport,
        root_url: str,
        *,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self._transport = transport
        self._root_url = root_url.rstrip("/")
        self._telemetry: TelemetryContextProtocol = telemetry or TelemetryContext()

    @property
    def root_url(self) -> str:
        return self._root_url

    def execute[T, E](
        self,
        method: str,
        path: str,
        *,
        success_type: type[T],
        failure_type: type[E],
        query: Mapping[str, str] | None = None,
        body: Any = None,
        context: CallContext | None = None,
    ) -> T:
        """Issue one request and decode the outcome.

        Args:
            method: HTTP verb.
            path: Path appended to the root URL, starting with ``/``.
            success_type: Type a ``status <= 300`` body decodes into.
            failure_type: Type a ``status > 300`` body decodes into.
            query: Query parameters; order does not matter.
            body: JSON-serialisable request body; ``None`` sends no body.
            context: Deadline and cancellation for this call.

        Returns:
            The decoded success payload.

        Raises:
            LocalError: The request could not be built or a success body could
                not be decoded.
            TransportError: No response was obtained.
            ApplicationError: The server answered with ``status > 300``; its
                ``payload`` is an instance of ``failure_type``.
        """
        outcome = "unexpected"
        with self._telemetry(T_API_EXECUTE, method=method):
            try:
                request = build_request(self._root_url, method, path, query, body)
                context = context or BACKGROUND
                response = self._transport.send(request, context)
                try:
                    context.check()
                except CallCancelled as e:
                    response.close()
                    raise TransportError(str(request.url), e) from e
                result = self._classify(request, response, success_type, failure_type)
                outcome = "success"
                return result
            except LocalError:
                outcome = "local"
                raise
            except TransportError:
                outcome = "transport"
                raise
            except ApplicationError:
                outcome = "application"
                raise
            finally:
                self._telemetry.count(T_API_OUTCOME, outcome=outcome)

    def _classify[T, E](
        self,
        request: httpx.Request,
        response: httpx.Response,
        success_type: type[T],
        failure_type: type[E],
    ) -> T:
        try:
            try:
                payload = response.read()
            except httpx.HTTPError as e:
                raise TransportError(str(request.url), e) from e

            status = response.status_code
            logger.debug("%s %s -> %s", request.method, request.url.path, status)

            if status <= SUCCESS_STATUS_CEILING:
                try:
                    return decode_success(payload, success_type)
                except ValidationError as e:
                    raise LocalError("can't decode successful response", e) from e

            failure, decode_error = decode_failure(payload, failure_type)
            if decode_error is not None:
                logger.warning(
                    "Can't fully decode the %s failure response from %s %s: %s",
                    status,
                    request.method,
                    request.url.path,
                    decode_error.errors(include_url=False)[:1],
                )
            raise ApplicationError(status, failure)
        finally:
            response.close()
