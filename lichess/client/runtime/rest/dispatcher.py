"""Response dispatcher: send a request, check the status, pick a decoder.

Architecture:
    ResponseDispatcher executes exactly one RequestDescriptor per call and
    interprets the response according to a DecodeMode:

    - single: read the whole body and decode one JSON document
    - stream: hand the unread body to an NdJsonStream
    - text: return the body as a string
    - empty: discard the body

    Any non-2xx status is turned into a RemoteAPIError. The platform's error
    envelope ``{"error": "<message>"}`` is parsed when present; otherwise the
    raw body is kept as ``remote_error_text``.

Suspension points:
    sending the request, receiving headers, reading the body (or the bounded
    error body). No lock is held across any of them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from ...core.enums import DecodeKind
from ...core.exceptions import RateLimitError, RemoteAPIError
from ..codec import JSONObject, JsonDecoder
from ..stream.stream import NdJsonStream
from ..transport import TRANSPORT_ERRORS, transport_error
from .http_client import HTTPClient
from .request import RequestDescriptor

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ERROR_BODY_BYTES = 64 * 1024
_ERROR_READ_CHUNK = 4096


@dataclass(frozen=True)
class DecodeMode(Generic[T]):
    """How a 2xx body is interpreted, with the target type when typed."""

    kind: DecodeKind
    target: Any = field(default=None)

    @classmethod
    def single(cls, target: type[T] | Any = JSONObject) -> DecodeMode[T]:
        return cls(DecodeKind.SINGLE_JSON, target)

    @classmethod
    def stream(cls, target: type[T] | Any = JSONObject) -> DecodeMode[T]:
        return cls(DecodeKind.STREAM_NDJSON, target)

    @classmethod
    def text(cls) -> DecodeMode[str]:
        return cls(DecodeKind.RAW_TEXT)

    @classmethod
    def empty(cls) -> DecodeMode[None]:
        return cls(DecodeKind.EMPTY)


class ErrorEnvelope(BaseModel):
    """Error body returned by the platform on rejected calls."""

    error: str


def _retry_after(response: aiohttp.ClientResponse) -> float | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def remote_error(
    status: int,
    body: str,
    *,
    retry_after: float | None = None,
) -> RemoteAPIError:
    """Build the RemoteAPIError for a non-2xx status and its body text."""
    try:
        message = ErrorEnvelope.model_validate_json(body).error
        remote_text = message
    except ValidationError:
        message = f"Request failed with HTTP status {status}"
        remote_text = body
    if status == 429:
        return RateLimitError(message, remote_error_text=remote_text, retry_after=retry_after)
    return RemoteAPIError(message, status_code=status, remote_error_text=remote_text)


class ResponseDispatcher:
    """Executes request descriptors and decodes their responses."""

    def __init__(
        self,
        http: HTTPClient,
        *,
        max_error_body_bytes: int = DEFAULT_MAX_ERROR_BODY_BYTES,
    ) -> None:
        self._http = http
        self._max_error_body_bytes = max_error_body_bytes

    async def dispatch(self, request: RequestDescriptor, mode: DecodeMode[T]) -> Any:
        """Send ``request`` and decode the response per ``mode``.

        Returns:
            The decoded value, an NdJsonStream, a string, or None

        Raises:
            TransportError: Network failure while sending or reading
            RemoteAPIError: Non-2xx status
            DecodeError: 2xx body that does not decode into the target
        """
        decoder = (
            JsonDecoder(mode.target)
            if mode.kind in (DecodeKind.SINGLE_JSON, DecodeKind.STREAM_NDJSON)
            else None
        )
        response = await self._http.send(request)

        if not 200 <= response.status < 300:
            raise await self._read_error(request, response)

        if mode.kind is DecodeKind.STREAM_NDJSON:
            # Ownership of the response moves to the stream
            return NdJsonStream(response, decoder)

        try:
            if mode.kind is DecodeKind.EMPTY:
                return None
            body = await self._read_body(request, response)
            if mode.kind is DecodeKind.RAW_TEXT:
                return body.decode(response.charset or "utf-8", errors="replace")
            return decoder.decode(body)
        finally:
            # Closing drops a partially read body instead of draining it
            response.close()

    async def _read_body(
        self, request: RequestDescriptor, response: aiohttp.ClientResponse
    ) -> bytes:
        try:
            return await response.read()
        except TRANSPORT_ERRORS as exc:
            raise transport_error(exc, request) from exc

    async def _read_error(
        self, request: RequestDescriptor, response: aiohttp.ClientResponse
    ) -> RemoteAPIError:
        try:
            raw = bytearray()
            try:
                async for chunk in response.content.iter_chunked(_ERROR_READ_CHUNK):
                    raw.extend(chunk)
                    if len(raw) >= self._max_error_body_bytes:
                        break
            except TRANSPORT_ERRORS as exc:
                raise transport_error(exc, request) from exc
        finally:
            response.close()

        body = bytes(raw[: self._max_error_body_bytes]).decode(
            response.charset or "utf-8", errors="replace"
        )
        error = remote_error(response.status, body, retry_after=_retry_after(response))
        logger.warning(
            "Remote API rejected request",
            extra={
                "method": request.method.value,
                "url": str(request.url),
                "status": response.status,
            },
        )
        return error
