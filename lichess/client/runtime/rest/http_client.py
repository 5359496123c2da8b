"""HTTP client helper."""

from __future__ import annotations

import logging

import aiohttp

from ...core.enums import AcceptHint
from ..transport import TRANSPORT_ERRORS, transport_error
from .request import RequestDescriptor

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper owning a pooled aiohttp session.

    Single-value requests use ``timeout`` as the total budget. NDJSON
    streams are long-lived, so for them ``timeout`` only bounds connecting
    and ``read_timeout`` bounds the wait between two chunks.
    """

    def __init__(
        self,
        timeout: float | None = 30.0,
        read_timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout, sock_read=read_timeout)
        self.stream_timeout = aiohttp.ClientTimeout(
            total=None, sock_connect=timeout, sock_read=read_timeout
        )
        self._session = session

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def send(self, request: RequestDescriptor) -> aiohttp.ClientResponse:
        """Send a request and return once the response headers arrived.

        The caller owns the returned response and must release or close it.

        Raises:
            TransportError: On connection, TLS, DNS, timeout or I/O failure
        """
        data = request.body.content if request.body is not None else None
        streaming = request.accept_hint is AcceptHint.NDJSON
        logger.debug(
            "Sending request",
            extra={
                "method": request.method.value,
                "url": str(request.url),
                "streaming": streaming,
            },
        )
        try:
            response = await self.session.request(
                request.method.value,
                request.url,
                headers=request.headers,
                data=data,
                allow_redirects=True,
                timeout=self.stream_timeout if streaming else self.timeout,
            )
        except TRANSPORT_ERRORS as exc:
            logger.warning(
                "Request failed before a response arrived",
                extra={"method": request.method.value, "url": str(request.url)},
            )
            raise transport_error(exc, request) from exc

        logger.debug(
            "Response received",
            extra={"url": str(request.url), "status": response.status},
        )
        return response

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
