"""Lazy, cancellable handle over an NDJSON response."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar

import aiohttp

from ..codec import JsonDecoder
from .decoder import StreamRecord, iter_records

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NdJsonStream(Generic[T]):
    """Single-consumer async iterator of StreamRecord values.

    The stream owns the HTTP response. Bytes are pulled from the connection
    only when the consumer asks for the next record. Closing the stream
    (``aclose()``, leaving ``async with``, or dropping the last reference)
    closes the response so the pooled connection is not left with a
    half-read body.

    Example:
        >>> async with await client.board.stream_events() as events:
        ...     async for record in events:
        ...         event = record.unwrap()
    """

    def __init__(
        self,
        response: aiohttp.ClientResponse,
        decoder: JsonDecoder[T],
        *,
        source: AsyncIterator[bytes] | None = None,
    ) -> None:
        self._response = response
        self._decoder = decoder
        chunks = source if source is not None else response.content.iter_any()
        self._records = iter_records(chunks, decoder)
        self._closed = False
        self._exhausted = False
        self._count = 0
        logger.debug(
            "Stream opened",
            extra={"url": str(response.url), "target": repr(decoder)},
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def response(self) -> aiohttp.ClientResponse:
        return self._response

    def __aiter__(self) -> NdJsonStream[T]:
        return self

    async def __anext__(self) -> StreamRecord[T]:
        if self._closed:
            raise StopAsyncIteration
        try:
            record = await anext(self._records)
        except StopAsyncIteration:
            self._exhausted = True
            await self.aclose()
            raise
        self._count += 1
        return record

    async def values(self) -> AsyncIterator[T]:
        """Yield decoded values, raising the first error record."""
        async for record in self:
            yield record.unwrap()

    async def aclose(self) -> None:
        """Stop reading and release the connection. Idempotent."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._records.aclose()
        finally:
            if self._exhausted:
                # Body fully read; the connection can go back to the pool
                self._response.release()
            else:
                self._response.close()
            logger.debug(
                "Stream closed",
                extra={
                    "url": str(self._response.url),
                    "records": self._count,
                    "exhausted": self._exhausted,
                },
            )

    async def __aenter__(self) -> NdJsonStream[T]:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self._response.close()
