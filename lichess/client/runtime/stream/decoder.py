"""Newline-delimited JSON framing and record decoding.

Architecture:
    The platform streams one JSON document per line, terminated by a single
    ``\\n`` byte, and pads idle periods with blank keep-alive lines. This
    module turns an async iterator of arbitrary byte chunks into an async
    iterator of StreamRecord values:

    - LineFramer buffers bytes and hands out complete, non-blank lines
    - iter_records pulls one chunk at a time and decodes every line

State machine:
    reading  | chunk arrives           -> buffer, split on 0x0A   -> reading
    reading  | blank/whitespace line   -> drop                    -> reading
    reading  | non-blank line          -> yield Ok or Err(Decode) -> reading
    reading  | source ends, residual   -> yield residual record   -> terminated
    any      | transport failure       -> yield Err(Transport)    -> terminated
    any      | consumer closes         -> stop pulling            -> terminated

Design Decisions:
    - Errors are records, not exceptions: a bad frame does not end the stream
    - Lazy: nothing is pulled from the source until the consumer asks
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from ...core.exceptions import LichessError
from ..codec import JsonDecoder
from ..transport import TRANSPORT_ERRORS, transport_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

NEWLINE = b"\n"


@dataclass(frozen=True)
class StreamRecord(Generic[T]):
    """One element of a stream: a decoded value or an error."""

    value: T | None = None
    error: LichessError | None = None

    @classmethod
    def success(cls, value: T) -> StreamRecord[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: LichessError) -> StreamRecord[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


class LineFramer:
    """Splits a byte stream into lines, keeping partial frames buffered."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet terminated by a newline."""
        return len(self._buffer)

    def feed(self, chunk: bytes) -> list[bytes]:
        """Add a chunk and return the non-blank lines it completed."""
        self._buffer.extend(chunk)
        if NEWLINE not in chunk:
            return []
        *complete, rest = self._buffer.split(NEWLINE)
        self._buffer = bytearray(rest)
        return [line for line in map(_clean, complete) if line]

    def flush(self) -> bytes | None:
        """Return the non-blank residual once the source has ended."""
        line = _clean(self._buffer)
        self._buffer = bytearray()
        return line or None


def _clean(line: bytes | bytearray) -> bytes:
    # Carriage returns are tolerated; whitespace-only lines are keep-alives
    line = bytes(line).rstrip(b"\r")
    return line if line.strip() else b""


def _decode(decoder: JsonDecoder[T], line: bytes) -> StreamRecord[T]:
    try:
        return StreamRecord.success(decoder.decode(line))
    except LichessError as exc:
        return StreamRecord.failure(exc)


async def iter_records(
    chunks: AsyncIterator[bytes],
    decoder: JsonDecoder[T],
) -> AsyncIterator[StreamRecord[T]]:
    """Decode an async iterator of byte chunks into stream records.

    Args:
        chunks: Source of raw body chunks split at arbitrary boundaries
        decoder: Decoder for the target record type

    Yields:
        StreamRecord per non-blank line, in wire order. A transport failure
        yields one final error record and ends the iteration.
    """
    framer = LineFramer()
    produced = 0
    while True:
        try:
            chunk = await anext(chunks)
        except StopAsyncIteration:
            break
        except TRANSPORT_ERRORS as exc:
            logger.warning(
                "Stream interrupted by transport failure",
                extra={"records": produced, "pending_bytes": framer.pending},
            )
            yield StreamRecord.failure(transport_error(exc))
            return

        for line in framer.feed(chunk):
            produced += 1
            yield _decode(decoder, line)

    residual = framer.flush()
    if residual is not None:
        produced += 1
        yield _decode(decoder, residual)
    logger.debug("Stream source exhausted", extra={"records": produced})
