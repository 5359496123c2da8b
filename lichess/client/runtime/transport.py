"""Classification of low-level network failures."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import aiohttp

from ..core.exceptions import TransportError

if TYPE_CHECKING:
    from .rest.request import RequestDescriptor

# Failures raised by aiohttp while connecting, sending or reading a body
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
)


def transport_error(exc: BaseException, request: RequestDescriptor | None = None) -> TransportError:
    """Wrap a low-level failure, keeping it as the cause."""
    target = f" {request.method.value} {request.url}" if request is not None else ""
    detail = str(exc) or type(exc).__name__
    error = TransportError(f"Transport failure{target}: {detail}")
    error.__cause__ = exc
    return error
