"""Custom exception hierarchy.

Every failure the library reports is a LichessError carrying an ErrorKind.
Single-value calls raise it; streams hand it out inside a StreamRecord.
"""

from __future__ import annotations

from .enums import ErrorKind


class LichessError(Exception):
    """Base exception for all library errors.

    Equality is by ``kind`` and ``message`` so that errors produced by
    separate calls compare equal when they describe the same failure.
    """

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        remote_error_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.remote_error_text = remote_error_text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LichessError):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        parts = [f"kind={self.kind.value!r}", f"message={self.message!r}"]
        if self.status_code is not None:
            parts.append(f"status_code={self.status_code}")
        return f"{type(self).__name__}({', '.join(parts)})"


class TransportError(LichessError):
    """Network failure: DNS, TLS, refused or reset connection, timeout, I/O."""

    kind = ErrorKind.TRANSPORT


class RemoteAPIError(LichessError):
    """The platform answered with a non-2xx status."""

    kind = ErrorKind.REMOTE_API

    def __init__(
        self,
        message: str,
        status_code: int,
        remote_error_text: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, remote_error_text=remote_error_text)


class RateLimitError(RemoteAPIError):
    """Platform rate limit exceeded (HTTP 429).

    Only surfaced; the library never waits or retries on its own.
    """

    def __init__(
        self,
        message: str,
        remote_error_text: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, status_code=429, remote_error_text=remote_error_text)
        self.retry_after = retry_after


class DecodeError(LichessError):
    """A 2xx body or a stream line could not be decoded into the target type."""

    kind = ErrorKind.DECODE


class InvalidCredentialError(LichessError):
    """Credential or base URL rejected while building the configuration."""

    kind = ErrorKind.INVALID_CREDENTIAL


class InvalidOptionError(LichessError):
    """An option value cannot be represented on the wire."""

    kind = ErrorKind.INVALID_OPTION
