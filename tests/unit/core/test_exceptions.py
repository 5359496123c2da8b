"""Unit tests for the error hierarchy."""

from lichess.client.core import (
    DecodeError,
    ErrorKind,
    InvalidCredentialError,
    InvalidOptionError,
    LichessError,
    RateLimitError,
    RemoteAPIError,
    TransportError,
)


def test_every_error_carries_its_kind():
    """Each subclass maps onto one ErrorKind."""
    assert TransportError("x").kind is ErrorKind.TRANSPORT
    assert RemoteAPIError("x", status_code=500).kind is ErrorKind.REMOTE_API
    assert DecodeError("x").kind is ErrorKind.DECODE
    assert InvalidCredentialError("x").kind is ErrorKind.INVALID_CREDENTIAL
    assert InvalidOptionError("x").kind is ErrorKind.INVALID_OPTION


def test_errors_compare_by_kind_and_message():
    assert DecodeError("bad line") == DecodeError("bad line")
    assert DecodeError("bad line") != TransportError("bad line")
    assert RemoteAPIError("bad", status_code=400) == RemoteAPIError("bad", status_code=401)
    assert len({DecodeError("a"), DecodeError("a"), DecodeError("b")}) == 2


def test_remote_api_error_fields():
    error = RemoteAPIError("No such game", status_code=404, remote_error_text="No such game")
    assert str(error) == "No such game"
    assert error.status_code == 404
    assert error.remote_error_text == "No such game"
    assert isinstance(error, LichessError)


def test_rate_limit_error_with_retry_after():
    """RateLimitError is a 429 RemoteAPIError with retry_after."""
    error = RateLimitError("Too many requests", retry_after=60)
    assert error.status_code == 429
    assert error.retry_after == 60
    assert isinstance(error, RemoteAPIError)
    assert error.kind is ErrorKind.REMOTE_API


def test_repr_includes_status_code():
    assert repr(RemoteAPIError("bad", status_code=400)) == (
        "RemoteAPIError(kind='remote_api', message='bad', status_code=400)"
    )
    assert repr(TransportError("reset")) == "TransportError(kind='transport', message='reset')"
