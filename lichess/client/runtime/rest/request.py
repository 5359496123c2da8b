"""Request descriptors and the builder that produces them.

Architecture:
    RequestBuilder turns an endpoint call (method, base selector, path,
    query pairs, body, accept hint) into an immutable RequestDescriptor. The
    descriptor is fully specified but not sent; ResponseDispatcher consumes
    it.

Build steps:
    1. Resolve the URL against the selected base
    2. Attach Authorization when a credential is configured
    3. Set Accept from the hint
    4. Append query pairs in insertion order
    5. Serialise the body and set Content-Type to match
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from ...core.config import ClientConfig
from ...core.enums import AcceptHint, BaseSelector, HTTPMethod
from ...options.base import Pair, coerce_enum, encode_pairs

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_SENSITIVE_HEADERS = frozenset({"authorization"})


@dataclass(frozen=True)
class FormBody:
    """Form-encoded body; always sent with the form Content-Type."""

    content: bytes

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> FormBody:
        return cls(encode_pairs(pairs))

    @property
    def content_type(self) -> str:
        return FORM_CONTENT_TYPE


@dataclass(frozen=True)
class RawBody:
    """Opaque body (PGN, plain text) with an optional Content-Type."""

    content: bytes
    content_type: str | None = None


Body = FormBody | RawBody


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully specified HTTP request that has not been sent yet."""

    method: HTTPMethod
    url: URL
    headers: CIMultiDictProxy[str]
    body: Body | None = None
    accept_hint: AcceptHint | None = None

    def __repr__(self) -> str:
        headers = {
            name: ("<redacted>" if name.lower() in _SENSITIVE_HEADERS else value)
            for name, value in self.headers.items()
        }
        body = None if self.body is None else f"{type(self.body).__name__}({len(self.body.content)} bytes)"
        return (
            f"RequestDescriptor(method={self.method.value}, url={str(self.url)!r}, "
            f"headers={headers!r}, body={body}, accept_hint={self.accept_hint})"
        )


class RequestBuilder:
    """Builds authenticated RequestDescriptors from a ClientConfig."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def build(
        self,
        method: HTTPMethod | str,
        base: BaseSelector,
        path: str,
        *,
        query: Iterable[Pair] = (),
        headers: Iterable[tuple[str, str]] = (),
        body: Body | None = None,
        accept: AcceptHint | None = None,
    ) -> RequestDescriptor:
        """Compose a request descriptor.

        Args:
            method: GET, POST or DELETE
            base: Base URL the path is resolved against
            path: Path relative to the base
            query: Query pairs, appended in order (repeated keys allowed)
            headers: Extra headers; they override builder-set headers of the same name
            body: Form or raw body
            accept: Expected representation

        Returns:
            Immutable RequestDescriptor
        """
        method = coerce_enum(HTTPMethod, method, "method")
        url = self._config.resolve_url(base, path)

        query_pairs = list(query)
        if query_pairs:
            url = url.with_query(query_pairs)

        merged: CIMultiDict[str] = CIMultiDict()
        merged["User-Agent"] = self._config.user_agent
        auth = self._config.auth_header()
        if auth is not None:
            merged[auth[0]] = auth[1]
        if accept is not None:
            merged["Accept"] = accept.media_type
        if body is not None and body.content_type is not None:
            merged["Content-Type"] = body.content_type
        for name, value in headers:
            merged[name] = value

        if isinstance(body, FormBody):
            # A caller header must not break the form invariant
            merged["Content-Type"] = FORM_CONTENT_TYPE

        logger.debug(
            "Built request",
            extra={
                "method": method.value,
                "url": str(url),
                "accept": accept.value if accept else None,
                "has_body": body is not None,
                "authenticated": auth is not None,
            },
        )
        return RequestDescriptor(
            method=method,
            url=url,
            headers=CIMultiDictProxy(merged),
            body=body,
            accept_hint=accept,
        )
