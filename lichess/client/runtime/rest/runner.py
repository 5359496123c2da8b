"""REST request runner using declarative endpoint specs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from ...core.config import ClientConfig
from ...core.enums import AcceptHint, BaseSelector, DecodeKind, HTTPMethod
from ...options.base import Pair, pairs_from
from .dispatcher import DecodeMode, ResponseDispatcher
from .request import Body, FormBody, RequestBuilder

logger = logging.getLogger(__name__)

Params = dict[str, Any]


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: HTTPMethod
    build_path: Callable[[Params], str]
    base: BaseSelector = BaseSelector.PRIMARY
    build_query: Callable[[Params], Any] | None = None
    # Form pairs; ignored when build_body is set
    build_form: Callable[[Params], Any] | None = None
    build_body: Callable[[Params], Body | None] | None = None
    build_headers: Callable[[Params], Iterable[tuple[str, str]]] | None = None
    accept: AcceptHint | None = None
    decode: DecodeMode[Any] = field(default_factory=DecodeMode.single)


def _accept_for(spec: RestEndpointSpec) -> AcceptHint | None:
    if spec.accept is None and spec.decode.kind is DecodeKind.STREAM_NDJSON:
        return AcceptHint.NDJSON
    return spec.accept


class RestRunner:
    def __init__(self, builder: RequestBuilder, dispatcher: ResponseDispatcher) -> None:
        self._builder = builder
        self._dispatcher = dispatcher

    @property
    def config(self) -> ClientConfig:
        return self._builder.config

    def _body(self, spec: RestEndpointSpec, params: Params) -> Body | None:
        if spec.build_body is not None:
            return spec.build_body(params)
        if spec.build_form is not None:
            pairs: list[Pair] = pairs_from(spec.build_form(params))
            return FormBody.from_pairs(pairs)
        return None

    async def run(self, *, spec: RestEndpointSpec, params: Params | None = None) -> Any:
        params = params or {}
        query = pairs_from(spec.build_query(params)) if spec.build_query else []
        headers = list(spec.build_headers(params)) if spec.build_headers else []

        request = self._builder.build(
            spec.method,
            spec.base,
            spec.build_path(params),
            query=query,
            headers=headers,
            body=self._body(spec, params),
            accept=_accept_for(spec),
        )
        logger.debug("Running endpoint", extra={"endpoint": spec.id})
        return await self._dispatcher.dispatch(request, spec.decode)
