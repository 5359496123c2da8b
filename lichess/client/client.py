"""High-level client facade.

Architecture:
    LichessClient owns one HTTPClient (and so one pooled aiohttp session)
    built from a ClientConfig. Every call goes through the same pipeline:

        RequestHandle / RestRunner -> RequestBuilder -> ResponseDispatcher

    ``request()`` exposes the pipeline directly through a chainable
    RequestHandle. Endpoint families (``client.account``, ``client.board``,
    ...) describe their calls declaratively as RestEndpointSpec values and
    run them through the shared RestRunner.

Design Decisions:
    - One session per client: connections are pooled across calls and tasks
    - The config is immutable, so calls from many tasks share it safely
    - Each call owns its own request, response and stream buffer
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from .core.config import ClientConfig
from .core.enums import AcceptHint, BaseSelector, HTTPMethod
from .endpoints import (
    AccountAPI,
    AnalysisAPI,
    BoardAPI,
    BotAPI,
    ChallengesAPI,
    FideAPI,
    GamesAPI,
    MessagingAPI,
    OpeningsAPI,
    PairingsAPI,
    PuzzlesAPI,
    RelationsAPI,
    SimulsAPI,
    TablebaseAPI,
    TvAPI,
    UsersAPI,
)
from .options.base import OptionSet, Pair, coerce_enum, pairs_from
from .runtime.codec import JSONObject
from .runtime.rest import (
    Body,
    DecodeMode,
    FormBody,
    HTTPClient,
    RawBody,
    RequestBuilder,
    RequestDescriptor,
    ResponseDispatcher,
    RestEndpointSpec,
    RestRunner,
)
from .runtime.stream import NdJsonStream

logger = logging.getLogger(__name__)

T = TypeVar("T")

QuerySource = OptionSet | Sequence[Pair] | Mapping[str, Any] | None


class RequestHandle:
    """Chainable description of one call, finished by a decode terminal.

    Example:
        >>> game = await (
        ...     client.request("GET", BaseSelector.PRIMARY, "game/export/q7ZvsdUF")
        ...     .query(GameOptions.new().with_clocks(True))
        ...     .accept(AcceptHint.JSON)
        ...     .decode_single()
        ... )
    """

    def __init__(
        self,
        builder: RequestBuilder,
        dispatcher: ResponseDispatcher,
        method: HTTPMethod | str,
        base: BaseSelector,
        path: str,
    ) -> None:
        self._builder = builder
        self._dispatcher = dispatcher
        self._method = coerce_enum(HTTPMethod, method, "method")
        self._base = base
        self._path = path
        self._query: list[Pair] = []
        self._headers: list[tuple[str, str]] = []
        self._body: Body | None = None
        self._accept: AcceptHint | None = None

    def query(self, pairs: QuerySource) -> RequestHandle:
        """Append query pairs; repeated calls keep insertion order."""
        self._query.extend(pairs_from(_as_source(pairs)))
        return self

    def header(self, name: str, value: str) -> RequestHandle:
        self._headers.append((name, value))
        return self

    def accept(self, hint: AcceptHint) -> RequestHandle:
        self._accept = coerce_enum(AcceptHint, hint, "accept")
        return self

    def body_form(self, source: QuerySource | bytes) -> RequestHandle:
        """Form-encoded body from pairs, a mapping, an option set or encoded bytes."""
        if isinstance(source, (bytes, bytearray)):
            self._body = FormBody(bytes(source))
        else:
            self._body = FormBody.from_pairs(pairs_from(_as_source(source)))
        return self

    def body_raw(self, content: bytes | str, content_type: str | None = None) -> RequestHandle:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._body = RawBody(content, content_type)
        return self

    def descriptor(self, accept: AcceptHint | None = None) -> RequestDescriptor:
        """Build the request without sending it."""
        return self._builder.build(
            self._method,
            self._base,
            self._path,
            query=self._query,
            headers=self._headers,
            body=self._body,
            accept=self._accept or accept,
        )

    async def decode_single(self, target: type[T] | Any = JSONObject) -> T:
        """Send and decode one JSON document into ``target``.

        Raises:
            TransportError: Network failure
            RemoteAPIError: Non-2xx status
            DecodeError: Body does not decode into ``target``
        """
        return await self._dispatcher.dispatch(self.descriptor(), DecodeMode.single(target))

    async def decode_stream(self, target: type[T] | Any = JSONObject) -> NdJsonStream[T]:
        """Send and return a lazy stream of records decoded into ``target``."""
        return await self._dispatcher.dispatch(
            self.descriptor(AcceptHint.NDJSON), DecodeMode.stream(target)
        )

    async def decode_text(self) -> str:
        return await self._dispatcher.dispatch(self.descriptor(), DecodeMode.text())

    async def execute(self) -> None:
        """Send and discard the body of a successful response."""
        await self._dispatcher.dispatch(self.descriptor(), DecodeMode.empty())


def _as_source(source: QuerySource) -> Any:
    if isinstance(source, Mapping) and not isinstance(source, dict):
        return dict(source)
    return source


class LichessClient:
    """Async client for the platform's HTTP API.

    Example:
        >>> config = ClientConfig.build(credential="lip_...")
        >>> async with LichessClient(config) as client:
        ...     me = await client.account.me()
        ...     async with await client.board.stream_events() as events:
        ...         async for record in events:
        ...             print(record.unwrap())
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http: HTTPClient | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._http = http or HTTPClient(
            timeout=self._config.timeout,
            read_timeout=self._config.read_timeout,
        )
        self._builder = RequestBuilder(self._config)
        self._dispatcher = ResponseDispatcher(
            self._http, max_error_body_bytes=self._config.max_error_body_bytes
        )
        self._runner = RestRunner(self._builder, self._dispatcher)

        self.account = AccountAPI(self._runner)
        self.games = GamesAPI(self._runner)
        self.challenges = ChallengesAPI(self._runner)
        self.board = BoardAPI(self._runner)
        self.bot = BotAPI(self._runner)
        self.openings = OpeningsAPI(self._runner)
        self.tablebase = TablebaseAPI(self._runner)
        self.users = UsersAPI(self._runner)
        self.tv = TvAPI(self._runner)
        self.puzzles = PuzzlesAPI(self._runner)
        self.messaging = MessagingAPI(self._runner)
        self.pairings = PairingsAPI(self._runner)
        self.analysis = AnalysisAPI(self._runner)
        self.fide = FideAPI(self._runner)
        self.relations = RelationsAPI(self._runner)
        self.simuls = SimulsAPI(self._runner)

        logger.debug(
            "Client created",
            extra={
                "primary_base_url": str(self._config.primary_base_url),
                "authenticated": self._config.authenticated,
            },
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http(self) -> HTTPClient:
        return self._http

    def request(
        self,
        method: HTTPMethod | str,
        base: BaseSelector,
        path: str,
    ) -> RequestHandle:
        """Start a call against ``path`` on the selected base URL."""
        return RequestHandle(self._builder, self._dispatcher, method, base, path)

    async def run(self, spec: RestEndpointSpec, params: dict[str, Any] | None = None) -> Any:
        """Run a declarative endpoint spec."""
        return await self._runner.run(spec=spec, params=params)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._http.close()

    async def __aenter__(self) -> LichessClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
