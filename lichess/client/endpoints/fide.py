"""FIDE player lookups."""

from __future__ import annotations

from ..core.enums import HTTPMethod
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner

PLAYER = RestEndpointSpec(
    id="fide.player",
    method=HTTPMethod.GET,
    build_path=lambda p: f"api/fide/player/{p['player_id']}",
)

SEARCH = RestEndpointSpec(
    id="fide.search",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/fide/player",
    build_query=lambda p: [("q", p["query"])],
    decode=DecodeMode.single(list[JSONObject]),
)


class FideAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def player(self, player_id: int) -> JSONObject:
        return await self._runner.run(spec=PLAYER, params={"player_id": player_id})

    async def search(self, query: str) -> list[JSONObject]:
        """Search FIDE players by name."""
        return await self._runner.run(spec=SEARCH, params={"query": query})
