"""Puzzle endpoints."""

from __future__ import annotations

from ..core.enums import HTTPMethod
from ..runtime.codec import JSONObject
from ..runtime.rest import RestEndpointSpec, RestRunner

DAILY = RestEndpointSpec(
    id="puzzles.daily",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/puzzle/daily",
)

SHOW = RestEndpointSpec(
    id="puzzles.show",
    method=HTTPMethod.GET,
    build_path=lambda p: f"api/puzzle/{p['puzzle_id']}",
)


class PuzzlesAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def daily(self) -> JSONObject:
        return await self._runner.run(spec=DAILY)

    async def show(self, puzzle_id: str) -> JSONObject:
        return await self._runner.run(spec=SHOW, params={"puzzle_id": puzzle_id})
