"""Endgame tablebase lookups, served from the tablebase base URL."""

from __future__ import annotations

from ..core.enums import BaseSelector, HTTPMethod
from ..runtime.codec import JSONObject
from ..runtime.rest import RestEndpointSpec, RestRunner


def _lookup_spec(variant: str) -> RestEndpointSpec:
    return RestEndpointSpec(
        id=f"tablebase.{variant}",
        method=HTTPMethod.GET,
        base=BaseSelector.TABLEBASE,
        build_path=lambda _: variant,
        # The tablebase accepts underscores in place of spaces
        build_query=lambda p: [("fen", p["fen"].replace(" ", "_"))],
    )


STANDARD = _lookup_spec("standard")
ATOMIC = _lookup_spec("atomic")
ANTICHESS = _lookup_spec("antichess")


class TablebaseAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def standard(self, fen: str) -> JSONObject:
        """Lookup a standard chess position with up to seven pieces."""
        return await self._runner.run(spec=STANDARD, params={"fen": fen})

    async def atomic(self, fen: str) -> JSONObject:
        return await self._runner.run(spec=ATOMIC, params={"fen": fen})

    async def antichess(self, fen: str) -> JSONObject:
        return await self._runner.run(spec=ANTICHESS, params={"fen": fen})
