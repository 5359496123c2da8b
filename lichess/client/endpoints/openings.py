"""Opening explorer endpoints, served from the openings base URL."""

from __future__ import annotations

from ..core.enums import BaseSelector, Color, HTTPMethod
from ..options import (
    LichessOpeningOptions,
    MastersOpeningOptions,
    PlayerOpeningOptions,
    coerce_enum,
    pairs_from,
)
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner
from ..runtime.stream import NdJsonStream

MASTERS = RestEndpointSpec(
    id="openings.masters",
    method=HTTPMethod.GET,
    base=BaseSelector.OPENINGS,
    build_path=lambda _: "masters",
    build_query=lambda p: pairs_from(p.get("options")),
)

LICHESS = RestEndpointSpec(
    id="openings.lichess",
    method=HTTPMethod.GET,
    base=BaseSelector.OPENINGS,
    build_path=lambda _: "lichess",
    build_query=lambda p: pairs_from(p.get("options")),
)

PLAYER = RestEndpointSpec(
    id="openings.player",
    method=HTTPMethod.GET,
    base=BaseSelector.OPENINGS,
    build_path=lambda _: "player",
    build_query=lambda p: [
        ("player", p["player"]),
        ("color", p["color"]),
        *pairs_from(p.get("options")),
    ],
    decode=DecodeMode.stream(),
)


class OpeningsAPI:
    """Opening explorer over the masters, platform and per-player databases."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def masters(self, options: MastersOpeningOptions | None = None) -> JSONObject:
        return await self._runner.run(spec=MASTERS, params={"options": options})

    async def lichess(self, options: LichessOpeningOptions | None = None) -> JSONObject:
        return await self._runner.run(spec=LICHESS, params={"options": options})

    async def player(
        self,
        player: str,
        color: Color | str,
        options: PlayerOpeningOptions | None = None,
    ) -> NdJsonStream[JSONObject]:
        """Explore one player's games.

        The explorer indexes the player on demand; each record is a more
        complete snapshot than the previous one.
        """
        return await self._runner.run(
            spec=PLAYER,
            params={
                "player": player,
                "color": coerce_enum(Color, color, "color"),
                "options": options,
            },
        )
