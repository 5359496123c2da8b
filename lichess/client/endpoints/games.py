"""Game export endpoints."""

from __future__ import annotations

from typing import Any

from ..core.enums import AcceptHint, HTTPMethod
from ..options import GameOptions, pairs_from
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner
from ..runtime.stream import NdJsonStream

PGN_MEDIA_TYPE = "application/x-chess-pgn"


def _export_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    return pairs_from(params.get("options"))


EXPORT_JSON = RestEndpointSpec(
    id="games.export_json",
    method=HTTPMethod.GET,
    build_path=lambda p: f"game/export/{p['game_id']}",
    build_query=_export_query,
    accept=AcceptHint.JSON,
)

EXPORT_PGN = RestEndpointSpec(
    id="games.export_pgn",
    method=HTTPMethod.GET,
    build_path=lambda p: f"game/export/{p['game_id']}",
    build_query=_export_query,
    build_headers=lambda _: [("Accept", PGN_MEDIA_TYPE)],
    decode=DecodeMode.text(),
)

ONGOING = RestEndpointSpec(
    id="games.ongoing",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/account/playing",
    build_query=lambda p: [("nb", p["nb"])],
)


def _user_games_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    pairs = pairs_from(params.get("options"))
    if params.get("max") is not None:
        pairs.append(("max", str(params["max"])))
    return pairs


STREAM_USER_GAMES = RestEndpointSpec(
    id="games.stream_user_games",
    method=HTTPMethod.GET,
    build_path=lambda p: f"api/games/user/{p['username']}",
    build_query=_user_games_query,
    decode=DecodeMode.stream(),
)


class GamesAPI:
    """Exporting finished and ongoing games."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def export_json(self, game_id: str, options: GameOptions | None = None) -> JSONObject:
        """One game as JSON."""
        return await self._runner.run(
            spec=EXPORT_JSON, params={"game_id": game_id, "options": options}
        )

    async def export_pgn(self, game_id: str, options: GameOptions | None = None) -> str:
        """One game as PGN text."""
        return await self._runner.run(
            spec=EXPORT_PGN, params={"game_id": game_id, "options": options}
        )

    async def ongoing(self, nb: int = 9) -> JSONObject:
        """Ongoing games of the authenticated user, most urgent first."""
        return await self._runner.run(spec=ONGOING, params={"nb": max(1, min(nb, 50))})

    async def stream_user_games(
        self,
        username: str,
        options: GameOptions | None = None,
        *,
        limit: int | None = None,
    ) -> NdJsonStream[JSONObject]:
        """Games of a user, newest first, one record per game.

        Args:
            username: Player whose games are exported
            options: Export flags
            limit: Maximum number of games, all games when None
        """
        return await self._runner.run(
            spec=STREAM_USER_GAMES,
            params={"username": username, "options": options, "max": limit},
        )
