"""Board and bot endpoints: play games, chat and seek opponents.

Architecture:
    The board API (for humans using third-party boards) and the bot API
    (for engine accounts) share most of their surface under different path
    prefixes. ``_GamePlayAPI`` holds the shared operations and the two
    subclasses add what is specific to each account type.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import ChatRoom, HTTPMethod
from ..models import OkResponse
from ..options import SeekOptions, canonical, coerce_enum, pairs_from
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner
from ..runtime.stream import NdJsonStream

Params = dict[str, Any]

STREAM_EVENTS = RestEndpointSpec(
    id="stream.events",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/stream/event",
    decode=DecodeMode.stream(),
)


def _game_specs(prefix: str) -> dict[str, RestEndpointSpec]:
    def game_path(action: str):
        return lambda p: f"api/{prefix}/game/{p['game_id']}/{action}"

    return {
        "stream_game": RestEndpointSpec(
            id=f"{prefix}.stream_game",
            method=HTTPMethod.GET,
            build_path=lambda p: f"api/{prefix}/game/stream/{p['game_id']}",
            decode=DecodeMode.stream(),
        ),
        "make_move": RestEndpointSpec(
            id=f"{prefix}.make_move",
            method=HTTPMethod.POST,
            build_path=lambda p: f"api/{prefix}/game/{p['game_id']}/move/{p['move']}",
            build_query=lambda p: [("offeringDraw", p.get("offering_draw"))],
            decode=DecodeMode.single(OkResponse),
        ),
        "chat": RestEndpointSpec(
            id=f"{prefix}.chat",
            method=HTTPMethod.POST,
            build_path=game_path("chat"),
            build_form=lambda p: [("room", p["room"]), ("text", p["text"])],
            decode=DecodeMode.single(OkResponse),
        ),
        "chat_read": RestEndpointSpec(
            id=f"{prefix}.chat_read",
            method=HTTPMethod.GET,
            build_path=game_path("chat"),
            decode=DecodeMode.single(list[JSONObject]),
        ),
        "draw": RestEndpointSpec(
            id=f"{prefix}.draw",
            method=HTTPMethod.POST,
            build_path=lambda p: f"api/{prefix}/game/{p['game_id']}/draw/{canonical(p['accept'])}",
            decode=DecodeMode.single(OkResponse),
        ),
        "takeback": RestEndpointSpec(
            id=f"{prefix}.takeback",
            method=HTTPMethod.POST,
            build_path=lambda p: (
                f"api/{prefix}/game/{p['game_id']}/takeback/{canonical(p['accept'])}"
            ),
            decode=DecodeMode.single(OkResponse),
        ),
        "abort": RestEndpointSpec(
            id=f"{prefix}.abort",
            method=HTTPMethod.POST,
            build_path=game_path("abort"),
            decode=DecodeMode.single(OkResponse),
        ),
        "resign": RestEndpointSpec(
            id=f"{prefix}.resign",
            method=HTTPMethod.POST,
            build_path=game_path("resign"),
            decode=DecodeMode.single(OkResponse),
        ),
    }


BOARD_SPECS = _game_specs("board")
BOT_SPECS = _game_specs("bot")

CLAIM_VICTORY = RestEndpointSpec(
    id="board.claim_victory",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/board/game/{p['game_id']}/claim-victory",
    decode=DecodeMode.single(OkResponse),
)

BERSERK = RestEndpointSpec(
    id="board.berserk",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/board/game/{p['game_id']}/berserk",
    decode=DecodeMode.single(OkResponse),
)

SEEK = RestEndpointSpec(
    id="board.seek",
    method=HTTPMethod.POST,
    build_path=lambda _: "api/board/seek",
    build_form=lambda p: pairs_from(p.get("options")),
    decode=DecodeMode.stream(),
)

BOTS_ONLINE = RestEndpointSpec(
    id="bot.online",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/bot/online",
    build_query=lambda p: [("nb", p.get("nb"))],
    decode=DecodeMode.stream(),
)

UPGRADE_ACCOUNT = RestEndpointSpec(
    id="bot.upgrade_account",
    method=HTTPMethod.POST,
    build_path=lambda _: "api/bot/account/upgrade",
    build_headers=lambda p: [p["authorization"]],
    decode=DecodeMode.single(OkResponse),
)


class _GamePlayAPI:
    def __init__(self, runner: RestRunner, specs: dict[str, RestEndpointSpec]) -> None:
        self._runner = runner
        self._specs = specs

    async def stream_events(self) -> NdJsonStream[JSONObject]:
        """Incoming events (game starts, challenges) of the authenticated user."""
        return await self._runner.run(spec=STREAM_EVENTS)

    async def stream_game(self, game_id: str) -> NdJsonStream[JSONObject]:
        """Full game state first, then one record per state change."""
        return await self._runner.run(spec=self._specs["stream_game"], params={"game_id": game_id})

    async def make_move(
        self, game_id: str, move: str, *, offering_draw: bool | None = None
    ) -> OkResponse:
        """Play a move in UCI notation, optionally offering or accepting a draw."""
        return await self._runner.run(
            spec=self._specs["make_move"],
            params={"game_id": game_id, "move": move, "offering_draw": offering_draw},
        )

    async def chat(self, game_id: str, room: ChatRoom | str, text: str) -> OkResponse:
        return await self._runner.run(
            spec=self._specs["chat"],
            params={
                "game_id": game_id,
                "room": coerce_enum(ChatRoom, room, "room"),
                "text": text,
            },
        )

    async def chat_read(self, game_id: str) -> list[JSONObject]:
        """Messages posted in the game's player chat, oldest first."""
        return await self._runner.run(spec=self._specs["chat_read"], params={"game_id": game_id})

    async def handle_draw(self, game_id: str, accept: bool) -> OkResponse:
        """Offer or accept a draw with ``True``, decline an offer with ``False``."""
        return await self._runner.run(
            spec=self._specs["draw"], params={"game_id": game_id, "accept": accept}
        )

    async def handle_takeback(self, game_id: str, accept: bool) -> OkResponse:
        """Propose or accept a takeback with ``True``, decline with ``False``."""
        return await self._runner.run(
            spec=self._specs["takeback"], params={"game_id": game_id, "accept": accept}
        )

    async def abort(self, game_id: str) -> OkResponse:
        return await self._runner.run(spec=self._specs["abort"], params={"game_id": game_id})

    async def resign(self, game_id: str) -> OkResponse:
        return await self._runner.run(spec=self._specs["resign"], params={"game_id": game_id})


class BoardAPI(_GamePlayAPI):
    """Play with the board API."""

    def __init__(self, runner: RestRunner) -> None:
        super().__init__(runner, BOARD_SPECS)

    async def seek(self, options: SeekOptions | None = None) -> NdJsonStream[JSONObject]:
        """Create a public seek.

        A real-time seek stays active while the stream is open; closing the
        stream cancels it. A correspondence seek returns immediately.
        """
        return await self._runner.run(spec=SEEK, params={"options": options})

    async def claim_victory(self, game_id: str) -> OkResponse:
        """Claim the win after the opponent left the game."""
        return await self._runner.run(spec=CLAIM_VICTORY, params={"game_id": game_id})

    async def berserk(self, game_id: str) -> OkResponse:
        """Halve the own clock in an arena game for an extra point on a win.

        Only allowed before each player has moved.
        """
        return await self._runner.run(spec=BERSERK, params={"game_id": game_id})


class BotAPI(_GamePlayAPI):
    """Play with the bot API."""

    def __init__(self, runner: RestRunner) -> None:
        super().__init__(runner, BOT_SPECS)

    async def bots_online(self, nb: int | None = None) -> NdJsonStream[JSONObject]:
        return await self._runner.run(spec=BOTS_ONLINE, params={"nb": nb})

    async def upgrade_account(self, token: str) -> OkResponse:
        """Irreversibly turn the account owning ``token`` into a bot account."""
        config = self._runner.config.with_credential(token)
        return await self._runner.run(
            spec=UPGRADE_ACCOUNT, params={"authorization": config.auth_header()}
        )
