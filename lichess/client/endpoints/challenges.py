"""Challenge endpoints: create, answer and cancel challenges."""

from __future__ import annotations

from typing import Any

from ..core.enums import AILevel, ChallengeDeclineReason, HTTPMethod
from ..core.exceptions import InvalidOptionError
from ..models import OkResponse
from ..options import (
    AIChallengeOptions,
    ChallengeOptions,
    OpenChallengeOptions,
    coerce_enum,
    pairs_from,
)
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner
from ..runtime.stream import NdJsonStream

Params = dict[str, Any]


def _options_form(params: Params) -> list[tuple[str, str]]:
    return pairs_from(params.get("options"))


LIST = RestEndpointSpec(
    id="challenges.list",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/challenge",
)

CREATE = RestEndpointSpec(
    id="challenges.create",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/challenge/{p['username']}",
    build_form=_options_form,
)

CREATE_CONNECT = RestEndpointSpec(
    id="challenges.create_connect",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/challenge/{p['username']}",
    build_form=lambda p: [("keepAliveStream", "true"), *_options_form(p)],
    decode=DecodeMode.stream(),
)

SHOW = RestEndpointSpec(
    id="challenges.show",
    method=HTTPMethod.GET,
    build_path=lambda p: f"api/challenge/{p['challenge_id']}/show",
)

ACCEPT = RestEndpointSpec(
    id="challenges.accept",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/challenge/{p['challenge_id']}/accept",
    decode=DecodeMode.single(OkResponse),
)

DECLINE = RestEndpointSpec(
    id="challenges.decline",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/challenge/{p['challenge_id']}/decline",
    build_form=lambda p: [("reason", p["reason"])],
    decode=DecodeMode.single(OkResponse),
)

CANCEL = RestEndpointSpec(
    id="challenges.cancel",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/challenge/{p['challenge_id']}/cancel",
    build_query=lambda p: [("opponentToken", p.get("opponent_token"))],
    decode=DecodeMode.single(OkResponse),
)

AI = RestEndpointSpec(
    id="challenges.ai",
    method=HTTPMethod.POST,
    build_path=lambda _: "api/challenge/ai",
    build_form=lambda p: [("level", p["level"]), *_options_form(p)],
)

CREATE_OPEN = RestEndpointSpec(
    id="challenges.create_open",
    method=HTTPMethod.POST,
    build_path=lambda _: "api/challenge/open",
    build_form=_options_form,
)

START_CLOCKS = RestEndpointSpec(
    id="challenges.start_clocks",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/challenge/{p['game_id']}/start-clocks",
    build_query=lambda p: [("token1", p["token1"]), ("token2", p["token2"])],
    decode=DecodeMode.single(OkResponse),
)


ADD_TIME = RestEndpointSpec(
    id="challenges.add_time",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/round/{p['game_id']}/add-time/{p['seconds']}",
    decode=DecodeMode.single(OkResponse),
)

class ChallengesAPI:
    """Sending, answering and managing challenges.

    Example:
        >>> options = ChallengeOptions.new().with_clock(300, 3).with_rated(True)
        >>> challenge = await client.challenges.create("maia1", options)
    """

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def list(self) -> JSONObject:
        """Incoming and outgoing challenges of the authenticated user."""
        return await self._runner.run(spec=LIST)

    async def create(self, username: str, options: ChallengeOptions | None = None) -> JSONObject:
        return await self._runner.run(
            spec=CREATE, params={"username": username, "options": options}
        )

    async def create_connect(
        self, username: str, options: ChallengeOptions | None = None
    ) -> NdJsonStream[JSONObject]:
        """Create a challenge and keep the connection open until it is answered.

        The stream yields the challenge first and then its outcome. Closing
        the stream cancels the challenge on the server side.
        """
        return await self._runner.run(
            spec=CREATE_CONNECT, params={"username": username, "options": options}
        )

    async def show(self, challenge_id: str) -> JSONObject:
        return await self._runner.run(spec=SHOW, params={"challenge_id": challenge_id})

    async def accept(self, challenge_id: str) -> OkResponse:
        return await self._runner.run(spec=ACCEPT, params={"challenge_id": challenge_id})

    async def decline(
        self,
        challenge_id: str,
        reason: ChallengeDeclineReason = ChallengeDeclineReason.GENERIC,
    ) -> OkResponse:
        return await self._runner.run(
            spec=DECLINE,
            params={
                "challenge_id": challenge_id,
                "reason": coerce_enum(ChallengeDeclineReason, reason, "reason"),
            },
        )

    async def cancel(self, challenge_id: str, opponent_token: str | None = None) -> OkResponse:
        """Cancel a sent challenge, aborting its game if not yet started.

        With the opponent's token the game can be aborted even after moves.
        """
        return await self._runner.run(
            spec=CANCEL,
            params={"challenge_id": challenge_id, "opponent_token": opponent_token},
        )

    async def ai(
        self, level: AILevel | int, options: AIChallengeOptions | None = None
    ) -> JSONObject:
        """Start a game against the platform AI."""
        return await self._runner.run(
            spec=AI,
            params={"level": coerce_enum(AILevel, level, "level"), "options": options},
        )

    async def create_open(self, options: OpenChallengeOptions | None = None) -> JSONObject:
        """Open challenge; the first two players following its URLs are paired."""
        return await self._runner.run(spec=CREATE_OPEN, params={"options": options})

    async def start_clocks(self, game_id: str, token1: str, token2: str) -> OkResponse:
        """Start both clocks now. Needs the tokens of both players."""
        return await self._runner.run(
            spec=START_CLOCKS,
            params={"game_id": game_id, "token1": token1, "token2": token2},
        )

    async def add_time(self, game_id: str, seconds: int) -> OkResponse:
        """Add seconds to the opponent's clock, e.g. for time-odds games.

        Raises:
            InvalidOptionError: If ``seconds`` is not positive
        """
        if seconds < 1:
            raise InvalidOptionError(f"seconds: must be positive, got {seconds}")
        return await self._runner.run(
            spec=ADD_TIME, params={"game_id": game_id, "seconds": seconds}
        )
