"""User endpoints: online status and leaderboards."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.enums import HTTPMethod, PerfType
from ..options import UserStatusOptions, coerce_enum, pairs_from
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner

MAX_LEADERBOARD_SIZE = 200

STATUS = RestEndpointSpec(
    id="users.status",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/users/status",
    build_query=lambda p: [("ids", ",".join(p["ids"])), *pairs_from(p.get("options"))],
    decode=DecodeMode.single(list[JSONObject]),
)

TOP10 = RestEndpointSpec(
    id="users.top10",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/player",
)

LEADERBOARD = RestEndpointSpec(
    id="users.leaderboard",
    method=HTTPMethod.GET,
    build_path=lambda p: f"api/player/top/{p['nb']}/{p['perf_type']}",
)


class UsersAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def status(
        self, ids: Sequence[str], options: UserStatusOptions | None = None
    ) -> list[JSONObject]:
        """Online, playing and streaming flags of up to 100 users."""
        return await self._runner.run(spec=STATUS, params={"ids": list(ids), "options": options})

    async def top10(self) -> JSONObject:
        """Top 10 players of every speed and variant, keyed by perf type."""
        return await self._runner.run(spec=TOP10)

    async def leaderboard(self, nb: int, perf_type: PerfType | str) -> list[JSONObject]:
        """Leaderboard of one speed or variant.

        ``nb`` is clamped into ``1..200``. There are no leaderboards for
        correspondence or puzzles.
        """
        data = await self._runner.run(
            spec=LEADERBOARD,
            params={
                "nb": max(1, min(nb, MAX_LEADERBOARD_SIZE)),
                "perf_type": coerce_enum(PerfType, perf_type, "perf_type"),
            },
        )
        return list(data.get("users", []))
