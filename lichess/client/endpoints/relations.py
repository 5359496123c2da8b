"""Follow relations of the authenticated user."""

from __future__ import annotations

from ..core.enums import HTTPMethod
from ..models import OkResponse
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner
from ..runtime.stream import NdJsonStream

FOLLOWING = RestEndpointSpec(
    id="relations.following",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/rel/following",
    decode=DecodeMode.stream(),
)

FOLLOW = RestEndpointSpec(
    id="relations.follow",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/rel/follow/{p['username']}",
    decode=DecodeMode.single(OkResponse),
)


class RelationsAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def following(self) -> NdJsonStream[JSONObject]:
        """Users followed by the authenticated user, one record per user."""
        return await self._runner.run(spec=FOLLOWING)

    async def follow(self, username: str) -> OkResponse:
        return await self._runner.run(spec=FOLLOW, params={"username": username})
