"""TV endpoints: featured games per channel."""

from __future__ import annotations

from ..core.enums import HTTPMethod, TvChannel
from ..options import coerce_enum
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner
from ..runtime.stream import NdJsonStream

CHANNELS = RestEndpointSpec(
    id="tv.channels",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/tv/channels",
)

FEED = RestEndpointSpec(
    id="tv.feed",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/tv/feed",
    decode=DecodeMode.stream(),
)

CHANNEL_FEED = RestEndpointSpec(
    id="tv.channel_feed",
    method=HTTPMethod.GET,
    build_path=lambda p: f"api/tv/{p['channel']}/feed",
    decode=DecodeMode.stream(),
)


class TvAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def channels(self) -> JSONObject:
        """Current featured game of every channel."""
        return await self._runner.run(spec=CHANNELS)

    async def stream_feed(self) -> NdJsonStream[JSONObject]:
        """Positions and moves of the main featured game, switching games as TV does."""
        return await self._runner.run(spec=FEED)

    async def stream_channel_feed(self, channel: TvChannel | str) -> NdJsonStream[JSONObject]:
        return await self._runner.run(
            spec=CHANNEL_FEED, params={"channel": coerce_enum(TvChannel, channel, "channel")}
        )
