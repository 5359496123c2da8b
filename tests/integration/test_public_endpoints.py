"""Integration tests against the public, unauthenticated endpoints."""

import os

import pytest

from lichess.client import RemoteAPIError

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LICHESS_NETWORK_TESTS") != "1",
    reason="Requires network access to the public API",
)


class TestPublicEndpoints:
    @pytest.mark.asyncio
    async def test_daily_puzzle(self, client):
        daily = await client.puzzles.daily()
        assert "puzzle" in daily
        assert "game" in daily

    @pytest.mark.asyncio
    async def test_tablebase_lookup(self, client):
        result = await client.tablebase.standard("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        assert result["category"] == "win"

    @pytest.mark.asyncio
    async def test_user_status(self, client):
        statuses = await client.users.status(["thibault"])
        assert statuses[0]["id"] == "thibault"

    @pytest.mark.asyncio
    async def test_missing_game_is_remote_error(self, client):
        with pytest.raises(RemoteAPIError) as exc_info:
            await client.games.export_json("zzzzzzzz")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_tv_feed_yields_records(self, client):
        async with await client.tv.stream_feed() as feed:
            record = await anext(feed)
        assert record.ok
        assert "t" in record.unwrap()
