"""Tests for cloud evaluation, FIDE, relations, simuls, leaderboards and timeline."""

import pytest
from aiohttp import web

from lichess.client import InvalidOptionError, PerfType, VariantMode

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


async def ok_handler(request):
    return web.json_response({"ok": True})


class TestAnalysisAPI:
    @pytest.mark.asyncio
    async def test_cloud_eval_fen_uses_underscores(self, serve, seen):
        async def handler(request):
            return web.json_response({"fen": START, "knodes": 1000, "depth": 40, "pvs": []})

        client = await serve([web.get("/api/cloud-eval", seen.wrap(handler))])

        result = await client.analysis.cloud_eval(START)

        assert result["depth"] == 40
        assert seen.last()["query"] == [
            ("fen", "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR_w_KQkq_-_0_1")
        ]

    @pytest.mark.asyncio
    async def test_cloud_eval_optional_parameters(self, serve, seen):
        async def handler(request):
            return web.json_response({"pvs": []})

        client = await serve([web.get("/api/cloud-eval", seen.wrap(handler))])

        await client.analysis.cloud_eval("8/8/8/8/8/8/8/8 w - - 0 1", 3, VariantMode.ATOMIC)

        assert seen.last()["query"][1:] == [("multiPv", "3"), ("variant", "atomic")]

    @pytest.mark.asyncio
    async def test_cloud_eval_rejects_unknown_variant(self, serve):
        client = await serve([])

        with pytest.raises(InvalidOptionError):
            await client.analysis.cloud_eval(START, variant="bughouse")


class TestFideAPI:
    @pytest.mark.asyncio
    async def test_player_and_search(self, serve, seen):
        async def player(request):
            return web.json_response({"id": 1503014, "name": "Carlsen, Magnus"})

        async def search(request):
            return web.json_response([{"id": 1503014, "name": "Carlsen, Magnus"}])

        client = await serve(
            [
                web.get("/api/fide/player/1503014", seen.wrap(player)),
                web.get("/api/fide/player", seen.wrap(search)),
            ]
        )

        assert (await client.fide.player(1503014))["name"] == "Carlsen, Magnus"

        found = await client.fide.search("Carlsen")
        assert [p["id"] for p in found] == [1503014]
        assert seen.last()["query"] == [("q", "Carlsen")]


class TestRelationsAPI:
    @pytest.mark.asyncio
    async def test_following_is_a_stream(self, serve, seen):
        async def handler(request):
            response = web.StreamResponse(headers={"Content-Type": "application/x-ndjson"})
            await response.prepare(request)
            await response.write(b'{"id":"alice"}\n{"id":"bob"}\n')
            await response.write_eof()
            return response

        client = await serve([web.get("/api/rel/following", seen.wrap(handler))], credential="lip_x")

        async with await client.relations.following() as users:
            ids = [user["id"] async for user in users.values()]

        assert ids == ["alice", "bob"]
        assert seen.last()["headers"]["Accept"] == "application/x-ndjson"

    @pytest.mark.asyncio
    async def test_follow(self, serve, seen):
        client = await serve([web.post("/api/rel/follow/alice", seen.wrap(ok_handler))])

        assert (await client.relations.follow("alice")).ok
        assert seen.last()["method"] == "POST"


class TestSimulsAPI:
    @pytest.mark.asyncio
    async def test_current(self, serve):
        async def handler(request):
            return web.json_response({"pending": [], "created": [], "started": [{"id": "s1"}]})

        client = await serve([web.get("/api/simul", handler)])

        simuls = await client.simuls.current()

        assert simuls["started"] == [{"id": "s1"}]


class TestLeaderboards:
    @pytest.mark.asyncio
    async def test_top10(self, serve):
        async def handler(request):
            return web.json_response({"bullet": [{"id": "a"}], "blitz": [{"id": "b"}]})

        client = await serve([web.get("/api/player", handler)])

        assert (await client.users.top10())["blitz"] == [{"id": "b"}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("nb, sent", [(10, "10"), (0, "1"), (500, "200")])
    async def test_leaderboard_unwraps_users(self, serve, seen, nb, sent):
        async def handler(request):
            return web.json_response({"users": [{"id": "a"}, {"id": "b"}]})

        client = await serve(
            [web.get("/api/player/top/{nb}/{perf}", seen.wrap(handler))]
        )

        users = await client.users.leaderboard(nb, PerfType.KING_OF_THE_HILL)

        assert users == [{"id": "a"}, {"id": "b"}]
        assert seen.last()["path"] == f"/api/player/top/{sent}/kingOfTheHill"

    @pytest.mark.asyncio
    async def test_leaderboard_rejects_puzzle_perf(self, serve):
        client = await serve([])

        with pytest.raises(InvalidOptionError) as exc_info:
            await client.users.leaderboard(10, "puzzle")

        assert exc_info.value.message.startswith("perf_type:")


class TestTimeline:
    @pytest.mark.asyncio
    async def test_timeline_parameters(self, serve, seen):
        async def handler(request):
            return web.json_response({"entries": [], "users": {}})

        client = await serve([web.get("/api/timeline", seen.wrap(handler))], credential="lip_x")

        await client.account.timeline()
        assert seen.last()["query"] == []

        await client.account.timeline(since=1356998400070, nb=5)
        assert seen.last()["query"] == [("since", "1356998400070"), ("nb", "5")]
