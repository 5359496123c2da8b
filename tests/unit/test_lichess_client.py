"""End-to-end tests of LichessClient against a local aiohttp server."""

from __future__ import annotations

import asyncio
import json
import logging
import random

import pytest
from aiohttp import web
from pydantic import BaseModel

from lichess.client import (
    AcceptHint,
    BaseSelector,
    ChallengeOptions,
    ClientConfig,
    GameOptions,
    HTTPClient,
    InvalidOptionError,
    LichessClient,
    OkResponse,
    RemoteAPIError,
)


class Answer(BaseModel):
    x: int


class TestScenarios:
    @pytest.mark.asyncio
    async def test_single_json(self, serve):
        """GET of a single JSON document returns the decoded value."""

        async def handler(request):
            return web.json_response({"x": 42})

        client = await serve([web.get("/some-single-json", handler)])

        value = await client.request("GET", BaseSelector.PRIMARY, "some-single-json").decode_single()

        assert value == {"x": 42}

    @pytest.mark.asyncio
    async def test_single_json_into_model(self, serve):
        async def handler(request):
            return web.json_response({"x": 42})

        client = await serve([web.get("/some-single-json", handler)])

        value = await client.request("GET", BaseSelector.PRIMARY, "some-single-json").decode_single(
            Answer
        )

        assert value == Answer(x=42)

    @pytest.mark.asyncio
    async def test_execute_without_body(self, serve, seen):
        """POST without a body through execute() succeeds and returns nothing."""

        async def handler(request):
            return web.json_response({"ok": True})

        client = await serve([web.post("/accept", seen.wrap(handler))])

        result = await client.request("POST", BaseSelector.PRIMARY, "accept").execute()

        assert result is None
        assert seen.last()["body"] == b""
        assert "Content-Type" not in seen.last()["headers"]

    @pytest.mark.asyncio
    async def test_remote_error(self, serve):
        async def handler(request):
            return web.json_response({"error": "bad"}, status=400)

        client = await serve([web.post("/invalid", handler)])

        with pytest.raises(RemoteAPIError) as exc_info:
            await client.request("POST", BaseSelector.PRIMARY, "invalid").execute()

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "bad"

    @pytest.mark.asyncio
    async def test_form_body(self, serve, seen):
        """Form pairs are sent as exactly ``text=hi`` with the form content type."""

        async def handler(request):
            return web.json_response({"ok": True})

        client = await serve([web.post("/form", seen.wrap(handler))])

        result = await (
            client.request("POST", BaseSelector.PRIMARY, "form")
            .body_form([("text", "hi")])
            .decode_single(OkResponse)
        )

        assert result.ok
        assert seen.last()["body"] == b"text=hi"
        assert seen.last()["headers"]["Content-Type"] == "application/x-www-form-urlencoded"


class TestRequestHandle:
    @pytest.mark.asyncio
    async def test_query_header_accept_chain(self, serve, seen):
        async def handler(request):
            return web.json_response({"id": "abc"})

        client = await serve([web.get("/game/export/abc", seen.wrap(handler))])

        await (
            client.request("GET", BaseSelector.PRIMARY, "game/export/abc")
            .query(GameOptions.new().with_clocks(True).with_evals(False))
            .query({"pgnInJson": True})
            .header("X-Request-Id", "r-1")
            .accept(AcceptHint.JSON)
            .decode_single()
        )

        request = seen.last()
        assert request["query"] == [("clocks", "true"), ("evals", "false"), ("pgnInJson", "true")]
        assert request["headers"]["X-Request-Id"] == "r-1"
        assert request["headers"]["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_form_from_option_set_and_raw_bytes(self, serve, seen):
        async def handler(request):
            return web.json_response({"ok": True})

        client = await serve([web.post("/api/challenge/bob", seen.wrap(handler))])

        await (
            client.request("POST", BaseSelector.PRIMARY, "api/challenge/bob")
            .body_form(ChallengeOptions.new().with_clock(180, 0))
            .execute()
        )
        assert seen.last()["body"] == b"clock.limit=180&clock.increment=0"

        await (
            client.request("POST", BaseSelector.PRIMARY, "api/challenge/bob")
            .body_form(b"rated=true")
            .execute()
        )
        assert seen.last()["body"] == b"rated=true"

    @pytest.mark.asyncio
    async def test_raw_body_and_text(self, serve, seen):
        async def handler(request):
            return web.Response(text="imported")

        client = await serve([web.post("/api/import", seen.wrap(handler))])

        text = await (
            client.request("POST", BaseSelector.PRIMARY, "api/import")
            .body_raw("1. e4 e5 *", "application/x-chess-pgn")
            .decode_text()
        )

        assert text == "imported"
        assert seen.last()["body"] == b"1. e4 e5 *"
        assert seen.last()["headers"]["Content-Type"] == "application/x-chess-pgn"

    @pytest.mark.asyncio
    async def test_delete_method(self, serve, seen):
        async def handler(request):
            return web.json_response({"ok": True})

        client = await serve([web.delete("/api/bulk-pairing/b1", seen.wrap(handler))])

        await client.request("DELETE", BaseSelector.PRIMARY, "api/bulk-pairing/b1").execute()

        assert seen.last()["method"] == "DELETE"

    def test_descriptor_is_not_sent(self):
        client = LichessClient()
        descriptor = (
            client.request("GET", BaseSelector.OPENINGS, "masters")
            .query([("play", "e2e4")])
            .descriptor()
        )
        assert str(descriptor.url) == "https://explorer.lichess.ovh/masters?play=e2e4"

    def test_unknown_method_is_an_option_error(self):
        client = LichessClient()
        with pytest.raises(InvalidOptionError, match="method"):
            client.request("PUT", BaseSelector.PRIMARY, "api/x")

    def test_unknown_accept_hint_is_an_option_error(self):
        client = LichessClient()
        handle = client.request("GET", BaseSelector.PRIMARY, "api/x")
        with pytest.raises(InvalidOptionError, match="accept"):
            handle.accept("yaml")


class TestProperties:
    @pytest.mark.asyncio
    async def test_repeated_single_decode_is_stable(self, serve):
        """K identical GETs give K equal values."""
        body = {"id": "q7ZvsdUF", "moves": "e4 e5 Nf3", "players": {"white": {"rating": 1500}}}

        async def handler(request):
            return web.json_response(body)

        client = await serve([web.get("/api/x", handler)])

        values = [
            await client.request("GET", BaseSelector.PRIMARY, "api/x").decode_single()
            for _ in range(8)
        ]

        encoded = {json.dumps(value, sort_keys=True) for value in values}
        assert len(encoded) == 1
        assert values[0] == body

    @pytest.mark.asyncio
    async def test_authorization_omitted_without_credential(self, serve, seen):
        async def handler(request):
            return web.json_response({})

        client = await serve([web.get("/api/account", seen.wrap(handler))])

        await client.request("GET", BaseSelector.PRIMARY, "api/account").decode_single()

        assert "Authorization" not in seen.last()["headers"]

    @pytest.mark.asyncio
    async def test_authorization_sent_with_credential(self, serve, seen, caplog):
        async def handler(request):
            return web.json_response({})

        client = await serve([web.get("/api/account", seen.wrap(handler))], credential="lip_abc")

        with caplog.at_level(logging.DEBUG, logger="lichess.client"):
            await client.account.me()

        assert seen.last()["headers"]["Authorization"] == "Bearer lip_abc"
        assert "lip_abc" not in caplog.text
        for record in caplog.records:
            assert "lip_abc" not in repr(record.__dict__)

    @pytest.mark.asyncio
    async def test_concurrent_calls_get_their_own_responses(self, serve):
        """64 tasks calling 64 distinct endpoints each get their own answer."""

        async def handler(request):
            index = int(request.match_info["index"])
            await asyncio.sleep(random.uniform(0, 0.02))
            return web.json_response({"index": index})

        client = await serve([web.get("/item/{index}", handler)])

        async def call(index: int):
            return await client.request("GET", BaseSelector.PRIMARY, f"item/{index}").decode_single()

        results = await asyncio.gather(*(call(i) for i in range(64)))

        assert results == [{"index": i} for i in range(64)]


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self):
        async with LichessClient() as client:
            session = client.http.session
        assert session.closed

    @pytest.mark.asyncio
    async def test_shared_http_client(self):
        http = HTTPClient(timeout=5.0)
        client = LichessClient(ClientConfig.build(), http=http)
        assert client.http is http
        await client.close()

    def test_default_config(self):
        client = LichessClient()
        assert client.config.primary_base_url.host == "lichess.org"
        assert not client.config.authenticated


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancel_before_headers_aborts_request(self, serve):
        """Cancelling a pending call closes its connection and frees the pool slot."""
        started = asyncio.Event()
        aborted = asyncio.Event()

        async def handler(request):
            started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                aborted.set()
                raise
            return web.json_response({})

        client = await serve([web.get("/slow", handler)], handler_cancellation=True)

        task = asyncio.create_task(
            client.request("GET", BaseSelector.PRIMARY, "slow").decode_single()
        )
        await asyncio.wait_for(started.wait(), 5)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        await asyncio.wait_for(aborted.wait(), 5)
        assert not client.http.session.connector._acquired
