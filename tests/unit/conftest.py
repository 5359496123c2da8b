"""Shared fixtures: a local aiohttp server standing in for the platform."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from lichess.client import ClientConfig, LichessClient

ServeFactory = Callable[..., Awaitable[LichessClient]]


class RecordedRequests(list):
    """Requests seen by the mock server, in arrival order."""

    def last(self) -> dict[str, Any]:
        return self[-1]

    def wrap(self, handler):
        """Wrap a handler so each request's method, path, query, headers and body are kept."""

        async def wrapped(request: web.Request) -> web.StreamResponse:
            self.append(
                {
                    "method": request.method,
                    "path": request.path,
                    "query": list(request.query.items()),
                    "headers": request.headers.copy(),
                    "body": await request.read(),
                }
            )
            return await handler(request)

        return wrapped


@pytest_asyncio.fixture
async def serve() -> AsyncIterator[ServeFactory]:
    """Start a mock server with the given routes and return a client bound to it.

    All three base URLs point at the same server. With ``handler_cancellation``
    the server cancels a handler whose client went away.
    """
    servers: list[TestServer] = []
    clients: list[LichessClient] = []

    async def _serve(
        routes: list[web.RouteDef] | web.Application,
        *,
        credential: str | None = None,
        handler_cancellation: bool = False,
        **settings: Any,
    ) -> LichessClient:
        if isinstance(routes, web.Application):
            app = routes
        else:
            app = web.Application()
            app.add_routes(routes)
        server = TestServer(app, handler_cancellation=handler_cancellation)
        await server.start_server()
        servers.append(server)

        base = str(server.make_url("/"))
        config = ClientConfig.build(base, base, base, credential=credential, **settings)
        client = LichessClient(config)
        clients.append(client)
        return client

    yield _serve

    for client in clients:
        await client.close()
    for server in servers:
        await server.close()


@pytest.fixture
def seen() -> RecordedRequests:
    return RecordedRequests()
