"""Private messaging."""

from __future__ import annotations

from ..core.enums import HTTPMethod
from ..models import OkResponse
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner

SEND = RestEndpointSpec(
    id="messaging.send",
    method=HTTPMethod.POST,
    build_path=lambda p: f"inbox/{p['username']}",
    build_form=lambda p: [("text", p["text"])],
    decode=DecodeMode.single(OkResponse),
)


class MessagingAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def send(self, username: str, text: str) -> OkResponse:
        return await self._runner.run(spec=SEND, params={"username": username, "text": text})
