"""Simultaneous exhibitions."""

from __future__ import annotations

from ..core.enums import HTTPMethod
from ..runtime.codec import JSONObject
from ..runtime.rest import RestEndpointSpec, RestRunner

CURRENT = RestEndpointSpec(
    id="simuls.current",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/simul",
)


class SimulsAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def current(self) -> JSONObject:
        """Pending, created, started and finished simuls.

        Created and finished simuls are only listed for strong enough hosts.
        When authenticated, ``pending`` holds the caller's unstarted simuls.
        """
        return await self._runner.run(spec=CURRENT)
