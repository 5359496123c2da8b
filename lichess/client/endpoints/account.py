"""Account endpoints: profile, email, preferences, kid mode and timeline."""

from __future__ import annotations

from typing import Any

from ..core.enums import HTTPMethod
from ..models import OkResponse
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner

PROFILE = RestEndpointSpec(
    id="account.profile",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/account",
)

EMAIL = RestEndpointSpec(
    id="account.email",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/account/email",
)

PREFERENCES = RestEndpointSpec(
    id="account.preferences",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/account/preferences",
)

KID_MODE = RestEndpointSpec(
    id="account.kid_mode",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/account/kid",
)

SET_KID_MODE = RestEndpointSpec(
    id="account.set_kid_mode",
    method=HTTPMethod.POST,
    build_path=lambda _: "api/account/kid",
    build_query=lambda p: [("v", p["enabled"])],
    decode=DecodeMode.single(OkResponse),
)


TIMELINE = RestEndpointSpec(
    id="account.timeline",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/timeline",
    build_query=lambda p: [("since", p.get("since")), ("nb", p.get("nb"))],
)

class AccountAPI:
    """Endpoints about the authenticated account."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def me(self) -> JSONObject:
        """Public profile of the authenticated user."""
        return await self._runner.run(spec=PROFILE)

    async def email(self) -> JSONObject:
        return await self._runner.run(spec=EMAIL)

    async def preferences(self) -> JSONObject:
        return await self._runner.run(spec=PREFERENCES)

    async def kid_mode(self) -> bool:
        """Whether kid mode is enabled on the account."""
        data: dict[str, Any] = await self._runner.run(spec=KID_MODE)
        return bool(data.get("kid", False))

    async def set_kid_mode(self, enabled: bool) -> OkResponse:
        return await self._runner.run(spec=SET_KID_MODE, params={"enabled": enabled})

    async def timeline(self, since: int | None = None, nb: int | None = None) -> JSONObject:
        """Recent timeline entries of the authenticated user.

        Args:
            since: Only entries after this timestamp in milliseconds
            nb: Maximum number of entries
        """
        return await self._runner.run(spec=TIMELINE, params={"since": since, "nb": nb})
