"""Bulk pairing endpoints: schedule many games at once."""

from __future__ import annotations

from ..core.enums import HTTPMethod
from ..models import OkResponse
from ..options import BulkPairingOptions, pairs_from
from ..runtime.codec import JSONObject
from ..runtime.rest import DecodeMode, RestEndpointSpec, RestRunner

BULK_LIST = RestEndpointSpec(
    id="pairings.bulk_list",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/bulk-pairing",
)

BULK_CREATE = RestEndpointSpec(
    id="pairings.bulk_create",
    method=HTTPMethod.POST,
    build_path=lambda _: "api/bulk-pairing",
    build_form=lambda p: pairs_from(p["options"]),
)

BULK_START_CLOCKS = RestEndpointSpec(
    id="pairings.bulk_start_clocks",
    method=HTTPMethod.POST,
    build_path=lambda p: f"api/bulk-pairing/{p['bulk_id']}/start-clocks",
    decode=DecodeMode.single(OkResponse),
)

BULK_CANCEL = RestEndpointSpec(
    id="pairings.bulk_cancel",
    method=HTTPMethod.DELETE,
    build_path=lambda p: f"api/bulk-pairing/{p['bulk_id']}",
    decode=DecodeMode.single(OkResponse),
)


class PairingsAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def bulk_list(self) -> list[JSONObject]:
        """Scheduled bulk pairings created by the authenticated user."""
        data = await self._runner.run(spec=BULK_LIST)
        return list(data.get("bulks", []))

    async def bulk_create(self, options: BulkPairingOptions) -> JSONObject:
        return await self._runner.run(spec=BULK_CREATE, params={"options": options})

    async def bulk_start_clocks(self, bulk_id: str) -> OkResponse:
        return await self._runner.run(spec=BULK_START_CLOCKS, params={"bulk_id": bulk_id})

    async def bulk_cancel(self, bulk_id: str) -> OkResponse:
        """Cancel a bulk pairing; games already created are not affected."""
        return await self._runner.run(spec=BULK_CANCEL, params={"bulk_id": bulk_id})
