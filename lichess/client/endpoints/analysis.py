"""Cloud evaluation lookups."""

from __future__ import annotations

from ..core.enums import HTTPMethod, VariantMode
from ..options import coerce_enum
from ..runtime.codec import JSONObject
from ..runtime.rest import RestEndpointSpec, RestRunner

CLOUD_EVAL = RestEndpointSpec(
    id="analysis.cloud_eval",
    method=HTTPMethod.GET,
    build_path=lambda _: "api/cloud-eval",
    build_query=lambda p: [
        ("fen", p["fen"].replace(" ", "_")),
        ("multiPv", p.get("multi_pv")),
        ("variant", p.get("variant")),
    ],
)


class AnalysisAPI:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def cloud_eval(
        self,
        fen: str,
        multi_pv: int | None = None,
        variant: VariantMode | str | None = None,
    ) -> JSONObject:
        """Cached engine evaluation of a position.

        Only positions someone already analysed are available; others come
        back as a 404 RemoteAPIError.
        """
        if variant is not None:
            variant = coerce_enum(VariantMode, variant, "variant")
        return await self._runner.run(
            spec=CLOUD_EVAL,
            params={"fen": fen, "multi_pv": multi_pv, "variant": variant},
        )
