"""Small response shapes shared by several endpoint families."""

from pydantic import BaseModel, ConfigDict


class OkResponse(BaseModel):
    """Acknowledgement body ``{"ok": true}`` returned by write endpoints."""

    ok: bool

    model_config = ConfigDict(frozen=True, extra="ignore")
