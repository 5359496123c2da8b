"""Query options for the user status endpoint."""

from __future__ import annotations

from pydantic import Field

from .base import OptionSet


class UserStatusOptions(OptionSet):
    signal: bool | None = Field(default=None, alias="withSignal")
    game_ids: bool | None = Field(default=None, alias="withGameIds")
    game_metas: bool | None = Field(default=None, alias="withGameMetas")

    def with_signal(self, signal: bool) -> UserStatusOptions:
        """Include the network signal of each player."""
        return self._with(signal=signal)

    def with_game_ids(self, game_ids: bool) -> UserStatusOptions:
        """Include the ID of the game each player is in."""
        return self._with(game_ids=game_ids)

    def with_game_metas(self, game_metas: bool) -> UserStatusOptions:
        """Include metadata of the game being played; ignored with game IDs on."""
        return self._with(game_metas=game_metas)
