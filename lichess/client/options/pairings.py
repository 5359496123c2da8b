"""Option set for bulk pairings."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from ..core.enums import CorrespondenceDays, Rules, VariantMode
from .base import ClockIncrement, ClockLimit, Count, OptionSet


class BulkPairingOptions(OptionSet):
    """Form options for creating many games at once."""

    dotted_keys = True

    clock_limit: ClockLimit | None = None
    clock_increment: ClockIncrement | None = None
    days: CorrespondenceDays | None = None
    fen: str | None = None
    message: str | None = None
    pair_at: Count | None = Field(default=None, alias="pairAt")
    players: list[str] | None = None
    rated: bool | None = None
    rules: list[Rules] | None = None
    start_clocks_at: Count | None = Field(default=None, alias="startClocksAt")
    variant: VariantMode | None = None

    def with_clock(self, limit: int, increment: int) -> BulkPairingOptions:
        return self._with(clock_limit=limit, clock_increment=increment)

    def with_days(self, days: CorrespondenceDays | int) -> BulkPairingOptions:
        return self._with(days=days)

    def with_fen(self, fen: str) -> BulkPairingOptions:
        return self._with(fen=fen)

    def with_message(self, message: str) -> BulkPairingOptions:
        """Message sent to each player when their game is created."""
        return self._with(message=message)

    def with_pair_at(self, timestamp_ms: int) -> BulkPairingOptions:
        return self._with(pair_at=timestamp_ms)

    def with_players(self, players: Sequence[tuple[str, str]]) -> BulkPairingOptions:
        """OAuth tokens of the players, one ``(white, black)`` tuple per game."""
        return self._with(players=[f"{white}:{black}" for white, black in players])

    def with_rated(self, rated: bool) -> BulkPairingOptions:
        return self._with(rated=rated)

    def with_rules(self, rules: Sequence[Rules | str]) -> BulkPairingOptions:
        return self._with(rules=list(rules))

    def with_start_clocks_at(self, timestamp_ms: int) -> BulkPairingOptions:
        return self._with(start_clocks_at=timestamp_ms)

    def with_variant(self, variant: VariantMode | str) -> BulkPairingOptions:
        return self._with(variant=variant)
