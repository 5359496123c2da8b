"""Option sets for creating challenges (user, AI and open challenges).

All three families travel as a form body and use dotted keys on the wire
(``clock.limit``, ``clock.increment``).
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from ..core.enums import Color, CorrespondenceDays, Rules, VariantMode
from .base import ClockIncrement, ClockLimit, Count, OptionSet


class _ClockedOptions(OptionSet):
    """Shared setters of the challenge families."""

    dotted_keys = True

    def with_clock(self, limit: int, increment: int):
        """Clock settings in seconds.

        Unrecognised limits are stored as 0 and increments over 180 as 180.
        """
        return self._with(clock_limit=limit, clock_increment=increment)

    def with_days(self, days: CorrespondenceDays | int):
        """Days per move of a correspondence game; omit the clock."""
        return self._with(days=days)

    def with_variant(self, variant: VariantMode | str):
        return self._with(variant=variant)

    def with_fen(self, fen: str):
        """Custom starting position; requires an unrated standard-like variant."""
        return self._with(fen=fen)


class ChallengeOptions(_ClockedOptions):
    """Options for challenging a specific user."""

    rated: bool | None = None
    clock_limit: ClockLimit | None = None
    clock_increment: ClockIncrement | None = None
    days: CorrespondenceDays | None = None
    color: Color | None = None
    variant: VariantMode | None = None
    fen: str | None = None
    rules: list[Rules] | None = None

    def with_rated(self, rated: bool) -> ChallengeOptions:
        return self._with(rated=rated)

    def with_color(self, color: Color | str) -> ChallengeOptions:
        return self._with(color=color)

    def with_rules(self, rules: Sequence[Rules | str]) -> ChallengeOptions:
        return self._with(rules=list(rules))


class AIChallengeOptions(_ClockedOptions):
    """Options for challenging the platform AI. The level is a separate argument."""

    clock_limit: ClockLimit | None = None
    clock_increment: ClockIncrement | None = None
    days: CorrespondenceDays | None = None
    color: Color | None = None
    variant: VariantMode | None = None
    fen: str | None = None

    def with_color(self, color: Color | str) -> AIChallengeOptions:
        return self._with(color=color)


class OpenChallengeOptions(_ClockedOptions):
    """Options for an open challenge anyone (or the listed users) can join."""

    rated: bool | None = None
    clock_limit: ClockLimit | None = None
    clock_increment: ClockIncrement | None = None
    days: CorrespondenceDays | None = None
    variant: VariantMode | None = None
    fen: str | None = None
    name: str | None = None
    rules: list[Rules] | None = None
    users: list[str] | None = None
    expires_at: Count | None = Field(default=None, alias="expiresAt")

    def with_rated(self, rated: bool) -> OpenChallengeOptions:
        return self._with(rated=rated)

    def with_name(self, name: str) -> OpenChallengeOptions:
        """Name displayed on the challenge page."""
        return self._with(name=name)

    def with_rules(self, rules: Sequence[Rules | str]) -> OpenChallengeOptions:
        return self._with(rules=list(rules))

    def with_users(self, white: str, black: str) -> OpenChallengeOptions:
        """Restrict the challenge to two usernames; the first one gets white."""
        return self._with(users=[white, black])

    def with_expires_at(self, timestamp_ms: int) -> OpenChallengeOptions:
        """Expiry timestamp in milliseconds, at most two weeks ahead."""
        return self._with(expires_at=timestamp_ms)
