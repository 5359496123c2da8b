"""Option set for seeking an opponent through the board API."""

from __future__ import annotations

from pydantic import Field

from ..core.enums import Color, CorrespondenceDays, VariantMode
from .base import OptionSet, SeekMinutes


class SeekOptions(OptionSet):
    """Form options for ``POST /api/board/seek``.

    Unlike challenges, the seek clock is ``time`` in minutes and
    ``increment`` in seconds, both clamped to 180.
    """

    rated: bool | None = None
    time: SeekMinutes | None = None
    increment: SeekMinutes | None = None
    days: CorrespondenceDays | None = None
    color: Color | None = None
    variant: VariantMode | None = None
    rating_range: str | None = Field(default=None, alias="ratingRange")

    def with_rated(self, rated: bool) -> SeekOptions:
        return self._with(rated=rated)

    def with_clock(self, time: int, increment: int) -> SeekOptions:
        return self._with(time=time, increment=increment)

    def with_days(self, days: CorrespondenceDays | int) -> SeekOptions:
        return self._with(days=days)

    def with_color(self, color: Color | str) -> SeekOptions:
        return self._with(color=color)

    def with_variant(self, variant: VariantMode | str) -> SeekOptions:
        return self._with(variant=variant)

    def with_rating_range(self, minimum: int, maximum: int) -> SeekOptions:
        """Opponent rating range, sent as ``"<min>-<max>"``."""
        return self._with(rating_range=rating_range(minimum, maximum))


def rating_range(minimum: int, maximum: int) -> str:
    """Dashed composite form of a rating range; negatives are clamped to 0."""
    minimum, maximum = max(minimum, 0), max(maximum, 0)
    return f"{minimum}-{maximum}"
