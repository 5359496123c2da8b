"""Query options for the opening explorer databases.

Keys are sent in the explorer's own camelCase (``topGames``,
``recentGames``) without underscore-to-dot rewriting.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from ..core.enums import GameType, OpeningRatings, Speed, VariantMode
from .base import Count, OptionSet


class _PositionOptions(OptionSet):
    def with_fen(self, fen: str):
        """FEN of the root position."""
        return self._with(fen=fen)

    def with_play(self, moves: Sequence[str]):
        """UCI moves played from the root position, sent comma-separated."""
        return self._with(play=list(moves))

    def with_moves(self, moves: int):
        """Number of most common moves to display."""
        return self._with(moves=moves)


class MastersOpeningOptions(_PositionOptions):
    """Options for the masters database."""

    fen: str | None = None
    play: list[str] | None = None
    since: Count | None = None
    until: Count | None = None
    moves: Count | None = None
    top_games: Count | None = Field(default=None, alias="topGames")

    def with_since(self, year: int) -> MastersOpeningOptions:
        return self._with(since=year)

    def with_until(self, year: int) -> MastersOpeningOptions:
        return self._with(until=year)

    def with_top_games(self, count: int) -> MastersOpeningOptions:
        return self._with(top_games=count)


class LichessOpeningOptions(_PositionOptions):
    """Options for the database of games played on the platform."""

    variant: VariantMode | None = None
    fen: str | None = None
    play: list[str] | None = None
    speeds: list[Speed] | None = None
    ratings: list[OpeningRatings] | None = None
    since: str | None = None
    until: str | None = None
    moves: Count | None = None
    top_games: Count | None = Field(default=None, alias="topGames")
    recent_games: Count | None = Field(default=None, alias="recentGames")
    history: bool | None = None

    def with_variant(self, variant: VariantMode | str) -> LichessOpeningOptions:
        return self._with(variant=variant)

    def with_speeds(self, speeds: Sequence[Speed | str]) -> LichessOpeningOptions:
        return self._with(speeds=list(speeds))

    def with_ratings(self, ratings: Sequence[OpeningRatings | int]) -> LichessOpeningOptions:
        """Rating groups; each group spans up to the next higher one."""
        return self._with(ratings=list(ratings))

    def with_since(self, month: str) -> LichessOpeningOptions:
        """First month to include, ``YYYY-MM``."""
        return self._with(since=month)

    def with_until(self, month: str) -> LichessOpeningOptions:
        return self._with(until=month)

    def with_top_games(self, count: int) -> LichessOpeningOptions:
        return self._with(top_games=count)

    def with_recent_games(self, count: int) -> LichessOpeningOptions:
        return self._with(recent_games=count)

    def with_history(self, history: bool) -> LichessOpeningOptions:
        return self._with(history=history)


class PlayerOpeningOptions(_PositionOptions):
    """Options for a single player's games. Player and color are call arguments."""

    variant: VariantMode | None = None
    fen: str | None = None
    play: list[str] | None = None
    speeds: list[Speed] | None = None
    modes: list[GameType] | None = None
    since: str | None = None
    until: str | None = None
    moves: Count | None = None
    recent_games: Count | None = Field(default=None, alias="recentGames")

    def with_variant(self, variant: VariantMode | str) -> PlayerOpeningOptions:
        return self._with(variant=variant)

    def with_speeds(self, speeds: Sequence[Speed | str]) -> PlayerOpeningOptions:
        return self._with(speeds=list(speeds))

    def with_modes(self, modes: Sequence[GameType | str]) -> PlayerOpeningOptions:
        """Restrict to casual and/or rated games."""
        return self._with(modes=list(modes))

    def with_since(self, month: str) -> PlayerOpeningOptions:
        return self._with(since=month)

    def with_until(self, month: str) -> PlayerOpeningOptions:
        return self._with(until=month)

    def with_recent_games(self, count: int) -> PlayerOpeningOptions:
        return self._with(recent_games=count)
