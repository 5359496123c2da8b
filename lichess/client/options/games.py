"""Query options for game export endpoints."""

from __future__ import annotations

from .base import OptionSet


class GameOptions(OptionSet):
    """Flags controlling what a game export contains."""

    moves: bool | None = None
    tags: bool | None = None
    clocks: bool | None = None
    evals: bool | None = None
    accuracy: bool | None = None
    opening: bool | None = None
    division: bool | None = None
    literate: bool | None = None

    def with_moves(self, moves: bool) -> GameOptions:
        """Include the PGN moves."""
        return self._with(moves=moves)

    def with_tags(self, tags: bool) -> GameOptions:
        """Include the PGN tags."""
        return self._with(tags=tags)

    def with_clocks(self, clocks: bool) -> GameOptions:
        """Include clock states when available."""
        return self._with(clocks=clocks)

    def with_evals(self, evals: bool) -> GameOptions:
        """Include analysis evaluations and comments when available."""
        return self._with(evals=evals)

    def with_accuracy(self, accuracy: bool) -> GameOptions:
        return self._with(accuracy=accuracy)

    def with_opening(self, opening: bool) -> GameOptions:
        return self._with(opening=opening)

    def with_division(self, division: bool) -> GameOptions:
        """Plies marking the start of the middlegame and the endgame."""
        return self._with(division=division)

    def with_literate(self, literate: bool) -> GameOptions:
        """Textual annotations about the opening, mistakes and termination."""
        return self._with(literate=literate)
