"""Immutable snapshot of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, replace

from backend.models.board import solved_tiles


@dataclass(frozen=True)
class GameState:
    """Holds the board, the solved flag, the move counter and the clock start.

    ``is_solved`` is recomputed by the reducer after every action and
    ``start_time`` is ``None`` whenever no game clock is running.
    """

    size: int
    tiles: tuple[int, ...]
    is_solved: bool = False
    start_time: float | None = None
    moves: int = 0

    @classmethod
    def initial(cls, size: int) -> GameState:
        """Solved board, no timer."""
        return cls(size=size, tiles=solved_tiles(size), is_solved=True)

    @property
    def tile_count(self) -> int:
        return self.size * self.size

    def evolve(self, **changes) -> GameState:
        return replace(self, **changes)
