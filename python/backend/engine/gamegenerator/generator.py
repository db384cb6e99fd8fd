"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver.solvability import is_solvable
from backend.models.board import (
    find_empty_index,
    is_solved,
    neighbors,
    solved_tiles,
    swap,
)

logger = logging.getLogger(__name__)

# Upper bound on reshuffles before falling back to a near-win board.  More
# than half of all permutations are solvable, so this is never hit in practice.
MAX_SHUFFLE_ATTEMPTS = 1000


class ShuffleGenerator:
    """Creates solvable puzzles from an injected random source.

    Pass a seeded ``random.Random`` to get reproducible boards; the default
    source is seeded from OS entropy.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        self.size = size
        self.rng = rng if rng is not None else random.Random()

    def solved(self) -> tuple[int, ...]:
        """Return the goal-state tiles (all in order, blank bottom-right)."""
        return solved_tiles(self.size)

    def shuffled_solvable(self) -> tuple[int, ...]:
        """Return a random *solvable* board that is not already solved."""
        tiles = list(self.solved())
        for attempt in range(1, MAX_SHUFFLE_ATTEMPTS + 1):
            self.rng.shuffle(tiles)
            if is_solvable(tiles, self.size) and not is_solved(tiles):
                logger.debug("shuffle accepted after %d attempt(s)", attempt)
                return tuple(tiles)

        logger.warning(
            "no solvable shuffle after %d attempts; using a near-win board",
            MAX_SHUFFLE_ATTEMPTS,
        )
        return self.shuffled_near_win()

    def shuffled_near_win(self) -> tuple[int, ...]:
        """Return a board exactly one legal move away from solved."""
        tiles = self.solved()
        empty = find_empty_index(tiles)
        assert empty is not None
        target = self.rng.choice(neighbors(empty, self.size))
        return swap(tiles, empty, target)
