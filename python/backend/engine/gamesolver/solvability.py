"""Solvability analysis for sliding puzzle boards."""

from __future__ import annotations

from collections.abc import Sequence

from backend.models.board import EMPTY, find_empty_index


def inversion_count(values: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    inv = 0
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            if values[i] > values[j]:
                inv += 1
    return inv


def is_solvable(tiles: Sequence[int], size: int) -> bool:
    """Return True if *tiles* can reach the goal state.

    - odd grid: inversions must be even
    - even grid: the blank's row counted from the bottom (1-based) and the
      inversion count must have opposite parity
    """
    empty = find_empty_index(tiles)
    if empty is None:
        return False

    inv = inversion_count([t for t in tiles if t != EMPTY])
    if size % 2 == 1:
        return inv % 2 == 0

    empty_row_from_bottom = size - empty // size
    return (empty_row_from_bottom % 2 == 0) == (inv % 2 == 1)
