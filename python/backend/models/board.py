"""Board model for the sliding puzzle game.

Tiles are a flat, row-major tuple of ints.  ``EMPTY`` (0) marks the blank.
Everything here is a pure function of the tile sequence and the grid size.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

EMPTY = 0


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# -- construction helpers -----------------------------------------------------


def solved_tiles(size: int) -> tuple[int, ...]:
    """Return the goal arrangement (1..n-1 in order, blank bottom-right)."""
    if size < 2:
        raise ValueError(f"Grid size must be at least 2, got {size}.")
    return tuple(range(1, size * size)) + (EMPTY,)


def validate_tiles(tiles: Sequence[int], size: int) -> tuple[int, ...]:
    """Check *tiles* is a full permutation for a ``size``×``size`` board.

    Example::

        validate_tiles([1, 2, 3, 0], 2)
    """
    expected = size * size
    if len(tiles) != expected:
        raise ValueError(
            f"Expected {expected} tiles for a {size}×{size} board, "
            f"got {len(tiles)}."
        )
    if sorted(tiles) != list(range(expected)):
        raise ValueError(
            f"Tiles must contain 1..{expected - 1} exactly once plus one blank."
        )
    return tuple(tiles)


# -- geometry -----------------------------------------------------------------


def row_col(index: int, size: int) -> tuple[int, int]:
    return divmod(index, size)


def is_adjacent(i: int, j: int, size: int) -> bool:
    """True if cells *i* and *j* share an edge (no wraparound, no diagonal)."""
    ri, ci = row_col(i, size)
    rj, cj = row_col(j, size)
    return (ri == rj and abs(ci - cj) == 1) or (ci == cj and abs(ri - rj) == 1)


def neighbors(index: int, size: int) -> list[int]:
    r, c = row_col(index, size)
    result: list[int] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            result.append(nr * size + nc)
    return result


# -- queries ------------------------------------------------------------------


def find_empty_index(tiles: Sequence[int]) -> int | None:
    """Return the index of the blank, or ``None`` if there is none."""
    for i, label in enumerate(tiles):
        if label == EMPTY:
            return i
    return None


def is_solved(tiles: Sequence[int]) -> bool:
    """Check if all tiles are in their goal positions."""
    if not tiles or tiles[-1] != EMPTY:
        return False
    return all(label == i + 1 for i, label in enumerate(tiles[:-1]))


def is_tile_correct(tiles: Sequence[int], index: int) -> bool:
    """Check if the tile at *index* sits in its goal position."""
    label = tiles[index]
    if label == EMPTY:
        return index == len(tiles) - 1
    return label == index + 1


def neighbor_in_direction(
    tiles: Sequence[int], size: int, direction: Direction
) -> int | None:
    """Return the index of the tile that would slide in *direction*.

    ``Direction.UP`` picks the tile **below** the blank (it moves up),
    ``Direction.LEFT`` the tile to its right, and so on.  Returns ``None``
    when the blank is on the matching edge or missing.
    """
    empty = find_empty_index(tiles)
    if empty is None:
        return None

    # UP   → tile at (br+1, bc) moves up
    # DOWN → tile at (br-1, bc) moves down
    # LEFT → tile at (br, bc+1) moves left
    # RIGHT→ tile at (br, bc-1) moves right
    offsets = {
        Direction.UP: (1, 0),
        Direction.DOWN: (-1, 0),
        Direction.LEFT: (0, 1),
        Direction.RIGHT: (0, -1),
    }
    br, bc = row_col(empty, size)
    dr, dc = offsets[direction]
    tr, tc = br + dr, bc + dc
    if not (0 <= tr < size and 0 <= tc < size):
        return None
    return tr * size + tc


def swap(tiles: Sequence[int], i: int, j: int) -> tuple[int, ...]:
    """Return a copy of *tiles* with cells *i* and *j* exchanged."""
    out = list(tiles)
    out[i], out[j] = out[j], out[i]
    return tuple(out)
