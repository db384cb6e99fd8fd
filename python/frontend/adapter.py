"""Presentation adapter: turns input into actions for the core.

Shared by every frontend.  Nothing in here draws anything: it maps
normalised key names and pixel positions onto ``Action`` values and keeps
the diagnostic double-press gesture out of the reducer.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from backend.engine.gamestate import (
    Action,
    GameState,
    Move,
    NearWinShuffle,
    Restart,
    Shuffle,
)
from backend.models.board import Direction, neighbor_in_direction

# Two presses of the diagnostic key closer together than this trigger a
# near-win shuffle.
DOUBLE_PRESS_WINDOW = 0.4

_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- geometry -----------------------------------------------------------------


@dataclass(frozen=True)
class Layout:
    """Pixel geometry of a drawn board."""

    size: int
    tile_px: int
    origin_x: int = 0
    origin_y: int = 0
    gap: int = 0

    def tile_rect(self, index: int) -> tuple[int, int, int, int]:
        r, c = divmod(index, self.size)
        return (
            self.origin_x + c * (self.tile_px + self.gap),
            self.origin_y + r * (self.tile_px + self.gap),
            self.tile_px,
            self.tile_px,
        )


def index_at(point: tuple[int, int], layout: Layout) -> int | None:
    """Return the tile index under *point*, or ``None`` (gaps included)."""
    x, y = point
    step = layout.tile_px + layout.gap
    dx, dy = x - layout.origin_x, y - layout.origin_y
    if dx < 0 or dy < 0:
        return None
    col, off_x = divmod(dx, step)
    row, off_y = divmod(dy, step)
    if col >= layout.size or row >= layout.size:
        return None
    if off_x >= layout.tile_px or off_y >= layout.tile_px:
        return None
    return row * layout.size + col


# -- keyboard -----------------------------------------------------------------


class DoublePress:
    """Detects two presses within *window* seconds."""

    def __init__(
        self,
        window: float = DOUBLE_PRESS_WINDOW,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window = window
        self.clock = clock
        self._last: float | None = None

    def press(self) -> bool:
        now = self.clock()
        last, self._last = self._last, now
        if last is not None and now - last <= self.window:
            self._last = None
            return True
        return False


def action_for_key(
    key: str, state: GameState, cheat: DoublePress | None = None
) -> Action | None:
    """Map a normalised key name to an action, or ``None`` to ignore it.

    Arrows slide the neighbour of the blank, ``shuffle`` / ``restart`` map
    directly, and ``cheat`` yields a near-win shuffle on a double press.
    On a solved board both shuffles become ``Restart``.
    """
    if key in _DIRECTIONS:
        if state.is_solved:
            return None
        index = neighbor_in_direction(state.tiles, state.size, _DIRECTIONS[key])
        return None if index is None else Move(index)
    if key == "restart":
        return Restart()
    # The clock stopped when the board was solved; only Restart starts it again.
    if key == "shuffle":
        return Restart() if state.is_solved else Shuffle()
    if key == "cheat" and cheat is not None and cheat.press():
        return Restart() if state.is_solved else NearWinShuffle()
    return None


def action_for_click(index: int | None, state: GameState) -> Action | None:
    """A click on a tile moves it; any click on a solved board restarts."""
    if state.is_solved:
        return Restart()
    if index is None:
        return None
    return Move(index)


# -- display ------------------------------------------------------------------


def format_elapsed(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"
