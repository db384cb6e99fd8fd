"""Core gameplay session: wires generator, reducer, store and clock."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Sequence
from functools import partial

from backend.engine.gamegenerator import ShuffleGenerator
from backend.engine.gameplay.reducer import reduce
from backend.engine.gameplay.store import ClockEffects, Store
from backend.engine.gamestate import (
    Action,
    GameState,
    Move,
    NearWinShuffle,
    Restart,
    Shuffle,
    Start,
)
from backend.models.board import (
    Direction,
    is_solved,
    neighbor_in_direction,
    validate_tiles,
)

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session for a frontend."""

    def __init__(
        self,
        size: int,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        initial: GameState | None = None,
    ) -> None:
        self.size = size
        self.clock = clock
        self.generator = ShuffleGenerator(size, rng)
        self.store = Store(
            initial or GameState.initial(size),
            partial(reduce, generator=self.generator),
            ClockEffects(clock),
        )
        # Elapsed time frozen at the moment the board was last solved.
        self.solve_time: float | None = None
        self._last = self.store.state
        self.store.subscribe(self._track_solve)

    @classmethod
    def from_tiles(
        cls,
        size: int,
        tiles: Sequence[int],
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> GamePlay:
        """Create a session from an existing arrangement (e.g. a saved board)."""
        flat = validate_tiles(tiles, size)
        initial = GameState(size=size, tiles=flat, is_solved=is_solved(flat))
        return cls(size, rng, clock, initial)

    @property
    def state(self) -> GameState:
        return self.store.state

    def send(self, action: Action) -> GameState:
        return self.store.send(action)

    def _track_solve(self, after: GameState) -> None:
        before, self._last = self._last, after
        if not before.is_solved and after.is_solved:
            if before.start_time is not None:
                self.solve_time = self.clock() - before.start_time
            logger.info("board solved in %d moves", after.moves)
        elif before.is_solved and not after.is_solved:
            self.solve_time = None

    # -- actions --------------------------------------------------------------

    def new_game(self) -> GameState:
        """Shuffle and start the clock."""
        self.send(Shuffle())
        return self.send(Start())

    def restart(self) -> GameState:
        return self.send(Restart())

    def near_win(self) -> GameState:
        return self.send(NearWinShuffle())

    def move_index(self, index: int) -> bool:
        """Move the tile at *index*. Returns True if the board changed."""
        before = self.state.tiles
        return self.send(Move(index)).tiles != before

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        index = neighbor_in_direction(self.state.tiles, self.size, direction)
        if index is None:
            return False
        return self.move_index(index)

    # -- queries --------------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        start = self.state.start_time
        if start is not None:
            return self.clock() - start
        return self.solve_time or 0.0

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
