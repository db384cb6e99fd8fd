"""The game reducer: ``(state, action) -> (next state, effects)``.

Pure apart from the random draws it makes through the injected generator.
"""

from __future__ import annotations

from typing import Never, NoReturn

from backend.engine.gamegenerator.generator import ShuffleGenerator
from backend.engine.gamestate.actions import (
    Action,
    Effect,
    Move,
    NearWinShuffle,
    Restart,
    SetStartTime,
    Shuffle,
    Start,
    StartTimer,
)
from backend.engine.gamestate.state import GameState
from backend.models.board import find_empty_index, is_adjacent, is_solved, swap


def unhandled(value: Never) -> NoReturn:
    """Exhaustiveness guard: type checkers reject reachable calls."""
    raise TypeError(f"Unhandled variant: {value!r}")


def reduce(
    state: GameState, action: Action, generator: ShuffleGenerator
) -> tuple[GameState, list[Effect]]:
    effects: list[Effect] = []

    if isinstance(action, Start):
        nxt = state
        if state.start_time is None:
            effects.append(StartTimer())
    elif isinstance(action, Shuffle):
        nxt = state.evolve(tiles=generator.shuffled_solvable(), moves=0)
    elif isinstance(action, Move):
        nxt = _apply_move(state, action.index)
    elif isinstance(action, Restart):
        nxt = state.evolve(
            tiles=generator.shuffled_solvable(), start_time=None, moves=0
        )
        effects.append(StartTimer())
    elif isinstance(action, SetStartTime):
        nxt = state.evolve(start_time=action.time)
    elif isinstance(action, NearWinShuffle):
        nxt = state.evolve(tiles=generator.shuffled_near_win(), moves=0)
    else:
        unhandled(action)

    # Solved detection runs last for every action.
    solved = is_solved(nxt.tiles)
    nxt = nxt.evolve(
        is_solved=solved,
        start_time=None if solved else nxt.start_time,
    )
    return nxt, effects


def _apply_move(state: GameState, index: int) -> GameState:
    """Swap *index* with the blank; anything illegal leaves *state* as-is."""
    if not 0 <= index < state.tile_count:
        return state
    empty = find_empty_index(state.tiles)
    if empty is None or not is_adjacent(index, empty, state.size):
        return state
    return state.evolve(
        tiles=swap(state.tiles, index, empty), moves=state.moves + 1
    )
