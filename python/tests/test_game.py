"""GamePlay session scenarios driven through the store."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import GamePlay, reduce
from backend.engine.gamesolver import is_solvable
from backend.engine.gamestate import Move, Restart, StartTimer
from backend.models.board import Direction, EMPTY, find_empty_index, solved_tiles
from frontend.adapter import action_for_key


def _game(clock, seed: int = 7) -> GamePlay:
    return GamePlay(4, random.Random(seed), clock=clock)


def test_fresh_session_is_solved_and_idle(clock) -> None:
    game = _game(clock)
    assert game.is_won
    assert game.state.start_time is None
    assert game.elapsed_time == 0.0


def test_new_game_shuffles_and_starts_clock(clock) -> None:
    game = _game(clock)
    state = game.new_game()
    assert not state.is_solved
    assert is_solvable(state.tiles, 4)
    assert state.start_time == clock.now
    clock.advance(12.5)
    assert game.elapsed_time == 12.5


def test_near_win_then_single_move_wins(clock) -> None:
    game = _game(clock)
    game.new_game()
    state = game.near_win()

    goal = solved_tiles(4)
    misplaced = [i for i, t in enumerate(state.tiles) if t != EMPTY and t != goal[i]]
    assert len(misplaced) == 1
    assert misplaced == [15]

    clock.advance(3.0)
    assert game.move_index(15)
    assert game.is_won
    assert game.state.start_time is None
    assert game.solve_time == 3.0
    assert game.elapsed_time == 3.0


def test_restart_scenario(clock, generator) -> None:
    # Immediately after the reducer: no clock, one pending timer request.
    game = _game(clock)
    pending_state, effects = reduce(game.state, Restart(), generator)
    assert pending_state.start_time is None
    assert effects == [StartTimer()]

    # Through the store the effect resolves against the clock.
    clock.now = 500.0
    state = game.restart()
    assert state.start_time == 500.0
    assert not state.is_solved


def test_restart_after_win_clears_solve_time(clock) -> None:
    game = _game(clock)
    game.new_game()
    game.near_win()
    game.move_index(15)
    assert game.solve_time is not None

    game.restart()
    assert game.solve_time is None
    assert not game.is_won


def test_direction_move(clock) -> None:
    game = _game(clock)
    game.near_win()
    empty = find_empty_index(game.state.tiles)
    direction = Direction.UP if empty == 11 else Direction.LEFT
    assert game.move(direction)
    assert game.is_won


def test_invalid_direction_and_index_are_rejected(clock) -> None:
    game = _game(clock)
    game.new_game()
    before = game.state.tiles
    assert not game.move_index(99)
    assert game.state.tiles == before

    # Blank in the bottom-right corner has nothing below or to its right.
    corner = GamePlay.from_tiles(4, (*range(1, 14), 15, 14, EMPTY), clock=clock)
    assert not corner.move(Direction.UP)
    assert not corner.move(Direction.LEFT)
    assert corner.move(Direction.DOWN)


def test_from_tiles(clock) -> None:
    game = GamePlay.from_tiles(3, [1, 2, 3, 4, 5, 6, 7, EMPTY, 8], clock=clock)
    assert not game.is_won
    assert game.move(Direction.LEFT)
    assert game.is_won
    assert game.state.moves == 1


def test_from_tiles_rejects_malformed_board(clock) -> None:
    with pytest.raises(ValueError):
        GamePlay.from_tiles(3, [1, 2, 3], clock=clock)
    with pytest.raises(ValueError):
        GamePlay.from_tiles(2, [1, 1, 2, EMPTY], clock=clock)


def test_shuffle_key_after_win_runs_the_clock(clock) -> None:
    game = _game(clock)
    game.new_game()
    game.near_win()
    game.move_index(15)
    assert game.is_won and game.state.start_time is None

    action = action_for_key("shuffle", game.state)
    assert action is not None
    game.send(action)
    clock.advance(30)
    assert not game.is_won
    assert game.state.start_time is not None
    assert game.elapsed_time == 30


def test_solve_time_is_tracked_through_the_store(clock) -> None:
    game = _game(clock)
    game.new_game()
    game.near_win()
    clock.advance(4)
    # Sending straight to the store still updates the session.
    game.store.send(Move(15))
    assert game.is_won
    assert game.solve_time == 4
