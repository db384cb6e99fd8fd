"""Presentation adapter: pixels and keys to actions."""

from __future__ import annotations

import pytest

from backend.engine.gamestate import GameState, Move, NearWinShuffle, Restart, Shuffle
from backend.models.board import EMPTY, solved_tiles, swap
from frontend.adapter import (
    DoublePress,
    Layout,
    action_for_click,
    action_for_key,
    format_elapsed,
    index_at,
)

LAYOUT = Layout(size=4, tile_px=50, origin_x=10, origin_y=20, gap=5)

# Blank at index 10, i.e. (2, 2).
CENTRE = GameState(size=4, tiles=swap(solved_tiles(4), 10, 15))


# -- index_at -------------------------------------------------------------------


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        ((10, 20), 0),
        ((59, 69), 0),
        ((65, 20), 1),
        ((10, 75), 4),
        ((224, 229), 15),
        ((60, 20), None),    # gap between columns
        ((10, 70), None),    # gap between rows
        ((9, 20), None),     # left of the board
        ((10, 19), None),    # above the board
        ((230, 20), None),   # right of the board
    ],
)
def test_index_at(point: tuple[int, int], expected: int | None) -> None:
    assert index_at(point, LAYOUT) == expected


def test_tile_centres_map_back_to_their_index() -> None:
    for i in range(16):
        x, y, w, h = LAYOUT.tile_rect(i)
        assert index_at((x + w // 2, y + h // 2), LAYOUT) == i


# -- keys -----------------------------------------------------------------------


@pytest.mark.parametrize(
    ("key", "index"),
    [("up", 14), ("down", 6), ("left", 11), ("right", 9)],
)
def test_arrow_keys_move_neighbour_of_blank(key: str, index: int) -> None:
    assert action_for_key(key, CENTRE) == Move(index)


def test_arrow_off_edge_is_ignored() -> None:
    state = GameState(size=4, tiles=swap(solved_tiles(4), 13, 14))
    assert state.tiles[15] == EMPTY
    assert action_for_key("up", state) is None
    assert action_for_key("down", state) == Move(11)


def test_arrows_ignored_once_solved() -> None:
    assert action_for_key("down", GameState.initial(4).evolve(is_solved=True)) is None


def test_command_keys() -> None:
    assert action_for_key("shuffle", CENTRE) == Shuffle()
    assert action_for_key("restart", CENTRE) == Restart()
    assert action_for_key("bogus", CENTRE) is None
    assert action_for_key("", CENTRE) is None


def test_cheat_needs_double_press(clock) -> None:
    cheat = DoublePress(window=0.4, clock=clock)
    assert action_for_key("cheat", CENTRE, cheat) is None
    clock.advance(0.2)
    assert action_for_key("cheat", CENTRE, cheat) == NearWinShuffle()


def test_cheat_without_detector_is_ignored() -> None:
    assert action_for_key("cheat", CENTRE) is None


def test_shuffle_keys_restart_a_solved_board(clock) -> None:
    solved = GameState.initial(4)
    assert action_for_key("shuffle", solved) == Restart()

    cheat = DoublePress(window=0.4, clock=clock)
    assert action_for_key("cheat", solved, cheat) is None
    clock.advance(0.1)
    assert action_for_key("cheat", solved, cheat) == Restart()


def test_double_press_window(clock) -> None:
    press = DoublePress(window=0.4, clock=clock)
    assert not press.press()
    clock.advance(0.3)
    assert press.press()
    # a triggered pair does not chain into a third press
    clock.advance(0.1)
    assert not press.press()
    clock.advance(1.5)
    assert not press.press()


# -- clicks ---------------------------------------------------------------------


def test_click_on_tile_moves_it() -> None:
    assert action_for_click(3, CENTRE) == Move(3)


def test_click_outside_board_is_ignored() -> None:
    assert action_for_click(None, CENTRE) is None


def test_click_on_solved_board_restarts() -> None:
    assert action_for_click(None, GameState.initial(4)) == Restart()
    assert action_for_click(5, GameState.initial(4)) == Restart()


# -- display --------------------------------------------------------------------


@pytest.mark.parametrize(
    ("seconds", "text"),
    [(0, "00:00"), (59.9, "00:59"), (75.2, "01:15"), (3600, "60:00")],
)
def test_format_elapsed(seconds: float, text: str) -> None:
    assert format_elapsed(seconds) == text
