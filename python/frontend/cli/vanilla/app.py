"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import random
import sys

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState, Restart
from backend.models.board import EMPTY, is_tile_correct
from frontend.adapter import DoublePress, action_for_key, format_elapsed
from frontend.cli.input_handler import get_key, get_key_timeout


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _stats_line(game: GamePlay) -> str:
    """Return the formatted Moves + Time string (no newline)."""
    return (
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{format_elapsed(game.elapsed_time)}{_R}"
    )


# -- board rendering ----------------------------------------------------------


def _render_board(state: GameState) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(state.tile_count - 1))
    sep = "+" + (("-" * (width + 2) + "+") * state.size)

    lines: list[str] = [sep]
    for r in range(state.size):
        cells: list[str] = []
        for c in range(state.size):
            i = r * state.size + c
            val = state.tiles[i]
            if val == EMPTY:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif is_tile_correct(state.tiles, i):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay) -> None:
    """Draw the full game screen.

    The stats line is printed last, with no trailing newline, so
    ``_update_time`` can overwrite it in-place using ``\\r\\033[K``.
    """
    _clear()
    size = game.size
    print(f"  {_C}=== 15 Puzzle ({size}×{size}) ==={_R}")
    print()
    print(_render_board(game.state))
    print()
    print(
        f"  {_C}Arrows{_R}/{_C}hjkl{_R}: move  |  "
        f"{_C}S{_R}: shuffle  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: quit"
    )
    sys.stdout.write(f"\n{_stats_line(game)}")
    sys.stdout.flush()


def _update_time(game: GamePlay) -> None:
    sys.stdout.write(f"\r\033[K{_stats_line(game)}")
    sys.stdout.flush()


def _show_win(game: GamePlay) -> None:
    _clear()
    size = game.size
    print(f"  {_G}=== 15 Puzzle ({size}×{size}) ==={_R}")
    print()
    print(_render_board(game.state))
    print()
    print(f"  {_G}★ Victory! ★{_R}")
    print()
    print(_stats_line(game))
    print(f"\n  Press any key to continue, {_C}Q{_R} to quit.")


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    cheat = DoublePress()
    game.new_game()

    while True:
        if game.is_won:
            _show_win(game)
            if get_key() == "quit":
                return
            game.send(Restart())
            continue

        _show_game(game)
        # Wait for input; update the time display every 0.5 s.
        while True:
            key = get_key_timeout(0.5)
            if key is not None:
                break
            _update_time(game)

        if key == "quit":
            return
        action = action_for_key(key, game.state, cheat)
        if action is not None:
            game.send(action)


# -- public entry point -------------------------------------------------------


def run(size: int = 4, rng: random.Random | None = None) -> None:
    """Launch the vanilla terminal game."""
    _play(GamePlay(size, rng))
    _clear()
    print("  Goodbye!\n")
