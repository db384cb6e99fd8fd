"""Rich terminal frontend.

Renders the board as a Rich table inside a panel and redraws once per
second while waiting for input so the clock keeps ticking.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState, Restart
from backend.models.board import EMPTY, is_tile_correct
from frontend.adapter import DoublePress, action_for_key, format_elapsed
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(state: GameState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(state.tile_count - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(state.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(state.size):
        cells: list[str] = []
        for c in range(state.size):
            i = r * state.size + c
            val = state.tiles[i]
            if val == EMPTY:
                cells.append("[dim]·[/dim]")
            elif is_tile_correct(state.tiles, i):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_elapsed(game.elapsed_time), style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay) -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("hjkl", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("S", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(_render_board(game.state)),
        title=f"[bold cyan]15 Puzzle  {game.size}×{game.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("Victory!", style="bold green")
    congrats.append("  ★\n", style="bold yellow")

    hint = Text("Press any key to continue, Q to quit.", style="dim")

    group = Group(
        Align.center(_render_board(game.state)),
        Align.center(congrats),
        Align.center(_stats(game)),
        Align.center(hint),
    )

    panel = Panel(
        group,
        title=f"[bold green]15 Puzzle  {game.size}×{game.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    cheat = DoublePress()
    game.new_game()

    while True:
        if game.is_won:
            _draw_win(game)
            if get_key() == "quit":
                return
            game.send(Restart())
            continue

        _draw_game(game)
        key = get_key_timeout(1.0)
        if key is None:
            continue
        if key == "quit":
            return
        action = action_for_key(key, game.state, cheat)
        if action is not None:
            game.send(action)


# -- public entry point -------------------------------------------------------


def run(size: int = 4, rng: random.Random | None = None) -> None:
    """Launch the Rich terminal game."""
    _play(GamePlay(size, rng))
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
