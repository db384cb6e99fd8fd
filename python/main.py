#!/usr/bin/env python3
"""15 Puzzle.

Usage::

    python main.py                # interactive menu
    python main.py -f rich -s 3   # Rich terminal, 3×3
    python main.py -f pygame      # Pygame GUI
    python main.py --seed 42 -v   # reproducible shuffles, debug logging
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEFAULT_SIZE = 4
MIN_SIZE = 2
MAX_SIZE = 8


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def _load_runner(frontend: Frontend):
    return importlib.import_module(_RUNNERS[frontend])


def _launch(frontend: Frontend, size: int, seed: Optional[int]) -> None:
    rng = random.Random(seed) if seed is not None else None
    _load_runner(frontend).run(size=size, rng=rng)


def _ask_size(default: int) -> int:
    raw = input(f"  Grid size ({MIN_SIZE}-{MAX_SIZE}, default {default}): ").strip()
    try:
        size = int(raw or default)
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError
    except ValueError:
        print(f"  Invalid size — using {default}.")
        size = default
    return size


def _menu_loop(size: int, seed: Optional[int]) -> None:
    choices = {"1": Frontend.vanilla, "2": Frontend.rich, "3": Frontend.pygame}
    while True:
        print()
        print("  ====================================")
        print("         1 5   P U Z Z L E            ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], _ask_size(size), seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle generator for reproducible boards.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log dispatched actions and effects.",
    ),
) -> None:
    """15 Puzzle."""
    _configure_logging(verbose)

    if frontend is None:
        _menu_loop(size, seed)
        return

    _launch(frontend, size, seed)


if __name__ == "__main__":
    app()
