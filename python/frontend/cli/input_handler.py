"""Single-keypress reader for the terminal frontends.

Returns normalised key names understood by ``frontend.adapter``.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable

_KEY_MAP: dict[str, str] = {
    "k": "up",
    "j": "down",
    "h": "left",
    "l": "right",
    "s": "shuffle",
    "r": "restart",
    "c": "cheat",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its key name."""
    return _KEY_MAP.get(ch.lower() if ch.isalpha() else ch, "")


def _resolve_escape(read: Callable[[], str | None]) -> str:
    """Finish an ``ESC [ A/B/C/D`` sequence; a bare Escape quits."""
    ch2 = read()
    if ch2 != "[":
        return "quit"
    ch3 = read()
    return _ARROW_MAP.get(ch3 or "", "")


# -- platform readers ---------------------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            return _resolve_escape(lambda: sys.stdin.read(1))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return _resolve(ch)


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        # Windows arrow keys arrive as a prefix plus a scan code.
        return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(
            msvcrt.getwch(), ""
        )
    if ch == "\x1b":
        return "quit"
    return _resolve(ch)


# -- public API ---------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return its key name.

    Possible return values:
        "up", "down", "left", "right"  — arrows / hjkl
        "shuffle"                      — s
        "restart"                      — r
        "cheat"                        — c (press twice quickly)
        "quit"                         — q / Ctrl-C / Escape
        "enter"                        — Enter / Return
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return _getch_windows()
    return _getch_unix()


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but returns ``None`` after *timeout* seconds idle.

    Uses ``os.read`` (unbuffered) so that ``select`` sees the remaining
    bytes of multi-byte escape sequences.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return _getch_windows()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def _read_pending() -> str | None:
        ready, _, _ = select.select([fd], [], [], 0.1)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch == "\x1b":
            return _resolve_escape(_read_pending)
        return _resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
