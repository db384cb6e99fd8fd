"""Actions sent to the reducer and effects it hands back.

Both are closed unions of frozen dataclasses.  The reducer and the effect
handlers end their dispatch with ``unhandled``, whose parameter is typed
``Never``, so that adding a variant here is a type error until every
consumer handles it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# -- actions ------------------------------------------------------------------


@dataclass(frozen=True)
class Start:
    """Start the game clock unless it is already running."""


@dataclass(frozen=True)
class Shuffle:
    pass


@dataclass(frozen=True)
class Move:
    """Slide the tile at *index* into the blank, if they are adjacent."""

    index: int


@dataclass(frozen=True)
class Restart:
    """New shuffle, clock reset and restarted."""


@dataclass(frozen=True)
class NearWinShuffle:
    """Diagnostic shuffle one move away from solved."""


@dataclass(frozen=True)
class SetStartTime:
    time: float


Action = Union[Start, Shuffle, Move, Restart, NearWinShuffle, SetStartTime]


# -- effects ------------------------------------------------------------------


@dataclass(frozen=True)
class StartTimer:
    """Ask the clock for *now* and feed it back as ``SetStartTime``."""


Effect = Union[StartTimer]
