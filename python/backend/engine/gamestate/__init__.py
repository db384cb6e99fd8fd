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

__all__ = [
    "Action",
    "Effect",
    "GameState",
    "Move",
    "NearWinShuffle",
    "Restart",
    "SetStartTime",
    "Shuffle",
    "Start",
    "StartTimer",
]
