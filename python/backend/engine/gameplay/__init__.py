from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.reducer import reduce
from backend.engine.gameplay.store import (
    MAX_EFFECT_DEPTH,
    ClockEffects,
    EffectCascadeError,
    Store,
)

__all__ = [
    "MAX_EFFECT_DEPTH",
    "ClockEffects",
    "EffectCascadeError",
    "GamePlay",
    "Store",
    "reduce",
]
