"""The store, the single mutable cell holding the current game state.

``send`` runs the reducer, swaps in the new state and hands every returned
effect to an injected handler.  Handlers never call back into the store;
they return follow-up actions, which go onto an explicit queue processed
before ``send`` returns.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable, Iterable

from backend.engine.gameplay.reducer import unhandled
from backend.engine.gamestate.actions import Action, Effect, SetStartTime, StartTimer
from backend.engine.gamestate.state import GameState

logger = logging.getLogger(__name__)

# Actions queued this many levels below the sent one must not raise effects.
MAX_EFFECT_DEPTH = 1

Reducer = Callable[[GameState, Action], tuple[GameState, list[Effect]]]
EffectHandler = Callable[[Effect], Iterable[Action]]
Listener = Callable[[GameState], None]


class EffectCascadeError(RuntimeError):
    """An effect chain went deeper than ``MAX_EFFECT_DEPTH``."""


class ClockEffects:
    """Resolves ``StartTimer`` by sampling *clock*."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock

    def __call__(self, effect: Effect) -> list[Action]:
        if isinstance(effect, StartTimer):
            return [SetStartTime(self.clock())]
        unhandled(effect)


class Store:
    def __init__(
        self,
        initial: GameState,
        reducer: Reducer,
        effect_handler: EffectHandler,
    ) -> None:
        self._state = initial
        self._reducer = reducer
        self._effect_handler = effect_handler
        self._listeners: list[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    def send(self, action: Action) -> GameState:
        """Apply *action* and every follow-up it causes; return the new state.

        On ``EffectCascadeError`` the held state is left as it was before the
        call and listeners are not notified.
        """
        state = self._state
        queue: deque[tuple[Action, int]] = deque([(action, 0)])
        while queue:
            current, depth = queue.popleft()
            logger.debug("send %r (depth %d)", current, depth)
            state, effects = self._reducer(state, current)

            for effect in effects:
                if depth >= MAX_EFFECT_DEPTH:
                    raise EffectCascadeError(
                        f"{effect!r} raised by {current!r} exceeds depth "
                        f"{MAX_EFFECT_DEPTH}"
                    )
                logger.debug("run effect %r", effect)
                for follow_up in self._effect_handler(effect):
                    queue.append((follow_up, depth + 1))

        # Nothing is committed unless the whole chain resolved.
        self._state = state
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after each ``send``; returns an unsubscribe hook."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
