"""Store: state replacement, effect queue, cascade guard, listeners."""

from __future__ import annotations

from functools import partial

import pytest

from backend.engine.gamegenerator import ShuffleGenerator
from backend.engine.gameplay import ClockEffects, EffectCascadeError, Store, reduce
from backend.engine.gamestate import (
    GameState,
    Move,
    Restart,
    SetStartTime,
    Shuffle,
    Start,
    StartTimer,
)


def _store(generator: ShuffleGenerator, handler, initial: GameState | None = None) -> Store:
    return Store(
        initial or GameState.initial(4),
        partial(reduce, generator=generator),
        handler,
    )


def test_initial_state_is_solved_without_clock(generator: ShuffleGenerator, clock) -> None:
    store = _store(generator, ClockEffects(clock))
    assert store.state.is_solved
    assert store.state.start_time is None
    assert store.state.tiles == generator.solved()


def test_send_replaces_state(generator: ShuffleGenerator, clock) -> None:
    store = _store(generator, ClockEffects(clock))
    before = store.state
    after = store.send(Shuffle())
    assert store.state is after
    assert after.tiles != before.tiles


def test_restart_resolves_timer_from_clock(generator: ShuffleGenerator, clock) -> None:
    clock.now = 123.0
    store = _store(generator, ClockEffects(clock))
    state = store.send(Restart())
    assert state.start_time == 123.0
    assert not state.is_solved


def test_start_after_shuffle_runs_clock_once(generator: ShuffleGenerator, clock) -> None:
    calls: list[object] = []

    def handler(effect):
        calls.append(effect)
        return ClockEffects(clock)(effect)

    store = _store(generator, handler)
    store.send(Shuffle())
    store.send(Start())
    clock.advance(10)
    store.send(Start())
    assert calls == [StartTimer()]
    assert store.state.start_time == 100.0


def test_handler_follow_ups_are_queued_not_recursive(generator: ShuffleGenerator) -> None:
    seen: list[object] = []

    def reducer(state, action):
        seen.append(action)
        if isinstance(action, Start):
            return state, [StartTimer(), StartTimer()]
        return state, []

    store = Store(GameState.initial(4), reducer, lambda effect: [SetStartTime(1.0)])
    store.send(Start())
    assert seen == [Start(), SetStartTime(1.0), SetStartTime(1.0)]


def test_cascading_effects_are_rejected(generator: ShuffleGenerator) -> None:
    initial = GameState(size=4, tiles=generator.shuffled_solvable())
    store = _store(generator, lambda effect: [Start()], initial)
    with pytest.raises(EffectCascadeError):
        store.send(Start())
    assert store.state is initial


def test_rejected_cascade_commits_nothing() -> None:
    def reducer(state, action):
        return state.evolve(moves=state.moves + 1), [StartTimer()]

    initial = GameState.initial(4)
    store = Store(initial, reducer, lambda effect: [Start()])
    seen: list[GameState] = []
    store.subscribe(seen.append)

    with pytest.raises(EffectCascadeError):
        store.send(Start())
    assert store.state is initial
    assert store.state.moves == 0
    assert seen == []


def test_subscribe_sees_fully_resolved_state(generator: ShuffleGenerator, clock) -> None:
    store = _store(generator, ClockEffects(clock))
    seen: list[GameState] = []
    unsubscribe = store.subscribe(seen.append)

    store.send(Restart())
    assert len(seen) == 1
    assert seen[0].start_time == clock.now

    unsubscribe()
    store.send(Move(0))
    assert len(seen) == 1


def test_clock_effects_rejects_unknown_effect(clock) -> None:
    with pytest.raises(TypeError):
        ClockEffects(clock)(object())  # type: ignore[arg-type]
