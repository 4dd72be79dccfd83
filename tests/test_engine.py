"""Tests for the countdown timer engine and the progress fraction.

Covers: start validation, tick arithmetic, expiry and clamping, post-expiry
ticks, stale-generation ticks, and progress monotonicity.
"""

import pytest
from datetime import timedelta

from teatimer.messages import Tick
from teatimer.timer.engine import (
    TimerEngine, TimerState, TimerPhase,
    DEFAULT_TICK_INTERVAL, phase_of,
)
from teatimer.timer.progress import progress_fraction

from helpers import run_ticks


SECOND = timedelta(seconds=1)


# ═══════════════════════════════════════════════════════════════════════════
#  START
# ═══════════════════════════════════════════════════════════════════════════


class TestStart:

    def test_start_returns_running_timer(self, engine):
        state = engine.start(timedelta(minutes=3))
        assert state.running is True
        assert state.expired is False
        assert state.elapsed == timedelta(0)
        assert state.duration == timedelta(seconds=180)
        assert state.interval == DEFAULT_TICK_INTERVAL
        assert state.phase == TimerPhase.RUNNING

    def test_no_timer_is_idle(self):
        assert phase_of(None) == TimerPhase.IDLE
        assert TimerEngine.is_expired(None) is False

    def test_generation_increments_per_start(self, engine):
        assert engine.generation == 0
        first = engine.start(timedelta(seconds=10))
        second = engine.start(timedelta(seconds=10))
        assert first.generation == 1
        assert second.generation == 2
        assert engine.generation == 2

    @pytest.mark.parametrize("duration", [timedelta(0), timedelta(seconds=-5)])
    def test_non_positive_duration_rejected(self, engine, duration):
        with pytest.raises(ValueError):
            engine.start(duration)

    def test_non_positive_interval_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.start(timedelta(seconds=10), timedelta(0))

    def test_interval_must_divide_duration(self, engine):
        with pytest.raises(ValueError):
            engine.start(timedelta(seconds=10), timedelta(seconds=3))

    def test_sub_second_interval_allowed(self, engine):
        state = engine.start(timedelta(seconds=2), timedelta(milliseconds=500))
        states = run_ticks(engine, state, 4)
        assert states[-1].expired is True


# ═══════════════════════════════════════════════════════════════════════════
#  TICK / COUNTDOWN
# ═══════════════════════════════════════════════════════════════════════════


class TestCountdown:

    def test_elapsed_is_exact_multiple_of_interval(self, engine):
        state = engine.start(timedelta(seconds=30))
        for k, s in enumerate(run_ticks(engine, state, 30), start=1):
            assert s.elapsed == k * SECOND
            assert s.expired == (s.elapsed >= s.duration)

    def test_tick_does_not_mutate_previous_state(self, engine):
        state = engine.start(timedelta(seconds=5))
        engine.on_tick(state, Tick(state.generation))
        assert state.elapsed == timedelta(0)

    def test_remaining_counts_down(self, engine):
        state = engine.start(timedelta(seconds=5))
        state = run_ticks(engine, state, 2)[-1]
        assert state.remaining == timedelta(seconds=3)

    def test_expires_exactly_at_boundary(self, engine):
        state = engine.start(timedelta(seconds=3))
        states = run_ticks(engine, state, 3)
        assert [s.expired for s in states] == [False, False, True]
        assert states[-1].running is False
        assert states[-1].elapsed == timedelta(seconds=3)
        assert states[-1].phase == TimerPhase.EXPIRED
        assert engine.is_expired(states[-1])

    def test_ticks_after_expiry_are_noops(self, engine):
        state = engine.start(timedelta(seconds=2))
        expired = run_ticks(engine, state, 2)[-1]
        after = run_ticks(engine, expired, 10)
        assert all(s.elapsed == timedelta(seconds=2) for s in after)
        assert all(s == expired for s in after)

    def test_not_running_state_ignores_ticks(self, engine):
        state = TimerState(
            duration=timedelta(seconds=5), interval=SECOND,
            generation=0, running=False,
        )
        assert engine.on_tick(state, Tick(0)) is state

    def test_elapsed_clamped_to_duration(self, engine):
        state = engine.start(timedelta(seconds=4), timedelta(seconds=2))
        state = run_ticks(engine, state, 5)[-1]
        assert state.elapsed == state.duration
        assert state.remaining == timedelta(0)


# ═══════════════════════════════════════════════════════════════════════════
#  STALE TICKS
# ═══════════════════════════════════════════════════════════════════════════


class TestStaleTicks:

    def test_tick_for_other_generation_is_dropped(self, engine):
        old = engine.start(timedelta(seconds=10))
        new = engine.start(timedelta(seconds=10))
        assert engine.on_tick(new, Tick(old.generation)) is new

    def test_matching_tick_still_advances_after_stale_one(self, engine):
        old = engine.start(timedelta(seconds=10))
        new = engine.start(timedelta(seconds=10))
        new = engine.on_tick(new, Tick(old.generation))
        new = engine.on_tick(new, Tick(new.generation))
        assert new.elapsed == SECOND


# ═══════════════════════════════════════════════════════════════════════════
#  PROGRESS FRACTION
# ═══════════════════════════════════════════════════════════════════════════


class TestProgress:

    def test_zero_without_timer(self):
        assert progress_fraction(None) == 0.0

    def test_starts_at_zero(self, engine):
        assert progress_fraction(engine.start(timedelta(minutes=5))) == 0.0

    def test_halfway(self, engine):
        state = engine.start(timedelta(seconds=100))
        state = run_ticks(engine, state, 50)[-1]
        assert progress_fraction(state) == 0.5

    def test_monotonic_and_exactly_one_at_expiry(self, engine):
        state = engine.start(timedelta(minutes=3))
        fractions = [progress_fraction(s) for s in run_ticks(engine, state, 200)]
        assert fractions == sorted(fractions)
        assert fractions[179] == 1.0
        assert max(fractions) == 1.0
        assert all(f == 1.0 for f in fractions[179:])

    def test_no_drift_over_long_brew(self, engine):
        state = engine.start(timedelta(minutes=8), timedelta(milliseconds=100))
        states = run_ticks(engine, state, 4800)
        assert states[1199].elapsed == timedelta(minutes=2)
        assert progress_fraction(states[1199]) == 0.25
        assert states[-1].expired is True
