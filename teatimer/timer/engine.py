"""Countdown timer state machine for the tea timer.

Phases
------
IDLE      No timer constructed yet.
RUNNING   Counting up ``elapsed`` by one interval per tick.
EXPIRED   ``elapsed`` reached ``duration``.  Terminal.

Transitions
-----------
IDLE → RUNNING      (start)
RUNNING → EXPIRED   (the tick that crosses the boundary)

There is no pause, resume or cancel.  A brew runs to completion.

Every timer carries a ``generation`` tag.  Ticks are tagged with the
generation of the timer that asked for them, and a tick whose tag does not
match is dropped, so an in-flight tick for an old timer can never advance a
newer one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import timedelta
from enum import Enum

from ..messages import Tick

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    EXPIRED = "expired"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_TICK_INTERVAL = timedelta(seconds=1)


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerState:
    """Immutable snapshot of one countdown.

    ``elapsed`` only ever grows in whole ``interval`` steps and is clamped
    to ``duration``.
    """

    duration: timedelta
    interval: timedelta
    generation: int
    elapsed: timedelta = timedelta(0)
    running: bool = True
    expired: bool = False

    @property
    def remaining(self) -> timedelta:
        return self.duration - self.elapsed

    @property
    def phase(self) -> TimerPhase:
        return TimerPhase.EXPIRED if self.expired else TimerPhase.RUNNING


def phase_of(state: TimerState | None) -> TimerPhase:
    """Phase of *state*, treating "no timer yet" as IDLE."""
    if state is None:
        return TimerPhase.IDLE
    return state.phase


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Builds countdown timers and advances them on tick events.

    The engine itself only keeps the generation counter; the timer state
    lives in the ``TimerState`` values it returns.
    """

    def __init__(self) -> None:
        self._generation: int = 0

    @property
    def generation(self) -> int:
        """Tag of the most recently started timer (0 before any start)."""
        return self._generation

    def start(
        self,
        duration: timedelta,
        tick_interval: timedelta = DEFAULT_TICK_INTERVAL,
    ) -> TimerState:
        """Return a running timer with nothing elapsed.

        The caller is responsible for arranging ``Tick`` deliveries tagged
        with the returned state's ``generation`` every ``tick_interval``.
        """
        if duration <= timedelta(0):
            raise ValueError(f"duration must be positive, got {duration}")
        if tick_interval <= timedelta(0):
            raise ValueError(f"tick interval must be positive, got {tick_interval}")
        if duration % tick_interval:
            raise ValueError(
                f"tick interval {tick_interval} does not evenly divide {duration}"
            )

        self._generation += 1
        logger.debug(
            "timer %d started: duration=%s interval=%s",
            self._generation, duration, tick_interval,
        )
        return TimerState(
            duration=duration,
            interval=tick_interval,
            generation=self._generation,
        )

    def on_tick(self, state: TimerState, tick: Tick) -> TimerState:
        """Advance *state* by one interval if *tick* belongs to it."""
        if tick.generation != state.generation:
            logger.debug(
                "dropping stale tick for timer %d (current %d)",
                tick.generation, state.generation,
            )
            return state
        if not state.running:
            return state

        elapsed = state.elapsed + state.interval
        if elapsed >= state.duration:
            logger.info("timer %d expired after %s", state.generation, state.duration)
            return replace(
                state, elapsed=state.duration, running=False, expired=True,
            )
        return replace(state, elapsed=elapsed)

    @staticmethod
    def is_expired(state: TimerState | None) -> bool:
        return state is not None and state.expired
