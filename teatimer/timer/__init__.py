"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerPhase,
    DEFAULT_TICK_INTERVAL,
    phase_of,
)
from .progress import progress_fraction

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerPhase",
    "DEFAULT_TICK_INTERVAL",
    "phase_of",
    "progress_fraction",
]
