"""Progress fraction derived from a timer state.

Always recomputed from ``elapsed`` and ``duration``; never cached.
"""

from __future__ import annotations

from .engine import TimerState


def progress_fraction(state: TimerState | None) -> float:
    """0.0 → 1.0 progress through the countdown (0.0 with no timer)."""
    if state is None or state.duration.total_seconds() <= 0:
        return 0.0
    if state.expired:
        return 1.0
    return max(0.0, min(1.0, state.elapsed / state.duration))
