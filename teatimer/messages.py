"""Events fed into ``AppModel.dispatch`` and the commands it hands back.

Events come from the terminal host (keys, resizes, list highlights) or from
a ticker the host installed on request.  Commands are instructions for the host; the model
never performs I/O itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class KeyPress:
    """A key, named the way the host reports it (``"q"``, ``" "``,
    ``"enter"``, ``"ctrl+c"``, ``"up"`` ...)."""

    key: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Highlight:
    """The list widget moved its highlight to visible item ``index``."""

    index: int


@dataclass(frozen=True)
class Tick:
    """One tick interval has passed for the timer tagged ``generation``."""

    generation: int


# ── commands ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class StartTicker:
    """Deliver ``Tick(generation)`` every ``interval`` until stopped."""

    generation: int
    interval: timedelta


@dataclass(frozen=True)
class StopTicker:
    generation: int


Command = Quit | StartTicker | StopTicker
