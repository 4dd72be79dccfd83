"""Runtime settings read from the environment.

Nothing is persisted.  The only knobs are the debug log::

    DEBUG=1 teatimer                      # log to ./debug.log
    TEATIMER_DEBUG=1 TEATIMER_LOG_FILE=/tmp/tea.log teatimer

Brew durations come from the preset catalog and are not configurable.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from .timer.engine import DEFAULT_TICK_INTERVAL

DEBUG_ENV_VARS = ("DEBUG", "TEATIMER_DEBUG")
LOG_FILE_ENV_VAR = "TEATIMER_LOG_FILE"
DEFAULT_LOG_FILE = Path("debug.log")


@dataclass(frozen=True)
class Settings:
    """All process-level preferences."""

    # ── logging ───────────────────────────────────────────────────────
    debug: bool = False
    log_file: Path = DEFAULT_LOG_FILE

    # ── timer ─────────────────────────────────────────────────────────
    tick_interval: timedelta = DEFAULT_TICK_INTERVAL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    debug = any(env.get(name, "").strip() for name in DEBUG_ENV_VARS)
    log_file = env.get(LOG_FILE_ENV_VAR, "").strip()
    return Settings(
        debug=debug,
        log_file=Path(log_file) if log_file else DEFAULT_LOG_FILE,
    )
