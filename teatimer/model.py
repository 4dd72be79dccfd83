"""Application state machine for the tea timer.

Modes
-----
SELECTING   The preset list is shown; highlights and filter keys drive it.
BREWING     A countdown is running (or has finished) for the chosen preset.

Transitions
-----------
SELECTING → BREWING   (confirm with a preset highlighted)

That is the only transition.  Once brewing, confirm is ignored and the list
is never shown again.  ``q`` / ``ctrl+c`` end the run from either mode.

``dispatch`` handles exactly one event and returns the commands the host
must carry out (start or stop a ticker, quit).  The host feeds events one
at a time, so no locking is needed.
"""

from __future__ import annotations

import logging
from enum import Enum

from .messages import (
    Command,
    KeyPress,
    Quit,
    Resize,
    StartTicker,
    StopTicker,
    Tick,
)
from .presets import Preset, list_presets
from .settings import Settings
from .timer.engine import TimerEngine, TimerPhase, TimerState, phase_of
from .timer.progress import progress_fraction
from .ui.selection import PresetList
from .ui.styles import DEFAULT_STYLES, Styles
from .ui.view import render

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "ctrl+c"})
CONFIRM_KEYS = frozenset({"enter", " "})


class AppMode(Enum):
    SELECTING = "selecting"
    BREWING = "brewing"


class AppModel:
    """Top-level controller: routes events to the list or the timer."""

    def __init__(
        self,
        presets: tuple[Preset, ...] | None = None,
        *,
        styles: Styles = DEFAULT_STYLES,
        settings: Settings | None = None,
    ) -> None:
        self._styles = styles
        self._settings = settings or Settings()

        self._mode: AppMode = AppMode.SELECTING
        self._selection = PresetList(
            list_presets() if presets is None else presets, styles,
        )
        self._engine = TimerEngine()
        self._timer: TimerState | None = None
        self._chosen: Preset | None = None
        self._progress_width: int = styles.progress_min_width
        self._terminal_size: tuple[int, int] = (0, 0)
        self._quitting: bool = False

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> AppMode:
        return self._mode

    @property
    def styles(self) -> Styles:
        return self._styles

    @property
    def selection(self) -> PresetList:
        return self._selection

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def timer(self) -> TimerState | None:
        """The running or finished countdown (``None`` while selecting)."""
        return self._timer

    @property
    def timer_phase(self) -> TimerPhase:
        return phase_of(self._timer)

    @property
    def chosen(self) -> Preset | None:
        return self._chosen

    @property
    def progress(self) -> float:
        return progress_fraction(self._timer)

    @property
    def progress_width(self) -> int:
        return self._progress_width

    @property
    def terminal_size(self) -> tuple[int, int]:
        """(width, height) from the most recent resize."""
        return self._terminal_size

    @property
    def quitting(self) -> bool:
        return self._quitting

    # ══════════════════════════════════════════════════════════════════
    #  DISPATCH
    # ══════════════════════════════════════════════════════════════════

    def dispatch(self, event: object) -> list[Command]:
        """Apply one event and return the follow-up commands."""
        if self._quitting:
            return []

        if isinstance(event, Tick):
            return self._on_tick(event)

        if isinstance(event, KeyPress):
            if event.key in QUIT_KEYS:
                logger.info("quit requested in %s mode", self._mode.value)
                self._quitting = True
                return [Quit()]
            if event.key in CONFIRM_KEYS:
                return self._on_confirm()

        if isinstance(event, Resize):
            self._selection.resize(event.width, event.height)
            self._terminal_size = (max(1, event.width), max(1, event.height))
            self._progress_width = self._styles.progress_width(event.width)
            return []

        if self._mode is AppMode.BREWING:
            return []
        command = self._selection.handle_event(event)
        return [command] if command is not None else []

    def view(self) -> str:
        return render(self)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — event handlers
    # ══════════════════════════════════════════════════════════════════

    def _on_confirm(self) -> list[Command]:
        if self._mode is AppMode.BREWING:
            return []

        preset = self._selection.current_selection()
        if preset is None:
            logger.warning("confirm ignored: no preset highlighted")
            return []

        self._chosen = preset
        self._timer = self._engine.start(
            preset.duration, self._settings.tick_interval,
        )
        self._mode = AppMode.BREWING
        logger.info(
            "%r selected, timer duration of %d minutes",
            preset.name, preset.duration_minutes,
        )
        return [StartTicker(self._timer.generation, self._timer.interval)]

    def _on_tick(self, tick: Tick) -> list[Command]:
        if self._mode is not AppMode.BREWING or self._timer is None:
            logger.debug("tick %d ignored outside of brewing", tick.generation)
            return []

        was_running = self._timer.running
        self._timer = self._engine.on_tick(self._timer, tick)
        if was_running and self._timer.expired:
            logger.info("%s is done brewing", self._chosen.name)
            return [StopTicker(self._timer.generation)]
        return []
