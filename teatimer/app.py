"""Terminal host for the tea timer.

Wraps an ``AppModel`` in a textual ``App``.  While selecting, an
``OptionList`` draws and navigates the presets; its highlight and select
messages, the remaining keys, resizes and ticks are turned into model
events.  The returned commands are carried out and the screen is synced
with the model after every event.
"""

from __future__ import annotations

import logging
from functools import partial

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from .messages import (
    Command,
    Highlight,
    KeyPress,
    Quit,
    Resize,
    StartTicker,
    StopTicker,
    Tick,
)
from .model import AppMode, AppModel
from .presets import Preset
from .ui.selection import option_prompt
from .ui.view import build_view

logger = logging.getLogger(__name__)

# Keys the focused OptionList handles itself (navigation + select).
LIST_KEYS = frozenset({"up", "down", "home", "end", "pageup", "pagedown", "enter"})


class TeaTimerApp(App):
    """Full-screen tea timer."""

    TITLE = "Tea Timer"

    CSS = """
    Screen {
        overflow: hidden;
    }

    #selecting {
        height: 1fr;
    }

    #list-header {
        height: 1;
        margin-bottom: 1;
    }

    #presets {
        height: 1fr;
        border: none;
    }

    #brewing {
        display: none;
        width: 100%;
        height: 100%;
    }
    """

    # Priority bindings so the quit keys reach the model before textual's
    # own ctrl+c / q handling.
    BINDINGS = [
        Binding("ctrl+c", "dispatch_key('ctrl+c')", "Quit", show=False, priority=True),
        Binding("q", "dispatch_key('q')", "Quit", show=False, priority=True),
    ]

    def __init__(self, model: AppModel | None = None) -> None:
        super().__init__()
        self.model = model or AppModel()
        self._tickers: dict[int, Timer] = {}
        self._shown: tuple[Preset, ...] | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="selecting"):
            yield Static(id="list-header")
            yield OptionList(id="presets")
        yield Static(id="brewing")

    def on_mount(self) -> None:
        margin = self.model.styles.list_margin.spacing
        self.query_one("#selecting", Vertical).styles.margin = margin
        self.feed(Resize(self.size.width, self.size.height))

    # ── textual events → model events ─────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        if event.key in LIST_KEYS and isinstance(self.focused, OptionList):
            return
        if event.is_printable and event.character:
            key = event.character
        else:
            key = event.key
        self.feed(KeyPress(key))

    def on_resize(self, event: events.Resize) -> None:
        self.feed(Resize(event.size.width, event.size.height))

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        self.feed(Highlight(event.option_index))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.feed(Highlight(event.option_index))
        self.feed(KeyPress("enter"))

    def action_dispatch_key(self, key: str) -> None:
        self.feed(KeyPress(key))

    def _tick(self, generation: int) -> None:
        self.feed(Tick(generation))

    # ── dispatch loop ─────────────────────────────────────────────────────

    def feed(self, event: object) -> None:
        """Feed *event* to the model, run its commands and resync the screen."""
        for command in self.model.dispatch(event):
            self._run_command(command)
        if self.model.quitting:
            return
        try:
            self._sync()
        except NoMatches:
            return

    def _sync(self) -> None:
        model = self.model
        if model.mode is AppMode.BREWING:
            self.query_one("#selecting", Vertical).display = False
            brewing = self.query_one("#brewing", Static)
            brewing.display = True
            brewing.update(build_view(model))
            return

        selection = model.selection
        self.query_one("#list-header", Static).update(selection.header())
        option_list = self.query_one("#presets", OptionList)
        visible = selection.visible
        if visible != self._shown:
            self._shown = visible
            option_list.clear_options()
            option_list.add_options([Option(option_prompt(p)) for p in visible])
        cursor = selection.cursor
        if cursor is not None and option_list.highlighted != cursor:
            option_list.highlighted = cursor

    def _run_command(self, command: Command) -> None:
        if isinstance(command, StartTicker):
            self._tickers[command.generation] = self.set_interval(
                command.interval.total_seconds(),
                partial(self._tick, command.generation),
            )
        elif isinstance(command, StopTicker):
            ticker = self._tickers.pop(command.generation, None)
            if ticker is not None:
                ticker.stop()
        elif isinstance(command, Quit):
            for ticker in self._tickers.values():
                ticker.stop()
            self._tickers.clear()
            self.exit()
        else:
            logger.error("unknown command %r", command)
