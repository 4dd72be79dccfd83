"""Preset list state behind the selection screen.

The host draws and navigates the list with textual's ``OptionList``; this
adapter keeps the typed side of it: the preset tuple, the highlighted
visible item, the fuzzy filter and the margin-aware viewport size.  It
knows nothing about timers; the app model decides what "confirm" means.
"""

from __future__ import annotations

import logging

from rich.console import Group
from rich.text import Text
from textual.fuzzy import Matcher

from ..messages import Command, Highlight, KeyPress, Resize
from ..presets import Preset
from .styles import DEFAULT_STYLES, Styles

logger = logging.getLogger(__name__)

MIN_SIZE = 1


def line(text: str, style: str = "") -> Text:
    """One terminal line, cropped rather than wrapped when too wide."""
    return Text(text, style=style, no_wrap=True, overflow="crop")


def option_prompt(preset: Preset) -> Text:
    """Two-line list entry: title over description."""
    return Text.assemble(
        (preset.title(), "bold"), "\n", (preset.description, "dim"),
        no_wrap=True, overflow="crop",
    )


class PresetList:
    """Highlight, filter and viewport over a fixed tuple of presets."""

    def __init__(
        self,
        presets: tuple[Preset, ...],
        styles: Styles = DEFAULT_STYLES,
    ) -> None:
        self._presets: tuple[Preset, ...] = tuple(presets)
        self._styles = styles

        # ── viewport (zero until the first resize) ────────────────────
        self._width: int = 0
        self._height: int = 0
        self._ready: bool = False

        # ── highlight / filter ────────────────────────────────────────
        self._cursor: int = 0          # index into the visible items
        self._filter: str = ""
        self._filtering: bool = False  # True while the user is typing

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def presets(self) -> tuple[Preset, ...]:
        return self._presets

    @property
    def ready(self) -> bool:
        """True once a first resize has sized the viewport."""
        return self._ready

    @property
    def width(self) -> int:
        """Usable content width (terminal width minus the margin)."""
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def filter_text(self) -> str:
        return self._filter

    @property
    def is_filtering(self) -> bool:
        return self._filtering

    @property
    def visible(self) -> tuple[Preset, ...]:
        """Presets matching the current filter, in catalog order."""
        if not self._filter:
            return self._presets
        matcher = Matcher(self._filter)
        return tuple(
            p for p in self._presets if matcher.match(p.filter_value()) > 0
        )

    @property
    def cursor(self) -> int | None:
        """Index of the highlighted item within ``visible``."""
        if not self.visible:
            return None
        return self._cursor

    @property
    def highlighted_index(self) -> int | None:
        """Catalog index of the highlighted preset, if any."""
        selected = self.current_selection()
        if selected is None:
            return None
        return self._presets.index(selected)

    def current_selection(self) -> Preset | None:
        """The highlighted preset, or ``None`` when nothing can be chosen."""
        if not self._ready:
            return None
        visible = self.visible
        if not visible:
            return None
        return visible[min(self._cursor, len(visible) - 1)]

    # ══════════════════════════════════════════════════════════════════
    #  EVENTS
    # ══════════════════════════════════════════════════════════════════

    def resize(self, width: int, height: int) -> None:
        """Fit the list inside a *width* × *height* terminal."""
        frame_w, frame_h = self._styles.list_margin.frame_size()
        self._width = max(MIN_SIZE, width - frame_w)
        self._height = max(MIN_SIZE, height - frame_h)
        self._ready = True

    def handle_event(self, event: object) -> Command | None:
        """Apply a resize, highlight or filter key event.

        Returns the list's own follow-up command; the list currently never
        needs one, so this is always ``None``.
        """
        if isinstance(event, Resize):
            self.resize(event.width, event.height)
        elif isinstance(event, Highlight):
            if 0 <= event.index < len(self.visible):
                self._cursor = event.index
        elif isinstance(event, KeyPress):
            self._handle_filter_key(event.key)
        return None

    def _handle_filter_key(self, key: str) -> None:
        if not self._filtering:
            if key == "/":
                self._filtering = True
            elif key == "escape" and self._filter:
                self._set_filter("")
            return

        if key == "escape":
            self._filtering = False
            self._set_filter("")
        elif key == "backspace":
            self._set_filter(self._filter[:-1])
        elif len(key) == 1 and key.isprintable():
            self._set_filter(self._filter + key)

    def _set_filter(self, text: str) -> None:
        self._filter = text
        self._cursor = 0
        if text and not self.visible:
            logger.debug("filter %r matches no presets", text)

    # ══════════════════════════════════════════════════════════════════
    #  VIEW
    # ══════════════════════════════════════════════════════════════════

    def header(self) -> Text:
        """Title line, or the filter prompt while typing."""
        if self._filtering:
            return line(f"Filter: {self._filter}▏")
        if self._filter:
            return line(f"{self._styles.list_title} (filtered: {self._filter})", "bold")
        return line(self._styles.list_title, "bold")

    def view(self) -> Group:
        """Static snapshot of the list: header, then every visible entry."""
        visible = self.visible
        rows: list[Text] = [self.header(), line("")]
        if not visible:
            rows.append(line("Nothing matched." if self._filter else "No items."))
            return Group(*rows)

        marker = self._styles.cursor
        blank = " " * len(marker)
        for index, preset in enumerate(visible):
            prefix = marker if index == self._cursor else blank
            if index:
                rows.append(line(""))
            rows.append(line(prefix + preset.title()))
            rows.append(line(prefix + preset.description, "dim"))
        return Group(*rows)
