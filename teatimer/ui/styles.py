"""Margins, progress-bar sizing and colours for the tea timer.

Everything here is plain configuration handed to the selection list, the
model, the renderer and the host at construction time.  Nothing is
module-level mutable state, so two apps (or two tests) never share styling.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import RenderableType
from rich.padding import Padding


@dataclass(frozen=True)
class Margin:
    """Blank space around a rendered block, in terminal cells."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def symmetric(cls, vertical: int, horizontal: int) -> Margin:
        return cls(vertical, horizontal, vertical, horizontal)

    @property
    def spacing(self) -> tuple[int, int, int, int]:
        """(top, right, bottom, left), the order rich and textual CSS use."""
        return self.top, self.right, self.bottom, self.left

    def frame_size(self) -> tuple[int, int]:
        """(horizontal, vertical) cells consumed by this margin."""
        top, right, bottom, left = self.spacing
        return left + right, top + bottom

    def wrap(self, renderable: RenderableType) -> Padding:
        return Padding(renderable, self.spacing, expand=False)


@dataclass(frozen=True)
class Styles:
    """Layout configuration shared by the list and the timer views."""

    # ── margins ───────────────────────────────────────────────────────────
    list_margin: Margin = field(default_factory=lambda: Margin.symmetric(1, 2))
    timer_margin: Margin = field(default_factory=lambda: Margin.symmetric(1, 1))

    # ── progress bar ──────────────────────────────────────────────────────
    progress_padding: int = 2
    progress_max_width: int = 80
    progress_min_width: int = 10
    progress_style: str = "#313154"
    progress_complete_style: str = "#CBA6F7"
    progress_finished_style: str = "#A6E3A1"

    # ── list ──────────────────────────────────────────────────────────────
    list_title: str = "Tea Timer Options"
    cursor: str = "│ "

    def progress_width(self, terminal_width: int) -> int:
        """Bar width for a terminal *terminal_width* cells wide."""
        width = terminal_width - self.progress_padding * 2 - 4
        width = min(width, self.progress_max_width)
        return max(width, self.progress_min_width)


DEFAULT_STYLES = Styles()
