"""Rendering for both app modes.

``build_view`` turns the model into a rich renderable; the host shows it
as-is.  ``render`` prints that renderable into a terminal-sized plain-text
capture.  Both are pure: the same state always yields the same output, so
the host may re-render on every event.
"""

from __future__ import annotations

import io
import math
from datetime import timedelta
from typing import TYPE_CHECKING

from rich.console import Console, Group, RenderableType
from rich.progress_bar import ProgressBar
from rich.text import Text

from ..timer.progress import progress_fraction
from .selection import line

if TYPE_CHECKING:
    from ..model import AppModel


def format_remaining(remaining: timedelta) -> str:
    """``1h2m3s`` / ``2m59s`` / ``45s`` style countdown text."""
    seconds = max(0, math.ceil(remaining.total_seconds()))
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"


def progress_bar(model: AppModel) -> ProgressBar:
    """Bar filled to the timer's progress fraction."""
    styles = model.styles
    return ProgressBar(
        total=1.0,
        completed=progress_fraction(model.timer),
        width=model.progress_width,
        style=styles.progress_style,
        complete_style=styles.progress_complete_style,
        finished_style=styles.progress_finished_style,
    )


def build_view(model: AppModel) -> RenderableType:
    from ..model import AppMode

    styles = model.styles
    if not model.selection.ready:
        return Text("")

    if model.mode is AppMode.SELECTING:
        return styles.list_margin.wrap(model.selection.view())

    timer = model.timer
    preset = model.chosen
    if timer.expired:
        body = Group(
            line(f"Your {preset.name} is done brewing.", "bold"),
            line(""),
            progress_bar(model),
        )
    else:
        body = Group(
            line(f"{preset.name} · {preset.description}"),
            line(""),
            line(format_remaining(timer.remaining), "bold"),
            line(""),
            progress_bar(model),
        )
    return styles.timer_margin.wrap(body)


def render(model: AppModel) -> str:
    """Plain text of ``build_view``, cropped to the terminal size.

    Without colour the bar prints only its filled cells.
    """
    if not model.selection.ready:
        return ""

    width, height = model.terminal_size
    console = Console(
        file=io.StringIO(),
        width=width,
        height=height,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
        highlight=False,
    )
    with console.capture() as capture:
        console.print(build_view(model))
    text = capture.get()
    if text.endswith("\n"):
        text = text[:-1]
    lines = [row.rstrip() for row in text.split("\n")]
    return "\n".join(lines[:height])
