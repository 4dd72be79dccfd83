"""UI package."""

from .styles import Margin, Styles, DEFAULT_STYLES
from .selection import PresetList, option_prompt
from .view import build_view, render, progress_bar, format_remaining

__all__ = [
    "Margin",
    "Styles",
    "DEFAULT_STYLES",
    "PresetList",
    "option_prompt",
    "build_view",
    "render",
    "progress_bar",
    "format_remaining",
]
