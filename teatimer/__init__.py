"""Tea Timer: pick a tea, watch it brew."""

__version__ = "0.1.0"
