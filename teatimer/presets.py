"""Tea presets offered on the selection screen.

The catalog is fixed at startup and never mutated.  Each ``Preset`` exposes
the three string projections the list needs: ``title()`` for the first line,
``description`` for the second and ``filter_value()`` for fuzzy filtering.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class Preset:
    """A named brew configuration with a fixed duration."""

    name: str
    description: str
    duration_minutes: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.duration_minutes, int)
            or isinstance(self.duration_minutes, bool)
            or self.duration_minutes <= 0
        ):
            raise ValueError(
                f"duration_minutes must be a positive integer, "
                f"got {self.duration_minutes!r}"
            )

    @property
    def duration(self) -> timedelta:
        return timedelta(minutes=self.duration_minutes)

    def title(self) -> str:
        return self.name

    def filter_value(self) -> str:
        return self.name


# ── catalog ───────────────────────────────────────────────────────────────

DEFAULT_CATALOG: tuple[Preset, ...] = (
    Preset("Black Tea", "95C for 5 minutes", 5),
    Preset("Green Tea", "75C for 3 minutes", 3),
    Preset("Oolong Tea", "90C for 4 minutes", 4),
    Preset("White Tea", "80C for 3 minutes", 3),
    Preset("Herbal Tea", "100C for 8 minutes", 8),
    Preset("Rooibos Tea", "100C for 8 minutes", 8),
)


def list_presets(catalog: tuple[Preset, ...] = DEFAULT_CATALOG) -> tuple[Preset, ...]:
    """Return the ordered, immutable preset sequence."""
    return tuple(catalog)
