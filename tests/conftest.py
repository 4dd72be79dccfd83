"""Shared pytest fixtures for Tea Timer tests."""

import pytest

from teatimer.messages import Resize
from teatimer.model import AppModel
from teatimer.presets import Preset
from teatimer.timer.engine import TimerEngine
from teatimer.ui.styles import Styles


@pytest.fixture
def two_teas():
    """The short catalog used by the brewing scenarios."""
    return (
        Preset("Black Tea", "95C for 5 minutes", 5),
        Preset("Green Tea", "75C for 3 minutes", 3),
    )


@pytest.fixture
def styles():
    """Fresh Styles instance so tests never share layout config."""
    return Styles()


@pytest.fixture
def engine():
    return TimerEngine()


@pytest.fixture
def model(two_teas, styles):
    """Model over the two-tea catalog, already sized to an 80×24 terminal."""
    m = AppModel(two_teas, styles=styles)
    m.dispatch(Resize(80, 24))
    return m


@pytest.fixture
def unsized_model(two_teas, styles):
    """Model that has not yet seen a resize."""
    return AppModel(two_teas, styles=styles)
