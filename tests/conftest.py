"""Test configuration and shared fixtures for the GridBoard test suite.

Timestamps are pinned with a fixed clock and settings are re-read for every
test so environment overrides made with ``monkeypatch`` never leak.
"""

from collections.abc import Generator

import pytest

from gridboard.core.clock import Clock
from gridboard.core.config import clear_settings_cache
from gridboard.models.dashboard import DashboardData, GridLayout
from tests.fixtures.test_data import DashboardFactory


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def clock() -> Clock:
    """Clock fixed at 2025-01-15T10:30:45.123Z."""
    return DashboardFactory.clock()


@pytest.fixture
def factory() -> type[DashboardFactory]:
    """Dashboard record factory."""
    return DashboardFactory


@pytest.fixture
def layout_4x4() -> GridLayout:
    """Default 4x4 layout with 200x150 cells."""
    return DashboardFactory.layout()


@pytest.fixture
def layout_2x2() -> GridLayout:
    """Shrunken 2x2 layout."""
    return DashboardFactory.layout(columns=2, rows=2)


@pytest.fixture
def two_widget_dashboard() -> DashboardData:
    """4x4 dashboard with two side-by-side widgets."""
    return DashboardFactory.dashboard(
        widgets=[
            DashboardFactory.widget("left", column=0, row=0, width=2, height=2),
            DashboardFactory.widget("right", column=2, row=0, width=2, height=2),
        ]
    )
