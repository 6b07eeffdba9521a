# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Well-formed dashboards used as seeds and fallbacks."""

import secrets
import string
from collections.abc import Sequence

from beartype import beartype

from ..core.clock import Clock, iso_timestamp, resolve_clock
from ..core.config import get_settings
from ..models.dashboard import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
    CellSize,
    DashboardData,
    DashboardMetadata,
    GridLayout,
    GridPosition,
    GridSize,
    Widget,
    WidgetType,
)
from .normalization import clamp_layout

_ID_ALPHABET = string.digits + string.ascii_lowercase


def _default_layout() -> GridLayout:
    return GridLayout(
        columns=DEFAULT_COLUMNS,
        rows=DEFAULT_ROWS,
        cell_size=CellSize(width=DEFAULT_CELL_WIDTH, height=DEFAULT_CELL_HEIGHT),
    )


def _build(
    layout: GridLayout,
    widgets: Sequence[Widget],
    title: str,
    description: str,
    clock: Clock | None,
) -> DashboardData:
    settings = get_settings()
    now = iso_timestamp(clock)
    return DashboardData(
        version=settings.document_version,
        layout=layout,
        widgets=[widget.model_copy(deep=True) for widget in widgets],
        metadata=DashboardMetadata(
            created_at=now,
            last_modified=now,
            theme=settings.default_theme,
            title=title,
            description=description,
        ),
    )


@beartype
def generate_widget_id(clock: Clock | None = None) -> str:
    """Return an id like ``widget-1718000000000-k3j9x0a2b``."""
    millis = int(resolve_clock(clock)().timestamp() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"widget-{millis}-{suffix}"


@beartype
def create_default_dashboard(title: str | None = None, clock: Clock | None = None) -> DashboardData:
    """Create an empty 4x4 dashboard."""
    return _build(
        _default_layout(),
        [],
        title or get_settings().new_dashboard_title,
        "A customizable dashboard with 4x4 grid layout",
        clock,
    )


@beartype
def create_dashboard_with_layout(
    columns: int,
    rows: int,
    title: str | None = None,
    cell_width: int = DEFAULT_CELL_WIDTH,
    cell_height: int = DEFAULT_CELL_HEIGHT,
    clock: Clock | None = None,
) -> DashboardData:
    """Create an empty dashboard with a custom (clamped) grid."""
    layout = clamp_layout(
        {
            "columns": columns,
            "rows": rows,
            "cellSize": {"width": cell_width, "height": cell_height},
        }
    )
    return _build(
        layout,
        [],
        title or f"Dashboard {layout.columns}x{layout.rows}",
        f"A customizable dashboard with {layout.columns}x{layout.rows} grid layout",
        clock,
    )


@beartype
def create_dashboard_with_widgets(
    title: str | None = None,
    widgets: Sequence[Widget] = (),
    clock: Clock | None = None,
) -> DashboardData:
    """Create a 4x4 dashboard holding copies of ``widgets``.

    Widgets are not validated here; run ``validate_dashboard`` if they come
    from an untrusted source.
    """
    return _build(
        _default_layout(),
        widgets,
        title or get_settings().new_dashboard_title,
        "A customizable dashboard with predefined widgets",
        clock,
    )


def _sample_widgets() -> list[Widget]:
    return [
        Widget(
            id="widget-1",
            type=WidgetType.TEXT,
            position=GridPosition(column=0, row=0),
            size=GridSize(width=2, height=1),
            content={"text": "Welcome to your Dashboard"},
            config={"fontSize": "18px", "fontWeight": "bold"},
        ),
        Widget(
            id="widget-2",
            type=WidgetType.METRIC,
            position=GridPosition(column=2, row=0),
            size=GridSize(width=2, height=1),
            content={"value": "1,234", "label": "Total Users", "trend": "+12%"},
            config={"color": "blue"},
        ),
        Widget(
            id="widget-3",
            type=WidgetType.CHART,
            position=GridPosition(column=0, row=1),
            size=GridSize(width=4, height=2),
            content={
                "type": "line",
                "data": [10, 20, 15, 30, 25, 40, 35],
                "labels": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
            },
            config={"title": "Weekly Activity"},
        ),
        Widget(
            id="widget-4",
            type=WidgetType.TABLE,
            position=GridPosition(column=0, row=3),
            size=GridSize(width=4, height=1),
            content={
                "headers": ["Name", "Status", "Last Active"],
                "rows": [
                    ["John Doe", "Active", "2 hours ago"],
                    ["Jane Smith", "Away", "1 day ago"],
                    ["Bob Johnson", "Active", "30 min ago"],
                ],
            },
            config={"striped": True},
        ),
    ]


@beartype
def create_sample_dashboard(title: str | None = None, clock: Clock | None = None) -> DashboardData:
    """Create a 4x4 dashboard with a banner, a metric, a chart and a table."""
    return _build(
        _default_layout(),
        _sample_widgets(),
        title or "Sample Dashboard",
        "A sample dashboard with example widgets",
        clock,
    )
