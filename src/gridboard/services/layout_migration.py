# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Grid layout changes and the widget adjustments they require.

Widgets are fitted to a new grid one at a time and one axis at a time.
They are never compared with each other, so a migration that squeezes two
widgets into the same region can leave them overlapping. Use
:func:`get_affected_widgets` before, or
:func:`gridboard.services.geometry.find_overlaps` after, to detect that.
"""

import copy
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from beartype import beartype

from ..core.clock import Clock, iso_timestamp
from ..core.logging_utils import get_logger
from ..models.dashboard import (
    MAX_CELL_DIMENSION,
    MAX_COLUMNS,
    MAX_ROWS,
    MAX_SPAN,
    MIN_CELL_DIMENSION,
    MIN_COLUMNS,
    MIN_ROWS,
    MIN_SPAN,
    DashboardData,
    GridLayout,
    GridPosition,
    GridSize,
    Widget,
)
from ..models.reports import AffectedWidgets, LayoutChangeSummary, ValidationReport
from .normalization import clamp, normalize_layout

logger = get_logger(__name__)

LayoutInput = GridLayout | Mapping[str, Any]


class ResizeDirection(str, Enum):
    """One-step grid resize actions."""

    ADD_COLUMN = "add-column"
    REMOVE_COLUMN = "remove-column"
    ADD_ROW = "add-row"
    REMOVE_ROW = "remove-row"


def _as_layout(layout: LayoutInput) -> GridLayout:
    return layout if isinstance(layout, GridLayout) else normalize_layout(layout)


@beartype
def fit_widget_to_layout(widget: Widget, layout: GridLayout) -> Widget:
    """Return a copy of ``widget`` moved and shrunk to fit inside ``layout``.

    A start coordinate beyond the grid is pulled back so the far edge meets
    the boundary. A footprint that still overruns is shrunk. Both spans end
    up in ``[1, 6]``.
    """
    column, row = widget.position.column, widget.position.row
    width, height = widget.size.width, widget.size.height

    if column >= layout.columns:
        column = max(0, layout.columns - width)
    if row >= layout.rows:
        row = max(0, layout.rows - height)

    if column + width > layout.columns:
        width = max(1, layout.columns - column)
    if row + height > layout.rows:
        height = max(1, layout.rows - row)

    width = clamp(width, MIN_SPAN, MAX_SPAN)
    height = clamp(height, MIN_SPAN, MAX_SPAN)

    if (column, row) != (widget.position.column, widget.position.row):
        logger.warning(
            "Moved widget %s from (%d, %d) to (%d, %d) to fit %dx%d grid",
            widget.id,
            widget.position.column,
            widget.position.row,
            column,
            row,
            layout.columns,
            layout.rows,
        )

    return Widget(
        id=widget.id,
        type=widget.type,
        position=GridPosition(column=column, row=row),
        size=GridSize(width=width, height=height),
        content=copy.deepcopy(widget.content),
        config=copy.deepcopy(widget.config),
    )


@beartype
def adjust_widgets_to_layout(widgets: Sequence[Widget], layout: GridLayout) -> list[Widget]:
    """Fit every widget to ``layout`` independently."""
    return [fit_widget_to_layout(widget, layout) for widget in widgets]


@beartype
def update_layout(
    dashboard: DashboardData,
    proposed: LayoutInput,
    clock: Clock | None = None,
) -> DashboardData:
    """Apply a new layout, fitting existing widgets into it.

    ``proposed`` is clamped into valid ranges first. The result has
    ``lastModified`` stamped; every other metadata field is carried over.
    Overlaps created by the adjustment are not corrected.
    """
    layout = _as_layout(proposed)
    widgets = adjust_widgets_to_layout(dashboard.widgets, layout)
    metadata = dashboard.metadata.model_copy(
        update={"last_modified": iso_timestamp(clock)}, deep=True
    )

    logger.info(
        "Layout changed from %dx%d to %dx%d (%d widgets)",
        dashboard.layout.columns,
        dashboard.layout.rows,
        layout.columns,
        layout.rows,
        len(widgets),
    )
    return DashboardData(
        version=dashboard.version,
        layout=layout,
        widgets=widgets,
        metadata=metadata,
    )


@beartype
def update_layout_dimensions(
    dashboard: DashboardData,
    *,
    columns: int | None = None,
    rows: int | None = None,
    cell_width: int | None = None,
    cell_height: int | None = None,
    clock: Clock | None = None,
) -> DashboardData:
    """Change selected layout dimensions, keeping the rest."""
    current = dashboard.layout
    proposed = {
        "columns": current.columns if columns is None else columns,
        "rows": current.rows if rows is None else rows,
        "cellSize": {
            "width": current.cell_size.width if cell_width is None else cell_width,
            "height": current.cell_size.height if cell_height is None else cell_height,
        },
    }
    return update_layout(dashboard, proposed, clock)


@beartype
def resize_grid(
    dashboard: DashboardData,
    direction: ResizeDirection | str,
    clock: Clock | None = None,
) -> DashboardData:
    """Add or remove one column or row.

    An unrecognised direction returns an unchanged copy of ``dashboard``.
    """
    try:
        direction = ResizeDirection(direction)
    except ValueError:
        logger.warning("Ignoring unknown resize direction %r", direction)
        return dashboard.model_copy(deep=True)

    columns, rows = dashboard.layout.columns, dashboard.layout.rows
    if direction is ResizeDirection.ADD_COLUMN:
        columns = min(MAX_COLUMNS, columns + 1)
    elif direction is ResizeDirection.REMOVE_COLUMN:
        columns = max(MIN_COLUMNS, columns - 1)
    elif direction is ResizeDirection.ADD_ROW:
        rows = min(MAX_ROWS, rows + 1)
    else:
        rows = max(MIN_ROWS, rows - 1)

    return update_layout(
        dashboard,
        GridLayout(columns=columns, rows=rows, cell_size=dashboard.layout.cell_size),
        clock,
    )


@beartype
def validate_layout_change(proposed: LayoutInput) -> ValidationReport:
    """List every dimension of ``proposed`` that is out of range.

    Unlike :func:`update_layout` nothing is clamped.
    """
    raw = proposed.to_wire() if isinstance(proposed, GridLayout) else proposed
    cell = raw.get("cellSize")
    cell = cell if isinstance(cell, Mapping) else {}

    def _in_range(value: object, lo: int, hi: int) -> bool:
        return (
            isinstance(value, int | float)
            and not isinstance(value, bool)
            and lo <= value <= hi
        )

    errors: list[str] = []
    if not _in_range(raw.get("columns"), MIN_COLUMNS, MAX_COLUMNS):
        errors.append(f"Columns must be between {MIN_COLUMNS} and {MAX_COLUMNS}")
    if not _in_range(raw.get("rows"), MIN_ROWS, MAX_ROWS):
        errors.append(f"Rows must be between {MIN_ROWS} and {MAX_ROWS}")
    if not _in_range(cell.get("width"), MIN_CELL_DIMENSION, MAX_CELL_DIMENSION):
        errors.append(
            f"Cell width must be between {MIN_CELL_DIMENSION} and {MAX_CELL_DIMENSION} pixels"
        )
    if not _in_range(cell.get("height"), MIN_CELL_DIMENSION, MAX_CELL_DIMENSION):
        errors.append(
            f"Cell height must be between {MIN_CELL_DIMENSION} and {MAX_CELL_DIMENSION} pixels"
        )
    return ValidationReport.from_errors(errors)


@beartype
def get_affected_widgets(
    widgets: Sequence[Widget],
    current_layout: GridLayout,
    new_layout: LayoutInput,
) -> AffectedWidgets:
    """Preview how a layout change would treat each widget.

    A widget whose start cell falls outside the new grid is ``removed``; one
    whose footprint overruns it is ``affected``; the rest are ``unaffected``.
    Nothing is modified.
    """
    layout = _as_layout(new_layout)
    unaffected: list[Widget] = []
    affected: list[Widget] = []
    removed: list[Widget] = []

    for widget in widgets:
        if widget.position.column >= layout.columns or widget.position.row >= layout.rows:
            removed.append(widget)
        elif widget.end_column > layout.columns or widget.end_row > layout.rows:
            affected.append(widget)
        else:
            unaffected.append(widget)

    logger.debug(
        "Previewed %dx%d -> %dx%d: %d unaffected, %d affected, %d removed",
        current_layout.columns,
        current_layout.rows,
        layout.columns,
        layout.rows,
        len(unaffected),
        len(affected),
        len(removed),
    )
    return AffectedWidgets(unaffected=unaffected, affected=affected, removed=removed)


def _signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


@beartype
def create_layout_change_summary(
    current_layout: GridLayout,
    new_layout: LayoutInput,
    affected: AffectedWidgets,
) -> LayoutChangeSummary:
    """Describe a layout change with warnings and recommendations."""
    layout = _as_layout(new_layout)
    column_change = layout.columns - current_layout.columns
    row_change = layout.rows - current_layout.rows

    summary = (
        f"Layout changed from {current_layout.columns}x{current_layout.rows} "
        f"to {layout.columns}x{layout.rows}"
    )
    if column_change:
        summary += f" ({_signed(column_change)} columns)"
    if row_change:
        summary += f" ({_signed(row_change)} rows)"

    warnings: list[str] = []
    if affected.affected:
        warnings.append(f"{len(affected.affected)} widget(s) will be resized to fit new layout")
    if affected.removed:
        warnings.append(
            f"{len(affected.removed)} widget(s) will be removed due to layout constraints"
        )

    recommendations: list[str] = []
    if affected.removed:
        recommendations.append("Consider saving widget data before applying layout changes")
    if column_change < 0 or row_change < 0:
        recommendations.append("Reducing grid size may cause data loss - proceed with caution")

    return LayoutChangeSummary(summary=summary, warnings=warnings, recommendations=recommendations)
