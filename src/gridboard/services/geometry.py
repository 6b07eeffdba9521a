# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Bounds and overlap checks for widgets placed on a grid.

``validate_dashboard`` is the strict, fail-fast pass. It checks the document
shape, then layout ranges, then each widget's fields and bounds, and finally
every widget pair for overlap, stopping at the first problem found.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from beartype import beartype

from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..errors import (
    BoundsViolation,
    DashboardValidationError,
    OverlapViolation,
    RangeViolation,
    SchemaError,
    ShapeError,
)
from ..models.dashboard import (
    MAX_CELL_DIMENSION,
    MAX_COLUMNS,
    MAX_ROWS,
    MAX_SPAN,
    MIN_CELL_DIMENSION,
    MIN_COLUMNS,
    MIN_ROWS,
    MIN_SPAN,
    CellSize,
    DashboardData,
    GridBounds,
    GridLayout,
    GridPosition,
    GridSize,
    Widget,
    WidgetType,
)
from .normalization import normalize_dashboard

logger = get_logger(__name__)


def _footprint_fits(column: int, row: int, width: int, height: int, layout: GridLayout) -> bool:
    return (
        column >= 0
        and row >= 0
        and column + width <= layout.columns
        and row + height <= layout.rows
    )


@beartype
def is_valid_position(position: GridPosition, layout: GridLayout) -> bool:
    """Check that a single cell lies inside the grid. Widget size is ignored."""
    return 0 <= position.column < layout.columns and 0 <= position.row < layout.rows


@beartype
def is_valid_widget_placement(widget: Widget, layout: GridLayout) -> bool:
    """Check that the widget's whole footprint lies inside the grid."""
    return _footprint_fits(
        widget.position.column,
        widget.position.row,
        widget.size.width,
        widget.size.height,
        layout,
    )


@beartype
def get_widget_bounds(widget: Widget) -> GridBounds:
    """Inclusive start and end cells of a widget."""
    return widget.footprint()


def _intersects(
    position_a: GridPosition, size_a: GridSize, position_b: GridPosition, size_b: GridSize
) -> bool:
    return not (
        position_a.column + size_a.width <= position_b.column
        or position_b.column + size_b.width <= position_a.column
        or position_a.row + size_a.height <= position_b.row
        or position_b.row + size_b.height <= position_a.row
    )


@beartype
def do_overlap(a: Widget, b: Widget) -> bool:
    """Check whether two widgets' footprints intersect.

    Widgets sharing an id are treated as the same widget and never overlap.
    """
    if a.id == b.id:
        return False
    return _intersects(a.position, a.size, b.position, b.size)


@beartype
def is_area_occupied(
    position: GridPosition,
    size: GridSize,
    widgets: Sequence[Widget],
    exclude_id: str | None = None,
) -> bool:
    """Check whether any widget (other than ``exclude_id``) covers the area."""
    return any(
        _intersects(position, size, widget.position, widget.size)
        for widget in widgets
        if exclude_id is None or widget.id != exclude_id
    )


@beartype
def find_overlaps(widgets: Sequence[Widget]) -> list[tuple[str, str]]:
    """Return every overlapping id pair, in list order."""
    return [
        (first.id, second.id)
        for index, first in enumerate(widgets)
        for second in widgets[index + 1 :]
        if do_overlap(first, second)
    ]


@beartype
def find_duplicate_ids(widgets: Sequence[Widget]) -> list[str]:
    """Return ids used by more than one widget, in order of first repeat."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for widget in widgets:
        if widget.id in seen and widget.id not in duplicates:
            duplicates.append(widget.id)
        seen.add(widget.id)
    return duplicates


# --- Strict validation ------------------------------------------------------


def _require_int(raw: object, path: str, widget_ids: tuple[str, ...] = ()) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise SchemaError(path, "must be a number", widget_ids=widget_ids)
    if isinstance(raw, float) and (not math.isfinite(raw) or not raw.is_integer()):
        raise SchemaError(path, f"must be a whole number, got {raw!r}", widget_ids=widget_ids)
    return int(raw)


def _require_range(
    value: int, lo: int, hi: int, path: str, widget_ids: tuple[str, ...] = ()
) -> None:
    if not lo <= value <= hi:
        raise RangeViolation(
            f"{path} must be between {lo} and {hi}, got {value}",
            path=path,
            widget_ids=widget_ids,
        )


def _check_document_shape(data: object) -> None:
    if not isinstance(data, Mapping):
        raise ShapeError("Dashboard data must be an object")
    version = data.get("version")
    if not isinstance(version, str) or not version:
        raise SchemaError("version", "is missing or not a string")
    if not isinstance(data.get("layout"), Mapping):
        raise SchemaError("layout", "is missing or not an object")
    if not isinstance(data.get("widgets"), list):
        raise SchemaError("widgets", "must be an array")
    if not isinstance(data.get("metadata"), Mapping):
        raise SchemaError("metadata", "is missing or not an object")


def _check_layout_ranges(raw: Mapping[str, Any]) -> GridLayout:
    columns = _require_int(raw.get("columns"), "layout.columns")
    _require_range(columns, MIN_COLUMNS, MAX_COLUMNS, "layout.columns")
    rows = _require_int(raw.get("rows"), "layout.rows")
    _require_range(rows, MIN_ROWS, MAX_ROWS, "layout.rows")

    cell = raw.get("cellSize")
    if not isinstance(cell, Mapping):
        raise SchemaError("layout.cellSize", "is missing or not an object")
    width = _require_int(cell.get("width"), "layout.cellSize.width")
    _require_range(width, MIN_CELL_DIMENSION, MAX_CELL_DIMENSION, "layout.cellSize.width")
    height = _require_int(cell.get("height"), "layout.cellSize.height")
    _require_range(height, MIN_CELL_DIMENSION, MAX_CELL_DIMENSION, "layout.cellSize.height")

    return GridLayout(columns=columns, rows=rows, cell_size=CellSize(width=width, height=height))


def _check_raw_widget(raw: object, index: int, layout: GridLayout) -> None:
    path = f"widgets[{index}]"
    if not isinstance(raw, Mapping):
        raise SchemaError(path, "must be an object")

    widget_id = raw.get("id")
    if not isinstance(widget_id, str) or not widget_id:
        raise SchemaError(f"{path}.id", "is missing or not a string")
    ids = (widget_id,)

    widget_type = raw.get("type")
    if widget_type not in WidgetType.values():
        raise SchemaError(
            f"{path}.type",
            f"must be one of {', '.join(WidgetType.values())}",
            widget_ids=ids,
        )

    position = raw.get("position")
    if not isinstance(position, Mapping):
        raise SchemaError(f"{path}.position", "is missing or not an object", widget_ids=ids)
    size = raw.get("size")
    if not isinstance(size, Mapping):
        raise SchemaError(f"{path}.size", "is missing or not an object", widget_ids=ids)

    column = _require_int(position.get("column"), f"{path}.position.column", ids)
    row = _require_int(position.get("row"), f"{path}.position.row", ids)
    width = _require_int(size.get("width"), f"{path}.size.width", ids)
    _require_range(width, MIN_SPAN, MAX_SPAN, f"{path}.size.width", ids)
    height = _require_int(size.get("height"), f"{path}.size.height", ids)
    _require_range(height, MIN_SPAN, MAX_SPAN, f"{path}.size.height", ids)

    if not _footprint_fits(column, row, width, height, layout):
        raise BoundsViolation(
            f"Widget {widget_id} is placed outside grid bounds", path=path, widget_ids=ids
        )


def _check_overlaps(widgets: Sequence[Widget]) -> None:
    for index, first in enumerate(widgets):
        for second in widgets[index + 1 :]:
            if do_overlap(first, second):
                raise OverlapViolation(
                    f"Widgets {first.id} and {second.id} overlap",
                    widget_ids=(first.id, second.id),
                )


@beartype
def validate_dashboard(data: object) -> DashboardData:
    """Strictly validate a dashboard, stopping at the first problem.

    ``data`` may be a typed :class:`DashboardData` or an untrusted mapping.
    Returns the typed document on success.

    Raises:
        ShapeError: ``data`` is not an object.
        SchemaError: a required field is missing or has the wrong type.
        RangeViolation: a layout or size value is outside its range.
        BoundsViolation: a widget extends outside the grid.
        OverlapViolation: two widgets overlap; the first pair in list order.
    """
    if isinstance(data, DashboardData):
        dashboard = data
        for index, widget in enumerate(dashboard.widgets):
            if not is_valid_widget_placement(widget, dashboard.layout):
                raise BoundsViolation(
                    f"Widget {widget.id} is placed outside grid bounds",
                    path=f"widgets[{index}]",
                    widget_ids=(widget.id,),
                )
    else:
        _check_document_shape(data)
        layout = _check_layout_ranges(data["layout"])
        for index, raw in enumerate(data["widgets"]):
            _check_raw_widget(raw, index, layout)
        dashboard = normalize_dashboard(data)

    _check_overlaps(dashboard.widgets)
    return dashboard


@beartype
def check_dashboard(data: object) -> Result[DashboardData, DashboardValidationError]:
    """Run :func:`validate_dashboard` and wrap the outcome in a Result."""
    try:
        return Ok(validate_dashboard(data))
    except DashboardValidationError as exc:
        logger.debug("Dashboard failed validation: %s", exc.message)
        return Err(exc)
