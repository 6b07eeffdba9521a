# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Normalization of untrusted dashboard values into typed models.

Two policies share one set of clamping helpers:

* ``normalize_dashboard`` is strict about shape. A missing or wrongly typed
  required field raises :class:`SchemaError`. Out-of-range numbers are still
  clamped, never rejected.
* ``normalize_layout``, ``normalize_widgets`` and ``normalize_metadata`` are
  lenient. Every field may be absent or invalid and is defaulted; only a
  top-level value of the wrong kind raises :class:`ShapeError`.

Both operate on already-parsed JSON values. Text entry points live in
:mod:`gridboard.services.serialization`.
"""

import copy
import math
from collections.abc import Mapping
from typing import Any, Final

from beartype import beartype

from ..core.clock import Clock, iso_timestamp
from ..core.config import get_settings
from ..core.logging_utils import get_logger
from ..errors import SchemaError, ShapeError
from ..models.dashboard import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
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
    DashboardMetadata,
    GridLayout,
    GridPosition,
    GridSize,
    Widget,
    WidgetType,
)

logger = get_logger(__name__)

_METADATA_FIELDS: Final = frozenset(
    {
        "createdAt",
        "created_at",
        "lastModified",
        "last_modified",
        "theme",
        "title",
        "description",
    }
)


# --- Clamping helpers -------------------------------------------------------


@beartype
def clamp(value: int, lo: int, hi: int | None = None) -> int:
    """Force ``value`` into ``[lo, hi]``; ``hi=None`` means unbounded."""
    if value < lo:
        return lo
    if hi is not None and value > hi:
        return hi
    return value


def _to_number(raw: object) -> float | int | None:
    # bool is an int subclass but never a grid number
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return None if math.isnan(raw) else raw
    if isinstance(raw, str):
        try:
            number = float(raw.strip())
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


@beartype
def coerce_clamped(
    raw: object,
    *,
    lo: int,
    hi: int | None,
    default: int,
    field: str = "value",
) -> int:
    """Read ``raw`` as an integer clamped into ``[lo, hi]``.

    Missing or non-numeric input yields ``default``. Fractions are truncated
    toward zero and infinities land on the nearest bound.
    """
    number = _to_number(raw)
    if number is None:
        if raw is not None:
            logger.debug("Defaulted %s: %r is not a number, using %d", field, raw, default)
        return default

    if math.isinf(number):
        result = lo if number < 0 else (hi if hi is not None else lo)
    else:
        result = clamp(int(number), lo, hi)

    if result != number:
        logger.debug("Clamped %s from %r to %d", field, raw, result)
    return result


def _mapping_or_empty(raw: object) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else {}


@beartype
def clamp_layout(raw: Mapping[str, Any]) -> GridLayout:
    """Build a layout from a mapping, clamping every dimension into range."""
    cell = _mapping_or_empty(raw.get("cellSize"))
    return GridLayout(
        columns=coerce_clamped(
            raw.get("columns"),
            lo=MIN_COLUMNS,
            hi=MAX_COLUMNS,
            default=DEFAULT_COLUMNS,
            field="layout.columns",
        ),
        rows=coerce_clamped(
            raw.get("rows"),
            lo=MIN_ROWS,
            hi=MAX_ROWS,
            default=DEFAULT_ROWS,
            field="layout.rows",
        ),
        cell_size=CellSize(
            width=coerce_clamped(
                cell.get("width"),
                lo=MIN_CELL_DIMENSION,
                hi=MAX_CELL_DIMENSION,
                default=DEFAULT_CELL_WIDTH,
                field="layout.cellSize.width",
            ),
            height=coerce_clamped(
                cell.get("height"),
                lo=MIN_CELL_DIMENSION,
                hi=MAX_CELL_DIMENSION,
                default=DEFAULT_CELL_HEIGHT,
                field="layout.cellSize.height",
            ),
        ),
    )


@beartype
def clamp_position(raw: object, *, field: str = "position") -> GridPosition:
    """Build a non-negative position; non-mapping input yields ``A1``."""
    values = _mapping_or_empty(raw)
    return GridPosition(
        column=coerce_clamped(values.get("column"), lo=0, hi=None, default=0, field=f"{field}.column"),
        row=coerce_clamped(values.get("row"), lo=0, hi=None, default=0, field=f"{field}.row"),
    )


@beartype
def clamp_size(raw: object, *, field: str = "size") -> GridSize:
    """Build a size with both spans in ``[1, 6]``."""
    values = _mapping_or_empty(raw)
    return GridSize(
        width=coerce_clamped(
            values.get("width"), lo=MIN_SPAN, hi=MAX_SPAN, default=MIN_SPAN, field=f"{field}.width"
        ),
        height=coerce_clamped(
            values.get("height"), lo=MIN_SPAN, hi=MAX_SPAN, default=MIN_SPAN, field=f"{field}.height"
        ),
    )


def _payload(raw: object) -> dict[str, Any]:
    # Widgets never share payload containers with their source document
    return copy.deepcopy(dict(raw)) if isinstance(raw, Mapping) else {}


def _build_widget(
    index: int,
    widget_id: str,
    widget_type: WidgetType,
    raw: Mapping[str, Any],
) -> Widget:
    path = f"widgets[{index}]"
    return Widget(
        id=widget_id,
        type=widget_type,
        position=clamp_position(raw.get("position"), field=f"{path}.position"),
        size=clamp_size(raw.get("size"), field=f"{path}.size"),
        content=_payload(raw.get("content")),
        config=_payload(raw.get("config")),
    )


def _non_empty_str(raw: object) -> str | None:
    return raw if isinstance(raw, str) and raw else None


# --- Lenient policy ---------------------------------------------------------


@beartype
def normalize_layout(value: object) -> GridLayout:
    """Leniently normalize a layout object."""
    if not isinstance(value, Mapping):
        raise ShapeError("Invalid layout data: must be an object")
    return clamp_layout(value)


@beartype
def normalize_widget(value: object, index: int = 0) -> Widget:
    """Leniently normalize one widget, defaulting anything missing."""
    if not isinstance(value, Mapping):
        raise ShapeError(f"Invalid widget at index {index}: must be an object", path=f"widgets[{index}]")

    widget_id = _non_empty_str(value.get("id")) or f"widget-{index}"
    raw_type = value.get("type")
    try:
        widget_type = WidgetType(raw_type)
    except ValueError:
        if raw_type is not None:
            logger.debug("Widget %s has unknown type %r, using text", widget_id, raw_type)
        widget_type = WidgetType.TEXT

    return _build_widget(index, widget_id, widget_type, value)


@beartype
def normalize_widgets(value: object) -> list[Widget]:
    """Leniently normalize a widget array."""
    if not isinstance(value, list):
        raise ShapeError("Invalid widgets data: must be an array")
    return [normalize_widget(entry, index) for index, entry in enumerate(value)]


@beartype
def normalize_metadata(value: object, clock: Clock | None = None) -> DashboardMetadata:
    """Leniently normalize document metadata.

    Missing timestamps are stamped from ``clock``; unknown keys are kept as
    extensions.
    """
    if not isinstance(value, Mapping):
        raise ShapeError("Invalid metadata: must be an object")

    settings = get_settings()
    now: str | None = None

    def _timestamp(key: str) -> str:
        nonlocal now
        found = _non_empty_str(value.get(key))
        if found is not None:
            return found
        if now is None:
            now = iso_timestamp(clock)
        return now

    description = value.get("description")
    extensions = {
        key: copy.deepcopy(item)
        for key, item in value.items()
        if isinstance(key, str) and key not in _METADATA_FIELDS
    }

    return DashboardMetadata(
        created_at=_timestamp("createdAt"),
        last_modified=_timestamp("lastModified"),
        theme=_non_empty_str(value.get("theme")) or settings.default_theme,
        title=_non_empty_str(value.get("title")) or settings.default_title,
        description=description if isinstance(description, str) else "",
        **extensions,
    )


# --- Strict policy ----------------------------------------------------------


def _strict_widget(value: object, index: int) -> Widget:
    path = f"widgets[{index}]"
    if not isinstance(value, Mapping):
        raise SchemaError(path, "must be an object")

    widget_id = _non_empty_str(value.get("id"))
    if widget_id is None:
        raise SchemaError(f"{path}.id", "is missing or not a string")

    raw_type = value.get("type")
    if not isinstance(raw_type, str) or not raw_type:
        raise SchemaError(f"{path}.type", "is missing or not a string", widget_ids=(widget_id,))
    try:
        widget_type = WidgetType(raw_type)
    except ValueError:
        raise SchemaError(
            f"{path}.type",
            f"must be one of {', '.join(WidgetType.values())}, got {raw_type!r}",
            widget_ids=(widget_id,),
        ) from None

    for field in ("position", "size"):
        if not isinstance(value.get(field), Mapping):
            raise SchemaError(f"{path}.{field}", "is missing or not an object", widget_ids=(widget_id,))

    return _build_widget(index, widget_id, widget_type, value)


@beartype
def normalize_dashboard(data: object, clock: Clock | None = None) -> DashboardData:
    """Strictly validate the shape of a dashboard and normalize its values.

    Raises:
        ShapeError: ``data`` is not an object.
        SchemaError: a required field is missing or has the wrong type.
    """
    if not isinstance(data, Mapping):
        raise ShapeError("Invalid dashboard data: must be an object")

    version = _non_empty_str(data.get("version"))
    if version is None:
        raise SchemaError("version", "is missing or not a string")
    if not isinstance(data.get("layout"), Mapping):
        raise SchemaError("layout", "is missing or not an object")
    if not isinstance(data.get("widgets"), list):
        raise SchemaError("widgets", "must be an array")
    if not isinstance(data.get("metadata"), Mapping):
        raise SchemaError("metadata", "is missing or not an object")

    return DashboardData(
        version=version,
        layout=clamp_layout(data["layout"]),
        widgets=[_strict_widget(entry, index) for index, entry in enumerate(data["widgets"])],
        metadata=normalize_metadata(data["metadata"], clock),
    )
