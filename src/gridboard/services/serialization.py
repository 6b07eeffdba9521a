# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""JSON text entry points for dashboard documents and their fragments."""

import json
import math
from collections.abc import Sequence
from typing import Any

from beartype import beartype

from ..core.clock import Clock, filename_safe_timestamp
from ..core.config import get_settings
from ..core.logging_utils import get_logger
from ..errors import DashboardError, EncodeError, ParseError
from ..models.dashboard import DashboardData, DashboardMetadata, GridLayout, Widget
from ..models.reports import DashboardBackup, ValidationReport
from .geometry import validate_dashboard
from .normalization import (
    normalize_dashboard,
    normalize_layout,
    normalize_metadata,
    normalize_widgets,
)

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Invalid JSON: {name} is not a valid JSON value")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ParseError(f"Invalid JSON: number {literal} is out of range")
    return value


@beartype
def load_json(text: str | bytes) -> Any:
    """Parse JSON text, rejecting NaN/Infinity literals and overflowing numbers."""
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg} at line {exc.lineno} column {exc.colno}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid JSON: input is not UTF-8 ({exc.reason})") from exc


def _dump(payload: Any, what: str, *, compact: bool = False) -> str:
    try:
        if compact:
            return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        return json.dumps(
            payload, indent=get_settings().json_indent, ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Failed to serialize {what}: {exc}") from exc


# --- Whole documents --------------------------------------------------------


@beartype
def serialize_dashboard(dashboard: DashboardData) -> str:
    """Serialize a dashboard to pretty-printed JSON."""
    return _dump(dashboard.to_wire(), "dashboard")


@beartype
def serialize_dashboard_compact(dashboard: DashboardData) -> str:
    """Serialize a dashboard to JSON without whitespace."""
    return _dump(dashboard.to_wire(), "dashboard", compact=True)


@beartype
def deserialize_dashboard(text: str | bytes, clock: Clock | None = None) -> DashboardData:
    """Parse and strictly normalize a dashboard document.

    Raises:
        ParseError: ``text`` is not valid JSON.
        ShapeError: the document is not a JSON object.
        SchemaError: a required field is missing or has the wrong type.
    """
    return normalize_dashboard(load_json(text), clock)


deserialize_dashboard_compact = deserialize_dashboard


# --- Fragments --------------------------------------------------------------


@beartype
def serialize_layout(layout: GridLayout) -> str:
    """Serialize only a layout."""
    return _dump(layout.to_wire(), "layout")


@beartype
def deserialize_layout(text: str | bytes) -> GridLayout:
    """Parse a layout, defaulting and clamping every field."""
    return normalize_layout(load_json(text))


@beartype
def serialize_widgets(widgets: Sequence[Widget]) -> str:
    """Serialize only a widget list."""
    return _dump([widget.to_wire() for widget in widgets], "widgets")


@beartype
def deserialize_widgets(text: str | bytes) -> list[Widget]:
    """Parse a widget array, defaulting and clamping every field."""
    return normalize_widgets(load_json(text))


@beartype
def serialize_metadata(metadata: DashboardMetadata) -> str:
    """Serialize only the metadata."""
    return _dump(metadata.to_wire(), "metadata")


@beartype
def deserialize_metadata(text: str | bytes, clock: Clock | None = None) -> DashboardMetadata:
    """Parse metadata, stamping missing timestamps from ``clock``."""
    return normalize_metadata(load_json(text), clock)


# --- Checks and backups -----------------------------------------------------


@beartype
def validate_dashboard_json(text: str | bytes, clock: Clock | None = None) -> ValidationReport:
    """Run the full strict pipeline over ``text`` without raising.

    Parsing, shape checks, normalization and the bounds/overlap pass all run;
    the first failure is reported in ``errors``.
    """
    try:
        validate_dashboard(deserialize_dashboard(text, clock))
    except DashboardError as exc:
        logger.debug("Dashboard JSON rejected: %s", exc.message)
        return ValidationReport.from_errors([exc.message])
    return ValidationReport.from_errors([])


@beartype
def create_backup(dashboard: DashboardData, clock: Clock | None = None) -> DashboardBackup:
    """Serialize ``dashboard`` with a timestamped backup filename."""
    timestamp = filename_safe_timestamp(clock)
    backup = DashboardBackup(
        data=serialize_dashboard(dashboard),
        timestamp=timestamp,
        filename=f"{get_settings().backup_prefix}-{timestamp}.json",
    )
    logger.info("Created dashboard backup %s", backup.filename)
    return backup
