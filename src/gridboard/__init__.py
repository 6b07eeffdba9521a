# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""GridBoard: grid placement, validation and layout migration for dashboards."""

from .errors import (
    BoundsViolation,
    DashboardError,
    DashboardValidationError,
    EncodeError,
    InvalidFormat,
    OverlapViolation,
    ParseError,
    RangeViolation,
    SchemaError,
    ShapeError,
)
from .models import (
    AffectedWidgets,
    CellSize,
    DashboardBackup,
    DashboardData,
    DashboardMetadata,
    GridBounds,
    GridCoordinate,
    GridLayout,
    GridPosition,
    GridSize,
    LayoutChangeSummary,
    ValidationReport,
    Widget,
    WidgetType,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "DashboardError",
    "ParseError",
    "ShapeError",
    "SchemaError",
    "EncodeError",
    "InvalidFormat",
    "DashboardValidationError",
    "RangeViolation",
    "BoundsViolation",
    "OverlapViolation",
    # Models
    "CellSize",
    "GridLayout",
    "GridPosition",
    "GridSize",
    "GridCoordinate",
    "GridBounds",
    "Widget",
    "WidgetType",
    "DashboardMetadata",
    "DashboardData",
    "ValidationReport",
    "AffectedWidgets",
    "LayoutChangeSummary",
    "DashboardBackup",
]
