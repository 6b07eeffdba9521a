"""Dashboard models package for the GridBoard layout engine.

This package exports all Pydantic models with strict validation and
immutability for dashboard documents and the reports derived from them.
"""

from .base import BaseModelConfig
from .dashboard import (
    CellSize,
    DashboardData,
    DashboardMetadata,
    GridBounds,
    GridCoordinate,
    GridLayout,
    GridPosition,
    GridSize,
    Widget,
    WidgetType,
)
from .reports import (
    AffectedWidgets,
    DashboardBackup,
    LayoutChangeSummary,
    ValidationReport,
)

__all__ = [
    # Base models
    "BaseModelConfig",
    # Document models
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
    # Reports
    "ValidationReport",
    "AffectedWidgets",
    "LayoutChangeSummary",
    "DashboardBackup",
]
