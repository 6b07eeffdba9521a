# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Dashboard document models.

A dashboard is a fixed-size grid (``GridLayout``) holding rectangular
``Widget`` records. Positions are zero-based; a widget's footprint is the
half-open rectangle ``[column, column + width) x [row, row + height)``.
"""

from enum import Enum
from typing import Final

from beartype import beartype
from pydantic import ConfigDict, Field, JsonValue

from .base import BaseModelConfig

MIN_COLUMNS: Final = 1
MAX_COLUMNS: Final = 12
MIN_ROWS: Final = 1
MAX_ROWS: Final = 12
MIN_CELL_DIMENSION: Final = 100
MAX_CELL_DIMENSION: Final = 500
MIN_SPAN: Final = 1
MAX_SPAN: Final = 6

DEFAULT_COLUMNS: Final = 4
DEFAULT_ROWS: Final = 4
DEFAULT_CELL_WIDTH: Final = 200
DEFAULT_CELL_HEIGHT: Final = 150


class WidgetType(str, Enum):
    """Enumeration of widget kinds the renderer understands."""

    TEXT = "text"
    METRIC = "metric"
    CHART = "chart"
    IMAGE = "image"
    TABLE = "table"

    @classmethod
    def values(cls) -> list[str]:
        """Return the wire values of all members."""
        return [item.value for item in cls]


@beartype
class CellSize(BaseModelConfig):
    """Pixel size of one grid cell."""

    width: int = Field(
        ...,
        ge=MIN_CELL_DIMENSION,
        le=MAX_CELL_DIMENSION,
        description="Cell width in pixels",
    )
    height: int = Field(
        ...,
        ge=MIN_CELL_DIMENSION,
        le=MAX_CELL_DIMENSION,
        description="Cell height in pixels",
    )


@beartype
class GridLayout(BaseModelConfig):
    """Grid dimensions and cell size."""

    columns: int = Field(..., ge=MIN_COLUMNS, le=MAX_COLUMNS, description="Number of columns")
    rows: int = Field(..., ge=MIN_ROWS, le=MAX_ROWS, description="Number of rows")
    cell_size: CellSize = Field(..., description="Pixel size of each cell")


@beartype
class GridPosition(BaseModelConfig):
    """Zero-based cell address."""

    column: int = Field(..., ge=0, description="0-based column index (A=0)")
    row: int = Field(..., ge=0, description="0-based row index (1=0)")


@beartype
class GridSize(BaseModelConfig):
    """Number of cells a widget spans."""

    width: int = Field(..., ge=MIN_SPAN, le=MAX_SPAN, description="Columns spanned")
    height: int = Field(..., ge=MIN_SPAN, le=MAX_SPAN, description="Rows spanned")


@beartype
class GridCoordinate(BaseModelConfig):
    """Human-readable cell label such as ``B3``."""

    column: str = Field(..., pattern=r"^[A-Z]+$", description="Column letters")
    row: int = Field(..., ge=1, description="1-based row number")


@beartype
class GridBounds(BaseModelConfig):
    """Inclusive cell range covered by a widget."""

    min_column: int
    max_column: int
    min_row: int
    max_row: int


@beartype
class Widget(BaseModelConfig):
    """A rectangular item placed on the grid.

    ``content`` and ``config`` are opaque to the engine; only the renderer
    interprets them.
    """

    id: str = Field(..., min_length=1, description="Identifier unique within a dashboard")
    type: WidgetType = Field(..., description="Widget kind")
    position: GridPosition = Field(..., description="Top-left cell")
    size: GridSize = Field(..., description="Cells spanned")
    content: dict[str, JsonValue] = Field(
        default_factory=dict, description="Renderer-specific payload"
    )
    config: dict[str, JsonValue] = Field(
        default_factory=dict, description="Renderer-specific styling options"
    )

    @property
    def end_column(self) -> int:
        """Exclusive right edge of the footprint."""
        return self.position.column + self.size.width

    @property
    def end_row(self) -> int:
        """Exclusive bottom edge of the footprint."""
        return self.position.row + self.size.height

    @beartype
    def footprint(self) -> GridBounds:
        """Inclusive bounds of the cells this widget covers."""
        return GridBounds(
            min_column=self.position.column,
            max_column=self.end_column - 1,
            min_row=self.position.row,
            max_row=self.end_row - 1,
        )


@beartype
class DashboardMetadata(BaseModelConfig):
    """Document metadata. Unknown keys are kept as extensions."""

    model_config = ConfigDict(extra="allow")

    created_at: str = Field(..., description="ISO-8601 creation timestamp")
    last_modified: str = Field(..., description="ISO-8601 last modification timestamp")
    theme: str = Field(..., description="Theme name")
    title: str = Field(..., description="Dashboard title")
    description: str = Field(default="", description="Free-form description")


@beartype
class DashboardData(BaseModelConfig):
    """A complete dashboard document.

    Widget order is display order only; it carries no placement meaning.
    """

    version: str = Field(..., min_length=1, description="Document format version")
    layout: GridLayout = Field(..., description="Grid layout")
    widgets: list[Widget] = Field(default_factory=list, description="Placed widgets")
    metadata: DashboardMetadata = Field(..., description="Document metadata")

    @beartype
    def get_widget(self, widget_id: str) -> Widget | None:
        """Return the first widget with ``widget_id``, if any."""
        for widget in self.widgets:
            if widget.id == widget_id:
                return widget
        return None
