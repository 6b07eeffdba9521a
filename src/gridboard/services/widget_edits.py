# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Apply widget add / update / remove intents to a dashboard.

Each edit returns a new document or an error message; the input document is
never modified. Accepted edits keep every widget inside the grid, free of
overlaps and uniquely identified.
"""

import copy
from collections.abc import Sequence
from typing import Any

from beartype import beartype

from ..core.clock import Clock, iso_timestamp
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.dashboard import (
    DashboardData,
    GridPosition,
    GridSize,
    Widget,
    WidgetType,
)
from .coordinates import format_position
from .geometry import do_overlap, is_valid_widget_placement

logger = get_logger(__name__)


def _with_widgets(
    dashboard: DashboardData, widgets: list[Widget], clock: Clock | None
) -> DashboardData:
    return DashboardData(
        version=dashboard.version,
        layout=dashboard.layout,
        widgets=widgets,
        metadata=dashboard.metadata.model_copy(
            update={"last_modified": iso_timestamp(clock)}, deep=True
        ),
    )


def _placement_error(
    candidate: Widget, dashboard: DashboardData, others: Sequence[Widget]
) -> str | None:
    if not is_valid_widget_placement(candidate, dashboard.layout):
        return (
            f"Widget {candidate.id} at {format_position(candidate.position)} "
            f"is placed outside grid bounds"
        )
    for other in others:
        if do_overlap(candidate, other):
            return f"Widgets {candidate.id} and {other.id} overlap"
    return None


def _index_of(dashboard: DashboardData, widget_id: str) -> int | None:
    for index, widget in enumerate(dashboard.widgets):
        if widget.id == widget_id:
            return index
    return None


@beartype
def add_widget(
    dashboard: DashboardData, widget: Widget, clock: Clock | None = None
) -> Result[DashboardData, str]:
    """Append ``widget`` if its id is new and it fits without overlapping."""
    if _index_of(dashboard, widget.id) is not None:
        return Err(f"Widget {widget.id} already exists")

    error = _placement_error(widget, dashboard, dashboard.widgets)
    if error is not None:
        logger.debug("Rejected widget add: %s", error)
        return Err(error)

    widgets = [*dashboard.widgets, widget.model_copy(deep=True)]
    return Ok(_with_widgets(dashboard, widgets, clock))


@beartype
def update_widget(
    dashboard: DashboardData,
    widget_id: str,
    *,
    widget_type: WidgetType | None = None,
    position: GridPosition | None = None,
    size: GridSize | None = None,
    content: dict[str, Any] | None = None,
    config: dict[str, Any] | None = None,
    clock: Clock | None = None,
) -> Result[DashboardData, str]:
    """Replace selected fields of an existing widget.

    The updated widget must still fit the grid and must not overlap any
    other widget.
    """
    index = _index_of(dashboard, widget_id)
    if index is None:
        return Err(f"Widget {widget_id} not found")

    current = dashboard.widgets[index]
    updated = Widget(
        id=current.id,
        type=current.type if widget_type is None else widget_type,
        position=current.position if position is None else position,
        size=current.size if size is None else size,
        content=copy.deepcopy(current.content if content is None else content),
        config=copy.deepcopy(current.config if config is None else config),
    )

    others = [widget for i, widget in enumerate(dashboard.widgets) if i != index]
    error = _placement_error(updated, dashboard, others)
    if error is not None:
        logger.debug("Rejected widget update: %s", error)
        return Err(error)

    widgets = [
        updated if i == index else widget.model_copy(deep=True)
        for i, widget in enumerate(dashboard.widgets)
    ]
    return Ok(_with_widgets(dashboard, widgets, clock))


@beartype
def remove_widget(
    dashboard: DashboardData, widget_id: str, clock: Clock | None = None
) -> Result[DashboardData, str]:
    """Remove the widget with ``widget_id``."""
    if _index_of(dashboard, widget_id) is None:
        return Err(f"Widget {widget_id} not found")

    widgets = [
        widget.model_copy(deep=True) for widget in dashboard.widgets if widget.id != widget_id
    ]
    return Ok(_with_widgets(dashboard, widgets, clock))
