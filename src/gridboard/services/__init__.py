# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Dashboard layout engine service layer."""

from gridboard.core.result_types import Err, Ok, Result

from .coordinates import (
    coordinate_to_position,
    format_coordinate,
    format_position,
    index_to_letter,
    letter_to_index,
    parse_coordinate,
    parse_position,
    position_to_coordinate,
)
from .factory import (
    create_dashboard_with_layout,
    create_dashboard_with_widgets,
    create_default_dashboard,
    create_sample_dashboard,
    generate_widget_id,
)
from .geometry import (
    check_dashboard,
    do_overlap,
    find_duplicate_ids,
    find_overlaps,
    get_widget_bounds,
    is_area_occupied,
    is_valid_position,
    is_valid_widget_placement,
    validate_dashboard,
)
from .layout_migration import (
    ResizeDirection,
    adjust_widgets_to_layout,
    create_layout_change_summary,
    fit_widget_to_layout,
    get_affected_widgets,
    resize_grid,
    update_layout,
    update_layout_dimensions,
    validate_layout_change,
)
from .normalization import (
    normalize_dashboard,
    normalize_layout,
    normalize_metadata,
    normalize_widget,
    normalize_widgets,
)
from .serialization import (
    create_backup,
    deserialize_dashboard,
    deserialize_dashboard_compact,
    deserialize_layout,
    deserialize_metadata,
    deserialize_widgets,
    serialize_dashboard,
    serialize_dashboard_compact,
    serialize_layout,
    serialize_metadata,
    serialize_widgets,
    validate_dashboard_json,
)
from .widget_edits import add_widget, remove_widget, update_widget

__all__ = [
    "Result",
    "Ok",
    "Err",
    # Coordinates
    "index_to_letter",
    "letter_to_index",
    "position_to_coordinate",
    "coordinate_to_position",
    "format_coordinate",
    "parse_coordinate",
    "format_position",
    "parse_position",
    # Geometry
    "is_valid_position",
    "is_valid_widget_placement",
    "do_overlap",
    "get_widget_bounds",
    "is_area_occupied",
    "find_overlaps",
    "find_duplicate_ids",
    "validate_dashboard",
    "check_dashboard",
    # Normalization
    "normalize_dashboard",
    "normalize_layout",
    "normalize_widget",
    "normalize_widgets",
    "normalize_metadata",
    # Serialization
    "serialize_dashboard",
    "serialize_dashboard_compact",
    "deserialize_dashboard",
    "deserialize_dashboard_compact",
    "serialize_layout",
    "deserialize_layout",
    "serialize_widgets",
    "deserialize_widgets",
    "serialize_metadata",
    "deserialize_metadata",
    "validate_dashboard_json",
    "create_backup",
    # Layout migration
    "ResizeDirection",
    "update_layout",
    "update_layout_dimensions",
    "resize_grid",
    "fit_widget_to_layout",
    "adjust_widgets_to_layout",
    "get_affected_widgets",
    "create_layout_change_summary",
    "validate_layout_change",
    # Factory
    "create_default_dashboard",
    "create_dashboard_with_layout",
    "create_dashboard_with_widgets",
    "create_sample_dashboard",
    "generate_widget_id",
    # Widget edits
    "add_widget",
    "update_widget",
    "remove_widget",
]
