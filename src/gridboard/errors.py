# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Error hierarchy for dashboard parsing, validation and encoding.

Parse, shape and schema errors are fatal to the operation that detects them.
Range, bounds and overlap violations are fatal only on the strict validation
path; elsewhere they are clamped or reported.
"""

from typing import Any

from beartype import beartype


class DashboardError(Exception):
    """Base class for every error raised by the layout engine."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        widget_ids: tuple[str, ...] = (),
    ) -> None:
        """Initialize dashboard error with optional field path and widget ids."""
        self.message = message
        self.path = path
        self.widget_ids = widget_ids
        super().__init__(message)

    @beartype
    def to_dict(self) -> dict[str, Any]:
        """Convert to a structured error payload."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "message": self.message,
        }
        if self.path is not None:
            payload["path"] = self.path
        if self.widget_ids:
            payload["widgetIds"] = list(self.widget_ids)
        return payload


class ParseError(DashboardError):
    """Input text is not valid JSON."""


class EncodeError(DashboardError):
    """A document holds values that JSON cannot represent."""


class InvalidFormat(DashboardError, ValueError):
    """A coordinate or column label is malformed."""


class DashboardValidationError(DashboardError):
    """Base class for documents rejected by strict validation."""


class ShapeError(DashboardValidationError):
    """Top-level value is not the object or array the operation requires."""


class SchemaError(DashboardValidationError):
    """A required field is missing or has the wrong primitive type."""

    def __init__(self, path: str, reason: str, *, widget_ids: tuple[str, ...] = ()) -> None:
        """Initialize schema error for ``path``."""
        super().__init__(f"Invalid dashboard data: {path} {reason}", path=path, widget_ids=widget_ids)


class RangeViolation(DashboardValidationError):
    """A numeric field is outside its declared range."""


class BoundsViolation(DashboardValidationError):
    """A widget footprint extends outside the grid."""


class OverlapViolation(DashboardValidationError):
    """Two widget footprints intersect."""
