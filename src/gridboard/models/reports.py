# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Non-throwing result records returned by checks and previews."""

from beartype import beartype
from pydantic import Field

from .base import BaseModelConfig
from .dashboard import Widget


@beartype
class ValidationReport(BaseModelConfig):
    """Outcome of a user-facing validation check."""

    is_valid: bool = Field(..., description="True when no errors were found")
    errors: list[str] = Field(default_factory=list, description="Error messages")

    @classmethod
    @beartype
    def from_errors(cls, errors: list[str]) -> "ValidationReport":
        """Build a report whose validity follows from ``errors``."""
        return cls(is_valid=not errors, errors=errors)


@beartype
class AffectedWidgets(BaseModelConfig):
    """Widgets classified by the impact of a layout change."""

    unaffected: list[Widget] = Field(default_factory=list)
    affected: list[Widget] = Field(default_factory=list)
    removed: list[Widget] = Field(default_factory=list)


@beartype
class LayoutChangeSummary(BaseModelConfig):
    """Human-readable description of a layout change."""

    summary: str
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


@beartype
class DashboardBackup(BaseModelConfig):
    """Serialized dashboard ready to be written to a backup file."""

    data: str = Field(..., description="Pretty-printed dashboard JSON")
    timestamp: str = Field(..., description="Filesystem-safe ISO timestamp")
    filename: str = Field(..., description="Suggested backup filename")
