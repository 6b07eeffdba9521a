# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Base Pydantic model configuration for all dashboard models.

This module provides the foundation for every record the engine hands out,
enforcing immutability, strict field sets and the camelCase wire names used
by dashboard documents.
"""

from typing import Any

from beartype import beartype
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@beartype
class BaseModelConfig(BaseModel):
    """Base model with strict configuration for all dashboard records.

    Enforces:
    - Immutability (frozen=True)
    - No extra fields allowed (extra="forbid")
    - Validation on assignment
    - camelCase aliases on the wire, snake_case attributes in Python
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        validate_default=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @beartype
    def to_wire(self) -> dict[str, Any]:
        """Dump to a plain dict keyed by wire (camelCase) names."""
        return self.model_dump(by_alias=True)
