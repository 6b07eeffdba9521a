# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Result types for operations whose failure is an expected outcome.

Widget edits and ``check_dashboard`` return ``Ok(document)`` or ``Err(reason)``
instead of raising.
"""

from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from attrs import frozen
from beartype import beartype

T = TypeVar("T")
E = TypeVar("E")


@frozen
class Ok(Generic[T]):
    """Successful outcome holding the produced value."""

    value: T

    @beartype
    def is_ok(self) -> bool:
        """Always True."""
        return True

    @beartype
    def is_err(self) -> bool:
        """Always False."""
        return False

    @beartype
    def unwrap(self) -> T:
        """Return the held value."""
        return self.value

    @beartype
    def unwrap_err(self) -> NoReturn:
        """Raise ValueError; there is no error to return."""
        raise ValueError(f"Called unwrap_err on Ok value: {self.value!r}")


@frozen
class Err(Generic[E]):
    """Failed outcome holding the reason."""

    error: E

    @beartype
    def is_ok(self) -> bool:
        """Always False."""
        return False

    @beartype
    def is_err(self) -> bool:
        """Always True."""
        return True

    @beartype
    def unwrap(self) -> NoReturn:
        """Raise ValueError carrying the held reason."""
        raise ValueError(f"Called unwrap on Err value: {self.error}")

    @beartype
    def unwrap_err(self) -> E:
        """Return the held reason."""
        return self.error


if TYPE_CHECKING:
    Result = Ok[T] | Err[E]
else:

    class Result(Generic[T, E]):
        """Annotation helper: ``Result[T, E]`` means ``Ok[T] | Err[E]``."""

        def __class_getitem__(cls, params: Any) -> type[Ok[Any] | Err[Any]]:
            return Ok[Any] | Err[Any]  # type: ignore[return-value]
