# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Spreadsheet-style coordinate labels for grid positions.

Columns use bijective base-26 letters (A..Z, AA, AB, ...) and rows are
1-based, so position ``column=0, row=0`` is ``A1``.
"""

import re
from typing import Final

from beartype import beartype

from ..errors import InvalidFormat
from ..models.dashboard import GridCoordinate, GridPosition

_ALPHABET_SIZE: Final = 26
_COORDINATE_PATTERN: Final = re.compile(r"([A-Z]+)([1-9][0-9]*)")


@beartype
def index_to_letter(index: int) -> str:
    """Convert a 0-based column index to its letter label."""
    if index < 0:
        raise InvalidFormat(f"Column index must be non-negative, got {index}")

    letters: list[str] = []
    remaining = index
    while remaining >= 0:
        remaining, offset = divmod(remaining, _ALPHABET_SIZE)
        letters.append(chr(ord("A") + offset))
        remaining -= 1
    return "".join(reversed(letters))


@beartype
def letter_to_index(letter: str) -> int:
    """Convert a column letter label (case-insensitive) to a 0-based index."""
    if not letter:
        raise InvalidFormat("Column letter must be a non-empty string")

    result = 0
    for char in letter.upper():
        if not "A" <= char <= "Z":
            raise InvalidFormat(
                f"Column letter must contain only A-Z characters, got {letter!r}"
            )
        result = result * _ALPHABET_SIZE + (ord(char) - ord("A") + 1)
    return result - 1


@beartype
def position_to_coordinate(position: GridPosition) -> GridCoordinate:
    """Convert a 0-based position to a letter + 1-based row coordinate."""
    return GridCoordinate(column=index_to_letter(position.column), row=position.row + 1)


@beartype
def coordinate_to_position(coordinate: GridCoordinate) -> GridPosition:
    """Convert a coordinate back to a 0-based position."""
    return GridPosition(column=letter_to_index(coordinate.column), row=coordinate.row - 1)


@beartype
def format_coordinate(coordinate: GridCoordinate) -> str:
    """Format a coordinate as ``<letters><row>``, e.g. ``B3``."""
    return f"{coordinate.column}{coordinate.row}"


@beartype
def parse_coordinate(text: str) -> GridCoordinate:
    """Parse a label such as ``B3``. Rows start at 1."""
    match = _COORDINATE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormat(
            f"Invalid coordinate format {text!r}. Expected format: A1, B2, etc."
        )
    column, row = match.groups()
    return GridCoordinate(column=column, row=int(row))


@beartype
def format_position(position: GridPosition) -> str:
    """Format a 0-based position directly as a label."""
    return format_coordinate(position_to_coordinate(position))


@beartype
def parse_position(text: str) -> GridPosition:
    """Parse a label directly into a 0-based position."""
    return coordinate_to_position(parse_coordinate(text))
