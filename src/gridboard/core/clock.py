# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Injectable clock capability.

Every operation that stamps a timestamp accepts a ``clock`` argument, a
zero-argument callable returning an aware ``datetime``. Production code passes
nothing and gets :func:`system_clock`; tests pass :func:`fixed_clock`.
"""

from collections.abc import Callable
from datetime import datetime, timezone

from beartype import beartype

Clock = Callable[[], datetime]


@beartype
def system_clock() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


@beartype
def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports ``moment``.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    def _now() -> datetime:
        return moment

    return _now


@beartype
def resolve_clock(clock: Clock | None) -> Clock:
    """Return ``clock`` or the system clock when none was injected."""
    return clock if clock is not None else system_clock


@beartype
def iso_timestamp(clock: Clock | None = None) -> str:
    """Format the clock's current time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = resolve_clock(clock)().astimezone(timezone.utc)
    millis = moment.microsecond // 1000
    return f"{moment.strftime('%Y-%m-%dT%H:%M:%S')}.{millis:03d}Z"


@beartype
def filename_safe_timestamp(clock: Clock | None = None) -> str:
    """ISO timestamp with ``:`` and ``.`` replaced so it can name a file."""
    return iso_timestamp(clock).replace(":", "-").replace(".", "-")
