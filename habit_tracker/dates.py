"""Calendar date helpers for habit check-ins.

Dates are plain local calendar days exchanged as ``YYYY-MM-DD`` strings;
there is no time-of-day component anywhere in the check-in model.
"""

import re
from datetime import date, timedelta
from typing import Optional, Tuple, Union

from .errors import InvalidDate, InvalidRange, InvalidRangeDays, MissingRangeBound

DEFAULT_RANGE_DAYS = 14

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def validate_iso_date(value: str) -> date:
    """Parse ``value`` as a ``YYYY-MM-DD`` calendar date.

    Raises :class:`InvalidDate` for anything else, including well-formed
    strings naming a day that does not exist (``2024-02-30``).
    """
    if not isinstance(value, str):
        raise InvalidDate()
    match = _ISO_DATE.fullmatch(value)
    if match is None:
        raise InvalidDate()
    year, month, day = (int(part) for part in match.groups())
    try:
        parsed = date(year, month, day)
    except ValueError:
        raise InvalidDate()
    if (parsed.year, parsed.month, parsed.day) != (year, month, day):
        raise InvalidDate()
    return parsed


def today_local() -> str:
    return date.today().isoformat()


def to_iso(value: Union[date, str]) -> str:
    if isinstance(value, date):
        return value.isoformat()
    # some drivers hand back strings, possibly with a time part
    return str(value)[:10]


def resolve_range(
    start: Optional[str] = None,
    end: Optional[str] = None,
    days: Optional[int] = None,
    today: Optional[date] = None,
) -> Tuple[date, date]:
    """Return the inclusive ``(start, end)`` window to report on.

    Either both bounds are given explicitly, or the window is the trailing
    ``days`` days ending today.
    """
    if (start is None) != (end is None):
        raise MissingRangeBound()

    if start is not None and end is not None:
        start_date = validate_iso_date(start)
        end_date = validate_iso_date(end)
        if start_date > end_date:
            raise InvalidRange()
        return start_date, end_date

    if days is None:
        days = DEFAULT_RANGE_DAYS
    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise InvalidRangeDays()

    end_date = today or date.today()
    try:
        return end_date - timedelta(days=days - 1), end_date
    except OverflowError:
        raise InvalidRangeDays("days reaches before the earliest representable date")
