"""Timestamp comparator — turns CAP dateTime strings into comparable instants.

CAP times look like ``2003-04-02T14:39:01-05:00``. Parsing failures are a
precondition violation of the document, not a rule outcome: callers only
parse values that already passed a presence check, and any failure here
propagates as InvalidTimestampError.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

CAP_DATETIME = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?P<fraction>\.\d+)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?$"
)

ZERO_OFFSETS = frozenset({"Z", "+00:00", "-00:00"})


class InvalidTimestampError(ValueError):
    """Raised when a present timestamp is not a valid CAP dateTime."""

    def __init__(self, value: str, reason: str = "not a CAP dateTime"):
        self.value = value
        super().__init__(f"Invalid timestamp '{value}': {reason}")


def _match(value: str) -> re.Match:
    match = CAP_DATETIME.match(value.strip())
    if match is None:
        raise InvalidTimestampError(value)
    return match


def timezone_offset(value: str) -> Optional[str]:
    """Return the raw offset designator (``-05:00``, ``Z``...) or None if absent."""
    return _match(value).group("offset")


def has_nonzero_offset(value: str) -> bool:
    """True when the timestamp carries an explicit, non-UTC offset."""
    offset = timezone_offset(value)
    return offset is not None and offset not in ZERO_OFFSETS


def to_datetime(value: str) -> datetime:
    """Parse a CAP dateTime into an aware datetime.

    A value without an offset is read as UTC so it stays comparable with
    values that have one.

    Raises:
        InvalidTimestampError: if the value is not a valid CAP dateTime
    """
    match = _match(value)

    fraction = match.group("fraction")
    microsecond = int(fraction[1:7].ljust(6, "0")) if fraction else 0

    offset = match.group("offset")
    try:
        if offset is None or offset in ZERO_OFFSETS:
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            hours, minutes = int(offset[1:3]), int(offset[4:6])
            tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=tz,
        )
    except ValueError as e:
        raise InvalidTimestampError(value, str(e)) from e
