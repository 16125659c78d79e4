"""Shared checks — pure helpers any profile can compose into its rules."""

from typing import Iterator, Optional

from capprofile.profiles.reasons import Reason, RecommendationType
from capprofile.profiles.timestamps import has_nonzero_offset


def is_blank(value: Optional[str]) -> bool:
    """True when the value is absent, empty, or only whitespace."""
    return value is None or not value.strip()


def check_zero_timezone(
    value: Optional[str],
    xpath: str,
    reason_type: RecommendationType,
) -> Iterator[Reason]:
    """Flag a timestamp whose timezone offset is missing or zero.

    Absent timestamps are not flagged; presence is a separate rule.

    Args:
        value: Raw CAP dateTime string, or None
        xpath: Location to report
        reason_type: Recommendation to emit for this element

    Yields:
        At most one Reason
    """
    if is_blank(value):
        return
    if not has_nonzero_offset(value):
        yield Reason(location=xpath, type=reason_type)
