"""Helpers for tee time clock strings and the hour range slider."""

from __future__ import annotations

import re
from typing import Optional

_CLOCK_PATTERN = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.IGNORECASE)


def _split_clock(time_str: str) -> Optional[tuple[int, int]]:
    """Return (hour in 0-23, minute) or None when the string is not a clock time."""
    match = _CLOCK_PATTERN.search(time_str or "")
    if not match:
        return None
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if not 1 <= hours <= 12 or minutes > 59:
        return None
    meridiem = match.group(3).upper()
    if meridiem == "PM" and hours != 12:
        hours += 12
    if meridiem == "AM" and hours == 12:
        hours = 0
    return hours, minutes


def parse_to_hour(time_str: str) -> float:
    """
    Convert ``"7:40 AM"`` style strings to a fractional hour of day.

    Unparseable input yields ``0.0`` so callers never have to guard the filter.
    """
    parts = _split_clock(time_str)
    if parts is None:
        return 0.0
    hours, minutes = parts
    return hours + minutes / 60


def parse_to_minutes(time_str: str) -> int:
    """Minutes after midnight, with the same fail-soft rule as ``parse_to_hour``."""
    parts = _split_clock(time_str)
    if parts is None:
        return 0
    hours, minutes = parts
    return hours * 60 + minutes


def format_hour(hour: int) -> str:
    """Slider label for a whole hour in ``[0, 24]``."""
    if not 0 <= hour <= 24:
        raise ValueError(f"hour must be between 0 and 24, got {hour}")
    suffix = "AM" if hour < 12 or hour == 24 else "PM"
    display = hour % 12 or 12
    return f"{display}:00 {suffix}"


def format_range(time_from: int, time_to: int) -> str:
    low, high = sorted((time_from, time_to))
    return f"{format_hour(low)} – {format_hour(high)}"
