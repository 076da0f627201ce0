"""Filtering of tee time inventory against the user's current selection."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .course_names import DEFAULT_NORMALIZER, CourseNameNormalizer
from .models import ALL, ANY, FilterState, TeeTimeRecord
from .time_window import parse_to_hour, parse_to_minutes


def holes_match(record_holes: str, wanted: str) -> bool:
    """Exact comparison; ``"9/18"`` listings only match a ``"9/18"`` selection."""
    return record_holes == wanted


def matches_filter(
    record: TeeTimeRecord,
    state: FilterState,
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> bool:
    """Return True when a single record satisfies every active predicate."""
    if state.course != ALL and normalizer.normalize(record.course) != state.course:
        return False
    if state.city != ALL and record.city != state.city:
        return False

    low, high = state.time_bounds()
    hour = parse_to_hour(record.time)
    # Half-open so adjacent hour ranges never share a tee time.
    if hour < low or hour >= high:
        return False

    if state.min_openings != ANY and record.openings < int(state.min_openings):
        return False
    if state.holes != ANY and not holes_match(record.holes, state.holes):
        return False
    return True


def filter_tee_times(
    inventory: Iterable[TeeTimeRecord],
    state: FilterState,
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> List[TeeTimeRecord]:
    """Return the records matching ``state`` in their original order."""
    return [record for record in inventory if matches_filter(record, state, normalizer)]


def sort_by_time(inventory: Sequence[TeeTimeRecord]) -> List[TeeTimeRecord]:
    """Stable sort by clock time, as the server orders merged course results."""
    return sorted(inventory, key=lambda record: parse_to_minutes(record.time))
