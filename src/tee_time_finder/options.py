"""Selectable course and city values derived from the current inventory."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence

from .course_names import DEFAULT_NORMALIZER, CourseNameNormalizer
from .models import ALL, FilterState, TeeTimeRecord

COURSE = "course"
CITY = "city"


@dataclass(frozen=True)
class FilterOptions:
    """Course and city values a user may currently pick."""

    courses: List[str]
    cities: List[str]


def _is_set(selection: Optional[str]) -> bool:
    return bool(selection) and selection != ALL


def derive_courses(
    inventory: Iterable[TeeTimeRecord],
    city_filter: Optional[str] = None,
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> List[str]:
    """Sorted canonical course names, narrowed by the selected city."""
    courses: set[str] = set()
    narrow = _is_set(city_filter)
    for record in inventory:
        if narrow and record.city is not None and record.city != city_filter:
            continue
        courses.add(normalizer.normalize(record.course))
    return sorted(courses)


def derive_cities(
    inventory: Iterable[TeeTimeRecord],
    course_filter: Optional[str] = None,
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> List[str]:
    """Sorted cities, narrowed by the selected canonical course."""
    cities: set[str] = set()
    narrow = _is_set(course_filter)
    for record in inventory:
        if not record.city:
            continue
        if narrow and normalizer.normalize(record.course) != course_filter:
            continue
        cities.add(record.city)
    return sorted(cities)


def derive_options(
    inventory: Sequence[TeeTimeRecord],
    state: FilterState,
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> FilterOptions:
    return FilterOptions(
        courses=derive_courses(inventory, state.city, normalizer),
        cities=derive_cities(inventory, state.course, normalizer),
    )


def reconcile(
    inventory: Sequence[TeeTimeRecord],
    state: FilterState,
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
    changed: str = COURSE,
) -> FilterState:
    """
    Reset course/city selections that the inventory no longer backs.

    ``changed`` names the selector the user just touched. It is kept as long as
    the inventory lists it at all, and the other selector is checked against
    the options it narrows to. After a new fetch the course takes priority.
    """
    if changed not in (COURSE, CITY):
        raise ValueError(f"changed must be {COURSE!r} or {CITY!r}")

    course, city = state.course, state.city
    if changed == CITY:
        if _is_set(city) and city not in derive_cities(inventory, ALL, normalizer):
            city = ALL
        if _is_set(course) and course not in derive_courses(inventory, city, normalizer):
            course = ALL
    else:
        if _is_set(course) and course not in derive_courses(inventory, ALL, normalizer):
            course = ALL
        if _is_set(city) and city not in derive_cities(inventory, course, normalizer):
            city = ALL

    if course == state.course and city == state.city:
        return state
    return replace(state, course=course, city=city)
