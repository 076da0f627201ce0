from __future__ import annotations

from tee_time_finder.models import ALL, FilterState
from tee_time_finder.options import derive_cities, derive_courses, derive_options, reconcile


def test_derive_courses_is_sorted_and_deduplicated(inventory) -> None:
    assert derive_courses(inventory) == [
        "Foothills",
        "Fossil Trace",
        "Fox Hollow",
        "Kennedy",
        "Mystery Course",
        "Wellshire",
    ]


def test_derive_courses_narrowed_by_city_keeps_cityless_records(inventory) -> None:
    assert derive_courses(inventory, "Lakewood") == ["Foothills", "Fox Hollow", "Mystery Course"]


def test_derive_cities_skips_records_without_city(inventory) -> None:
    assert derive_cities(inventory) == ["Denver", "Golden", "Lakewood"]


def test_derive_cities_narrowed_by_course(inventory) -> None:
    assert derive_cities(inventory, "Kennedy") == ["Denver"]
    assert derive_cities(inventory, ALL) == ["Denver", "Golden", "Lakewood"]


def test_derive_options_narrows_each_dimension_by_the_other(inventory) -> None:
    options = derive_options(inventory, FilterState(course="Fox Hollow", city="Lakewood"))

    assert options.cities == ["Lakewood"]
    assert options.courses == ["Foothills", "Fox Hollow", "Mystery Course"]


def test_options_only_offer_values_present_in_inventory(inventory) -> None:
    options = derive_options(inventory, FilterState())
    courses_in_inventory = {record.course for record in inventory}
    cities_in_inventory = {record.city for record in inventory}

    assert all(any(raw.startswith(course) for raw in courses_in_inventory) for course in options.courses)
    assert set(options.cities) <= cities_in_inventory


def test_reconcile_keeps_valid_selection(inventory) -> None:
    state = FilterState(course="Kennedy", city="Denver")

    assert reconcile(inventory, state) is state


def test_reconcile_resets_course_missing_from_new_inventory(inventory) -> None:
    state = FilterState(course="Kennedy", city="Denver", min_openings=2)
    without_kennedy = [record for record in inventory if not record.course.startswith("Kennedy")]

    result = reconcile(without_kennedy, state)

    assert result.course == ALL
    assert result.city == "Denver"
    assert result.min_openings == 2


def test_reconcile_resets_city_no_longer_offered_for_course(inventory) -> None:
    state = FilterState(course="Fossil Trace", city="Lakewood")

    result = reconcile(inventory, state)

    assert result.course == "Fossil Trace"
    assert result.city == ALL


def test_stale_city_does_not_knock_out_listed_course(inventory) -> None:
    state = FilterState(course="Fossil Trace", city="Boulder")

    result = reconcile(inventory, state)

    assert result == FilterState(course="Fossil Trace", city=ALL)


def test_reconcile_on_empty_inventory_resets_everything() -> None:
    result = reconcile([], FilterState(course="Kennedy", city="Denver"))

    assert (result.course, result.city) == (ALL, ALL)


def test_changing_city_resets_course_not_played_there(inventory) -> None:
    state = FilterState(course="Fossil Trace", city="Lakewood")

    result = reconcile(inventory, state, changed="city")

    assert result == FilterState(course=ALL, city="Lakewood")
