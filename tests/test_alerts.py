from __future__ import annotations

from dataclasses import replace

import pytest

from conftest import tee_time
from tee_time_finder.alerts import (
    alert_matches,
    build_alert_message,
    evaluate_alert,
    find_matches,
    mark_triggered,
    validate_alert_request,
)
from tee_time_finder.errors import AlertValidationError
from tee_time_finder.models import AlertRecord, AlertRequest


def _alert(**overrides) -> AlertRecord:
    values = dict(
        id="1700000000",
        phone="+13035550100",
        course="Kennedy",
        date="2026-10-20",
        start_time="7:00 AM",
        end_time="10:00 AM",
    )
    values.update(overrides)
    return AlertRecord(**values)


def test_matching_tee_time_fires_alert() -> None:
    assert alert_matches(_alert(), tee_time("Kennedy - East", "8:10 AM", openings=2))


def test_window_is_closed_on_both_ends() -> None:
    alert = _alert()

    assert alert_matches(alert, tee_time("Kennedy - East", "7:00 AM"))
    assert alert_matches(alert, tee_time("Kennedy - East", "10:00 AM"))
    assert not alert_matches(alert, tee_time("Kennedy - East", "10:01 AM"))
    assert not alert_matches(alert, tee_time("Kennedy - East", "6:59 AM"))


def test_inactive_alert_never_matches() -> None:
    assert not alert_matches(_alert(active=False), tee_time("Kennedy - East", "8:00 AM"))


def test_course_must_match_after_normalisation() -> None:
    alert = _alert()

    assert alert_matches(alert, tee_time("Kennedy Back Nine", "8:00 AM"))
    assert not alert_matches(alert, tee_time("Wellshire", "8:00 AM"))


def test_min_players_threshold() -> None:
    alert = _alert(min_players=3)

    assert not alert_matches(alert, tee_time("Kennedy - East", "8:00 AM", openings=2))
    assert alert_matches(alert, tee_time("Kennedy - East", "8:00 AM", openings=3))


def test_full_tee_time_never_fires() -> None:
    assert not alert_matches(_alert(min_players=0), tee_time("Kennedy - East", "8:00 AM", openings=0))


def test_holes_unset_means_any() -> None:
    alert = _alert()

    assert alert_matches(alert, tee_time("Kennedy - East", "8:00 AM", holes="9"))
    assert alert_matches(alert, tee_time("Kennedy - East", "8:00 AM", holes="18"))


def test_holes_must_match_exactly_when_set() -> None:
    alert = _alert(holes="18")

    assert alert_matches(alert, tee_time("Kennedy - East", "8:00 AM", holes="18"))
    assert not alert_matches(alert, tee_time("Kennedy - East", "8:00 AM", holes="9/18"))


def test_find_matches_preserves_inventory_order() -> None:
    inventory = [
        tee_time("Kennedy - East", "9:30 AM"),
        tee_time("Wellshire", "8:00 AM"),
        tee_time("Kennedy - West", "7:30 AM"),
    ]

    assert find_matches(_alert(), inventory) == [inventory[0], inventory[2]]


def test_evaluate_alert_deactivates_on_match() -> None:
    alert = _alert()
    inventory = [tee_time("Kennedy - East", "8:00 AM")]

    evaluation = evaluate_alert(alert, inventory)

    assert evaluation.triggered
    assert evaluation.alert == replace(alert, active=False)
    assert evaluation.alert.status == "Triggered"
    assert alert.active


def test_evaluate_alert_without_match_leaves_alert_active() -> None:
    alert = _alert()

    evaluation = evaluate_alert(alert, [tee_time("Kennedy - East", "2:00 PM")])

    assert not evaluation.triggered
    assert evaluation.alert is alert


def test_mark_triggered_is_idempotent() -> None:
    once = mark_triggered(_alert())

    assert mark_triggered(once) is once


@pytest.mark.parametrize("phone", ["", "   "])
def test_validation_requires_phone(phone: str) -> None:
    with pytest.raises(AlertValidationError, match="phone"):
        validate_alert_request(AlertRequest(phone=phone, course="Kennedy"))


def test_validation_accepts_minimal_request() -> None:
    request = AlertRequest(phone="3035550100")

    assert validate_alert_request(request) is request


@pytest.mark.parametrize(("start", "end"), [("11:00 AM", "7:00 AM"), ("9:00 AM", "9:00 AM")])
def test_validation_rejects_window_that_can_never_match(start: str, end: str) -> None:
    request = AlertRequest(phone="3035550100", course="Kennedy", start_time=start, end_time=end)

    with pytest.raises(AlertValidationError, match="Start time must be before end time."):
        validate_alert_request(request)


def test_validation_accepts_ordered_window() -> None:
    request = AlertRequest(phone="3035550100", course="Kennedy", start_time="7:00 AM", end_time="11:00 AM")

    assert validate_alert_request(request) is request


def test_alert_message_lists_matches_and_link() -> None:
    alert = _alert()
    matches = [
        tee_time("Kennedy - East", "8:00 AM", openings=2, price=42.4),
        tee_time("Kennedy - West", "8:10 AM", openings=4, price=0),
    ]

    message = build_alert_message(alert, matches, "https://denver.example/book")

    assert message.splitlines() == [
        "⛳ Tee time alert! Kennedy on 2026-10-20:",
        "8:00 AM (2 openings) - $42",
        "8:10 AM (4 openings) - —",
        "",
        "Book now: https://denver.example/book",
        "Reply STOP to unsubscribe",
    ]
