"""Matching rules between a tee time alert and the tee time inventory.

The notification scheduler lives on the server. It must evaluate alerts with
``alert_matches`` and apply the transition returned by ``evaluate_alert``:
an alert with at least one match becomes inactive ("Triggered") and stays in
the store until the user deletes it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence

from .course_names import DEFAULT_NORMALIZER, CourseNameNormalizer
from .display import price_label
from .errors import AlertValidationError
from .models import AlertRecord, AlertRequest, TeeTimeRecord
from .time_window import parse_to_hour, parse_to_minutes


@dataclass(frozen=True)
class AlertEvaluation:
    """Outcome of checking one alert against one day's inventory."""

    alert: AlertRecord
    matches: List[TeeTimeRecord]

    @property
    def triggered(self) -> bool:
        return bool(self.matches)


def alert_matches(
    alert: AlertRecord,
    candidate: TeeTimeRecord,
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> bool:
    """Return True when ``candidate`` should fire ``alert``.

    The caller is responsible for passing inventory fetched for ``alert.date``.
    The time window is closed on both ends so a tee time exactly at the end
    of the window still counts.
    """
    if not alert.active:
        return False
    if normalizer.normalize(candidate.course) != alert.course:
        return False

    hour = parse_to_hour(candidate.time)
    if hour < parse_to_hour(alert.start_time) or hour > parse_to_hour(alert.end_time):
        return False

    # A full group is never worth a text, whatever min_players says.
    if candidate.openings <= 0 or candidate.openings < alert.min_players:
        return False
    if alert.holes and candidate.holes != alert.holes:
        return False
    return True


def find_matches(
    alert: AlertRecord,
    inventory: Iterable[TeeTimeRecord],
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> List[TeeTimeRecord]:
    return [record for record in inventory if alert_matches(alert, record, normalizer)]


def mark_triggered(alert: AlertRecord) -> AlertRecord:
    return replace(alert, active=False) if alert.active else alert


def evaluate_alert(
    alert: AlertRecord,
    inventory: Sequence[TeeTimeRecord],
    normalizer: CourseNameNormalizer = DEFAULT_NORMALIZER,
) -> AlertEvaluation:
    """Check an alert and return it with the state it should move to."""
    matches = find_matches(alert, inventory, normalizer)
    updated = mark_triggered(alert) if matches else alert
    return AlertEvaluation(alert=updated, matches=matches)


def validate_alert_request(request: AlertRequest) -> AlertRequest:
    """Reject requests that must not reach the server."""
    if not (request.phone or "").strip():
        raise AlertValidationError("Please enter your phone number.")
    if request.min_players < 0:
        raise AlertValidationError("Minimum players cannot be negative.")
    if request.start_time and request.end_time:
        if parse_to_minutes(request.start_time) >= parse_to_minutes(request.end_time):
            raise AlertValidationError("Start time must be before end time.")
    return request


def build_alert_message(alert: AlertRecord, matches: Sequence[TeeTimeRecord], booking_url: str = "") -> str:
    """Compose the text the scheduler sends once an alert fires."""
    lines = [f"⛳ Tee time alert! {alert.course} on {alert.date}:"]
    for record in matches:
        lines.append(f"{record.time} ({record.openings} openings) - {price_label(record.price)}")
    lines.append("")
    url = booking_url or (matches[0].booking_url if matches else "")
    if url:
        lines.append(f"Book now: {url}")
    lines.append("Reply STOP to unsubscribe")
    return "\n".join(lines)
