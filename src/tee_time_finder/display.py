"""Text formatting for tee times and alerts."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urlparse

from .models import AlertRecord, TeeTimeRecord

PRICE_UNKNOWN = "—"
MAX_OPENINGS = 4

BOOKING_HOST_LABELS = {
    "golfnow.com": "GolfNow",
    "ezlinksgolf.com": "EZLinks",
    "teeitup.golf": "TeeItUp",
    "teeitup.com": "TeeItUp",
    "golfwithaccess.com": "GolfWithAccess",
    "chronogolf.com": "Chronogolf",
    "cps.golf": "CPS Golf",
    "membersports.com": "MemberSports",
    "foreupsoftware.com": "foreUP",
    "quick18.com": "Quick18",
    "courserev.ai": "CourseRev",
    "rguest.com": "rGuest",
    "teesnap.net": "Teesnap",
    "golfback.com": "GolfBack",
}


def price_label(price: float) -> str:
    """Whole-dollar price, or a dash when the listing carries no price."""
    if not price or price <= 0:
        return PRICE_UNKNOWN
    return f"${price:.0f}"


def booking_label(url: str) -> str:
    """Short name of the site a booking link points at."""
    host = (urlparse(url or "").hostname or "").lower()
    if not host:
        return "Book"
    parts = host.split(".")
    domain = ".".join(parts[-2:]) if len(parts) >= 2 else host
    return BOOKING_HOST_LABELS.get(domain, domain)


def openings_label(openings: int) -> str:
    return f"{openings} / {MAX_OPENINGS}"


def format_tee_time(record: TeeTimeRecord) -> str:
    """One-line summary of a tee time, showing the raw course name."""
    course = record.course
    if record.city:
        course = f"{course} ({record.city})"
    pieces = [
        record.time,
        course,
        openings_label(record.openings),
        f"{record.holes} holes" if record.holes else "holes n/a",
        price_label(record.price),
    ]
    if record.booking_url:
        pieces.append(f"{booking_label(record.booking_url)}: {record.booking_url}")
    return " | ".join(pieces)


def format_tee_times(records: Sequence[TeeTimeRecord]) -> str:
    if not records:
        return "No tee times available for this date."
    lines = [format_tee_time(record) for record in records]
    lines.append("")
    lines.append(f"{len(records)} tee times available")
    return "\n".join(lines)


def format_alert(alert: AlertRecord) -> str:
    """One-line summary of an alert as shown on the alerts page."""
    status = alert.status
    details = [f"{alert.date} · {alert.start_time} – {alert.end_time}"]
    if alert.min_players:
        details.append(f"{alert.min_players}+ players")
    if alert.holes:
        details.append(f"{alert.holes} holes")
    created = f" (created {alert.created_at})" if alert.created_at else ""
    return f"[{status}] {alert.course}: {', '.join(details)}{created} id={alert.id}"
