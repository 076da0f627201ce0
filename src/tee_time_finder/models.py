"""Shared data models used across the tee time finder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

ALL = "all"
ANY = "any"


def _coerce_int(value: Any, default: int = 0) -> int:
    """Best-effort integer coercion."""
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class TeeTimeRecord:
    """A single bookable tee time as listed by the tee time server."""

    course: str
    time: str
    openings: int
    holes: str
    price: float = 0.0
    booking_url: str = ""
    city: Optional[str] = None
    state: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TeeTimeRecord":
        """Build a record from the server's JSON shape, defaulting missing fields."""
        return cls(
            course=str(payload.get("course") or ""),
            time=str(payload.get("time") or ""),
            openings=max(_coerce_int(payload.get("openings")), 0),
            holes=str(payload.get("holes") or ""),
            price=max(_coerce_float(payload.get("price")), 0.0),
            booking_url=str(payload.get("bookingUrl") or ""),
            city=_optional_text(payload.get("city")),
            state=_optional_text(payload.get("state")),
        )


@dataclass(frozen=True)
class FilterState:
    """Current filter selection held by the presentation layer."""

    course: str = ALL
    city: str = ALL
    time_from: int = 0
    time_to: int = 24
    min_openings: Union[int, str] = ANY
    holes: str = ANY

    def time_bounds(self) -> tuple[int, int]:
        """Return the hour bounds in ascending order."""
        if self.time_from > self.time_to:
            return self.time_to, self.time_from
        return self.time_from, self.time_to


@dataclass(frozen=True)
class AlertRecord:
    """A standing subscription for a tee time at one course on one date."""

    id: str
    phone: str
    course: str
    date: str
    start_time: str
    end_time: str
    min_players: int = 0
    holes: Optional[str] = None
    active: bool = True
    created_at: str = ""

    @property
    def status(self) -> str:
        return "Active" if self.active else "Triggered"

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "AlertRecord":
        return cls(
            id=str(payload.get("id") or ""),
            phone=str(payload.get("phone") or ""),
            course=str(payload.get("course") or ""),
            date=str(payload.get("date") or ""),
            start_time=str(payload.get("startTime") or ""),
            end_time=str(payload.get("endTime") or ""),
            min_players=_coerce_int(payload.get("minPlayers")),
            holes=_optional_text(payload.get("holes")),
            active=bool(payload.get("active", False)),
            created_at=str(payload.get("createdAt") or ""),
        )


@dataclass(frozen=True)
class AlertRequest:
    """Fields a user submits to create an alert."""

    phone: str
    course: str = ""
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    min_players: int = 0
    holes: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "phone": self.phone.strip(),
            "course": self.course,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }
        if self.min_players:
            payload["minPlayers"] = self.min_players
        if self.holes:
            payload["holes"] = self.holes
        return payload
