"""Utilities for selecting the date to browse."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class TargetDate:
    """Represents a calendar date the user wants tee times for."""

    value: date

    @property
    def iso(self) -> str:
        return self.value.isoformat()

    @property
    def verbose(self) -> str:
        return self.value.strftime("%A %d %B %Y")


def resolve_date(raw: Optional[str], today: Optional[date] = None) -> TargetDate:
    """
    Parse an ISO date, defaulting to today as the server does.

    Raises ``ValueError`` for anything that is not ``YYYY-MM-DD``.
    """
    if not raw:
        return TargetDate(today or date.today())
    try:
        return TargetDate(date.fromisoformat(raw.strip()))
    except ValueError as exc:
        raise ValueError(f"Invalid date {raw!r}. Use YYYY-MM-DD.") from exc
