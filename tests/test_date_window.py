from __future__ import annotations

from datetime import date

import pytest

from tee_time_finder.date_window import resolve_date


def test_resolve_date_parses_iso() -> None:
    target = resolve_date("2026-10-24")

    assert target.iso == "2026-10-24"
    assert target.verbose == "Saturday 24 October 2026"


def test_resolve_date_defaults_to_today() -> None:
    assert resolve_date(None, today=date(2026, 10, 18)).iso == "2026-10-18"
    assert resolve_date("", today=date(2026, 10, 18)).verbose == "Sunday 18 October 2026"


@pytest.mark.parametrize("raw", ["10/24/2026", "2026-13-01", "tomorrow"])
def test_resolve_date_rejects_other_formats(raw: str) -> None:
    with pytest.raises(ValueError, match="Use YYYY-MM-DD"):
        resolve_date(raw)
