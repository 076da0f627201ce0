from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from tee_time_finder.client import TeeTimeClient
from tee_time_finder.config import Settings
from tee_time_finder.models import TeeTimeRecord


def make_settings(**overrides) -> Settings:
    # No .env lookup and no backoff so retry tests stay fast.
    values = {
        "base_url": "http://teetimes.test",
        "retry_attempts": 2,
        "retry_backoff_seconds": 0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_client(handler: Callable[[httpx.Request], httpx.Response], **overrides) -> TeeTimeClient:
    return TeeTimeClient(make_settings(**overrides), transport=httpx.MockTransport(handler))


def json_response(status_code: int, payload: object) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json"},
    )


def tee_time(
    course: str,
    time: str,
    *,
    city: str | None = "Denver",
    openings: int = 4,
    holes: str = "18",
    price: float = 35.0,
) -> TeeTimeRecord:
    return TeeTimeRecord(
        course=course,
        time=time,
        openings=openings,
        holes=holes,
        price=price,
        booking_url="https://denver.book.teeitup.golf/teetimes",
        city=city,
    )


@pytest.fixture
def inventory() -> list[TeeTimeRecord]:
    return [
        tee_time("Kennedy - East", "6:30 AM", openings=2),
        tee_time("Kennedy Back Nine", "7:40 AM", openings=1, holes="9", price=0),
        tee_time("Fox Hollow - Links", "9:00 AM", city="Lakewood", openings=4),
        tee_time("Wellshire", "12:00 PM", openings=3),
        tee_time("Fossil Trace", "1:10 PM", city="Golden", openings=0),
        tee_time("Foothills Par 3", "5:50 PM", city="Lakewood", openings=4, holes="9/18"),
        tee_time("Mystery Course", "sometime", city=None, openings=2),
    ]
