"""Entry point for the tee time finder."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

import structlog
from pydantic import ValidationError

from .client import TeeTimeClient
from .config import Settings
from .date_window import resolve_date
from .display import format_alert, format_tee_times
from .metros import list_metros
from .models import ALL, AlertRequest
from .options import derive_courses
from .session import AlertBook, BrowseSession
from .time_window import format_range


def configure_logging(level: int = logging.INFO) -> None:
    """Configure structlog + stdlib logging."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


LOGGER = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """CLI argument parsing."""
    parser = argparse.ArgumentParser(description="Browse tee times and manage tee time alerts.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output.")
    commands = parser.add_subparsers(dest="command", required=True)

    browse = commands.add_parser("browse", help="List tee times for a metro and date.")
    browse.add_argument("--metro", help="Metro slug (defaults to TEE_FINDER_DEFAULT_METRO).")
    browse.add_argument("--date", help="ISO date (YYYY-MM-DD); defaults to today.")
    browse.add_argument("--course", help="Canonical course name.")
    browse.add_argument("--city", help="City name.")
    browse.add_argument("--from", dest="time_from", type=int, default=0, help="Earliest hour, 0-24.")
    browse.add_argument("--to", dest="time_to", type=int, default=24, help="Latest hour (exclusive), 0-24.")
    browse.add_argument("--min-openings", type=int, help="Minimum open slots.")
    browse.add_argument("--holes", help="Hole count, e.g. 9 or 18.")

    alerts = commands.add_parser("alerts", help="Manage tee time alerts.")
    alert_commands = alerts.add_subparsers(dest="alert_command", required=True)

    listing = alert_commands.add_parser("list", help="Show alerts for a phone number.")
    listing.add_argument("--phone", required=True)

    create = alert_commands.add_parser("create", help="Create an alert.")
    create.add_argument("--phone", default="")
    create.add_argument("--course", required=True, help="Canonical course name.")
    create.add_argument("--date", help="ISO date (YYYY-MM-DD); defaults to today.")
    create.add_argument("--start", required=True, help='Window start, e.g. "7:00 AM".')
    create.add_argument("--end", required=True, help='Window end, e.g. "11:00 AM".')
    create.add_argument("--min-players", type=int, default=0)
    create.add_argument("--holes")

    delete = alert_commands.add_parser("delete", help="Delete an alert.")
    delete.add_argument("--id", dest="alert_id", required=True)

    commands.add_parser("metros", help="List known metros.")
    return parser


async def run_browse(settings: Settings, args: argparse.Namespace) -> int:
    """Fetch a day's tee times and print the filtered list."""
    normalizer = settings.normalizer()
    session = BrowseSession(
        TeeTimeClient(settings),
        normalizer,
        args.metro or settings.default_metro,
    )
    if not await session.load(resolve_date(args.date)):
        print(session.status.text, file=sys.stderr)
        return 1

    session.select_course(args.course)
    session.select_city(args.city)
    session.set_time_window(args.time_from, args.time_to)
    session.set_min_openings(args.min_openings)
    session.set_holes(args.holes)

    options = session.options
    state = session.state
    print(f"{session.target.verbose} · {format_range(state.time_from, state.time_to)}")
    print(f"Courses: {', '.join(options.courses) or 'none'}")
    print(f"Cities: {', '.join(options.cities) or 'none'}")
    if args.course and state.course != args.course:
        if state.city != ALL and args.course in derive_courses(session.inventory, ALL, normalizer):
            print(f"Course {args.course!r} is not offered in {state.city}; showing all courses.")
        else:
            print(f"Course {args.course!r} has no tee times; showing all courses.")
    if args.city and state.city != args.city:
        print(f"City {args.city!r} has no tee times; showing all cities.")
    print("")
    print(format_tee_times(session.visible))
    context = session.alert_context()
    if context:
        print("")
        print(context)
    return 0


async def run_alerts(settings: Settings, args: argparse.Namespace) -> int:
    """Dispatch the alert subcommands."""
    book = AlertBook(TeeTimeClient(settings))

    if args.alert_command == "list":
        if not await book.lookup(args.phone):
            print(book.status.text if book.status else "Please enter your phone number.", file=sys.stderr)
            return 1
        if not book.alerts:
            print("No alerts found for this number.")
        for alert in book.alerts:
            print(format_alert(alert))
        return 0

    if args.alert_command == "create":
        request = AlertRequest(
            phone=args.phone,
            course=args.course,
            date=resolve_date(args.date).iso,
            start_time=args.start,
            end_time=args.end,
            min_players=args.min_players,
            holes=args.holes or None,
        )
        alert = await book.create(request)
        if alert is None:
            print(book.status.text, file=sys.stderr)
            return 2 if book.status.is_validation else 1
        print(book.status.text)
        print(format_alert(alert))
        return 0

    if not await book.remove(args.alert_id):
        print(book.status.text, file=sys.stderr)
        return 1
    print("Alert deleted.")
    return 0


def cli(argv: Optional[list[str]] = None) -> int:
    """Console script entrypoint."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "metros":
        for metro in list_metros():
            print(f"{metro.slug:<14} {metro.name}, {metro.state} · {metro.tagline}")
        return 0

    try:
        settings = Settings()
    except ValidationError as exc:
        LOGGER.error("settings.error", error=str(exc))
        return 2

    try:
        if args.command == "browse":
            return asyncio.run(run_browse(settings, args))
        return asyncio.run(run_alerts(settings, args))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(cli())
