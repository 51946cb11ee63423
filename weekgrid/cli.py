"""Command-line interface: fetch the current week and print it as JSON."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .cache.manager import EventCache
from .config.settings import WeekGridSettings, get_settings
from .events.window import get_week_window
from .layout.grid import GridLayoutEngine
from .layout.models import GridConfig
from .sources.models import CalendarParams
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weekgrid",
        description="Fetch this week's calendar events and lay them out on a weekly grid.",
    )
    source = parser.add_argument_group("calendar source")
    source.add_argument("--ics-url", help="iCal feed URL (takes precedence over --api-key)")
    source.add_argument("--api-key", help="Calendar API key")
    source.add_argument("--calendar-id", help="Calendar id (default: primary)")
    source.add_argument("--max-results", type=int, help="Maximum API results (default: 50)")

    output = parser.add_argument_group("output")
    output.add_argument(
        "--grid", action="store_true", help="Print the laid-out week grid instead of the event list"
    )
    output.add_argument("--indent", type=int, default=2, help="JSON indentation")

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    return parser


def params_from_args(args: argparse.Namespace) -> CalendarParams:
    return CalendarParams(
        ics_url=args.ics_url,
        api_key=args.api_key,
        calendar_id=args.calendar_id,
        max_results=args.max_results,
    )


async def run(args: argparse.Namespace, settings: WeekGridSettings) -> Dict[str, Any]:
    """Fetch calendar data and build the requested output document."""
    cache = EventCache(settings)
    data = await cache.get_calendar_data(params_from_args(args))

    if not args.grid:
        return data.to_payload()

    engine = GridLayoutEngine(
        GridConfig(origin_hour=settings.grid_origin_hour, end_hour=settings.grid_end_hour)
    )
    return engine.layout(data.events, get_week_window(data.start_date)).to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level, log_file=settings.log_file)

    try:
        document = asyncio.run(run(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except ValueError as e:
        logger.error(f"Invalid grid configuration: {e}")
        return 2

    json.dump(document, sys.stdout, indent=args.indent or None)
    sys.stdout.write("\n")
    return 0
