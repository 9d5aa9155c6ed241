#!/usr/bin/env python3
"""Command-line interface for the calendar venue tools.

Commands:
  - venues canonical : List canonical venue names
  - venues groups    : Show each group of near-duplicate venue spellings
  - venues lookup    : Show every spelling grouped with a venue name
  - venues filter    : List events matching type/venue selections

Typical usage:
  venues canonical --events data/events_grouped.json
  venues lookup "The Hult Center"
  venues filter --type Play --venue "WOW Hall" --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from src.configs.settings import get_settings
from src.ingestion.filtering import EventFilter
from src.ingestion.loader import EventDataError, load_events
from src.monitoring.logging import LoggingOptions, setup_logging, with_context
from src.normalization.venues import group_similar_venues

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--events",
        "-e",
        default=str(settings.EVENTS_DATA_PATH),
        help="Path to grouped events JSON",
    )
    common.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level")
    common.add_argument(
        "--json-logs", action="store_true", default=settings.JSON_LOGS, help="Emit JSON logs"
    )

    p = argparse.ArgumentParser(prog="venues", description="Calendar venue tools")
    sub = p.add_subparsers(dest="cmd")

    sub.add_parser("canonical", parents=[common], help="List canonical venue names")

    pg = sub.add_parser("groups", parents=[common], help="Show venue groups")
    pg.add_argument("--json", action="store_true", help="Print groups as JSON")

    pl = sub.add_parser("lookup", parents=[common], help="Show spellings grouped with a venue")
    pl.add_argument("name", help="Venue name (any spelling in the group)")

    pf = sub.add_parser("filter", parents=[common], help="List matching events")
    pf.add_argument("--type", "-t", dest="types", action="append", default=[], help="Event type")
    pf.add_argument(
        "--venue", "-v", dest="venues", action="append", default=[], help="Canonical venue"
    )
    pf.add_argument("--json", action="store_true", help="Print events as JSON")

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI with the given arguments."""
    try:
        return _main_impl(argv)
    except EventDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _main_impl(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if not args.cmd:
        print("Error: Command required. Use --help for usage info.", file=sys.stderr)
        return 1

    setup_logging(LoggingOptions(level=args.log_level, json_logs=args.json_logs))
    log = with_context(logger, command=args.cmd, source=args.events)

    events = load_events(args.events)
    event_filter = EventFilter(events)
    counts = {
        "events": len(events),
        "venues": len(event_filter.venues),
        "canonical": len(event_filter.canonical_venues),
    }
    log.info(
        "%d venues, %d canonical",
        counts["venues"],
        counts["canonical"],
        extra={"payload": counts},
    )

    if args.cmd == "canonical":
        for venue in event_filter.canonical_venues:
            print(venue)
        return 0

    if args.cmd == "groups":
        groups = group_similar_venues(event_filter.venues)
        if args.json:
            print(json.dumps(groups, indent=2, ensure_ascii=False))
            return 0
        for group in groups:
            print(group[0])
            for variant in group[1:]:
                print(f"  - {variant}")
        return 0

    if args.cmd == "lookup":
        for venue in event_filter.venues_for(args.name):
            print(venue)
        return 0

    if args.cmd == "filter":
        matched = event_filter.filter(args.types, args.venues)
        if args.json:
            payload = [e.model_dump(mode="json", by_alias=True) for e in matched]
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            return 0
        for event in matched:
            print(f"{event.first_date or '----------'}  {event.title} @ {event.venue}")
        return 0

    print(f"Error: Unknown command {args.cmd}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
