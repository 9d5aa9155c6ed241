"""
Event data loading.

Reads the grouped-event JSON file that the calendar is rendered from and
validates each record into a ``CalendarEvent``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from src.schemas.event import CalendarEvent

logger = logging.getLogger(__name__)


class EventDataError(ValueError):
    """Raised when event data cannot be read or does not match the schema."""


def parse_events(records: Iterable[Any]) -> list[CalendarEvent]:
    """
    Validate decoded event records.

    Raises:
        EventDataError: If a record is not an object or fails validation.
            The message names the index of the offending record.
    """
    events: list[CalendarEvent] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise EventDataError(
                f"Event #{index} must be an object, got {type(record).__name__}"
            )
        try:
            events.append(CalendarEvent.model_validate(record))
        except ValidationError as e:
            raise EventDataError(f"Event #{index} is invalid: {e}") from e
    return events


def load_events(path: str | Path) -> list[CalendarEvent]:
    """
    Load grouped calendar events from a JSON file.

    The file must contain a JSON array of event objects.

    Raises:
        EventDataError: If the file is missing, unreadable or malformed.
    """
    p = Path(path)
    if not p.exists():
        raise EventDataError(f"Event data not found: {p}")

    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise EventDataError(f"Invalid JSON in {p}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise EventDataError(f"Could not read event data from {p}: {e}") from e

    if not isinstance(data, list):
        raise EventDataError(
            f"Expected a list of events in {p}, got {type(data).__name__}"
        )

    events = parse_events(data)
    logger.info("Loaded %d events from %s", len(events), p)
    return events
