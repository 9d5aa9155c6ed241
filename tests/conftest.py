"""
Shared pytest fixtures for the calendar venue test suite.

Provides reusable fixtures for creating CalendarEvent test objects.
"""

import json
import logging
from typing import Optional

import pytest

from src.monitoring.logging import ROOT_LOGGER_NAME
from src.schemas.event import CalendarEvent


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog keeps seeing package records."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def create_event():
    """
    Return a function that creates CalendarEvent objects with sensible defaults.

    All defaults can be overridden via keyword arguments.

    Example:
        event = create_event(title="Hamlet", venue="WOW Hall")
    """

    def _create_event(
        title: str = "Test Show",
        venue: str = "Test Venue",
        category: str = "Play",
        date: Optional[str] = "2025-03-08",
        **kwargs,
    ) -> CalendarEvent:
        defaults = {
            "slug": title.lower().replace(" ", "-"),
            "title": title,
            "category": category,
            "venue": venue,
            "dates": [{"date": date, "time": "19:30"}] if date else [],
        }
        defaults.update(kwargs)
        return CalendarEvent(**defaults)

    return _create_event


@pytest.fixture
def sample_events(create_event):
    """
    Return events whose venues contain near-duplicate spellings.

    Venues group as:
    - "The Hult Center", "the hult centre"
    - "WOW Hall"
    - "Oregon Contemporary Theatre", "Oregon Contemporary Theater"
    """
    return [
        create_event(title="The Crucible", venue="The Hult Center", category="Play"),
        create_event(title="Into the Woods", venue="the hult centre", category="Musical"),
        create_event(title="Improv Jam", venue="WOW Hall", category="Improv"),
        create_event(
            title="Spring Auditions",
            venue="Oregon Contemporary Theatre",
            category="Audition",
        ),
        create_event(title="Hamlet", venue="Oregon Contemporary Theater", category="Play"),
    ]


@pytest.fixture
def events_file(tmp_path, sample_events):
    """Write ``sample_events`` to a grouped-event JSON file and return its path."""
    path = tmp_path / "events_grouped.json"
    records = [e.model_dump(mode="json", by_alias=True) for e in sample_events]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path
