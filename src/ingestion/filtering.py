"""
Calendar event filtering.

The calendar's filter sidebar offers one checkbox per event type and one per
canonical venue. Selecting a canonical venue must match every raw spelling
of that venue, so venue selections are expanded through the venue groups
before events are filtered.

An empty selection for a dimension means "don't filter on it".
"""

import logging
from typing import Iterable, List, Optional, Sequence

from src.normalization.venues import get_canonical_venues, get_venues_for_canonical
from src.schemas.event import CalendarEvent

logger = logging.getLogger(__name__)


def _unique(values: Iterable[str]) -> List[str]:
    """De-duplicate, keeping first occurrences in order."""
    return list(dict.fromkeys(values))


def extract_event_types(events: Iterable[CalendarEvent]) -> List[str]:
    """Distinct event categories in first-seen order."""
    return _unique(event.category for event in events)


def extract_venues(events: Iterable[CalendarEvent]) -> List[str]:
    """Distinct raw venue names in first-seen order."""
    return _unique(event.venue for event in events)


def resolve_selected_venues(
    venues: Sequence[str], selected_canonicals: Iterable[str]
) -> List[str]:
    """
    Expand selected canonical venues into every matching raw venue name.

    Args:
        venues: Raw venue names present in the event list
        selected_canonicals: Canonical names picked by the user

    Returns:
        Raw venue names to match, without duplicates
    """
    matched: List[str] = []
    for canonical in selected_canonicals:
        matched.extend(get_venues_for_canonical(venues, canonical))
    return _unique(matched)


def filter_events(
    events: Sequence[CalendarEvent],
    selected_types: Iterable[str] = (),
    selected_venues: Iterable[str] = (),
    venues: Optional[Sequence[str]] = None,
) -> List[CalendarEvent]:
    """
    Filter events by event type and canonical venue.

    Args:
        events: Events to filter
        selected_types: Categories to keep (empty keeps all)
        selected_venues: Canonical venue names to keep (empty keeps all)
        venues: Raw venue names to group against; defaults to the venues
            of ``events``

    Returns:
        Matching events in their original order
    """
    types = set(selected_types)
    selected = list(selected_venues)

    venues_to_match = set()
    if selected:
        if venues is None:
            venues = extract_venues(events)
        venues_to_match = set(resolve_selected_venues(venues, selected))

    result = [
        event
        for event in events
        if (not types or event.category in types)
        and (not selected or event.venue in venues_to_match)
    ]

    logger.debug(
        "Filtered %d events to %d (types=%s, venues=%s)",
        len(events),
        len(result),
        sorted(types),
        selected,
    )
    return result


class EventFilter:
    """
    Filter state for a fixed list of calendar events.

    Computes the sidebar choices (event types, raw venues, canonical venues)
    once and filters the list for any combination of selections.
    """

    def __init__(self, events: Sequence[CalendarEvent]):
        """
        Initialize with the events currently on the calendar.

        Args:
            events: Calendar events, in display order
        """
        self.events = list(events)
        self.event_types = extract_event_types(self.events)
        self.venues = extract_venues(self.events)
        self.canonical_venues = get_canonical_venues(self.venues)

    def venues_for(self, canonical: str) -> List[str]:
        """Raw venue names grouped with ``canonical``."""
        return get_venues_for_canonical(self.venues, canonical)

    def filter(
        self,
        selected_types: Iterable[str] = (),
        selected_venues: Iterable[str] = (),
    ) -> List[CalendarEvent]:
        """Return the events matching the given selections."""
        return filter_events(
            self.events,
            selected_types=selected_types,
            selected_venues=selected_venues,
            venues=self.venues,
        )
