"""
Venue display helpers.

Short labels for compact venue checklists and calendar colours per venue.
Colours are looked up through the venue's group, so a venue typed as
"the hult centre" picks up the colour configured for "The Hult Center".
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Sequence

from src.configs.config import Config
from src.configs.settings import get_settings
from src.normalization.venues import group_similar_venues

logger = logging.getLogger(__name__)


def load_abbreviations(config: Mapping | None = None) -> dict[str, str]:
    """
    Venue name -> short label mapping.

    Args:
        config: Parsed venue config; defaults to ``Config.load_venue_config()``
    """
    if config is None:
        config = Config.load_venue_config()
    return dict(config.get("abbreviations") or {})


def display_label(
    venue: str,
    compact: bool = False,
    abbreviations: Mapping[str, str] | None = None,
) -> str:
    """
    Label to show for ``venue`` in a checklist.

    The abbreviation is only used in compact layouts and only when one is
    configured; otherwise the venue name is returned unchanged.
    """
    if not compact:
        return venue
    if abbreviations is None:
        abbreviations = load_abbreviations()
    return abbreviations.get(venue, venue)


def load_venue_colors(path: str | Path | None = None) -> dict[str, str]:
    """
    Venue name -> colour mapping.

    Reads the JSON object at ``path`` when given, else the file named by
    the ``VENUE_COLORS_PATH`` setting, else the ``colors`` section of the
    venue config. A missing or malformed JSON file yields an empty mapping.
    """
    if path is None:
        path = get_settings().VENUE_COLORS_PATH
    if path is None:
        return dict(Config.load_venue_config().get("colors") or {})

    p = Path(path)
    if not p.exists():
        logger.warning("Venue colour file not found: %s", p)
        return {}

    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Could not read venue colours from %s", p, exc_info=True)
        return {}

    if not isinstance(data, dict):
        logger.warning("Venue colour file %s does not hold an object", p)
        return {}
    return {str(k): str(v) for k, v in data.items()}


def venue_color(
    venues: Sequence[str], venue: str, colors: Mapping[str, str]
) -> str | None:
    """
    Colour for ``venue``.

    Uses the colour set for ``venue`` itself, then the colour of the first
    member of its group that has one (the canonical name is checked first).
    Coloured names missing from ``venues`` are grouped after the event
    venues, so a configured spelling can colour its variants.

    Args:
        venues: Raw venue names present in the event list
        venue: Venue to colour
        colors: Venue name -> colour mapping

    Returns:
        Colour string, or None if no member of the group has a colour
    """
    if venue in colors:
        return colors[venue]

    candidates = list(venues)
    candidates.extend(name for name in colors if name not in candidates)

    for group in group_similar_venues(candidates):
        if venue in group:
            for member in group:
                if member in colors:
                    return colors[member]
            break
    return None
