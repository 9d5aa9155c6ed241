"""
Venue name canonicalization.

Organizers type venue names as free text, so one physical venue shows up
under several spellings ("The Hult Center", "the hult centre", ...). This
module clusters those spellings so the calendar can offer one checklist
entry per venue and expand a selection back into every raw spelling.

Clustering is a greedy single pass: each venue joins the first existing
group whose representative (oldest member) is within
``VENUE_MATCH_THRESHOLD`` edits after normalization, otherwise it starts a
new group. Results depend only on input order, so repeated calls with the
same list give the same groups.
"""

import logging
import re
from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)

VENUE_MATCH_THRESHOLD = 2

_NON_ALNUM_SPACE = re.compile(r"[^a-z0-9 ]")
_WHITESPACE_RUN = re.compile(r"\s+")

VenueGroup = List[str]


def normalize_venue(venue: str) -> str:
    """
    Reduce a raw venue name to its comparison key.

    Lower-cases, drops everything outside ``[a-z0-9 ]``, collapses whitespace
    runs to a single space and trims. Trimming comes last so that spaces left
    behind by removed punctuation ("x !") are trimmed too.

    Example:
        >>> normalize_venue("  The Hult Center! ")
        'the hult center'
    """
    key = _NON_ALNUM_SPACE.sub("", venue.lower())
    return _WHITESPACE_RUN.sub(" ", key).strip()


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between ``a`` and ``b``.

    Counts single-character insertions, deletions and substitutions, each
    with weight 1.
    """
    return Levenshtein.distance(a, b)


def group_similar_venues(venues: Sequence[str]) -> List[VenueGroup]:
    """
    Partition venues into groups of near-duplicate spellings.

    The first group (in creation order) whose representative is within
    ``VENUE_MATCH_THRESHOLD`` edits wins. The first member of each group is
    its canonical name.

    Returns:
        List of groups; every input element appears in exactly one group
    """
    groups: List[VenueGroup] = []
    representative_keys: List[str] = []

    for venue in venues:
        key = normalize_venue(venue)
        for group, representative_key in zip(groups, representative_keys):
            if levenshtein(key, representative_key) <= VENUE_MATCH_THRESHOLD:
                group.append(venue)
                break
        else:
            groups.append([venue])
            representative_keys.append(key)

    logger.debug("Grouped %d venue names into %d groups", len(venues), len(groups))
    return groups


def get_canonical_venues(venues: Sequence[str]) -> List[str]:
    """Return the canonical name of each group, in group-creation order."""
    return [group[0] for group in group_similar_venues(venues)]


def get_venues_for_canonical(venues: Sequence[str], canonical: str) -> List[str]:
    """
    Expand a venue name into every raw spelling in its group.

    ``canonical`` may be any member of the group, not only its
    representative. A name that is not in ``venues`` at all comes back as a
    single-element list.
    """
    for group in group_similar_venues(venues):
        if canonical in group:
            return list(group)

    logger.debug("Venue %r not found among %d venues", canonical, len(venues))
    return [canonical]
