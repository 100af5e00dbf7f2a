"""Outcome counter: how every consumer attack turned out, per season."""

from typing import Any, Dict, Iterable, List, Optional

from .diagnostics import Diagnostics, MISSING_SEASON

# Tested in this order; the first substring found decides the outcome
OUTCOME_RULES = [
    ("DEFENDS", "defended"),
    ("CHORBY SOUL", "chorby"),
    ("A CONSUMER", "wrestled"),
    ("SALMON", "cannon"),
]
DEFAULT_OUTCOME = "success"
OUTCOME_CATEGORIES = ["success", "chorby", "defended", "cannon", "wrestled"]


def outcome_for(description: str) -> str:
    for needle, category in OUTCOME_RULES:
        if needle in description:
            return category
    return DEFAULT_OUTCOME


def count_outcomes(
    events: Iterable[Dict[str, Any]],
    diagnostics: Optional[Diagnostics] = None,
) -> Dict[str, Dict[int, int]]:
    """
    Tally outcomes per season from raw event dicts.

    Events without an integer season can't be placed in a season; they are
    reported to ``diagnostics`` and skipped.

    Returns:
        {category: {season: count}} with every category present
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    counts: Dict[str, Dict[int, int]] = {category: {} for category in OUTCOME_CATEGORIES}
    for event in events:
        season = event.get("season")
        if not isinstance(season, int) or isinstance(season, bool) or season < 0:
            diagnostics.report(
                MISSING_SEASON,
                "Skipping outcome event without a season",
                event_id=event.get("id"),
                season=season,
            )
            continue
        category = outcome_for(event.get("description") or "")
        counts[category][season] = counts[category].get(season, 0) + 1
    return counts


def to_season_arrays(counts: Dict[str, Dict[int, int]]) -> Dict[str, List[Optional[int]]]:
    """Expand per-season dicts into lists indexed by season, None where a season has no events."""
    arrays = {}
    for category, by_season in counts.items():
        size = max(by_season) + 1 if by_season else 0
        arrays[category] = [by_season.get(season) for season in range(size)]
    return arrays
