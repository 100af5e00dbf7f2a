"""Display ordering: by surname, then chronologically for the same player."""

from typing import Iterable, List, Optional, Sequence, Tuple

from .models import CompositeRecord, DisplayLine

# Larger than any season's day count, so (season, day) pairs never collide
DAYS_PER_SEASON_BOUND = 200


def surname_key(name: Optional[str]) -> str:
    """
    Move the first name to the end: "Jim Barnes" -> "Barnes Jim".

    Handles players with one name (NaN) and players with three or more words
    in their name, which plain last-word sorting gets wrong.
    """
    if not name:
        return ""
    pieces = name.split()
    if len(pieces) <= 1:
        return name
    return " ".join(pieces[1:] + pieces[:1])


def chronological_key(record: CompositeRecord) -> int:
    return (record.season or 0) * DAYS_PER_SEASON_BOUND + (record.day or 0)


def display_sort_key(record: CompositeRecord) -> Tuple[str, int]:
    return surname_key(record.primary_name), chronological_key(record)


def sort_records(records: Iterable[CompositeRecord]) -> List[CompositeRecord]:
    return sorted(records, key=display_sort_key)


def sort_lines(pairs: Sequence[Tuple[CompositeRecord, DisplayLine]]) -> List[DisplayLine]:
    """Order display lines by the records they were built from. Stable."""
    return [line for _, line in sorted(pairs, key=lambda pair: display_sort_key(pair[0]))]
