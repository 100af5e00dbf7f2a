"""
Classifier and rating synthesizer.

Each composite record is placed in exactly one narrative category. Branches
are tested in a fixed order and the first match wins, so an attack that was
wrestled away by a defender is rated as such even when it also carries
stat-loss metadata.

Ratings on item and cannon branches get a small random addend (the jitter)
so rows with equal scores don't look identical. The jitter source is
injectable; pass a seeded ``random.Random`` or a plain callable to pin it.
"""

import logging
import random
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Optional, Union

from .diagnostics import Diagnostics, UNCLASSIFIABLE_RECORD
from .models import CompositeRecord, DisplayLine

logger = logging.getLogger(__name__)

# Only these two ever earned a perfect 10
EXEMPT_NAMES = frozenset({"Chorby Soul", "Parker MacMillan"})

SALMON_BASE_RATING = 2.0
JITTER_CEILING = 0.99

Variance = Callable[[], float]


def round_half_up(value: float, places: int = 1) -> float:
    """Round halves away from zero (6.25 -> 6.3), unlike the built-in round()."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def make_variance(rng: Optional[random.Random] = None) -> Variance:
    """Jitter in [0, 0.99) rounded to one decimal, drawn fresh on every call."""
    rng = rng or random.Random()

    def variance() -> float:
        return round_half_up(rng.random() * JITTER_CEILING)

    return variance


def as_variance(source: Union[Variance, random.Random, None]) -> Variance:
    if source is None or isinstance(source, random.Random):
        return make_variance(source)
    return source


def _text(value: Any) -> str:
    # Missing identities render as empty text rather than "None"
    return "" if value is None else str(value)


def _rating(value: Any) -> str:
    return f"{value}/10"


def stat_loss_rating(record: CompositeRecord) -> float:
    if record.primary_name in EXEMPT_NAMES:
        return 10.0
    if not record.before:
        # Nothing to lose
        return 10.0
    return round_half_up(record.after / record.before * 5 + 5)


def classify(
    record: CompositeRecord,
    variance: Union[Variance, random.Random, None] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> DisplayLine:
    """
    Turn a name-resolved composite record into a display line.

    Args:
        record: Merged record with names already applied
        variance: Jitter source (callable or Random); a fresh Random by default
        diagnostics: Channel for records that match no branch

    Returns:
        DisplayLine with target, "<rating>/10" and comment
    """
    jitter = as_variance(variance)
    primary = _text(record.primary_name)
    modifiers = record.modifiers or 0

    if record.secondary_actor_id is not None:
        if record.item_defended:
            # Defender stepped in with an item: the item gets rated
            return DisplayLine(
                primary,
                _rating(modifiers + jitter()),
                f"(Meal prevented by {_text(record.secondary_name)}'s {_text(record.item)})",
            )
        # Wrestled off by a player. Nobody likes being piledriven.
        return DisplayLine(primary, _rating(0.0), f"(Meal prevented by {_text(record.secondary_name)})")

    if record.item is not None and not record.item_defended:
        # More modifiers, more flavour
        return DisplayLine(f"{primary}'s {record.item}", _rating(modifiers + jitter()), "")

    if record.before is not None and record.after is not None:
        return DisplayLine(primary, _rating(stat_loss_rating(record)), "")

    if (record.description or "").startswith("SALMON"):
        return DisplayLine(
            primary,
            _rating(SALMON_BASE_RATING + jitter()),
            "(Meal prevented by Salmon Cannons)",
        )

    if diagnostics is not None:
        diagnostics.report(
            UNCLASSIFIABLE_RECORD,
            "Failed to classify record",
            record_id=record.record_id,
            description=record.description,
        )
    else:
        logger.warning(f"Failed to classify record {record.record_id}: {record.description!r}")
    return DisplayLine(f"{primary}'s ????", _rating(0), "")
