"""
Credits pipeline: fetch -> merge -> resolve -> classify -> sort.

Every stage materializes its whole output before the next starts. Fetch
errors propagate out of here untouched; the caller decides whether the run
failed. Per-fragment and per-record problems go to the Diagnostics channel.
"""

import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Union

from . import classify as classifier
from . import identity
from .diagnostics import Diagnostics
from .merge import merge
from .models import DisplayLine, RawEvent
from .outcomes import count_outcomes
from .sorter import sort_lines

logger = logging.getLogger(__name__)


def build_credits(
    raw_events: Iterable[Dict[str, Any]],
    lookup: identity.IdentityLookup,
    variance: Union[classifier.Variance, random.Random, None] = None,
    diagnostics: Optional[Diagnostics] = None,
    batch_size: int = identity.DEFAULT_BATCH_SIZE,
) -> List[DisplayLine]:
    """
    Build the ordered credit lines from raw event dicts.

    Args:
        raw_events: Event dicts as returned by the event log
        lookup: Identity lookup taking comma-joined ids
        variance: Jitter source for the ratings
        diagnostics: Channel for non-fatal problems
        batch_size: Identity lookup batch size

    Returns:
        Display lines sorted by surname, then season and day
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    jitter = classifier.as_variance(variance)

    fragments = [RawEvent.from_dict(event) for event in raw_events]
    records = list(merge(fragments, diagnostics).values())

    names = identity.resolve(identity.collect_actor_ids(records), lookup, batch_size=batch_size)
    records = identity.apply_names(records, names)

    pairs = [(record, classifier.classify(record, jitter, diagnostics)) for record in records]
    lines = sort_lines(pairs)

    logger.info(f"Built {len(lines)} credit lines ({len(diagnostics)} diagnostics)")
    return lines


def run_attacks(
    event_fetcher,
    player_fetcher,
    variance: Union[classifier.Variance, random.Random, None] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> List[DisplayLine]:
    """Fetch consumer events and player names, then build the credits."""
    events = event_fetcher.fetch_attack_events()
    return build_credits(
        events,
        player_fetcher.fetch_identities,
        variance=variance,
        diagnostics=diagnostics,
        batch_size=player_fetcher.batch_size,
    )


def run_outcome_stats(
    event_fetcher,
    limit: Optional[int] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> Dict[str, Dict[int, int]]:
    """Fetch the newest attack events and tally outcomes per season."""
    return count_outcomes(event_fetcher.fetch_outcome_events(limit), diagnostics)
