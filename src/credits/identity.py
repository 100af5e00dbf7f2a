"""Identity resolver: turn actor ids into the names shown in the credits."""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .models import CompositeRecord, PlayerIdentity

logger = logging.getLogger(__name__)

# The players endpoint accepts at most this many ids per request
DEFAULT_BATCH_SIZE = 10

IdentityLookup = Callable[[str], List[Dict[str, Any]]]


def collect_actor_ids(records: Iterable[CompositeRecord]) -> List[str]:
    """Every primary and secondary actor id, first-seen order, without duplicates or None."""
    ids: Dict[str, None] = {}
    for record in records:
        for actor_id in (record.primary_actor_id, record.secondary_actor_id):
            if actor_id is not None:
                ids.setdefault(actor_id, None)
    return list(ids)


def resolve(
    ids: Iterable[str],
    lookup: IdentityLookup,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> Dict[str, Optional[str]]:
    """
    Look up display names for ``ids`` in batches.

    Args:
        ids: Actor ids; duplicates are collapsed
        lookup: Callable taking comma-joined ids and returning player dicts
        batch_size: Maximum ids per lookup call

    Returns:
        Mapping of id to display name. Ids the lookup does not return are absent.
    """
    unique = list(dict.fromkeys(i for i in ids if i is not None))
    names: Dict[str, Optional[str]] = {}

    for start in range(0, len(unique), batch_size):
        batch = unique[start:start + batch_size]
        for player in lookup(",".join(batch)):
            identity = PlayerIdentity.from_dict(player)
            names[identity.id] = identity.display_name

    missing = len(unique) - len(set(unique) & set(names))
    if missing:
        logger.info(f"{missing} actor id(s) had no identity record")
    return names


def apply_names(records: Iterable[CompositeRecord], names: Dict[str, Optional[str]]) -> List[CompositeRecord]:
    """Fill primary and secondary names from a resolved mapping."""
    resolved = []
    for record in records:
        record.primary_name = names.get(record.primary_actor_id)
        if record.secondary_actor_id is not None:
            record.secondary_name = names.get(record.secondary_actor_id)
        resolved.append(record)
    return resolved
