"""
Event merge engine.

The event log describes one consumer attack as up to three separate events:
the attack itself, the stat loss it caused, and damage to the item that
absorbed it. The latter two point back at the attack through
``metadata.parent``. ``merge`` folds them into one CompositeRecord per attack.

Each kind of fragment writes its own disjoint set of fields, so the result
does not depend on the order fragments arrive in.
"""

import logging
from typing import Dict, Iterable, Optional

from .diagnostics import Diagnostics, UNRECOGNIZED_FRAGMENT_KIND
from .models import CompositeRecord, EventKind, RawEvent

logger = logging.getLogger(__name__)

MAX_MODIFIERS = 5


def item_modifiers(item_name: Optional[str]) -> int:
    """Every word in an item name past the first is a modifier, capped at 5."""
    words = len((item_name or "").split())
    return min(max(words - 1, 0), MAX_MODIFIERS)


def _secondary_actor(fragment: RawEvent) -> Optional[str]:
    tags = fragment.actor_ids
    second = tags[1] if len(tags) > 1 else None

    secondary = None if fragment.description.startswith("CONSUMER") else second
    if secondary is None and "STEELED" in fragment.description:
        secondary = second
    return secondary


def _apply_attack(record: CompositeRecord, fragment: RawEvent) -> None:
    record.description = fragment.description
    record.season = fragment.season
    record.day = fragment.day
    record.primary_actor_id = fragment.actor_ids[0] if fragment.actor_ids else None
    record.secondary_actor_id = _secondary_actor(fragment)
    record.item_defended = "STEELED" in fragment.description


def _apply_stat_loss(record: CompositeRecord, fragment: RawEvent) -> None:
    record.before = fragment.before
    record.after = fragment.after


def _apply_item_change(record: CompositeRecord, fragment: RawEvent) -> None:
    record.item = fragment.item_name
    record.modifiers = item_modifiers(fragment.item_name)


def merge(
    fragments: Iterable[RawEvent],
    diagnostics: Optional[Diagnostics] = None,
) -> Dict[str, CompositeRecord]:
    """
    Fold raw event fragments into composite records keyed by attack id.

    Args:
        fragments: Raw events in any order
        diagnostics: Channel for unrecognized fragment kinds

    Returns:
        Mapping of attack event id to its CompositeRecord
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    records: Dict[str, CompositeRecord] = {}

    def record_for(record_id: str) -> CompositeRecord:
        if record_id not in records:
            records[record_id] = CompositeRecord(record_id=record_id)
        return records[record_id]

    for fragment in fragments:
        if fragment.kind is EventKind.ATTACK_OCCURRED:
            _apply_attack(record_for(fragment.id), fragment)
        elif fragment.kind is EventKind.STAT_LOSS_OCCURRED:
            _apply_stat_loss(record_for(fragment.parent_id), fragment)
        elif fragment.kind is EventKind.ITEM_CHANGED:
            _apply_item_change(record_for(fragment.parent_id), fragment)
        elif fragment.kind is EventKind.COIN_ANNOUNCEMENT:
            # The Coin says "consumers" sometimes; not an attack
            continue
        else:
            diagnostics.report(
                UNRECOGNIZED_FRAGMENT_KIND,
                "Dropping fragment with unrecognized type",
                event_id=fragment.id,
                type_code=fragment.type_code,
                description=fragment.description,
            )

    logger.info(f"Merged fragments into {len(records)} composite records")
    return records
