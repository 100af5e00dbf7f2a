"""
Data models for the consumer attack credits.

Raw events arrive as loose dicts from the event log; ``RawEvent.from_dict``
pins them to a fixed shape before anything else looks at them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventKind(Enum):
    ATTACK_OCCURRED = "AttackOccurred"
    STAT_LOSS_OCCURRED = "StatLossOccurred"
    ITEM_CHANGED = "ItemChanged"
    COIN_ANNOUNCEMENT = "CoinAnnouncement"

    @classmethod
    def from_code(cls, code: Optional[int]) -> Optional["EventKind"]:
        """Map the event log's numeric type code, or None when unknown."""
        return EVENT_TYPE_CODES.get(code)


# Event log type codes
EVENT_TYPE_CODES: Dict[int, EventKind] = {
    67: EventKind.ATTACK_OCCURRED,
    118: EventKind.STAT_LOSS_OCCURRED,
    185: EventKind.ITEM_CHANGED,  # item damaged
    186: EventKind.ITEM_CHANGED,  # item broken
    29: EventKind.COIN_ANNOUNCEMENT,
}


@dataclass(frozen=True)
class RawEvent:
    id: str
    kind: Optional[EventKind]
    type_code: Optional[int]
    season: int
    day: int
    description: str
    actor_ids: List[str] = field(default_factory=list)
    parent_id: Optional[str] = None
    before: Optional[float] = None
    after: Optional[float] = None
    item_name: Optional[str] = None

    @classmethod
    def from_dict(cls, event: Dict[str, Any]) -> "RawEvent":
        metadata = event.get("metadata") or {}
        type_code = event.get("type")
        return cls(
            id=event.get("id"),
            kind=EventKind.from_code(type_code),
            type_code=type_code,
            season=event.get("season", 0),
            day=event.get("day", 0),
            description=event.get("description") or "",
            actor_ids=list(event.get("playerTags") or []),
            parent_id=metadata.get("parent"),
            before=metadata.get("before"),
            after=metadata.get("after"),
            item_name=metadata.get("itemName"),
        )


@dataclass
class CompositeRecord:
    """Merged view of every fragment that belongs to one attack."""
    record_id: str
    description: Optional[str] = None
    season: Optional[int] = None
    day: Optional[int] = None
    primary_actor_id: Optional[str] = None
    secondary_actor_id: Optional[str] = None
    item_defended: bool = False
    before: Optional[float] = None
    after: Optional[float] = None
    item: Optional[str] = None
    modifiers: Optional[int] = None
    primary_name: Optional[str] = None
    secondary_name: Optional[str] = None


@dataclass(frozen=True)
class PlayerIdentity:
    id: str
    display_name: Optional[str]
    is_altered: bool = False
    altered_original_name: Optional[str] = None

    @classmethod
    def from_dict(cls, player: Dict[str, Any]) -> "PlayerIdentity":
        # Players scattered by the desert keep their real name in state
        is_altered = "SCATTERED" in (player.get("permAttr") or [])
        original = (player.get("state") or {}).get("unscatteredName")
        return cls(
            id=player.get("id"),
            display_name=original if is_altered else player.get("name"),
            is_altered=is_altered,
            altered_original_name=original,
        )


@dataclass(frozen=True)
class DisplayLine:
    target: str
    rating: str
    comment: str = ""

    def as_row(self) -> List[str]:
        return [self.target, self.rating, self.comment]
