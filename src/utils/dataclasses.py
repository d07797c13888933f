# -*- coding: utf-8 -*-
"""
Core data structures for the chat item linking engine

Single source of truth for records that cross module boundaries: raw item
records coming from a vocabulary source, matches found by the scanner, the
"item referenced" events handed to the registry sink and the per-line
annotation result. Import from this module rather than individual modules for
consistency.

Examples:
# Raw record from a vocabulary snapshot
    from src.utils.dataclasses import RawItemRecord, Tier

    record = RawItemRecord(item_id=4151, name="Abyssal whip")

    # Tiers are ordered
    assert Tier.TIER1 < Tier.TIER5

"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


# ============================================================================
# ENUMS
# ============================================================================

class Tier(Enum):
    """
    Ordered classification bucket derived from a numeric value.

    NEUTRAL is used when classification is disabled and sorts below TIER1.
    """
    NEUTRAL = 0
    TIER1 = 1
    TIER2 = 2
    TIER3 = 3
    TIER4 = 4
    TIER5 = 5

    def __lt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.value <= other.value

    @property
    def tag(self) -> str:
        """Identifier carried in markup ("TIER4")."""
        return self.name


class MatchKind(Enum):
    """How an item span was recognized (precedence order)."""
    MULTI_WORD_ITEM = "multi_word_item"
    SINGLE_WORD_ITEM = "single_word_item"
    MULTI_WORD_ALIAS = "multi_word_alias"
    SINGLE_WORD_ALIAS = "single_word_alias"

    @property
    def via_alias(self) -> bool:
        return self in (MatchKind.MULTI_WORD_ALIAS, MatchKind.SINGLE_WORD_ALIAS)


# ============================================================================
# VOCABULARY SOURCE
# ============================================================================

@dataclass(frozen=True)
class RawItemRecord:
    """
    One entry of a vocabulary snapshot.

    Name may be None or empty (unnamed ids exist in the source); such records
    are rejected by the index builder, not here.
    """
    item_id: int
    name: Optional[str]
    is_noted: bool = False
    is_placeholder: bool = False


# ============================================================================
# SCANNING
# ============================================================================

@dataclass(frozen=True)
class ItemMatch:
    """
    Vocabulary match found at a boundary position.

    canonical_name is lowercase; source_text is the original slice of the
    line that was consumed (alias surface or canonical name as typed).
    """
    item_id: int
    canonical_name: str
    source_text: str
    kind: MatchKind

    @property
    def span_length(self) -> int:
        return len(self.source_text)

    @property
    def via_alias(self) -> bool:
        return self.kind.via_alias


@dataclass(frozen=True)
class MoneyAmount:
    """Parsed shorthand amount ("1.5b" -> 1_500_000_000, "1.5B")."""
    value: int
    display: str


@dataclass(frozen=True)
class ReferenceEvent:
    """An item was referenced in a chat line."""
    item_id: int
    quantity: int = 1


@dataclass
class AnnotationResult:
    """Output of annotating one line."""
    text: str
    events: List[ReferenceEvent] = field(default_factory=list)

    @property
    def item_ids(self) -> List[int]:
        """Convenience - referenced ids in order."""
        return [event.item_id for event in self.events]
