# -*- coding: utf-8 -*-
"""
Vocabulary index: immutable lookup structures for the chat scanner.

Built from a raw item snapshot plus an alias table. The builder accepts records
incrementally (the loader feeds it in bounded chunks) and produces a frozen
VocabularyIndex on finalize(). Nothing in a finished index is ever mutated; a
rebuild creates a new index and the store swaps the reference.

Build rules:
    - Reject records with no name, names shorter than min_name_length, and
      noted or placeholder records.
    - Lowercase names; the first id seen for a name wins.
    - Split names into single-word (no whitespace) and multi-word. Multi-word
      names are grouped under their leading alphanumeric run, longest first,
      ties broken lexicographically.
    - Keep an alias only if its target is a known name; aliases are grouped
      the same way as names.

Examples:
    from src.linking.vocabulary_index import VocabularyBuilder

    builder = VocabularyBuilder(alias_table={'tbow': 'twisted bow'})
    builder.add(RawItemRecord(item_id=20997, name='Twisted bow'))
    index = builder.finalize()

    index.multi_word_item_candidates('twisted')   # ('twisted bow',)
    index.resolve_alias('tbow')                   # 'twisted bow'

References:
    config.linking_config.VOCABULARY_CONFIG: min_name_length default
    config.alias_table: ITEM_ALIASES, ALIAS_PRIORITY_ITEMS
"""

# Standard library
import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

# Local
from src.linking.errors import VocabularyStateError
from src.utils.dataclasses import RawItemRecord
from config.linking_config import VOCABULARY_CONFIG

logger = logging.getLogger(__name__)


# ============================================================================
# TEXT HELPERS
# ============================================================================

def fold_case(text: str) -> str:
    """
    Lowercase text without changing its length.

    Offsets into the folded string must line up with the original, so any
    character whose lowercase form is longer than one character is kept as is.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return ''.join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


def leading_word(text: str) -> str:
    """Leading alphanumeric run of text ("craw's bow" -> "craw")."""
    end = 0
    length = len(text)
    while end < length and text[end].isalnum():
        end += 1
    return text[:end]


def is_multi_word(name: str) -> bool:
    return any(ch.isspace() for ch in name)


def _group_by_first_word(names: Iterable[str]) -> Dict[str, Tuple[str, ...]]:
    """Group multi-word names by leading word, longest first."""
    groups: Dict[str, List[str]] = defaultdict(list)
    for name in names:
        first = leading_word(name)
        if first:
            groups[first].append(name)
    return {
        first: tuple(sorted(members, key=lambda n: (-len(n), n)))
        for first, members in groups.items()
    }


# ============================================================================
# INDEX
# ============================================================================

class VocabularyIndex:
    """
    Immutable lookup surface used by the scanner.

    All keys are lowercase. Candidate lists are tuples ordered longest first.
    An empty index is valid: every lookup misses.
    """

    __slots__ = (
        '_name_to_id',
        '_single_word_items',
        '_multi_word_items',
        '_aliases',
        '_single_word_aliases',
        '_multi_word_aliases',
        '_priority_items',
        '_stats',
    )

    def __init__(
        self,
        name_to_id: Mapping[str, int],
        single_word_items: Iterable[str],
        multi_word_items: Mapping[str, Tuple[str, ...]],
        aliases: Mapping[str, str],
        single_word_aliases: Iterable[str],
        multi_word_aliases: Mapping[str, Tuple[str, ...]],
        priority_items: Iterable[str] = (),
        stats: Optional[Mapping[str, int]] = None,
    ):
        self._name_to_id = MappingProxyType(dict(name_to_id))
        self._single_word_items = frozenset(single_word_items)
        self._multi_word_items = MappingProxyType(dict(multi_word_items))
        self._aliases = MappingProxyType(dict(aliases))
        self._single_word_aliases = frozenset(single_word_aliases)
        self._multi_word_aliases = MappingProxyType(dict(multi_word_aliases))
        self._priority_items = frozenset(priority_items)
        self._stats = MappingProxyType(dict(stats or {}))

    @classmethod
    def empty(cls) -> 'VocabularyIndex':
        """Index that never matches anything."""
        return cls({}, (), {}, {}, (), {})

    @classmethod
    def build(
        cls,
        entries: Iterable[RawItemRecord],
        alias_table: Optional[Mapping[str, str]] = None,
        min_name_length: Optional[int] = None,
        priority_names: Iterable[str] = (),
    ) -> 'VocabularyIndex':
        """One-shot build from a complete snapshot."""
        builder = VocabularyBuilder(
            alias_table=alias_table,
            min_name_length=min_name_length,
            priority_names=priority_names,
        )
        builder.add_many(entries)
        return builder.finalize()

    # --- items ---

    def is_single_word_item(self, word: str) -> bool:
        return word in self._single_word_items

    def multi_word_item_candidates(self, first_word: str) -> Tuple[str, ...]:
        return self._multi_word_items.get(first_word, ())

    def is_priority_skip(self, word: str) -> bool:
        return word in self._priority_items

    def id_of(self, canonical_name: str) -> Optional[int]:
        return self._name_to_id.get(canonical_name)

    def __contains__(self, canonical_name: str) -> bool:
        return canonical_name in self._name_to_id

    def __len__(self) -> int:
        return len(self._name_to_id)

    # --- aliases ---

    def is_single_word_alias(self, word: str) -> bool:
        return word in self._single_word_aliases

    def multi_word_alias_candidates(self, first_word: str) -> Tuple[str, ...]:
        return self._multi_word_aliases.get(first_word, ())

    def resolve_alias(self, surface: str) -> Optional[str]:
        return self._aliases.get(surface)

    @property
    def alias_count(self) -> int:
        return len(self._aliases)

    @property
    def stats(self) -> Mapping[str, int]:
        """Build statistics (read-only)."""
        return self._stats

    def __repr__(self) -> str:
        return (
            f"VocabularyIndex(items={len(self._name_to_id)}, "
            f"single_word={len(self._single_word_items)}, "
            f"multi_word_prefixes={len(self._multi_word_items)}, "
            f"aliases={len(self._aliases)})"
        )


# ============================================================================
# BUILDER
# ============================================================================

class VocabularyBuilder:
    """
    Incremental, append-only builder for VocabularyIndex.

    Usage:
        builder = VocabularyBuilder(alias_table=ITEM_ALIASES)
        for record in snapshot:
            builder.add(record)
        index = builder.finalize()

    The builder is single-use: add() and finalize() raise VocabularyStateError
    once finalize() has run.
    """

    def __init__(
        self,
        alias_table: Optional[Mapping[str, str]] = None,
        min_name_length: Optional[int] = None,
        priority_names: Iterable[str] = (),
    ):
        """
        Initialize builder.

        Args:
            alias_table: surface form -> canonical name (any case)
            min_name_length: Shortest indexable name (default from config)
            priority_names: Single-word names skipped when an alias could match
        """
        if min_name_length is None:
            min_name_length = VOCABULARY_CONFIG['min_name_length']
        self.min_name_length = min_name_length
        self.alias_table = dict(alias_table or {})
        self.priority_names = frozenset(fold_case(name) for name in priority_names)

        self._name_to_id: Dict[str, int] = {}
        self._finalized = False
        self.stats = {
            'input_count': 0,
            'rejected_empty': 0,
            'rejected_short': 0,
            'rejected_noted': 0,
            'rejected_placeholder': 0,
            'duplicates': 0,
            'aliases_dropped': 0,
        }

    @property
    def finalized(self) -> bool:
        return self._finalized

    def __len__(self) -> int:
        return len(self._name_to_id)

    def add(self, record: RawItemRecord) -> bool:
        """
        Offer one raw record.

        Returns:
            True if the record added a new name to the vocabulary
        """
        if self._finalized:
            raise VocabularyStateError("Cannot add records to a finalized vocabulary")

        self.stats['input_count'] += 1
        name = record.name

        # The item source reports unnamed ids as the literal string "null"
        if not name or name == 'null':
            self.stats['rejected_empty'] += 1
            return False
        if len(name) < self.min_name_length:
            self.stats['rejected_short'] += 1
            return False
        if record.is_noted:
            self.stats['rejected_noted'] += 1
            return False
        if record.is_placeholder:
            self.stats['rejected_placeholder'] += 1
            return False

        key = fold_case(name)
        if key in self._name_to_id:
            self.stats['duplicates'] += 1
            return False

        self._name_to_id[key] = record.item_id
        return True

    def add_many(self, records: Iterable[RawItemRecord]) -> int:
        """Offer several records; returns how many were accepted."""
        return sum(1 for record in records if self.add(record))

    def finalize(self) -> VocabularyIndex:
        """Freeze collected names and aliases into a VocabularyIndex."""
        if self._finalized:
            raise VocabularyStateError("Vocabulary already finalized")
        self._finalized = True

        single_word_items = []
        multi_word_names = []
        for name in self._name_to_id:
            if is_multi_word(name):
                multi_word_names.append(name)
            else:
                single_word_items.append(name)

        aliases: Dict[str, str] = {}
        for surface, target in self.alias_table.items():
            surface_key = fold_case(surface)
            target_key = fold_case(target)
            if target_key not in self._name_to_id:
                self.stats['aliases_dropped'] += 1
                continue
            aliases[surface_key] = target_key

        single_word_aliases = [s for s in aliases if not is_multi_word(s)]
        multi_word_aliases = [s for s in aliases if is_multi_word(s)]

        multi_word_items = _group_by_first_word(multi_word_names)
        multi_word_alias_groups = _group_by_first_word(multi_word_aliases)

        index = VocabularyIndex(
            name_to_id=self._name_to_id,
            single_word_items=single_word_items,
            multi_word_items=multi_word_items,
            aliases=aliases,
            single_word_aliases=single_word_aliases,
            multi_word_aliases=multi_word_alias_groups,
            priority_items=self.priority_names,
            stats=self.stats,
        )

        rejected = sum(v for k, v in self.stats.items() if k.startswith('rejected_'))
        logger.info(
            f"Loaded {len(index):,} item names "
            f"({len(single_word_items):,} single-word, {len(multi_word_items):,} multi-word prefixes, "
            f"{len(aliases):,} aliases; {rejected:,} rejected, "
            f"{self.stats['aliases_dropped']:,} aliases dropped)"
        )
        return index
