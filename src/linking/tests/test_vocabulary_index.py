"""
Vocabulary index test suite.

Tests the build rules (rejections, first id wins, single/multi-word split,
grouping order, alias pruning), the builder lifecycle and the text helpers
the scanner relies on.

Run: pytest src/linking/tests/test_vocabulary_index.py -v
"""

import sys
from pathlib import Path

import pytest

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.linking.errors import VocabularyStateError
from src.linking.vocabulary_index import (
    VocabularyBuilder,
    VocabularyIndex,
    fold_case,
    is_multi_word,
    leading_word,
)
from src.utils.dataclasses import RawItemRecord
from config.alias_table import ALIAS_PRIORITY_ITEMS, ITEM_ALIASES, build_alias_table


@pytest.fixture
def records():
    return [
        RawItemRecord(4151, "Abyssal whip"),
        RawItemRecord(4152, "Abyssal whip"),            # duplicate name, later id
        RawItemRecord(20997, "Twisted bow"),
        RawItemRecord(12954, "Dragon defender"),
        RawItemRecord(19722, "Dragon defender (t)"),
        RawItemRecord(22550, "Craw's bow"),
        RawItemRecord(995, "Coins"),
        RawItemRecord(1351, "Axe"),                     # too short
        RawItemRecord(4152, "Abyssal whip", is_noted=True),
        RawItemRecord(14000, "Twisted bow", is_placeholder=True),
        RawItemRecord(1, None),
        RawItemRecord(2, "null"),
        RawItemRecord(3, ""),
    ]


@pytest.fixture
def aliases():
    return {
        'tbow': 'twisted bow',
        'whip': 'abyssal whip',
        'craws bow': "craw's bow",
        'dfs': 'dragonfire shield',                     # target not in vocabulary
    }


@pytest.fixture
def index(records, aliases):
    return VocabularyIndex.build(records, alias_table=aliases)


# ============================================================================
# Text helpers
# ============================================================================

class TestTextHelpers:
    """Case folding and word extraction"""

    def test_fold_case_lowercases(self):
        assert fold_case("Abyssal WHIP") == "abyssal whip"

    def test_fold_case_keeps_length(self):
        # U+0130 lowercases to two code points
        text = "İstanbul whip"
        assert len(fold_case(text)) == len(text)
        assert fold_case(text).endswith("whip")

    def test_leading_word_stops_at_punctuation(self):
        assert leading_word("craw's bow") == "craw"
        assert leading_word("3rd age bow") == "3rd"
        assert leading_word("(t)") == ""

    def test_is_multi_word(self):
        assert is_multi_word("twisted bow")
        assert not is_multi_word("anti-venom(4)")


# ============================================================================
# Build rules
# ============================================================================

class TestBuildRules:
    """Record acceptance and partitioning"""

    def test_rejects_short_noted_placeholder_and_empty(self, index):
        assert "axe" not in index
        assert "null" not in index
        assert len(index) == 6

    def test_first_id_wins(self, index):
        assert index.id_of("abyssal whip") == 4151

    def test_single_and_multi_word_split(self, index):
        assert index.is_single_word_item("coins")
        assert not index.is_single_word_item("abyssal whip")
        assert index.multi_word_item_candidates("abyssal") == ("abyssal whip",)

    def test_multi_word_candidates_longest_first(self, index):
        assert index.multi_word_item_candidates("dragon") == (
            "dragon defender (t)",
            "dragon defender",
        )

    def test_grouped_under_leading_alphanumeric_run(self, index):
        assert index.multi_word_item_candidates("craw") == ("craw's bow",)

    def test_unknown_prefix_has_no_candidates(self, index):
        assert index.multi_word_item_candidates("rune") == ()

    def test_stats_count_rejections(self, records, aliases):
        builder = VocabularyBuilder(alias_table=aliases)
        builder.add_many(records)
        builder.finalize()

        assert builder.stats['input_count'] == len(records)
        assert builder.stats['rejected_short'] == 1
        assert builder.stats['rejected_noted'] == 1
        assert builder.stats['rejected_placeholder'] == 1
        assert builder.stats['rejected_empty'] == 3
        assert builder.stats['duplicates'] == 1

    def test_custom_min_name_length(self):
        index = VocabularyIndex.build([RawItemRecord(1351, "Axe")], min_name_length=3)
        assert index.is_single_word_item("axe")


# ============================================================================
# Aliases
# ============================================================================

class TestAliases:
    """Alias pruning and lookup"""

    def test_alias_resolves_to_canonical(self, index):
        assert index.resolve_alias("tbow") == "twisted bow"
        assert index.is_single_word_alias("tbow")

    def test_alias_with_unknown_target_dropped(self, index):
        assert index.resolve_alias("dfs") is None
        assert index.stats['aliases_dropped'] == 1

    def test_every_alias_resolves_to_known_name(self, records):
        index = VocabularyIndex.build(records, alias_table=ITEM_ALIASES)
        for surface in ITEM_ALIASES:
            target = index.resolve_alias(surface)
            if target is not None:
                assert index.id_of(target) is not None

    def test_multi_word_alias_grouped(self, index):
        assert index.multi_word_alias_candidates("craws") == ("craws bow",)

    def test_alias_keys_case_folded(self, records):
        index = VocabularyIndex.build(records, alias_table={'TBow': 'Twisted Bow'})
        assert index.resolve_alias("tbow") == "twisted bow"

    def test_priority_names(self, records):
        index = VocabularyIndex.build(records, priority_names=["Coins"])
        assert index.is_priority_skip("coins")
        assert not index.is_priority_skip("twisted")


class TestAliasTable:
    """Static alias table"""

    def test_last_write_wins(self):
        table = build_alias_table([("fang", "first"), ("Fang ", "second")])
        assert table == {'fang': 'second'}

    def test_known_entries(self):
        assert ITEM_ALIASES['tbow'] == 'twisted bow'
        assert 'scythe' in ALIAS_PRIORITY_ITEMS


# ============================================================================
# Lifecycle
# ============================================================================

class TestBuilderLifecycle:
    """Single-use builder"""

    def test_add_after_finalize_raises(self):
        builder = VocabularyBuilder()
        builder.finalize()
        with pytest.raises(VocabularyStateError):
            builder.add(RawItemRecord(4151, "Abyssal whip"))

    def test_finalize_twice_raises(self):
        builder = VocabularyBuilder()
        builder.finalize()
        with pytest.raises(VocabularyStateError):
            builder.finalize()

    def test_empty_index_never_matches(self):
        index = VocabularyIndex.empty()
        assert len(index) == 0
        assert index.multi_word_item_candidates("abyssal") == ()
        assert not index.is_single_word_item("coins")
        assert index.resolve_alias("tbow") is None
