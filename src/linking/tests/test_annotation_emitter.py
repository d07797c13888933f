"""
Annotation emitter test suite.

Tests display text (typed casing vs. alias title case), tier markup in both
styles, filtering and the reference events produced per match.

Run: pytest src/linking/tests/test_annotation_emitter.py -v
"""

import sys
from pathlib import Path

import pytest

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.linking.annotation_emitter import AnnotationEmitter, TierMarkup, title_case
from src.linking.classifier import Classifier
from src.linking.item_filter import ItemFilter
from src.utils.dataclasses import ItemMatch, MatchKind, MoneyAmount, ReferenceEvent, Tier


PRICES = {4151: 2_000_000, 20997: 1_100_000_000, 995: 1}


def make_emitter(filtered="", style="tier", enabled=True, minimum_value=0):
    return AnnotationEmitter(
        classifier=Classifier(enabled=enabled),
        item_filter=ItemFilter.from_config(filtered, minimum_value, 0, PRICES.get),
        price_lookup=PRICES.get,
        markup=TierMarkup(style=style),
    )


@pytest.fixture
def whip_match():
    return ItemMatch(4151, "abyssal whip", "Abyssal whip", MatchKind.MULTI_WORD_ITEM)


@pytest.fixture
def tbow_match():
    return ItemMatch(20997, "twisted bow", "tbow", MatchKind.SINGLE_WORD_ALIAS)


# ============================================================================
# Title case
# ============================================================================

class TestTitleCase:
    """Alias display names"""

    @pytest.mark.parametrize("name,expected", [
        ("twisted bow", "Twisted Bow"),
        ("osmumten's fang", "Osmumten's Fang"),
        ("craw's bow", "Craw's Bow"),
        ("3rd age bow", "3rd Age Bow"),
        ("", ""),
    ])
    def test_title_case(self, name, expected):
        assert title_case(name) == expected


# ============================================================================
# Markup
# ============================================================================

class TestTierMarkup:
    """Tier token rendering"""

    def test_tier_style(self):
        assert TierMarkup(style="tier").wrap("Abyssal whip", Tier.TIER4) == "<tier=TIER4>Abyssal whip</tier>"

    def test_col_style(self):
        markup = TierMarkup(style="col")
        assert markup.wrap("Abyssal whip", Tier.TIER4) == "<col=a335ee>Abyssal whip</col><col=9090ff>"

    def test_col_money_base_is_gold(self):
        markup = TierMarkup(style="col")
        assert markup.wrap("100K", Tier.TIER1, money=True) == "<col=ffd700>100K</col><col=9090ff>"
        assert markup.wrap("Coins", Tier.TIER1) == "<col=ffffff>Coins</col><col=9090ff>"

    def test_col_neutral(self):
        assert TierMarkup(style="col").color_for(Tier.NEUTRAL) == "ff8000"

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            TierMarkup(style="html")


# ============================================================================
# Emitter
# ============================================================================

class TestRenderItem:
    """Display text, tier and events"""

    def test_direct_match_keeps_typed_casing(self, whip_match):
        events = []
        rendered = make_emitter().render_item(whip_match, events)
        assert rendered == "<tier=TIER4>Abyssal whip</tier>"
        assert events == [ReferenceEvent(4151, 1)]

    def test_alias_match_uses_title_case(self, tbow_match):
        events = []
        rendered = make_emitter().render_item(tbow_match, events)
        assert rendered == "<tier=TIER5>Twisted Bow</tier>"
        assert events == [ReferenceEvent(20997, 1)]

    def test_filtered_item_renders_nothing(self, whip_match):
        events = []
        assert make_emitter(filtered="Abyssal whip").render_item(whip_match, events) is None
        assert events == []

    def test_unknown_price_is_tier1(self):
        events = []
        match = ItemMatch(1, "mystery box", "mystery box", MatchKind.MULTI_WORD_ITEM)
        assert make_emitter().render_item(match, events) == "<tier=TIER1>mystery box</tier>"

    def test_classification_disabled(self, whip_match):
        rendered = make_emitter(enabled=False).render_item(whip_match, [])
        assert rendered == "<tier=NEUTRAL>Abyssal whip</tier>"


class TestRenderMoney:
    """Money tokens behave like the coins item"""

    def test_money_tier(self):
        assert make_emitter().render_money(MoneyAmount(100_000, "100K")) == "<tier=TIER1>100K</tier>"
        assert make_emitter().render_money(MoneyAmount(1_500_000_000, "1.5B")) == "<tier=TIER5>1.5B</tier>"

    def test_coins_excluded(self):
        assert make_emitter(filtered="coins").render_money(MoneyAmount(500_000, "500K")) is None

    def test_coins_below_minimum(self):
        assert make_emitter(minimum_value=10).render_money(MoneyAmount(500_000, "500K")) is None
