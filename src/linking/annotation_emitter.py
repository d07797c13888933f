# -*- coding: utf-8 -*-
"""
Annotation emitter: turns scanner matches into tagged text and reference events.

For every candidate the scanner hands over, the emitter decides:
    1. Filtering - excluded or out-of-bounds items render nothing (the scanner
       then copies the source text through).
    2. Display text - alias matches show the canonical name in title case;
       direct name matches keep the casing typed in chat.
    3. Classification - item prices come from the price lookup, money tokens
       use their parsed value; the Classifier picks the tier.
    4. Events - one ReferenceEvent(item_id, 1) per linked item. Money tokens
       produce no event.

Markup styles:
    tier: <tier=TIER4>Abyssal whip</tier>
    col:  <col=a335ee>Abyssal whip</col><col=9090ff>

Examples:
    emitter = AnnotationEmitter(classifier, item_filter, price_lookup=prices.get)
    events = []
    emitter.render_item(match, events)   # '<tier=TIER4>Abyssal whip</tier>'
    events                               # [ReferenceEvent(item_id=4151, quantity=1)]
"""

import logging
from typing import Dict, List, Optional

from src.linking.classifier import Classifier
from src.linking.item_filter import ItemFilter, PriceLookup, safe_price
from src.utils.dataclasses import ItemMatch, MoneyAmount, ReferenceEvent, Tier
from config.linking_config import COINS_ITEM_ID, COINS_NAME, MARKUP_CONFIG

logger = logging.getLogger(__name__)


def title_case(name: str) -> str:
    """
    Capitalize the first letter of every whitespace-delimited word.

    An apostrophe never triggers capitalization ("osmumten's fang" ->
    "Osmumten's Fang", not "Osmumten'S Fang").
    """
    if not name:
        return name
    chars = []
    capitalize_next = True
    for ch in name:
        if ch.isspace():
            capitalize_next = True
            chars.append(ch)
        elif ch == "'":
            chars.append(ch)
        elif capitalize_next:
            chars.append(ch.upper())
            capitalize_next = False
        else:
            chars.append(ch)
    return ''.join(chars)


# ============================================================================
# MARKUP
# ============================================================================

class TierMarkup:
    """Wraps display text in a tier token."""

    STYLES = ('tier', 'col')

    def __init__(
        self,
        style: Optional[str] = None,
        tier_colors: Optional[Dict[str, str]] = None,
        money_base_color: Optional[str] = None,
        restore_color: Optional[str] = None,
    ):
        style = style or MARKUP_CONFIG['style']
        if style not in self.STYLES:
            raise ValueError(f"Unknown markup style '{style}' (expected one of {self.STYLES})")
        self.style = style
        self.tier_colors = dict(tier_colors or MARKUP_CONFIG['tier_colors'])
        self.money_base_color = money_base_color or MARKUP_CONFIG['money_base_color']
        self.restore_color = restore_color or MARKUP_CONFIG['restore_color']

    def color_for(self, tier: Tier, money: bool = False) -> str:
        if money and tier is Tier.TIER1:
            return self.money_base_color
        return self.tier_colors[tier.tag]

    def wrap(self, text: str, tier: Tier, money: bool = False) -> str:
        if self.style == 'col':
            color = self.color_for(tier, money=money)
            return f"<col={color}>{text}</col><col={self.restore_color}>"
        return f"<tier={tier.tag}>{text}</tier>"


# ============================================================================
# EMITTER
# ============================================================================

class AnnotationEmitter:
    """
    Resolves display form, filtering and tier for each match.

    Attributes:
        classifier: Tier classifier (may be disabled)
        item_filter: Exclusion set and price bounds
        price_lookup: item_id -> price, 0 when unknown
        markup: Tier token renderer
    """

    def __init__(
        self,
        classifier: Classifier,
        item_filter: ItemFilter,
        price_lookup: Optional[PriceLookup] = None,
        markup: Optional[TierMarkup] = None,
        coins_item_id: int = COINS_ITEM_ID,
        coins_name: str = COINS_NAME,
    ):
        self.classifier = classifier
        self.item_filter = item_filter
        self.price_lookup = price_lookup
        self.markup = markup or TierMarkup()
        self.coins_item_id = coins_item_id
        self.coins_name = coins_name

    @staticmethod
    def display_text(match: ItemMatch) -> str:
        """Canonical title case for aliases, typed casing otherwise."""
        if match.via_alias:
            return title_case(match.canonical_name)
        return match.source_text

    def render_item(self, match: ItemMatch, events: List[ReferenceEvent]) -> Optional[str]:
        """
        Render an item match and record its reference event.

        Args:
            match: Match produced by the scanner
            events: Per-line event list, appended to on success

        Returns:
            Tagged text, or None if the item is filtered
        """
        if self.item_filter.is_filtered(match.canonical_name, match.item_id):
            logger.debug(f"Filtered item '{match.canonical_name}' ({match.item_id})")
            return None

        price = safe_price(self.price_lookup, match.item_id)
        tier = self.classifier.tier(price)
        events.append(ReferenceEvent(item_id=match.item_id, quantity=1))
        return self.markup.wrap(self.display_text(match), tier)

    def render_money(self, amount: MoneyAmount) -> Optional[str]:
        """
        Render a money token, or None if coins are filtered.

        Money is filtered as the coins item, so excluding "coins" or a price
        bound that coins fail also hides "500k".
        """
        if self.item_filter.is_filtered(self.coins_name, self.coins_item_id):
            return None
        tier = self.classifier.money_tier(amount.value)
        return self.markup.wrap(amount.display, tier, money=True)
