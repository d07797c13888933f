# -*- coding: utf-8 -*-
"""
Player-configured item filter: exclusion list plus price bounds.

An item is suppressed (left as plain text, no reference event) when its
lowercase canonical name is in the exclusion set, or when a price bound is
configured and violated. Bounds of 0 are disabled. The price comes from an
external lookup; a lookup that fails or returns 0 is treated as price 0, which
only matters if a minimum is configured.

Filter statistics are kept per reason for monitoring, the same way the
extraction filters count their discards.

Examples:
    from src.linking.item_filter import ItemFilter

    item_filter = ItemFilter.from_config("Coins, Bones", minimum_value=0,
                                         maximum_value=0, price_lookup=prices.get)
    item_filter.is_filtered("coins", 995)    # True
    item_filter.update_filtered_items("")    # config changed: nothing excluded

References:
    config.linking_config.FILTER_CONFIG: filtered_items, minimum/maximum_item_value
"""

import logging
from collections import Counter
from typing import Callable, FrozenSet, Iterable, Optional

from config.linking_config import FILTER_CONFIG

logger = logging.getLogger(__name__)

PriceLookup = Callable[[int], int]


def parse_filtered_items(filter_string: Optional[str]) -> FrozenSet[str]:
    """
    Parse a comma-separated exclusion list.

    Entries are trimmed and lowercased; empty entries are dropped.
    """
    if not filter_string:
        return frozenset()
    names = (part.strip().lower() for part in filter_string.split(','))
    return frozenset(name for name in names if name)


def safe_price(price_lookup: Optional[PriceLookup], item_id: int) -> int:
    """Price of item_id, or 0 if unknown or the lookup fails."""
    if price_lookup is None:
        return 0
    try:
        price = price_lookup(item_id)
    except Exception as e:
        logger.debug(f"Price lookup failed for item {item_id}: {e}")
        return 0
    if not price:
        return 0
    try:
        return int(price)
    except (TypeError, ValueError):
        return 0


class ItemFilter:
    """
    Exclusion set and price bounds applied to every item match.

    The exclusion set is replaced as a whole on config change, so a scan in
    progress sees either the old or the new set.
    """

    def __init__(
        self,
        excluded_names: Iterable[str] = (),
        minimum_value: int = 0,
        maximum_value: int = 0,
        price_lookup: Optional[PriceLookup] = None,
    ):
        """
        Initialize filter.

        Args:
            excluded_names: Item names never linked (any case)
            minimum_value: Link only items worth at least this (0 disables)
            maximum_value: Link only items worth at most this (0 disables)
            price_lookup: item_id -> price; None means every price is 0
        """
        self.excluded_names = frozenset(name.strip().lower() for name in excluded_names)
        self.minimum_value = max(0, int(minimum_value or 0))
        self.maximum_value = max(0, int(maximum_value or 0))
        self.price_lookup = price_lookup
        self.stats = Counter()

    @classmethod
    def from_config(
        cls,
        filtered_items: Optional[str] = None,
        minimum_value: Optional[int] = None,
        maximum_value: Optional[int] = None,
        price_lookup: Optional[PriceLookup] = None,
    ) -> 'ItemFilter':
        """Build from player config values (defaults from FILTER_CONFIG)."""
        if filtered_items is None:
            filtered_items = FILTER_CONFIG['filtered_items']
        if minimum_value is None:
            minimum_value = FILTER_CONFIG['minimum_item_value']
        if maximum_value is None:
            maximum_value = FILTER_CONFIG['maximum_item_value']
        return cls(
            excluded_names=parse_filtered_items(filtered_items),
            minimum_value=minimum_value,
            maximum_value=maximum_value,
            price_lookup=price_lookup,
        )

    @property
    def has_price_bounds(self) -> bool:
        return self.minimum_value > 0 or self.maximum_value > 0

    def update_filtered_items(self, filter_string: Optional[str]) -> None:
        """Replace the exclusion set from a comma-separated config string."""
        self.excluded_names = parse_filtered_items(filter_string)
        logger.debug(f"Updated item filter with {len(self.excluded_names)} items")

    def update_price_bounds(self, minimum_value: int = 0, maximum_value: int = 0) -> None:
        self.minimum_value = max(0, int(minimum_value or 0))
        self.maximum_value = max(0, int(maximum_value or 0))

    def is_filtered(self, canonical_name: str, item_id: int) -> bool:
        """
        Check whether an item must be left unlinked.

        Args:
            canonical_name: Lowercase canonical name
            item_id: Item id used for the price lookup

        Returns:
            True if the item is excluded by name or outside the price bounds
        """
        if canonical_name in self.excluded_names:
            self.stats['excluded_name'] += 1
            return True

        if not self.has_price_bounds:
            return False

        price = safe_price(self.price_lookup, item_id)
        if self.minimum_value > 0 and price < self.minimum_value:
            self.stats['below_minimum'] += 1
            return True
        if self.maximum_value > 0 and price > self.maximum_value:
            self.stats['above_maximum'] += 1
            return True
        return False
