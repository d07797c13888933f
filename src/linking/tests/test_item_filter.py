"""
Item filter test suite.

Run: pytest src/linking/tests/test_item_filter.py -v
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.linking.item_filter import ItemFilter, parse_filtered_items, safe_price


PRICES = {4151: 2_000_000, 995: 1, 20997: 1_100_000_000}


class TestParseFilteredItems:
    """Comma-separated exclusion list"""

    def test_trims_lowercases_and_drops_empties(self):
        assert parse_filtered_items(" Coins, ,BONES ,") == frozenset({'coins', 'bones'})

    @pytest.mark.parametrize("value", [None, "", " , "])
    def test_empty(self, value):
        assert parse_filtered_items(value) == frozenset()


class TestSafePrice:
    """Price lookups never raise"""

    def test_known_price(self):
        assert safe_price(PRICES.get, 4151) == 2_000_000

    def test_unknown_price(self):
        assert safe_price(PRICES.get, 1) == 0

    def test_no_lookup(self):
        assert safe_price(None, 4151) == 0

    def test_failing_lookup(self):
        lookup = Mock(side_effect=RuntimeError("price service down"))
        assert safe_price(lookup, 4151) == 0
        lookup.assert_called_once_with(4151)


class TestItemFilter:
    """Exclusion set and price bounds"""

    def test_excluded_name(self):
        item_filter = ItemFilter.from_config("Coins", 0, 0, PRICES.get)
        assert item_filter.is_filtered("coins", 995)
        assert not item_filter.is_filtered("abyssal whip", 4151)
        assert item_filter.stats['excluded_name'] == 1

    def test_bounds_disabled_by_zero(self):
        item_filter = ItemFilter(minimum_value=0, maximum_value=0, price_lookup=PRICES.get)
        assert not item_filter.has_price_bounds
        assert not item_filter.is_filtered("coins", 995)

    def test_minimum_value(self):
        item_filter = ItemFilter(minimum_value=10_000, price_lookup=PRICES.get)
        assert item_filter.is_filtered("coins", 995)
        assert not item_filter.is_filtered("abyssal whip", 4151)
        assert item_filter.stats['below_minimum'] == 1

    def test_maximum_value(self):
        item_filter = ItemFilter(maximum_value=1_000_000_000, price_lookup=PRICES.get)
        assert item_filter.is_filtered("twisted bow", 20997)
        assert not item_filter.is_filtered("abyssal whip", 4151)

    def test_unknown_price_fails_minimum(self):
        lookup = Mock(side_effect=KeyError(4151))
        item_filter = ItemFilter(minimum_value=1, price_lookup=lookup)
        assert item_filter.is_filtered("abyssal whip", 4151)

    def test_update_filtered_items_replaces_set(self):
        item_filter = ItemFilter.from_config("coins", 0, 0)
        item_filter.update_filtered_items("Bones, Ashes")
        assert item_filter.excluded_names == frozenset({'bones', 'ashes'})
        assert not item_filter.is_filtered("coins", 995)

    def test_update_price_bounds(self):
        item_filter = ItemFilter(price_lookup=PRICES.get)
        item_filter.update_price_bounds(minimum_value=5_000_000)
        assert item_filter.is_filtered("abyssal whip", 4151)
        item_filter.update_price_bounds(0, 0)
        assert not item_filter.is_filtered("abyssal whip", 4151)
