# -*- coding: utf-8 -*-
"""
Tier classification of item prices and money amounts.

Thresholds are ascending lower bounds for TIER2..TIER5; anything below the
first bound is TIER1. Evaluating "value >= bound" top-down and taking the
first hit is the same as counting how many bounds the value reaches, which is
what searchsorted does, so classification is monotonic by construction.

Default scales:
    items: >=10M TIER5, >=1M TIER4, >=100K TIER3, >=10K TIER2, else TIER1
    money: >=1B  TIER5, >=100M TIER4, >=10M TIER3, >=1M TIER2, else TIER1

With classification disabled every value maps to Tier.NEUTRAL.

Examples:
    classifier = Classifier()
    classifier.tier(2_000_000)               # Tier.TIER4
    classifier.money_tier(100_000)           # Tier.TIER1
"""

from typing import Optional, Sequence

import numpy as np

from src.utils.dataclasses import Tier
from config.linking_config import CLASSIFICATION_CONFIG


_RANKED_TIERS = (Tier.TIER1, Tier.TIER2, Tier.TIER3, Tier.TIER4, Tier.TIER5)

_INT64_MAX = np.iinfo(np.int64).max


def _as_thresholds(bounds: Sequence[int]) -> np.ndarray:
    thresholds = np.asarray(list(bounds), dtype=np.int64)
    if thresholds.ndim != 1 or len(thresholds) != len(_RANKED_TIERS) - 1:
        raise ValueError(f"Expected {len(_RANKED_TIERS) - 1} thresholds, got {list(bounds)}")
    if np.any(np.diff(thresholds) <= 0):
        raise ValueError(f"Thresholds must be strictly ascending: {list(bounds)}")
    return thresholds


class Classifier:
    """
    Maps numeric values to ordered tiers.

    Attributes:
        enabled: False puts every value in Tier.NEUTRAL
        item_thresholds: Bounds used for item prices
        money_thresholds: Bounds used for parsed money amounts
    """

    def __init__(
        self,
        enabled: Optional[bool] = None,
        item_thresholds: Optional[Sequence[int]] = None,
        money_thresholds: Optional[Sequence[int]] = None,
    ):
        if enabled is None:
            enabled = CLASSIFICATION_CONFIG['color_by_rarity']
        self.enabled = enabled
        if item_thresholds is None:
            item_thresholds = CLASSIFICATION_CONFIG['item_thresholds']
        if money_thresholds is None:
            money_thresholds = CLASSIFICATION_CONFIG['money_thresholds']
        self.item_thresholds = _as_thresholds(item_thresholds)
        self.money_thresholds = _as_thresholds(money_thresholds)

    @staticmethod
    def _rank(value: int, thresholds: np.ndarray) -> Tier:
        # "99999999999b" does not fit in int64
        value = min(int(value), _INT64_MAX)
        position = int(np.searchsorted(thresholds, value, side='right'))
        return _RANKED_TIERS[position]

    def tier(self, value: int) -> Tier:
        """Tier for an item price (0 or unknown -> TIER1)."""
        if not self.enabled:
            return Tier.NEUTRAL
        return self._rank(value, self.item_thresholds)

    def money_tier(self, value: int) -> Tier:
        """Tier for a parsed money amount."""
        if not self.enabled:
            return Tier.NEUTRAL
        return self._rank(value, self.money_thresholds)
