# -*- coding: utf-8 -*-
"""
Shorthand money amounts in chat ("500k", "24m", "1.5b").

Grammar (case-insensitive):
    token = digits ['.' digits] suffix
    suffix = k (x1,000) | m (x1,000,000) | b (x1,000,000,000)

Values are computed with Decimal and truncated to whole coins. Tokens that do
not fit the grammar, or that come out at zero coins, are not matches. Nothing
here raises for bad input.

Examples:
    recognizer = MoneyRecognizer()
    recognizer.try_parse("500k")    # MoneyAmount(value=500000, display='500K')
    recognizer.try_parse("1.50b")   # MoneyAmount(value=1500000000, display='1.5B')
    recognizer.try_parse("whip")    # None
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from src.utils.dataclasses import MoneyAmount


MONEY_PATTERN = re.compile(r'(\d+(?:\.\d+)?)([kmb])', re.IGNORECASE)

MULTIPLIERS = {
    'k': Decimal(1_000),
    'm': Decimal(1_000_000),
    'b': Decimal(1_000_000_000),
}

_TWO_PLACES = Decimal('0.01')


def format_amount(number: Decimal, suffix: str) -> str:
    """
    Render the number part of an amount with an uppercase suffix.

    Integral numbers print without decimals ("500K"); others print with at
    most two decimals and no trailing zeros ("1.5B", "2.25M").
    """
    suffix = suffix.upper()
    if number == number.to_integral_value():
        return f"{int(number)}{suffix}"
    text = format(number.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP), 'f')
    text = text.rstrip('0').rstrip('.')
    return f"{text}{suffix}"


class MoneyRecognizer:
    """Recognizes money tokens independently of the item vocabulary."""

    def __init__(self, pattern: re.Pattern = MONEY_PATTERN):
        self.pattern = pattern

    def try_parse(self, token: str) -> Optional[MoneyAmount]:
        """
        Parse a whole token as a money amount.

        Args:
            token: Candidate token, e.g. "500k" or "1.5B"

        Returns:
            MoneyAmount, or None if token is not a positive amount
        """
        if not token:
            return None
        match = self.pattern.fullmatch(token)
        if match is None:
            return None

        try:
            number = Decimal(match.group(1))
        except InvalidOperation:
            return None
        if number <= 0:
            return None

        suffix = match.group(2).lower()
        value = int(number * MULTIPLIERS[suffix])
        if value <= 0:
            return None

        return MoneyAmount(value=value, display=format_amount(number, suffix))

    def fits_grammar(self, token: str) -> bool:
        """True if token is money-shaped, whatever its value ("0k" included)."""
        return bool(token) and self.pattern.fullmatch(token) is not None
