# -*- coding: utf-8 -*-
"""
Longest-match, word-boundary scanner for chat lines.

Walks the line left to right. Only a word boundary start (start of line or
after a non-alphanumeric character, on an alphanumeric character) can begin a
match; everything else is copied through. At a boundary the maximal
alphanumeric run ("word") is extracted and tried in fixed precedence:

    1. money token            ("500k", "1.5b")
    2. multi-word item name   (longest candidate first)
    3. single-word item name  (never for alias-priority names)
    4. multi-word alias       (longest candidate first)
    5. single-word alias

Multi-word candidates must match case-insensitively at the position and be
followed by end of line or a non-alphanumeric character. A word that matches
nothing, or whose match is filtered, is copied through whole.

The scanner holds no state between lines and never raises for text input.
Regex use is confined to the money grammar.

Examples:
    scanner = Scanner(MoneyRecognizer(), emitter)
    result = scanner.scan("selling tbow 1.1b", index)
    result.text     # 'selling <tier=TIER5>Twisted Bow</tier> <tier=TIER5>1.1B</tier>'
    result.events   # [ReferenceEvent(item_id=20997, quantity=1)]
"""

import logging
from typing import List, Optional

from src.linking.annotation_emitter import AnnotationEmitter
from src.linking.money_recognizer import MoneyRecognizer
from src.linking.vocabulary_index import VocabularyIndex, fold_case
from src.utils.dataclasses import AnnotationResult, ItemMatch, MatchKind, ReferenceEvent

logger = logging.getLogger(__name__)


def word_end(text: str, start: int) -> int:
    """Index just past the alphanumeric run starting at start."""
    end = start
    length = len(text)
    while end < length and text[end].isalnum():
        end += 1
    return end


def is_boundary_start(text: str, position: int) -> bool:
    """True if a word starts at position."""
    if not text[position].isalnum():
        return False
    return position == 0 or not text[position - 1].isalnum()


def matches_at(folded: str, start: int, candidate: str) -> bool:
    """Candidate occurs at start and is not followed by an alphanumeric character."""
    if not folded.startswith(candidate, start):
        return False
    end = start + len(candidate)
    return end == len(folded) or not folded[end].isalnum()


class Scanner:
    """
    Drives recognition over one line against an immutable VocabularyIndex.

    Attributes:
        money_recognizer: Shorthand amount parser
        emitter: Filtering, display, tier and event decisions
    """

    def __init__(self, money_recognizer: MoneyRecognizer, emitter: AnnotationEmitter):
        self.money_recognizer = money_recognizer
        self.emitter = emitter

    # ------------------------------------------------------------------------
    # MATCHING
    # ------------------------------------------------------------------------

    def _money_at(self, folded: str, start: int, end: int):
        """
        Money token at start, with the end of the consumed span.

        "." ends an alphanumeric run, so "1.5b" arrives as "1"; a digit run
        followed by "." and another run is offered whole first. A decimal span
        that fits the grammar but is not a positive amount ("0.0001k") comes
        back as (None, end of span) so it is copied through in one piece.
        """
        word = folded[start:end]
        if word.isdigit() and end + 1 < len(folded) and folded[end] == '.' \
                and folded[end + 1].isalnum():
            extended_end = word_end(folded, end + 1)
            token = folded[start:extended_end]
            amount = self.money_recognizer.try_parse(token)
            if amount is not None:
                return amount, extended_end
            if self.money_recognizer.fits_grammar(token):
                return None, extended_end
        return self.money_recognizer.try_parse(word), end

    @staticmethod
    def find_item(
        index: VocabularyIndex,
        line: str,
        folded: str,
        start: int,
        word: str,
    ) -> Optional[ItemMatch]:
        """
        Best vocabulary match for the word starting at start.

        Args:
            index: Vocabulary snapshot
            line: Original line (source of display casing)
            folded: Lowercased line, same length as line
            start: Boundary position
            word: Lowercased alphanumeric run at start

        Returns:
            ItemMatch, or None
        """
        for candidate in index.multi_word_item_candidates(word):
            if matches_at(folded, start, candidate):
                item_id = index.id_of(candidate)
                if item_id is not None:
                    end = start + len(candidate)
                    return ItemMatch(item_id, candidate, line[start:end], MatchKind.MULTI_WORD_ITEM)

        if index.is_single_word_item(word) and not index.is_priority_skip(word):
            item_id = index.id_of(word)
            if item_id is not None:
                end = start + len(word)
                return ItemMatch(item_id, word, line[start:end], MatchKind.SINGLE_WORD_ITEM)

        for surface in index.multi_word_alias_candidates(word):
            if matches_at(folded, start, surface):
                target = index.resolve_alias(surface)
                item_id = index.id_of(target) if target is not None else None
                if item_id is not None:
                    end = start + len(surface)
                    return ItemMatch(item_id, target, line[start:end], MatchKind.MULTI_WORD_ALIAS)

        if index.is_single_word_alias(word):
            target = index.resolve_alias(word)
            item_id = index.id_of(target) if target is not None else None
            if item_id is not None:
                end = start + len(word)
                return ItemMatch(item_id, target, line[start:end], MatchKind.SINGLE_WORD_ALIAS)

        return None

    # ------------------------------------------------------------------------
    # SCAN
    # ------------------------------------------------------------------------

    def scan(self, line: str, index: VocabularyIndex) -> AnnotationResult:
        """
        Annotate one line.

        Args:
            line: Chat text
            index: Vocabulary snapshot to match against

        Returns:
            AnnotationResult with tagged text and reference events in order
        """
        if not line:
            return AnnotationResult(text=line or '')

        folded = fold_case(line)
        length = len(line)
        parts: List[str] = []
        events: List[ReferenceEvent] = []

        i = 0
        while i < length:
            if not is_boundary_start(folded, i):
                parts.append(line[i])
                i += 1
                continue

            end = word_end(folded, i)
            word = folded[i:end]

            amount, money_end = self._money_at(folded, i, end)
            if amount is not None:
                rendered = self.emitter.render_money(amount)
                if rendered is not None:
                    parts.append(rendered)
                    i = money_end
                    continue
            elif money_end > end:
                parts.append(line[i:money_end])
                i = money_end
                continue

            match = self.find_item(index, line, folded, i, word)
            if match is not None:
                rendered = self.emitter.render_item(match, events)
                if rendered is not None:
                    parts.append(rendered)
                    i += match.span_length
                    continue

            parts.append(line[i:end])
            i = end

        return AnnotationResult(text=''.join(parts), events=events)
