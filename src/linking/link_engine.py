# -*- coding: utf-8 -*-
"""
Module: link_engine.py
Package: src.linking
Purpose: Entry point wiring store, scanner, emitter and event sink together

LinkEngine is what a chat host talks to. It annotates lines against whatever
index the VocabularyStore currently holds, forwards reference events to an
optional sink (e.g. ReferenceRegistry) and applies player config changes.

Workflow:
    1. Host builds the vocabulary through a VocabularyLoader into the store
    2. For each chat message, process_message() checks the message type and
       returns annotated text (or None if nothing to change)
    3. Reference events go to the sink in the order they appear in the line

Examples:
    store = VocabularyStore()
    VocabularyLoader(store).run_to_completion()   # or start()/advance() per tick
    engine = LinkEngine(store, price_lookup=prices.get, sink=ReferenceRegistry())

    engine.annotate("I just got an Abyssal whip!")
    # 'I just got an <tier=TIER4>Abyssal whip</tier>!'

    engine.process_message("GAMEMESSAGE", "Abyssal whip")   # None (not player chat)
"""

# Standard library
import logging
from typing import Callable, Iterable, Optional

# Local
from src.linking.annotation_emitter import AnnotationEmitter, TierMarkup
from src.linking.classifier import Classifier
from src.linking.item_filter import ItemFilter, PriceLookup
from src.linking.money_recognizer import MoneyRecognizer
from src.linking.scanner import Scanner
from src.linking.vocabulary_loader import VocabularyStore
from src.utils.dataclasses import AnnotationResult, ReferenceEvent
from config.linking_config import CHAT_CONFIG

logger = logging.getLogger(__name__)

EventSink = Callable[[ReferenceEvent], None]


class LinkEngine:
    """
    Annotates chat lines and emits item reference events.

    Attributes:
        store: Source of the current vocabulary index
        scanner: Line scanner
        emitter: Filtering / display / tier decisions
        sink: Optional consumer of ReferenceEvent
    """

    def __init__(
        self,
        store: VocabularyStore,
        price_lookup: Optional[PriceLookup] = None,
        item_filter: Optional[ItemFilter] = None,
        classifier: Optional[Classifier] = None,
        markup: Optional[TierMarkup] = None,
        sink: Optional[EventSink] = None,
        player_message_types: Optional[Iterable[str]] = None,
    ):
        """
        Initialize engine.

        Args:
            store: Vocabulary store (may still be empty)
            price_lookup: item_id -> price (0 when unknown)
            item_filter: Exclusion/price filter (default from FILTER_CONFIG)
            classifier: Tier classifier (default from CLASSIFICATION_CONFIG)
            markup: Markup renderer (default from MARKUP_CONFIG)
            sink: Receives one ReferenceEvent per linked item
            player_message_types: Chat types eligible for annotation
        """
        self.store = store
        self.price_lookup = price_lookup
        self.item_filter = item_filter or ItemFilter.from_config(price_lookup=price_lookup)
        self.classifier = classifier or Classifier()
        self.emitter = AnnotationEmitter(
            classifier=self.classifier,
            item_filter=self.item_filter,
            price_lookup=price_lookup,
            markup=markup,
        )
        self.scanner = Scanner(MoneyRecognizer(), self.emitter)
        self.sink = sink
        if player_message_types is None:
            player_message_types = CHAT_CONFIG['player_message_types']
        self.player_message_types = frozenset(t.upper() for t in player_message_types)

    @property
    def loaded(self) -> bool:
        return self.store.loaded

    def annotate_line(self, line: str) -> AnnotationResult:
        """Annotate one line and forward its events to the sink."""
        result = self.scanner.scan(line, self.store.current())
        if self.sink is not None:
            for event in result.events:
                self._dispatch(event)
        return result

    def annotate(self, line: str) -> str:
        """Annotated copy of line (identical if nothing was recognized)."""
        return self.annotate_line(line).text

    def process_message(self, message_type: str, text: Optional[str]) -> Optional[str]:
        """
        Annotate a chat message if it is player-authored.

        Returns:
            Annotated text, or None when the type is not eligible, nothing is
            loaded yet, the text is empty or annotation changed nothing
        """
        if not self.loaded:
            return None
        if (message_type or '').upper() not in self.player_message_types:
            return None
        if not text:
            return None

        annotated = self.annotate(text)
        if annotated == text:
            return None
        return annotated

    def on_config_changed(self, key: str, value) -> None:
        """Apply a player config change (filteredItems, minimum/maximumItemValue, colorByRarity)."""
        if key == 'filteredItems':
            self.item_filter.update_filtered_items(value)
        elif key == 'minimumItemValue':
            self.item_filter.update_price_bounds(value, self.item_filter.maximum_value)
        elif key == 'maximumItemValue':
            self.item_filter.update_price_bounds(self.item_filter.minimum_value, value)
        elif key == 'colorByRarity':
            self.classifier.enabled = bool(value)
        else:
            logger.debug(f"Ignoring unknown config key '{key}'")

    def _dispatch(self, event: ReferenceEvent) -> None:
        try:
            self.sink(event)
        except Exception as e:
            logger.warning(f"Reference sink failed for item {event.item_id}: {e}")
