# -*- coding: utf-8 -*-
"""
Chunked vocabulary loading with build-then-swap publication.

Building the vocabulary walks tens of thousands of item ids, which is too much
for one turn of a cooperative host loop. VocabularyLoader splits the walk into
bounded chunks driven by an external advance() call:

    IDLE --start()--> LOADING(cursor) --advance()...--> LOADED
                          ^                               |
                          +-----------start()-------------+

Each advance() handles at most items_per_chunk ids (or records). When the
source is exhausted the builder is finalized once and the new index is
published to the VocabularyStore with a single reference assignment. Readers
keep scanning against the previous index until then; they never see a
partially built one.

A start() while LOADING is a duplicate trigger and is ignored. A start() after
LOADED begins a fresh rebuild that supersedes the published index when it
finishes.

Examples:
    store = VocabularyStore()
    loader = VocabularyLoader(store, item_lookup=client_items.get)
    loader.start()
    while not loader.advance():   # one chunk per host tick
        yield_to_host()
    store.current()               # finished index

References:
    config.linking_config.VOCABULARY_CONFIG: items_per_chunk, max_item_id
"""

# Standard library
import logging
from enum import Enum
from itertools import islice
from typing import Callable, Iterable, Iterator, List, Mapping, Optional

# Third-party
from tqdm import tqdm

# Local
from src.linking.errors import VocabularyStateError
from src.linking.vocabulary_index import VocabularyBuilder, VocabularyIndex
from src.utils.dataclasses import RawItemRecord
from config.alias_table import ALIAS_PRIORITY_ITEMS, ITEM_ALIASES
from config.linking_config import VOCABULARY_CONFIG

logger = logging.getLogger(__name__)

ItemLookup = Callable[[int], Optional[RawItemRecord]]


class LoaderState(Enum):
    """Loader lifecycle."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"


# ============================================================================
# STORE
# ============================================================================

class VocabularyStore:
    """
    Holds the current vocabulary index behind one reference.

    current() always returns a complete index: the empty index before the
    first publish, afterwards the most recently published one.
    """

    def __init__(self, index: Optional[VocabularyIndex] = None):
        self._index = index if index is not None else VocabularyIndex.empty()
        self._generation = 1 if index is not None else 0

    def current(self) -> VocabularyIndex:
        return self._index

    def publish(self, index: VocabularyIndex) -> None:
        """Replace the current index."""
        self._index = index
        self._generation += 1
        logger.debug(f"Published vocabulary generation {self._generation}: {index!r}")

    @property
    def generation(self) -> int:
        """Number of indexes published so far."""
        return self._generation

    @property
    def loaded(self) -> bool:
        return self._generation > 0


# ============================================================================
# LOADER
# ============================================================================

class VocabularyLoader:
    """
    Resumable IDLE -> LOADING(cursor) -> LOADED state machine.

    Two sources are supported:
        - item_lookup: id -> RawItemRecord | None, walked over [0, max_item_id)
        - records: any iterable of RawItemRecord, passed to start()

    Failing lookups skip the id; the build continues with the rest.

    Attributes:
        store: Where finished indexes are published
        state: Current LoaderState
        cursor: Next item id (lookup source) or records consumed so far
    """

    def __init__(
        self,
        store: VocabularyStore,
        item_lookup: Optional[ItemLookup] = None,
        alias_table: Optional[Mapping[str, str]] = None,
        priority_names: Optional[Iterable[str]] = None,
        min_name_length: Optional[int] = None,
        items_per_chunk: Optional[int] = None,
        max_item_id: Optional[int] = None,
    ):
        """
        Initialize loader.

        Args:
            store: Target store for finished indexes
            item_lookup: Per-id record lookup (client item definitions)
            alias_table: surface -> canonical (default ITEM_ALIASES)
            priority_names: Alias-priority items (default ALIAS_PRIORITY_ITEMS)
            min_name_length: Shortest indexable name (default from config)
            items_per_chunk: Work unit per advance() (default from config)
            max_item_id: Exclusive upper id for the lookup walk (default from config)
        """
        self.store = store
        self.item_lookup = item_lookup
        self.alias_table = ITEM_ALIASES if alias_table is None else alias_table
        self.priority_names = ALIAS_PRIORITY_ITEMS if priority_names is None else priority_names
        self.min_name_length = min_name_length
        self.items_per_chunk = items_per_chunk or VOCABULARY_CONFIG['items_per_chunk']
        self.max_item_id = VOCABULARY_CONFIG['max_item_id'] if max_item_id is None else max_item_id

        if self.items_per_chunk <= 0:
            raise ValueError(f"items_per_chunk must be positive, got {self.items_per_chunk}")

        self.state = LoaderState.IDLE
        self.cursor = 0
        self.failed_lookups = 0
        self.chunks_processed = 0
        self._builder: Optional[VocabularyBuilder] = None
        self._records: Optional[Iterator[RawItemRecord]] = None

    # ------------------------------------------------------------------------
    # LIFECYCLE
    # ------------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self.state is LoaderState.LOADING

    def start(self, records: Optional[Iterable[RawItemRecord]] = None) -> bool:
        """
        Begin a (re)build.

        Args:
            records: Snapshot to consume; None walks item_lookup over the id range

        Returns:
            False if a build is already in progress (duplicate trigger), else True
        """
        if self.state is LoaderState.LOADING:
            logger.debug("Vocabulary load already in progress; ignoring trigger")
            return False
        if records is None and self.item_lookup is None:
            raise VocabularyStateError("No item_lookup configured and no records given")

        self._builder = VocabularyBuilder(
            alias_table=self.alias_table,
            min_name_length=self.min_name_length,
            priority_names=self.priority_names,
        )
        self._records = iter(records) if records is not None else None
        self.cursor = 0
        self.failed_lookups = 0
        self.chunks_processed = 0
        self.state = LoaderState.LOADING
        logger.info("Vocabulary load started")
        return True

    def ensure_loaded(self) -> bool:
        """Start a build only if nothing is loaded or loading yet."""
        if self.store.loaded or self.state is not LoaderState.IDLE:
            return False
        return self.start()

    def advance(self) -> bool:
        """
        Process one bounded chunk.

        Returns:
            True once the load has finished and the index is published
        """
        if self.state is LoaderState.LOADED:
            return True
        if self.state is not LoaderState.LOADING:
            raise VocabularyStateError("advance() called before start()")

        if self._records is not None:
            exhausted = self._advance_records()
        else:
            exhausted = self._advance_lookup()
        self.chunks_processed += 1

        if exhausted:
            self._finish()
            return True
        return False

    def run_to_completion(self, show_progress: bool = False) -> VocabularyIndex:
        """Drive advance() until done (scripts and tests; hosts call advance())."""
        if self.state is not LoaderState.LOADING:
            self.start()

        total = None if self._records is not None else max(0, self.max_item_id - self.cursor)
        with tqdm(total=total, desc="Loading vocabulary", disable=not show_progress) as pbar:
            done = False
            while not done:
                before = self.cursor
                done = self.advance()
                pbar.update(self.cursor - before)
        return self.store.current()

    # ------------------------------------------------------------------------
    # CHUNKS
    # ------------------------------------------------------------------------

    def _advance_lookup(self) -> bool:
        start_id = self.cursor
        end_id = min(start_id + self.items_per_chunk, self.max_item_id)

        for item_id in range(start_id, end_id):
            try:
                record = self.item_lookup(item_id)
            except Exception as e:
                self.failed_lookups += 1
                logger.debug(f"Skipping item {item_id}: {e}")
                continue
            if record is not None:
                self._builder.add(record)

        self.cursor = end_id
        return end_id >= self.max_item_id

    def _advance_records(self) -> bool:
        chunk: List[RawItemRecord] = list(islice(self._records, self.items_per_chunk))
        for record in chunk:
            self._builder.add(record)
        self.cursor += len(chunk)
        return len(chunk) < self.items_per_chunk

    def _finish(self) -> None:
        index = self._builder.finalize()
        self._builder = None
        self._records = None
        self.state = LoaderState.LOADED
        self.store.publish(index)
        if self.failed_lookups:
            logger.info(f"Vocabulary load skipped {self.failed_lookups:,} ids with failing lookups")
        logger.info(f"Vocabulary load finished in {self.chunks_processed} chunks")
