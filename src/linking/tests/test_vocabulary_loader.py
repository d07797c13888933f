"""
Chunked vocabulary loader test suite.

Tests the IDLE -> LOADING -> LOADED state machine, bounded chunk sizes,
duplicate triggers, failing lookups and build-then-swap publication.

Run: pytest src/linking/tests/test_vocabulary_loader.py -v
"""

import sys
from pathlib import Path

import pytest

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.linking.errors import VocabularyStateError
from src.linking.vocabulary_index import VocabularyIndex
from src.linking.vocabulary_loader import LoaderState, VocabularyLoader, VocabularyStore
from src.utils.dataclasses import RawItemRecord


ITEMS = {
    1: RawItemRecord(1, "Abyssal whip"),
    4: RawItemRecord(4, "Twisted bow"),
    7: RawItemRecord(7, "Dragon defender"),
    9: RawItemRecord(9, "Coins"),
}


class CountingLookup:
    """id -> record lookup that remembers which ids were requested."""

    def __init__(self, items, failing=()):
        self.items = items
        self.failing = set(failing)
        self.calls = []

    def __call__(self, item_id):
        self.calls.append(item_id)
        if item_id in self.failing:
            raise RuntimeError(f"no definition for {item_id}")
        return self.items.get(item_id)


@pytest.fixture
def store():
    return VocabularyStore()


def make_loader(store, lookup=None, **kwargs):
    kwargs.setdefault('items_per_chunk', 3)
    kwargs.setdefault('max_item_id', 10)
    return VocabularyLoader(store, item_lookup=lookup or CountingLookup(ITEMS), alias_table={}, **kwargs)


# ============================================================================
# Store
# ============================================================================

class TestVocabularyStore:
    """Single-reference publication"""

    def test_starts_empty(self, store):
        assert not store.loaded
        assert store.generation == 0
        assert len(store.current()) == 0

    def test_publish_swaps_reference(self, store):
        index = VocabularyIndex.build([RawItemRecord(1, "Abyssal whip")])
        store.publish(index)
        assert store.current() is index
        assert store.loaded
        assert store.generation == 1

    def test_initial_index(self):
        index = VocabularyIndex.build([RawItemRecord(1, "Abyssal whip")])
        assert VocabularyStore(index).loaded


# ============================================================================
# Lookup source
# ============================================================================

class TestLookupLoading:
    """Walking an id range in bounded chunks"""

    def test_chunk_size_is_bounded(self, store):
        lookup = CountingLookup(ITEMS)
        loader = make_loader(store, lookup)
        loader.start()

        assert loader.advance() is False
        assert lookup.calls == [0, 1, 2]
        assert loader.cursor == 3
        assert loader.state is LoaderState.LOADING

    def test_runs_to_completion(self, store):
        loader = make_loader(store)
        loader.start()

        results = [loader.advance() for _ in range(4)]

        assert results == [False, False, False, True]
        assert loader.state is LoaderState.LOADED
        assert store.generation == 1
        assert store.current().id_of("twisted bow") == 4

    def test_readers_see_previous_index_until_done(self, store):
        old = VocabularyIndex.build([RawItemRecord(100, "Bandos godsword")])
        store.publish(old)

        loader = make_loader(store)
        loader.start()
        loader.advance()
        loader.advance()

        assert store.current() is old
        loader.run_to_completion()
        assert store.current() is not old
        assert "bandos godsword" not in store.current()

    def test_duplicate_start_keeps_cursor(self, store):
        loader = make_loader(store)
        assert loader.start() is True
        loader.advance()

        assert loader.start() is False
        assert loader.cursor == 3

    def test_failing_lookups_are_skipped(self, store):
        loader = make_loader(store, CountingLookup(ITEMS, failing={4}))
        loader.run_to_completion()

        assert loader.failed_lookups == 1
        assert store.current().id_of("twisted bow") is None
        assert store.current().id_of("abyssal whip") == 1

    def test_rebuild_after_loaded(self, store):
        loader = make_loader(store)
        loader.run_to_completion()
        first = store.current()

        assert loader.start() is True
        loader.run_to_completion()
        assert store.generation == 2
        assert store.current() is not first

    def test_advance_when_loaded_is_noop(self, store):
        loader = make_loader(store)
        loader.run_to_completion()
        assert loader.advance() is True
        assert store.generation == 1


# ============================================================================
# Record source
# ============================================================================

class TestRecordLoading:
    """Consuming a snapshot iterable"""

    def test_records_in_chunks(self, store):
        loader = VocabularyLoader(store, alias_table={}, items_per_chunk=2)
        loader.start(ITEMS.values())

        assert loader.advance() is False
        assert loader.advance() is False
        assert loader.advance() is True
        assert loader.cursor == 4
        assert len(store.current()) == 4

    def test_partial_last_chunk(self, store):
        loader = VocabularyLoader(store, alias_table={}, items_per_chunk=3)
        loader.start(ITEMS.values())

        assert loader.advance() is False
        assert loader.advance() is True

    def test_aliases_applied(self, store):
        loader = VocabularyLoader(store, alias_table={'tbow': 'twisted bow'})
        loader.start(ITEMS.values())
        index = loader.run_to_completion()
        assert index.resolve_alias("tbow") == "twisted bow"


# ============================================================================
# Lifecycle errors
# ============================================================================

class TestLoaderLifecycle:
    """Misuse raises VocabularyStateError"""

    def test_advance_before_start(self, store):
        with pytest.raises(VocabularyStateError):
            make_loader(store).advance()

    def test_start_without_source(self, store):
        with pytest.raises(VocabularyStateError):
            VocabularyLoader(store).start()

    def test_ensure_loaded(self, store):
        loader = make_loader(store)
        assert loader.ensure_loaded() is True
        assert loader.ensure_loaded() is False
        loader.run_to_completion()
        assert loader.ensure_loaded() is False

    def test_invalid_chunk_size(self, store):
        with pytest.raises(ValueError):
            VocabularyLoader(store, items_per_chunk=-1)
