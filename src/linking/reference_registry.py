# -*- coding: utf-8 -*-
"""
Recently referenced items, fed by the engine's event stream.

Keeps the last N referenced items so a detail view (tooltips, price checks)
can look up what was just mentioned in chat, by id or by lowercase name.
Referencing an item again moves it to the most recent position; the least
recently referenced item is evicted once the bound is reached.

Entries are owned by the id map. The name map only points at ids and is
pruned together with it, so a name never outlives its entry. When two ids
share a name, the name resolves to the most recently referenced one.
"""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from src.utils.dataclasses import ReferenceEvent
from config.linking_config import REGISTRY_CONFIG

logger = logging.getLogger(__name__)


@dataclass
class ReferencedItem:
    """Registry entry."""
    item_id: int
    name: str
    quantity: int
    timestamp: float


class ReferenceRegistry:
    """
    Bounded most-recently-referenced map.

    Callable, so it can be passed directly as the engine's event sink.
    """

    def __init__(
        self,
        name_lookup: Optional[Callable[[int], Optional[str]]] = None,
        max_items: Optional[int] = None,
    ):
        """
        Args:
            name_lookup: item_id -> display name; entries without a name are ignored
            max_items: Capacity (default from config)
        """
        self.name_lookup = name_lookup
        self.max_items = max_items or REGISTRY_CONFIG['max_recent_items']
        self._by_id: "OrderedDict[int, ReferencedItem]" = OrderedDict()
        self._id_by_name: Dict[str, int] = {}

    def __call__(self, event: ReferenceEvent) -> None:
        self.add(event.item_id, event.quantity)

    def __len__(self) -> int:
        return len(self._by_id)

    def add(self, item_id: int, quantity: int = 1) -> Optional[ReferencedItem]:
        """Record a reference; returns the entry, or None if the item has no name."""
        name = self.name_lookup(item_id) if self.name_lookup else str(item_id)
        if not name or name == 'null':
            return None

        entry = ReferencedItem(item_id=item_id, name=name, quantity=quantity, timestamp=time.time())

        previous = self._by_id.pop(item_id, None)
        if previous is not None:
            self._forget_name(previous)
        self._by_id[item_id] = entry
        self._id_by_name[name.lower()] = item_id

        while len(self._by_id) > self.max_items:
            _, evicted = self._by_id.popitem(last=False)
            self._forget_name(evicted)
            logger.debug(f"Evicted item {evicted.item_id} from recent references")

        return entry

    def _forget_name(self, entry: ReferencedItem) -> None:
        key = entry.name.lower()
        if self._id_by_name.get(key) == entry.item_id:
            del self._id_by_name[key]

    def get(self, item_id: int) -> Optional[ReferencedItem]:
        return self._by_id.get(item_id)

    def find_by_name(self, name: str) -> Optional[ReferencedItem]:
        item_id = self._id_by_name.get(name.lower())
        if item_id is None:
            return None
        return self._by_id.get(item_id)

    def recent(self) -> List[ReferencedItem]:
        """Entries, most recent first."""
        return list(reversed(self._by_id.values()))

    def clear(self) -> None:
        self._by_id.clear()
        self._id_by_name.clear()
