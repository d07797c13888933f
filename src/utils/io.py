# -*- coding: utf-8 -*-
"""
I/O helpers for item snapshots and chat logs

JSON for item snapshots, JSONL for chat logs. Both use UTF-8 and log what was
read. Snapshot parsing is tolerant: malformed entries are skipped and counted,
the same way the vocabulary builder counts rejected records.

Snapshot format (either form):
    [{"id": 4151, "name": "Abyssal whip", "price": 1500000}, ...]
    {"items": [{"id": 4151, "name": "Abyssal whip", "noted": false,
                "placeholder": false, "price": 1500000}, ...]}

Chat log format (JSONL):
    {"type": "PUBLICCHAT", "text": "selling tbow 1.1b"}

Examples:
    from src.utils.io import load_item_snapshot, stream_jsonl
    records, prices = load_item_snapshot("data/items.json")
    for message in stream_jsonl("data/chat.jsonl"):
        process(message)
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple, Union

from src.utils.dataclasses import RawItemRecord

logger = logging.getLogger(__name__)


# ============================================================================
# JSON
# ============================================================================

def load_json(path: Union[str, Path]) -> Any:
    """
    Load JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON content
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    logger.info(f"Loaded {path} ({_size_str(path)})")
    return data


def save_json(data: Any, path: Union[str, Path], indent: int = 2) -> str:
    """
    Save data to JSON file, creating parent directories.

    Returns:
        Path string
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

    logger.info(f"Saved {path} ({_size_str(path)})")
    return str(path)


# ============================================================================
# JSONL
# ============================================================================

def stream_jsonl(path: Union[str, Path]) -> Iterator[Dict]:
    """Yield records of a JSONL file one at a time; blank lines are skipped."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            if line.strip():
                yield json.loads(line)


# ============================================================================
# ITEM SNAPSHOTS
# ============================================================================

def parse_item_snapshot(data: Any) -> Tuple[List[RawItemRecord], Dict[int, int]]:
    """
    Convert parsed snapshot JSON into records and a price table.

    Args:
        data: List of item dicts, or a dict with an "items" list

    Returns:
        (records, prices) - prices only holds items with a positive price
    """
    entries = data.get('items', []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ValueError(f"Snapshot must be a list or contain an 'items' list, got {type(entries).__name__}")

    records: List[RawItemRecord] = []
    prices: Dict[int, int] = {}
    skipped = 0

    for entry in entries:
        if not isinstance(entry, dict):
            skipped += 1
            continue
        try:
            item_id = int(entry['id'])
        except (KeyError, TypeError, ValueError):
            skipped += 1
            continue

        name = entry.get('name')
        records.append(RawItemRecord(
            item_id=item_id,
            name=name if isinstance(name, str) else None,
            is_noted=bool(entry.get('noted', False)),
            is_placeholder=bool(entry.get('placeholder', False)),
        ))

        try:
            price = int(entry.get('price') or 0)
        except (TypeError, ValueError):
            price = 0
        if price > 0:
            prices[item_id] = price

    if skipped:
        logger.warning(f"Skipped {skipped} malformed snapshot entries")
    return records, prices


def load_item_snapshot(path: Union[str, Path]) -> Tuple[List[RawItemRecord], Dict[int, int]]:
    """Load a snapshot file; see parse_item_snapshot()."""
    records, prices = parse_item_snapshot(load_json(path))
    logger.info(f"Snapshot has {len(records):,} records, {len(prices):,} priced")
    return records, prices


# ============================================================================
# HELPERS
# ============================================================================

def _size_str(path: Path) -> str:
    """Human-readable file size."""
    size = path.stat().st_size
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"
