"""
Item snapshot and chat log I/O tests.

Run: pytest tests/utils/test_snapshot_io.py -v
"""

import json
import sys
from pathlib import Path

import pytest

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.utils.dataclasses import RawItemRecord
from src.utils.io import load_item_snapshot, parse_item_snapshot, save_json, stream_jsonl


class TestParseItemSnapshot:
    """Tolerant snapshot parsing"""

    def test_list_form(self):
        records, prices = parse_item_snapshot([
            {"id": 4151, "name": "Abyssal whip", "price": 2_000_000},
            {"id": 4152, "name": "Abyssal whip", "noted": True},
        ])
        assert records == [
            RawItemRecord(4151, "Abyssal whip"),
            RawItemRecord(4152, "Abyssal whip", is_noted=True),
        ]
        assert prices == {4151: 2_000_000}

    def test_items_wrapper(self):
        records, _ = parse_item_snapshot({"items": [{"id": 995, "name": "Coins", "placeholder": False}]})
        assert records == [RawItemRecord(995, "Coins")]

    def test_malformed_entries_skipped(self):
        records, prices = parse_item_snapshot([
            {"name": "no id"},
            {"id": "abc", "name": "bad id"},
            "not a dict",
            {"id": 1, "name": 42, "price": "lots"},
        ])
        assert records == [RawItemRecord(1, None)]
        assert prices == {}

    def test_rejects_non_list(self):
        with pytest.raises(ValueError):
            parse_item_snapshot({"items": "nope"})


class TestFiles:
    """Round trip through disk"""

    def test_load_item_snapshot(self, tmp_path):
        path = tmp_path / "data" / "items.json"
        save_json([{"id": 20997, "name": "Twisted bow", "price": 1_100_000_000}], path)

        records, prices = load_item_snapshot(path)

        assert records == [RawItemRecord(20997, "Twisted bow")]
        assert prices[20997] == 1_100_000_000

    def test_save_json_rejects_non_json_values(self, tmp_path):
        with pytest.raises(TypeError):
            save_json({"record": RawItemRecord(1, "Abyssal whip")}, tmp_path / "bad.json")

    def test_stream_jsonl_skips_blank_lines(self, tmp_path):
        path = tmp_path / "chat.jsonl"
        path.write_text(
            json.dumps({"type": "PUBLICCHAT", "text": "tbow"}) + "\n\n"
            + json.dumps({"type": "GAMEMESSAGE", "text": "Welcome"}) + "\n",
            encoding="utf-8",
        )
        assert [m["type"] for m in stream_jsonl(path)] == ["PUBLICCHAT", "GAMEMESSAGE"]
