"""
Command line tests for scripts/annotate_chat.py.

Run: pytest tests/linking/test_annotate_chat_cli.py -v
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _load_script():
    spec = importlib.util.spec_from_file_location(
        "annotate_chat", PROJECT_ROOT / "scripts" / "annotate_chat.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def cli(monkeypatch):
    module = _load_script()
    # Leave the root logger to pytest
    monkeypatch.setattr(module, "setup_logging", lambda **kwargs: None)
    return module


@pytest.fixture
def snapshot(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps([
        {"id": 4151, "name": "Abyssal whip", "price": 2000000},
        {"id": 20997, "name": "Twisted bow", "price": 1100000000},
        {"id": 995, "name": "Coins", "price": 1},
    ]), encoding="utf-8")
    return path


class TestAnnotateChatCli:
    """End-to-end runs of main()"""

    def test_lines_from_arguments(self, cli, snapshot, capsys):
        cli.main(["--items", str(snapshot), "selling tbow 100k"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["selling <tier=TIER5>Twisted Bow</tier> <tier=TIER1>100K</tier>"]

    def test_events_flag(self, cli, snapshot, capsys):
        cli.main(["--items", str(snapshot), "--events", "Abyssal whip"])
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "<tier=TIER4>Abyssal whip</tier>"
        assert json.loads(out[1]) == [{"item_id": 4151, "name": "Abyssal whip", "quantity": 1}]

    def test_filter_and_markup_flags(self, cli, snapshot, capsys):
        cli.main(["--items", str(snapshot), "--filtered", "Twisted bow", "--markup", "col", "tbow whip"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["tbow <col=a335ee>Abyssal Whip</col><col=9090ff>"]

    def test_chat_log_skips_non_player_messages(self, cli, snapshot, tmp_path, capsys):
        log = tmp_path / "chat.jsonl"
        log.write_text(
            json.dumps({"type": "GAMEMESSAGE", "text": "You drop the Abyssal whip"}) + "\n"
            + json.dumps({"type": "FRIENDSCHAT", "text": "gz on whip"}) + "\n",
            encoding="utf-8",
        )
        cli.main(["--items", str(snapshot), "--chat-log", str(log)])
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "You drop the Abyssal whip",
            "gz on <tier=TIER4>Abyssal Whip</tier>",
        ]

    def test_missing_snapshot_exits(self, cli, tmp_path):
        with pytest.raises(SystemExit):
            cli.main(["--items", str(tmp_path / "missing.json"), "tbow"])
