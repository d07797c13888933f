#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Script: annotate_chat.py
Package: scripts
Purpose: CLI for annotating chat lines against an item snapshot

Usage:
    python scripts/annotate_chat.py --items data/items.json "selling tbow 1.1b"
    echo "I just got an abyssal whip" | python scripts/annotate_chat.py --items data/items.json
    python scripts/annotate_chat.py --items data/items.json --chat-log chat.jsonl --events
    python scripts/annotate_chat.py --items data/items.json --filtered "Coins" --min-value 10000 "..."

Lines given as arguments or on stdin are treated as public chat. A chat log
(JSONL with "type" and "text") is filtered by message type the way a chat
host would; non-player messages are printed unchanged.
"""

import sys
import argparse
import json
import logging
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Local imports
from src.linking.annotation_emitter import TierMarkup
from src.linking.classifier import Classifier
from src.linking.item_filter import ItemFilter
from src.linking.link_engine import LinkEngine
from src.linking.reference_registry import ReferenceRegistry
from src.linking.vocabulary_loader import VocabularyLoader, VocabularyStore
from src.utils.io import load_item_snapshot, stream_jsonl
from src.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Annotate item names, aliases and money amounts in chat lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/annotate_chat.py --items data/items.json "selling tbow 1.1b"
  python scripts/annotate_chat.py --items data/items.json --markup col < lines.txt
  python scripts/annotate_chat.py --items data/items.json --chat-log chat.jsonl --events
        """
    )

    parser.add_argument('lines', nargs='*', help='Chat lines (default: read stdin)')
    parser.add_argument('--items', required=True, help='Item snapshot JSON')
    parser.add_argument('--chat-log', help='JSONL chat log with "type" and "text" fields')
    parser.add_argument('--filtered', default=None, help='Comma-separated item names to never link')
    parser.add_argument('--min-value', type=int, default=None, help='Minimum item value (0 disables)')
    parser.add_argument('--max-value', type=int, default=None, help='Maximum item value (0 disables)')
    parser.add_argument('--no-rarity', action='store_true', help='Use the neutral tier for everything')
    parser.add_argument('--markup', choices=TierMarkup.STYLES, default=None, help='Markup style')
    parser.add_argument('--events', action='store_true', help='Print referenced items as JSON after each line')
    parser.add_argument('--progress', action='store_true', help='Show vocabulary load progress')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')

    return parser.parse_args(argv)


# ============================================================================
# ENGINE
# ============================================================================

def build_engine(args, registry: ReferenceRegistry):
    """Load the snapshot and wire a LinkEngine around it."""
    records, prices = load_item_snapshot(args.items)

    store = VocabularyStore()
    loader = VocabularyLoader(store)
    loader.start(records)
    index = loader.run_to_completion(show_progress=args.progress)
    logger.info(f"Vocabulary ready: {index!r}")

    names = {record.item_id: record.name for record in records if record.name}
    registry.name_lookup = names.get

    item_filter = ItemFilter.from_config(
        filtered_items=args.filtered,
        minimum_value=args.min_value,
        maximum_value=args.max_value,
        price_lookup=prices.get,
    )
    classifier = Classifier(enabled=False) if args.no_rarity else Classifier()

    return LinkEngine(
        store,
        price_lookup=prices.get,
        item_filter=item_filter,
        classifier=classifier,
        markup=TierMarkup(style=args.markup),
        sink=registry,
    )


def iter_messages(args):
    """(message_type, text) pairs from the chat log, the arguments or stdin."""
    if args.chat_log:
        for record in stream_jsonl(args.chat_log):
            yield record.get('type', ''), record.get('text', '')
        return

    lines = args.lines or (line.rstrip('\n') for line in sys.stdin)
    for line in lines:
        yield 'PUBLICCHAT', line


# ============================================================================
# MAIN
# ============================================================================

def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        registry = ReferenceRegistry()
        engine = build_engine(args, registry)

        for message_type, text in iter_messages(args):
            if (message_type or '').upper() in engine.player_message_types and text:
                result = engine.annotate_line(text)
                annotated, events = result.text, result.events
            else:
                annotated, events = text, []
            print(annotated)

            if args.events:
                referenced = [
                    {'item_id': e.item_id, 'name': registry.name_lookup(e.item_id), 'quantity': e.quantity}
                    for e in events
                ]
                print(json.dumps(referenced, ensure_ascii=False))

        logger.info(f"{len(registry)} distinct items referenced")

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error("Annotation failed: %s", str(e), exc_info=True)
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
