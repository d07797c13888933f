# -*- coding: utf-8 -*-
"""
Module: linking_config.py
Package: config
Purpose: Configuration for the chat item linking engine

Single source of truth for vocabulary build limits, item filters, tier
thresholds, markup colours and chat eligibility. Values that a player would
tune (filters, rarity colouring) can be overridden from .env; everything else
is application logic and lives here.

Examples:
    from config.linking_config import FILTER_CONFIG, VOCABULARY_CONFIG

    min_len = VOCABULARY_CONFIG['min_name_length']
    excluded = FILTER_CONFIG['filtered_items']   # '' unless ITEMLINK_FILTERED_ITEMS is set
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# ============================================================================
# VOCABULARY BUILD
# ============================================================================

VOCABULARY_CONFIG = {
    # Names shorter than this are never indexed (avoids "axe", "egg", ...)
    'min_name_length': _env_int('ITEMLINK_MIN_NAME_LENGTH', 5),

    # Ids processed per advance() call of the chunked loader
    'items_per_chunk': _env_int('ITEMLINK_ITEMS_PER_CHUNK', 2000),

    # Loader walks ids [0, max_item_id)
    'max_item_id': _env_int('ITEMLINK_MAX_ITEM_ID', 30000),
}


# ============================================================================
# ITEM FILTERS
# ============================================================================

FILTER_CONFIG = {
    # Comma-separated item names excluded from linking (e.g. "Coins, Bones, Ashes")
    'filtered_items': os.getenv('ITEMLINK_FILTERED_ITEMS', ''),

    # Only link items worth at least / at most this much (0 to disable)
    'minimum_item_value': _env_int('ITEMLINK_MINIMUM_ITEM_VALUE', 0),
    'maximum_item_value': _env_int('ITEMLINK_MAXIMUM_ITEM_VALUE', 0),
}

# Money tokens ("500k") are filtered as if they were this item
COINS_ITEM_ID = 995
COINS_NAME = 'coins'


# ============================================================================
# CLASSIFICATION
# ============================================================================

CLASSIFICATION_CONFIG = {
    # False = every match gets the neutral tier
    'color_by_rarity': _env_bool('ITEMLINK_COLOR_BY_RARITY', True),

    # Lower bounds for Tier2..Tier5, ascending. Below the first bound is Tier1.
    'item_thresholds': [10_000, 100_000, 1_000_000, 10_000_000],
    'money_thresholds': [1_000_000, 10_000_000, 100_000_000, 1_000_000_000],
}


# ============================================================================
# MARKUP
# ============================================================================

MARKUP_CONFIG = {
    # "tier": <tier=TIER4>Abyssal whip</tier>
    # "col":  <col=a335ee>Abyssal whip</col><col=9090ff>
    'style': os.getenv('ITEMLINK_MARKUP_STYLE', 'tier'),

    'tier_colors': {
        'TIER1': 'ffffff',   # common
        'TIER2': '1eff00',   # uncommon
        'TIER3': '0070dd',   # rare
        'TIER4': 'a335ee',   # epic
        'TIER5': 'ff8000',   # legendary
        'NEUTRAL': 'ff8000',
    },

    # Money under the first money threshold is shown in gold
    'money_base_color': 'ffd700',

    # Chat colour restored after a highlighted span (public chat)
    'restore_color': '9090ff',
}


# ============================================================================
# CHAT ELIGIBILITY
# ============================================================================

CHAT_CONFIG = {
    # Player-authored message types; system, examine and NPC text is never annotated
    'player_message_types': [
        'PUBLICCHAT',
        'MODCHAT',
        'PRIVATECHAT',
        'PRIVATECHATOUT',
        'FRIENDSCHAT',
        'CLAN_CHAT',
        'CLAN_GUEST_CHAT',
        'CLAN_GIM_CHAT',
        'AUTOTYPER',
        'MODAUTOTYPER',
        'TRADEREQ',
        'CHALREQ_TRADE',
    ],
}


# ============================================================================
# REFERENCE REGISTRY
# ============================================================================

REGISTRY_CONFIG = {
    'max_recent_items': 50,
}
