"""Display helpers shared by every menu entry.

``format_entry`` produces the one-line text shown by the launcher. The
category column is left-padded so entries from different tools line up.
"""
from __future__ import annotations

from typing import Dict

CONNECTED_ICON = "✅"
AVAILABLE_ICON = "📶"
DISABLED_ICON = "❌"
SHIELD_ICON = "🛡️"
EXIT_NODE_ICON = "🌿"
UNKNOWN_FLAG = "❓"

CATEGORY_WIDTH = 10

# Block-height ladder, lowest to highest
STRENGTH_SYMBOLS = ("_", "▂", "▄", "▆", "█")

COUNTRY_FLAGS: Dict[str, str] = {
    "Albania": "🇦🇱",
    "Australia": "🇦🇺",
    "Austria": "🇦🇹",
    "Belgium": "🇧🇪",
    "Brazil": "🇧🇷",
    "Bulgaria": "🇧🇬",
    "Canada": "🇨🇦",
    "Chile": "🇨🇱",
    "Colombia": "🇨🇴",
    "Croatia": "🇭🇷",
    "Czech Republic": "🇨🇿",
    "Denmark": "🇩🇰",
    "Estonia": "🇪🇪",
    "Finland": "🇫🇮",
    "France": "🇫🇷",
    "Germany": "🇩🇪",
    "Greece": "🇬🇷",
    "Hong Kong": "🇭🇰",
    "Hungary": "🇭🇺",
    "Indonesia": "🇮🇩",
    "Ireland": "🇮🇪",
    "Israel": "🇮🇱",
    "Italy": "🇮🇹",
    "Japan": "🇯🇵",
    "Latvia": "🇱🇻",
    "Mexico": "🇲🇽",
    "Netherlands": "🇳🇱",
    "New Zealand": "🇳🇿",
    "Norway": "🇳🇴",
    "Poland": "🇵🇱",
    "Portugal": "🇵🇹",
    "Romania": "🇷🇴",
    "Serbia": "🇷🇸",
    "Singapore": "🇸🇬",
    "Slovakia": "🇸🇰",
    "Slovenia": "🇸🇮",
    "South Africa": "🇿🇦",
    "Spain": "🇪🇸",
    "Sweden": "🇸🇪",
    "Switzerland": "🇨🇭",
    "Thailand": "🇹🇭",
    "Turkey": "🇹🇷",
    "UK": "🇬🇧",
    "Ukraine": "🇺🇦",
    "USA": "🇺🇸",
}


def format_entry(category: str, icon: str, text: str) -> str:
    """Render one menu line: ``<category padded>- [icon ]text``."""
    if not icon:
        return f"{category:<{CATEGORY_WIDTH}}- {text}"
    return f"{category:<{CATEGORY_WIDTH}}- {icon} {text}"


def convert_network_strength(raw: str) -> str:
    """Convert a star-rating signal field into a 4-glyph bar ladder.

    Trailing ``*`` characters are counted (surrounding whitespace ignored).
    Zero or one star both give the lowest rung; four or more fill all rungs.
    """
    value = raw.rstrip()
    stars = len(value) - len(value.rstrip("*"))
    return "".join(
        (
            STRENGTH_SYMBOLS[1],
            STRENGTH_SYMBOLS[2] if stars >= 2 else STRENGTH_SYMBOLS[0],
            STRENGTH_SYMBOLS[3] if stars >= 3 else STRENGTH_SYMBOLS[0],
            STRENGTH_SYMBOLS[4] if stars >= 4 else STRENGTH_SYMBOLS[0],
        )
    )


def get_flag(country: str) -> str:
    return COUNTRY_FLAGS.get(country, UNKNOWN_FLAG)
