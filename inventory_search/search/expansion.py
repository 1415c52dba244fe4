"""Static synonym expansion for short queries."""

from types import MappingProxyType
from typing import List, Mapping, Tuple


# Queries with more words than this are not expanded
MAX_EXPANSION_WORDS = 3

SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        # Product types
        "tool": ("equipment", "instrument", "device", "apparatus", "implement"),
        "material": ("supply", "substance", "component", "part", "piece"),
        "hardware": ("fastener", "screw", "bolt", "nail", "bracket"),
        "paint": ("coating", "finish", "stain", "primer", "sealant"),
        "electric": ("electrical", "electronic", "power", "wiring", "electric"),
        "wood": ("lumber", "timber", "plywood", "wooden", "hardwood"),
        # Sizes
        "small": ("tiny", "mini", "compact", "little", "petite"),
        "large": ("big", "huge", "giant", "jumbo", "oversized"),
        "medium": ("mid", "average", "standard", "regular", "normal"),
        # Colors
        "red": ("crimson", "scarlet", "burgundy", "maroon", "cherry"),
        "blue": ("navy", "azure", "cobalt", "cyan", "turquoise"),
        "green": ("lime", "olive", "emerald", "forest", "mint"),
        "white": ("ivory", "cream", "off-white", "pearl", "snow"),
        "black": ("ebony", "charcoal", "onyx", "jet", "midnight"),
        # Qualities
        "cheap": ("inexpensive", "affordable", "budget", "economical", "low-cost"),
        "expensive": ("costly", "premium", "high-end", "luxury", "pricey"),
        "heavy": ("weighty", "massive", "substantial", "hefty", "dense"),
        "light": ("lightweight", "portable", "feather", "airy", "delicate"),
        # Status
        "available": ("in-stock", "ready", "on-hand", "stocked", "inventory"),
        "unavailable": ("out-of-stock", "depleted", "empty", "sold-out", "exhausted"),
        "new": ("fresh", "recent", "latest", "brand-new", "unused"),
        "old": ("vintage", "antique", "used", "worn", "aged"),
    }
)


def expand_synonyms(query: str) -> List[str]:
    """Look up synonyms for each word of a short query.

    Args:
        query: Raw query

    Returns:
        Flat list of synonyms; empty for queries longer than
        MAX_EXPANSION_WORDS words
    """
    words = query.lower().split()
    if len(words) > MAX_EXPANSION_WORDS:
        return []

    expanded: List[str] = []
    for word in words:
        expanded.extend(SYNONYMS.get(word, ()))
    return expanded


__all__ = ["MAX_EXPANSION_WORDS", "SYNONYMS", "expand_synonyms"]
