"""
Inventory Search - Fuzzy Multi-Field Search for Catalog Records

This package lets users locate inventory items through free-text queries that
may contain typos, plural/singular variation, synonyms and embedded numeric
constraints ("hammers under $40").

Key Features:
- Term extraction with stop-word removal
- Price, quantity and stock intents parsed from natural language
- Suffix-stripping stemmer for cross-form matching
- Static synonym expansion for short queries
- Blended fuzzy similarity (edit distance, Jaro-Winkler, bigram Jaccard)
- Weighted per-field scoring, ranking and truncation

Example Usage:
    from inventory_search import SearchableItem, search

    items = [SearchableItem(id="1", name="Claw Hammer", price_tier1=25)]
    results = search(items, "hammer under $40")

Version: 1.0.0
License: MIT
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .models import (
    IntentKind,
    IntentOperator,
    ItemStatus,
    MatchType,
    QueryIntent,
    SearchableItem,
    SearchOptions,
    SearchResult,
)
from .search.searcher import InventorySearcher, highlight, search, suggest

try:
    __version__ = version("inventory-search")
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

__all__ = [
    "__version__",
    "IntentKind",
    "IntentOperator",
    "InventorySearcher",
    "ItemStatus",
    "MatchType",
    "QueryIntent",
    "SearchableItem",
    "SearchOptions",
    "SearchResult",
    "highlight",
    "search",
    "suggest",
]
