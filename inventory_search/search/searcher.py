"""
Inventory Searcher

Entry point of the search pipeline. A call runs one linear pass over the
caller's items:

1. Build the query context (terms, stems, synonyms, intents)
2. Score every item field by field
3. Apply intents as hard filters with score bonuses
4. Normalize, filter, sort and truncate

The searcher never mutates the items it is given and keeps no state between
calls apart from metrics.

Example Usage:
    from inventory_search.search.searcher import search

    results = search(items, "hammers under $40", {"maxResults": 5})
"""

import logging
import re
import time
from dataclasses import replace
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..config import Config
from ..models import ItemStatus, MatchType, SearchOptions, SearchResult, normalize_status
from ..monitoring.metrics import MetricsManager
from .intent import apply_intents
from .ranking import rank
from .scoring import ItemScore, QueryContext, score_item

logger = logging.getLogger(__name__)

OptionsLike = Union[SearchOptions, Mapping[str, Any], None]

# Minimum partial length before suggestions are offered
MIN_SUGGESTION_LENGTH = 2
SUGGESTION_FIELDS = ("name", "sku", "category")


class InventorySearcher:
    """Fuzzy multi-field searcher for inventory items."""

    def __init__(
        self,
        config: Optional[Config] = None,
        metrics: Optional[MetricsManager] = None,
    ) -> None:
        """Initialize searcher.

        Args:
            config: Configuration providing default options
            metrics: Metrics manager
        """
        self.config = config or Config()
        self.metrics = metrics or MetricsManager(enabled=self.config.enable_telemetry)

    def resolve_options(self, options: OptionsLike) -> SearchOptions:
        """Turn caller options into a SearchOptions instance.

        Mappings override the configured defaults key by key and may use
        snake_case or camelCase names.
        """
        if isinstance(options, SearchOptions):
            return options
        defaults = self.config.search_options()
        if not options:
            return defaults
        aliases = {
            field.alias: name for name, field in SearchOptions.model_fields.items()
        }
        merged = defaults.model_dump()
        for key, value in options.items():
            merged[aliases.get(key, key)] = value
        return SearchOptions.model_validate(merged)

    def search(
        self,
        items: Sequence[Any],
        query: str,
        options: OptionsLike = None,
    ) -> List[SearchResult]:
        """Search items for a free-text query.

        Args:
            items: Catalog items (read-only)
            query: Raw user query
            options: Search options

        Returns:
            Ranked search results
        """
        start_time = time.perf_counter()

        if not query or not query.strip():
            results = [
                SearchResult(
                    item=item,
                    score=1.0,
                    matched_fields=frozenset(),
                    match_type=MatchType.EXACT,
                )
                for item in items
            ]
            self._record("empty", results, start_time)
            return results

        opts = self.resolve_options(options)
        if not items:
            return []

        ctx = QueryContext.build(query)
        scored: List[ItemScore] = []
        for item in items:
            entry = self._score(item, ctx, opts)
            if entry is not None:
                scored.append(entry)

        results = rank(scored, opts, len(ctx.intents))
        logger.debug(
            f"Query {query!r}: {len(items)} items, {len(scored)} scored, "
            f"{len(results)} returned"
        )
        self._record("text" if ctx.terms else "intent", results, start_time)
        return results

    def _score(
        self, item: Any, ctx: QueryContext, opts: SearchOptions
    ) -> Optional[ItemScore]:
        if not opts.include_inactive:
            if normalize_status(getattr(item, "status", None)) != ItemStatus.ACTIVE.value:
                return None

        entry = score_item(item, ctx, opts)
        if entry is None:
            return None

        bonus = apply_intents(item, ctx.intents)
        if bonus is None:
            return None

        entry = entry.add_bonus(bonus)
        if not ctx.terms and ctx.intents and not entry.matched:
            # A constraint-only query ("under $40") matches on its intents
            entry = replace(entry, matched=True)
        return entry

    def _record(self, query_type: str, results: List[SearchResult], start_time: float) -> None:
        try:
            self.metrics.increment_counter(
                "searches_performed", labels={"query_type": query_type}
            )
            self.metrics.observe_value("search_latency", time.perf_counter() - start_time)
            self.metrics.observe_value("search_results", len(results))
        except Exception as e:
            logger.warning(f"Failed to record search metrics: {e}")

    def suggest(
        self,
        items: Sequence[Any],
        partial: str,
        max_suggestions: int = 5,
    ) -> List[str]:
        """Suggest completions for a partial query.

        Args:
            items: Catalog items
            partial: Partial query text
            max_suggestions: Maximum number of suggestions

        Returns:
            Distinct names, SKUs or categories starting with the partial text
        """
        if not partial or len(partial.strip()) < MIN_SUGGESTION_LENGTH:
            return []

        prefix = partial.strip().lower()
        suggestions: List[str] = []
        for item in items:
            if len(suggestions) >= max_suggestions:
                break
            for field_name in SUGGESTION_FIELDS:
                value = getattr(item, field_name, None)
                if value and str(value).lower().startswith(prefix):
                    if str(value) not in suggestions:
                        suggestions.append(str(value))
                    break
        return suggestions


def highlight(text: str, query: str, start: str = "<mark>", end: str = "</mark>") -> str:
    """Wrap every case-insensitive occurrence of ``query`` in markers.

    Args:
        text: Text to highlight
        query: Literal text to find
        start: Opening marker
        end: Closing marker

    Returns:
        Highlighted text
    """
    if not query or not query.strip():
        return text
    pattern = re.compile(re.escape(query.strip()), re.IGNORECASE)
    return pattern.sub(lambda match: f"{start}{match.group(0)}{end}", text)


# Global instance
searcher = InventorySearcher()


def search(items: Sequence[Any], query: str, options: OptionsLike = None) -> List[SearchResult]:
    """Search items with the global searcher."""
    return searcher.search(items, query, options)


def suggest(items: Sequence[Any], partial: str, max_suggestions: int = 5) -> List[str]:
    """Suggest completions with the global searcher."""
    return searcher.suggest(items, partial, max_suggestions)


__all__ = ["InventorySearcher", "highlight", "search", "searcher", "suggest"]
