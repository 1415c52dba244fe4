"""Score normalization, filtering, sorting and truncation."""

from typing import Any, Callable, Dict, Iterable, List

from ..models import SearchOptions, SearchResult, SortBy, SortOrder
from .intent import INTENT_BONUS
from .scoring import SEARCH_FIELDS, ItemScore

# Best possible field score: every field matching exactly
MAX_FIELD_SCORE = sum(field.weight * 10 for field in SEARCH_FIELDS)
INTENT_NORMALIZER = max(INTENT_BONUS.values())


def max_possible_score(intent_count: int) -> float:
    """Theoretical maximum used to normalize raw scores.

    Multi-term bonuses and per-term credit are not included, so normalized
    scores can exceed 1.
    """
    return MAX_FIELD_SCORE + INTENT_NORMALIZER * intent_count


def _name_key(result: SearchResult) -> Any:
    name = getattr(result.item, "name", None)
    return str(name).lower() if name is not None else ""


def _price_key(result: SearchResult) -> Any:
    return getattr(result.item, "price_tier1", None) or 0.0


def _quantity_key(result: SearchResult) -> Any:
    return getattr(result.item, "quantity_on_hand", None) or 0


_SORT_KEYS: Dict[str, Callable[[SearchResult], Any]] = {
    SortBy.RELEVANCE.value: lambda result: result.score,
    SortBy.NAME.value: _name_key,
    SortBy.PRICE.value: _price_key,
    SortBy.QUANTITY.value: _quantity_key,
}


def sort_results(results: List[SearchResult], sort_by: str, sort_order: str) -> None:
    """Sort results in place.

    The sort is stable in both directions, so equal keys keep input order.
    """
    key = _SORT_KEYS[SortBy(sort_by).value]
    results.sort(key=key, reverse=SortOrder(sort_order) == SortOrder.DESC)


def rank(
    scored: Iterable[ItemScore],
    options: SearchOptions,
    intent_count: int,
) -> List[SearchResult]:
    """Normalize, filter, sort and truncate scored items.

    Args:
        scored: Items that survived scoring and intent filtering
        options: Search options
        intent_count: Number of intents parsed from the query

    Returns:
        At most ``options.max_results`` search results
    """
    max_score = max_possible_score(intent_count)
    results = [
        SearchResult(
            item=entry.item,
            score=entry.score / max_score,
            matched_fields=entry.matched_fields,
            match_type=entry.match_type,
        )
        for entry in scored
        if entry.score / max_score >= options.min_score or entry.matched
    ]
    sort_results(results, options.sort_by, options.sort_order)
    return results[: options.max_results]


__all__ = ["MAX_FIELD_SCORE", "max_possible_score", "rank", "sort_results"]
