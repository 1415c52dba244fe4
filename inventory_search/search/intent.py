"""Query intent parsing and filtering.

Intents are structured constraints (price, quantity, status) recognized in the
natural-language query. They act as hard filters on items and add a flat bonus
to the items that satisfy them.
"""

import logging
import re
from typing import Any, Callable, List, Optional, Pattern, Sequence, Tuple

from ..models import IntentKind, IntentOperator, ItemStatus, QueryIntent, normalize_status

logger = logging.getLogger(__name__)

_NUMBER = r"\$?(\d+(?:\.\d+)?)"

# Single-value price phrases
_PRICE_PATTERNS: Tuple[Tuple[Pattern[str], IntentOperator], ...] = (
    (
        re.compile(rf"\b(?:under|less\s+than|below|cheaper\s+than)\s*{_NUMBER}"),
        IntentOperator.LESS,
    ),
    (
        re.compile(
            rf"\b(?:over|more\s+than|above|(?:more\s+)?expensive\s+than)\s*{_NUMBER}"
        ),
        IntentOperator.GREATER,
    ),
    (
        re.compile(rf"\b(?:around|about|approximately)\s*{_NUMBER}"),
        IntentOperator.EQUAL,
    ),
)

# Two-value price ranges
_RANGE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(rf"(?<![\d.]){_NUMBER}\s*-\s*{_NUMBER}"),
    re.compile(rf"\bbetween\s+{_NUMBER}\s+(?:and|to)\s+{_NUMBER}"),
)

_IN_STOCK = re.compile(r"\bin\s+stock\b|\bavailable\b")
_OUT_OF_STOCK = re.compile(r"\bout\s+of\s+stock\b|\bno\s+stock\b|\bunavailable\b")
_LOW_STOCK = re.compile(
    r"\blow\s+stock\b|\brunning\s+low\b|\bneed\s+reorder\b|\balmost\s+out\b"
)
_INACTIVE = re.compile(r"\b(?:inactive|disabled)\b")
_DISCONTINUED = re.compile(r"\b(?:discontinued|obsolete|retired)\b")

LOW_STOCK_LEVEL = 10
# Relative tolerance for "around $N"
PRICE_TOLERANCE = 0.2

INTENT_BONUS = {
    IntentKind.PRICE: 20.0,
    IntentKind.QUANTITY: 20.0,
    IntentKind.STATUS: 15.0,
}


def parse_intents(query: str) -> List[QueryIntent]:
    """Parse structured constraints from a raw query.

    Every non-overlapping match of every price pattern is emitted, in pattern
    order. Numbers that fail to parse simply do not produce an intent.

    Args:
        query: Raw (unstripped) query

    Returns:
        List of query intents
    """
    lowered = query.lower()
    intents: List[QueryIntent] = []

    for pattern, operator in _PRICE_PATTERNS:
        for match in pattern.finditer(lowered):
            value = _parse_number(match.group(1))
            if value is None:
                continue
            intents.append(QueryIntent(IntentKind.PRICE, operator, value))

    for pattern in _RANGE_PATTERNS:
        for match in pattern.finditer(lowered):
            low = _parse_number(match.group(1))
            high = _parse_number(match.group(2))
            if low is None or high is None:
                continue
            intents.append(
                QueryIntent(
                    IntentKind.PRICE,
                    IntentOperator.BETWEEN,
                    min(low, high),
                    max(low, high),
                )
            )

    if _IN_STOCK.search(lowered):
        intents.append(
            QueryIntent(IntentKind.STATUS, IntentOperator.EQUAL, ItemStatus.ACTIVE.value)
        )
    if _OUT_OF_STOCK.search(lowered):
        intents.append(QueryIntent(IntentKind.QUANTITY, IntentOperator.EQUAL, 0))
    if _LOW_STOCK.search(lowered):
        intents.append(
            QueryIntent(IntentKind.QUANTITY, IntentOperator.LESS, LOW_STOCK_LEVEL)
        )
    if _INACTIVE.search(lowered):
        intents.append(
            QueryIntent(IntentKind.STATUS, IntentOperator.EQUAL, ItemStatus.INACTIVE.value)
        )
    if _DISCONTINUED.search(lowered):
        intents.append(
            QueryIntent(
                IntentKind.STATUS, IntentOperator.EQUAL, ItemStatus.DISCONTINUED.value
            )
        )

    if intents:
        logger.debug(f"Parsed {len(intents)} intents from query: {intents}")
    return intents


def _parse_number(text: str) -> Optional[float]:
    try:
        return float(text)
    except (TypeError, ValueError):
        return None


def _compare(actual: float, intent: QueryIntent) -> bool:
    operator = intent.operator
    if operator == IntentOperator.LESS:
        return actual < intent.value
    if operator == IntentOperator.GREATER:
        return actual > intent.value
    if operator == IntentOperator.BETWEEN:
        return intent.value <= actual <= intent.value2
    if intent.kind == IntentKind.PRICE:
        return abs(actual - intent.value) <= intent.value * PRICE_TOLERANCE
    return actual == intent.value


def _check_price(item: Any, intent: QueryIntent) -> bool:
    price = getattr(item, "price_tier1", None)
    return price is not None and _compare(price, intent)


def _check_quantity(item: Any, intent: QueryIntent) -> bool:
    quantity = getattr(item, "quantity_on_hand", None)
    return quantity is not None and _compare(quantity, intent)


def _check_status(item: Any, intent: QueryIntent) -> bool:
    return normalize_status(getattr(item, "status", None)) == intent.value


_CHECKS: dict = {
    IntentKind.PRICE: _check_price,
    IntentKind.QUANTITY: _check_quantity,
    IntentKind.STATUS: _check_status,
}


def check_intent(item: Any, intent: QueryIntent) -> bool:
    """Test one intent against an item.

    An item lacking the attribute the intent constrains fails it.
    """
    check: Callable[[Any, QueryIntent], bool] = _CHECKS[intent.kind]
    return check(item, intent)


def apply_intents(item: Any, intents: Sequence[QueryIntent]) -> Optional[float]:
    """Apply intents as hard filters.

    Args:
        item: Catalog item
        intents: Parsed query intents

    Returns:
        Total bonus when every intent passes, None when any intent fails
    """
    bonus = 0.0
    for intent in intents:
        if not check_intent(item, intent):
            return None
        bonus += INTENT_BONUS[intent.kind]
    return bonus


__all__ = [
    "INTENT_BONUS",
    "apply_intents",
    "check_intent",
    "parse_intents",
]
