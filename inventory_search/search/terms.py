"""Query term extraction."""

import re
from typing import List

# Price, stock and status phrases removed before tokenizing. Longer shapes
# come first so a range is not consumed as two bare prices, and a comparative
# swallows a range that follows it ("over $10 - $60").
_NUMBER = r"\$?\d+(?:\.\d+)?"
_PHRASE_PATTERNS = (
    re.compile(rf"\bbetween\s+{_NUMBER}\s+(?:and|to)\s+{_NUMBER}", re.IGNORECASE),
    re.compile(
        rf"\b(?:under|less\s+than|below|cheaper\s+than"
        rf"|over|more\s+than|above|(?:more\s+)?expensive\s+than"
        rf"|around|about|approximately)\s*{_NUMBER}(?:\s*-\s*{_NUMBER})?",
        re.IGNORECASE,
    ),
    re.compile(rf"{_NUMBER}\s*-\s*{_NUMBER}", re.IGNORECASE),
    re.compile(r"\$\d+(?:\.\d+)?", re.IGNORECASE),
    re.compile(
        r"\b(?:low\s+stock|running\s+low|need\s+reorder|almost\s+out(?:\s+of\s+stock)?)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:out\s+of|no|in)\s+stock\b", re.IGNORECASE),
    re.compile(r"\b(?:un)?available\b", re.IGNORECASE),
    re.compile(r"\b(?:inactive|disabled|discontinued|obsolete|retired)\b", re.IGNORECASE),
)

STOP_WORDS = frozenset({"and", "or", "the", "a", "an", "with", "for"})


def strip_phrases(query: str) -> str:
    """Remove recognized price and stock phrases from a query."""
    for pattern in _PHRASE_PATTERNS:
        query = pattern.sub(" ", query)
    return query


def extract_terms(query: str) -> List[str]:
    """Extract normalized search terms from a raw query.

    Args:
        query: Raw user query

    Returns:
        Lowercase terms with price/stock phrases and stop-words removed
    """
    return [
        token
        for token in strip_phrases(query).lower().split()
        if token not in STOP_WORDS
    ]


__all__ = ["STOP_WORDS", "extract_terms", "strip_phrases"]
