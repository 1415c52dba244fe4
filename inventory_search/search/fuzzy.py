"""Blended fuzzy string similarity.

Three independent measures are combined:

    0.4 * (1 - normalized edit distance)
  + 0.4 * Jaro-Winkler
  + 0.2 * bigram Jaccard

Edit distance and Jaro come from rapidfuzz. The Winkler prefix bonus is
applied on top of plain Jaro for every pair, without rapidfuzz's 0.7 boost
threshold.
"""

from typing import FrozenSet

from rapidfuzz.distance import Jaro, Levenshtein, Prefix

EDIT_WEIGHT = 0.4
JARO_WINKLER_WEIGHT = 0.4
BIGRAM_WEIGHT = 0.2

PREFIX_SCALE = 0.1
MAX_PREFIX = 4


def edit_similarity(a: str, b: str) -> float:
    """Return ``1 - levenshtein(a, b) / max(len(a), len(b))``."""
    return 1.0 - Levenshtein.normalized_distance(a, b)


def jaro_winkler(a: str, b: str) -> float:
    """Jaro similarity plus the Winkler common-prefix bonus."""
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    jaro = Jaro.similarity(a, b)
    prefix = min(Prefix.similarity(a, b), MAX_PREFIX)
    return jaro + PREFIX_SCALE * prefix * (1.0 - jaro)


def _bigrams(text: str) -> FrozenSet[str]:
    return frozenset(text[i : i + 2] for i in range(len(text) - 1))


def bigram_jaccard(a: str, b: str) -> float:
    """Jaccard index of the character bigram sets of two strings."""
    left = _bigrams(a)
    right = _bigrams(b)
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)


def similarity(a: str, b: str) -> float:
    """Blended similarity of two strings in [0, 1].

    Args:
        a: First string
        b: Second string

    Returns:
        Weighted blend of edit, Jaro-Winkler and bigram similarity
    """
    return (
        EDIT_WEIGHT * edit_similarity(a, b)
        + JARO_WINKLER_WEIGHT * jaro_winkler(a, b)
        + BIGRAM_WEIGHT * bigram_jaccard(a, b)
    )


def is_fuzzy_match(a: str, b: str, threshold: float) -> bool:
    """Check whether two strings are at least ``threshold`` similar."""
    return similarity(a, b) >= threshold


__all__ = [
    "bigram_jaccard",
    "edit_similarity",
    "is_fuzzy_match",
    "jaro_winkler",
    "similarity",
]
