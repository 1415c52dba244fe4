"""Suffix-stripping stemmer used for cross-form matching.

The rules are deliberately crude: no dictionary, first matching rule wins.
Each rule only applies to words longer than its minimum length, so short
words such as "red", "bed" or "gas" are left alone. Input is assumed to be
lowercase.
"""

# Ordered (suffix, replacement, minimum word length) rules; the "s" rule is
# guarded separately
_SUFFIX_RULES = (
    ("ies", "y", 5),
    ("es", "", 4),
)
_PLURAL_MIN_LENGTH = 4
_VERB_RULES = (
    ("ing", "", 6),
    ("ed", "", 5),
)


def stem(word: str) -> str:
    """Reduce a word to a crude root.

    Args:
        word: Lowercase word

    Returns:
        Stemmed word
    """
    for suffix, replacement, min_length in _SUFFIX_RULES:
        if word.endswith(suffix) and len(word) >= min_length:
            return word[: -len(suffix)] + replacement

    if (
        word.endswith("s")
        and not word.endswith("ss")
        and len(word) >= _PLURAL_MIN_LENGTH
    ):
        return word[:-1]

    for suffix, replacement, min_length in _VERB_RULES:
        if word.endswith(suffix) and len(word) >= min_length:
            return word[: -len(suffix)] + replacement

    return word


def stem_phrase(text: str) -> str:
    """Stem every whitespace-separated word of ``text``."""
    return " ".join(stem(word) for word in text.split())


__all__ = ["stem", "stem_phrase"]
