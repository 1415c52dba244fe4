"""Search pipeline: query understanding, scoring and ranking."""

from .expansion import expand_synonyms
from .fuzzy import similarity
from .intent import apply_intents, parse_intents
from .ranking import rank
from .scoring import QueryContext, score_item
from .searcher import InventorySearcher, highlight, search, searcher, suggest
from .stemmer import stem, stem_phrase
from .terms import extract_terms

__all__ = [
    "InventorySearcher",
    "QueryContext",
    "apply_intents",
    "expand_synonyms",
    "extract_terms",
    "highlight",
    "parse_intents",
    "rank",
    "score_item",
    "search",
    "searcher",
    "similarity",
    "stem",
    "stem_phrase",
    "suggest",
]
