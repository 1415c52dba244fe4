"""Per-field scoring of catalog items.

Each searchable field is evaluated against the query with an ordered cascade
of match rules; the first rule that fires scores the field. Independently,
every extracted term earns lower-weight partial credit in every field.

Field weights:
    name=10, sku=8, category=7, description=6,
    tags=5, barcode=5, supplier=4, location=3
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, FrozenSet, List, NamedTuple, Optional, Sequence, Tuple

from ..models import MatchType, QueryIntent, SearchOptions
from .expansion import expand_synonyms
from .fuzzy import similarity
from .intent import parse_intents
from .stemmer import stem, stem_phrase
from .terms import extract_terms

logger = logging.getLogger(__name__)

# Flat bonus per term when a multi-term query matches the whole item
MULTI_TERM_BONUS = 50.0


@dataclass(frozen=True)
class SearchField:
    """A searchable item field and its relative weight."""

    name: str
    weight: float
    accessor: Callable[[Any], Optional[str]]

    def text(self, item: Any) -> Optional[str]:
        """Return the lowercase field text, or None when absent or blank."""
        value = self.accessor(item)
        if value is None:
            return None
        text = str(value).strip().lower()
        return text or None


def _attribute(name: str) -> Callable[[Any], Optional[str]]:
    return lambda item: getattr(item, name, None)


def _tags(item: Any) -> Optional[str]:
    tags = getattr(item, "tags", None)
    if not tags:
        return None
    return " ".join(str(tag) for tag in tags if tag)


SEARCH_FIELDS: Tuple[SearchField, ...] = (
    SearchField("name", 10, _attribute("name")),
    SearchField("sku", 8, _attribute("sku")),
    SearchField("category", 7, _attribute("category")),
    SearchField("description", 6, _attribute("description")),
    SearchField("tags", 5, _tags),
    SearchField("barcode", 5, _attribute("barcode")),
    SearchField("supplier", 4, _attribute("supplier")),
    SearchField("location", 3, _attribute("location")),
)


@dataclass(frozen=True)
class QueryContext:
    """Query artifacts computed once per search call."""

    query: str
    query_stem: str
    terms: Tuple[str, ...]
    term_stems: Tuple[str, ...]
    synonyms: Tuple[str, ...]
    intents: Tuple[QueryIntent, ...]

    @classmethod
    def build(cls, query: str) -> "QueryContext":
        """Derive every query artifact from the raw query.

        Args:
            query: Raw user query

        Returns:
            QueryContext instance
        """
        lowered = query.strip().lower()
        terms = tuple(extract_terms(query))
        context = cls(
            query=lowered,
            query_stem=stem_phrase(lowered),
            terms=terms,
            term_stems=tuple(stem(term) for term in terms),
            synonyms=tuple(expand_synonyms(query)),
            intents=tuple(parse_intents(query)),
        )
        logger.debug(
            f"Query context: terms={context.terms} stems={context.term_stems} "
            f"synonyms={len(context.synonyms)} intents={len(context.intents)}"
        )
        return context


@dataclass(frozen=True)
class FieldText:
    """Lowercase text of one field with its stem and words."""

    value: str
    stem: str
    words: Tuple[str, ...]

    @classmethod
    def from_value(cls, value: str) -> "FieldText":
        words = tuple(value.split())
        return cls(value=value, stem=" ".join(stem(word) for word in words), words=words)


class RuleMatch(NamedTuple):
    """Score multiplier and proposed match type from a field rule."""

    multiplier: float
    match_type: Optional[MatchType]


FieldRule = Callable[[FieldText, QueryContext, SearchOptions], Optional[RuleMatch]]


def exact_rule(field: FieldText, ctx: QueryContext, options: SearchOptions) -> Optional[RuleMatch]:
    if field.value == ctx.query:
        return RuleMatch(10.0, MatchType.EXACT)
    return None


def stemmed_exact_rule(
    field: FieldText, ctx: QueryContext, options: SearchOptions
) -> Optional[RuleMatch]:
    if ctx.query_stem and field.stem == ctx.query_stem:
        return RuleMatch(9.5, MatchType.EXACT)
    return None


def contains_query_rule(
    field: FieldText, ctx: QueryContext, options: SearchOptions
) -> Optional[RuleMatch]:
    if ctx.query in field.value:
        return RuleMatch(8.0, MatchType.PARTIAL)
    return None


def contains_stem_rule(
    field: FieldText, ctx: QueryContext, options: SearchOptions
) -> Optional[RuleMatch]:
    if ctx.query_stem and ctx.query_stem in field.value:
        return RuleMatch(7.5, MatchType.PARTIAL)
    return None


def field_in_query_rule(
    field: FieldText, ctx: QueryContext, options: SearchOptions
) -> Optional[RuleMatch]:
    # Short field values such as a supplier name inside a longer query
    if len(field.value) >= 3 and field.value in ctx.query:
        return RuleMatch(7.0, MatchType.PARTIAL)
    return None


def all_terms_rule(
    field: FieldText, ctx: QueryContext, options: SearchOptions
) -> Optional[RuleMatch]:
    if len(ctx.terms) <= 1:
        return None
    if all(term in field.value for term in ctx.terms):
        return RuleMatch(7.0, MatchType.PARTIAL)
    if all(
        _contains_term(field.value, term, term_stem)
        for term, term_stem in zip(ctx.terms, ctx.term_stems)
    ):
        return RuleMatch(6.5, MatchType.PARTIAL)
    return None


def synonym_rule(
    field: FieldText, ctx: QueryContext, options: SearchOptions
) -> Optional[RuleMatch]:
    if any(synonym in field.value for synonym in ctx.synonyms):
        return RuleMatch(6.0, MatchType.SEMANTIC)
    return None


def fuzzy_word_rule(
    field: FieldText, ctx: QueryContext, options: SearchOptions
) -> Optional[RuleMatch]:
    best = 0.0
    for word in field.words:
        if word == ctx.query:
            return RuleMatch(6.0, None)
        if ctx.query_stem and stem(word) == ctx.query_stem:
            return RuleMatch(5.8, MatchType.EXACT)
        best = max(best, similarity(word, ctx.query))
    if best >= options.fuzzy_threshold and best > 0.0:
        return RuleMatch(5.0 * best, MatchType.FUZZY)
    return None


# Evaluated in order; the first rule that matches scores the field
FIELD_RULES: Tuple[FieldRule, ...] = (
    exact_rule,
    stemmed_exact_rule,
    contains_query_rule,
    contains_stem_rule,
    field_in_query_rule,
    all_terms_rule,
    synonym_rule,
    fuzzy_word_rule,
)


def merge_match_type(current: MatchType, proposed: Optional[MatchType]) -> MatchType:
    """Fold a rule's proposed match type into the item's current one.

    Exact always wins; partial replaces anything but exact; semantic and
    fuzzy only replace partial.
    """
    if proposed is None:
        return current
    if proposed == MatchType.EXACT:
        return MatchType.EXACT
    if proposed == MatchType.PARTIAL:
        return current if current == MatchType.EXACT else MatchType.PARTIAL
    return proposed if current == MatchType.PARTIAL else current


def _contains_term(text: str, term: str, term_stem: str) -> bool:
    return term in text or (bool(term_stem) and term_stem in text)


def evaluate_field(
    field: FieldText,
    ctx: QueryContext,
    options: SearchOptions,
    rules: Sequence[FieldRule] = FIELD_RULES,
) -> Optional[RuleMatch]:
    """Return the first rule match for a field, if any."""
    for rule in rules:
        match = rule(field, ctx, options)
        if match is not None:
            return match
    return None


def term_credit(field: FieldText, ctx: QueryContext, options: SearchOptions) -> float:
    """Partial credit multiplier earned by individual terms in a field."""
    credit = 0.0
    for term, term_stem in zip(ctx.terms, ctx.term_stems):
        if term in field.value:
            credit += 3.0
        elif term_stem and term_stem in field.value:
            credit += 2.8
        elif field.words:
            best = max(similarity(word, term) for word in field.words)
            if best >= options.fuzzy_threshold and best > 0.0:
                credit += 2.0 * best
    return credit


@dataclass(frozen=True)
class ItemScore:
    """Raw accumulated score of one item before normalization."""

    item: Any
    score: float
    matched_fields: FrozenSet[str]
    match_type: MatchType
    matched: bool

    def add_bonus(self, bonus: float) -> "ItemScore":
        return replace(self, score=self.score + bonus)


def passes_term_gate(texts: Sequence[str], ctx: QueryContext) -> bool:
    """Require every term, raw or stemmed, somewhere across the item."""
    haystack = " ".join(texts)
    return all(
        _contains_term(haystack, term, term_stem)
        for term, term_stem in zip(ctx.terms, ctx.term_stems)
    )


def score_item(item: Any, ctx: QueryContext, options: SearchOptions) -> Optional[ItemScore]:
    """Score one item against the query.

    Args:
        item: Catalog item
        ctx: Query artifacts
        options: Search options

    Returns:
        ItemScore, or None when the item lacks one of the query terms
    """
    present: List[Tuple[SearchField, FieldText]] = []
    for search_field in SEARCH_FIELDS:
        text = search_field.text(item)
        if text is not None:
            present.append((search_field, FieldText.from_value(text)))

    total = 0.0
    if ctx.terms:
        if not passes_term_gate([field.value for _, field in present], ctx):
            return None
        if len(ctx.terms) >= 2:
            total += MULTI_TERM_BONUS * len(ctx.terms)

    matched_fields = set()
    match_type = MatchType.PARTIAL

    for search_field, field in present:
        match = evaluate_field(field, ctx, options)
        if match is not None:
            total += search_field.weight * match.multiplier
            matched_fields.add(search_field.name)
            match_type = merge_match_type(match_type, match.match_type)

        credit = term_credit(field, ctx, options)
        if credit:
            total += search_field.weight * credit
            matched_fields.add(search_field.name)

    return ItemScore(
        item=item,
        score=total,
        matched_fields=frozenset(matched_fields),
        match_type=match_type,
        matched=bool(matched_fields),
    )


__all__ = [
    "FIELD_RULES",
    "ItemScore",
    "QueryContext",
    "SEARCH_FIELDS",
    "SearchField",
    "evaluate_field",
    "merge_match_type",
    "score_item",
]
