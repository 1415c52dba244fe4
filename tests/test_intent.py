"""Tests for intent parsing and filtering."""

import pytest

from inventory_search.models import (
    IntentKind,
    IntentOperator,
    QueryIntent,
    SearchableItem,
)
from inventory_search.search.intent import apply_intents, check_intent, parse_intents

PRICE = IntentKind.PRICE
LESS = IntentOperator.LESS
GREATER = IntentOperator.GREATER
BETWEEN = IntentOperator.BETWEEN
EQUAL = IntentOperator.EQUAL


@pytest.mark.parametrize(
    "query, operator, value",
    [
        ("hammer under $40", LESS, 40.0),
        ("less than 15.5", LESS, 15.5),
        ("Below $8", LESS, 8.0),
        ("drill over $100", GREATER, 100.0),
        ("more than 20", GREATER, 20.0),
        ("above $1.25", GREATER, 1.25),
        ("around $50", EQUAL, 50.0),
    ],
)
def test_single_price_intents(query, operator, value):
    assert parse_intents(query) == [QueryIntent(PRICE, operator, value)]


def test_price_range():
    assert parse_intents("paint $10 - $20") == [QueryIntent(PRICE, BETWEEN, 10.0, 20.0)]
    assert parse_intents("paint 10-20") == [QueryIntent(PRICE, BETWEEN, 10.0, 20.0)]


def test_reversed_range_is_normalized():
    assert parse_intents("$20 - $10") == [QueryIntent(PRICE, BETWEEN, 10.0, 20.0)]


def test_between_phrase():
    assert parse_intents("between $5 and $9") == [QueryIntent(PRICE, BETWEEN, 5.0, 9.0)]


def test_multiple_matches_are_all_emitted():
    intents = parse_intents("under $40 and over $10")
    assert QueryIntent(PRICE, LESS, 40.0) in intents
    assert QueryIntent(PRICE, GREATER, 10.0) in intents
    assert len(intents) == 2


def test_in_stock_intents():
    expected = [QueryIntent(IntentKind.STATUS, EQUAL, "active")]
    assert parse_intents("drills in stock") == expected
    assert parse_intents("available drills") == expected


def test_out_of_stock_intents():
    expected = [QueryIntent(IntentKind.QUANTITY, EQUAL, 0)]
    assert parse_intents("gloves out of stock") == expected
    assert parse_intents("unavailable gloves") == expected


def test_low_stock_intent():
    assert parse_intents("low stock screws") == [
        QueryIntent(IntentKind.QUANTITY, LESS, 10)
    ]


def test_malformed_numbers_emit_nothing():
    assert parse_intents("under $abc") == []
    assert parse_intents("over $") == []


def test_plain_query_has_no_intents():
    assert parse_intents("claw hammer") == []
    assert parse_intents("") == []


def test_price_filter_rejects_and_accepts():
    intents = parse_intents("under $40")
    assert apply_intents(SearchableItem(price_tier1=39.99), intents) == 20.0
    assert apply_intents(SearchableItem(price_tier1=45), intents) is None
    assert apply_intents(SearchableItem(price_tier1=40), intents) is None


def test_missing_attribute_fails_intent():
    intent = QueryIntent(PRICE, LESS, 40.0)
    assert check_intent(SearchableItem(), intent) is False
    assert check_intent(object(), intent) is False


def test_between_is_inclusive():
    intent = QueryIntent(PRICE, BETWEEN, 10.0, 20.0)
    assert check_intent(SearchableItem(price_tier1=10), intent)
    assert check_intent(SearchableItem(price_tier1=20), intent)
    assert not check_intent(SearchableItem(price_tier1=20.01), intent)


def test_around_allows_twenty_percent():
    intent = QueryIntent(PRICE, EQUAL, 100.0)
    assert check_intent(SearchableItem(price_tier1=85), intent)
    assert check_intent(SearchableItem(price_tier1=120), intent)
    assert not check_intent(SearchableItem(price_tier1=125), intent)


def test_status_and_quantity_bonuses():
    item = SearchableItem(status="active", quantity_on_hand=0)
    assert apply_intents(item, parse_intents("in stock")) == 15.0
    assert apply_intents(item, parse_intents("out of stock")) == 20.0
    assert apply_intents(SearchableItem(status="inactive"), parse_intents("in stock")) is None


def test_no_intents_means_no_bonus():
    assert apply_intents(SearchableItem(), []) == 0.0


def test_cheaper_and_more_expensive_phrases():
    assert parse_intents("cheaper than $20") == [QueryIntent(PRICE, LESS, 20.0)]
    assert parse_intents("drill more expensive than 80") == [QueryIntent(PRICE, GREATER, 80.0)]


def test_no_stock_intent():
    assert parse_intents("no stock gloves") == [QueryIntent(IntentKind.QUANTITY, EQUAL, 0)]


@pytest.mark.parametrize("query", ["screws need reorder", "almost out screws", "running low"])
def test_reorder_phrases_mean_low_stock(query):
    assert parse_intents(query) == [QueryIntent(IntentKind.QUANTITY, LESS, 10)]


@pytest.mark.parametrize(
    "query, status",
    [
        ("inactive saws", "inactive"),
        ("disabled saws", "inactive"),
        ("discontinued stain", "discontinued"),
        ("obsolete stain", "discontinued"),
        ("retired stain", "discontinued"),
    ],
)
def test_status_phrases(query, status):
    assert parse_intents(query) == [QueryIntent(IntentKind.STATUS, EQUAL, status)]


def test_status_intent_filters_by_status():
    intents = parse_intents("discontinued")
    assert apply_intents(SearchableItem(status="discontinued"), intents) == 15.0
    assert apply_intents(SearchableItem(status="active"), intents) is None


def test_comparative_followed_by_range():
    intents = parse_intents("hammer over $10 - $60")
    assert QueryIntent(PRICE, GREATER, 10.0) in intents
    assert QueryIntent(PRICE, BETWEEN, 10.0, 60.0) in intents
