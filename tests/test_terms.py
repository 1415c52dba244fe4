"""Tests for query term extraction."""

import pytest

from inventory_search.search.terms import STOP_WORDS, extract_terms


@pytest.mark.parametrize(
    "query, expected",
    [
        ("Hammers under $40", ["hammers"]),
        ("nails less than $5", ["nails"]),
        ("saw below 100", ["saw"]),
        ("drill over $99.99", ["drill"]),
        ("lumber more than $20", ["lumber"]),
        ("ladder above $150", ["ladder"]),
        ("paint $10 - $20", ["paint"]),
        ("tape $3.50", ["tape"]),
        ("drills in stock", ["drills"]),
        ("gloves out of stock", ["gloves"]),
        ("available drills", ["drills"]),
        ("unavailable saws", ["saws"]),
        ("screws between 10 and 20", ["screws"]),
        ("primer around $30", ["primer"]),
        ("hammer over $10 - $60", ["hammer"]),
        ("hammer under $40 - $60", ["hammer"]),
        ("gloves cheaper than $20", ["gloves"]),
        ("drill more expensive than $80", ["drill"]),
        ("gloves no stock", ["gloves"]),
        ("screws need reorder", ["screws"]),
        ("screws almost out of stock", ["screws"]),
        ("discontinued stain", ["stain"]),
        ("disabled obsolete retired inactive saws", ["saws"]),
    ],
)
def test_price_and_stock_phrases_are_removed(query, expected):
    assert extract_terms(query) == expected


def test_stop_words_are_dropped():
    assert extract_terms("the red hammer with a claw") == ["red", "hammer", "claw"]
    assert extract_terms("nails and screws or bolts for an deck") == [
        "nails",
        "screws",
        "bolts",
        "deck",
    ]


def test_terms_are_lowercase():
    assert extract_terms("Claw HAMMER") == ["claw", "hammer"]


def test_blank_query_has_no_terms():
    assert extract_terms("") == []
    assert extract_terms("   ") == []
    assert extract_terms("under $40") == []


def test_stop_word_set():
    assert STOP_WORDS == {"and", "or", "the", "a", "an", "with", "for"}
