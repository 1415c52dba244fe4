"""Tests for the command line interface."""

import json

import pytest
import yaml
from click.testing import CliRunner

from inventory_search.__main__ import main
from inventory_search.cli import cli


@pytest.fixture
def catalog_file(tmp_path, catalog_records):
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.safe_dump(catalog_records))
    return str(path)


def test_search_json(catalog_file):
    result = CliRunner().invoke(cli, ["search", catalog_file, "hammer under $40", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [entry["item"]["name"] for entry in data] == ["Claw Hammer"]
    assert "name" in data[0]["matched_fields"]


def test_search_table(catalog_file):
    result = CliRunner().invoke(cli, ["search", catalog_file, "hammer", "--limit", "1"])
    assert result.exit_code == 0
    assert "Search Results" in result.output
    assert "Claw" in result.output


def test_search_active_only(catalog_file):
    result = CliRunner().invoke(
        cli, ["search", catalog_file, "batteries", "--active-only", "--format", "json"]
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == []


def test_search_no_results(catalog_file):
    result = CliRunner().invoke(cli, ["search", catalog_file, "chainsaw"])
    assert result.exit_code == 0
    assert "No matching items found" in result.output


def test_search_missing_catalog(tmp_path):
    result = CliRunner().invoke(cli, ["search", str(tmp_path / "nope.yaml"), "hammer"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_search_invalid_threshold(catalog_file):
    result = CliRunner().invoke(cli, ["search", catalog_file, "hammer", "--threshold", "3"])
    assert result.exit_code == 1
    assert "Invalid options" in result.output


def test_suggest(catalog_file):
    result = CliRunner().invoke(cli, ["suggest", catalog_file, "ham"])
    assert result.exit_code == 0
    assert result.output.split() == ["HAM-001", "HAM-002"]


def test_main_returns_exit_code(catalog_file, tmp_path):
    assert main(["suggest", catalog_file, "ham"]) == 0
    assert main(["suggest", str(tmp_path / "nope.yaml"), "ham"]) == 1


def test_search_catalog_with_string_prices(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Claw Hammer", "priceTier1": "25.00", "quantityOnHand": "12"},
                {"name": "Sledge Hammer", "priceTier1": "55.00"},
            ]
        )
    )
    result = CliRunner().invoke(
        cli, ["search", str(path), "hammer under $40", "--format", "json"]
    )
    assert result.exit_code == 0
    assert [entry["item"]["name"] for entry in json.loads(result.output)] == ["Claw Hammer"]


def test_search_catalog_with_bad_price(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"name": "Claw Hammer", "priceTier1": "cheap"}]))
    result = CliRunner().invoke(cli, ["search", str(path), "hammer"])
    assert result.exit_code == 1
    assert "Error" in result.output
