"""Shared fixtures for inventory search tests."""

from typing import List

import pytest

from inventory_search.config import Config
from inventory_search.models import SearchableItem
from inventory_search.monitoring.metrics import MetricsManager
from inventory_search.search.searcher import InventorySearcher

# Test data
CATALOG = [
    {
        "id": "1",
        "name": "Claw Hammer",
        "sku": "HAM-001",
        "category": "Hand Tools",
        "description": "16 oz steel claw hammer with fiberglass handle",
        "supplier": "Stanley",
        "location": "Aisle 4",
        "tags": ["hammer", "framing"],
        "status": "active",
        "priceTier1": 25.0,
        "quantityOnHand": 12,
    },
    {
        "id": "2",
        "name": "Sledge Hammer",
        "sku": "HAM-002",
        "category": "Hand Tools",
        "description": "Heavy 10 lb sledge for demolition",
        "supplier": "Estwing",
        "location": "Aisle 4",
        "tags": ["hammer", "demolition"],
        "status": "active",
        "priceTier1": 55.0,
        "quantityOnHand": 3,
    },
    {
        "id": "3",
        "name": "Red Paint",
        "sku": "PNT-RED",
        "category": "Paint",
        "description": "crimson finish",
        "supplier": "Behr",
        "status": "active",
        "priceTier1": 32.5,
        "quantityOnHand": 0,
    },
    {
        "id": "4",
        "name": "AA Batteries",
        "sku": "BAT-AA-24",
        "category": "Electrical",
        "description": "Alkaline batteries, 24 pack",
        "supplier": "Duracell",
        "status": "inactive",
        "priceTier1": 18.0,
        "quantityOnHand": 40,
    },
    {
        "id": "5",
        "name": "Cordless Drill",
        "sku": "DRL-18V",
        "category": "Power Tools",
        "description": "18V drill driver with two batteries",
        "supplier": "DeWalt",
        "status": "discontinued",
        "priceTier1": 129.0,
        "quantityOnHand": 5,
    },
]


@pytest.fixture
def catalog_records() -> List[dict]:
    """Raw catalog records as stored in a catalog file."""
    return CATALOG


@pytest.fixture
def items() -> List[SearchableItem]:
    """Catalog items built from the test data."""
    return [SearchableItem.from_dict(record) for record in CATALOG]


@pytest.fixture
def metrics() -> MetricsManager:
    return MetricsManager(enabled=True)


@pytest.fixture
def searcher(metrics: MetricsManager) -> InventorySearcher:
    return InventorySearcher(Config(), metrics)
