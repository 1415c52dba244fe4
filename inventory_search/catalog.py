"""Catalog file loading for the command line interface."""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

import yaml

from .exceptions import CatalogError
from .models import SearchableItem

logger = logging.getLogger(__name__)


def load_catalog(path: Union[str, Path]) -> List[SearchableItem]:
    """Load catalog items from a JSON or YAML file.

    The file holds either a list of item mappings or a mapping with an
    ``items`` list.

    Args:
        path: Catalog file path

    Returns:
        List of searchable items

    Raises:
        CatalogError: If the file cannot be read or has the wrong shape
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogError(f"Cannot parse catalog {path}: {e}") from e

    records = _records(data)
    items = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise CatalogError(f"Catalog entry {index} is not a mapping")
        try:
            item = SearchableItem.from_dict(record)
        except ValueError as e:
            raise CatalogError(f"Catalog entry {index}: {e}") from e
        if not item.id:
            item.id = str(index)
        items.append(item)

    logger.info(f"Loaded {len(items)} items from {path}")
    return items


def _records(data: Any) -> List[Any]:
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise CatalogError("Catalog must be a list of items or a mapping with an 'items' list")
    return data


__all__ = ["load_catalog"]
