"""Data structures shared by the search pipeline."""

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ItemStatus(str, Enum):
    """Catalog item lifecycle status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


class MatchType(str, Enum):
    """Strongest match strategy that fired for an item."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    SEMANTIC = "semantic"
    PARTIAL = "partial"


class SortBy(str, Enum):
    """Result sort keys."""

    RELEVANCE = "relevance"
    NAME = "name"
    PRICE = "price"
    QUANTITY = "quantity"


class SortOrder(str, Enum):
    """Result sort directions."""

    ASC = "asc"
    DESC = "desc"


class IntentKind(str, Enum):
    """Attribute a query intent constrains."""

    PRICE = "price"
    QUANTITY = "quantity"
    STATUS = "status"


class IntentOperator(str, Enum):
    """Comparison applied by a query intent."""

    LESS = "less"
    GREATER = "greater"
    BETWEEN = "between"
    EQUAL = "equal"


# camelCase keys accepted by SearchableItem.from_dict
_ITEM_ALIASES = {
    "priceTier1": "price_tier1",
    "quantityOnHand": "quantity_on_hand",
}

# Numeric fields converted by SearchableItem.from_dict
_NUMERIC_FIELDS = {
    "price_tier1": float,
    "cost": float,
    "quantity_on_hand": int,
}


@dataclass
class SearchableItem:
    """A catalog record the engine can search.

    Every field except ``id`` is optional; absent fields contribute no score.
    """

    id: str = ""
    name: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    supplier: Optional[str] = None
    barcode: Optional[str] = None
    location: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    status: Union[ItemStatus, str] = ItemStatus.ACTIVE
    price_tier1: Optional[float] = None
    quantity_on_hand: Optional[int] = None
    cost: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchableItem":
        """Create an item from a mapping.

        Accepts snake_case or camelCase keys; unknown keys are ignored. Numeric
        fields given as strings are converted.

        Args:
            data: Item mapping

        Returns:
            SearchableItem instance

        Raises:
            ValueError: If a numeric field cannot be converted
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            key = _ITEM_ALIASES.get(key, key)
            if key in known:
                values[key] = value
        if "id" in values:
            values["id"] = str(values["id"])
        if values.get("tags") is None:
            values.pop("tags", None)
        if values.get("status") is None:
            values.pop("status", None)
        for name, convert in _NUMERIC_FIELDS.items():
            if values.get(name) is not None:
                try:
                    values[name] = convert(values[name])
                except (TypeError, ValueError) as e:
                    raise ValueError(f"Invalid {name}: {values[name]!r}") from e
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        data = asdict(self)
        data["status"] = _enum_value(self.status)
        return data


class SearchOptions(BaseModel):
    """Per-call search configuration."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    fuzzy_threshold: float = Field(default=0.7, ge=0.0, le=1.0, alias="fuzzyThreshold")
    include_inactive: bool = Field(default=True, alias="includeInactive")
    min_score: float = Field(default=0.3, ge=0.0, le=1.0, alias="minScore")
    max_results: int = Field(default=100, ge=1, alias="maxResults")
    sort_by: SortBy = Field(default=SortBy.RELEVANCE, alias="sortBy")
    sort_order: SortOrder = Field(default=SortOrder.DESC, alias="sortOrder")


@dataclass(frozen=True)
class QueryIntent:
    """A structured constraint inferred from query phrasing."""

    kind: IntentKind
    operator: IntentOperator
    value: Union[float, str]
    value2: Optional[float] = None


@dataclass(frozen=True)
class SearchResult:
    """A single ranked match."""

    item: Any
    score: float
    matched_fields: FrozenSet[str]
    match_type: MatchType

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        item = self.item.to_dict() if hasattr(self.item, "to_dict") else self.item
        return {
            "item": item,
            "score": self.score,
            "matched_fields": sorted(self.matched_fields),
            "match_type": self.match_type.value,
        }


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def normalize_status(status: Any) -> Optional[str]:
    """Return a status as a lowercase string, or None when absent."""
    if status is None:
        return None
    return str(_enum_value(status)).lower()
