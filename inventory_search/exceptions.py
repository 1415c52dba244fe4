"""Exceptions raised by Inventory Search surfaces."""


class InventorySearchError(Exception):
    """Base inventory search error."""
    pass


class CatalogError(InventorySearchError):
    """Catalog file could not be read or parsed."""
    pass
