"""Monitoring package for Inventory Search."""

from .metrics import MetricsManager

__all__ = ["MetricsManager"]
