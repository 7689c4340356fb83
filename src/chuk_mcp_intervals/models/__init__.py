"""
Pydantic models for the interval catalog.

This module provides:
- NamedInterval: A familiar name for an interval in shorthand
"""

from chuk_mcp_intervals.models.catalog import NamedInterval

__all__ = [
    "NamedInterval",
]
