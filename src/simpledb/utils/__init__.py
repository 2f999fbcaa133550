"""Utility functions for simpledb.

This module provides size calculation for records and collections.
"""

from __future__ import annotations

from .sizing import collection_size, field_sizes, fixed_record_size, record_size

__all__ = [
    "collection_size",
    "field_sizes",
    "fixed_record_size",
    "record_size",
]
