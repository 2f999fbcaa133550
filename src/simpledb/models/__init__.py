"""Record modeling for simpledb.

This module provides the BaseRecord class, the Archivable protocol and field
aliases for declaring fixed-width and variable-length fields.
"""

from __future__ import annotations

from .base import Archivable, BaseRecord
from .fields import (
    Blob,
    Bool,
    FixedBytes,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Text,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    "Archivable",
    "BaseRecord",
    "Blob",
    "Bool",
    "FixedBytes",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Text",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
