"""Binary record codec for simpledb.

This module provides element codecs, the bidirectional field cursor, record
schema introspection and record collection encoding/decoding.
"""

from __future__ import annotations

from .cursor import CursorMode, FieldCursor
from .decoder import decode, read_collection, read_record
from .encoder import encode, write_collection, write_record
from .scalars import (
    BLOB,
    BOOL,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    TEXT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    ElementCodec,
    FixedBytesCodec,
)
from .schema import FieldSchema, RecordSchema, RecordStyle, describe_record

__all__ = [
    "encode",
    "decode",
    "write_collection",
    "read_collection",
    "write_record",
    "read_record",
    "CursorMode",
    "FieldCursor",
    "FieldSchema",
    "RecordSchema",
    "RecordStyle",
    "describe_record",
    "ElementCodec",
    "FixedBytesCodec",
    "INT8",
    "UINT8",
    "INT16",
    "UINT16",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    "FLOAT32",
    "FLOAT64",
    "BOOL",
    "TEXT",
    "BLOB",
]
