"""simpledb: Simple binary record files

A Python library for persisting a homogeneous sequence of typed records to a
single flat binary file and loading it back.

Key Features:
- Pydantic-based record modeling with fixed-width and variable-length fields
- Hand-written layouts through one bidirectional describe_fields(cursor) method
- Length-prefixed record collections: [count][record]...
- Missing files load as empty collections

Quick Start:
    >>> from simpledb import BaseRecord, Int32, Text, load, save
    >>>
    >>> class Person(BaseRecord):
    ...     id: Int32
    ...     name: Text
    >>>
    >>> save([Person(id=1, name="a"), Person(id=2, name="bb")], "people.bin")
    >>> load(Person, "people.bin")
    [Person(id=1, name='a'), Person(id=2, name='bb')]

Hand-written layouts:
    >>> from simpledb import INT32, TEXT, FieldCursor
    >>>
    >>> class Entry:
    ...     def __init__(self) -> None:
    ...         self.id = 0
    ...         self.name = ""
    ...
    ...     def describe_fields(self, cursor: FieldCursor) -> None:
    ...         self.id = cursor.process(self.id, INT32)
    ...         self.name = cursor.process(self.name, TEXT)
"""

from __future__ import annotations

from .codec import (
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
    CursorMode,
    FieldCursor,
    FixedBytesCodec,
    RecordSchema,
    decode,
    describe_record,
    encode,
    read_collection,
    write_collection,
)
from .config import StoreConfig
from .exceptions import (
    CorruptDataError,
    DecodeError,
    EncodeError,
    OpenFailedError,
    SchemaError,
    SimpleDBError,
    StoreError,
)
from .models import (
    Archivable,
    BaseRecord,
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
from .store import RecordStore, load, save
from .utils import collection_size, field_sizes, fixed_record_size, record_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BaseRecord",
    "Archivable",
    "RecordStore",
    "StoreConfig",
    "save",
    "load",
    "encode",
    "decode",
    "write_collection",
    "read_collection",
    # Cursor and schema
    "FieldCursor",
    "CursorMode",
    "RecordSchema",
    "describe_record",
    # Element codecs
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
    "FixedBytesCodec",
    # Field aliases
    "Int8",
    "UInt8",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Float32",
    "Float64",
    "Bool",
    "Text",
    "Blob",
    "FixedBytes",
    # Exceptions
    "SimpleDBError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "CorruptDataError",
    "StoreError",
    "OpenFailedError",
    # Sizing
    "record_size",
    "collection_size",
    "fixed_record_size",
    "field_sizes",
    # Version
    "__version__",
]
