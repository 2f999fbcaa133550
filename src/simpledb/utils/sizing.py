"""Record size calculation utilities.

This module provides functions to calculate the encoded size of records and
collections without writing them anywhere.
"""

from __future__ import annotations

import io
from typing import Any, Sequence

from pydantic import BaseModel

from ..codec.cursor import FieldCursor
from ..codec.encoder import write_record
from ..codec.scalars import COUNT_WIDTH
from ..codec.schema import RecordSchema


def record_size(record: Any) -> int:
    """Calculate the encoded size of one record in bytes.

    Args:
        record: Record instance (automatic or manual style)

    Returns:
        Number of bytes the record occupies in a collection

    Raises:
        SchemaError: If the record type is not archivable
        EncodeError: If a field value cannot be encoded

    Example:
        >>> record_size(Person(id=1, name="bb"))
        14  # 4 bytes id + 8 bytes length + 2 bytes text
    """
    schema = RecordSchema.from_type(type(record))

    if schema.is_automatic:
        return sum(
            field.codec.encoded_size(getattr(record, field.name)) for field in schema.fields
        )

    # Manual layouts are only known by running them
    buffer = io.BytesIO()
    write_record(FieldCursor.writer(buffer), record, schema)
    return len(buffer.getvalue())


def collection_size(records: Sequence[Any]) -> int:
    """Calculate the encoded size of a record collection in bytes.

    Example:
        >>> collection_size([Person(id=1, name="a"), Person(id=2, name="bb")])
        35  # 8 bytes count + 13 + 14
    """
    return COUNT_WIDTH + sum(record_size(record) for record in records)


def fixed_record_size(record_class: type[BaseModel]) -> int | None:
    """Size of every record of ``record_class``, or None if it has variable-length fields.

    Raises:
        SchemaError: If ``record_class`` describes its fields by hand
    """
    return RecordSchema.from_type(record_class).fixed_width()


def field_sizes(record_or_class: BaseModel | type[BaseModel]) -> dict[str, int | None]:
    """Get the size in bytes of each field of a record.

    For a record instance, variable-length fields report the size of their
    current value including the length prefix. For a class they report None.

    Example:
        >>> field_sizes(Person)
        {'id': 4, 'name': None}
        >>> field_sizes(Person(id=1, name="bb"))
        {'id': 4, 'name': 10}
    """
    if isinstance(record_or_class, BaseModel):
        schema = RecordSchema.from_type(type(record_or_class))
        return {
            field.name: field.codec.encoded_size(getattr(record_or_class, field.name))
            for field in schema.fields
        }

    schema = RecordSchema.from_type(record_or_class)
    return {field.name: field.width for field in schema.fields}
