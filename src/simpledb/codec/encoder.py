"""Record collection encoder.

This module writes an ordered sequence of records as
``[count: u64][record_0][record_1]...``, each record's fields in their
declared order.
"""

from __future__ import annotations

import io
from typing import Any, BinaryIO, Optional, Sequence

from ..exceptions import EncodeError
from .cursor import FieldCursor
from .scalars import write_count
from .schema import RecordSchema


def write_record(cursor: FieldCursor, record: Any, schema: RecordSchema) -> None:
    """Write the fields of one record through a write-mode cursor.

    Args:
        cursor: Write-mode cursor bound to the output channel
        record: Record instance
        schema: Schema of the record's type
    """
    if schema.is_automatic:
        for field_schema in schema.fields:
            try:
                cursor.process_field(record, field_schema.name, field_schema.codec)
            except EncodeError as err:
                raise EncodeError(f"Field {field_schema.name}: {err}") from err
    else:
        record.describe_fields(cursor)


def write_collection(
    sink: BinaryIO, records: Sequence[Any], record_type: Optional[type] = None
) -> None:
    """Write a record collection to a binary stream.

    Args:
        sink: Writable binary stream
        records: Records to write, all of one type
        record_type: Expected record type; defaults to the type of the first record

    Raises:
        SchemaError: If the record type is not archivable
        EncodeError: If records mix types or a field value cannot be encoded
    """
    if record_type is None and records:
        record_type = type(records[0])

    schema = RecordSchema.from_type(record_type) if record_type is not None else None

    # Nothing reaches the sink unless the whole collection is one type
    for index, record in enumerate(records):
        if type(record) is not record_type:
            raise EncodeError(
                f"Record {index}: expected {record_type.__name__}, "  # type: ignore[union-attr]
                f"got {type(record).__name__}"
            )

    write_count(sink, len(records))

    cursor = FieldCursor.writer(sink)
    for index, record in enumerate(records):
        try:
            write_record(cursor, record, schema)  # type: ignore[arg-type]
        except EncodeError as err:
            raise EncodeError(f"Record {index}: {err}") from err


def encode(records: Sequence[Any], record_type: Optional[type] = None) -> bytes:
    """Encode a record collection to bytes.

    Args:
        records: Records to encode, all of one type
        record_type: Expected record type; defaults to the type of the first record

    Returns:
        The encoded collection, exactly as ``save`` would write it to a file

    Example:
        >>> data = encode([Person(id=1, name="a"), Person(id=2, name="bb")])
        >>> len(data)
        35
    """
    buffer = io.BytesIO()
    write_collection(buffer, records, record_type)
    return buffer.getvalue()
