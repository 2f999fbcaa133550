"""Record collection decoder.

This module reads a record collection back in the same order and format as
it was written. The caller supplies the record type; nothing in the data
identifies it.
"""

from __future__ import annotations

import io
from typing import Any, BinaryIO, List, Optional, TypeVar

from pydantic import ValidationError

from ..exceptions import CorruptDataError, DecodeError, SchemaError
from .cursor import FieldCursor
from .scalars import read_count
from .schema import RecordSchema

T = TypeVar("T")


def read_record(cursor: FieldCursor, record_type: type[T], schema: RecordSchema) -> T:
    """Read one record through a read-mode cursor.

    Args:
        cursor: Read-mode cursor bound to the input channel
        record_type: Record class to build
        schema: Schema of ``record_type``

    Returns:
        Decoded record

    Raises:
        CorruptDataError: If the data ends in the middle of the record
        DecodeError: If decoded values cannot build the record
    """
    if not schema.is_automatic:
        try:
            record = record_type()
        except TypeError as err:
            raise SchemaError(
                f"{record_type.__name__} must be constructible without arguments: {err}"
            ) from err
        record.describe_fields(cursor)  # type: ignore[attr-defined]
        return record

    field_values: dict[str, Any] = {}
    for field_schema in schema.fields:
        try:
            field_values[field_schema.name] = cursor.process(None, field_schema.codec)
        except CorruptDataError as err:
            raise CorruptDataError(f"Field {field_schema.name}: {err}") from err
        except DecodeError as err:
            raise DecodeError(f"Field {field_schema.name}: {err}") from err

    try:
        return record_type.model_validate(field_values)  # type: ignore[attr-defined, no-any-return]
    except ValidationError as err:
        raise DecodeError(f"Failed to construct {record_type.__name__}: {err}") from err


def read_collection(
    source: BinaryIO, record_type: type[T], text_limit: Optional[int] = None
) -> List[T]:
    """Read a record collection from a binary stream.

    Records are decoded one at a time, so a corrupted count fails at end of
    data instead of pre-allocating a huge list.

    Args:
        source: Readable binary stream positioned at the count prefix
        record_type: Record class stored in the stream
        text_limit: Optional maximum byte length for text/blob fields

    Returns:
        The decoded records, in stored order

    Raises:
        SchemaError: If the record type is not archivable
        CorruptDataError: If the stream is truncated
        DecodeError: If decoded values cannot build a record
    """
    schema = RecordSchema.from_type(record_type)

    try:
        count = read_count(source)
    except CorruptDataError as err:
        raise CorruptDataError(f"Missing record count: {err}") from err

    cursor = FieldCursor.reader(source, text_limit=text_limit)
    records: List[T] = []
    for index in range(count):
        try:
            records.append(read_record(cursor, record_type, schema))
        except CorruptDataError as err:
            raise CorruptDataError(f"Record {index} of {count}: {err}") from err
        except DecodeError as err:
            raise DecodeError(f"Record {index} of {count}: {err}") from err

    return records


def decode(record_type: type[T], data: bytes, text_limit: Optional[int] = None) -> List[T]:
    """Decode a record collection from bytes.

    Bytes after the last record are ignored.

    Example:
        >>> decode(Person, encode(people)) == people
        True
    """
    return read_collection(io.BytesIO(data), record_type, text_limit)
