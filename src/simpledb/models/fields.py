"""Field type aliases for BaseRecord models.

Each alias attaches an element codec to a Python type with ``Annotated`` and,
for integers, the range that fits the codec's width. Pydantic enforces the
range when a record is built, so out-of-range values are rejected early
rather than at save time. ``Float32`` values are narrowed to single
precision on validation, so a record holds exactly what it stores.

Example:
    >>> class Sample(BaseRecord):
    ...     sensor: UInt16
    ...     reading: Float32
    ...     note: Text
    ...     digest: Annotated[bytes, FixedBytes(length=16)]
"""

from __future__ import annotations

import struct
from typing import Annotated, Any, cast

from pydantic import AfterValidator, Field
from pydantic.fields import FieldInfo

from ..codec import scalars

_FLOAT32 = struct.Struct(scalars.BYTE_ORDER + "f")


def _int_range(bits: int, signed: bool) -> FieldInfo:
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    return cast(FieldInfo, Field(ge=low, le=high))


def _narrow_float32(value: float) -> float:
    # Keep exactly the value a 4-byte float field stores
    try:
        (narrowed,) = _FLOAT32.unpack(_FLOAT32.pack(value))
    except (struct.error, OverflowError) as err:
        raise ValueError(f"{value!r} is out of range for a 32-bit float") from err
    return float(narrowed)


Int8 = Annotated[int, _int_range(8, True), scalars.INT8]
UInt8 = Annotated[int, _int_range(8, False), scalars.UINT8]
Int16 = Annotated[int, _int_range(16, True), scalars.INT16]
UInt16 = Annotated[int, _int_range(16, False), scalars.UINT16]
Int32 = Annotated[int, _int_range(32, True), scalars.INT32]
UInt32 = Annotated[int, _int_range(32, False), scalars.UINT32]
Int64 = Annotated[int, _int_range(64, True), scalars.INT64]
UInt64 = Annotated[int, _int_range(64, False), scalars.UINT64]

Float32 = Annotated[float, AfterValidator(_narrow_float32), scalars.FLOAT32]
Float64 = Annotated[float, scalars.FLOAT64]
Bool = Annotated[bool, scalars.BOOL]

Text = Annotated[str, scalars.TEXT]
Blob = Annotated[bytes, scalars.BLOB]


def FixedBytes(*, length: int, **kwargs: Any) -> FieldInfo:
    """Create a fixed-length bytes field.

    The value is stored as exactly ``length`` raw bytes with no length prefix.

    Args:
        length: Exact length in bytes
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Message(BaseRecord):
        ...     digest: Annotated[bytes, FixedBytes(length=16)]
    """
    return cast(FieldInfo, Field(min_length=length, max_length=length, **kwargs))
