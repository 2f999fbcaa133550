"""Element codecs: encoding and decoding of single field values.

Fixed-width values are written as their raw bit pattern using the standard
``struct`` sizes in native byte order. Variable-length values (text and blobs)
are written as an unsigned 64-bit byte length followed by the raw bytes, with
no terminator and no escaping.

Example:
    >>> sink = io.BytesIO()
    >>> INT32.write(sink, 7)
    >>> TEXT.write(sink, "abc")
    >>> sink.getvalue()  # 4 bytes + 8 byte length + 3 bytes
"""

from __future__ import annotations

import struct
from typing import Any, BinaryIO

from ..exceptions import CorruptDataError, DecodeError, EncodeError

# Native byte order, standard sizes (no alignment padding)
BYTE_ORDER = "="

COUNT_WIDTH = 8
_COUNT = struct.Struct(BYTE_ORDER + "Q")

# Upper bound for a single read() call, so a corrupted length prefix cannot
# force one huge allocation before end of data is noticed.
READ_CHUNK_SIZE = 64 * 1024


def read_exact(source: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``source``.

    Args:
        source: Binary stream to read from
        size: Number of bytes required

    Returns:
        The bytes read

    Raises:
        CorruptDataError: If the stream ends before ``size`` bytes were read
    """
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = source.read(min(remaining, READ_CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)

    if remaining:
        raise CorruptDataError(
            f"Truncated data: expected {size} bytes, got {size - remaining}"
        )
    return b"".join(chunks)


def write_count(sink: BinaryIO, value: int) -> None:
    """Write an unsigned 64-bit count or length prefix."""
    try:
        sink.write(_COUNT.pack(value))
    except struct.error as err:
        raise EncodeError(f"Count {value} does not fit in an unsigned 64-bit prefix") from err


def read_count(source: BinaryIO) -> int:
    """Read an unsigned 64-bit count or length prefix."""
    (value,) = _COUNT.unpack(read_exact(source, COUNT_WIDTH))
    return int(value)


class ElementCodec:
    """Base class for the codec of one field value.

    Attributes:
        name: Short codec name used in layouts and error messages
        python_type: Python type of decoded values
        width: Encoded width in bytes, or None for variable-length values
    """

    name: str = "element"
    python_type: type = object
    width: int | None = None

    @property
    def is_fixed(self) -> bool:
        """Whether every value of this codec has the same encoded width."""
        return self.width is not None

    def write(self, sink: BinaryIO, value: Any) -> None:
        raise NotImplementedError

    def read(self, source: BinaryIO, max_length: int | None = None) -> Any:
        raise NotImplementedError

    def encoded_size(self, value: Any) -> int:
        """Number of bytes ``write`` produces for ``value``."""
        if self.width is None:
            raise NotImplementedError
        return self.width

    def __repr__(self) -> str:
        return self.name.upper()


class ScalarCodec(ElementCodec):
    """Fixed-width numeric or boolean value packed with ``struct``.

    Args:
        name: Codec name (e.g. "int32")
        fmt: Single ``struct`` format character
        python_type: Accepted Python type (int, float or bool)
    """

    def __init__(self, name: str, fmt: str, python_type: type) -> None:
        self.name = name
        self.python_type = python_type
        self._struct = struct.Struct(BYTE_ORDER + fmt)
        self.width = self._struct.size

    def _check_type(self, value: Any) -> None:
        if self.python_type is bool:
            ok = isinstance(value, bool)
        elif self.python_type is float:
            ok = isinstance(value, (int, float))
        else:
            ok = isinstance(value, int)

        if not ok:
            raise EncodeError(
                f"{self.name}: expected {self.python_type.__name__}, got {type(value).__name__}"
            )

    def write(self, sink: BinaryIO, value: Any) -> None:
        """Append the raw ``width``-byte pattern of ``value``.

        Raises:
            EncodeError: If value has the wrong type or does not fit the width
        """
        self._check_type(value)
        try:
            packed = self._struct.pack(value)
        except (struct.error, OverflowError) as err:
            raise EncodeError(f"{self.name}: value {value!r} out of range: {err}") from err
        sink.write(packed)

    def read(self, source: BinaryIO, max_length: int | None = None) -> Any:
        """Read exactly ``width`` bytes and unpack them."""
        (value,) = self._struct.unpack(read_exact(source, self._struct.size))
        return value


class FixedBytesCodec(ElementCodec):
    """Raw bytes of a fixed length, copied as-is."""

    python_type = bytes

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self.width = length
        self.name = f"bytes[{length}]"

    def write(self, sink: BinaryIO, value: Any) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise EncodeError(f"{self.name}: expected bytes, got {type(value).__name__}")
        if len(value) != self.width:
            raise EncodeError(
                f"{self.name}: expected {self.width} bytes, got {len(value)} bytes"
            )
        sink.write(bytes(value))

    def read(self, source: BinaryIO, max_length: int | None = None) -> bytes:
        return read_exact(source, self.width or 0)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixedBytesCodec) and other.width == self.width

    def __hash__(self) -> int:
        return hash((FixedBytesCodec, self.width))

    def __repr__(self) -> str:
        return f"FixedBytesCodec({self.width})"


class LengthPrefixedCodec(ElementCodec):
    """Variable-length value: u64 byte length, then that many raw bytes.

    Subclasses convert between the Python value and its payload bytes.
    """

    def to_payload(self, value: Any) -> bytes:
        raise NotImplementedError

    def from_payload(self, payload: bytes) -> Any:
        raise NotImplementedError

    def write(self, sink: BinaryIO, value: Any) -> None:
        payload = self.to_payload(value)
        write_count(sink, len(payload))
        sink.write(payload)

    def read(self, source: BinaryIO, max_length: int | None = None) -> Any:
        """Read the length prefix, then the payload.

        Args:
            source: Binary stream to read from
            max_length: Reject length prefixes above this many bytes

        Raises:
            CorruptDataError: If the payload is truncated or too long
        """
        length = read_count(source)
        if max_length is not None and length > max_length:
            raise CorruptDataError(
                f"{self.name}: length {length} exceeds limit of {max_length} bytes"
            )
        return self.from_payload(read_exact(source, length))

    def encoded_size(self, value: Any) -> int:
        return COUNT_WIDTH + len(self.to_payload(value))


class TextCodec(LengthPrefixedCodec):
    """Unicode text stored as UTF-8 bytes."""

    name = "text"
    python_type = str

    def to_payload(self, value: Any) -> bytes:
        if not isinstance(value, str):
            raise EncodeError(f"{self.name}: expected str, got {type(value).__name__}")
        return value.encode("utf-8")

    def from_payload(self, payload: bytes) -> str:
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError(f"{self.name}: invalid UTF-8 encoding: {err}") from err


class BlobCodec(LengthPrefixedCodec):
    """Arbitrary bytes of any length."""

    name = "blob"
    python_type = bytes

    def to_payload(self, value: Any) -> bytes:
        if not isinstance(value, (bytes, bytearray)):
            raise EncodeError(f"{self.name}: expected bytes, got {type(value).__name__}")
        return bytes(value)

    def from_payload(self, payload: bytes) -> bytes:
        return payload


INT8 = ScalarCodec("int8", "b", int)
UINT8 = ScalarCodec("uint8", "B", int)
INT16 = ScalarCodec("int16", "h", int)
UINT16 = ScalarCodec("uint16", "H", int)
INT32 = ScalarCodec("int32", "i", int)
UINT32 = ScalarCodec("uint32", "I", int)
INT64 = ScalarCodec("int64", "q", int)
UINT64 = ScalarCodec("uint64", "Q", int)
FLOAT32 = ScalarCodec("float32", "f", float)
FLOAT64 = ScalarCodec("float64", "d", float)
BOOL = ScalarCodec("bool", "?", bool)
TEXT = TextCodec()
BLOB = BlobCodec()
