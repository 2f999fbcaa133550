"""Unit tests for element codecs."""

from __future__ import annotations

import io
import struct

import pytest

from simpledb.codec.scalars import (
    BLOB,
    BOOL,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    READ_CHUNK_SIZE,
    TEXT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FixedBytesCodec,
    read_count,
    read_exact,
    write_count,
)
from simpledb.exceptions import CorruptDataError, DecodeError, EncodeError


def encoded(codec, value) -> bytes:  # type: ignore[no-untyped-def]
    sink = io.BytesIO()
    codec.write(sink, value)
    return sink.getvalue()


class TestFixedWidth:
    """Test fixed-width scalar codecs."""

    @pytest.mark.parametrize(
        "codec,width",
        [
            (INT8, 1),
            (UINT8, 1),
            (INT16, 2),
            (UINT16, 2),
            (INT32, 4),
            (UINT32, 4),
            (INT64, 8),
            (UINT64, 8),
            (FLOAT32, 4),
            (FLOAT64, 8),
            (BOOL, 1),
        ],
    )
    def test_widths(self, codec, width: int) -> None:  # type: ignore[no-untyped-def]
        """Test each codec reports and writes its standard width."""
        assert codec.width == width
        assert codec.is_fixed
        assert len(encoded(codec, True if codec is BOOL else 1)) == width

    def test_raw_bit_pattern(self) -> None:
        """Test values are written as their native bit pattern."""
        assert encoded(INT32, -2) == struct.pack("=i", -2)
        assert encoded(UINT16, 0xBEEF) == struct.pack("=H", 0xBEEF)
        assert encoded(FLOAT64, 1.25) == struct.pack("=d", 1.25)
        assert encoded(BOOL, True) == b"\x01"

    def test_read_back(self) -> None:
        """Test reading consumes exactly the codec width."""
        source = io.BytesIO(struct.pack("=iq", 7, -9) + b"rest")

        assert INT32.read(source) == 7
        assert INT64.read(source) == -9
        assert source.read() == b"rest"

    def test_out_of_range(self) -> None:
        """Test integers that do not fit the width are rejected."""
        with pytest.raises(EncodeError, match="out of range"):
            encoded(INT8, 128)
        with pytest.raises(EncodeError, match="out of range"):
            encoded(UINT32, -1)

    def test_wrong_type(self) -> None:
        """Test values of the wrong Python type are rejected."""
        with pytest.raises(EncodeError, match="expected int"):
            encoded(INT32, "1")
        with pytest.raises(EncodeError, match="expected bool"):
            encoded(BOOL, 1)

    def test_float_accepts_int(self) -> None:
        """Test int values are stored by float codecs."""
        assert FLOAT32.read(io.BytesIO(encoded(FLOAT32, 3))) == 3.0

    def test_truncated(self) -> None:
        """Test short reads raise CorruptDataError."""
        with pytest.raises(CorruptDataError, match="expected 4 bytes, got 2"):
            INT32.read(io.BytesIO(b"\x01\x02"))


class TestFixedBytes:
    """Test fixed-length bytes codec."""

    def test_copied_as_is(self) -> None:
        """Test the payload is written without a prefix."""
        codec = FixedBytesCodec(4)
        assert encoded(codec, b"\x00\x01\x02\x03") == b"\x00\x01\x02\x03"
        assert codec.read(io.BytesIO(b"abcdef")) == b"abcd"

    def test_wrong_length(self) -> None:
        """Test bytes length mismatch."""
        with pytest.raises(EncodeError, match="expected 4 bytes, got 2 bytes"):
            encoded(FixedBytesCodec(4), b"\x01\x02")

    def test_equality(self) -> None:
        """Test codecs of the same length compare equal."""
        assert FixedBytesCodec(8) == FixedBytesCodec(8)
        assert FixedBytesCodec(8) != FixedBytesCodec(4)

    def test_negative_length(self) -> None:
        """Test negative lengths are invalid."""
        with pytest.raises(ValueError):
            FixedBytesCodec(-1)


class TestText:
    """Test length-prefixed text and blob codecs."""

    def test_layout(self) -> None:
        """Test u64 byte length followed by the raw bytes."""
        assert encoded(TEXT, "bb") == struct.pack("=Q", 2) + b"bb"

    def test_empty(self) -> None:
        """Test empty text is just a zero length."""
        data = encoded(TEXT, "")
        assert data == struct.pack("=Q", 0)
        assert TEXT.read(io.BytesIO(data)) == ""

    def test_length_is_bytes(self) -> None:
        """Test the prefix counts UTF-8 bytes, not characters."""
        data = encoded(TEXT, "żółw")
        assert read_count(io.BytesIO(data)) == len("żółw".encode("utf-8"))
        assert TEXT.read(io.BytesIO(data)) == "żółw"

    def test_no_terminator_or_escaping(self) -> None:
        """Test embedded NUL bytes survive as-is."""
        data = encoded(BLOB, b"a\x00b")
        assert data.endswith(b"a\x00b")
        assert BLOB.read(io.BytesIO(data)) == b"a\x00b"

    def test_encoded_size(self) -> None:
        """Test encoded_size includes the prefix."""
        assert TEXT.encoded_size("abc") == 11
        assert BLOB.encoded_size(b"") == 8

    def test_invalid_utf8(self) -> None:
        """Test undecodable text payloads."""
        data = struct.pack("=Q", 1) + b"\xff"
        with pytest.raises(DecodeError, match="invalid UTF-8"):
            TEXT.read(io.BytesIO(data))

    def test_truncated_payload(self) -> None:
        """Test a length prefix longer than the remaining data."""
        data = struct.pack("=Q", 10) + b"abc"
        with pytest.raises(CorruptDataError, match="expected 10 bytes, got 3"):
            TEXT.read(io.BytesIO(data))

    def test_huge_length(self) -> None:
        """Test a corrupted huge length fails at end of data."""
        data = struct.pack("=Q", 2**62) + b"abc"
        with pytest.raises(CorruptDataError):
            BLOB.read(io.BytesIO(data))

    def test_max_length(self) -> None:
        """Test the optional length limit."""
        data = encoded(TEXT, "abcdef")
        with pytest.raises(CorruptDataError, match="exceeds limit of 5 bytes"):
            TEXT.read(io.BytesIO(data), max_length=5)
        assert TEXT.read(io.BytesIO(data), max_length=6) == "abcdef"

    def test_wrong_type(self) -> None:
        """Test text and blob type checks."""
        with pytest.raises(EncodeError, match="expected str"):
            encoded(TEXT, b"bytes")
        with pytest.raises(EncodeError, match="expected bytes"):
            encoded(BLOB, "text")


class TestPrimitives:
    """Test count prefix and exact reads."""

    def test_count_roundtrip(self) -> None:
        """Test u64 count prefix."""
        sink = io.BytesIO()
        write_count(sink, 2**64 - 1)
        assert len(sink.getvalue()) == 8
        assert read_count(io.BytesIO(sink.getvalue())) == 2**64 - 1

    def test_negative_count(self) -> None:
        """Test counts must be unsigned."""
        with pytest.raises(EncodeError):
            write_count(io.BytesIO(), -1)

    def test_read_exact_across_chunks(self) -> None:
        """Test reads larger than one chunk."""
        payload = bytes(range(256)) * (READ_CHUNK_SIZE // 256 * 2 + 1)
        assert read_exact(io.BytesIO(payload), len(payload)) == payload

    def test_read_exact_zero(self) -> None:
        """Test zero-length reads consume nothing."""
        source = io.BytesIO(b"x")
        assert read_exact(source, 0) == b""
        assert source.read() == b"x"
