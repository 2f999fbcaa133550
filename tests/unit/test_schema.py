"""Unit tests for record schema introspection."""

from __future__ import annotations

import enum
from typing import Annotated, List, Optional

import pytest

from simpledb import (
    BLOB,
    BOOL,
    FLOAT64,
    INT8,
    INT32,
    INT64,
    TEXT,
    Archivable,
    BaseRecord,
    FieldCursor,
    FixedBytes,
    FixedBytesCodec,
    Float32,
    Int8,
    Int32,
    RecordSchema,
    SchemaError,
    Text,
    UInt16,
    describe_record,
)
from simpledb.codec.schema import RecordStyle


class Color(enum.IntEnum):
    """Test enum."""

    RED = 1
    GREEN = 2


class Person(BaseRecord):
    """Automatic record with sized fields."""

    id: Int32
    name: Text


class Defaults(BaseRecord):
    """Automatic record with bare Python types."""

    count: int
    ratio: float
    flag: bool
    label: str
    payload: bytes


class Sized(BaseRecord):
    """Automatic record with only fixed-width fields."""

    tiny: Int8
    port: UInt16
    level: Float32
    digest: Annotated[bytes, FixedBytes(length=16)]
    color: Color


class Manual:
    """Hand-written record."""

    def __init__(self) -> None:
        self.id = 0

    def describe_fields(self, cursor: FieldCursor) -> None:
        self.id = cursor.process(self.id, INT32)


class TestStyleDetection:
    """Test how record types satisfy the Archivable capability."""

    def test_automatic(self) -> None:
        """Test pydantic records are enumerated automatically."""
        schema = describe_record(Person)
        assert schema.style is RecordStyle.AUTOMATIC
        assert schema.is_automatic

    def test_manual(self) -> None:
        """Test describe_fields() classes are manual."""
        schema = describe_record(Manual)
        assert schema.style is RecordStyle.MANUAL
        assert schema.fields == []
        assert isinstance(Manual(), Archivable)

    def test_both_styles_rejected(self) -> None:
        """Test a type may not provide both layouts."""

        class Both(BaseRecord):
            id: Int32

            def describe_fields(self, cursor: FieldCursor) -> None:
                pass

        with pytest.raises(SchemaError, match="not both"):
            RecordSchema(Both)

    def test_neither_style_rejected(self) -> None:
        """Test plain classes are not archivable."""

        class Plain:
            pass

        with pytest.raises(SchemaError, match="not archivable"):
            RecordSchema(Plain)

    def test_instance_rejected(self) -> None:
        """Test passing an instance instead of a class."""
        with pytest.raises(SchemaError, match="Expected a record class"):
            RecordSchema(Manual())  # type: ignore[arg-type]

    def test_schema_per_call(self) -> None:
        """Test each call builds a fresh schema with the same layout."""
        first = RecordSchema.from_type(Person)
        second = RecordSchema.from_type(Person)

        assert first is not second
        assert [(f.name, f.codec) for f in first.fields] == [
            (f.name, f.codec) for f in second.fields
        ]


class TestFieldCodecs:
    """Test field to codec mapping."""

    def test_declared_order(self) -> None:
        """Test fields keep their declaration order."""
        schema = describe_record(Person)
        assert [f.name for f in schema.fields] == ["id", "name"]
        assert [f.codec for f in schema.fields] == [INT32, TEXT]

    def test_default_codecs(self) -> None:
        """Test bare Python types map to default codecs."""
        schema = describe_record(Defaults)
        assert [f.codec for f in schema.fields] == [INT64, FLOAT64, BOOL, TEXT, BLOB]

    def test_annotated_codecs(self) -> None:
        """Test annotated aliases, fixed bytes and IntEnum."""
        schema = describe_record(Sized)
        codecs = {f.name: f.codec for f in schema.fields}

        assert codecs["tiny"] is INT8
        assert codecs["port"].name == "uint16"
        assert codecs["level"].name == "float32"
        assert codecs["digest"] == FixedBytesCodec(16)
        assert codecs["color"] is INT64
        assert schema.fields[-1].enum_type is Color

    def test_fixed_width(self) -> None:
        """Test fixed record widths."""
        assert describe_record(Sized).fixed_width() == 1 + 2 + 4 + 16 + 8
        assert describe_record(Person).fixed_width() is None

    def test_fixed_width_manual(self) -> None:
        """Test manual layouts cannot be sized statically."""
        with pytest.raises(SchemaError, match="by hand"):
            describe_record(Manual).fixed_width()

    def test_unsupported_type(self) -> None:
        """Test unsupported annotations."""

        class Listy(BaseRecord):
            values: List[int]

        with pytest.raises(SchemaError, match="not supported"):
            RecordSchema(Listy)

    def test_optional_rejected(self) -> None:
        """Test Optional fields have no layout."""

        class Maybe(BaseRecord):
            value: Optional[int] = None

        with pytest.raises(SchemaError, match="not supported"):
            RecordSchema(Maybe)

    def test_codec_type_mismatch(self) -> None:
        """Test a codec that cannot store the annotated type."""

        class Mismatch(BaseRecord):
            name: Annotated[str, INT32]

        with pytest.raises(SchemaError, match="cannot store"):
            RecordSchema(Mismatch)

    def test_variable_bytes_constraints(self) -> None:
        """Test bytes with a length range are rejected."""
        from pydantic import Field

        class Ranged(BaseRecord):
            data: bytes = Field(min_length=1, max_length=4)

        with pytest.raises(SchemaError, match="must be fixed"):
            RecordSchema(Ranged)
