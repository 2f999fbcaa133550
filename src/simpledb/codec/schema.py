"""Schema introspection for record types.

This module works out how a record type satisfies the Archivable capability:
either it describes its own fields through ``describe_fields(cursor)``, or it
is a pydantic model whose declared fields are enumerated automatically, each
mapped to an element codec.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from . import scalars
from .scalars import ElementCodec

# Codecs used for fields annotated with a bare Python type
DEFAULT_CODECS: Dict[type, ElementCodec] = {
    bool: scalars.BOOL,
    int: scalars.INT64,
    float: scalars.FLOAT64,
    str: scalars.TEXT,
    bytes: scalars.BLOB,
}


class RecordStyle(enum.Enum):
    """How a record type enumerates its fields."""

    MANUAL = "manual"  # describe_fields(cursor)
    AUTOMATIC = "automatic"  # pydantic model fields


@dataclass(frozen=True)
class FieldSchema:
    """Layout information for a single field.

    Attributes:
        name: Field name
        python_type: Python type annotation (after unwrapping Annotated)
        codec: Element codec used to encode the field
        enum_type: IntEnum class if the field is an integer enum
    """

    name: str
    python_type: Type[Any]
    codec: ElementCodec
    enum_type: Optional[Type[enum.IntEnum]] = None

    @property
    def width(self) -> Optional[int]:
        """Encoded width in bytes, None for variable-length fields."""
        return self.codec.width


class RecordSchema:
    """Layout information for an entire record type.

    Example:
        >>> schema = RecordSchema.from_type(Person)
        >>> for field in schema.fields:
        ...     print(f"{field.name}: {field.codec!r}")
    """

    def __init__(self, record_type: type) -> None:
        """Initialize schema from a record type.

        Args:
            record_type: Pydantic model class or class defining describe_fields()

        Raises:
            SchemaError: If the type satisfies neither or both styles
        """
        self.record_type = record_type
        self.fields: List[FieldSchema] = []
        self.style = self._detect_style()
        if self.style is RecordStyle.AUTOMATIC:
            self._introspect()

    @classmethod
    def from_type(cls, record_type: type) -> RecordSchema:
        """Create a schema from a record type.

        Args:
            record_type: Pydantic model class or class defining describe_fields()

        Returns:
            RecordSchema instance
        """
        return cls(record_type)

    @property
    def is_automatic(self) -> bool:
        return self.style is RecordStyle.AUTOMATIC

    def _detect_style(self) -> RecordStyle:
        record_type = self.record_type
        if not isinstance(record_type, type):
            raise SchemaError(f"Expected a record class, got {record_type!r}")

        is_model = issubclass(record_type, BaseModel)
        has_describe = callable(getattr(record_type, "describe_fields", None))

        if is_model and has_describe:
            raise SchemaError(
                f"{record_type.__name__} defines describe_fields() and model fields; "
                f"use one way of describing the layout, not both"
            )
        if is_model:
            return RecordStyle.AUTOMATIC
        if has_describe:
            return RecordStyle.MANUAL
        raise SchemaError(
            f"{record_type.__name__} is not archivable: subclass BaseRecord or "
            f"define describe_fields(cursor)"
        )

    def _introspect(self) -> None:
        """Introspect the model and populate field schemas."""
        model_fields = self.record_type.model_fields

        for field_name, field_info in model_fields.items():
            self.fields.append(self._extract_field_schema(field_name, field_info))

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        """Extract layout information from a Pydantic FieldInfo.

        Args:
            name: Field name
            field_info: Pydantic FieldInfo object

        Returns:
            FieldSchema with the codec for the field
        """
        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        if get_origin(annotation) is not None or get_args(annotation):
            raise SchemaError(
                f"Field {name}: generic and Optional types are not supported, "
                f"got {annotation!r}"
            )

        # Explicit codec from Annotated metadata wins over the default mapping
        codec: Optional[ElementCodec] = None
        min_length = None
        max_length = None
        for constraint in field_info.metadata:
            if isinstance(constraint, ElementCodec):
                codec = constraint
            if hasattr(constraint, "min_length"):
                min_length = constraint.min_length
            if hasattr(constraint, "max_length"):
                max_length = constraint.max_length

        enum_type = None
        if isinstance(annotation, type) and issubclass(annotation, enum.IntEnum):
            enum_type = annotation
            if codec is None:
                codec = scalars.INT64

        if codec is None and annotation is bytes and max_length is not None:
            if min_length != max_length:
                raise SchemaError(
                    f"Field {name}: bytes length constraints must be fixed "
                    f"(min_length == max_length), or drop them for a blob"
                )
            codec = scalars.FixedBytesCodec(max_length)

        if codec is None:
            codec = DEFAULT_CODECS.get(annotation)  # type: ignore[arg-type]

        if codec is None:
            raise SchemaError(
                f"Field {name}: unsupported type {annotation!r}. "
                f"Supported: int, float, bool, str, bytes, IntEnum."
            )

        base_type = int if enum_type is not None else annotation
        if not _compatible(base_type, codec.python_type):
            raise SchemaError(
                f"Field {name}: codec {codec!r} cannot store {annotation!r} values"
            )

        return FieldSchema(name=name, python_type=annotation, codec=codec, enum_type=enum_type)

    def fixed_width(self) -> Optional[int]:
        """Encoded size of every record, or None if any field is variable-length.

        Raises:
            SchemaError: For manual records, whose layout is only known by running them
        """
        if not self.is_automatic:
            raise SchemaError(
                f"{self.record_type.__name__} describes its fields by hand; "
                f"its layout cannot be computed statically"
            )
        total = 0
        for field in self.fields:
            if field.width is None:
                return None
            total += field.width
        return total


def _compatible(annotation: Any, expected: type) -> bool:
    if annotation is expected:
        return True
    # int values are valid for float codecs; bool is an int subclass but is
    # stored through the bool codec only
    return expected is float and annotation is int


def describe_record(record_type: type) -> RecordSchema:
    """Describe how ``record_type`` is laid out on disk."""
    return RecordSchema.from_type(record_type)

