"""Bidirectional field cursor.

A FieldCursor is bound to either a write sink or a read source. Record types
describe their layout once, in a single ``describe_fields(cursor)`` method that
calls ``cursor.process`` for every field in a fixed order; the same method
body is then used for both saving and loading.

Example:
    >>> class Point:
    ...     def __init__(self) -> None:
    ...         self.x = 0
    ...         self.label = ""
    ...
    ...     def describe_fields(self, cursor: FieldCursor) -> None:
    ...         self.x = cursor.process(self.x, INT32)
    ...         self.label = cursor.process(self.label, TEXT)
"""

from __future__ import annotations

import enum
from typing import Any, BinaryIO

from .scalars import ElementCodec, LengthPrefixedCodec


class CursorMode(enum.Enum):
    """Direction of a FieldCursor."""

    READ = "read"
    WRITE = "write"


class FieldCursor:
    """Mode-bound access to the fields of one record stream.

    The mode is fixed at construction. Use :meth:`writer` or :meth:`reader`
    rather than calling the constructor directly.

    Attributes:
        channel: The binary stream being written to or read from
        text_limit: Optional maximum byte length accepted for text/blob reads
    """

    __slots__ = ("_mode", "channel", "text_limit")

    def __init__(
        self, mode: CursorMode, channel: BinaryIO, text_limit: int | None = None
    ) -> None:
        self._mode = mode
        self.channel = channel
        self.text_limit = text_limit

    @classmethod
    def writer(cls, sink: BinaryIO) -> FieldCursor:
        """Create a cursor that encodes processed fields into ``sink``."""
        return cls(CursorMode.WRITE, sink)

    @classmethod
    def reader(cls, source: BinaryIO, text_limit: int | None = None) -> FieldCursor:
        """Create a cursor that decodes processed fields from ``source``."""
        return cls(CursorMode.READ, source, text_limit)

    @property
    def mode(self) -> CursorMode:
        return self._mode

    @property
    def is_reading(self) -> bool:
        return self._mode is CursorMode.READ

    @property
    def is_writing(self) -> bool:
        return self._mode is CursorMode.WRITE

    def process(self, value: Any, codec: ElementCodec) -> Any:
        """Write or read one field value, depending on the cursor mode.

        In WRITE mode ``value`` is encoded with ``codec`` and returned
        unchanged. In READ mode ``value`` is ignored and a freshly decoded
        value is returned; the caller assigns it back to the field.

        Args:
            value: Current field value
            codec: Element codec of the field

        Returns:
            The value the field should hold after this call

        Raises:
            EncodeError: If value cannot be encoded (WRITE mode)
            CorruptDataError: If the source runs out of data (READ mode)
        """
        if self._mode is CursorMode.WRITE:
            codec.write(self.channel, value)
            return value

        if isinstance(codec, LengthPrefixedCodec):
            return codec.read(self.channel, max_length=self.text_limit)
        return codec.read(self.channel)

    def process_field(self, record: Any, name: str, codec: ElementCodec) -> None:
        """Process the attribute ``name`` of ``record`` in place."""
        value = self.process(getattr(record, name), codec)
        if self._mode is CursorMode.READ:
            setattr(record, name, value)

    def __repr__(self) -> str:
        return f"FieldCursor(mode={self._mode.value}, channel={self.channel!r})"
