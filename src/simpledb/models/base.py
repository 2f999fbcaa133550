"""Record base class and the Archivable capability.

A record type can be stored by simpledb in exactly one of two ways:

- Subclass :class:`BaseRecord` and declare typed pydantic fields. The field
  declaration order is the on-disk order and every field is encoded
  automatically.
- Write a plain class that can be constructed without arguments and defines
  ``describe_fields(self, cursor)``, calling ``cursor.process`` once per field
  in a fixed order (the :class:`Archivable` protocol).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..codec.cursor import FieldCursor


class BaseRecord(BaseModel):
    """Base class for automatically described records.

    Fields should use the annotated aliases from :mod:`simpledb.models.fields`
    (``Int32``, ``Text``, ...) to pick a fixed width. Plain ``int``, ``float``,
    ``bool``, ``str`` and ``bytes`` annotations map to 64-bit integers, 64-bit
    floats, one-byte booleans, UTF-8 text and length-prefixed blobs.

    Example:
        >>> class Person(BaseRecord):
        ...     id: Int32
        ...     name: Text
        ...     score: Float32 = 0.0
        >>>
        >>> save([Person(id=1, name="a")], "people.bin")
        >>> load(Person, "people.bin")
        [Person(id=1, name='a', score=0.0)]
    """

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        # Every stored value must have a declared slot in the layout
        extra="forbid",
    )


@runtime_checkable
class Archivable(Protocol):
    """Hand-written record layout.

    Implementations must be constructible without arguments; ``load`` builds a
    default instance for every stored record and fills it through a
    read-mode cursor.
    """

    def describe_fields(self, cursor: FieldCursor) -> None:
        ...
