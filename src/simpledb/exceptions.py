"""Exception hierarchy for simpledb.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SimpleDBError for easy catching of any simpledb-specific error.
"""

from __future__ import annotations

from pathlib import Path


class SimpleDBError(Exception):
    """Base exception for all simpledb errors."""

    pass


class SchemaError(SimpleDBError):
    """Raised when a record type cannot be described as a field layout.

    Examples:
        - Type defines neither describe_fields() nor BaseRecord fields
        - Type defines both describe_fields() and BaseRecord fields
        - Unsupported field type (no element codec for it)
    """

    pass


class EncodeError(SimpleDBError):
    """Raised when encoding a record fails.

    Examples:
        - Integer does not fit in the field's fixed width
        - Field type mismatch (e.g. str given to a bytes field)
        - Fixed-length bytes field of the wrong length
        - Collection mixes record types
    """

    pass


class DecodeError(SimpleDBError):
    """Raised when decoded field values cannot be turned back into a record."""

    pass


class CorruptDataError(DecodeError):
    """Raised when the input does not hold the data its layout promises.

    Examples:
        - Data ends in the middle of a count, field or text payload
        - Text length prefix exceeds the configured limit
    """

    pass


class StoreError(SimpleDBError):
    """Raised for file-level failures of a record store."""

    pass


class OpenFailedError(StoreError):
    """Raised when the target file cannot be opened for writing."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not open {self.path} for writing: {reason}")
