"""File-backed record collections.

RecordStore saves a whole record collection to one file, replacing whatever
the file held before, and loads it back. A missing file is a valid initial
state: loading it gives an empty collection.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, TypeVar

from .codec.decoder import read_collection
from .codec.encoder import encode
from .config import StoreConfig
from .exceptions import OpenFailedError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RecordStore:
    """Saves and loads record collections at a configured path.

    Attributes:
        config: Store configuration (target path, text limit)

    Examples:
        ```python
        from simpledb import BaseRecord, Int32, RecordStore, StoreConfig, Text

        class Person(BaseRecord):
            id: Int32
            name: Text

        store = RecordStore(StoreConfig(path="people.bin"))
        store.save([Person(id=1, name="a"), Person(id=2, name="bb")])

        people = store.load(Person)
        ```
    """

    def __init__(self, config: Optional[StoreConfig] = None) -> None:
        self.config = config if config is not None else StoreConfig()

    @property
    def path(self) -> Path:
        return self.config.path

    def save(self, records: Sequence[Any], record_type: Optional[type] = None) -> None:
        """Replace the file's content with ``records``.

        The collection is encoded completely before the file is opened, so an
        encoding failure leaves any existing file untouched.

        Args:
            records: Records to save, all of one type
            record_type: Expected record type; defaults to the type of the first record

        Raises:
            SchemaError: If the record type is not archivable
            EncodeError: If a field value cannot be encoded
            OpenFailedError: If the file cannot be opened for writing
        """
        data = encode(records, record_type)

        try:
            out_file = open(self.path, "wb")
        except OSError as err:
            raise OpenFailedError(self.path, err.strerror or str(err)) from err

        with out_file:
            out_file.write(data)

        logger.debug("saved %d records (%d bytes) to %s", len(records), len(data), self.path)

    def load(self, record_type: type[T]) -> List[T]:
        """Load the collection stored at the configured path.

        Args:
            record_type: Record class stored in the file

        Returns:
            The stored records in order, or an empty list if the file does not
            exist or cannot be opened

        Raises:
            SchemaError: If the record type is not archivable
            CorruptDataError: If the file is truncated or a text length exceeds
                the configured limit
            DecodeError: If decoded values cannot build a record
        """
        try:
            in_file = open(self.path, "rb")
        except OSError as err:
            logger.debug("no collection at %s (%s), loading empty", self.path, err)
            return []

        with in_file:
            records = read_collection(in_file, record_type, self.config.text_limit)

        logger.debug("loaded %d %s records from %s", len(records), record_type.__name__, self.path)
        return records

    def __repr__(self) -> str:
        return f"RecordStore(path={str(self.path)!r})"


def save(records: Sequence[Any], path: str | Path | None = None) -> None:
    """Save ``records`` to ``path`` (default ``data.bin``).

    See :meth:`RecordStore.save`.
    """
    RecordStore(_config_for(path)).save(records)


def load(record_type: type[T], path: str | Path | None = None) -> List[T]:
    """Load records of ``record_type`` from ``path`` (default ``data.bin``).

    See :meth:`RecordStore.load`.
    """
    return RecordStore(_config_for(path)).load(record_type)


def _config_for(path: str | Path | None) -> StoreConfig:
    if path is None:
        return StoreConfig()
    return StoreConfig(path=Path(path))
