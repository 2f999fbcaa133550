"""Configuration for record stores.

A StoreConfig is passed to every RecordStore instead of relying on a
process-wide file name, so two stores (or two tests) never share state.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = Path("data.bin")


@dataclass(frozen=True)
class StoreConfig:
    """Settings for a record store.

    Attributes:
        path: File the record collection is saved to and loaded from
            (default ``data.bin`` in the working directory).

        text_limit: Maximum byte length accepted for a single text or blob
            field when loading (default None, no limit). Set this when the
            data file comes from an untrusted source: a corrupted length
            prefix is then rejected with CorruptDataError before any payload
            is read.

    Examples:
        ```python
        from simpledb import RecordStore, StoreConfig

        store = RecordStore(StoreConfig(path="people.bin"))

        # Same settings, different file
        archive = RecordStore(store.config.with_path("people-2024.bin"))

        # Untrusted input: cap text fields at 1 MiB
        untrusted = RecordStore(StoreConfig(path="upload.bin", text_limit=1 << 20))
        ```
    """

    path: Path = DEFAULT_PATH
    text_limit: int | None = None

    def __post_init__(self) -> None:
        # Accept plain strings for convenience
        object.__setattr__(self, "path", Path(self.path))
        if self.text_limit is not None and self.text_limit < 0:
            raise ValueError(f"text_limit must be non-negative, got {self.text_limit}")

    def with_path(self, path: str | Path) -> StoreConfig:
        """Return a copy of this config targeting ``path``."""
        return dataclasses.replace(self, path=Path(path))
