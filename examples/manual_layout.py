#!/usr/bin/env python3
"""Hand-written record layout example for simpledb.

A record type that is not a pydantic model describes its fields once, in
describe_fields(cursor). The same method is used to save and to load.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from simpledb import FLOAT64, TEXT, UINT32, FieldCursor, load, save


class Reading:
    """Weather station reading."""

    def __init__(self, station: int = 0, name: str = "", celsius: float = 0.0) -> None:
        self.station = station
        self.name = name
        self.celsius = celsius

    def describe_fields(self, cursor: FieldCursor) -> None:
        self.station = cursor.process(self.station, UINT32)
        self.name = cursor.process(self.name, TEXT)
        self.celsius = cursor.process(self.celsius, FLOAT64)

    def __repr__(self) -> str:
        return f"Reading({self.station}, {self.name!r}, {self.celsius})"


def main() -> None:
    """Run the hand-written layout example."""
    readings = [Reading(1, "harbor", 14.5), Reading(2, "summit", -3.25)]

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "readings.bin"
        save(readings, path)
        print(f"Saved {len(readings)} readings ({path.stat().st_size} bytes)")

        for reading in load(Reading, path):
            print(f"  {reading!r}")


if __name__ == "__main__":
    main()
