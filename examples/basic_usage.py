#!/usr/bin/env python3
"""Basic usage example for simpledb.

This example demonstrates:
1. Defining a record with Pydantic
2. Saving a collection to a file
3. Loading it back
4. Calculating record sizes
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic import Field

from simpledb import (
    BaseRecord,
    Int32,
    RecordStore,
    StoreConfig,
    Text,
    UInt8,
    collection_size,
    field_sizes,
)


# Define a record class
class Contact(BaseRecord):
    """Address book contact.

    Field order is the on-disk order; do not reorder fields of a saved type.
    """

    id: Int32 = Field(description="Contact number")
    name: Text = Field(description="Display name")
    age: UInt8 = Field(description="Age in years")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("simpledb Basic Usage Example")
    print("=" * 60)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        store = RecordStore(StoreConfig(path=Path(tmp) / "contacts.bin"))

        # Missing file is an empty collection
        print("1. Loading from a file that does not exist yet...")
        contacts = store.load(Contact)
        print(f"   Records: {len(contacts)}")
        print()

        print("2. Analyzing field sizes...")
        for field_name, size in field_sizes(Contact).items():
            print(f"   {field_name}: {'8 + n' if size is None else size} bytes")
        print()

        print("3. Saving two contacts...")
        contacts = [
            Contact(id=1, name="Ada", age=36),
            Contact(id=2, name="Grace", age=45),
        ]
        store.save(contacts)

        data = store.path.read_bytes()
        print(f"   File size: {len(data)} bytes (computed: {collection_size(contacts)})")
        print(f"   Hex: {data.hex()}")
        print()

        print("4. Loading back...")
        loaded = store.load(Contact)
        for contact in loaded:
            print(f"   {contact!r}")
        print()

        print("5. Verifying round-trip...")
        if loaded == contacts:
            print("   ✓ Round-trip successful! Records match.")
        else:
            print("   ✗ Round-trip failed! Records don't match.")
        print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
