"""Record analysis and data file inspection CLI commands."""

from __future__ import annotations

import importlib.util
import inspect
import io
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

from ..codec.cursor import FieldCursor
from ..codec.encoder import write_record
from ..codec.scalars import COUNT_WIDTH, read_count
from ..codec.schema import RecordSchema
from ..config import StoreConfig
from ..exceptions import SchemaError
from ..models.base import BaseRecord
from ..store import RecordStore

USER_MODULE = "simpledb_user_module"


def load_module(file_path: Path) -> ModuleType:
    """Import a Python file as a module."""
    spec = importlib.util.spec_from_file_location(USER_MODULE, file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[USER_MODULE] = module
    spec.loader.exec_module(module)
    return module


def is_record_class(obj: Any) -> bool:
    """Whether ``obj`` is a record type (BaseRecord subclass or describe_fields class)."""
    if not inspect.isclass(obj) or obj is BaseRecord:
        return False
    if issubclass(obj, BaseRecord):
        return True
    return callable(getattr(obj, "describe_fields", None))


def find_record_classes(module: ModuleType) -> list[type]:
    """Record types defined in ``module`` (not imported into it)."""
    return [
        obj
        for _name, obj in inspect.getmembers(module, is_record_class)
        if obj.__module__ == module.__name__
    ]


def analyze_file(file_path: Path) -> None:
    """Print the field layout of all record types in a Python file.

    Args:
        file_path: Path to Python file containing record definitions
    """
    module = load_module(file_path)
    record_classes = find_record_classes(module)

    if not record_classes:
        print(f"No record types found in {file_path}")
        return

    print("|" * 7, "simpledb: Simple binary record files", "|" * 7)
    print(f"{len(record_classes)} record type{'s' if len(record_classes) != 1 else ''} loaded.")
    print("Field sizes are in bytes.")
    print()

    for record_class in record_classes:
        analyze_record_class(record_class)


def analyze_record_class(record_class: type) -> None:
    """Print the layout of a single record type.

    Args:
        record_class: Record type to analyze
    """
    print(f"{'=' * 19} {record_class.__name__} {'=' * 19}")

    try:
        schema = RecordSchema.from_type(record_class)
    except SchemaError as e:
        print(f"Invalid record type: {e}")
        print()
        return

    if not schema.is_automatic:
        # describe_fields() is the only description; run it on a default instance
        buffer = io.BytesIO()
        write_record(FieldCursor.writer(buffer), record_class(), schema)
        print("Hand-written layout (describe_fields)")
        print(f"Default record size: {len(buffer.getvalue())} bytes")
        print()
        return

    for i, field_schema in enumerate(schema.fields, 1):
        field_desc = f"{i}. {field_schema.name}"
        codec_name = field_schema.codec.name
        if field_schema.width is None:
            size_desc = f"{COUNT_WIDTH} + n"
        else:
            size_desc = str(field_schema.width)

        dots = "." * max(1, 40 - len(field_desc) - len(codec_name))
        print(f"        {field_desc} {codec_name}{dots}{size_desc}")

    fixed = schema.fixed_width()
    if fixed is None:
        minimum = sum(f.width if f.width is not None else COUNT_WIDTH for f in schema.fields)
        print(f"Record size: variable, at least {minimum} bytes")
    else:
        print(f"Record size: {fixed} bytes")
    print()


def count_records(data_path: Path) -> int:
    """Read the record count from a data file header."""
    with open(data_path, "rb") as in_file:
        return read_count(in_file)


def dump_records(data_path: Path, record_ref: str) -> None:
    """Load a data file and print each record on its own line.

    Args:
        data_path: Path to the data file
        record_ref: ``path/to/models.py:ClassName`` naming the stored record type
    """
    module_path, sep, class_name = record_ref.rpartition(":")
    if not sep or not module_path or not class_name:
        raise ValueError(f"Expected FILE.py:ClassName, got {record_ref!r}")

    module = load_module(Path(module_path))
    record_class = getattr(module, class_name, None)
    if record_class is None or not is_record_class(record_class):
        raise ValueError(f"{class_name} is not a record type in {module_path}")

    records = RecordStore(StoreConfig(path=data_path)).load(record_class)
    for index, record in enumerate(records):
        if isinstance(record, BaseRecord):
            print(f"{index}: {record!r}")
        else:
            print(f"{index}: {record_class.__name__}({vars(record)!r})")
