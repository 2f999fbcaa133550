"""Main CLI entry point for simpledb."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_file, count_records, dump_records
from ..exceptions import SimpleDBError


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the simpledb CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="simpledb",
        description="simpledb: Simple binary record files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  simpledb --analyze models.py                        Show record field layouts
  simpledb --count data.bin                           Show number of stored records
  simpledb --dump data.bin --record models.py:Person  Print stored records
  simpledb --version                                  Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze record types in a Python file and show field sizes",
    )

    parser.add_argument(
        "--count",
        metavar="DATA",
        type=str,
        help="Show the record count stored in a data file",
    )

    parser.add_argument(
        "--dump",
        metavar="DATA",
        type=str,
        help="Print the records stored in a data file (requires --record)",
    )

    parser.add_argument(
        "--record",
        metavar="FILE:CLASS",
        type=str,
        help="Record type used by --dump, e.g. models.py:Person",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"simpledb {__version__}",
    )

    args = parser.parse_args(argv)

    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
            return 0
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    if args.count:
        data_path = Path(args.count)
        if not data_path.exists():
            print(f"Error: File not found: {data_path}", file=sys.stderr)
            return 1

        try:
            print(count_records(data_path))
            return 0
        except (OSError, SimpleDBError) as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

    if args.dump:
        if not args.record:
            print("Error: --dump requires --record FILE:CLASS", file=sys.stderr)
            return 1

        try:
            dump_records(Path(args.dump), args.record)
            return 0
        except Exception as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
