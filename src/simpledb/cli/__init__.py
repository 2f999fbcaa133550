"""Command-line interface for simpledb."""
