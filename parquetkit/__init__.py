"""Parquet schema types, schema element conversion, native value encoding and column statistics."""

__version__ = "0.1.0"