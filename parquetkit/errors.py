"""Exceptions raised while handling parquet schemas and statistics."""


class ParquetError(Exception):
    """A general error about parquet data or schemas."""


class OutOfSpecError(ParquetError):
    """The data does not follow the parquet specification."""