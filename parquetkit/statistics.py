"""Typed column statistics and their plain-encoded raw form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import OutOfSpecError
from .format import ParquetStatistics
from .native import decode, encode, native_size
from .physical_type import PhysicalKind, PhysicalType

_NATIVE_KINDS = {
    PhysicalKind.INT32,
    PhysicalKind.INT64,
    PhysicalKind.INT96,
    PhysicalKind.FLOAT,
    PhysicalKind.DOUBLE,
}


class Statistics:
    """Base of the statistics of one physical type.

    Every subclass exposes ``physical_type``, ``null_count`` and
    ``distinct_count``; two statistics are equal only when their classes,
    physical types and values are equal.
    """

    physical_type: PhysicalType
    null_count: int | None
    distinct_count: int | None


@dataclass
class BooleanStatistics(Statistics):
    """Statistics of a boolean column."""

    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bool | None = None
    min_value: bool | None = None

    @property
    def physical_type(self) -> PhysicalType:
        """Always the boolean physical type."""
        return PhysicalType.BOOLEAN


@dataclass
class PrimitiveStatistics(Statistics):
    """Statistics of a column of fixed-size native values."""

    physical_type: PhysicalType
    descriptor: Any = None
    null_count: int | None = None
    distinct_count: int | None = None
    max_value: Any = None
    min_value: Any = None

    def __post_init__(self) -> None:
        if self.physical_type.kind not in _NATIVE_KINDS:
            raise ValueError(f"{self.physical_type} is not a native physical type")


@dataclass
class BinaryStatistics(Statistics):
    """Statistics of a variable-length byte array column."""

    descriptor: Any = None
    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bytes | None = None
    min_value: bytes | None = None

    @property
    def physical_type(self) -> PhysicalType:
        """Always the byte array physical type."""
        return PhysicalType.BYTE_ARRAY


@dataclass
class FixedLenStatistics(Statistics):
    """Statistics of a fixed-length byte array column."""

    physical_type: PhysicalType
    descriptor: Any = None
    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bytes | None = None
    min_value: bytes | None = None

    def __post_init__(self) -> None:
        if self.physical_type.kind is not PhysicalKind.FIXED_LEN_BYTE_ARRAY:
            raise ValueError(f"{self.physical_type} is not a fixed-length byte array")


def _check_plain(raw: ParquetStatistics, size: int) -> None:
    for label, value in (("max_value", raw.max_value), ("min_value", raw.min_value)):
        if value is not None and len(value) != size:
            raise OutOfSpecError(f"The {label} of statistics MUST be plain encoded")


def _read_boolean(raw: ParquetStatistics) -> BooleanStatistics:
    _check_plain(raw, 1)
    return BooleanStatistics(
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else raw.max_value[0] != 0,
        min_value=None if raw.min_value is None else raw.min_value[0] != 0,
    )


def _read_primitive(
    raw: ParquetStatistics, physical_type: PhysicalType, descriptor: Any
) -> PrimitiveStatistics:
    _check_plain(raw, native_size(physical_type))
    return PrimitiveStatistics(
        physical_type=physical_type,
        descriptor=descriptor,
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else decode(raw.max_value, physical_type),
        min_value=None if raw.min_value is None else decode(raw.min_value, physical_type),
    )


def _read_binary(raw: ParquetStatistics, descriptor: Any) -> BinaryStatistics:
    return BinaryStatistics(
        descriptor=descriptor,
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else bytes(raw.max_value),
        min_value=None if raw.min_value is None else bytes(raw.min_value),
    )


def _read_fixed_len(
    raw: ParquetStatistics, physical_type: PhysicalType, descriptor: Any
) -> FixedLenStatistics:
    size = physical_type.length
    _check_plain(raw, size)
    return FixedLenStatistics(
        physical_type=physical_type,
        descriptor=descriptor,
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else bytes(raw.max_value[:size]),
        min_value=None if raw.min_value is None else bytes(raw.min_value[:size]),
    )


def deserialize_statistics(
    statistics: ParquetStatistics, physical_type: PhysicalType, descriptor: Any
) -> Statistics:
    """Read raw statistics as the typed statistics of `physical_type`.

    Raises OutOfSpecError when a min or max value is not plain encoded.
    """
    kind = physical_type.kind
    if kind is PhysicalKind.BOOLEAN:
        return _read_boolean(statistics)
    if kind in _NATIVE_KINDS:
        return _read_primitive(statistics, physical_type, descriptor)
    if kind is PhysicalKind.BYTE_ARRAY:
        return _read_binary(statistics, descriptor)
    return _read_fixed_len(statistics, physical_type, descriptor)


def serialize_statistics(statistics: Statistics) -> ParquetStatistics:
    """Write typed statistics as raw, plain-encoded statistics."""
    if isinstance(statistics, BooleanStatistics):
        max_value = None if statistics.max_value is None else bytes([int(statistics.max_value)])
        min_value = None if statistics.min_value is None else bytes([int(statistics.min_value)])
    elif isinstance(statistics, PrimitiveStatistics):
        physical_type = statistics.physical_type
        max_value = (
            None if statistics.max_value is None else encode(statistics.max_value, physical_type)
        )
        min_value = (
            None if statistics.min_value is None else encode(statistics.min_value, physical_type)
        )
    elif isinstance(statistics, (BinaryStatistics, FixedLenStatistics)):
        max_value = None if statistics.max_value is None else bytes(statistics.max_value)
        min_value = None if statistics.min_value is None else bytes(statistics.min_value)
    else:
        raise TypeError(f"not a statistics object: {statistics!r}")
    return ParquetStatistics(
        null_count=statistics.null_count,
        distinct_count=statistics.distinct_count,
        max_value=max_value,
        min_value=min_value,
    )