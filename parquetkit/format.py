"""Structures of the parquet file format's metadata definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class Type(IntEnum):
    """Physical storage types as numbered on the wire."""

    BOOLEAN = 0
    INT32 = 1
    INT64 = 2
    INT96 = 3
    FLOAT = 4
    DOUBLE = 5
    BYTE_ARRAY = 6
    FIXED_LEN_BYTE_ARRAY = 7


class ConvertedType(IntEnum):
    """Legacy type annotations as numbered on the wire."""

    UTF8 = 0
    MAP = 1
    MAP_KEY_VALUE = 2
    LIST = 3
    ENUM = 4
    DECIMAL = 5
    DATE = 6
    TIME_MILLIS = 7
    TIME_MICROS = 8
    TIMESTAMP_MILLIS = 9
    TIMESTAMP_MICROS = 10
    UINT_8 = 11
    UINT_16 = 12
    UINT_32 = 13
    UINT_64 = 14
    INT_8 = 15
    INT_16 = 16
    INT_32 = 17
    INT_64 = 18
    JSON = 19
    BSON = 20
    INTERVAL = 21


class FieldRepetitionType(IntEnum):
    """Repetition of a field as numbered on the wire."""

    REQUIRED = 0
    OPTIONAL = 1
    REPEATED = 2


class TimeUnit(Enum):
    """Unit of a time or timestamp logical type."""

    MILLIS = "MILLIS"
    MICROS = "MICROS"
    NANOS = "NANOS"


@dataclass(frozen=True)
class StringType:
    """UTF-8 encoded string."""


@dataclass(frozen=True)
class MapType:
    """Map of key/value pairs."""


@dataclass(frozen=True)
class ListType:
    """List of elements."""


@dataclass(frozen=True)
class EnumType:
    """Enumeration stored as binary."""


@dataclass(frozen=True)
class DecimalType:
    """Decimal number with a scale and a precision."""

    scale: int
    precision: int


@dataclass(frozen=True)
class DateType:
    """Days since the Unix epoch."""


@dataclass(frozen=True)
class TimeType:
    """Time of day."""

    is_adjusted_to_utc: bool
    unit: TimeUnit


@dataclass(frozen=True)
class TimestampType:
    """Instant in time."""

    is_adjusted_to_utc: bool
    unit: TimeUnit


@dataclass(frozen=True)
class IntType:
    """Integer of a given bit width and signedness."""

    bit_width: int
    is_signed: bool


@dataclass(frozen=True)
class NullType:
    """Column that is always null."""


@dataclass(frozen=True)
class JsonType:
    """Embedded JSON document."""


@dataclass(frozen=True)
class BsonType:
    """Embedded BSON document."""


@dataclass(frozen=True)
class UuidType:
    """Universally unique identifier."""


LogicalType = Union[
    StringType,
    MapType,
    ListType,
    EnumType,
    DecimalType,
    DateType,
    TimeType,
    TimestampType,
    IntType,
    NullType,
    JsonType,
    BsonType,
    UuidType,
]


@dataclass
class SchemaElement:
    """One node of a flattened schema tree."""

    name: str
    type_: Type | None = None
    type_length: int | None = None
    repetition_type: FieldRepetitionType | None = None
    num_children: int | None = None
    converted_type: ConvertedType | None = None
    scale: int | None = None
    precision: int | None = None
    field_id: int | None = None
    logical_type: LogicalType | None = None


@dataclass
class ParquetStatistics:
    """Raw, plain-encoded statistics of a column chunk or page."""

    max: bytes | None = None
    min: bytes | None = None
    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bytes | None = None
    min_value: bytes | None = None