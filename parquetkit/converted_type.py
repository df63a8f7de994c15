"""Legacy converted-type annotations and their conversions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import ParquetError
from .format import (
    BsonType,
    ConvertedType,
    DateType,
    DecimalType,
    EnumType,
    IntType,
    JsonType,
    ListType,
    LogicalType,
    MapType,
    NullType,
    StringType,
    TimestampType,
    TimeType,
    TimeUnit,
    UuidType,
)


class PrimitiveConvertedType(Enum):
    """Converted types that annotate primitive fields, except decimals."""

    UTF8 = "Utf8"
    ENUM = "Enum"
    DATE = "Date"
    TIME_MILLIS = "TimeMillis"
    TIME_MICROS = "TimeMicros"
    TIMESTAMP_MILLIS = "TimestampMillis"
    TIMESTAMP_MICROS = "TimestampMicros"
    UINT8 = "Uint8"
    UINT16 = "Uint16"
    UINT32 = "Uint32"
    UINT64 = "Uint64"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    JSON = "Json"
    BSON = "Bson"
    INTERVAL = "Interval"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DecimalConverted:
    """Decimal annotation with its precision and scale."""

    precision: int
    scale: int

    def __str__(self) -> str:
        return f"Decimal({self.precision}, {self.scale})"


PrimitiveConverted = Union[PrimitiveConvertedType, DecimalConverted]


class GroupConvertedType(Enum):
    """Converted types that annotate groups."""

    MAP = "Map"
    MAP_KEY_VALUE = "MapKeyValue"
    LIST = "List"

    def __str__(self) -> str:
        return self.value


_PRIMITIVE_BY_CONVERTED = {
    ConvertedType.UTF8: PrimitiveConvertedType.UTF8,
    ConvertedType.ENUM: PrimitiveConvertedType.ENUM,
    ConvertedType.DATE: PrimitiveConvertedType.DATE,
    ConvertedType.TIME_MILLIS: PrimitiveConvertedType.TIME_MILLIS,
    ConvertedType.TIME_MICROS: PrimitiveConvertedType.TIME_MICROS,
    ConvertedType.TIMESTAMP_MILLIS: PrimitiveConvertedType.TIMESTAMP_MILLIS,
    ConvertedType.TIMESTAMP_MICROS: PrimitiveConvertedType.TIMESTAMP_MICROS,
    ConvertedType.UINT_8: PrimitiveConvertedType.UINT8,
    ConvertedType.UINT_16: PrimitiveConvertedType.UINT16,
    ConvertedType.UINT_32: PrimitiveConvertedType.UINT32,
    ConvertedType.UINT_64: PrimitiveConvertedType.UINT64,
    ConvertedType.INT_8: PrimitiveConvertedType.INT8,
    ConvertedType.INT_16: PrimitiveConvertedType.INT16,
    ConvertedType.INT_32: PrimitiveConvertedType.INT32,
    ConvertedType.INT_64: PrimitiveConvertedType.INT64,
    ConvertedType.JSON: PrimitiveConvertedType.JSON,
    ConvertedType.BSON: PrimitiveConvertedType.BSON,
    ConvertedType.INTERVAL: PrimitiveConvertedType.INTERVAL,
}
_CONVERTED_BY_PRIMITIVE = {v: k for k, v in _PRIMITIVE_BY_CONVERTED.items()}

_GROUP_BY_CONVERTED = {
    ConvertedType.MAP: GroupConvertedType.MAP,
    ConvertedType.LIST: GroupConvertedType.LIST,
    ConvertedType.MAP_KEY_VALUE: GroupConvertedType.MAP_KEY_VALUE,
}
_CONVERTED_BY_GROUP = {v: k for k, v in _GROUP_BY_CONVERTED.items()}

_INTEGERS = {
    (8, True): PrimitiveConvertedType.INT8,
    (16, True): PrimitiveConvertedType.INT16,
    (32, True): PrimitiveConvertedType.INT32,
    (64, True): PrimitiveConvertedType.INT64,
    (8, False): PrimitiveConvertedType.UINT8,
    (16, False): PrimitiveConvertedType.UINT16,
    (32, False): PrimitiveConvertedType.UINT32,
    (64, False): PrimitiveConvertedType.UINT64,
}


def converted_to_primitive_converted(
    ty: ConvertedType, maybe_decimal: tuple[int, int] | None
) -> PrimitiveConverted:
    """Map a wire converted type to a primitive annotation."""
    ty = ConvertedType(ty)
    if ty is ConvertedType.DECIMAL:
        if maybe_decimal is None:
            raise ParquetError("Decimal requires a precision and scale")
        precision, scale = maybe_decimal
        return DecimalConverted(precision, scale)
    try:
        return _PRIMITIVE_BY_CONVERTED[ty]
    except KeyError:
        raise ParquetError(
            f'Converted type "{ty.name}" cannot be applied to a primitive type'
        ) from None


def converted_to_group_converted(ty: ConvertedType) -> GroupConvertedType:
    """Map a wire converted type to a group annotation."""
    ty = ConvertedType(ty)
    try:
        return _GROUP_BY_CONVERTED[ty]
    except KeyError:
        raise ParquetError(
            f'Converted type "{ty.name}" cannot be applied to a primitive type'
        ) from None


def primitive_converted_to_converted(
    ty: PrimitiveConverted,
) -> tuple[ConvertedType, tuple[int, int] | None]:
    """Map a primitive annotation to its wire type and (precision, scale)."""
    if isinstance(ty, DecimalConverted):
        return ConvertedType.DECIMAL, (ty.precision, ty.scale)
    return _CONVERTED_BY_PRIMITIVE[ty], None


def group_converted_converted_to(ty: GroupConvertedType) -> ConvertedType:
    """Map a group annotation to its wire converted type."""
    return _CONVERTED_BY_GROUP[ty]


_TIME_UNITS = {
    TimeUnit.MILLIS: PrimitiveConvertedType.TIME_MILLIS,
    TimeUnit.MICROS: PrimitiveConvertedType.TIME_MICROS,
}
_TIMESTAMP_UNITS = {
    TimeUnit.MILLIS: PrimitiveConvertedType.TIMESTAMP_MILLIS,
    TimeUnit.MICROS: PrimitiveConvertedType.TIMESTAMP_MICROS,
}

_SIMPLE_LOGICAL = {
    StringType: PrimitiveConvertedType.UTF8,
    MapType: GroupConvertedType.MAP,
    ListType: GroupConvertedType.LIST,
    EnumType: PrimitiveConvertedType.ENUM,
    DateType: PrimitiveConvertedType.DATE,
    NullType: None,
    JsonType: PrimitiveConvertedType.JSON,
    BsonType: PrimitiveConvertedType.BSON,
    UuidType: None,
}


def logical_to_converted(
    logical_type: LogicalType,
) -> PrimitiveConverted | GroupConvertedType | None:
    """Return the converted annotation equivalent to a logical type, if any."""
    if isinstance(logical_type, DecimalType):
        return DecimalConverted(logical_type.precision, logical_type.scale)
    if isinstance(logical_type, TimeType):
        return _TIME_UNITS.get(logical_type.unit)
    if isinstance(logical_type, TimestampType):
        return _TIMESTAMP_UNITS.get(logical_type.unit)
    if isinstance(logical_type, IntType):
        key = (logical_type.bit_width, logical_type.is_signed)
        try:
            return _INTEGERS[key]
        except KeyError:
            raise ParquetError(f"Integer type {key} is not supported") from None
    try:
        return _SIMPLE_LOGICAL[type(logical_type)]
    except KeyError:
        raise TypeError(f"not a logical type: {logical_type!r}") from None