"""Checks that annotations are compatible with physical types."""

from __future__ import annotations

import math

from .converted_type import DecimalConverted, PrimitiveConverted, PrimitiveConvertedType
from .errors import ParquetError
from .format import (
    BsonType,
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
from .physical_type import PhysicalKind, PhysicalType

_BYTE_ARRAY_ONLY = {
    PrimitiveConvertedType.UTF8,
    PrimitiveConvertedType.BSON,
    PrimitiveConvertedType.JSON,
}
_INT32_ONLY = {
    PrimitiveConvertedType.DATE,
    PrimitiveConvertedType.TIME_MILLIS,
    PrimitiveConvertedType.UINT8,
    PrimitiveConvertedType.UINT16,
    PrimitiveConvertedType.UINT32,
    PrimitiveConvertedType.INT8,
    PrimitiveConvertedType.INT16,
    PrimitiveConvertedType.INT32,
}
_INT64_ONLY = {
    PrimitiveConvertedType.TIME_MICROS,
    PrimitiveConvertedType.TIMESTAMP_MILLIS,
    PrimitiveConvertedType.TIMESTAMP_MICROS,
    PrimitiveConvertedType.UINT64,
    PrimitiveConvertedType.INT64,
}


def _max_fixed_precision(length: int) -> int:
    if length < 1:
        return 0
    return math.floor(math.log10(2 ** (8 * length - 1) - 1)) if length > 1 else 2


def check_decimal_invariants(physical_type: PhysicalType, precision: int, scale: int) -> None:
    """Raise if a decimal of this precision and scale cannot be stored in the type."""
    if precision < 1:
        raise ParquetError(f"DECIMAL precision must be larger than 0; It is {precision}")
    if scale >= precision:
        raise ParquetError(
            f"Invalid DECIMAL: scale ({scale}) cannot be greater than or equal to "
            f"precision ({precision})"
        )
    kind = physical_type.kind
    if kind is PhysicalKind.INT32:
        if not 1 <= precision <= 9:
            raise ParquetError(f"Cannot represent INT32 as DECIMAL with precision {precision}")
    elif kind is PhysicalKind.INT64:
        if not 1 <= precision <= 18:
            raise ParquetError(f"Cannot represent INT64 as DECIMAL with precision {precision}")
    elif kind is PhysicalKind.FIXED_LEN_BYTE_ARRAY:
        length = physical_type.length
        max_precision = _max_fixed_precision(length)
        if precision > max_precision:
            raise ParquetError(
                f"Cannot represent FIXED_LEN_BYTE_ARRAY as DECIMAL with length {length} "
                f"and precision {precision}. The max precision can only be {max_precision}"
            )
    elif kind is not PhysicalKind.BYTE_ARRAY:
        raise ParquetError(
            "DECIMAL can only annotate INT32, INT64, BYTE_ARRAY and FIXED_LEN_BYTE_ARRAY"
        )


def check_converted_invariants(
    physical_type: PhysicalType, converted_type: PrimitiveConverted | None
) -> None:
    """Raise if the converted annotation cannot apply to the physical type."""
    if converted_type is None:
        return
    if isinstance(converted_type, DecimalConverted):
        check_decimal_invariants(physical_type, converted_type.precision, converted_type.scale)
    elif converted_type in _BYTE_ARRAY_ONLY:
        if physical_type != PhysicalType.BYTE_ARRAY:
            raise ParquetError(f"{converted_type} can only annotate BYTE_ARRAY fields")
    elif converted_type in _INT32_ONLY:
        if physical_type != PhysicalType.INT32:
            raise ParquetError(f"{converted_type} can only annotate INT32")
    elif converted_type in _INT64_ONLY:
        if physical_type != PhysicalType.INT64:
            raise ParquetError(f"{converted_type} can only annotate INT64")
    elif converted_type is PrimitiveConvertedType.INTERVAL:
        if physical_type != PhysicalType.fixed_len_byte_array(12):
            raise ParquetError("INTERVAL can only annotate FIXED_LEN_BYTE_ARRAY(12)")
    elif converted_type is PrimitiveConvertedType.ENUM:
        if physical_type != PhysicalType.BYTE_ARRAY:
            raise ParquetError("ENUM can only annotate BYTE_ARRAY fields")


def _logical_is_compatible(logical_type: LogicalType, physical_type: PhysicalType) -> bool:
    kind = physical_type.kind
    if isinstance(logical_type, (EnumType, StringType, JsonType, BsonType)):
        return kind is PhysicalKind.BYTE_ARRAY
    if isinstance(logical_type, DateType):
        return kind is PhysicalKind.INT32
    if isinstance(logical_type, TimeType):
        if kind is PhysicalKind.INT32:
            return logical_type.unit is TimeUnit.MILLIS
        if kind is PhysicalKind.INT64:
            if logical_type.unit is TimeUnit.MILLIS:
                raise ParquetError("Cannot use millisecond unit on INT64 type")
            return True
        return False
    if isinstance(logical_type, TimestampType):
        return kind is PhysicalKind.INT64
    if isinstance(logical_type, IntType):
        if kind is PhysicalKind.INT32:
            return logical_type.bit_width <= 32
        if kind is PhysicalKind.INT64:
            return logical_type.bit_width == 64
        return False
    if isinstance(logical_type, NullType):
        return kind is PhysicalKind.INT32
    if isinstance(logical_type, UuidType):
        return physical_type == PhysicalType.fixed_len_byte_array(16)
    return False


def check_logical_invariants(
    physical_type: PhysicalType, logical_type: LogicalType | None
) -> None:
    """Raise if the logical type cannot annotate the physical type."""
    if logical_type is None:
        return
    if isinstance(logical_type, (MapType, ListType)):
        raise ParquetError(f"{logical_type!r} cannot be applied to a primitive type")
    if isinstance(logical_type, DecimalType):
        check_decimal_invariants(physical_type, logical_type.precision, logical_type.scale)
        return
    if not _logical_is_compatible(logical_type, physical_type):
        raise ParquetError(f"Cannot annotate {logical_type!r} from {physical_type} fields")