"""Physical storage types of parquet columns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import ParquetError
from .format import Type


class PhysicalKind(Enum):
    """The kind of a physical type, without its length."""

    BOOLEAN = "Boolean"
    INT32 = "Int32"
    INT64 = "Int64"
    INT96 = "Int96"
    FLOAT = "Float"
    DOUBLE = "Double"
    BYTE_ARRAY = "ByteArray"
    FIXED_LEN_BYTE_ARRAY = "FixedLenByteArray"


@dataclass(frozen=True)
class PhysicalType:
    """A physical type; fixed-length byte arrays carry their length."""

    kind: PhysicalKind
    length: int | None = None

    BOOLEAN: ClassVar[PhysicalType]
    INT32: ClassVar[PhysicalType]
    INT64: ClassVar[PhysicalType]
    INT96: ClassVar[PhysicalType]
    FLOAT: ClassVar[PhysicalType]
    DOUBLE: ClassVar[PhysicalType]
    BYTE_ARRAY: ClassVar[PhysicalType]

    def __post_init__(self) -> None:
        is_fixed = self.kind is PhysicalKind.FIXED_LEN_BYTE_ARRAY
        if is_fixed and self.length is None:
            raise ValueError("a fixed-length byte array needs a length")
        if not is_fixed and self.length is not None:
            raise ValueError(f"{self.kind.value} does not take a length")

    @staticmethod
    def fixed_len_byte_array(length: int) -> PhysicalType:
        """Return the fixed-length byte array type of `length` bytes."""
        return PhysicalType(PhysicalKind.FIXED_LEN_BYTE_ARRAY, length)

    def __str__(self) -> str:
        if self.length is None:
            return self.kind.value
        return f"{self.kind.value}({self.length})"


PhysicalType.BOOLEAN = PhysicalType(PhysicalKind.BOOLEAN)
PhysicalType.INT32 = PhysicalType(PhysicalKind.INT32)
PhysicalType.INT64 = PhysicalType(PhysicalKind.INT64)
PhysicalType.INT96 = PhysicalType(PhysicalKind.INT96)
PhysicalType.FLOAT = PhysicalType(PhysicalKind.FLOAT)
PhysicalType.DOUBLE = PhysicalType(PhysicalKind.DOUBLE)
PhysicalType.BYTE_ARRAY = PhysicalType(PhysicalKind.BYTE_ARRAY)

_KIND_BY_TYPE = {
    Type.BOOLEAN: PhysicalKind.BOOLEAN,
    Type.INT32: PhysicalKind.INT32,
    Type.INT64: PhysicalKind.INT64,
    Type.INT96: PhysicalKind.INT96,
    Type.FLOAT: PhysicalKind.FLOAT,
    Type.DOUBLE: PhysicalKind.DOUBLE,
    Type.BYTE_ARRAY: PhysicalKind.BYTE_ARRAY,
    Type.FIXED_LEN_BYTE_ARRAY: PhysicalKind.FIXED_LEN_BYTE_ARRAY,
}
_TYPE_BY_KIND = {kind: type_ for type_, kind in _KIND_BY_TYPE.items()}


def type_to_physical_type(type_: Type, length: int | None) -> PhysicalType:
    """Build a physical type from a wire type and an optional length."""
    kind = _KIND_BY_TYPE[Type(type_)]
    if kind is PhysicalKind.FIXED_LEN_BYTE_ARRAY:
        if length is None:
            raise ParquetError("Length must be defined for FixedLenByteArray")
        return PhysicalType.fixed_len_byte_array(length)
    return PhysicalType(kind)


def physical_type_to_type(physical_type: PhysicalType) -> tuple[Type, int | None]:
    """Return the wire type and the length of a physical type."""
    return _TYPE_BY_KIND[physical_type.kind], physical_type.length