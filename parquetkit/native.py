"""Little-endian plain encoding of parquet's fixed-size native types."""

from __future__ import annotations

import struct

from .physical_type import PhysicalKind, PhysicalType

_JULIAN_DAY_OF_EPOCH = 2_440_588
_SECONDS_PER_DAY = 86_400
_NANOS_PER_SECOND = 1_000_000_000

_FORMATS = {
    PhysicalKind.INT32: struct.Struct("<i"),
    PhysicalKind.INT64: struct.Struct("<q"),
    PhysicalKind.FLOAT: struct.Struct("<f"),
    PhysicalKind.DOUBLE: struct.Struct("<d"),
    PhysicalKind.INT96: struct.Struct("<3I"),
}


def _struct_for(physical_type: PhysicalType) -> struct.Struct:
    try:
        return _FORMATS[physical_type.kind]
    except KeyError:
        raise ValueError(f"{physical_type} has no native representation") from None


def int96_to_i64_ns(value: tuple[int, int, int]) -> int:
    """Convert an INT96 timestamp (nanos low, nanos high, julian day) to ns since epoch."""
    low, high, day = value
    nanoseconds = (high << 32) + low
    seconds = (day - _JULIAN_DAY_OF_EPOCH) * _SECONDS_PER_DAY
    return seconds * _NANOS_PER_SECOND + nanoseconds


def native_size(physical_type: PhysicalType) -> int:
    """Return the number of bytes of a native value of `physical_type`."""
    return _struct_for(physical_type).size


def decode(chunk: bytes, physical_type: PhysicalType):
    """Decode one plain-encoded value; INT96 decodes to a tuple of three ints."""
    layout = _struct_for(physical_type)
    if len(chunk) != layout.size:
        raise ValueError(
            f"{physical_type} needs {layout.size} bytes, got {len(chunk)}"
        )
    values = layout.unpack(chunk)
    if physical_type.kind is PhysicalKind.INT96:
        return values
    return values[0]


def encode(value, physical_type: PhysicalType) -> bytes:
    """Plain-encode one native value."""
    layout = _struct_for(physical_type)
    try:
        if physical_type.kind is PhysicalKind.INT96:
            return layout.pack(*value)
        return layout.pack(value)
    except struct.error as error:
        raise ValueError(f"cannot encode {value!r} as {physical_type}: {error}") from None


def native_ord(a, b, physical_type: PhysicalType) -> int:
    """Compare two native values: -1, 0 or 1; incomparable values are equal."""
    _struct_for(physical_type)
    if physical_type.kind is PhysicalKind.INT96:
        a, b = int96_to_i64_ns(a), int96_to_i64_ns(b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0