import pytest

from parquetkit.errors import ParquetError
from parquetkit.format import Type
from parquetkit.physical_type import (
    PhysicalKind,
    PhysicalType,
    physical_type_to_type,
    type_to_physical_type,
)


@pytest.mark.parametrize(
    "type_",
    [t for t in Type if t is not Type.FIXED_LEN_BYTE_ARRAY],
)
def test_round_trip_without_length(type_):
    physical = type_to_physical_type(type_, None)
    assert physical.length is None
    assert physical_type_to_type(physical) == (type_, None)


def test_fixed_len_round_trip():
    physical = type_to_physical_type(Type.FIXED_LEN_BYTE_ARRAY, 16)
    assert physical == PhysicalType.fixed_len_byte_array(16)
    assert physical_type_to_type(physical) == (Type.FIXED_LEN_BYTE_ARRAY, 16)


def test_fixed_len_requires_length():
    with pytest.raises(ParquetError, match="Length must be defined for FixedLenByteArray"):
        type_to_physical_type(Type.FIXED_LEN_BYTE_ARRAY, None)


def test_named_constants():
    assert type_to_physical_type(Type.INT32, None) == PhysicalType.INT32
    assert PhysicalType.BYTE_ARRAY.kind is PhysicalKind.BYTE_ARRAY


def test_fixed_len_types_differ_by_length():
    assert PhysicalType.fixed_len_byte_array(12) != PhysicalType.fixed_len_byte_array(16)


def test_str():
    assert str(PhysicalType.fixed_len_byte_array(16)) == "FixedLenByteArray(16)"
    assert str(PhysicalType.INT64) == PhysicalKind.INT64.value


def test_invalid_construction():
    with pytest.raises(ValueError):
        PhysicalType(PhysicalKind.FIXED_LEN_BYTE_ARRAY)
    with pytest.raises(ValueError):
        PhysicalType(PhysicalKind.INT32, 4)