import pytest

from parquetkit.errors import OutOfSpecError
from parquetkit.physical_type import PhysicalType
from parquetkit.reduce import reduce
from parquetkit.statistics import (
    BinaryStatistics,
    BooleanStatistics,
    FixedLenStatistics,
    PrimitiveStatistics,
)


def test_empty_is_none():
    assert reduce([]) is None


def test_only_missing_is_none():
    assert reduce([None, None]) is None


def test_mixed_types_raise():
    with pytest.raises(OutOfSpecError):
        reduce([BooleanStatistics(), BinaryStatistics()])


def test_single_statistics_kept_whole():
    stats = PrimitiveStatistics(
        physical_type=PhysicalType.INT32, null_count=1, distinct_count=5, max_value=9, min_value=2
    )
    result = reduce([None, stats])
    assert result == stats
    assert result is not stats


def test_boolean_min_max():
    a = BooleanStatistics(null_count=1, distinct_count=2, max_value=False, min_value=True)
    b = BooleanStatistics(null_count=None, max_value=True, min_value=False)
    result = reduce([a, b])
    assert result.min_value is False
    assert result.max_value is True
    assert result.null_count == a.null_count
    assert result.distinct_count is None


def test_primitive_min_and_null_counts():
    low, high = 3, 10
    a = PrimitiveStatistics(physical_type=PhysicalType.INT64, null_count=2, min_value=high, max_value=high)
    b = PrimitiveStatistics(physical_type=PhysicalType.INT64, null_count=5, min_value=low, max_value=low)
    result = reduce([a, b])
    assert result.min_value == low
    assert result.null_count == a.null_count + b.null_count
    assert result.physical_type == PhysicalType.INT64


def test_primitive_max_keeps_smaller_value():
    a = PrimitiveStatistics(physical_type=PhysicalType.INT32, max_value=10)
    b = PrimitiveStatistics(physical_type=PhysicalType.INT32, max_value=3)
    assert reduce([a, b]).max_value == b.max_value


def test_primitive_missing_values_taken_from_other():
    a = PrimitiveStatistics(physical_type=PhysicalType.DOUBLE, min_value=None, max_value=None)
    b = PrimitiveStatistics(physical_type=PhysicalType.DOUBLE, min_value=1.5, max_value=2.5)
    result = reduce([a, b])
    assert (result.min_value, result.max_value) == (b.min_value, b.max_value)


def test_int96_ordering_uses_timestamp():
    early = (0, 0, 2_440_588)
    late = (0, 0, 2_440_589)
    a = PrimitiveStatistics(physical_type=PhysicalType.INT96, min_value=late)
    b = PrimitiveStatistics(physical_type=PhysicalType.INT96, min_value=early)
    assert reduce([a, b]).min_value == early


def test_binary_min_max():
    a = BinaryStatistics(min_value=b"b", max_value=b"b", null_count=1)
    b = BinaryStatistics(min_value=b"a", max_value=b"c", null_count=None)
    result = reduce([a, b])
    assert result.min_value == b"a"
    assert result.max_value == b"c"
    assert result.null_count == 1


def test_binary_prefix_keeps_accumulated():
    a = BinaryStatistics(min_value=b"ab", max_value=b"ab")
    b = BinaryStatistics(min_value=b"abc", max_value=b"abc")
    result = reduce([a, b])
    assert result.min_value == a.min_value
    assert result.max_value == a.max_value


def test_fixed_len_min_max():
    physical_type = PhysicalType.fixed_len_byte_array(2)
    a = FixedLenStatistics(physical_type=physical_type, min_value=b"mm", max_value=b"mm", distinct_count=1)
    b = FixedLenStatistics(physical_type=physical_type, min_value=b"aa", max_value=b"zz")
    result = reduce([a, None, b])
    assert result.min_value == b.min_value
    assert result.max_value == b.max_value
    assert result.distinct_count is None
    assert result.physical_type == physical_type


def test_fixed_len_different_lengths_raise():
    a = FixedLenStatistics(physical_type=PhysicalType.fixed_len_byte_array(2))
    b = FixedLenStatistics(physical_type=PhysicalType.fixed_len_byte_array(3))
    with pytest.raises(OutOfSpecError):
        reduce([a, b])