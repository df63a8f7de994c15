# parquetkit

Pure-Python building blocks for Parquet metadata: schema types and their
validation, conversion of schema trees to and from flat schema elements, plain
encoding of native values, and column statistics. It has no runtime
dependencies.

## Modules

- `parquetkit.format` holds the metadata structures of the format. It has the
  wire enums `Type`, `ConvertedType`, `FieldRepetitionType` and `TimeUnit`, and
  the logical types `StringType`, `MapType`, `ListType`, `EnumType`,
  `DecimalType`, `DateType`, `TimeType`, `TimestampType`, `IntType`,
  `NullType`, `JsonType`, `BsonType` and `UuidType`. It also has the
  `SchemaElement` and `ParquetStatistics` dataclasses.
- `parquetkit.physical_type` has `PhysicalKind` and `PhysicalType`.
  `PhysicalType` offers the constants `PhysicalType.BOOLEAN`, `INT32`, `INT64`,
  `INT96`, `FLOAT`, `DOUBLE` and `BYTE_ARRAY`, and
  `PhysicalType.fixed_len_byte_array(length)`. It also has
  `type_to_physical_type` and `physical_type_to_type`.
- `parquetkit.native` provides little-endian plain encoding of the INT32,
  INT64, INT96, FLOAT and DOUBLE types. It has `encode`, `decode`,
  `native_size` and `native_ord`. `int96_to_i64_ns` turns an INT96 timestamp
  (nanoseconds low, nanoseconds high, Julian day) into nanoseconds since the
  Unix epoch. An INT96 value is a tuple of three ints.
- `parquetkit.converted_type` has `PrimitiveConvertedType`, `DecimalConverted`
  and `GroupConvertedType`. It converts to and from the wire `ConvertedType`
  with `converted_to_primitive_converted`, `converted_to_group_converted`,
  `primitive_converted_to_converted` and `group_converted_converted_to`.
  `logical_to_converted` gives the converted annotation equal to a logical
  type, or `None` where there is none (nanosecond time units, null, UUID).
- `parquetkit.spec` checks which physical types an annotation may apply to,
  with `check_decimal_invariants`, `check_converted_invariants` and
  `check_logical_invariants`.
- `parquetkit.parquet_type` holds the schema tree. It has `Repetition`,
  `BasicTypeInfo`, the node classes `ParquetType`, `PrimitiveType` and
  `GroupType`, and `ParquetType.check_contains` for testing projections. The
  constructors are `new_root`, `from_converted`, `try_from_primitive`,
  `from_physical` and `try_from_group`. `try_from_primitive` validates the
  annotations it is given.
- `parquetkit.thrift_schema` has `to_thrift`, which flattens a schema tree
  depth first into a list of `SchemaElement`s, and `from_thrift`, which
  rebuilds the tree.
- `parquetkit.statistics` holds typed statistics: `BooleanStatistics`,
  `PrimitiveStatistics`, `BinaryStatistics` and `FixedLenStatistics`, all
  subclasses of `Statistics`. `deserialize_statistics(statistics,
  physical_type, descriptor)` reads a raw `ParquetStatistics`, and
  `serialize_statistics` writes one back.
- `parquetkit.reduce` has `reduce`, which folds the statistics of several
  pages of one column into one. It skips `None` entries and sums the null
  counts. It drops the distinct count.
- `parquetkit.errors` has `ParquetError` and its subclass `OutOfSpecError`.

## Example

```python
from parquetkit.parquet_type import Repetition, new_root, try_from_primitive
from parquetkit.physical_type import PhysicalType
from parquetkit.converted_type import DecimalConverted
from parquetkit.thrift_schema import to_thrift, from_thrift

price = try_from_primitive(
    "price",
    PhysicalType.INT64,
    Repetition.OPTIONAL,
    DecimalConverted(18, 2),
    None,
    None,
)
schema = new_root("prices", [price])

elements = to_thrift(schema)
assert from_thrift(elements) == schema
```

Statistics round trip through their raw form:

```python
from parquetkit.format import ParquetStatistics
from parquetkit.physical_type import PhysicalType
from parquetkit.statistics import deserialize_statistics, serialize_statistics

raw = ParquetStatistics(null_count=0, max_value=b"\x05\x00\x00\x00", min_value=b"\x01\x00\x00\x00")
stats = deserialize_statistics(raw, PhysicalType.INT32, None)
assert (stats.min_value, stats.max_value) == (1, 5)
assert serialize_statistics(stats) == raw
```

## Errors

- An invalid annotation raises `ParquetError`. One example is a decimal
  precision that does not fit the physical type.
- A malformed list of schema elements also raises `ParquetError`.
- Statistics whose min or max value is not plain encoded for the column's type
  raise `OutOfSpecError`. So does `reduce` when given statistics of different
  physical types.

## Notes on merging

When `reduce` merges two present values of `PrimitiveStatistics`, it keeps the
smaller one for both `min_value` and `max_value`. Byte array minima and maxima
are compared byte by byte over their common prefix.

## What it does not do

The package does not read or write Parquet files, pages or column chunks. It
does not encode `SchemaElement`s or `ParquetStatistics` to the compact binary
protocol, and it has no compression codecs. It works only on the in-memory
metadata structures described above.

## Running the tests

```
pip install -e ".[test]"
pytest
```