import pytest

from parquetkit.converted_type import (
    DecimalConverted,
    GroupConvertedType,
    PrimitiveConvertedType,
)
from parquetkit.errors import ParquetError
from parquetkit.format import IntType, StringType
from parquetkit.parquet_type import (
    BasicTypeInfo,
    GroupType,
    PrimitiveType,
    Repetition,
    from_converted,
    from_physical,
    new_root,
    try_from_group,
    try_from_primitive,
)
from parquetkit.physical_type import PhysicalType


def _schema():
    return new_root(
        "schema",
        [
            try_from_primitive("a", PhysicalType.INT32, Repetition.REQUIRED, None, None, None),
            from_converted(
                "g",
                [from_physical("b", PhysicalType.DOUBLE)],
                Repetition.OPTIONAL,
                None,
                None,
            ),
        ],
    )


def test_new_root_is_root_and_optional():
    root = new_root("schema", [])
    assert root.is_root
    assert root.name == "schema"
    assert root.basic_info.repetition is Repetition.OPTIONAL
    assert root.fields == []


def test_from_converted_defaults_to_optional():
    group = from_converted("g", [], None, GroupConvertedType.LIST, 3)
    assert group.basic_info == BasicTypeInfo("g", Repetition.OPTIONAL, False, 3)
    assert group.converted_type is GroupConvertedType.LIST
    assert not group.is_root


def test_from_physical_is_optional_without_annotations():
    leaf = from_physical("x", PhysicalType.BYTE_ARRAY)
    assert leaf.basic_info.repetition is Repetition.OPTIONAL
    assert leaf.converted_type is None
    assert leaf.logical_type is None
    assert leaf.physical_type == PhysicalType.BYTE_ARRAY


def test_try_from_primitive_keeps_annotations():
    leaf = try_from_primitive(
        "s", PhysicalType.BYTE_ARRAY, Repetition.REQUIRED,
        PrimitiveConvertedType.UTF8, StringType(), 7,
    )
    assert leaf.converted_type is PrimitiveConvertedType.UTF8
    assert leaf.logical_type == StringType()
    assert leaf.basic_info.id == 7


def test_try_from_primitive_rejects_bad_converted():
    with pytest.raises(ParquetError):
        try_from_primitive(
            "s", PhysicalType.INT32, Repetition.REQUIRED,
            PrimitiveConvertedType.UTF8, None, None,
        )


def test_try_from_primitive_rejects_bad_decimal():
    with pytest.raises(ParquetError):
        try_from_primitive(
            "d", PhysicalType.INT32, Repetition.REQUIRED,
            DecimalConverted(10, 2), None, None,
        )


def test_try_from_primitive_rejects_bad_logical():
    with pytest.raises(ParquetError):
        try_from_primitive(
            "i", PhysicalType.INT32, Repetition.REQUIRED, None, IntType(64, True), None,
        )


def test_try_from_group_keeps_fields():
    child = from_physical("c", PhysicalType.INT64)
    group = try_from_group("g", Repetition.REPEATED, None, None, [child], None)
    assert isinstance(group, GroupType)
    assert group.fields == [child]
    assert group.basic_info.repetition is Repetition.REPEATED


def test_check_contains_itself():
    schema = _schema()
    assert schema.check_contains(_schema())


def test_check_contains_projection():
    projection = new_root(
        "schema",
        [try_from_primitive("a", PhysicalType.INT32, Repetition.REQUIRED, None, None, None)],
    )
    assert _schema().check_contains(projection)


def test_check_contains_rejects_unknown_field():
    projection = new_root("schema", [from_physical("zzz", PhysicalType.INT32)])
    assert not _schema().check_contains(projection)


def test_check_contains_rejects_other_repetition():
    projection = new_root("schema", [from_physical("a", PhysicalType.INT32)])
    assert not _schema().check_contains(projection)


def test_check_contains_rejects_other_physical_type():
    a = from_physical("a", PhysicalType.INT32)
    b = from_physical("a", PhysicalType.INT64)
    assert not a.check_contains(b)
    assert a.check_contains(from_physical("a", PhysicalType.INT32))


def test_check_contains_rejects_mixed_kinds():
    leaf = from_physical("a", PhysicalType.INT32)
    group = from_converted("a", [], Repetition.OPTIONAL, None, None)
    assert not leaf.check_contains(group)
    assert not group.check_contains(leaf)


def test_equality_distinguishes_kinds():
    leaf = from_physical("a", PhysicalType.INT32)
    assert isinstance(leaf, PrimitiveType)
    assert leaf == from_physical("a", PhysicalType.INT32)
    assert not leaf == from_physical("a", PhysicalType.FLOAT)