"""Conversion between schema trees and flattened schema elements."""

from __future__ import annotations

from collections.abc import Sequence

from .converted_type import (
    converted_to_group_converted,
    converted_to_primitive_converted,
    group_converted_converted_to,
    primitive_converted_to_converted,
)
from .errors import ParquetError
from .format import FieldRepetitionType, SchemaElement
from .parquet_type import (
    GroupType,
    ParquetType,
    PrimitiveType,
    Repetition,
    from_converted,
    new_root,
    try_from_primitive,
)
from .physical_type import physical_type_to_type, type_to_physical_type


def to_thrift(schema: ParquetType) -> list[SchemaElement]:
    """Flatten a schema, depth first, into a list of schema elements."""
    if not schema.is_root:
        raise ParquetError("Root schema must be Group type")
    elements: list[SchemaElement] = []
    _flatten(schema, elements)
    return elements


def _flatten(node: ParquetType, elements: list[SchemaElement]) -> None:
    info = node.basic_info
    if isinstance(node, PrimitiveType):
        type_, type_length = physical_type_to_type(node.physical_type)
        converted, decimal = (
            primitive_converted_to_converted(node.converted_type)
            if node.converted_type is not None
            else (None, None)
        )
        elements.append(
            SchemaElement(
                name=info.name,
                type_=type_,
                type_length=type_length,
                repetition_type=FieldRepetitionType(int(info.repetition)),
                num_children=None,
                converted_type=converted,
                precision=decimal[0] if decimal else None,
                scale=decimal[1] if decimal else None,
                field_id=info.id,
                logical_type=node.logical_type,
            )
        )
        return
    if not isinstance(node, GroupType):
        raise TypeError(f"not a schema node: {node!r}")
    converted = (
        group_converted_converted_to(node.converted_type)
        if node.converted_type is not None
        else None
    )
    # the root of a schema carries no repetition
    repetition = None if info.is_root else FieldRepetitionType(int(info.repetition))
    elements.append(
        SchemaElement(
            name=info.name,
            repetition_type=repetition,
            num_children=len(node.fields),
            converted_type=converted,
            field_id=info.id,
            logical_type=node.logical_type,
        )
    )
    for child in node.fields:
        _flatten(child, elements)


def from_thrift(elements: Sequence[SchemaElement]) -> ParquetType:
    """Rebuild a schema tree from its flattened schema elements."""
    nodes = []
    index = 0
    while index < len(elements):
        index, node = _build(elements, index)
        nodes.append(node)
    if len(nodes) != 1:
        raise ParquetError(f"Expected exactly one root node, but found {len(nodes)}")
    return nodes[0]


def _build(elements: Sequence[SchemaElement], index: int) -> tuple[int, ParquetType]:
    if index >= len(elements):
        raise ParquetError("Schema elements end before all children were read")
    is_root = index == 0
    element = elements[index]

    if not element.num_children:
        if element.repetition_type is None:
            raise ParquetError("Repetition level must be defined for a primitive type")
        if element.type_ is None:
            raise ParquetError("Physical type must be defined for a primitive type")
        physical_type = type_to_physical_type(element.type_, element.type_length)
        converted = None
        if element.converted_type is not None:
            has_precision = element.precision is not None
            has_scale = element.scale is not None
            if has_precision != has_scale:
                raise ParquetError(
                    "When precision or scale are defined, both must be defined"
                )
            decimal = (element.precision, element.scale) if has_precision else None
            converted = converted_to_primitive_converted(element.converted_type, decimal)
        node = try_from_primitive(
            element.name,
            physical_type,
            Repetition(int(element.repetition_type)),
            converted,
            element.logical_type,
            element.field_id,
        )
        return index + 1, node

    repetition = (
        Repetition(int(element.repetition_type))
        if element.repetition_type is not None
        else None
    )
    fields = []
    next_index = index + 1
    for _ in range(element.num_children):
        next_index, child = _build(elements, next_index)
        fields.append(child)

    if is_root:
        return next_index, new_root(element.name, fields)
    converted = (
        converted_to_group_converted(element.converted_type)
        if element.converted_type is not None
        else None
    )
    return next_index, from_converted(
        element.name, fields, repetition, converted, element.field_id
    )