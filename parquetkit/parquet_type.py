"""Tree representation of parquet schemas: primitive leaves and groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .converted_type import GroupConvertedType, PrimitiveConverted
from .format import LogicalType
from .physical_type import PhysicalType
from .spec import check_converted_invariants, check_logical_invariants


class Repetition(IntEnum):
    """How often a field may occur within its parent."""

    REQUIRED = 0
    OPTIONAL = 1
    REPEATED = 2


@dataclass(frozen=True)
class BasicTypeInfo:
    """Information shared by every node of a schema."""

    name: str
    repetition: Repetition
    is_root: bool = False
    id: int | None = None


class ParquetType:
    """A node of a parquet schema: a primitive leaf or a group."""

    basic_info: BasicTypeInfo

    @property
    def name(self) -> str:
        """The field name of this node."""
        return self.basic_info.name

    @property
    def is_root(self) -> bool:
        """Whether this node is the root of the schema."""
        return self.basic_info.is_root

    def check_contains(self, sub_type: ParquetType) -> bool:
        """Return whether `sub_type` is a projection of this schema."""
        mine, theirs = self.basic_info, sub_type.basic_info
        basic_match = mine.name == theirs.name and (
            (mine.is_root and theirs.is_root)
            or (
                not mine.is_root
                and not theirs.is_root
                and mine.repetition == theirs.repetition
            )
        )
        if isinstance(self, PrimitiveType) and isinstance(sub_type, PrimitiveType):
            return basic_match and self.physical_type == sub_type.physical_type
        if isinstance(self, GroupType) and isinstance(sub_type, GroupType):
            by_name = {child.name: child for child in self.fields}
            return all(
                child.name in by_name and by_name[child.name].check_contains(child)
                for child in sub_type.fields
            )
        return False


@dataclass
class PrimitiveType(ParquetType):
    """A leaf field holding values of a physical type."""

    basic_info: BasicTypeInfo
    physical_type: PhysicalType
    logical_type: LogicalType | None = None
    converted_type: PrimitiveConverted | None = None


@dataclass
class GroupType(ParquetType):
    """A group of fields, including the schema root."""

    basic_info: BasicTypeInfo
    fields: list[ParquetType] = field(default_factory=list)
    logical_type: LogicalType | None = None
    converted_type: GroupConvertedType | None = None


def new_root(name: str, fields: list[ParquetType]) -> GroupType:
    """Create the root group of a schema."""
    return GroupType(
        basic_info=BasicTypeInfo(name, Repetition.OPTIONAL, is_root=True),
        fields=list(fields),
    )


def from_converted(
    name: str,
    fields: list[ParquetType],
    repetition: Repetition | None,
    converted_type: GroupConvertedType | None,
    id: int | None,
) -> GroupType:
    """Create a non-root group; a missing repetition means optional."""
    rep = Repetition.OPTIONAL if repetition is None else Repetition(repetition)
    return GroupType(
        basic_info=BasicTypeInfo(name, rep, is_root=False, id=id),
        fields=list(fields),
        converted_type=converted_type,
    )


def try_from_primitive(
    name: str,
    physical_type: PhysicalType,
    repetition: Repetition,
    converted_type: PrimitiveConverted | None,
    logical_type: LogicalType | None,
    id: int | None,
) -> PrimitiveType:
    """Create a primitive field, checking its annotations against its type."""
    check_converted_invariants(physical_type, converted_type)
    check_logical_invariants(physical_type, logical_type)
    return PrimitiveType(
        basic_info=BasicTypeInfo(name, Repetition(repetition), is_root=False, id=id),
        physical_type=physical_type,
        logical_type=logical_type,
        converted_type=converted_type,
    )


def from_physical(name: str, physical_type: PhysicalType) -> PrimitiveType:
    """Create an optional, unannotated primitive field."""
    return PrimitiveType(
        basic_info=BasicTypeInfo(name, Repetition.OPTIONAL),
        physical_type=physical_type,
    )


def try_from_group(
    name: str,
    repetition: Repetition,
    converted_type: GroupConvertedType | None,
    logical_type: LogicalType | None,
    fields: list[ParquetType],
    id: int | None,
) -> GroupType:
    """Create a non-root group with the given annotations."""
    return GroupType(
        basic_info=BasicTypeInfo(name, Repetition(repetition), is_root=False, id=id),
        fields=list(fields),
        logical_type=logical_type,
        converted_type=converted_type,
    )