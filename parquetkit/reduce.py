"""Merging of per-page statistics into the statistics of a column chunk."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from functools import reduce as _fold
from typing import Any

from .errors import OutOfSpecError
from .native import native_ord
from .physical_type import PhysicalKind
from .statistics import (
    BinaryStatistics,
    BooleanStatistics,
    FixedLenStatistics,
    PrimitiveStatistics,
    Statistics,
)


def _merge(x: Any, y: Any, pick: Callable[[Any, Any], Any]) -> Any:
    if x is None:
        return y
    if y is None:
        return x
    return pick(x, y)


def _add(x: int, y: int) -> int:
    return x + y


def _ord_binary(a: bytes, b: bytes, is_max: bool) -> bytes:
    for left, right in zip(a, b):
        if left > right:
            return a if is_max else b
        if left < right:
            return b if is_max else a
    return a


def _boolean_min(x: bool, y: bool) -> bool:
    return y if x and not y else x


def _boolean_max(x: bool, y: bool) -> bool:
    return x if x and not y else y


def _pickers(first: Statistics) -> tuple[Callable, Callable]:
    if isinstance(first, BooleanStatistics):
        return _boolean_min, _boolean_max
    if isinstance(first, PrimitiveStatistics):
        physical_type = first.physical_type

        def pick_min(x, y):
            return y if native_ord(x, y, physical_type) > 0 else x

        # The larger accumulated value is replaced, so this keeps the smaller one.
        def pick_max(x, y):
            return x if native_ord(x, y, physical_type) < 0 else y

        return pick_min, pick_max
    if isinstance(first, (BinaryStatistics, FixedLenStatistics)):
        return (
            lambda x, y: _ord_binary(x, y, False),
            lambda x, y: _ord_binary(x, y, True),
        )
    raise TypeError(f"not a statistics object: {first!r}")


def reduce(stats: Iterable[Statistics | None]) -> Statistics | None:
    """Fold statistics of one column into one; missing entries are skipped.

    Returns None when there is nothing to fold. Raises OutOfSpecError when
    the statistics are of different physical types.
    """
    present = [item for item in stats if item is not None]
    if not present:
        return None
    first = present[0]
    if any(item.physical_type != first.physical_type for item in present[1:]):
        raise OutOfSpecError("The statistics do not have the same data_type")
    if first.physical_type.kind is PhysicalKind.BOOLEAN:
        if not all(isinstance(item, BooleanStatistics) for item in present):
            raise OutOfSpecError("The statistics do not have the same data_type")
    pick_min, pick_max = _pickers(first)

    def step(acc: Statistics, new: Statistics) -> Statistics:
        return dataclasses.replace(
            acc,
            min_value=_merge(acc.min_value, new.min_value, pick_min),
            max_value=_merge(acc.max_value, new.max_value, pick_max),
            null_count=_merge(acc.null_count, new.null_count, _add),
            distinct_count=None,
        )

    return _fold(step, present[1:], dataclasses.replace(first))