"""Index sorting and unique-value helpers."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any


def sort_indexes(values: Sequence[Any]) -> list[int]:
    """Return the indexes into ``values`` ordered by value, largest first."""
    return sorted(range(len(values)), key=values.__getitem__, reverse=True)


@dataclass
class UniqueResult:
    """Unique values in order of first appearance, with bookkeeping.

    ``index[j]`` is the position in the input where ``unique[j]`` first
    appears, ``inverse[i]`` is the position in ``unique`` of input element
    ``i``, and ``count[j]`` is the number of times ``unique[j]`` occurs.
    """

    unique: list[Any] = field(default_factory=list)
    index: list[int] = field(default_factory=list)
    inverse: list[int] = field(default_factory=list)
    count: list[int] = field(default_factory=list)


def unordered_unique(values: Iterable[Hashable]) -> UniqueResult:
    """Find the unique elements of ``values`` without sorting them."""
    result = UniqueResult()
    positions: dict[Hashable, int] = {}
    for cur_idx, value in enumerate(values):
        pos = positions.get(value)
        if pos is None:
            pos = len(result.unique)
            positions[value] = pos
            result.unique.append(value)
            result.index.append(cur_idx)
            result.count.append(1)
        else:
            result.count[pos] += 1
        result.inverse.append(pos)
    return result