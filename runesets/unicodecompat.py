"""Ordered rune lists built from Unicode-style range tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

from runesets.iterutil import OrderedList, merge

__all__ = ["RangeTable", "RangeTables", "from_ranges"]

RangeTriple = Tuple[int, int, int]


@dataclass(frozen=True)
class RangeTable(OrderedList):
    """The runes from ``lo`` to ``hi`` inclusive, ``stride`` apart."""

    lo: int
    hi: int
    stride: int = 1

    def min(self) -> int:
        return self.lo

    def max(self) -> int:
        return self.hi

    def __len__(self) -> int:
        return 1 + int((self.hi - self.lo) / self.stride)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.lo, self.hi + 1, self.stride))


@dataclass(frozen=True)
class RangeTables(OrderedList):
    """An ordered rune list made of consecutive, non-overlapping range tables."""

    tables: Tuple[RangeTable, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "tables", tuple(self.tables or ()))

    def min(self) -> int:
        return self.tables[0].min() if self.tables else 0

    def max(self) -> int:
        return self.tables[-1].max() if self.tables else 0

    def __len__(self) -> int:
        return sum(len(table) for table in self.tables)

    def __iter__(self) -> Iterator[int]:
        return merge(*self.tables)


def from_ranges(
    r16: Optional[Iterable[RangeTriple]],
    r32: Optional[Iterable[RangeTriple]],
) -> RangeTables:
    """Build RangeTables from 16-bit and 32-bit ``(lo, hi, stride)`` ranges."""
    tables = [RangeTable(lo, hi, stride) for lo, hi, stride in (r16 or ())]
    tables.extend(RangeTable(lo, hi, stride) for lo, hi, stride in (r32 or ()))
    return RangeTables(tuple(tables))