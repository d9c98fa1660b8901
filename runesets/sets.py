"""Compact sets of runes (Unicode code points) with fast membership tests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Optional

from runesets.iterutil import OrderedList

__all__ = [
    "Set",
    "Union",
    "LinearSlice",
    "BinarySlice",
    "Interval",
    "Uniform",
    "Bitmap",
    "new_bitmap",
    "ceil_div",
    "u32_mid",
    "encode_min_rune",
    "decode_min_rune",
]

MAX_UINT16 = (1 << 16) - 1
_U32_MASK = (1 << 32) - 1
# Length of the bitmap header holding the first rune in three little-endian
# bytes; the largest valid rune fits in three bytes.
HEADER_LEN = 3


class Set(ABC):
    """A set of runes."""

    @abstractmethod
    def contains(self, r: int) -> bool:
        """Return whether ``r`` is part of the set."""

    def __contains__(self, r: int) -> bool:
        return self.contains(r)


@dataclass(frozen=True)
class Union(Set):
    """The union of several sets."""

    sets: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "sets", tuple(self.sets or ()))

    def contains(self, r: int) -> bool:
        return any(s.contains(r) for s in self.sets)


@dataclass(frozen=True)
class LinearSlice(Set):
    """A set searched linearly; runes must be sorted ascending."""

    runes: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "runes", tuple(self.runes or ()))

    def contains(self, r: int) -> bool:
        runes = self.runes
        return bool(runes) and runes[0] <= r <= runes[-1] and r in runes


@dataclass(frozen=True)
class BinarySlice(Set):
    """A set searched by bisection; runes must be sorted ascending."""

    runes: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "runes", tuple(self.runes or ()))

    def contains(self, r: int) -> bool:
        runes = self.runes
        if not runes or r < runes[0] or r > runes[-1]:
            return False
        i = bisect_left(runes, r)
        return i < len(runes) and runes[i] == r


@dataclass(frozen=True)
class Interval(Set):
    """The runes in the closed interval [lo, hi]."""

    lo: int = 0
    hi: int = 0

    def contains(self, r: int) -> bool:
        return self.lo <= r <= self.hi


@dataclass(frozen=True)
class Uniform(Set):
    """``count`` runes starting at ``first``, ``stride`` apart."""

    first: int = 0
    count: int = 0
    stride: int = 0

    def contains(self, r: int) -> bool:
        u = (r - self.first) & _U32_MASK
        s = self.stride & _U32_MASK
        c = self.count & _U32_MASK
        return s > 0 and u < (s * c) & _U32_MASK and u % s == 0


@dataclass(frozen=True)
class Bitmap(Set):
    """A set backed by a bitmap, with constant-time lookups."""

    data: bytes = b""

    def contains(self, r: int) -> bool:
        data = self.data
        if len(data) <= HEADER_LEN:
            return False
        u = (r - decode_min_rune(data[0], data[1], data[2])) & _U32_MASK
        i = HEADER_LEN + (u >> 3)
        return i < len(data) and bool(data[i] & (1 << (u & 7)))


def new_bitmap(runes: Optional[OrderedList]) -> Bitmap:
    """Build a Bitmap from an ordered list of runes."""
    if runes is None or len(runes) == 0:
        return Bitmap()
    lo, hi = runes.min(), runes.max()
    span = (hi + 2 - lo) & _U32_MASK
    bits = bytearray(ceil_div(span, 8))
    for r in runes:
        u = (r - lo) & _U32_MASK
        bits[u >> 3] |= 1 << (u & 7)
    return Bitmap(encode_min_rune(lo) + bytes(bits))


def ceil_div(dividend: int, divisor: int) -> int:
    """Integer division rounded up."""
    return (dividend + divisor - 1) // divisor


def u32_mid(a: int, b: int) -> int:
    """The integer midway between ``a`` and ``b``, rounded down."""
    return (a + b) >> 1


def encode_min_rune(r: int) -> bytes:
    """Encode a rune in three little-endian bytes."""
    return bytes((r & 0xFF, (r >> 8) & 0xFF, (r >> 16) & 0xFF))


def decode_min_rune(b0: int, b1: int, b2: int) -> int:
    """Decode a rune encoded by encode_min_rune."""
    return b0 | (b1 << 8) | (b2 << 16)