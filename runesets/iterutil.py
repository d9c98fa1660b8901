"""Ordered lists of values and helpers to combine their iterators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import chain
from typing import Callable, Iterable, Iterator, Optional

__all__ = [
    "OrderedList",
    "SliceList",
    "Seq",
    "merge_func",
    "merge",
    "except_values",
    "collect",
]


class OrderedList(ABC):
    """A list of distinct values iterated in ascending order."""

    @abstractmethod
    def min(self):
        """Smallest value, or zero if the list is empty."""

    @abstractmethod
    def max(self):
        """Largest value, or zero if the list is empty."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of values in the list."""

    @abstractmethod
    def __iter__(self) -> Iterator:
        """Iterate over the values in ascending order."""


@dataclass(frozen=True)
class SliceList(OrderedList):
    """An ordered list backed by a sequence already sorted ascending."""

    items: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items or ()))

    def min(self):
        return self.items[0] if self.items else 0

    def max(self):
        return self.items[-1] if self.items else 0

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator:
        return iter(self.items)


@dataclass(frozen=True)
class Seq(OrderedList):
    """``count`` integers starting at ``first``, ``stride`` apart."""

    first: int
    count: int
    stride: int = 1

    def min(self) -> int:
        return self.first

    def max(self) -> int:
        return self.first + (self.count - 1) * self.stride

    def __len__(self) -> int:
        return max(self.count, 0)

    def __iter__(self) -> Iterator[int]:
        value = self.first
        for _ in range(self.count):
            yield value
            value += self.stride


def _merge_from(f: Callable[[], Optional[Iterable]]) -> Iterator:
    while (it := f()) is not None:
        yield from it


def merge_func(f: Optional[Callable[[], Optional[Iterable]]]) -> Iterator:
    """Chain the iterables returned by successive calls to ``f`` until it returns None."""
    if f is None:
        return iter(())
    return _merge_from(f)


def merge(*args: Iterable) -> Iterator:
    """Chain the given iterables one after another."""
    return chain(*args)


def _except(s: Iterable, excluded: frozenset) -> Iterator:
    for value in s:
        if value not in excluded:
            yield value


def except_values(s: Optional[Iterable], x: Optional[Iterable]) -> Iterator:
    """Yield the values of ``s`` that are not in ``x``."""
    if s is None:
        return iter(())
    excluded = frozenset(x) if x is not None else frozenset()
    return _except(s, excluded)


def collect(s: Optional[Iterable]) -> list:
    """Return all the values of ``s`` as a list."""
    if s is None:
        return []
    return list(s)