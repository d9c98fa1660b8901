# runesets

Small sets of Unicode code points ("runes") that take little memory and answer
membership tests quickly. The package also has helpers for working with
ordered lists of code points.

## Installation

```
pip install runesets
```

## Sets

Every set in `runesets.sets` is a subclass of `Set`. It answers one question
through its `contains(r)` method: is the code point `r` a member? The `in`
operator gives the same answer.

- `Interval(lo, hi)`: every code point from `lo` to `hi`, both included.
- `Uniform(first, count, stride)`: `count` code points that start at `first`
  and sit `stride` apart. A stride of zero gives an empty set.
- `LinearSlice(runes)` / `BinarySlice(runes)`: an ascending sequence of code
  points, searched linearly or by bisection.
- `Bitmap`: a constant-time bitmap. Build it with `new_bitmap(...)` from an
  ordered list of code points, such as a `SliceList`, a `Seq` or a
  `RangeTables`. Its `data` is a three-byte little-endian header that holds
  the smallest code point, followed by one bit per code point up to the
  largest.
- `Union(sets)`: a code point is a member if any of the sets contains it.

```python
from runesets.sets import Interval, Uniform, BinarySlice, Union, new_bitmap
from runesets.iterutil import SliceList

digits = Interval(ord("0"), ord("9"))
odd_small = Uniform(1, 5, 2)            # 1, 3, 5, 7, 9
vowels = BinarySlice([ord(c) for c in "aeiou"])
marks = new_bitmap(SliceList([1, 3, 99, 410]))

either = Union([digits, vowels])
either.contains(ord("7"))   # True
ord("z") in either          # False
odd_small.contains(7)       # True
marks.contains(99)          # True
```

The module also exposes the small helpers that the bitmap is built on:
`ceil_div`, `u32_mid`, `encode_min_rune` and `decode_min_rune`.

## Ordered lists

`runesets.iterutil` has ordered-list types, subclasses of `OrderedList`. They
report `min()`, `max()` and `len()`, and iterate in ascending order. `min()`
and `max()` give zero for an empty list.

- `SliceList(items)`: built from an already sorted sequence.
- `Seq(first, count, stride=1)`: `count` integers that start at `first` and
  sit `stride` apart.

It also has iterator helpers:

- `merge(*iterables)` chains iterables one after another.
- `merge_func(f)` chains the iterables returned by successive calls to `f`
  and stops when `f` returns `None`.
- `except_values(s, x)` yields the values of `s` that are not in `x`.
- `collect(s)` gathers an iterable into a list.

`except_values` and `collect` treat `None` as empty.

```python
from runesets.iterutil import Seq, merge, except_values, collect

collect(Seq(3, 5, 7))                       # [3, 10, 17, 24, 31]
collect(merge([1, 2, 3], [4, 5, 6]))        # [1, 2, 3, 4, 5, 6]
collect(except_values([1, 2, 3, 4], [2]))   # [1, 3, 4]
```

## Unicode range tables

`runesets.unicodecompat` turns tables of `(lo, hi, stride)` ranges into an
ordered list of code points. This is the layout that Unicode category tables
commonly use. `from_ranges(r16, r32)` builds a `RangeTables` from the 16-bit
ranges followed by the 32-bit ones. Each range becomes a `RangeTable`.

```python
from runesets.unicodecompat import from_ranges
from runesets.sets import new_bitmap

white_space = from_ranges([(0x09, 0x0D, 1), (0x20, 0x20, 1)], [])
list(white_space)           # [9, 10, 11, 12, 13, 32]
len(white_space)            # 6
bitmap = new_bitmap(white_space)
bitmap.contains(0x20)       # True
```

## What it does not do

The package ships no Unicode category data. To build a set for a category,
such as white space or letters, you pass its ranges to `from_ranges` yourself.
The sets also do not check their input. Slices must already be sorted in
ascending order, and intervals and range tables must have their lower bound
first.

## Running the tests

```
pip install -e ".[test]"
pytest
```