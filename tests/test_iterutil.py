import pytest

from runesets.iterutil import (
    Seq,
    SliceList,
    collect,
    except_values,
    merge,
    merge_func,
)

_SENTINEL = object()


def _check_iter(it, expected):
    it = iter(it)
    got = []
    for value in it:
        got.append(value)
    assert got == list(expected)
    for _ in range(10):
        assert next(it, _SENTINEL) is _SENTINEL


def _check_list(lst, expected):
    assert expected == sorted(set(expected))
    if expected:
        assert lst.min() == expected[0]
        assert lst.max() == expected[-1]
    else:
        assert lst.min() == 0
        assert lst.max() == 0
    assert len(lst) == len(expected)
    _check_iter(iter(lst), expected)


@pytest.mark.parametrize(
    "items, expected",
    [
        (None, []),
        ((), []),
        ((1,), [1]),
        ((1, 2, 3), [1, 2, 3]),
    ],
)
def test_slice_list(items, expected):
    _check_list(SliceList(items), expected)


@pytest.mark.parametrize(
    "seq, expected",
    [
        (Seq(1, 1, 1), [1]),
        (Seq(10, 10, 10), [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]),
    ],
)
def test_seq(seq, expected):
    _check_list(seq, expected)


@pytest.mark.parametrize(
    "first, count, stride, expected",
    [
        (1, 0, 1, []),
        (1, 1, 1, [1]),
        (3, 5, 7, [3, 10, 17, 24, 31]),
    ],
)
def test_seq_collect(first, count, stride, expected):
    assert collect(Seq(first, count, stride)) == expected


def test_seq_default_stride():
    assert collect(Seq(5, 3)) == [5, 6, 7]


def test_slice_list_and_seq_agree():
    slice_list = SliceList((4, 5, 6))
    seq = Seq(4, 3)
    assert collect(slice_list) == [4, 5, 6]
    assert collect(seq) == [4, 5, 6]
    assert (slice_list.min(), slice_list.max(), len(slice_list)) == (4, 6, 3)
    assert (seq.min(), seq.max(), len(seq)) == (4, 6, 3)


@pytest.mark.parametrize(
    "iterables, expected",
    [
        ([], []),
        ([iter(SliceList((1,)))], [1]),
        ([iter(SliceList((1, 2, 3, 4, 5, 6)))], [1, 2, 3, 4, 5, 6]),
        (
            [iter(SliceList((1, 2, 3))), iter(SliceList((4, 5, 6)))],
            [1, 2, 3, 4, 5, 6],
        ),
    ],
)
def test_merge(iterables, expected):
    _check_iter(merge(*iterables), expected)


def test_merge_func_none_is_empty():
    _check_iter(merge_func(None), [])


def test_merge_func_calls_until_none():
    parts = [[1, 2], [], [3], [4, 5]]
    pending = iter(parts)

    def next_part():
        return next(pending, None)

    _check_iter(merge_func(next_part), [1, 2, 3, 4, 5])


@pytest.mark.parametrize(
    "s, x, expected",
    [
        (None, None, []),
        ((), None, []),
        ((1, 2, 3), None, [1, 2, 3]),
        ((1, 2, 3), (), [1, 2, 3]),
        ((1, 2, 3), (1,), [2, 3]),
        ((1, 2, 3), (3,), [1, 2]),
        ((1, 2, 3, 4, 5, 6), (1, 6), [2, 3, 4, 5]),
        ((1, 2, 3, 4, 5, 6), (2, 3), [1, 4, 5, 6]),
        ((1, 2, 3, 4, 5, 6), (1, 4, 5, 6), [2, 3]),
    ],
)
def test_except_values(s, x, expected):
    s_iter = None if s is None else iter(SliceList(s))
    x_iter = None if x is None else iter(SliceList(x))
    _check_iter(except_values(s_iter, x_iter), expected)


@pytest.mark.parametrize(
    "s, expected",
    [
        (None, []),
        (iter(SliceList(())), []),
        (iter(SliceList((1,))), [1]),
        (iter(SliceList((1, 2, 3))), [1, 2, 3]),
    ],
)
def test_collect(s, expected):
    assert collect(s) == expected