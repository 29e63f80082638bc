"""Tests for terminal queries."""

import math

import pytest

import lazyseq as ls


class TestPredicates:
    def test_all(self):
        assert ls.all(range(3), lambda v: v >= 0) is True
        assert ls.all(range(3), lambda v: v > 1) is False
        assert ls.all(range(3), lambda v: v < 2) is False

    def test_any(self):
        assert ls.any(range(3), lambda v: v >= 0) is True
        assert ls.any(range(3), lambda v: v > 2) is False
        assert ls.any(range(3), lambda v: v % 2 == 1) is True

    def test_none(self):
        assert ls.none(range(3), lambda v: v < 0) is True
        assert ls.none(range(3), lambda v: v < 2) is False
        assert ls.none(range(3), lambda v: v % 2 == 1) is False

    def test_empty_sequences(self):
        assert ls.all([], lambda v: False) is True
        assert ls.none([], lambda v: True) is True
        assert ls.any([], lambda v: True) is False

    def test_short_circuit_on_infinite_sequences(self, recording):
        source = recording()
        assert ls.any(source.seq, lambda v: v == 3) is True
        assert source.pulled == [0, 1, 2, 3]
        assert source.open == 0

        source = recording()
        assert ls.all(source.seq, lambda v: v < 2) is False
        assert source.pulled == [0, 1, 2]

        source = recording()
        assert ls.none(source.seq, lambda v: v > 0) is False
        assert source.pulled == [0, 1]

    def test_pipe_syntax(self):
        assert [1, 2, 3] | ls.AllMatch(lambda v: v > 0)
        assert not [1, 2, 3] | ls.AnyMatch(lambda v: v > 3)
        assert [1, 2, 3] | ls.NoneMatch(lambda v: v > 3)


class TestExtremes:
    def test_min(self):
        assert ls.min(range(3)) == (0, True)
        assert ls.min([4, 3, 2, -1, 0]) == (-1, True)
        assert ls.min([]) == (None, False)

    def test_max(self):
        assert ls.max(range(3)) == (2, True)
        assert ls.max([4, 3, 2, -1, 0]) == (4, True)
        assert ls.max([4, 3, 2, 5, 0]) == (5, True)
        assert ls.max([]) == (None, False)

    def test_min_func(self):
        assert ls.min_func(["ghi", "abc", "def"], ls.compare) == ("abc", True)
        assert ls.min_func([], ls.compare) == (None, False)

    def test_max_func(self):
        assert ls.max_func(["abc", "ghi", "def"], ls.compare) == ("ghi", True)
        assert ls.max_func([], ls.compare) == (None, False)

    def test_ties_keep_first_seen(self):
        by_length = lambda a, b: len(a) - len(b)  # noqa: E731
        words = ["bb", "a", "c", "dd"]
        assert ls.min_func(words, by_length) == ("a", True)
        assert ls.max_func(words, by_length) == ("bb", True)

    def test_found_flag_distinguishes_none_items(self):
        assert ls.min([None]) == (None, True)

    def test_pipe_syntax(self):
        assert [4, 3, 2, -1, 0] | ls.Min() == (-1, True)
        assert [4, 3, 2, -1, 0] | ls.Max() == (4, True)
        assert ["bb", "a"] | ls.MinFunc(lambda a, b: len(a) - len(b)) == ("a", True)


class TestSorted:
    @pytest.mark.parametrize(
        "items, expected",
        [
            ([1, 2, 2, 3], True),
            ([2, 1, 3], False),
            ([], True),
            ([42], True),
            ([3, 3, 3], True),
            (["a", "b", "c"], True),
        ],
    )
    def test_is_sorted(self, items, expected):
        assert ls.is_sorted(items) is expected

    def test_is_sorted_func(self):
        descending = lambda a, b: ls.compare(b, a)  # noqa: E731
        assert ls.is_sorted_func([3, 2, 2, 1], descending) is True
        assert ls.is_sorted_func([1, 2], descending) is False

    def test_stops_at_first_inversion(self, recording):
        source = recording([1, 3, 2, 4, 5])
        assert ls.is_sorted(source.seq) is False
        assert source.pulled == [1, 3, 2]
        assert source.open == 0

    def test_pipe_syntax(self):
        assert range(10) | ls.IsSorted()
        assert not [2, 1] | ls.IsSortedFunc(ls.compare)


def test_compare():
    assert ls.compare(1, 2) == -1
    assert ls.compare(2, 2) == 0
    assert ls.compare("b", "a") == 1


def test_compare_orders_nan_first():
    nan = math.nan
    assert ls.compare(nan, -math.inf) == -1
    assert ls.compare(1.0, nan) == 1
    assert ls.compare(nan, nan) == 0


def test_nan_in_queries():
    nan = math.nan
    assert not ls.is_sorted([1.0, nan])
    assert ls.is_sorted([nan, nan, 1.0, 2.0])

    smallest, found = ls.min([1.0, nan, 0.5])
    assert found and math.isnan(smallest)
    assert ls.max([1.0, nan, 0.5]) == (1.0, True)
