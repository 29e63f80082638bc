"""Terminal queries over lazy sequences.

Predicates (``all``, ``any``, ``none``) stop traversing as soon as the answer
is known. Extremes (``min``, ``max`` and their ``_func`` variants) report an
empty input through a found flag rather than a placeholder value:

    >>> min([4, 3, 2, -1, 0])
    (-1, True)
    >>> min([])
    (None, False)

The natural ordering used by ``min``, ``max`` and ``is_sorted`` places NaN
before every number.

Comparators are three-way functions returning a negative number, zero or a
positive number, like the ``cmp`` functions accepted by functools.cmp_to_key.
"""

from typing import Any, Callable, Iterable, Optional, Tuple

from lazyseq.base import Seq, Sink, T

Comparator = Callable[[T, T], int]


def _is_nan(value: Any) -> bool:
    return value != value


def compare(a: Any, b: Any) -> int:
    """Three-way comparison using the natural ordering of ``a`` and ``b``.

    NaN sorts before every other value and equal to itself, so sequences
    holding NaN still have a consistent minimum and sort order:

        >>> compare(float("nan"), float("-inf"))
        -1
    """
    a_nan, b_nan = _is_nan(a), _is_nan(b)
    if a_nan or b_nan:
        return b_nan - a_nan
    return (a > b) - (a < b)


class AllMatch(Sink[T, bool]):
    """Terminal operation checking that every item satisfies a predicate."""

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def consume(self, seq: Seq[T]) -> bool:
        with seq.pull() as items:
            for item in items:
                if not self.predicate(item):
                    return False
        return True


class AnyMatch(Sink[T, bool]):
    """Terminal operation checking that some item satisfies a predicate."""

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def consume(self, seq: Seq[T]) -> bool:
        with seq.pull() as items:
            for item in items:
                if self.predicate(item):
                    return True
        return False


class NoneMatch(AnyMatch[T]):
    """Terminal operation checking that no item satisfies a predicate."""

    def consume(self, seq: Seq[T]) -> bool:
        return not super().consume(seq)


class MinFunc(Sink[T, Tuple[Optional[T], bool]]):
    """Terminal operation finding the smallest item according to a comparator.

    When several items are minimal, the first one is returned.
    """

    def __init__(self, cmp: Comparator):
        self.cmp = cmp

    def consume(self, seq: Seq[T]) -> Tuple[Optional[T], bool]:
        with seq.pull() as items:
            smallest, ok = items.next()
            if not ok:
                return None, False

            for item in items:
                if self.cmp(item, smallest) < 0:
                    smallest = item

        return smallest, True


class Min(MinFunc[T]):
    """Terminal operation finding the smallest item by natural ordering."""

    def __init__(self):
        super().__init__(compare)


class MaxFunc(Sink[T, Tuple[Optional[T], bool]]):
    """Terminal operation finding the largest item according to a comparator.

    When several items are maximal, the first one is returned.
    """

    def __init__(self, cmp: Comparator):
        self.cmp = cmp

    def consume(self, seq: Seq[T]) -> Tuple[Optional[T], bool]:
        with seq.pull() as items:
            largest, ok = items.next()
            if not ok:
                return None, False

            for item in items:
                if self.cmp(item, largest) > 0:
                    largest = item

        return largest, True


class Max(MaxFunc[T]):
    """Terminal operation finding the largest item by natural ordering."""

    def __init__(self):
        super().__init__(compare)


class IsSortedFunc(Sink[T, bool]):
    """Terminal operation checking that items never decrease according to a comparator.

    Empty and single-item sequences are sorted. Traversal stops at the first
    item smaller than its predecessor.
    """

    def __init__(self, cmp: Comparator):
        self.cmp = cmp

    def consume(self, seq: Seq[T]) -> bool:
        with seq.pull() as items:
            previous, ok = items.next()
            if not ok:
                return True

            for item in items:
                if self.cmp(previous, item) > 0:
                    return False
                previous = item

        return True


class IsSorted(IsSortedFunc[T]):
    """Terminal operation checking that items never decrease by natural ordering."""

    def __init__(self):
        super().__init__(compare)


def all(seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Report whether every item of ``seq`` satisfies ``predicate``.

    True for an empty sequence. Stops at the first failing item.
    """
    return AllMatch(predicate).with_input(seq)


def any(seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Report whether some item of ``seq`` satisfies ``predicate``.

    False for an empty sequence. Stops at the first matching item.
    """
    return AnyMatch(predicate).with_input(seq)


def none(seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Report whether no item of ``seq`` satisfies ``predicate``.

    True for an empty sequence. Stops at the first matching item.
    """
    return NoneMatch(predicate).with_input(seq)


def min_func(seq: Iterable[T], cmp: Comparator) -> Tuple[Optional[T], bool]:
    """Return ``(smallest, True)`` according to ``cmp``, or ``(None, False)`` if empty.

    Example:
        >>> min_func(["ghi", "abc", "def"], lambda a, b: len(a) - len(b))
        ('ghi', True)
    """
    return MinFunc(cmp).with_input(seq)


def min(seq: Iterable[T]) -> Tuple[Optional[T], bool]:
    """Return ``(smallest, True)``, or ``(None, False)`` if ``seq`` is empty."""
    return Min().with_input(seq)


def max_func(seq: Iterable[T], cmp: Comparator) -> Tuple[Optional[T], bool]:
    """Return ``(largest, True)`` according to ``cmp``, or ``(None, False)`` if empty."""
    return MaxFunc(cmp).with_input(seq)


def max(seq: Iterable[T]) -> Tuple[Optional[T], bool]:
    """Return ``(largest, True)``, or ``(None, False)`` if ``seq`` is empty."""
    return Max().with_input(seq)


def is_sorted_func(seq: Iterable[T], cmp: Comparator) -> bool:
    """Report whether each item compares ``>= 0`` against its predecessor with ``cmp``."""
    return IsSortedFunc(cmp).with_input(seq)


def is_sorted(seq: Iterable[T]) -> bool:
    """Report whether the items of ``seq`` are in non-decreasing order.

    Examples:
        >>> is_sorted([1, 2, 2, 3])
        True
        >>> is_sorted([2, 1, 3])
        False
    """
    return IsSorted().with_input(seq)
