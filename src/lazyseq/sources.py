"""Constructors for lazy sequences."""

from typing import Callable, Iterable, Iterator, Mapping, Sequence, Tuple, TypeVar

from lazyseq.base import Seq, as_seq

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def from_slice(values: Sequence[T]) -> Seq[T]:
    """Create a sequence yielding the items of ``values`` in stored order.

    The collection is referenced, not copied: a traversal sees its content at
    the time the traversal reaches each position.

    Example:
        >>> from_slice([0, 1, 2]).collect()
        [0, 1, 2]
    """
    return Seq(lambda: iter(values))


def from_map(mapping: Mapping[K, V]) -> Seq[Tuple[K, V]]:
    """Create a sequence of the ``(key, value)`` pairs of ``mapping``.

    The order of the pairs is whatever order the mapping iterates in; callers
    must not depend on it.
    """
    return Seq(lambda: iter(mapping.items()))


def from_iterable(iterable: Iterable[T]) -> Seq[T]:
    """Create a sequence from any iterable.

    Equivalent to as_seq. Traversing the result more than once is only
    meaningful when ``iterable`` can itself be iterated more than once.
    """
    return as_seq(iterable)


def reverse_slice(values: Sequence[T]) -> Seq[T]:
    """Create a sequence yielding the items of ``values`` from last to first."""
    return Seq(lambda: reversed(values))


def _call_forever(func: Callable[[], T]) -> Iterator[T]:
    while True:
        yield func()


def with_func(func: Callable[[], T]) -> Seq[T]:
    """Create an infinite sequence of the results of calling ``func``.

    ``func`` is called once per item, only when the item is requested, so
    stateful functions such as counters behave predictably.

    Examples:
        >>> counter = itertools.count()
        >>> take(with_func(lambda: next(counter)), 3).collect()
        [0, 1, 2]
    """
    return Seq(lambda: _call_forever(func))


def repeat(value: T) -> Seq[T]:
    """Create an infinite sequence repeating ``value``."""
    return with_func(lambda: value)


def repeat_n(value: T, n: int) -> Seq[T]:
    """Create a sequence repeating ``value`` exactly ``n`` times.

    Raises:
        ValueError: If n is negative
    """
    # Deferred: the steps package imports this module
    from lazyseq.steps.take import take

    return take(repeat(value), n)
