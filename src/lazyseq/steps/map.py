from typing import Callable, Iterable, Iterator, Tuple, TypeVar

from lazyseq.base import Seq, Step, T, U

W = TypeVar("W")


class Map(Step[T, U]):
    """Map operation to transform each item of a sequence."""

    def __init__(self, func: Callable[[T], U]):
        self.func = func

    def _build(self, seq: Seq[T]) -> Iterator[U]:
        with seq.pull() as items:
            for item in items:
                yield self.func(item)


class MapPairs(Step[Tuple[T, U], W]):
    """Map operation over a sequence of pairs, unpacking each pair into ``func``."""

    def __init__(self, func: Callable[[T, U], W]):
        self.func = func

    def _build(self, seq: Seq[Tuple[T, U]]) -> Iterator[W]:
        with seq.pull() as pairs:
            for first, second in pairs:
                yield self.func(first, second)


class MapToPairs(Step[T, Tuple[U, W]]):
    """Map operation whose function returns a pair for each item."""

    def __init__(self, func: Callable[[T], Tuple[U, W]]):
        self.func = func

    def _build(self, seq: Seq[T]) -> Iterator[Tuple[U, W]]:
        with seq.pull() as items:
            for item in items:
                first, second = self.func(item)
                yield first, second


def map(seq: Iterable[T], func: Callable[[T], U]) -> Seq[U]:
    """Lazily transform each item of ``seq`` with ``func``.

    Example:
        >>> map(range(5), str).collect()
        ['0', '1', '2', '3', '4']
    """
    return Map(func).with_input(seq)


def map_pairs(seq: Iterable[Tuple[T, U]], func: Callable[[T, U], W]) -> Seq[W]:
    """Lazily combine each ``(a, b)`` pair of ``seq`` into ``func(a, b)``.

    Example:
        >>> map_pairs(from_map({1: 2, 3: 4}), lambda k, v: k + v).collect()
        [3, 7]
    """
    return MapPairs(func).with_input(seq)


def map_to_pairs(seq: Iterable[T], func: Callable[[T], Tuple[U, W]]) -> Seq[Tuple[U, W]]:
    """Lazily turn each item of ``seq`` into the pair returned by ``func``.

    Example:
        >>> dict(map_to_pairs(range(3), lambda i: (str(i), i)))
        {'0': 0, '1': 1, '2': 2}
    """
    return MapToPairs(func).with_input(seq)
