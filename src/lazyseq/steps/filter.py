from typing import Callable, Iterable, Iterator

from lazyseq.base import Seq, Step, T


class Filter(Step[T, T]):
    """Step that keeps only the items satisfying a predicate.

    Items for which the predicate returns a falsy value are dropped; the
    relative order of the kept items is unchanged.

    Example:
        >>> # Keep only even numbers
        >>> (range(10) | Filter(lambda x: x % 2 == 0)).collect()
        [0, 2, 4, 6, 8]

        >>> # Filter strings by length
        >>> words = ["hi", "hello", "world", "a", "python"]
        >>> (words | Filter(lambda s: len(s) > 2)).collect()
        ['hello', 'world', 'python']
    """

    def __init__(self, predicate: Callable[[T], bool]):
        """Initialize the Filter step.

        Args:
            predicate: Function that returns True for items to keep
        """
        self.predicate = predicate

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        with seq.pull() as items:
            for item in items:
                if self.predicate(item):
                    yield item


def filter(seq: Iterable[T], predicate: Callable[[T], bool]) -> Seq[T]:
    """Lazily keep the items of ``seq`` that satisfy ``predicate``.

    Args:
        seq: Input sequence or iterable
        predicate: Function that returns True for items to keep

    Returns:
        A Seq of the matching items, in input order

    Examples:
        >>> filter(range(6), lambda x: x % 2 == 0).collect()
        [0, 2, 4]

        >>> # Works on infinite sequences
        >>> take(filter(with_func(random.random), lambda x: x > 0.5), 3).collect()
    """
    return Filter(predicate).with_input(seq)
