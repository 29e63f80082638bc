from typing import Callable, Iterable, Iterator

from lazyseq.base import Seq, Step, T
from lazyseq.steps.take import countdown


class DropWhile(Step[T, T]):
    """Pipeline step that discards a leading run of items satisfying a predicate.

    The first item failing the predicate is yielded, and from then on every
    remaining item is yielded without consulting the predicate again. A single
    cursor carries the traversal across both phases, so the input is never
    restarted.

    Example:
        >>> (range(5) | DropWhile(lambda x: x < 3)).collect()
        [3, 4]

        >>> # The predicate only applies to the leading run
        >>> ([1, 5, 1] | DropWhile(lambda x: x < 3)).collect()
        [5, 1]
    """

    def __init__(self, predicate: Callable[[T], bool]):
        """Initialize the DropWhile step.

        Args:
            predicate: Items are dropped while this returns True
        """
        self.predicate = predicate

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        with seq.pull() as items:
            for item in items:
                if not self.predicate(item):
                    yield item
                    break

            yield from items


class Drop(Step[T, T]):
    """Pipeline step that skips the first N items of a sequence.

    Example:
        >>> # Skip first 3 numbers
        >>> (range(10) | Drop(3)).collect()
        [3, 4, 5, 6, 7, 8, 9]

        >>> # Drop and take combination (pagination)
        >>> page_2 = (range(100) | Drop(10) | Take(10)).collect()
        >>> # [10, 11, 12, 13, 14, 15, 16, 17, 18, 19]
    """

    def __init__(self, n: int):
        """Initialize the Drop step.

        Args:
            n: Number of items to skip

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError("n must be greater than or equal to 0")

        self.n = n

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        # Each traversal counts down from n again
        return DropWhile(countdown(self.n))._build(seq)


def drop_while(seq: Iterable[T], predicate: Callable[[T], bool]) -> Seq[T]:
    """Lazily skip the leading items of ``seq`` that satisfy ``predicate``.

    Args:
        seq: Input sequence or iterable
        predicate: Items are dropped while this returns True

    Returns:
        A Seq starting at the first item failing ``predicate``; empty if
        every item satisfies it

    Examples:
        >>> drop_while(range(5), lambda x: x < 3).collect()
        [3, 4]

        >>> drop_while(range(5), lambda x: True).collect()
        []
    """
    return DropWhile(predicate).with_input(seq)


def drop(seq: Iterable[T], n: int) -> Seq[T]:
    """Lazily skip the first ``n`` items of ``seq``.

    Args:
        seq: Input sequence or iterable
        n: Number of items to skip. Must be non-negative.

    Returns:
        A Seq of the items after the first ``n``; empty if ``seq`` is shorter

    Raises:
        ValueError: If n is negative

    Examples:
        >>> drop(range(5), 3).collect()
        [3, 4]

        >>> # Pagination: skip first page, take second page
        >>> page_size = 10
        >>> take(drop(range(100), page_size), page_size).collect()
        [10, 11, 12, 13, 14, 15, 16, 17, 18, 19]
    """
    return Drop(n).with_input(seq)
