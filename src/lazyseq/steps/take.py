from typing import Any, Callable, Iterable, Iterator

from lazyseq.base import Seq, Step, T


def countdown(n: int) -> Callable[[Any], bool]:
    """Return a predicate that holds for its first ``n`` calls only."""
    remaining = n

    def predicate(_item: Any) -> bool:
        nonlocal remaining
        if remaining == 0:
            return False
        remaining -= 1
        return True

    return predicate


class TakeWhile(Step[T, T]):
    """Step yielding items as long as they satisfy a predicate.

    The first item failing the predicate ends the output; it is not yielded
    and nothing after it is pulled from the input.
    """

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        with seq.pull() as items:
            for item in items:
                if not self.predicate(item):
                    return
                yield item


class Take(Step[T, T]):
    """Take step yielding at most the first N items.

    The input is released as soon as the N-th item has been yielded, so
    ``Take`` is the usual way to bound an infinite sequence.
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("n must be greater than or equal to 0")

        self.n = n

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        if self.n == 0:
            return

        with seq.pull() as items:
            for taken, item in enumerate(items, start=1):
                yield item
                if taken == self.n:
                    return


def take_while(seq: Iterable[T], predicate: Callable[[T], bool]) -> Seq[T]:
    """Lazily yield the items of ``seq`` until one fails ``predicate``.

    Example:
        >>> take_while(range(5), lambda x: x < 3).collect()
        [0, 1, 2]
    """
    return TakeWhile(predicate).with_input(seq)


def take(seq: Iterable[T], n: int) -> Seq[T]:
    """Lazily yield the first ``n`` items of ``seq``.

    Args:
        seq: Input sequence or iterable, possibly infinite
        n: Maximum number of items; 0 yields nothing

    Returns:
        A Seq of at most ``n`` items

    Raises:
        ValueError: If n is negative

    Examples:
        >>> take(range(5), 3).collect()
        [0, 1, 2]

        >>> take(repeat("a"), 2).collect()
        ['a', 'a']
    """
    return Take(n).with_input(seq)
