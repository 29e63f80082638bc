import itertools
from typing import Any, Callable, Iterable, Iterator, List

from lazyseq.base import Seq, Step, T
from lazyseq.sources import from_slice


class ChunkBy(Step[T, Seq[T]]):
    """Pipeline step that groups consecutive items sharing the same key.

    A new group starts exactly when the key of an item differs (by ``!=``)
    from the key of the item before it, so equal keys that are not adjacent
    land in different groups. Each group is yielded as a Seq over its own
    list; groups never share storage.

    Unlike a dictionary grouping, this is a streaming operation: a group is
    yielded as soon as the first item of the next group has been seen, and
    only the current group is held in memory.

    Example:
        >>> # Split a sequence where the sign changes
        >>> groups = range(-2, 2) | ChunkBy(lambda x: x < 0)
        >>> [group.collect() for group in groups]
        [[-2, -1], [0, 1]]

        >>> # Group words by length
        >>> words = ["cat", "dog", "bird", "fish", "ant"]
        >>> [group.collect() for group in words | ChunkBy(len)]
        [['cat', 'dog'], ['bird', 'fish'], ['ant']]
    """

    def __init__(self, key: Callable[[T], Any]):
        """Initialize the ChunkBy step.

        Args:
            key: Function to extract the grouping key from each item
        """
        self.key = key

    def _build(self, seq: Seq[T]) -> Iterator[Seq[T]]:
        return self._group(seq, self.key)

    def _group(self, seq: Seq[T], key: Callable[[T], Any]) -> Iterator[Seq[T]]:
        with seq.pull() as items:
            item, ok = items.next()
            if not ok:
                return

            group: List[T] = [item]
            last_key = key(item)

            for item in items:
                current_key = key(item)
                if current_key != last_key:
                    yield from_slice(group)
                    group = []
                    last_key = current_key
                group.append(item)

        yield from_slice(group)


class Chunks(ChunkBy[T]):
    """Pipeline step that groups items into chunks of a fixed size.

    The last chunk holds the remaining items and may be shorter. ``size``
    must be at least 1; a size of 0 fails with ZeroDivisionError on the
    first item.

    Example:
        >>> [chunk.collect() for chunk in range(7) | Chunks(3)]
        [[0, 1, 2], [3, 4, 5], [6]]
    """

    def __init__(self, size: int):
        self.size = size

    def _build(self, seq: Seq[T]) -> Iterator[Seq[T]]:
        # The position counter restarts with every traversal
        position = itertools.count()
        return self._group(seq, lambda _item: next(position) // self.size)


def chunk_by(seq: Iterable[T], key: Callable[[T], Any]) -> Seq[Seq[T]]:
    """Lazily split ``seq`` into runs of consecutive items with equal keys.

    Args:
        seq: Input sequence or iterable
        key: Function to extract the grouping key from each item. Keys are
            compared with ``!=``, they do not need to be hashable.

    Returns:
        A Seq of groups, each a Seq of items in original order. An empty
        input yields no groups.

    Examples:
        >>> # Runs of even and odd numbers
        >>> [g.collect() for g in chunk_by([2, 4, 1, 3, 6], lambda x: x % 2)]
        [[2, 4], [1, 3], [6]]

        >>> # Group log lines by day, assuming they are already sorted
        >>> by_day = chunk_by(log_lines, lambda line: line[:10])
    """
    return ChunkBy(key).with_input(seq)


def chunks(seq: Iterable[T], size: int) -> Seq[Seq[T]]:
    """Lazily split ``seq`` into groups of ``size`` items.

    Example:
        >>> [chunk.collect() for chunk in chunks(range(10), 2)]
        [[0, 1], [2, 3], [4, 5], [6, 7], [8, 9]]
    """
    return Chunks(size).with_input(seq)
