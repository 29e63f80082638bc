from typing import Iterable, Iterator

from lazyseq.base import Seq, Step, T, as_seq


class Flatten(Step[Iterable[T], T]):
    """Pipeline step that yields the items of each nested sequence in turn.

    Every item of the outer sequence must itself be a Seq or any other
    iterable. The inner sequence is exhausted before the outer sequence is
    advanced.

    Example:
        >>> # Extract nested list items
        >>> nested = [[1, 2], [3, 4, 5], [6]]
        >>> (nested | Flatten()).collect()
        [1, 2, 3, 4, 5, 6]

        >>> # Expand each item with map, then flatten
        >>> (range(3) | Map(lambda v: repeat_n(v, 2)) | Flatten()).collect()
        [0, 0, 1, 1, 2, 2]

    Note:
        Empty inner sequences are valid and contribute no items.
    """

    def _build(self, seq: Seq[Iterable[T]]) -> Iterator[T]:
        with seq.pull() as outer:
            for inner in outer:
                with as_seq(inner).pull() as items:
                    yield from items


def flatten(seq: Iterable[Iterable[T]]) -> Seq[T]:
    """Lazily concatenate the sequences yielded by ``seq``.

    Args:
        seq: A sequence whose items are sequences or iterables

    Returns:
        A Seq of the inner items, in order

    Examples:
        >>> flatten([range(2), [], "ab"]).collect()
        [0, 1, 'a', 'b']

        >>> # Text processing: split sentences into words
        >>> sentences = ["Hello world", "Python is great"]
        >>> flatten(map(sentences, str.split)).collect()
        ['Hello', 'world', 'Python', 'is', 'great']
    """
    return Flatten().with_input(seq)
