from typing import Iterable, Iterator, Union

from lazyseq.base import Seq, Step, T, as_seq


class Chain(Step[T, T]):
    """Step yielding every item of its input, then every item of ``other``.

    ``other`` is only traversed once the input is exhausted; if the consumer
    stops during the input, ``other`` is never started.
    """

    def __init__(self, other: Union[Seq[T], Iterable[T]]):
        self.other = as_seq(other)

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        with seq.pull() as items:
            yield from items

        with self.other.pull() as items:
            yield from items


def chain(first: Iterable[T], second: Iterable[T]) -> Seq[T]:
    """Lazily concatenate two sequences.

    Example:
        >>> chain(range(3), range(5, 7)).collect()
        [0, 1, 2, 5, 6]
    """
    return Chain(second).with_input(first)
