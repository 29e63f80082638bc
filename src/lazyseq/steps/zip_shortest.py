from typing import Iterable, Iterator, Tuple, Union

from lazyseq.base import Seq, Step, T, U, as_seq


class ZipShortest(Step[T, Tuple[T, U]]):
    """Step pairing each item of its input with the matching item of ``other``.

    Every step pulls one item from the input, then one from ``other``. The
    output ends when either side is exhausted; an item already pulled from
    the input when ``other`` runs out is discarded.
    """

    def __init__(self, other: Union[Seq[U], Iterable[U]]):
        self.other = as_seq(other)

    def _build(self, seq: Seq[T]) -> Iterator[Tuple[T, U]]:
        with seq.pull() as first, self.other.pull() as second:
            while True:
                left, ok = first.next()
                if not ok:
                    return

                right, ok = second.next()
                if not ok:
                    return

                yield left, right


def zip_shortest(first: Iterable[T], second: Iterable[U]) -> Seq[Tuple[T, U]]:
    """Lazily pair up the items of two sequences, stopping with the shorter one.

    Example:
        >>> zip_shortest(["abc", "ghi"], ["def"]).collect()
        [('abc', 'def')]
    """
    return ZipShortest(second).with_input(first)
