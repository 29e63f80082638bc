from typing import Iterable, Iterator, Union

from lazyseq.base import Seq, Step, T, as_seq


class InterleaveShortest(Step[T, T]):
    """Step alternating between its input and ``other``, starting with the input.

    Each side is driven by its own cursor, one item per turn. The output ends
    as soon as the side whose turn it is has no item left, even if the other
    side still has some.

    Example:
        >>> (["abc", "ghi"] | InterleaveShortest(["def"])).collect()
        ['abc', 'def', 'ghi']
    """

    def __init__(self, other: Union[Seq[T], Iterable[T]]):
        self.other = as_seq(other)

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        with seq.pull() as first, self.other.pull() as second:
            turn, waiting = first, second
            while True:
                item, ok = turn.next()
                if not ok:
                    return
                yield item
                turn, waiting = waiting, turn


class InterleaveLongest(Step[T, T]):
    """Step alternating between its input and ``other`` until both are exhausted.

    Alternation starts with the input. When the side whose turn it is runs
    out, the remaining items of the other side are yielded in order.

    Example:
        >>> (["abc"] | InterleaveLongest(["def", "jkl"])).collect()
        ['abc', 'def', 'jkl']
    """

    def __init__(self, other: Union[Seq[T], Iterable[T]]):
        self.other = as_seq(other)

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        with seq.pull() as first, self.other.pull() as second:
            turn, waiting = first, second
            while True:
                item, ok = turn.next()
                if not ok:
                    break
                yield item
                turn, waiting = waiting, turn

            yield from waiting


def interleave_shortest(first: Iterable[T], second: Iterable[T]) -> Seq[T]:
    """Lazily alternate items of ``first`` and ``second``, stopping at the first gap.

    Examples:
        >>> interleave_shortest(["abc", "ghi"], ["def", "jkl"]).collect()
        ['abc', 'def', 'ghi', 'jkl']

        >>> interleave_shortest(["abc"], ["def", "jkl"]).collect()
        ['abc', 'def']
    """
    return InterleaveShortest(second).with_input(first)


def interleave_longest(first: Iterable[T], second: Iterable[T]) -> Seq[T]:
    """Lazily alternate items of ``first`` and ``second``, then drain the longer one.

    Examples:
        >>> interleave_longest(["abc", "ghi", "jkl"], ["def"]).collect()
        ['abc', 'def', 'ghi', 'jkl']
    """
    return InterleaveLongest(second).with_input(first)
