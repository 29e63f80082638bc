from typing import Iterable, Iterator, List

from lazyseq.base import Seq, Step, T


class Cycle(Step[T, T]):
    """Step repeating its input indefinitely.

    The first pass yields items as the input produces them and records them;
    later passes replay the record, so the input is traversed only once. An
    empty input yields nothing and the traversal ends.

    Example:
        >>> (range(2) | Cycle() | Take(5)).collect()
        [0, 1, 0, 1, 0]
    """

    def _build(self, seq: Seq[T]) -> Iterator[T]:
        seen: List[T] = []

        with seq.pull() as items:
            for item in items:
                yield item
                seen.append(item)

        while seen:
            yield from seen


def cycle(seq: Iterable[T]) -> Seq[T]:
    """Lazily repeat the items of ``seq`` forever.

    The result is infinite unless ``seq`` is empty; bound it with take.

    Example:
        >>> take(cycle("ab"), 5).collect()
        ['a', 'b', 'a', 'b', 'a']
    """
    return Cycle().with_input(seq)
