from typing import Callable, Iterable, TypeVar

from lazyseq.base import Seq, Sink, T

U = TypeVar("U")


class _NotProvided:
    """Sentinel to indicate no initial value was provided.

    This is used to distinguish between an explicit None initial value
    and no initial value being provided at all.
    """

    def __repr__(self):
        return "NOT_PROVIDED"


NOT_PROVIDED = _NotProvided()


class Reduce(Sink[T, U]):
    """Terminal operation folding all items into a single accumulated value.

    The Reduce sink applies a binary function cumulatively to the items, from
    left to right, in a single pass. This is equivalent to Python's built-in
    functools.reduce() but only holds the accumulator in memory.

    Example:
        >>> # Sum all numbers
        >>> range(5) | Reduce(lambda acc, x: acc + x, 0)
        10

        >>> # Find maximum
        >>> [3, 1, 4, 1, 5] | Reduce(max)
        5

        >>> # Build a string
        >>> ["a", "b", "c"] | Reduce(lambda acc, x: acc + x, "")
        'abc'
    """

    def __init__(
        self,
        reducer: Callable[[U, T], U],
        initial: U | _NotProvided = NOT_PROVIDED,
    ):
        """Initialize the Reduce sink.

        Args:
            reducer: Binary function that takes (accumulator, item) and returns new accumulator
            initial: Initial value for the accumulator. If not provided, the first item is used.
        """
        self.reducer = reducer
        self.initial = initial

    def consume(self, seq: Seq[T]) -> U:
        """Fold every item of ``seq`` into the accumulator.

        Raises:
            ValueError: If sequence is empty and no initial value provided
        """
        with seq.pull() as items:
            if self.initial is NOT_PROVIDED:
                accumulator, ok = items.next()
                if not ok:
                    raise ValueError("Cannot reduce empty sequence without initial value")
            else:
                accumulator = self.initial

            for item in items:
                accumulator = self.reducer(accumulator, item)

        return accumulator


def reduce(
    seq: Iterable[T],
    reducer: Callable[[U, T], U],
    initial: U | _NotProvided = NOT_PROVIDED,
) -> U:
    """Fold the items of ``seq`` into a single value, from left to right.

    Args:
        seq: Input sequence or iterable; must be finite
        reducer: Binary function that takes (accumulator, item) and returns
                a new accumulator value
        initial: Initial value for the accumulator. If not provided, the
                first item in the sequence is used as the initial value.

    Returns:
        The final accumulator; ``initial`` itself for an empty sequence

    Raises:
        ValueError: If the sequence is empty and no initial value is provided

    Examples:
        >>> # Sum numbers
        >>> reduce(range(1, 6), lambda acc, x: acc + x)
        15

        >>> # Sum with initial value
        >>> reduce(range(1, 6), lambda acc, x: acc + x, 100)
        115

        >>> # Empty input returns the initial value unchanged
        >>> reduce([], lambda acc, x: acc + x, 123)
        123

    Note:
        - The reducer function is called (n-1) times for n items (or n times with initial)
        - Execution order is left-to-right: reduce([a, b, c], f) = f(f(a, b), c)
    """
    return Reduce(reducer, initial).with_input(seq)
