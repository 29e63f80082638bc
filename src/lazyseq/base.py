from abc import ABC
from collections.abc import Iterable as IterableABC
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar, Union

from lazyseq.cursor import Cursor

# Type variables
T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

# Values a push consumer returns to drive Seq.each
STOP = False
CONTINUE = True


class Seq(Generic[T]):
    """A lazy, re-traversable sequence of values.

    A Seq wraps a zero-argument factory returning a fresh iterator. Nothing is
    produced until the sequence is traversed, and every traversal calls the
    factory again, so a Seq built from deterministic inputs yields the same
    items in the same order each time. A Seq has no length and may be infinite.

    Two traversal protocols are supported:
    1. Pull: ``for item in seq``, ``list(seq)``, ``seq.pull()``
    2. Push: ``seq.each(consumer)``, where the consumer returns ``STOP`` to
       end the traversal early

    Example:
        >>> evens = range(10) | Filter(lambda x: x % 2 == 0)
        >>> evens.collect()
        [0, 2, 4, 6, 8]
        >>> evens.each(print)  # push style
    """

    def __init__(self, factory: Callable[[], Iterator[T]]):
        """Initialize a Seq.

        Args:
            factory: Zero-argument callable returning a new iterator per traversal
        """
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")

        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def pull(self) -> Cursor[T]:
        """Start a traversal driven one item at a time.

        The caller owns the returned cursor and must release it, ideally with
        ``with seq.pull() as cursor:``.

        Returns:
            A Cursor positioned before the first item
        """
        return Cursor(self)

    def each(self, consumer: Callable[[T], Any]) -> bool:
        """Push every item to ``consumer`` until it returns ``STOP``.

        A consumer returning ``None`` keeps the traversal going, so plain
        functions such as ``print`` can be used directly.

        Args:
            consumer: Called once per item, in order

        Returns:
            True if the sequence was exhausted, False if the consumer stopped it
        """
        with self.pull() as items:
            for item in items:
                result = consumer(item)
                if result is not None and not result:
                    return False
        return True

    def collect(self) -> List[T]:
        """Traverse the sequence and collect every item into a list."""
        return list(self)

    def __or__(self, other: "WithPipeline[T, U]") -> Any:
        """Support seq | step syntax."""
        if isinstance(other, WithPipeline):
            return other.with_input(self)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._factory!r})"


def as_seq(data: Union[Seq[T], Iterable[T]]) -> Seq[T]:
    """Wrap any iterable as a Seq, returning existing Seq objects unchanged.

    Re-traversing the result is only deterministic when ``data`` is itself
    re-iterable (a list, a range, a dict...). A one-shot iterator such as a
    generator object is consumed by the first traversal.

    ``data`` still belongs to the caller: releasing a cursor stops the
    traversal but never closes ``data``, so a partially read generator or
    file can be read further afterwards.

    Raises:
        TypeError: If data is not iterable
    """
    if isinstance(data, Seq):
        return data
    if not isinstance(data, IterableABC):
        raise TypeError(f"expected an iterable, got {type(data).__name__}")

    return Seq(lambda: _borrow(data))


def _borrow(data: Iterable[T]) -> Iterator[T]:
    # A plain loop: closing this generator must leave ``data`` open
    for item in data:
        yield item


class WithPipeline(ABC, Generic[T, U]):
    """Abstract base for objects that can be chained with the | operator.

    The class supports two chaining patterns:
    1. step | step  -> Pipeline (forward chaining)
    2. data | step  -> the step applied to the data
    """

    def __or__(self, other: "WithPipeline[U, V]") -> "Pipeline[T, V]":
        """Chain this object with another using | operator."""
        return self.then(other)

    def then(self, other: "WithPipeline[U, V]") -> "Pipeline[T, V]":
        """Chain this object with another sequentially.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __ror__(self, other: Iterable[T]) -> Any:
        """Support data | step syntax (reverse pipe operator)."""
        return self.with_input(other)

    def with_input(self, data: Union[Seq[T], Iterable[T]]) -> Any:
        """Apply this object to the given input data.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


class Step(WithPipeline[T, U]):
    """Base class for lazy sequence combinators.

    A Step describes how to turn an input sequence of T into an output
    sequence of U. Applying a step never traverses anything: it returns a new
    Seq whose traversals run the step's generator over a fresh traversal of
    the input.

    Steps can be:
    - Chained together: step1 | step2 | step3
    - Applied to data: data | step

    Subclasses implement _build to define their logic.
    """

    def apply(self, seq: Seq[T]) -> Seq[U]:
        """Return the lazy sequence produced by this step over ``seq``."""
        return Seq(lambda: self._build(seq))

    def _build(self, seq: Seq[T]) -> Iterator[U]:
        """Produce the items of one traversal of this step's output.

        Args:
            seq: The input sequence

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def then(self, other: WithPipeline[U, V]) -> "Pipeline[T, V]":
        """Chain this step with another step, sink or pipeline."""
        if isinstance(other, Pipeline):
            return Pipeline([self] + other.steps)
        else:
            return Pipeline([self, other])

    def with_input(self, data: Union[Seq[T], Iterable[T]]) -> Seq[U]:
        """Apply this step to the given input data."""
        return self.apply(as_seq(data))


class Sink(WithPipeline[T, U]):
    """Base class for terminal operations reducing a sequence to one value.

    Unlike a Step, piping data into a Sink traverses the input immediately
    and returns the result:

        >>> [4, 3, 2, -1, 0] | Min()
        (-1, True)

    Subclasses implement consume.
    """

    def consume(self, seq: Seq[T]) -> U:
        """Traverse ``seq`` and compute the result.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def then(self, other: WithPipeline[Any, V]) -> "Pipeline[T, V]":
        raise TypeError(f"{self.__class__.__name__} is terminal and cannot be followed by another step")

    def with_input(self, data: Union[Seq[T], Iterable[T]]) -> U:
        """Run this terminal operation over the given input data."""
        return self.consume(as_seq(data))


class Pipeline(Step[T, U]):
    """A reusable composition of steps, optionally ending with a sink.

    Usage patterns:
    1. Build from steps: Pipeline([step1, step2, step3])
    2. Chain with |: step1 | step2 | step3
    3. Apply to data: data | pipeline

    Example:
        >>> evens_doubled = Filter(lambda x: x % 2 == 0) | Map(lambda x: x * 2)
        >>> (range(10) | evens_doubled).collect()
        [0, 4, 8, 12, 16]
        >>> range(10) | evens_doubled | Reduce(lambda acc, x: acc + x, 0)
        40

    Attributes:
        steps: Steps applied in order; only the last one may be a Sink
    """

    steps: List[WithPipeline[Any, Any]]

    def __init__(self, steps: List[WithPipeline[Any, Any]]):
        """Initialize a new Pipeline.

        Args:
            steps: List of steps to apply in sequence

        Raises:
            TypeError: If steps is not a list
            ValueError: If a sink appears anywhere but last
        """
        if not isinstance(steps, list):
            raise TypeError(f"steps must be a list, got {type(steps).__name__}")
        for step in steps[:-1]:
            if isinstance(step, Sink):
                raise ValueError(f"{step.__class__.__name__} is terminal and must be the last step")

        self.steps = steps

    @property
    def is_terminal(self) -> bool:
        """Whether applying the pipeline yields a value rather than a Seq."""
        return bool(self.steps) and isinstance(self.steps[-1], Sink)

    def apply(self, seq: Seq[T]) -> Any:
        result: Any = seq
        for step in self.steps:
            result = step.with_input(result)
        return result

    def collect(self, data: Union[Seq[T], Iterable[T]]) -> Any:
        """Apply the pipeline to ``data`` and collect the output into a list.

        A terminal pipeline returns its sink's result unchanged.
        """
        result = self.with_input(data)
        if self.is_terminal:
            return result
        return list(result)

    def then(self, other: WithPipeline[U, V]) -> "Pipeline[T, V]":
        """Chain this pipeline with another step or pipeline."""
        if isinstance(other, Pipeline):
            return Pipeline(self.steps + other.steps)
        else:
            return Pipeline(self.steps + [other])
