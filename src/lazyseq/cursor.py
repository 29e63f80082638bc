"""Demand-driven cursors over lazy sequences."""

import logging
from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Cursor(Generic[T]):
    """A pull handle advancing a single traversal one item at a time.

    Each call to next() resumes production where the previous call left it,
    so several cursors can be advanced independently and in any interleaving.
    The cursor is owned by whoever created it and must be released on every
    exit path; using it as a context manager does this:

        >>> with Seq(...).pull() as cursor:
        ...     first, ok = cursor.next()

    When the block exits with an exception and releasing raises too, the
    block's exception propagates and the release error is added to its notes.

    Releasing closes the underlying iterator, which runs the ``finally``
    clauses of any generator (or worker) still suspended upstream. Releasing
    is idempotent, and a released cursor reports exhaustion.

    Iterating over a cursor yields its remaining items.
    """

    def __init__(self, iterable: Iterable[T]):
        """Open a traversal of ``iterable``.

        Args:
            iterable: The sequence to traverse
        """
        self._iterator: Optional[Iterator[T]] = iter(iterable)

    @property
    def released(self) -> bool:
        """True once the cursor is exhausted or released."""
        return self._iterator is None

    def next(self) -> Tuple[Optional[T], bool]:
        """Request the next item.

        Returns:
            ``(item, True)`` while items remain, then ``(None, False)`` for
            this and every later call
        """
        if self._iterator is None:
            return None, False

        try:
            return next(self._iterator), True
        except StopIteration:
            self.release()
            return None, False

    def release(self):
        """Stop the underlying production and free what it holds."""
        iterator, self._iterator = self._iterator, None
        if iterator is None:
            return

        close = getattr(iterator, "close", None)
        if close is not None:
            logger.debug("releasing cursor over %r", iterator)
            close()

    def __iter__(self) -> Iterator[T]:
        while True:
            item, ok = self.next()
            if not ok:
                return
            yield item

    def __enter__(self) -> "Cursor[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Clean exit, or GeneratorExit from a consumer that stopped early
        if not isinstance(exc_val, Exception):
            self.release()
            return

        # The error that ended the block wins over one raised by releasing
        try:
            self.release()
        except Exception as error:
            logger.debug("releasing cursor failed during %r", exc_val, exc_info=True)
            exc_val.add_note(f"while releasing the cursor: {error!r}")
