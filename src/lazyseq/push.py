"""Adapter turning push-style producers into lazy sequences."""

import logging
import queue
import threading
from typing import Any, Callable, Generic, Iterator, TypeVar

from lazyseq.base import Seq

T = TypeVar("T")

logger = logging.getLogger(__name__)

WORKER_NAME = "lazyseq-push"

# A producer receives a consumer and calls it once per item until it returns False
PushTraversal = Callable[[Callable[[T], bool]], Any]


class ItemEvent(Generic[T]):
    """An item handed from the producer to the consumer."""

    def __init__(self, item: T):
        self.item = item


class EndEvent:
    """Sentinel signaling that the producer returned."""

    pass


class ErrorEvent:
    """The producer raised; the error is re-raised on the consuming side."""

    def __init__(self, error: BaseException):
        self.error = error


class _Handoff(Generic[T]):
    """Synchronous rendezvous between a producer thread and its consumer.

    Exactly one side runs at a time. The consumer posts a demand and blocks
    until the producer answers with one event; the producer then blocks until
    the next demand arrives. Demands are either "continue" or "stop", so the
    producer never runs ahead of what was asked for.

    States:
    - started: the worker thread has been launched
    - ended: an EndEvent or ErrorEvent has been received by the consumer
    - stopped: the consumer asked the producer to stop
    """

    def __init__(self, traverse: PushTraversal[T]):
        """Initialize the handoff.

        Args:
            traverse: The push-style producer to run on the worker thread
        """
        self.traverse = traverse
        self._demand: "queue.Queue[bool]" = queue.Queue(maxsize=1)
        self._supply: "queue.Queue[Any]" = queue.Queue(maxsize=1)
        self._worker = threading.Thread(target=self._run, name=WORKER_NAME, daemon=True)
        self.started = False
        self.ended = False
        self.stopped = False

    def _consume(self, item: T) -> bool:
        """Consumer handed to the producer; runs on the worker thread."""
        self._supply.put(ItemEvent(item))
        return self._demand.get()

    def _run(self):
        if not self._demand.get():
            return

        try:
            self.traverse(self._consume)
        except BaseException as e:
            self._supply.put(ErrorEvent(e))
        else:
            self._supply.put(EndEvent())

    def request(self) -> Any:
        """Ask the producer for one more event and wait for it."""
        if not self.started:
            self.started = True
            logger.debug("starting push worker for %r", self.traverse)
            self._worker.start()

        self._demand.put(True)
        event = self._supply.get()
        if not isinstance(event, ItemEvent):
            self.ended = True
        return event

    def stop(self):
        """Tell a suspended producer to return, then wait for the worker."""
        if not self.started or self.stopped:
            return

        self.stopped = True
        if not self.ended:
            logger.debug("stopping push worker for %r", self.traverse)
            event = None
            # A producer that keeps pushing is refused every further item
            while event is None or isinstance(event, ItemEvent):
                self._demand.put(False)
                event = self._supply.get()
            self.ended = True
            self._worker.join()

            if isinstance(event, ErrorEvent):
                raise event.error
            return

        self._worker.join()


def _iterate(traverse: PushTraversal[T]) -> Iterator[T]:
    handoff = _Handoff(traverse)
    try:
        while True:
            event = handoff.request()
            if isinstance(event, EndEvent):
                return
            if isinstance(event, ErrorEvent):
                raise event.error
            yield event.item
    finally:
        handoff.stop()


def from_push(traverse: PushTraversal[T]) -> Seq[T]:
    """Create a sequence from a push-style producer.

    ``traverse(consumer)`` must call ``consumer(item)`` once per item, in
    order, and return as soon as ``consumer`` returns False. Each traversal of
    the resulting Seq runs ``traverse`` once on a dedicated worker thread that
    is suspended between items, which lets the Seq be driven by a Cursor
    without restarting it. Releasing the traversal early stops the producer
    and joins the worker.

    Args:
        traverse: Push-style producer

    Returns:
        A Seq yielding the items pushed by ``traverse``

    Examples:
        >>> def countdown(consumer):
        ...     for i in (3, 2, 1):
        ...         if not consumer(i):
        ...             return
        >>> from_push(countdown).collect()
        [3, 2, 1]

        >>> # Producers holding resources get a chance to clean up
        >>> def lines(consumer):
        ...     with open("data.txt") as f:
        ...         for line in f:
        ...             if not consumer(line):
        ...                 return
        >>> first_two = (from_push(lines) | Take(2)).collect()

    Note:
        An exception raised by ``traverse`` is re-raised in the consuming
        thread when the next item is requested, or when the traversal is
        released. If the consumer is already failing with its own error at
        release, that error propagates and the producer error is added to
        its notes.
    """
    return Seq(lambda: _iterate(traverse))
