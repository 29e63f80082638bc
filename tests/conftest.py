import itertools

import pytest

import lazyseq as ls


class RecordingSource:
    """Test helper recording how a sequence is traversed.

    Attributes:
        pulled: Every item produced, across all traversals
        traversals: Number of traversals started
        finished: Number of traversals that ran their cleanup, whether they
            were exhausted or released early
    """

    def __init__(self, items):
        self.items = items
        self.pulled = []
        self.traversals = 0
        self.finished = 0
        self.seq = ls.Seq(self._generate)

    def _generate(self):
        self.traversals += 1
        try:
            for item in self.items:
                self.pulled.append(item)
                yield item
        finally:
            self.finished += 1

    @property
    def open(self) -> int:
        return self.traversals - self.finished


@pytest.fixture
def recording():
    """Factory building RecordingSource objects; infinite when called without items."""

    def make(items=None):
        return RecordingSource(itertools.count() if items is None else items)

    return make
