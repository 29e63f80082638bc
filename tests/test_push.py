"""Tests for push-style producers driven through cursors."""

import threading

import pytest

import lazyseq as ls
from lazyseq.push import WORKER_NAME


class PushProducer:
    """Test helper: a push-style producer recording what it was asked to do."""

    def __init__(self, items):
        self.items = items
        self.pushed = []
        self.refused = 0
        self.cleaned_up = 0
        self.threads = []

    def __call__(self, consumer):
        self.threads.append(threading.current_thread())
        try:
            for item in self.items:
                self.pushed.append(item)
                if not consumer(item):
                    self.refused += 1
                    return
        finally:
            self.cleaned_up += 1

    def workers_alive(self) -> bool:
        return any(thread.is_alive() for thread in self.threads)


def test_from_push_collects_all_items():
    producer = PushProducer([3, 2, 1])
    assert ls.from_push(producer).collect() == [3, 2, 1]
    assert producer.cleaned_up == 1
    assert not producer.workers_alive()


def test_from_push_runs_on_worker_thread():
    producer = PushProducer([1])
    ls.from_push(producer).collect()

    assert producer.threads[0] is not threading.current_thread()
    assert producer.threads[0].name == WORKER_NAME


def test_from_push_empty_producer():
    assert ls.from_push(lambda consumer: None).collect() == []


def test_from_push_is_retraversable():
    producer = PushProducer(["a", "b"])
    seq = ls.from_push(producer)
    assert seq.collect() == ["a", "b"]
    assert seq.collect() == ["a", "b"]
    assert len(producer.threads) == 2


def test_no_production_before_demand():
    producer = PushProducer([1, 2, 3])
    with ls.from_push(producer).pull() as cursor:
        assert producer.pushed == []

        assert cursor.next() == (1, True)
        assert producer.pushed == [1]

        assert cursor.next() == (2, True)
        assert producer.pushed == [1, 2]

    assert producer.refused == 1
    assert producer.cleaned_up == 1


def test_release_stops_infinite_producer():
    def naturals(consumer):
        i = 0
        while consumer(i):
            i += 1

    assert ls.take(ls.from_push(naturals), 4).collect() == [0, 1, 2, 3]


def test_release_joins_worker():
    producer = PushProducer(range(100))
    cursor = ls.from_push(producer).pull()
    cursor.next()
    assert producer.workers_alive()

    cursor.release()
    assert not producer.workers_alive()
    assert producer.pushed == [0]


def test_release_without_demand_starts_no_worker():
    producer = PushProducer([1, 2])
    cursor = ls.from_push(producer).pull()
    cursor.release()

    assert producer.threads == []


def test_producer_error_is_reraised_in_consumer():
    def failing(consumer):
        consumer(1)
        consumer(2)
        raise ValueError("producer failed")

    seq = ls.from_push(failing)
    with seq.pull() as cursor:
        assert cursor.next() == (1, True)
        assert cursor.next() == (2, True)
        with pytest.raises(ValueError, match="producer failed"):
            cursor.next()


def test_consumer_error_stops_producer():
    producer = PushProducer(range(10))

    def explode(x):
        if x == 2:
            raise RuntimeError("consumer failed")
        return x

    with pytest.raises(RuntimeError, match="consumer failed"):
        ls.map(ls.from_push(producer), explode).collect()

    assert producer.pushed == [0, 1, 2]
    assert producer.cleaned_up == 1
    assert not producer.workers_alive()


def test_consumer_error_keeps_precedence_over_producer_error():
    def stubborn_then_failing(consumer):
        for i in range(3):
            consumer(i)
        raise RuntimeError("producer failed")

    def explode(x):
        if x == 1:
            raise ValueError("consumer failed")
        return x

    with pytest.raises(ValueError, match="consumer failed") as exc_info:
        ls.map(ls.from_push(stubborn_then_failing), explode).collect()

    assert any("producer failed" in note for note in exc_info.value.__notes__)


def test_producer_error_on_early_stop_is_raised():
    def stubborn_then_failing(consumer):
        for i in range(3):
            consumer(i)
        raise RuntimeError("producer failed")

    with pytest.raises(RuntimeError, match="producer failed"):
        ls.take(ls.map(ls.from_push(stubborn_then_failing), str), 1).collect()


def test_producer_ignoring_stop_is_drained():
    pushed = []

    def stubborn(consumer):
        for i in range(5):
            pushed.append(i)
            consumer(i)

    assert ls.take(ls.from_push(stubborn), 2).collect() == [0, 1]
    assert pushed == [0, 1, 2, 3, 4]


def test_push_sources_in_two_cursor_combinators():
    first = ls.from_push(PushProducer(["abc", "ghi"]))
    second = ls.from_push(PushProducer(["def"]))

    assert ls.interleave_shortest(first, second).collect() == ["abc", "def", "ghi"]
    assert ls.zip_shortest(first, second).collect() == [("abc", "def")]
