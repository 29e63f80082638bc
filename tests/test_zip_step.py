import itertools

import lazyseq as ls


def test_zip_shortest():
    """Test ZipShortest pairs items"""
    assert ls.zip_shortest(["abc", "ghi"], ["def", "jkl"]).collect() == [("abc", "def"), ("ghi", "jkl")]
    assert ls.zip_shortest(["abc", "ghi"], ["def"]).collect() == [("abc", "def")]
    assert ls.zip_shortest(["abc"], ["def", "jkl"]).collect() == [("abc", "def")]
    assert ls.zip_shortest([], ["abc", "ghi", "jkl"]).collect() == []


def test_zip_step_with_infinite_side():
    seq = "abc" | ls.ZipShortest(ls.with_func(itertools.count().__next__))
    assert dict(seq) == {"a": 0, "b": 1, "c": 2}


def test_zip_discards_item_pulled_from_longer_side(recording):
    first = recording([1, 2, 3])
    second = recording(["a"])

    assert ls.zip_shortest(first.seq, second.seq).collect() == [(1, "a")]
    # 2 was pulled before the second side turned out to be exhausted
    assert first.pulled == [1, 2]
    assert first.open == 0


def test_zip_stops_before_pulling_second_when_first_is_exhausted(recording):
    second = recording()
    assert ls.zip_shortest([1], second.seq).collect() == [(1, 0)]
    assert second.pulled == [0]
    assert second.open == 0
