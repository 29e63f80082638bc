"""
lazyseq: Composable Lazy Sequences

A small Python library for building lazy, pull-based sequence pipelines.
Nothing is computed until a sequence is traversed, items flow one at a time,
and infinite sequences are first-class citizens.

Key Features:
- Lazy, re-traversable sequences usable with any for loop
- Pipe syntax (data | Map(f) | Take(5)) and plain functions (take(map(data, f), 5))
- Combinators driving two sequences at once (interleave, zip) through cursors
- Early stop propagates upstream and releases every open cursor
- Push-style producers adapted to pull-based cursors with from_push

Quick Start:
    import lazyseq as ls

    # Pipe syntax
    result = (range(10) | ls.Map(lambda x: x * 2) | ls.Take(5)).collect()

    # Function syntax
    evens = ls.filter(ls.with_func(next_reading), lambda x: x % 2 == 0)
    for chunk in ls.chunks(ls.take(evens, 100), 10):
        process(chunk.collect())

    # Queries
    smallest, found = ls.min([4, 3, 2, -1, 0])
"""

from .base import (
    CONTINUE,
    STOP,
    Pipeline,
    Seq,
    Sink,
    Step,
    as_seq,
)
from .cursor import Cursor
from .push import from_push
from .queries import (
    AllMatch,
    AnyMatch,
    IsSorted,
    IsSortedFunc,
    Max,
    MaxFunc,
    Min,
    MinFunc,
    NoneMatch,
    all,
    any,
    compare,
    is_sorted,
    is_sorted_func,
    max,
    max_func,
    min,
    min_func,
    none,
)
from .sources import (
    from_iterable,
    from_map,
    from_slice,
    repeat,
    repeat_n,
    reverse_slice,
    with_func,
)
from .steps import (
    NOT_PROVIDED,
    Chain,
    ChunkBy,
    Chunks,
    Cycle,
    Drop,
    DropWhile,
    Filter,
    Flatten,
    InterleaveLongest,
    InterleaveShortest,
    Map,
    MapPairs,
    MapToPairs,
    Reduce,
    Take,
    TakeWhile,
    ZipShortest,
    chain,
    chunk_by,
    chunks,
    cycle,
    drop,
    drop_while,
    filter,
    flatten,
    interleave_longest,
    interleave_shortest,
    map,
    map_pairs,
    map_to_pairs,
    reduce,
    take,
    take_while,
    zip_shortest,
)

__all__ = [
    # Core
    "CONTINUE",
    "STOP",
    "Cursor",
    "Pipeline",
    "Seq",
    "Sink",
    "Step",
    "as_seq",
    # Construction
    "from_iterable",
    "from_map",
    "from_push",
    "from_slice",
    "repeat",
    "repeat_n",
    "reverse_slice",
    "with_func",
    # Steps
    "Chain",
    "ChunkBy",
    "Chunks",
    "Cycle",
    "Drop",
    "DropWhile",
    "Filter",
    "Flatten",
    "InterleaveLongest",
    "InterleaveShortest",
    "Map",
    "MapPairs",
    "MapToPairs",
    "Take",
    "TakeWhile",
    "ZipShortest",
    "chain",
    "chunk_by",
    "chunks",
    "cycle",
    "drop",
    "drop_while",
    "filter",
    "flatten",
    "interleave_longest",
    "interleave_shortest",
    "map",
    "map_pairs",
    "map_to_pairs",
    "take",
    "take_while",
    "zip_shortest",
    # Terminal operations
    "NOT_PROVIDED",
    "AllMatch",
    "AnyMatch",
    "IsSorted",
    "IsSortedFunc",
    "Max",
    "MaxFunc",
    "Min",
    "MinFunc",
    "NoneMatch",
    "Reduce",
    "all",
    "any",
    "compare",
    "is_sorted",
    "is_sorted_func",
    "max",
    "max_func",
    "min",
    "min_func",
    "none",
    "reduce",
]
