from .chain import Chain, chain
from .chunk_by import ChunkBy, Chunks, chunk_by, chunks
from .cycle import Cycle, cycle
from .drop import Drop, DropWhile, drop, drop_while
from .filter import Filter, filter
from .flatten import Flatten, flatten
from .interleave import (
    InterleaveLongest,
    InterleaveShortest,
    interleave_longest,
    interleave_shortest,
)
from .map import Map, MapPairs, MapToPairs, map, map_pairs, map_to_pairs
from .reduce import NOT_PROVIDED, Reduce, reduce
from .take import Take, TakeWhile, take, take_while
from .zip_shortest import ZipShortest, zip_shortest

__all__ = [
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
    "NOT_PROVIDED",
    "Reduce",
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
    "reduce",
    "take",
    "take_while",
    "zip_shortest",
]
