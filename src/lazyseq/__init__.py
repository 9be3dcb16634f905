"""
lazyseq: Lazy, pull-based streams.

Streams produce their values one at a time on demand, compose
left-to-right without allocating intermediate collections, and may be
finite or infinite:

    FromArray([1, 2, 3, 4, 5, 6]).where(lambda x: x % 2 == 0).map(lambda x: x * 3).to_array()
    # [6, 12, 18]
"""

from lazyseq.config import StreamConfig, MemoryPressureLevel
from lazyseq.enumerator import Enumerator, Exhausted, EXHAUSTED
from lazyseq.stream import Stream
from lazyseq.sources import FromArray, Singleton, Infinite
from lazyseq.combinators import Combinator, Map, Where, Select
from lazyseq.terminal import to_array
from lazyseq.errors import (
    StreamError,
    InvalidSelectionError,
    MissingFieldError,
    RecordTypeError,
)

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "MemoryPressureLevel",
    "Enumerator",
    "Exhausted",
    "EXHAUSTED",
    "Stream",
    "FromArray",
    "Singleton",
    "Infinite",
    "Combinator",
    "Map",
    "Where",
    "Select",
    "to_array",
    "StreamError",
    "InvalidSelectionError",
    "MissingFieldError",
    "RecordTypeError",
]
