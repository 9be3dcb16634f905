"""
Base streams: in-memory arrays, single values and index generators.
"""

import logging
from collections.abc import Sequence
from typing import Callable, Iterable, TypeVar, Union

from lazyseq.config import config
from lazyseq.enumerator import EXHAUSTED, Enumerator, Exhausted
from lazyseq.stream import Stream

T = TypeVar('T')

logger = logging.getLogger(__name__)


class _ArrayEnumerator(Enumerator[T]):
    """Walks a sequence by index."""

    def __init__(self, items: Sequence):
        self._items = items
        self._index = 0

    def move_next(self) -> Union[T, Exhausted]:
        if self._index >= len(self._items):
            return EXHAUSTED
        value = self._items[self._index]
        self._index += 1
        if config.trace_enumeration:
            logger.debug(f"FromArray[{self._index - 1}] -> {value!r}")
        return value

    def reset(self) -> None:
        self._index = 0


class FromArray(Stream[T]):
    """
    Finite stream over an ordered collection.

    With ``config.snapshot_arrays`` enabled (the default) the items are
    copied into a tuple when the stream is built, so later changes to the
    caller's list are not observed. With it disabled the stream reads the
    caller's sequence directly and mutating it during enumeration is
    undefined behaviour. Iterables that do not support indexing, such as
    generators or sets, are always copied so the stream stays reusable.
    """

    def __init__(self, items: Iterable[T]):
        """
        Initialize stream.

        Args:
            items: Elements of the stream, in order
        """
        if config.snapshot_arrays or not isinstance(items, Sequence):
            items = tuple(items)
        self._items = items
        logger.debug(f"FromArray built over {len(items)} item(s)")

    def enumerate(self) -> Enumerator[T]:
        return _ArrayEnumerator(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _describe(self) -> str:
        return f"{len(self._items)} items"


class Singleton(FromArray[T]):
    """Stream of exactly one element."""

    def __init__(self, value: T):
        super().__init__((value,))

    def _describe(self) -> str:
        return repr(self._items[0])


class _GeneratorEnumerator(Enumerator[T]):
    """Calls the generator with 0, 1, 2, ... and never runs out."""

    def __init__(self, generator: Callable[[int], T]):
        self._generator = generator
        self._index = 0

    def move_next(self) -> T:
        value = self._generator(self._index)
        self._index += 1
        if config.trace_enumeration:
            logger.debug(f"Infinite[{self._index - 1}] -> {value!r}")
        return value

    def reset(self) -> None:
        # The generator is called again from index 0; impure generators
        # will not replay the same values.
        self._index = 0


class Infinite(Stream[T]):
    """
    Unbounded stream of ``generator(0), generator(1), ...``.

    Draining it with ``to_array`` never returns.
    """

    def __init__(self, generator: Callable[[int], T]):
        if not callable(generator):
            raise TypeError(f"Infinite() needs a callable, got {type(generator).__name__}")
        self._generator = generator

    def enumerate(self) -> Enumerator[T]:
        return _GeneratorEnumerator(self._generator)

    def _describe(self) -> str:
        return getattr(self._generator, '__name__', repr(self._generator))
