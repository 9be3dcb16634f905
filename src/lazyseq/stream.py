"""
Lazy, reusable streams.

A ``Stream`` is a factory of enumerators: it holds no position of its own,
so every call to ``enumerate()`` starts a fresh, independent pass over the
sequence. Sources and combinators are ``Stream`` subclasses; the fluent
methods below simply construct them, so ``s.where(p)`` and ``Where(s, p)``
build the same thing.
"""

from abc import abstractmethod
from typing import Callable, Iterable, Iterator, List, TypeVar

from lazyseq.enumerator import EXHAUSTED, Enumerator

T = TypeVar('T')
U = TypeVar('U')


class Stream(Iterable[T]):
    """
    A lazy, possibly infinite sequence of values.
    """

    @abstractmethod
    def enumerate(self) -> Enumerator[T]:
        """Produce a new enumerator positioned before the first element."""
        pass

    def __iter__(self) -> Iterator[T]:
        """Iterate over a fresh enumerator."""
        enumerator = self.enumerate()
        while True:
            value = enumerator.move_next()
            if value is EXHAUSTED:
                return
            yield value

    # Transformation operators

    def map(self, func: Callable[[T], U]) -> 'Stream[U]':
        """Apply function to each element."""
        from lazyseq.combinators import Map
        return Map(self, func)

    def where(self, predicate: Callable[[T], bool]) -> 'Stream[T]':
        """Keep only elements matching predicate."""
        from lazyseq.combinators import Where
        return Where(self, predicate)

    def select(self, *keys: str) -> 'Stream[dict]':
        """Narrow each record to the given fields, in the given order."""
        from lazyseq.combinators import Select
        return Select(self, *keys)

    # Terminal operators

    def to_array(self) -> List[T]:
        """Collect all elements into a list. Never returns on infinite streams."""
        from lazyseq.terminal import to_array
        return to_array(self)

    # Factory methods

    @classmethod
    def from_array(cls, items: Iterable[T]) -> 'Stream[T]':
        """Create stream over the given items."""
        from lazyseq.sources import FromArray
        return FromArray(items)

    @classmethod
    def singleton(cls, value: T) -> 'Stream[T]':
        """Create stream of exactly one element."""
        from lazyseq.sources import Singleton
        return Singleton(value)

    @classmethod
    def infinite(cls, generator: Callable[[int], T]) -> 'Stream[T]':
        """Create infinite stream of ``generator(0), generator(1), ...``."""
        from lazyseq.sources import Infinite
        return Infinite(generator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._describe()})"

    def _describe(self) -> str:
        return ''
