"""
Stream combinators for transformation.

Each combinator wraps one upstream stream. Its enumerator pulls from an
enumerator of the upstream stream one element at a time; nothing is
buffered and nothing runs until an enumerator is driven.
"""

import logging
from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Dict, Tuple, TypeVar, Union

from lazyseq.enumerator import EXHAUSTED, Enumerator, Exhausted
from lazyseq.errors import InvalidSelectionError, MissingFieldError, RecordTypeError
from lazyseq.stream import Stream

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class _UpstreamEnumerator(Enumerator[U]):
    """Base class for enumerators that derive values from an upstream enumerator."""

    def __init__(self, upstream: Enumerator[Any]):
        self._upstream = upstream

    @abstractmethod
    def move_next(self) -> Union[U, Exhausted]:
        pass

    def reset(self) -> None:
        self._upstream.reset()


class Combinator(Stream[U]):
    """Base class for streams built on top of another stream."""

    def __init__(self, upstream: Stream[Any]):
        if not isinstance(upstream, Stream):
            raise TypeError(f"{type(self).__name__}() needs a Stream, got {type(upstream).__name__}")
        self._upstream = upstream

    @property
    def upstream(self) -> Stream[Any]:
        return self._upstream

    def _describe(self) -> str:
        return repr(self._upstream)


class _MapEnumerator(_UpstreamEnumerator[U]):

    def __init__(self, upstream: Enumerator[T], func: Callable[[T], U]):
        super().__init__(upstream)
        self._func = func

    def move_next(self) -> Union[U, Exhausted]:
        value = self._upstream.move_next()
        if value is EXHAUSTED:
            return EXHAUSTED
        return self._func(value)


class Map(Combinator[U]):
    """Map each element to a new value."""

    def __init__(self, upstream: Stream[T], func: Callable[[T], U]):
        super().__init__(upstream)
        if not callable(func):
            raise TypeError(f"Map() needs a callable, got {type(func).__name__}")
        self._func = func

    def enumerate(self) -> Enumerator[U]:
        return _MapEnumerator(self._upstream.enumerate(), self._func)


class _WhereEnumerator(_UpstreamEnumerator[T]):

    def __init__(self, upstream: Enumerator[T], predicate: Callable[[T], bool]):
        super().__init__(upstream)
        self._predicate = predicate

    def move_next(self) -> Union[T, Exhausted]:
        # Loops forever on an infinite upstream that never matches
        while True:
            value = self._upstream.move_next()
            if value is EXHAUSTED or self._predicate(value):
                return value


class Where(Combinator[T]):
    """Filter elements by predicate."""

    def __init__(self, upstream: Stream[T], predicate: Callable[[T], bool]):
        super().__init__(upstream)
        if not callable(predicate):
            raise TypeError(f"Where() needs a callable, got {type(predicate).__name__}")
        self._predicate = predicate

    def enumerate(self) -> Enumerator[T]:
        return _WhereEnumerator(self._upstream.enumerate(), self._predicate)


class _SelectEnumerator(_UpstreamEnumerator[Dict[str, Any]]):

    def __init__(self, upstream: Enumerator[Mapping], keys: Tuple[str, ...]):
        super().__init__(upstream)
        self._keys = keys
        self._validated = False

    def move_next(self) -> Union[Dict[str, Any], Exhausted]:
        record = self._upstream.move_next()
        if record is EXHAUSTED:
            return EXHAUSTED
        if not isinstance(record, Mapping):
            raise RecordTypeError(record)
        if not self._validated:
            missing = [key for key in self._keys if key not in record]
            if missing:
                raise MissingFieldError(missing, record.keys())
            self._validated = True

        result = {}
        for key in self._keys:
            try:
                result[key] = record[key]
            except KeyError:
                raise MissingFieldError([key], record.keys()) from None
        return result

    def reset(self) -> None:
        super().reset()
        self._validated = False


class Select(Combinator[Dict[str, Any]]):
    """
    Narrow each record to a subset of its fields.

    Elements must be mappings. Every requested key is checked against the
    first record an enumerator sees, and a ``MissingFieldError`` listing all
    absent keys is raised there; a later record that lacks a key raises the
    same error when that key is read. The output records are new dicts
    holding exactly the requested keys, in request order.
    """

    def __init__(self, upstream: Stream[Mapping], *keys: str):
        super().__init__(upstream)
        if not keys:
            raise InvalidSelectionError("select() needs at least one field name")
        duplicates = sorted({key for key in keys if keys.count(key) > 1}, key=str)
        if duplicates:
            raise InvalidSelectionError(f"field(s) selected more than once: {', '.join(map(repr, duplicates))}")
        self._keys = tuple(keys)
        logger.debug(f"Select built for fields {self._keys}")

    @property
    def keys(self) -> Tuple[str, ...]:
        return self._keys

    def enumerate(self) -> Enumerator[Dict[str, Any]]:
        return _SelectEnumerator(self._upstream.enumerate(), self._keys)

    def _describe(self) -> str:
        return f"{self._upstream!r}, {', '.join(map(repr, self._keys))}"
