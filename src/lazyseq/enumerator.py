"""
Enumerator contract and the exhausted marker.
"""

from abc import abstractmethod
from typing import Iterator, TypeVar, Union

T = TypeVar('T')


class Exhausted:
    """
    Type of the end-of-sequence marker returned by ``Enumerator.move_next``.

    There is exactly one instance, ``EXHAUSTED``. Compare with ``is``; the
    marker refuses truth testing so that ``while value:`` loops, which would
    stop early on elements such as ``0`` or ``{}``, fail loudly instead.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'EXHAUSTED'

    def __bool__(self) -> bool:
        raise TypeError("EXHAUSTED has no truth value; test with 'is EXHAUSTED'")

    def __reduce__(self):
        return (Exhausted, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


EXHAUSTED = Exhausted()


class Enumerator(Iterator[T]):
    """
    Resettable cursor over the elements of a stream.

    Subclasses implement ``move_next`` and ``reset``. Once ``move_next``
    has returned ``EXHAUSTED`` it keeps returning it until ``reset``.
    """

    @abstractmethod
    def move_next(self) -> Union[T, Exhausted]:
        """Advance one element and return it, or ``EXHAUSTED``."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Rewind to the position of a freshly produced enumerator."""
        pass

    def __iter__(self) -> 'Enumerator[T]':
        return self

    def __next__(self) -> T:
        value = self.move_next()
        if value is EXHAUSTED:
            raise StopIteration
        return value
