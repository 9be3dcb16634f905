"""Error types raised by stream construction and record projection."""

from typing import Iterable, Sequence


class StreamError(Exception):
    """Base class for usage errors raised by lazyseq."""


class InvalidSelectionError(StreamError, ValueError):
    """Raised when a field selection is empty or names a field twice."""


class RecordTypeError(StreamError, TypeError):
    """Raised when a field selection meets an element that is not a mapping."""

    def __init__(self, element: object):
        self.element = element
        super().__init__(
            f"select() needs mapping elements, got {type(element).__name__}: {element!r}"
        )


class MissingFieldError(StreamError, KeyError):
    """Exception raised when a selected field is absent from a record."""

    def __init__(self, missing: Sequence[str], available: Iterable[str]):
        """Create a missing field error.

        Args:
            missing: Requested field names the record does not have.
            available: Field names the record does have.

        """
        self.missing = tuple(missing)
        self.available = tuple(available)
        super().__init__(
            f"record has no field(s) {', '.join(map(repr, self.missing))}; "
            f"available fields: {', '.join(map(repr, self.available)) or '<none>'}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
