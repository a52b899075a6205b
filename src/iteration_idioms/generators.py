"""Generator-based iteration helpers."""

from typing import Any, Iterator

from .cursor import LazyCursor
from .models import Container


def iter_values(container: Container) -> Iterator[Any]:
    """
    Generator that yields a container's values in insertion order.

    Args:
        container: Container to read

    Yields:
        Values, one per entry
    """
    for key in container:
        yield container[key]


def is_adult(container: Container, threshold: int = 18) -> bool:
    """Check whether the container's ``age`` entry is above the threshold."""
    age = container.get("age")
    if age is None:
        return False
    return age > threshold


class NumberRangeIterator:
    """Hand-written iterator for NumberRange: explicit current/last state."""

    def __init__(self, current: int, last: int):
        self.current = current
        self.last = last

    def __iter__(self) -> "NumberRangeIterator":
        return self

    def __next__(self) -> int:
        if self.current <= self.last:
            value = self.current
            self.current += 1
            return value
        raise StopIteration


class NumberRange:
    """
    Inclusive integer range iterable through the iterator protocol.

    ``list(NumberRange(1, 5))`` gives ``[1, 2, 3, 4, 5]``. Every ``iter()``
    call returns a fresh iterator, so the range can be looped over again.
    """

    def __init__(self, start: int, stop: int):
        """
        Initialize range.

        Args:
            start: First value
            stop: Last value (inclusive)
        """
        self.start = start
        self.stop = stop

    def __iter__(self) -> NumberRangeIterator:
        return NumberRangeIterator(self.start, self.stop)

    def __len__(self) -> int:
        return max(0, self.stop - self.start + 1)

    def begin(self) -> LazyCursor:
        """Start a step-by-step traversal driven by a generator."""
        return LazyCursor(self._count())

    def _count(self) -> Iterator[int]:
        value = self.start
        while value <= self.stop:
            yield value
            value += 1
