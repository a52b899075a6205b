"""Cursor-based traversal over ordered containers."""

import logging
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from .models import Container, Step
from .protocols import LoggerProtocol, StepCursor, Traversable


class Cursor:
    """
    Single-pass cursor over a captured sequence of values.

    The cursor reads from its own snapshot, so the container it was created
    from can change without affecting traversal. Once exhausted it stays
    exhausted: every further ``step()`` returns a terminal ``Step``.

    Cursors are also Python iterators and work directly in ``for`` loops.
    """

    def __init__(self, source: Sequence[Any]):
        """
        Initialize cursor.

        Args:
            source: Values to traverse; copied into an immutable tuple
        """
        self._source: Tuple[Any, ...] = tuple(source)
        self._position = 0

    @property
    def position(self) -> int:
        """Index of the next value to produce."""
        return self._position

    @property
    def source(self) -> Tuple[Any, ...]:
        """Values captured when the cursor was created."""
        return self._source

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._source)

    def step(self) -> Step:
        """
        Produce the next value.

        Returns:
            ``Step(done=False, value=...)`` while values remain, then
            ``Step(done=True)`` on this and every later call
        """
        if self._position < len(self._source):
            value = self._source[self._position]
            self._position += 1
            return Step(done=False, value=value)
        return Step.finished()

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> Any:
        result = self.step()
        if result.done:
            raise StopIteration
        return result.value

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, size={len(self._source)})"


class LazyCursor:
    """
    Step cursor over a lazily computed iterator.

    Values are pulled from the underlying iterator one at a time, so the
    sequence may be unbounded. Single-pass, like ``Cursor``.
    """

    def __init__(self, values: Iterator[Any]):
        """
        Initialize lazy cursor.

        Args:
            values: Iterator (often a generator) producing the values
        """
        self._values = iter(values)
        self._position = 0
        self._done = False

    @property
    def position(self) -> int:
        """Number of values produced so far."""
        return self._position

    def step(self) -> Step:
        """Pull the next value, or report completion once the iterator ends."""
        if self._done:
            return Step.finished()
        try:
            value = next(self._values)
        except StopIteration:
            self._done = True
            return Step.finished()
        self._position += 1
        return Step(done=False, value=value)

    def __iter__(self) -> "LazyCursor":
        return self

    def __next__(self) -> Any:
        result = self.step()
        if result.done:
            raise StopIteration
        return result.value


def begin(container: Container) -> Cursor:
    """
    Start a traversal over a container's values.

    Args:
        container: Container to traverse

    Returns:
        New cursor at position 0 over the container's current values
    """
    return Cursor(list(container.values()))


class TraversableAdapter:
    """
    Makes a container traversable without changing the container itself.

    Each call to ``begin()`` (or ``iter()``) creates an independent cursor,
    so several traversals over the same container never interfere.
    """

    def __init__(self, container: Container, logger: Optional[LoggerProtocol] = None):
        """
        Initialize adapter.

        Args:
            container: Container to expose for traversal
            logger: Logger instance
        """
        self.container = container
        self._logger = logger or logging.getLogger(__name__)

    @property
    def size(self) -> int:
        """Current number of entries in the wrapped container."""
        return len(self.container)

    def begin(self) -> Cursor:
        """Start a new independent traversal."""
        cursor = begin(self.container)
        if self._logger:
            self._logger.debug(f"Started traversal over {len(cursor.source)} values")
        return cursor

    def __iter__(self) -> Cursor:
        return self.begin()

    def __len__(self) -> int:
        return self.size


def drain(cursor: StepCursor) -> List[Any]:
    """Step a cursor until it reports done and collect the values."""
    values = []
    step = cursor.step()
    while not step.done:
        values.append(step.value)
        step = cursor.step()
    return values


def traverse(traversable: Traversable) -> List[Any]:
    """Run one complete traversal of anything that hands out cursors."""
    return drain(traversable.begin())
