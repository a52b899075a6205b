"""Guarded view: range-checked ordinal reads and denylist-protected writes."""

import logging
from typing import Any, FrozenSet, Iterable, Optional, Tuple

from .errors import ImmutablePropertyError, OutOfRangeError
from .models import Container
from .protocols import LoggerProtocol

DEFAULT_PROTECTED_KEYS: FrozenSet[str] = frozenset({"name", "age"})


class GuardedView:
    """
    Facade enforcing an access policy over a container.

    Reads are by ordinal position and are served from a snapshot of the
    values taken at construction. The size used for range checks is part of
    that snapshot: entries added to the container later are not readable
    through the view. Writes go to the live container unless the key is in
    the protected set.
    """

    def __init__(
        self,
        container: Container,
        protected: Iterable[str] = DEFAULT_PROTECTED_KEYS,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize guarded view.

        Args:
            container: Container to guard
            protected: Keys that cannot be written through the view
            logger: Logger instance
        """
        self._container = container
        self._values: Tuple[Any, ...] = tuple(container.values())
        self._size = len(self._values)
        self._protected = frozenset(protected)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def size(self) -> int:
        """Size recorded at construction, used for range checks."""
        return self._size

    @property
    def protected(self) -> FrozenSet[str]:
        return self._protected

    @property
    def container(self) -> Container:
        """Underlying live container."""
        return self._container

    def get(self, index: Any) -> Any:
        """
        Read the value at an ordinal position.

        Args:
            index: Position; integers and integer strings are accepted

        Returns:
            Value at that position in the construction-time snapshot

        Raises:
            OutOfRangeError: If index is not an integer in [0, size)
        """
        position = self._to_position(index)
        if position is None or not 0 <= position < self._size:
            raise OutOfRangeError(index, self._size)
        return self._values[position]

    def set(self, key: str, value: Any) -> bool:
        """
        Write a value into the underlying container.

        Args:
            key: Target key
            value: New value

        Returns:
            True once the write has been applied

        Raises:
            ImmutablePropertyError: If key is protected
        """
        if key in self._protected:
            if self._logger:
                self._logger.debug(f"Rejected write to protected key {key!r}")
            raise ImmutablePropertyError(key)
        self._container[key] = value
        return True

    def __getitem__(self, index: Any) -> Any:
        return self.get(index)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"GuardedView(size={self._size}, protected={sorted(self._protected)})"

    @staticmethod
    def _to_position(index: Any) -> Optional[int]:
        # bool is an int subclass but never a position
        if isinstance(index, bool):
            return None
        if isinstance(index, int):
            return index
        if isinstance(index, str):
            try:
                return int(index.strip(), 10)
            except ValueError:
                return None
        return None


def make_guarded_view(
    container: Container, protected: Optional[Iterable[str]] = None
) -> GuardedView:
    """Create a guarded view, falling back to the default protected keys."""
    if protected is None:
        protected = DEFAULT_PROTECTED_KEYS
    return GuardedView(container, protected=protected)
