"""Exceptions raised by guarded access."""


class IterationIdiomsError(Exception):
    """Base class for package errors."""


class OutOfRangeError(IterationIdiomsError, IndexError):
    """Ordinal read outside the recorded size of a view."""

    def __init__(self, index, size: int):
        self.index = index
        self.size = size
        super().__init__(f"no such property: {index!r} (size {size})")


class ImmutablePropertyError(IterationIdiomsError, AttributeError):
    """Write to a key protected by a view's denylist."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"property {key!r} can't be changed")
