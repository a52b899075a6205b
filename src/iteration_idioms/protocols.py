"""Protocol definitions for dependency inversion."""

from typing import Protocol

from .models import Step


class StepCursor(Protocol):
    """Protocol for single-pass cursors."""

    def step(self) -> Step:
        """Produce the next value or signal completion."""
        ...


class Traversable(Protocol):
    """Protocol for values that hand out independent cursors."""

    def begin(self) -> StepCursor:
        """Start a new traversal."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
