"""Iteration Idioms - cursors, generators and guarded views over ordered containers."""

__version__ = "0.1.0"

from .cursor import Cursor, LazyCursor, TraversableAdapter, begin, drain, traverse
from .errors import ImmutablePropertyError, IterationIdiomsError, OutOfRangeError
from .generators import NumberRange, is_adult, iter_values
from .guarded import DEFAULT_PROTECTED_KEYS, GuardedView, make_guarded_view
from .models import Container, Step
from .protocols import LoggerProtocol, StepCursor, Traversable

__all__ = [
    # Models
    "Container",
    "Step",
    # Errors
    "IterationIdiomsError",
    "OutOfRangeError",
    "ImmutablePropertyError",
    # Protocols
    "StepCursor",
    "Traversable",
    "LoggerProtocol",
    # Traversal
    "Cursor",
    "LazyCursor",
    "TraversableAdapter",
    "begin",
    "drain",
    "traverse",
    # Generators
    "NumberRange",
    "iter_values",
    "is_adult",
    # Guarded view
    "GuardedView",
    "make_guarded_view",
    "DEFAULT_PROTECTED_KEYS",
]
