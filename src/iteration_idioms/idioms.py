"""
Loop idioms over sequences and containers.

Every function walks its input with one specific idiom and returns the
visited values in order, so the idioms can be compared side by side.
"""

from functools import reduce
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from .models import Container

T = TypeVar("T")
R = TypeVar("R")


# ============================================================================
# Sequences
# ============================================================================


def by_index(items: Sequence[T]) -> List[T]:
    """Classic indexed loop over ``range(len(items))``."""
    visited = []
    for i in range(len(items)):
        visited.append(items[i])
    return visited


def by_enumerate(items: Sequence[T]) -> List[T]:
    """Loop over (index, item) pairs, reading through the index."""
    visited = []
    for index, _ in enumerate(items):
        visited.append(items[index])
    return visited


def direct(items: Sequence[T]) -> List[T]:
    """Plain ``for item in items`` loop."""
    visited = []
    for item in items:
        visited.append(item)
    return visited


def for_each(items: Sequence[T], action: Callable[[T], Any]) -> None:
    """Call ``action`` once per item, for its side effect only."""
    for item in items:
        action(item)


def mapped(items: Sequence[T], fn: Callable[[T], R]) -> List[R]:
    """Build a new list from ``fn(item)``.

    Prefer ``for_each`` when only the side effect matters: this allocates a
    result list.
    """
    return [fn(item) for item in items]


# ============================================================================
# Containers
# ============================================================================


def values_by_index(container: Container) -> List[Any]:
    """Indexed loop over a list of the container's values."""
    values = list(container.values())
    visited = []
    for i in range(len(container)):
        visited.append(values[i])
    return visited


def values_by_key(container: Container) -> List[Any]:
    """Loop over keys and look each value up."""
    visited = []
    for key in container:
        visited.append(container[key])
    return visited


def values_direct(container: Container) -> List[Any]:
    """Loop over ``values()``."""
    visited = []
    for value in container.values():
        visited.append(value)
    return visited


def values_from_items(container: Container) -> List[Any]:
    """Loop over ``items()`` and keep the value half of each pair."""
    visited = []
    for _, value in container.items():
        visited.append(value)
    return visited


# ============================================================================
# Higher-order helpers
# ============================================================================


def keep(items: Sequence[T], predicate: Callable[[T], bool]) -> List[T]:
    """Items for which ``predicate`` holds."""
    return list(filter(predicate, items))


def find(items: Sequence[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """First matching item, or None."""
    return next((item for item in items if predicate(item)), None)


def find_index(items: Sequence[T], predicate: Callable[[T], bool]) -> int:
    """Position of the first matching item, or -1."""
    return next((i for i, item in enumerate(items) if predicate(item)), -1)


def every(items: Sequence[T], predicate: Callable[[T], bool]) -> bool:
    return all(predicate(item) for item in items)


def some(items: Sequence[T], predicate: Callable[[T], bool]) -> bool:
    return any(predicate(item) for item in items)


def reduce_values(items: Sequence[T], fn: Callable[[R, T], R], initial: R) -> R:
    """Fold items left to right starting from ``initial``."""
    return reduce(fn, items, initial)
