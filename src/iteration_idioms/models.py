"""Data models for ordered containers and cursor steps."""

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Step:
    """Result of advancing a cursor by one position."""

    done: bool
    value: Optional[Any] = None

    @classmethod
    def finished(cls) -> "Step":
        """Create the terminal step."""
        return cls(done=True)


class Container(MutableMapping):
    """
    Ordered mapping from string keys to scalar values.

    Insertion order is the traversal order. Keys are unique by construction;
    re-assigning an existing key keeps its original position.
    """

    def __init__(
        self,
        entries: Optional[Union[Mapping, Iterable[Tuple[str, Any]]]] = None,
        **kwargs: Any,
    ):
        """
        Initialize container.

        Args:
            entries: Mapping or iterable of (key, value) pairs
            **kwargs: Additional entries, appended after ``entries``
        """
        self._data: Dict[str, Any] = {}
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in pairs:
                self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Container keys must be strings, got {type(key).__name__}")
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Container({self._data!r})"

    @property
    def size(self) -> int:
        """Number of entries."""
        return len(self._data)

    @property
    def entries(self) -> List[Tuple[str, Any]]:
        """Ordered (key, value) pairs."""
        return list(self._data.items())

    def to_dict(self) -> Dict[str, Any]:
        """Convert container to a plain dictionary."""
        return dict(self._data)
