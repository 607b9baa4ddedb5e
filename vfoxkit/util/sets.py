"""Set types: a plain hash set and an insertion-ordered set."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class MapSet(Generic[T]):
    """A hash set whose add reports whether the value was new."""

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._values: dict[T, None] = {}
        for value in values or ():
            self.add(value)

    def add(self, value: T) -> bool:
        """Add a value; return True if it was not present before."""
        if value in self._values:
            return False
        self._values[value] = None
        return True

    def remove(self, value: T) -> None:
        """Remove a value if present."""
        self._values.pop(value, None)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._values))

    def to_list(self) -> list[T]:
        """Return the elements as a new list."""
        return list(self._values)

    def __repr__(self) -> str:
        return f"MapSet({self.to_list()!r})"


class SortedSet(Generic[T]):
    """A set that keeps its elements in insertion order."""

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._elements: list[T] = []
        self._members: set[T] = set()
        for value in values or ():
            self.add(value)

    def add(self, value: T) -> bool:
        """Append a value; return True if it was not present before."""
        if value in self._members:
            return False
        self._elements.append(value)
        self._members.add(value)
        return True

    def remove(self, value: T) -> None:
        """Remove a value if present, keeping the order of the rest."""
        if value in self._members:
            self._members.discard(value)
            self._elements.remove(value)

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._elements))

    def to_list(self) -> list[T]:
        """Return the elements, in order, as a new list."""
        return list(self._elements)

    def insert(self, index: int, value: T) -> bool:
        """Insert a value at a position.

        Returns False if the index is outside 0..len or the value is
        already present.
        """
        if index < 0 or index > len(self._elements):
            return False
        if value in self._members:
            return False
        self._elements.insert(index, value)
        self._members.add(value)
        return True

    def __repr__(self) -> str:
        return f"SortedSet({self._elements!r})"