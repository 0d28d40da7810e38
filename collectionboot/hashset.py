"""A mutable hash set with explicit set-algebra methods."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class HashSet(Generic[T]):
    """An unordered collection of distinct hashable items."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._data: set[T] = set(items) if items is not None else set()

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> HashSet[T]:
        """Build a set holding the given items."""
        return cls(items)

    def add(self, *items: T) -> None:
        """Insert one or more items."""
        self._data.update(items)

    def add_all(self, items: Iterable[T]) -> None:
        """Insert every item of an iterable."""
        self._data.update(items)

    def remove(self, item: T) -> None:
        """Remove an item; absent items are ignored."""
        self._data.discard(item)

    def contains(self, item: T) -> bool:
        return item in self._data

    def contains_all(self, *items: T) -> bool:
        """Return True if every given item is present."""
        return all(item in self._data for item in items)

    def to_list(self) -> list[T]:
        """Return the items as a list, in no particular order."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"HashSet({sorted(self._data, key=repr)!r})"

    def clear(self) -> None:
        self._data = set()

    def is_empty(self) -> bool:
        return not self._data

    def clone(self) -> HashSet[T]:
        """Return an independent copy."""
        return type(self)(self._data)

    def union(self, other: HashSet[T]) -> HashSet[T]:
        return type(self)(self._data | other._data)

    def intersection(self, other: HashSet[T]) -> HashSet[T]:
        return type(self)(self._data & other._data)

    def difference(self, other: HashSet[T]) -> HashSet[T]:
        """Return the items of this set that are not in ``other``."""
        return type(self)(self._data - other._data)