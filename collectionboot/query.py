"""Chainable, order-preserving queries over a sequence of items."""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)
D = TypeVar("D")


class Query(Generic[T]):
    """An immutable sequence of items with query operations returning new queries."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def where(self, predicate: Callable[[T], bool]) -> Query[T]:
        """Keep the items for which ``predicate`` is true."""
        return Query(item for item in self._items if predicate(item))

    def select(self, mapper: Callable[[T], T]) -> Query[T]:
        """Transform every item with ``mapper``."""
        return Query(mapper(item) for item in self._items)

    def any(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(item) for item in self._items)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(item) for item in self._items)

    def first(self, predicate: Callable[[T], bool], default: D | None = None) -> T | D | None:
        """Return the first matching item, or ``default`` if none matches."""
        return next((item for item in self._items if predicate(item)), default)

    def count(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for item in self._items if predicate(item))

    def distinct(self) -> Query[T]:
        """Drop repeated items, keeping first occurrences in order."""
        return Query(dict.fromkeys(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Query({self._items!r})"

    def reverse(self) -> Query[T]:
        return Query(reversed(self._items))

    def union(self, other: Query[T]) -> Query[T]:
        """Distinct items of this query followed by new distinct items of ``other``."""
        return Query(dict.fromkeys([*self._items, *other._items]))

    def intersection(self, other: Query[T]) -> Query[T]:
        """Items of ``other``, in its order, that also appear in this query."""
        present = set(self._items)
        return Query(item for item in other._items if item in present)

    def difference(self, other: Query[T]) -> Query[T]:
        """Items of this query, in order, that do not appear in ``other``."""
        excluded = set(other._items)
        return Query(item for item in self._items if item not in excluded)

    def to_list(self) -> list[T]:
        return list(self._items)


def from_items(items: Iterable[T]) -> Query[T]:
    """Start a query over the given items."""
    return Query(items)