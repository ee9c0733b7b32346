from __future__ import annotations

__all__ = ["UniqueCollection"]

from typing import Any, Callable, Collection, Hashable, Iterable, Iterator, TypeVar

from returns.functions import tap
from returns.maybe import Maybe, Nothing, Some

T = TypeVar("T", bound=Hashable)
R = TypeVar("R", bound=Hashable)
D = TypeVar("D")
Self = TypeVar("Self", bound="UniqueCollection")


class UniqueCollection(Collection[T]):
    """An insertion-ordered collection of unique values.

    Values are deduplicated with ordinary hash equality. Every traversal sees the
    values in the order they were first added.
    """

    def __init__(self, values: Iterable[T] | None = None):
        # Rely on stable dictionary
        self._items: dict[T, None] = dict.fromkeys(values) if values is not None else {}

    @classmethod
    def of(cls: type[Self], values: Iterable[T] | None = None) -> Self:
        return cls(values)

    def add(self: Self, value: T) -> Self:
        """Add `value` unless it is already present and return this collection."""
        return tap(lambda collection: collection._items.setdefault(value, None))(self)

    def clear(self: Self) -> Self:
        """Remove every value and return this collection."""
        return tap(lambda collection: collection._items.clear())(self)

    def delete(self, value: T) -> bool:
        """Remove `value` and report whether it was present."""
        if value in self._items:
            del self._items[value]
            return True
        else:
            return False

    def has(self, value: T) -> bool:
        return value in self._items

    def is_empty(self) -> bool:
        return self.size() == 0

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def size(self) -> int:
        return len(self._items)

    def values(self) -> Iterator[T]:
        return iter(self._items)

    def to_list(self) -> list[T]:
        return list(self._items)

    def for_each(self, action: Callable[[T, UniqueCollection[T]], Any]) -> None:
        for value in self._items:
            action(value, self)

    def find(
        self, predicate: Callable[[T, UniqueCollection[T]], object], default: D = None
    ) -> T | D:
        """Return the first value satisfying `predicate`, or `default` if none does.

        The predicate is called with each value and this collection, in insertion order,
        and only the truthiness of its result is used. The search stops at the first
        match.
        """
        for value in self._items:
            if predicate(value, self):
                return value
        return default

    def find_maybe(self, predicate: Callable[[T, UniqueCollection[T]], object]) -> Maybe[T]:
        """Like `find`, but wraps the match in `Some` and returns `Nothing` for no match.

        Use this when `None` itself may be a member of the collection.
        """
        for value in self._items:
            if predicate(value, self):
                return Some(value)
        return Nothing

    def filter(self, predicate: Callable[[T, UniqueCollection[T]], object]) -> UniqueCollection[T]:
        results: UniqueCollection[T] = UniqueCollection()

        for value in self._items:
            if predicate(value, self):
                results.add(value)

        return results

    def map(self, transform: Callable[[T, UniqueCollection[T]], R]) -> UniqueCollection[R]:
        # Transformed values that collide collapse to their first occurrence
        results: UniqueCollection[R] = UniqueCollection()

        for value in self._items:
            results.add(transform(value, self))

        return results

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, x: object) -> bool:
        return x in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __eq__(self, other: object):
        if isinstance(other, UniqueCollection):
            return self._items == other._items
        else:
            return NotImplemented

    def __repr__(self) -> str:
        return f"UniqueCollection({', '.join(repr(value) for value in self._items)})"
