"""
Chainable in-memory collections.

Used to scan the location table for nearby airports without building
intermediate dictionaries.
"""

from typing import TypeVar, Generic, Callable, List, Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A list wrapper whose filters return new collections, so calls chain.

    Examples:
        records.filter(lambda r: r.is_airport).filter(lambda r: r.country_code == 'FR')
    """

    def __init__(self, items: Iterable[T]):
        self._items: List[T] = items if isinstance(items, list) else list(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """Keep the records for which predicate is true, as the same collection class."""
        return self.__class__([item for item in self._items if predicate(item)])

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __repr__(self):
        name = self.__class__.__name__
        if not self._items:
            return f"{name}([])"
        preview = [
            repr(item.code) if hasattr(item, 'code') else f"<{type(item).__name__}>"
            for item in self._items[:3]
        ]
        if len(self._items) > 3:
            preview.append('...')
        return f"{name}([{', '.join(preview)}], count={len(self._items)})"
