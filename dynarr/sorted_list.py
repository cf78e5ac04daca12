from __future__ import annotations

from . import arrays
from .base import BaseList
from .errors import DuplicateItemError
from .ownership import NO_OWNERSHIP, OwnershipPolicy
from .types import *


class SortedList(BaseList[T]):
    """
    dynamic array kept in ascending comparer order.

    every add binary-searches for its slot and shifts the tail, so the order is
    structural: there is no insert, sort or item assignment. the comparer must
    not change meaning while the list is in use.

    duplicates decides what happens to a value equal to one already stored:
      * IGNORE (default) leaves the list as is and returns the existing index
      * ACCEPT inserts the value after the run of equal elements
      * ERROR raises DuplicateItemError without touching the list
    """

    def __init__(self, collection: Optional[Iterable[T]] = None, comparer: Optional[Comparer[T]] = None,
                 duplicates: Duplicates = Duplicates.IGNORE, dtype: Any = object,
                 ownership: OwnershipPolicy = NO_OWNERSHIP):
        super().__init__(comparer, dtype, ownership)
        self._duplicates = Duplicates(duplicates)
        if collection is not None:
            self.add_range(collection)

    @property
    def duplicates(self) -> Duplicates:
        return self._duplicates

    @duplicates.setter
    def duplicates(self, value: Duplicates) -> None:
        self._duplicates = Duplicates(value)

    def add(self, value: T) -> int:
        """add value in sorted position and return its index"""
        self._prepare(value)
        found, index = self.binary_search(value)
        if found:
            if self._duplicates is Duplicates.IGNORE:
                return index
            if self._duplicates is Duplicates.ERROR:
                raise DuplicateItemError(f"{value!r} is already in the list")
            index = arrays.upper_bound(self._items, value, self._comparer, index, self._count - index, self._slots)

        self._insert_at(index, value)
        return index

    def add_range(self, values: Iterable[T]) -> None:
        """add values one at a time; the list stays sorted after each one"""
        values = list(values)
        self._grow_check(self._count + len(values))
        for value in values:
            self.add(value)
