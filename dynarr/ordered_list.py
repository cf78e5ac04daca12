from __future__ import annotations

from . import arrays
from .base import BaseList
from .ownership import NO_OWNERSHIP, OwnershipPolicy
from .types import *


class List(BaseList[T]):
    """
    dynamic array that keeps insertion order unless it is explicitly reordered
    with exchange, move, reverse or sort.
    """

    def __init__(self, collection: Optional[Iterable[T]] = None, comparer: Optional[Comparer[T]] = None,
                 dtype: Any = object, ownership: OwnershipPolicy = NO_OWNERSHIP):
        super().__init__(comparer, dtype, ownership)
        if collection is not None:
            self.insert_range(0, collection)

    def __setitem__(self, index: int, value: T) -> None:
        """replace a slot; the new value is added before the old one is released"""
        index = self._check_index(index)
        self._prepare(value)
        original = self._read(index)
        self._items[index] = value
        self._ownership.item_added(value)
        self._ownership.item_deleted(original)

    def add(self, value: T) -> int:
        """append value and return its index. amortized o(1)."""
        index = self._count
        self._insert_at(index, self._prepare(value))
        return index

    def add_range(self, values: Iterable[T]) -> None:
        self.insert_range(self._count, values)

    def insert(self, index: int, value: T) -> None:
        """insert before index; index == count appends"""
        index = self._check_index(index, self._count + 1)
        self._insert_at(index, self._prepare(value))

    def insert_range(self, index: int, values: Iterable[T]) -> None:
        index = self._check_index(index, self._count + 1)
        # materialize first: grows once, and inserting a list into itself is safe
        values = [self._prepare(value) for value in values]
        added = len(values)
        if added == 0:
            return

        self._grow_check(self._count + added)
        if index != self._count:
            arrays.relocate(self._items, index, index + added, self._count - index, self._slots)
            arrays.clear_range(self._items, index, added, self._slots)

        for offset, value in enumerate(values):
            self._items[index + offset] = value
            self._ownership.item_added(value)
        self._count += added

    def exchange(self, index1: int, index2: int) -> None:
        """swap two elements. ownership is unaffected."""
        index1 = self._check_index(index1)
        index2 = self._check_index(index2)
        self._items[index1], self._items[index2] = self._items[index2], self._items[index1]

    def move(self, cur_index: int, new_index: int) -> None:
        """take the element at cur_index out and reinsert it at new_index"""
        if cur_index == new_index:
            return
        cur_index = self._check_index(cur_index)
        new_index = self._check_index(new_index)

        item = self._items[cur_index]
        arrays.clear_range(self._items, cur_index, 1, self._slots)
        if cur_index < new_index:
            arrays.relocate(self._items, cur_index + 1, cur_index, new_index - cur_index, self._slots)
        else:
            arrays.relocate(self._items, new_index, new_index + 1, cur_index - new_index, self._slots)
        arrays.clear_range(self._items, new_index, 1, self._slots)
        self._items[new_index] = item

    def reverse(self) -> None:
        arrays.reverse_range(self._items, 0, self._count, self._slots)

    def sort(self, comparer: Optional[Comparer[T]] = None) -> None:
        """in-place quicksort; equal elements may change relative order"""
        arrays.sort(self._items, comparer or self._comparer, 0, self._count, self._slots)
