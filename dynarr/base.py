from __future__ import annotations

import logging
import operator
import typing

import numpy as np

from . import arrays
from .config import settings
from .enumerator import ArrayEnumerator
from .errors import AllocationError, OutOfRangeError
from .extensions.terminal import TerminalAccessor
from .ownership import NO_OWNERSHIP, OwnershipPolicy
from .types import *

if typing.TYPE_CHECKING:
    from .views import ReadOnlyList

logger = logging.getLogger(__name__)


class BaseList(Generic[T]):
    """
    growable contiguous sequence shared by List and SortedList.

    the list owns a numpy buffer whose length is its capacity; only the first
    `count` slots are live. capacity grows by doubling (the first growth jumps
    straight to the requested size) and never shrinks unless asked to.
    every logical add and removal is reported to the ownership policy exactly
    once, which is how the reference-counted variants keep their stakes.
    """

    def __init__(self, comparer: Optional[Comparer[T]] = None, dtype: Any = object,
                 ownership: OwnershipPolicy = NO_OWNERSHIP):
        self._comparer = comparer or natural_order
        self._ownership = ownership
        self._items = arrays.allocate(0, dtype)
        self._slots = arrays.slots_for(self._items.dtype)
        self._count = 0
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    # --- internals ---

    def _check_index(self, index: int, upper: Optional[int] = None) -> int:
        index = operator.index(index)
        if settings.range_checks:
            upper = self._count if upper is None else upper
            if index < 0 or index >= upper:
                raise OutOfRangeError(f"index {index} out of range for a list of {self._count} items")
        return index

    def _check_range(self, index: int, count: int) -> None:
        if settings.range_checks and (index < 0 or count < 0 or index + count > self._count):
            raise OutOfRangeError(f"range [{index}, {index + count}) out of range for a list of {self._count} items")

    def _read(self, index: int) -> T:
        return self._slots.read(self._items, index)

    def _live_items(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._read(i)

    def _prepare(self, value: Any) -> Any:
        """reject a value before any slot is touched, so a failed add changes nothing"""
        self._ownership.check(value)
        if not self._slots.owns_references:
            arrays.check_storable(self._items.dtype, value)
        return value

    def _grow(self, min_count: int) -> None:
        capacity = len(self._items)
        if capacity == 0:
            new_capacity = min_count
        else:
            new_capacity = capacity
            while new_capacity < min_count:
                new_capacity *= 2
            if new_capacity > settings.max_capacity:
                # the last doubling may stop at the ceiling, the request itself may not
                if min_count > settings.max_capacity:
                    logger.error("growing to %d slots overflows max_capacity %d", min_count, settings.max_capacity)
                    raise AllocationError(f"cannot grow beyond {settings.max_capacity} slots")
                new_capacity = settings.max_capacity
        self.capacity = new_capacity

    def _grow_check(self, min_count: Optional[int] = None) -> None:
        min_count = self._count + 1 if min_count is None else min_count
        if min_count > len(self._items):
            self._grow(min_count)

    def _insert_at(self, index: int, value: T) -> None:
        """shift the tail right by one and place value at index"""
        self._grow_check()
        if index != self._count:
            arrays.relocate(self._items, index, index + 1, self._count - index, self._slots)
            arrays.clear_range(self._items, index, 1, self._slots)
        self._items[index] = value
        self._count += 1
        self._ownership.item_added(value)

    # --- size ---

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        """truncating deletes the tail (hooks fire); growing exposes default-valued slots"""
        if settings.range_checks and value < 0:
            raise OutOfRangeError(f"count must be non-negative, got {value}")
        if value > len(self._items):
            self.capacity = value
        if value < self._count:
            self.delete_range(value, self._count - value)
        self._count = value

    @property
    def capacity(self) -> int:
        return len(self._items)

    @capacity.setter
    def capacity(self, value: int) -> None:
        if settings.range_checks and value < 0:
            raise OutOfRangeError(f"capacity must be non-negative, got {value}")
        if value < self._count:
            self.count = value
        if value != len(self._items):
            logger.debug("resizing %s buffer from %d to %d slots", type(self).__name__, len(self._items), value)
            self._items = arrays.resize(self._items, value, self._count, self._slots)

    @property
    def dtype(self) -> np.dtype:
        return self._items.dtype

    @property
    def comparer(self) -> Comparer[T]:
        return self._comparer

    def trim_excess(self) -> None:
        """drop the unused slots so that capacity == count"""
        self.capacity = self._count

    def __len__(self) -> int:
        return self._count

    # --- access ---

    def __getitem__(self, index: int) -> T:
        return self._read(self._check_index(index))

    def get(self, index: int) -> T:
        return self[index]

    def first(self) -> T:
        return self[0]

    def last(self) -> T:
        return self[self._count - 1]

    # --- searching ---

    def index_of(self, value: T, direction: Direction = Direction.FROM_BEGINNING) -> int:
        """o(n) scan for an element comparing equal to value; -1 when missing"""
        return arrays.linear_search(self._items, value, self._comparer, 0, self._count, direction, self._slots)

    def last_index_of(self, value: T) -> int:
        return self.index_of(value, Direction.FROM_END)

    def contains(self, value: T) -> bool:
        return self.index_of(value) >= 0

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def binary_search(self, item: T, comparer: Optional[Comparer[T]] = None) -> Tuple[bool, int]:
        """
        o(log n) search; the list must already be sorted by the comparer used.
        returns (found, index), where index is the leftmost match or the
        insertion point when item is missing.
        """
        return arrays.binary_search(self._items, item, comparer or self._comparer, 0, self._count, self._slots)

    # --- removal ---

    def delete(self, index: int) -> None:
        index = self._check_index(index)
        self._ownership.item_deleted(self._read(index))
        arrays.clear_range(self._items, index, 1, self._slots)

        self._count -= 1
        if index != self._count:
            arrays.relocate(self._items, index + 1, index, self._count - index, self._slots)
            arrays.clear_range(self._items, self._count, 1, self._slots)

    def delete_range(self, index: int, count: int) -> None:
        self._check_range(index, count)
        if count == 0:
            return

        for i in range(index, index + count):
            self._ownership.item_deleted(self._read(i))
        arrays.clear_range(self._items, index, count, self._slots)

        tail = self._count - (index + count)
        if tail > 0:
            arrays.relocate(self._items, index + count, index, tail, self._slots)
            arrays.clear_range(self._items, self._count - count, count, self._slots)
        self._count -= count

    def remove(self, value: T) -> int:
        """delete the first element equal to value; returns its former index or -1"""
        return self.remove_item(value, Direction.FROM_BEGINNING)

    def remove_item(self, value: T, direction: Direction) -> int:
        index = self.index_of(value, direction)
        if index >= 0:
            self.delete(index)
        return index

    def clear(self) -> None:
        """release every element and drop the buffer"""
        self._ownership.release_all(self._live_items())
        self._items = arrays.allocate(0, self._items.dtype)
        self._count = 0

    # --- conversion and enumeration ---

    def to_array(self) -> np.ndarray:
        """copy of the live items, with the list's dtype"""
        return self._items[:self._count].copy()

    def get_enumerator(self) -> ArrayEnumerator[T]:
        return ArrayEnumerator(self._items, self._count, self._slots)

    def __iter__(self) -> Iterator[T]:
        return self.get_enumerator()

    def as_read_only(self) -> 'ReadOnlyList[T]':
        from .views import ReadOnlyList
        return ReadOnlyList(self)

    def __enter__(self) -> 'BaseList[T]':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to.list()!r})"
