"""
range operations over the contiguous numpy buffers that back every list.

two kinds of slots exist. value buffers (any non-object dtype) hold plain
values that can be bulk copied and never need clearing. reference buffers
(object dtype) hold python references: they are moved one element at a time in
an overlap-safe order and cleared back to None so that a vacated slot never
keeps an object alive.

no routine here knows about counts or capacity. callers pass explicit
index/count pairs, which are range checked while settings.range_checks is on.
"""
from __future__ import annotations

import logging
import numbers
from abc import ABC, abstractmethod

import numpy as np

from .config import settings
from .errors import AllocationError, OutOfRangeError
from .types import *

logger = logging.getLogger(__name__)

# scalar types numpy can compare against a value buffer without surprises
_NUMERIC_SCALARS = (int, float, bool, np.number, np.bool_)


# --- slot strategies ---

class SlotOps(ABC):
    """element-kind specific slot handling"""
    owns_references = False

    @abstractmethod
    def read(self, buffer: np.ndarray, index: int) -> Any:
        """return the python value stored at index"""
        pass

    @abstractmethod
    def relocate(self, buffer: np.ndarray, from_index: int, to_index: int, count: int) -> None:
        pass

    @abstractmethod
    def relocate_between(self, source: np.ndarray, from_index: int,
                         target: np.ndarray, to_index: int, count: int) -> None:
        pass

    @abstractmethod
    def clear(self, buffer: np.ndarray, index: int, count: int) -> None:
        pass

    @abstractmethod
    def reverse(self, buffer: np.ndarray, index: int, count: int) -> None:
        pass


class ValueSlots(SlotOps):
    """plain values: bulk copies, nothing to finalize"""

    def read(self, buffer, index):
        return buffer[index].item()

    def relocate(self, buffer, from_index, to_index, count):
        # numpy buffers overlapping assignments before writing
        buffer[to_index:to_index + count] = buffer[from_index:from_index + count]

    def relocate_between(self, source, from_index, target, to_index, count):
        target[to_index:to_index + count] = source[from_index:from_index + count]

    def clear(self, buffer, index, count):
        pass

    def reverse(self, buffer, index, count):
        buffer[index:index + count] = buffer[index:index + count][::-1].copy()


class ReferenceSlots(SlotOps):
    """python references: element-wise moves, vacated slots reset to None"""
    owns_references = True

    def read(self, buffer, index):
        return buffer[index]

    def relocate(self, buffer, from_index, to_index, count):
        if to_index > from_index:
            for i in range(count - 1, -1, -1):
                buffer[to_index + i] = buffer[from_index + i]
        elif to_index < from_index:
            for i in range(count):
                buffer[to_index + i] = buffer[from_index + i]

    def relocate_between(self, source, from_index, target, to_index, count):
        for i in range(count):
            target[to_index + i] = source[from_index + i]

    def clear(self, buffer, index, count):
        if count > 0:
            buffer[index:index + count] = None

    def reverse(self, buffer, index, count):
        low, high = index, index + count - 1
        while low < high:
            buffer[low], buffer[high] = buffer[high], buffer[low]
            low += 1
            high -= 1


VALUE_SLOTS = ValueSlots()
REFERENCE_SLOTS = ReferenceSlots()


def slots_for(dtype: Any) -> SlotOps:
    """pick the slot strategy matching a dtype"""
    return REFERENCE_SLOTS if np.dtype(dtype).hasobject else VALUE_SLOTS


# --- helpers ---

def _check_range(buffer: np.ndarray, index: int, count: int) -> None:
    if not settings.range_checks:
        return
    if index < 0 or count < 0 or index + count > len(buffer):
        raise OutOfRangeError(
            f"range [{index}, {index + count}) is outside a buffer of length {len(buffer)}")


def _resolve(buffer: np.ndarray, comparer: Optional[Comparer], index: int, count: Optional[int],
             slots: Optional[SlotOps]) -> Tuple[Comparer, int, SlotOps]:
    """fill in the defaults shared by the search and sort routines"""
    if count is None:
        count = len(buffer) - index
    _check_range(buffer, index, count)
    return comparer or natural_order, count, slots or slots_for(buffer.dtype)


def _can_vectorize(buffer: np.ndarray, comparer: Comparer) -> bool:
    return comparer is natural_order and not buffer.dtype.hasobject


# --- allocation ---

def allocate(capacity: int, dtype: Any = object) -> np.ndarray:
    """allocate an empty buffer. reference buffers start out None filled."""
    dtype = np.dtype(dtype)
    if capacity < 0:
        raise OutOfRangeError(f"capacity must be non-negative, got {capacity}")
    if capacity > settings.max_capacity:
        logger.error("capacity %d exceeds the configured maximum of %d", capacity, settings.max_capacity)
        raise AllocationError(f"cannot allocate {capacity} slots (max_capacity={settings.max_capacity})")
    try:
        if dtype.hasobject:
            return np.empty(capacity, dtype=dtype)
        return np.zeros(capacity, dtype=dtype)
    except (MemoryError, ValueError) as e:
        logger.error("numpy failed to allocate %d slots of %s: %s", capacity, dtype, e)
        raise AllocationError(f"cannot allocate {capacity} slots of {dtype}") from e


def check_storable(dtype: Any, value: Any) -> None:
    """
    raise ValueError unless a value buffer of dtype can hold value without
    changing it. floats may lose precision but must not overflow to infinity;
    every other kind must convert to something equal to the input.
    """
    dtype = np.dtype(dtype)
    if dtype.hasobject:
        return

    if dtype.kind in 'US':
        text_type = str if dtype.kind == 'U' else bytes
        width = dtype.itemsize // 4 if dtype.kind == 'U' else dtype.itemsize
        if not isinstance(value, text_type):
            raise ValueError(f"{value!r} cannot be stored in a {dtype} buffer")
        if len(value) > width:
            raise ValueError(f"{value!r} is longer than the {width} characters a {dtype} buffer holds")
        return

    try:
        converted = dtype.type(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"{value!r} cannot be stored in a {dtype} buffer") from e

    if dtype.kind in 'fc':
        if not isinstance(value, (numbers.Number, np.bool_)):
            raise ValueError(f"{value!r} is not a number")
        already_infinite = isinstance(value, (float, complex, np.inexact)) and np.isinf(value)
        if np.isinf(converted) and not already_infinite:
            raise ValueError(f"{value!r} overflows a {dtype} buffer")
        return

    if not converted == value:
        raise ValueError(f"{value!r} would be stored in a {dtype} buffer as {converted!r}")


def resize(buffer: np.ndarray, capacity: int, count: int, slots: Optional[SlotOps] = None) -> np.ndarray:
    """return a new buffer of the given capacity holding the first live items of buffer"""
    slots = slots or slots_for(buffer.dtype)
    resized = allocate(capacity, buffer.dtype)
    slots.relocate_between(buffer, 0, resized, 0, min(count, capacity))
    return resized


# --- relocation and finalization ---

def relocate(buffer: np.ndarray, from_index: int, to_index: int, count: int,
             slots: Optional[SlotOps] = None) -> None:
    """move count items inside one buffer. overlapping ranges are handled."""
    _check_range(buffer, from_index, count)
    _check_range(buffer, to_index, count)
    if count == 0 or from_index == to_index:
        return
    (slots or slots_for(buffer.dtype)).relocate(buffer, from_index, to_index, count)


def relocate_between(source: np.ndarray, from_index: int, target: np.ndarray, to_index: int,
                     count: int, slots: Optional[SlotOps] = None) -> None:
    """move count items from one buffer into another"""
    _check_range(source, from_index, count)
    _check_range(target, to_index, count)
    if count == 0:
        return
    (slots or slots_for(target.dtype)).relocate_between(source, from_index, target, to_index, count)


def clear_range(buffer: np.ndarray, index: int, count: int, slots: Optional[SlotOps] = None) -> None:
    """mark slots as unused. drops the references held by reference buffers."""
    _check_range(buffer, index, count)
    (slots or slots_for(buffer.dtype)).clear(buffer, index, count)


def reverse_range(buffer: np.ndarray, index: int, count: int, slots: Optional[SlotOps] = None) -> None:
    _check_range(buffer, index, count)
    if count > 1:
        (slots or slots_for(buffer.dtype)).reverse(buffer, index, count)


# --- sorting ---

def _quick_sort(buffer: np.ndarray, comparer: Comparer, low: int, high: int, slots: SlotOps) -> None:
    read = slots.read
    while low < high:
        i, j = low, high
        pivot = read(buffer, low + ((high - low) >> 1))
        while i <= j:
            while comparer(read(buffer, i), pivot) < 0:
                i += 1
            while comparer(read(buffer, j), pivot) > 0:
                j -= 1
            if i <= j:
                if i != j:
                    buffer[i], buffer[j] = buffer[j], buffer[i]
                i += 1
                j -= 1

        # recurse into the smaller partition, loop on the larger one
        if j - low < high - i:
            if low < j:
                _quick_sort(buffer, comparer, low, j, slots)
            low = i
        else:
            if i < high:
                _quick_sort(buffer, comparer, i, high, slots)
            high = j


def sort(buffer: np.ndarray, comparer: Optional[Comparer] = None, index: int = 0,
         count: Optional[int] = None, slots: Optional[SlotOps] = None) -> None:
    """
    in-place quicksort of buffer[index:index + count]. not stable.
    value buffers in natural order are handed to numpy instead.
    """
    comparer, count, slots = _resolve(buffer, comparer, index, count, slots)
    if count < 2:
        return
    if _can_vectorize(buffer, comparer):
        try:
            buffer[index:index + count].sort(kind='quicksort')
            return
        except (TypeError, ValueError):
            pass
    _quick_sort(buffer, comparer, index, index + count - 1, slots)


# --- searching ---

def _searchsorted(buffer: np.ndarray, item: Any, index: int, count: int, side: str) -> Optional[int]:
    """vectorized bound search, or None when numpy cannot be used for item"""
    if not isinstance(item, _NUMERIC_SCALARS):
        return None
    try:
        return index + int(np.searchsorted(buffer[index:index + count], item, side=side))
    except (TypeError, ValueError):
        return None


def binary_search(buffer: np.ndarray, item: Any, comparer: Optional[Comparer] = None, index: int = 0,
                  count: Optional[int] = None, slots: Optional[SlotOps] = None) -> Tuple[bool, int]:
    """
    search a sorted range for item. returns (found, position): when found,
    position is the leftmost element comparing equal to item; otherwise it is
    the index of the first larger element, i.e. where item would be inserted.
    """
    comparer, count, slots = _resolve(buffer, comparer, index, count, slots)
    if count == 0:
        return False, index

    if _can_vectorize(buffer, comparer):
        position = _searchsorted(buffer, item, index, count, 'left')
        if position is not None:
            found = position < index + count and comparer(slots.read(buffer, position), item) == 0
            return found, position

    found = False
    low, high = index, index + count - 1
    while low <= high:
        mid = low + ((high - low) >> 1)
        cmp = comparer(slots.read(buffer, mid), item)
        if cmp < 0:
            low = mid + 1
        else:
            high = mid - 1
            if cmp == 0:
                found = True
    return found, low


def upper_bound(buffer: np.ndarray, item: Any, comparer: Optional[Comparer] = None, index: int = 0,
                count: Optional[int] = None, slots: Optional[SlotOps] = None) -> int:
    """index of the first element in a sorted range that compares greater than item"""
    comparer, count, slots = _resolve(buffer, comparer, index, count, slots)
    if _can_vectorize(buffer, comparer):
        position = _searchsorted(buffer, item, index, count, 'right')
        if position is not None:
            return position

    low, high = index, index + count
    while low < high:
        mid = low + ((high - low) >> 1)
        if comparer(slots.read(buffer, mid), item) <= 0:
            low = mid + 1
        else:
            high = mid
    return low


def linear_search(buffer: np.ndarray, item: Any, comparer: Optional[Comparer] = None, index: int = 0,
                  count: Optional[int] = None, direction: Direction = Direction.FROM_BEGINNING,
                  slots: Optional[SlotOps] = None) -> int:
    """position of the first (or last) element comparing equal to item, or -1"""
    comparer, count, slots = _resolve(buffer, comparer, index, count, slots)
    forward = direction is Direction.FROM_BEGINNING

    if _can_vectorize(buffer, comparer) and isinstance(item, _NUMERIC_SCALARS):
        try:
            mask = buffer[index:index + count] == item
        except (TypeError, ValueError):
            mask = None
        if isinstance(mask, np.ndarray):
            hits = np.flatnonzero(mask)
            if hits.size == 0:
                return -1
            return index + int(hits[0] if forward else hits[-1])

    positions = range(index, index + count) if forward else range(index + count - 1, index - 1, -1)
    for i in positions:
        if comparer(slots.read(buffer, i), item) == 0:
            return i
    return -1
