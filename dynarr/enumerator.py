from __future__ import annotations

import numpy as np

from .arrays import SlotOps, slots_for
from .errors import OutOfRangeError
from .types import *


class ArrayEnumerator(Generic[T]):
    """
    forward-only cursor over a snapshot of a buffer and its count.
    mutating the source list while enumerating is undefined: a reallocation
    leaves this cursor reading the old buffer.
    """

    def __init__(self, items: np.ndarray, count: int, slots: Optional[SlotOps] = None):
        self._items = items
        self._high = count - 1
        self._index = -1
        self._slots = slots or slots_for(items.dtype)

    def move_next(self) -> bool:
        """advance to the next element; False once the snapshot is exhausted"""
        if self._index < self._high:
            self._index += 1
            return True
        return False

    @property
    def current(self) -> T:
        if self._index < 0:
            raise OutOfRangeError("move_next() has not been called yet")
        return self._slots.read(self._items, self._index)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.move_next():
            raise StopIteration
        return self.current

    def __repr__(self) -> str:
        return f"ArrayEnumerator(index={self._index}, count={self._high + 1})"
