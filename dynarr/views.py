from __future__ import annotations

import typing
from collections.abc import Sequence

import numpy as np

from .extensions.terminal import TerminalAccessor
from .types import *

if typing.TYPE_CHECKING:
    from .base import BaseList


class ReadOnlyList(Generic[T], Sequence[T]):
    """
    read-only view of a list. nothing is copied: the view always reflects the
    current contents of the list it wraps, and exposes no way to change them.
    """

    def __init__(self, source: 'BaseList[T]'):
        self._source = source
        self.to = TerminalAccessor(self)

    @property
    def count(self) -> int: return self._source.count

    @property
    def capacity(self) -> int: return self._source.capacity

    @property
    def dtype(self) -> np.dtype: return self._source.dtype

    def __len__(self) -> int:
        return len(self._source)

    def __getitem__(self, index: int) -> T:
        return self._source[index]

    def get(self, index: int) -> T:
        return self._source.get(index)

    def first(self) -> T:
        return self._source.first()

    def last(self) -> T:
        return self._source.last()

    def contains(self, value: T) -> bool:
        return self._source.contains(value)

    def __contains__(self, value: Any) -> bool:
        return self._source.contains(value)

    def index_of(self, value: T, direction: Direction = Direction.FROM_BEGINNING) -> int:
        return self._source.index_of(value, direction)

    def last_index_of(self, value: T) -> int:
        return self._source.last_index_of(value)

    def binary_search(self, item: T, comparer: Optional[Comparer[T]] = None) -> Tuple[bool, int]:
        return self._source.binary_search(item, comparer)

    def to_array(self) -> np.ndarray:
        return self._source.to_array()

    def __iter__(self) -> Iterator[T]:
        return self._source.get_enumerator()

    def __repr__(self) -> str:
        return f"ReadOnlyList({self.to.list()!r})"
