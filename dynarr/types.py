from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Protocol, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]


def natural_order(left: Any, right: Any) -> int:
    """
    default comparer: orders by the values' own == and < operators.
    values without an ordering (plain objects) fall back to identity order,
    which is total and stable for as long as both objects are alive.
    """
    if left is right or left == right: return 0
    try:
        return -1 if left < right else 1
    except TypeError:
        return -1 if id(left) < id(right) else 1


class Direction(Enum):
    """which end a linear search starts from"""
    FROM_BEGINNING = 'from_beginning'
    FROM_END = 'from_end'


class Duplicates(Enum):
    """how a sorted list treats a value that compares equal to a stored one"""
    IGNORE = 'ignore'
    ACCEPT = 'accept'
    ERROR = 'error'


@runtime_checkable
class Retainable(Protocol):
    """anything a reference-counted list can hold a stake in"""

    def retain(self) -> Any: ...

    def release(self) -> Any: ...


class RefCounted:
    """
    a shared object that is destroyed when its last owner releases it.
    the creator holds the first reference, so a new instance starts at 1.
    """

    def __init__(self):
        self._ref_count = 1

    @property
    def ref_count(self) -> int: return self._ref_count

    @property
    def is_destroyed(self) -> bool: return self._ref_count == 0

    def retain(self) -> int:
        if self._ref_count == 0:
            raise RuntimeError("cannot retain a destroyed object")
        self._ref_count += 1
        return self._ref_count

    def release(self) -> int:
        if self._ref_count == 0:
            raise RuntimeError("release called on a destroyed object")
        self._ref_count -= 1
        if self._ref_count == 0:
            self.on_destroy()
        return self._ref_count

    def on_destroy(self) -> None:
        """called once, when the last reference is released"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ref_count={self._ref_count})"
