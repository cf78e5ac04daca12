import typing
import numpy as np
from .types import *

if typing.TYPE_CHECKING:
    from .ordered_list import List
    from .sorted_list import SortedList
    from .rc import RCList

def from_iterable(data: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'List[T]':
    """create a list holding the items of any iterable, in order"""
    from .ordered_list import List
    return List(data, comparer)

def from_array(data: np.ndarray, comparer: Optional[Comparer[T]] = None) -> 'List[T]':
    """create a list from a 1-d numpy array, keeping its dtype"""
    from .ordered_list import List
    if data.ndim != 1:
        raise ValueError(f"expected a 1-d array, got {data.ndim} dimensions")
    return List(data, comparer, dtype=data.dtype)

def from_range(start: int, count: int) -> 'List[int]':
    """create an int64 value list of count consecutive integers"""
    return from_array(np.arange(start, start + count, dtype=np.int64))

def repeat(item: T, count: int) -> 'List[T]':
    """create list with repeated item"""
    from .ordered_list import List
    return List([item] * count)

def empty(dtype: Any = object) -> 'List[Any]':
    """create empty list"""
    from .ordered_list import List
    return List(dtype=dtype)

def sorted_from_iterable(data: Iterable[T], comparer: Optional[Comparer[T]] = None,
                         duplicates: Duplicates = Duplicates.IGNORE) -> 'SortedList[T]':
    """create a sorted list from any iterable"""
    from .sorted_list import SortedList
    return SortedList(data, comparer, duplicates)

def rc_from_iterable(data: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'RCList[T]':
    """create a reference-counted list; every item is retained once"""
    from .rc import RCList
    return RCList(data, comparer)

# --- aliases ---
L = from_iterable
