from __future__ import annotations

from .types import *
from .ordered_list import List
from .ownership import RETAIN_RELEASE
from .sorted_list import SortedList


class RCList(List[T]):
    """list of retainable objects. the list holds one counted reference per stored element."""

    def __init__(self, collection: Optional[Iterable[T]] = None, comparer: Optional[Comparer[T]] = None):
        super().__init__(collection, comparer, dtype=object, ownership=RETAIN_RELEASE)


class RCSortedList(SortedList[T]):
    """sorted list of retainable objects"""

    def __init__(self, collection: Optional[Iterable[T]] = None, comparer: Optional[Comparer[T]] = None,
                 duplicates: Duplicates = Duplicates.IGNORE):
        super().__init__(collection, comparer, duplicates, dtype=object, ownership=RETAIN_RELEASE)
