r"""
'       __
'   ___/ /_ _____  ___ _____________
'  / _  / // / _ \/ _ `/ __/ __/ ___/
'  \_,_/\_, /_//_/\_,_/_/ /_/
'      /___/
"""

# expose the shared types
from .types import (
    Comparer,
    Direction,
    Duplicates,
    Retainable,
    RefCounted,
    natural_order
)

# expose the containers
from .base import BaseList
from .ordered_list import List
from .sorted_list import SortedList
from .rc import RCList, RCSortedList
from .views import ReadOnlyList
from .enumerator import ArrayEnumerator

# expose the building blocks
from .ownership import OwnershipPolicy, RetainRelease, NO_OWNERSHIP, RETAIN_RELEASE
from .errors import CollectionError, OutOfRangeError, DuplicateItemError, AllocationError
from .config import Settings, settings, configure, overrides
from . import arrays

# expose the factory functions
from .factories import (
    from_iterable,
    from_array,
    from_range,
    repeat,
    empty,
    sorted_from_iterable,
    rc_from_iterable,
    L
)

# define what `import *` does
__all__ = [
    "BaseList",
    "List",
    "SortedList",
    "RCList",
    "RCSortedList",
    "ReadOnlyList",
    "ArrayEnumerator",
    "Comparer",
    "Direction",
    "Duplicates",
    "Retainable",
    "RefCounted",
    "natural_order",
    "OwnershipPolicy",
    "RetainRelease",
    "NO_OWNERSHIP",
    "RETAIN_RELEASE",
    "CollectionError",
    "OutOfRangeError",
    "DuplicateItemError",
    "AllocationError",
    "Settings",
    "settings",
    "configure",
    "overrides",
    "arrays",
    "from_iterable",
    "from_array",
    "from_range",
    "repeat",
    "empty",
    "sorted_from_iterable",
    "rc_from_iterable",
    "L"
]
