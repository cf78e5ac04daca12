class CollectionError(Exception):
    """base class for errors raised by dynarr containers"""
    pass


class OutOfRangeError(CollectionError, IndexError):
    """an index or count argument is outside the valid bounds"""
    pass


class DuplicateItemError(CollectionError, ValueError):
    """a sorted list with the error policy was asked to add a duplicate"""
    pass


class AllocationError(CollectionError, MemoryError):
    """the backing buffer cannot grow to the requested capacity"""
    pass
