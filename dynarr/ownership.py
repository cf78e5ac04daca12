from __future__ import annotations

from .types import *


class OwnershipPolicy:
    """
    hooks a list calls exactly once per logical add and removal.
    the base policy keeps no stake in its elements.
    """

    def check(self, item: Any) -> None:
        """validate an item before the list is mutated"""
        pass

    def item_added(self, item: Any) -> None:
        pass

    def item_deleted(self, item: Any) -> None:
        pass

    def release_all(self, items: Iterable[Any]) -> None:
        pass


class RetainRelease(OwnershipPolicy):
    """holds one counted reference to every stored element"""

    def check(self, item: Any) -> None:
        if not isinstance(item, Retainable):
            raise TypeError(f"{type(item).__name__} does not implement retain() and release()")

    def item_added(self, item: Any) -> None:
        item.retain()

    def item_deleted(self, item: Any) -> None:
        item.release()

    def release_all(self, items: Iterable[Any]) -> None:
        for item in items:
            item.release()


NO_OWNERSHIP = OwnershipPolicy()
RETAIN_RELEASE = RetainRelease()
