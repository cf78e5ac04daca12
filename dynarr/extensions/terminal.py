from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..base import BaseList

class TerminalAccessor(Generic[T]):
    def __init__(self, list_instance: 'BaseList[T]'):
        self._list = list_instance

    def list(self) -> List[T]:
        """convert to a python list"""
        if self._list.dtype.hasobject: return list(self._list.to_array())
        # tolist() turns numpy scalars back into python ones
        return self._list.to_array().tolist()

    def tuple(self) -> Tuple[T, ...]:
        """convert to a tuple"""
        return tuple(self.list())

    def array(self) -> np.ndarray:
        """convert to numpy array (a copy of the live items)"""
        return self._list.to_array()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self.list())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self.list()}

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series, keeping the list's dtype"""
        return pd.Series(self._list.to_array(), name=name)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe (items are rows)"""
        return pd.DataFrame(self.list())
