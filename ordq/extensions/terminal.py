from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_END = object()


def min_max(items: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
            comparer: Optional[Comparer[K]] = None) -> Tuple[K, K]:
    """smallest and largest key in one pass. raises ValueError on an empty sequence."""
    require_sequence(items, "items")
    keyed = KeyedComparer(key_selector, comparer)
    iterator = iter(items)
    first = next(iterator, _END)
    if first is _END:
        raise ValueError("sequence contains no elements")

    low = high = keyed.key(first)
    for item in iterator:
        key = keyed.key(item)
        if keyed.compare(key, low) < 0: low = key
        if keyed.compare(key, high) > 0: high = key
    return low, high


class TerminalAccessor(Generic[T]):
    """operations that enumerate the sequence and return a concrete value"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def unique_set(self) -> Set[T]:
        """convert to set, raising ValueError on a None or duplicate element"""
        result = set()
        for item in self._enumerable:
            if item is None:
                raise ValueError("sequence must not contain None")
            if item in result:
                raise ValueError(f"sequence must not contain duplicates, found {item!r} twice")
            result.add(item)
        return result

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first hit."""
        if predicate is None: return next(iter(self._enumerable), _END) is not _END
        return any(predicate(x) for x in self._enumerable)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        if predicate is None:
            item = next(iter(self._enumerable), _END)
            if item is _END: raise ValueError("sequence contains no elements")
            return item
        for item in self._enumerable:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default. errors raised while searching propagate."""
        if predicate is None:
            item = next(iter(self._enumerable), _END)
            return default if item is _END else item
        for item in self._enumerable:
            if predicate(item): return item
        return default

    def min_max(self, key_selector: Optional[KeySelector[T, K]] = None,
                comparer: Optional[Comparer[K]] = None) -> Tuple[K, K]:
        """smallest and largest key"""
        return min_max(self._enumerable, key_selector, comparer)
