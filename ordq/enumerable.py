from __future__ import annotations

from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.ordered import OrderedAccessor, _merge, _union, _intersect

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor


# --- base enumerable implementation ---

class _BaseEnumerable(Generic[T]):
    def __init__(self, source_func: Callable[[], Iterable[T]]):
        """init with a function that returns the source iterable when called"""
        require_callable(source_func, "source_func")
        self._source_func = source_func

    def _get_data(self) -> List[T]:
        """enumerate the sequence into a new list"""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        # a fresh pass over the source each time. single-pass sources stay single-pass.
        return iter(self._source_func())


# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired enumerable for ordered-sequence algebra."""
    def __init__(self, source_func: Callable[[], Iterable[T]]):
        super().__init__(source_func)
        # --- initialize accessors ---
        self.ordered = OrderedAccessor(self)
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.group = GroupingAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)


# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """
    a sequence declared ascending under a key and comparer. nothing is sorted;
    the declaration lets the *_with operations reuse the key.
    """

    def __init__(self, source_func: Callable[[], Iterable[T]], keyed: KeyedComparer[T, Any]):
        super().__init__(source_func)
        self._keyed = keyed

    @property
    def key_selector(self) -> KeySelector[T, Any]:
        return self._keyed.key_selector

    @property
    def comparer(self) -> Comparer[Any]:
        return self._keyed.comparer

    def _check_compatible(self, other: Iterable[T]) -> None:
        require_sequence(other, "other")
        if not isinstance(other, OrderedEnumerable): return
        if other.comparer is not self.comparer:
            raise TypeError("cannot combine sequences ordered with different comparers.")
        if other.key_selector is not self.key_selector:
            raise TypeError("cannot combine sequences ordered by different key selectors.")

    def merge_with(self, other: Iterable[T]) -> 'OrderedEnumerable[T]':
        """
        merges this sorted sequence with another sequence sorted the same way (o(n + m)).
        duplicates are kept. the result is still ordered by the same key.
        """
        self._check_compatible(other)
        return OrderedEnumerable(lambda: _merge(self, other, self._keyed), self._keyed)

    def union_with(self, other: Iterable[T]) -> 'OrderedEnumerable[T]':
        """one element per key found in either sequence, ascending"""
        self._check_compatible(other)
        return OrderedEnumerable(lambda: _union(self, other, self._keyed), self._keyed)

    def intersect_with(self, other: Iterable[T]) -> 'OrderedEnumerable[T]':
        """one element per key found in both sequences, ascending"""
        self._check_compatible(other)
        return OrderedEnumerable(lambda: _intersect(self, other, self._keyed), self._keyed)
