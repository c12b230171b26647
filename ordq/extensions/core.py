from __future__ import annotations
import typing
from itertools import chain, islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


class _CoreOperations(Generic[T]):
    """lazy, streaming building blocks. nothing is read until the result is iterated."""

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        return Enumerable(lambda: filter(predicate, self))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        return Enumerable(lambda: map(selector, self))

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        return Enumerable(lambda: chain.from_iterable(map(selector, self)))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements, reading no further than that"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0)))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0), None))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        return Enumerable(lambda: takewhile(predicate, self))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        return Enumerable(lambda: dropwhile(predicate, self))

    def as_ordered(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None,
                   comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """
        declares the sequence ascending by key_selector under comparer. this does not
        sort. use it only when the source is pre-sorted; union and intersect will
        raise UnorderedSequenceError if it turns out not to be.
        """
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._source_func, KeyedComparer(key_selector, comparer))
