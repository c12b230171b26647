from __future__ import annotations
import typing
from itertools import chain
from .ordered import combine_all
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _hash_intersect(left: Iterable[T], right: Iterable[T]) -> Iterator[T]:
    # removing from the lookup on a hit keeps the output distinct
    right_set = set(right)
    for item in left:
        if item in right_set:
            right_set.remove(item)
            yield item


def intersect_all(sequences: Iterable[Optional[Iterable[T]]]) -> Iterable[T]:
    """
    hash-based intersection of any number of unordered sequences.
    yields each common element once, in the order of the first sequence.
    elements must be hashable.
    """
    return combine_all(sequences, _hash_intersect)


def _distinct(items: Iterable[T], key_selector: Optional[KeySelector[T, K]]) -> Iterator[T]:
    seen = set()
    for item in items:
        key = item if key_selector is None else key_selector(item)
        if key not in seen:
            seen.add(key)
            yield item


class SetAccessor(Generic[T]):
    """hash-based set operations for sequences with no particular order."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        if key_selector is not None: require_callable(key_selector, "key_selector")
        return Enumerable(lambda: _distinct(self._enumerable, key_selector))

    def intersect(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the distinct elements also found in other, in this sequence's order."""
        from ..enumerable import Enumerable
        require_sequence(other, "other")
        return Enumerable(lambda: _hash_intersect(self._enumerable, other))

    def intersect_all(self, others: Iterable[Optional[Iterable[T]]]) -> 'Enumerable[T]':
        """intersect with any number of other sequences."""
        from ..enumerable import Enumerable
        require_sequence(others, "others")
        sequences = list(chain([self._enumerable], others))
        return Enumerable(lambda: intersect_all(sequences))

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        require_sequence(other, "other")
        return Enumerable(lambda: chain(self._enumerable, other))
