from __future__ import annotations
import logging
import typing
from itertools import chain
from ..errors import UnorderedSequenceError
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

_END = object()


# --- binary merge ---

def ordered_merge(left: Iterable[T], right: Iterable[T],
                  key_selector: Optional[KeySelector[T, K]] = None,
                  comparer: Optional[Comparer[K]] = None) -> Iterator[T]:
    """
    lazily merges two ascending sequences into one ascending sequence (o(n + m)).
    duplicates are kept. when keys are equal the right element is emitted first.
    input order is trusted, not checked.
    """
    require_sequence(left, "left")
    require_sequence(right, "right")
    return _merge(left, right, KeyedComparer(key_selector, comparer))


def _merge(left: Iterable[T], right: Iterable[T], keyed: KeyedComparer[T, K]) -> Iterator[T]:
    left_iter, right_iter = iter(left), iter(right)
    left_value = next(left_iter, _END)
    right_value = next(right_iter, _END)

    if left_value is not _END and right_value is not _END:
        left_key, right_key = keyed.key(left_value), keyed.key(right_value)
        while True:
            if keyed.compare(left_key, right_key) < 0:
                yield left_value
                left_value = next(left_iter, _END)
                if left_value is _END: break
                left_key = keyed.key(left_value)
            else:
                yield right_value
                right_value = next(right_iter, _END)
                if right_value is _END: break
                right_key = keyed.key(right_value)

    # at most one side is left, drain it as-is
    if left_value is not _END:
        yield left_value
        yield from left_iter
    if right_value is not _END:
        yield right_value
        yield from right_iter


# --- duplicate-collapsing cursor ---

class _DistinctCursor(Generic[T, K]):
    """
    forward-only cursor over one ascending input. advance() steps to the next
    strictly greater key, absorbing runs of equal keys, and raises
    UnorderedSequenceError as soon as a key goes down.
    """

    __slots__ = ('_iterator', '_keyed', 'value', 'key', 'has_value')

    def __init__(self, source: Iterable[T], keyed: KeyedComparer[T, K]):
        self._iterator = iter(source)
        self._keyed = keyed
        self.value: Optional[T] = None
        self.key: Optional[K] = None
        self.has_value = False

    def start(self) -> bool:
        """pull the first element. returns whether there was one."""
        value = next(self._iterator, _END)
        if value is not _END:
            self.value, self.key = value, self._keyed.key(value)
            self.has_value = True
        return self.has_value

    def advance(self) -> bool:
        """move to the next distinct key. returns whether there was one."""
        for value in self._iterator:
            key = self._keyed.key(value)
            cmp = self._keyed.compare(self.key, key)
            if cmp < 0:
                self.value, self.key = value, key
                return True
            if cmp > 0:
                raise UnorderedSequenceError(self.key, key)
            # equal key: a duplicate, skip it

        self.has_value = False
        return False


# --- binary intersect / union ---

def ordered_intersect(left: Iterable[T], right: Iterable[T],
                      key_selector: Optional[KeySelector[T, K]] = None,
                      comparer: Optional[Comparer[K]] = None) -> Iterator[T]:
    """
    lazily intersects two ascending sequences. yields one element (the left one)
    per key present in both, ascending. raises UnorderedSequenceError when an
    input is found out of order.
    """
    require_sequence(left, "left")
    require_sequence(right, "right")
    return _intersect(left, right, KeyedComparer(key_selector, comparer))


def _intersect(left: Iterable[T], right: Iterable[T], keyed: KeyedComparer[T, K]) -> Iterator[T]:
    left_cursor = _DistinctCursor(left, keyed)
    right_cursor = _DistinctCursor(right, keyed)

    if not (left_cursor.start() and right_cursor.start()):
        return

    while True:
        cmp = keyed.compare(left_cursor.key, right_cursor.key)
        if cmp < 0:
            if not left_cursor.advance(): return
        elif cmp > 0:
            if not right_cursor.advance(): return
        else:
            yield left_cursor.value
            has_left = left_cursor.advance()
            has_right = right_cursor.advance()
            if not (has_left and has_right): return


def ordered_union(left: Iterable[T], right: Iterable[T],
                  key_selector: Optional[KeySelector[T, K]] = None,
                  comparer: Optional[Comparer[K]] = None) -> Iterator[T]:
    """
    lazily unions two ascending sequences. yields one element per key present in
    either input, ascending, preferring the left element on ties. raises
    UnorderedSequenceError when an input is found out of order.
    """
    require_sequence(left, "left")
    require_sequence(right, "right")
    return _union(left, right, KeyedComparer(key_selector, comparer))


def _union(left: Iterable[T], right: Iterable[T], keyed: KeyedComparer[T, K]) -> Iterator[T]:
    left_cursor = _DistinctCursor(left, keyed)
    right_cursor = _DistinctCursor(right, keyed)
    left_cursor.start()
    right_cursor.start()

    while left_cursor.has_value and right_cursor.has_value:
        cmp = keyed.compare(left_cursor.key, right_cursor.key)
        if cmp < 0:
            yield left_cursor.value
            left_cursor.advance()
        elif cmp > 0:
            yield right_cursor.value
            right_cursor.advance()
        else:
            yield left_cursor.value
            left_cursor.advance()
            right_cursor.advance()

    # the survivor is still checked for order while draining
    while left_cursor.has_value:
        yield left_cursor.value
        left_cursor.advance()

    while right_cursor.has_value:
        yield right_cursor.value
        right_cursor.advance()


# --- k-way tree reduction ---

def combine_all(sequences: Iterable[Optional[Iterable[T]]],
                combinator: Combinator[T]) -> Iterable[T]:
    """
    combines any number of sequences with a binary combinator, arranged as a
    balanced tree so each element passes through o(log n) combinators instead
    of o(n) for a left fold.

    the outer collection is walked immediately, the inner sequences are not
    touched until the result is enumerated. None entries count as empty
    sequences. no inputs gives an empty iterator, one input is returned as-is.
    """
    require_sequence(sequences, "sequences")
    require_callable(combinator, "combinator")

    # first pass: combine adjacent pairs of inputs
    layer: List[Iterable[T]] = []
    input_count = 0
    iterator = iter(sequences)
    for left in iterator:
        right = next(iterator, _END)
        if right is _END:
            input_count += 1
            layer.append(touch(left))
            break
        input_count += 2
        layer.append(combinator(touch(left), touch(right)))

    # second pass: keep pairing the partial results in place until one is left
    count = len(layer)
    depth = 1 if input_count > 1 else 0
    while count > 1:
        idx = 0
        for i in range(0, count & ~1, 2):
            layer[idx] = combinator(layer[i], layer[i + 1])
            idx += 1
        if count & 1:
            layer[idx] = layer[count - 1]
            idx += 1
        count = idx
        depth += 1

    logger.debug(f"combined {input_count} sequences into a tree of depth {depth}")
    return layer[0] if count else iter(())


def ordered_merge_all(sequences: Iterable[Optional[Iterable[T]]],
                      key_selector: Optional[KeySelector[T, K]] = None,
                      comparer: Optional[Comparer[K]] = None) -> Iterable[T]:
    """merge any number of ascending sequences, keeping duplicates"""
    keyed = KeyedComparer(key_selector, comparer)
    return combine_all(sequences, lambda left, right: _merge(left, right, keyed))


def ordered_union_all(sequences: Iterable[Optional[Iterable[T]]],
                      key_selector: Optional[KeySelector[T, K]] = None,
                      comparer: Optional[Comparer[K]] = None) -> Iterable[T]:
    """union any number of ascending sequences, one element per key"""
    keyed = KeyedComparer(key_selector, comparer)
    return combine_all(sequences, lambda left, right: _union(left, right, keyed))


def ordered_intersect_all(sequences: Iterable[Optional[Iterable[T]]],
                          key_selector: Optional[KeySelector[T, K]] = None,
                          comparer: Optional[Comparer[K]] = None) -> Iterable[T]:
    """intersect any number of ascending sequences, one element per common key"""
    keyed = KeyedComparer(key_selector, comparer)
    return combine_all(sequences, lambda left, right: _intersect(left, right, keyed))


class OrderedAccessor(Generic[T]):
    """
    streaming set algebra over sequences that are already ascending by some key.
    nothing here sorts: callers promise the order, union and intersect verify it
    as they go, merge takes it on trust.
    """

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def merge(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
              comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        """merge with another ascending sequence, keeping duplicates"""
        from ..enumerable import Enumerable
        require_sequence(other, "other")
        keyed = KeyedComparer(key_selector, comparer)
        return Enumerable(lambda: _merge(self._enumerable, other, keyed))

    def union(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
              comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        """union with another ascending sequence, one element per key"""
        from ..enumerable import Enumerable
        require_sequence(other, "other")
        keyed = KeyedComparer(key_selector, comparer)
        return Enumerable(lambda: _union(self._enumerable, other, keyed))

    def intersect(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
                  comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        """intersect with another ascending sequence, one element per common key"""
        from ..enumerable import Enumerable
        require_sequence(other, "other")
        keyed = KeyedComparer(key_selector, comparer)
        return Enumerable(lambda: _intersect(self._enumerable, other, keyed))

    # --- n-way forms, this sequence goes first ---

    def merge_all(self, others: Iterable[Optional[Iterable[T]]],
                  key_selector: Optional[KeySelector[T, K]] = None,
                  comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        return self._combine_all(others, ordered_merge_all, key_selector, comparer)

    def union_all(self, others: Iterable[Optional[Iterable[T]]],
                  key_selector: Optional[KeySelector[T, K]] = None,
                  comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        return self._combine_all(others, ordered_union_all, key_selector, comparer)

    def intersect_all(self, others: Iterable[Optional[Iterable[T]]],
                      key_selector: Optional[KeySelector[T, K]] = None,
                      comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        return self._combine_all(others, ordered_intersect_all, key_selector, comparer)

    def _combine_all(self, others, operation, key_selector, comparer) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        require_sequence(others, "others")
        # validate the functions now rather than at enumeration time
        KeyedComparer(key_selector, comparer)
        sequences = list(chain([self._enumerable], others))
        return Enumerable(lambda: operation(sequences, key_selector, comparer))
