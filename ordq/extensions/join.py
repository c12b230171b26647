from __future__ import annotations
import logging
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def full_outer_join(outer: Iterable[T], inner: Iterable[U],
                    outer_key_selector: KeySelector[T, K],
                    inner_key_selector: KeySelector[U, K],
                    result_selector: Callable[[Any, Any], V],
                    default_outer: Any = MISSING,
                    default_inner: Any = MISSING) -> Iterator[V]:
    """
    hash full outer join of two unordered sequences.

    yields result_selector(outer_item, inner_item) for every matching pair,
    result_selector(outer_item, default_inner) for outer items without a match and,
    once the outer side is exhausted, result_selector(default_outer, inner_item) for
    inner items that were never matched. the absent side defaults to MISSING.

    the inner side is loaded into memory when enumeration starts, the outer side
    is streamed.
    """
    _check_join_arguments(outer, inner, outer_key_selector, inner_key_selector, result_selector)
    return _full_outer_join(outer, inner, outer_key_selector, inner_key_selector,
                            result_selector, default_outer, default_inner)


def _check_join_arguments(outer, inner, outer_key_selector, inner_key_selector, result_selector) -> None:
    require_sequence(outer, "outer")
    require_sequence(inner, "inner")
    require_callable(outer_key_selector, "outer_key_selector")
    require_callable(inner_key_selector, "inner_key_selector")
    require_callable(result_selector, "result_selector")


def _full_outer_join(outer, inner, outer_key_selector, inner_key_selector,
                     result_selector, default_outer, default_inner) -> Iterator[V]:
    inner_lookup: Dict[K, List[U]] = defaultdict(list)
    for inner_item in inner:
        inner_lookup[inner_key_selector(inner_item)].append(inner_item)

    # dict as an insertion-ordered set, so leftovers come out in first-seen order
    unmatched_keys = dict.fromkeys(inner_lookup)
    logger.debug(f"full outer join built lookup with {len(inner_lookup)} keys")

    for outer_item in outer:
        outer_key = outer_key_selector(outer_item)
        matches = inner_lookup.get(outer_key)
        if matches is None:
            yield result_selector(outer_item, default_inner)
            continue

        unmatched_keys.pop(outer_key, None)
        for inner_item in matches:
            yield result_selector(outer_item, inner_item)

    for key in unmatched_keys:
        for inner_item in inner_lookup[key]:
            yield result_selector(default_outer, inner_item)


class JoinAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def full_outer_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                        inner_key_selector: KeySelector[U, K],
                        result_selector: Callable[[Any, Any], V],
                        default_outer: Any = MISSING,
                        default_inner: Any = MISSING) -> 'Enumerable[V]':
        """full outer join - includes all elements from both sequences"""
        from ..enumerable import Enumerable
        _check_join_arguments(self._enumerable, inner, outer_key_selector, inner_key_selector, result_selector)
        return Enumerable(lambda: _full_outer_join(
            self._enumerable, inner, outer_key_selector, inner_key_selector,
            result_selector, default_outer, default_inner))
