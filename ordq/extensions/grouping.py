from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def buffer(items: Iterable[T], max_weight: Union[int, float],
           weight_selector: Selector[T, Union[int, float]]) -> Iterator[List[T]]:
    """
    lazily splits items into consecutive lists whose total weight stays within
    max_weight. the ceiling is soft: an item heavier than max_weight on its own
    still gets a list of its own, nothing is dropped or split.
    """
    _check_buffer_arguments(items, max_weight, weight_selector)
    return _buffer(items, max_weight, weight_selector)


def _check_buffer_arguments(items, max_weight, weight_selector) -> None:
    require_sequence(items, "items")
    require_callable(weight_selector, "weight_selector")
    if max_weight < 0:
        raise ValueError("max_weight must not be negative")


def _buffer(items, max_weight, weight_selector) -> Iterator[List[T]]:
    batch: List[T] = []
    batch_weight = 0
    for item in items:
        weight = weight_selector(item)
        if batch and batch_weight + weight > max_weight:
            yield batch
            batch, batch_weight = [], 0
        batch.append(item)
        batch_weight += weight

    if batch:
        yield batch


def aggregate_many(items: Iterable[T], seed_factory: Callable[[], A],
                   accumulate_predicate: Callable[[A, T], bool],
                   accumulator: Accumulator[A, T],
                   result_selector: Selector[A, V]) -> Iterator[V]:
    """
    folds runs of items into results. each run starts from seed_factory(), and an
    item joins the current run while accumulate_predicate(acc, item) is true.
    when it is false the run is closed with result_selector and a new one begins
    with that item. the first item of a run is always accepted.
    """
    _check_aggregate_arguments(items, seed_factory, accumulate_predicate, accumulator, result_selector)
    return _aggregate_many(items, seed_factory, accumulate_predicate, accumulator, result_selector)


def _check_aggregate_arguments(items, seed_factory, accumulate_predicate, accumulator, result_selector) -> None:
    require_sequence(items, "items")
    require_callable(seed_factory, "seed_factory")
    require_callable(accumulate_predicate, "accumulate_predicate")
    require_callable(accumulator, "accumulator")
    require_callable(result_selector, "result_selector")


def _aggregate_many(items, seed_factory, accumulate_predicate, accumulator, result_selector) -> Iterator[V]:
    acc = seed_factory()
    has_items = False
    for item in items:
        if has_items and not accumulate_predicate(acc, item):
            yield result_selector(acc)
            acc = seed_factory()
            has_items = False
        acc = accumulator(acc, item)
        has_items = True

    if has_items:
        yield result_selector(acc)


def _append(parts: List[T], item: T) -> List[T]:
    parts.append(item)
    return parts


def merge_adjacent(items: Iterable[T], test_func: Callable[[T, T], bool],
                   merge_func: Callable[[List[T]], V]) -> Iterator[V]:
    """
    merges runs of neighbouring items into one result each. test_func is asked
    about consecutive pairs (previous, current), not the whole run.
    """
    _check_merge_adjacent_arguments(items, test_func, merge_func)
    return _merge_adjacent(items, test_func, merge_func)


def _check_merge_adjacent_arguments(items, test_func, merge_func) -> None:
    require_sequence(items, "items")
    require_callable(test_func, "test_func")
    require_callable(merge_func, "merge_func")


def _merge_adjacent(items, test_func, merge_func) -> Iterator[V]:
    return _aggregate_many(items, list, lambda parts, item: test_func(parts[-1], item),
                           _append, merge_func)


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def buffer(self, max_weight: Union[int, float],
               weight_selector: Selector[T, Union[int, float]]) -> 'Enumerable[List[T]]':
        """batch consecutive elements under a soft total weight"""
        from ..enumerable import Enumerable
        _check_buffer_arguments(self._enumerable, max_weight, weight_selector)
        return Enumerable(lambda: _buffer(self._enumerable, max_weight, weight_selector))

    def aggregate_many(self, seed_factory: Callable[[], A],
                       accumulate_predicate: Callable[[A, T], bool],
                       accumulator: Accumulator[A, T],
                       result_selector: Selector[A, V]) -> 'Enumerable[V]':
        """fold runs of consecutive elements, starting a new run when the predicate says so"""
        from ..enumerable import Enumerable
        _check_aggregate_arguments(self._enumerable, seed_factory, accumulate_predicate, accumulator, result_selector)
        return Enumerable(lambda: _aggregate_many(
            self._enumerable, seed_factory, accumulate_predicate, accumulator, result_selector))

    def merge_adjacent(self, test_func: Callable[[T, T], bool],
                       merge_func: Callable[[List[T]], V]) -> 'Enumerable[V]':
        """merge runs of neighbouring elements that pass a pairwise test"""
        from ..enumerable import Enumerable
        _check_merge_adjacent_arguments(self._enumerable, test_func, merge_func)
        return Enumerable(lambda: _merge_adjacent(self._enumerable, test_func, merge_func))

    def batch_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[List[T]]':
        """batch consecutive elements with same key"""
        return self.merge_adjacent(lambda prev, cur: key_selector(prev) == key_selector(cur), list)
