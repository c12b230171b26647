import suite
import threading
import numpy as np
import pandas as pd
from ordq import (
    P, from_range, count_from, repeat, empty, generate, Enumerable, OrderedEnumerable,
    ordered_union, with_cancellation, pad_right, min_max, intersect_all,
    SequenceCancelledError, OrdqError, UnorderedSequenceError
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


def tracked(source, seen):
    """yields from source, recording every element as it is pulled"""
    for item in source:
        seen.append(item)
        yield item


# --- factories ---

@test("factory functions build the expected sequences")
def test_factories():
    assert_equal(from_range(3, 4).to.list(), [3, 4, 5, 6], "from_range")
    assert_equal(repeat('x', 3).to.list(), ['x', 'x', 'x'], "repeat with count")
    assert_equal(empty().to.list(), [], "empty")
    assert_equal(P(None).to.list(), [], "None is an empty sequence")


@test("infinite factories are usable through take")
def test_infinite_factories():
    assert_equal(count_from(5, 5).take(3).to.list(), [5, 10, 15], "count_from")
    assert_equal(repeat(0).take(4).to.list(), [0, 0, 0, 0], "endless repeat")
    counter = iter(range(100))
    assert_equal(generate(lambda: next(counter)).take(3).to.list(), [0, 1, 2], "endless generate")


@test("generate calls its function once per element pulled")
def test_generate_lazy():
    calls = []
    numbers = generate(lambda: calls.append(1) or len(calls), 10)
    assert_equal(calls, [], "nothing generated at construction")
    assert_equal(numbers.take(2).to.list(), [1, 2], "two elements")
    assert_equal(len(calls), 2, "two calls")


# --- core operations ---

@test("core operations are lazy and chainable")
def test_core_chain():
    seen = []
    result = P(tracked(range(100), seen)).where(lambda x: x % 2 == 0).select(lambda x: x * 10).take(3)
    assert_equal(seen, [], "nothing read before terminal")
    assert_equal(result.to.list(), [0, 20, 40], "chained result")
    assert_equal(seen, [0, 1, 2, 3, 4], "read only as far as needed")


@test("skip, take_while, skip_while and select_many")
def test_core_misc():
    numbers = from_range(1, 6)
    assert_equal(numbers.skip(4).to.list(), [5, 6], "skip")
    assert_equal(numbers.skip(-1).to.list(), [1, 2, 3, 4, 5, 6], "negative skip")
    assert_equal(numbers.take_while(lambda x: x < 3).to.list(), [1, 2], "take_while")
    assert_equal(numbers.skip_while(lambda x: x < 5).to.list(), [5, 6], "skip_while")
    assert_equal(P([[1, 2], [3]]).select_many(lambda x: x).to.list(), [1, 2, 3], "select_many")


@test("an enumerable over a list can be enumerated repeatedly")
def test_reenumerable():
    evens = from_range(0, 10).where(lambda x: x % 2 == 0)
    assert_equal(evens.to.list(), evens.to.list(), "same result twice")


@test("an enumerable requires a callable source")
def test_enumerable_requires_source():
    with assert_raises(TypeError):
        Enumerable([1, 2, 3])


# --- ordered enumerable ---

@test("as_ordered declares order for the *_with operations")
def test_as_ordered():
    ordered = P([1, 3, 5]).as_ordered()
    union = ordered.union_with([3, 4])
    assert_that(isinstance(union, OrderedEnumerable), "result stays ordered")
    assert_equal(union.to.list(), [1, 3, 4, 5], "union_with")
    assert_equal(ordered.intersect_with([0, 3, 5]).to.list(), [3, 5], "intersect_with")
    assert_equal(ordered.merge_with([2, 3]).to.list(), [1, 2, 3, 3, 5], "merge_with")


@test("as_ordered carries key selector into chained operations")
def test_as_ordered_key():
    rows = P([{'id': 1}, {'id': 4}]).as_ordered(lambda r: r['id'])
    result = rows.union_with([{'id': 2}]).intersect_with([{'id': 2}, {'id': 4}])
    assert_equal([r['id'] for r in result], [2, 4], "chained by id")
    assert_equal(rows.key_selector({'id': 9}), 9, "key selector exposed")


@test("ordered sequences with different comparers cannot be combined")
def test_as_ordered_comparer_mismatch():
    ascending = P([1, 2]).as_ordered()
    descending = P([2, 1]).as_ordered(comparer=lambda a, b: b - a)
    with assert_raises(TypeError):
        ascending.union_with(descending)
    assert_equal(descending.merge_with([3, 0]).to.list(), [3, 2, 1, 0], "descending merge")


@test("ordered sequences with different key selectors cannot be combined")
def test_as_ordered_key_mismatch():
    by_id = P([{'id': 1, 'rank': 2}]).as_ordered(lambda r: r['id'])
    by_rank = P([{'id': 2, 'rank': 1}]).as_ordered(lambda r: r['rank'])
    with assert_raises(TypeError):
        by_id.union_with(by_rank)
    with assert_raises(TypeError):
        by_id.merge_with(by_rank)
    same_key = by_id.union_with([{'id': 3, 'rank': 0}])
    assert_equal([r['id'] for r in same_key.intersect_with(by_id)], [1], "shared key selector combines")


# --- hash set operations ---

@test("set accessor handles unordered sequences")
def test_set_accessor():
    assert_equal(P([3, 1, 3, 2, 1]).set.distinct().to.list(), [3, 1, 2], "distinct keeps first appearance")
    assert_equal(P(['a', 'A', 'b']).set.distinct(str.lower).to.list(), ['a', 'b'], "distinct by key")
    assert_equal(P([3, 1, 2, 3]).set.intersect([2, 3, 5]).to.list(), [3, 2], "intersect")
    assert_equal(P([1, 2]).set.concat([2, 3]).to.list(), [1, 2, 2, 3], "concat")


@test("hash intersect of many unordered sequences")
def test_intersect_all_unordered():
    assert_equal(list(intersect_all([[3, 1, 2, 3], [2, 3, 5], [3, 2]])), [3, 2], "module function")
    assert_equal(P([3, 1, 2, 3]).set.intersect_all([[2, 3, 5], [3, 2]]).to.list(), [3, 2], "accessor")
    assert_equal(list(intersect_all([[1, 2], None])), [], "None is empty")


# --- cancellation ---

@test("with_cancellation stops before pulling from the source again")
def test_cancellation():
    event = threading.Event()
    seen, collected = [], []
    with assert_raises(SequenceCancelledError):
        for item in with_cancellation(tracked(count_from(), seen), event):
            collected.append(item)
            if len(collected) == 2:
                event.set()
    assert_equal(collected, [0, 1], "delivered before cancellation")
    assert_equal(seen, [0, 1], "source not read after cancellation")


@test("with_cancellation without an event is a no-op")
def test_cancellation_no_event():
    source = [1, 2]
    assert_that(with_cancellation(source, None) is source, "items returned unchanged")
    with assert_raises(TypeError):
        with_cancellation(source, object())


@test("with_cancellation accessor without an event passes everything through")
def test_cancellation_accessor_no_event():
    assert_equal(P([1, 2]).util.with_cancellation(None).to.list(), [1, 2], "no-op accessor")
    with assert_raises(TypeError):
        P([1, 2]).util.with_cancellation(object())


@test("cancellation propagates through combinators unchanged")
def test_cancellation_through_union():
    event = threading.Event()
    event.set()
    with assert_raises(SequenceCancelledError) as raised:
        list(ordered_union(with_cancellation([1, 2], event), [3]))
    assert_that(isinstance(raised.exception, OrdqError), "library error type")
    with assert_raises(SequenceCancelledError):
        P([1, 2]).util.with_cancellation(event).ordered.union([3]).to.list()


# --- padding ---

@test("pad_right fills up to the requested length")
def test_pad_right():
    assert_equal(list(pad_right([1, 2], 4, 0)), [1, 2, 0, 0], "padded")
    assert_equal(list(pad_right([1, 2, 3], 2)), [1, 2, 3], "never truncates")
    assert_equal(P(['a']).util.pad_right(3).to.list(), ['a', None, None], "accessor with default value")


@test("side_effect sees every element that passes")
def test_side_effect():
    seen = []
    result = P([1, 2, 3]).util.side_effect(seen.append).take(2).to.list()
    assert_equal(result, [1, 2], "elements unchanged")
    assert_equal(seen, [1, 2], "only pulled elements observed")


# --- terminals ---

@test("min_max finds both extremes in one pass")
def test_min_max():
    assert_equal(min_max([4, 1, 9, 3]), (1, 9), "natural order")
    assert_equal(min_max(['bb', 'a', 'ccc'], len), (1, 3), "by key")
    assert_equal(P([4, 1, 9]).to.min_max(comparer=lambda a, b: b - a), (9, 1), "reversed comparer")
    with assert_raises(ValueError):
        min_max([])


@test("unique_set rejects None and duplicates")
def test_unique_set():
    assert_equal(P([1, 2, 3]).to.unique_set(), {1, 2, 3}, "unique elements")
    with assert_raises(ValueError):
        P([1, 2, 1]).to.unique_set()
    with assert_raises(ValueError):
        P([1, None]).to.unique_set()


@test("numpy and pandas terminals")
def test_numpy_pandas():
    array = from_range(1, 3).to.array()
    assert_that(isinstance(array, np.ndarray), "array type")
    assert_equal(array.tolist(), [1, 2, 3], "array values")
    frame = P([{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'}]).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "dataframe type")
    assert_equal(frame['id'].tolist(), [1, 2], "dataframe column")
    assert_equal(P([1, 2]).to.pandas().sum(), 3, "series")


@test("short-circuiting terminals work on infinite sequences")
def test_terminals_infinite():
    assert_that(count_from().to.any(lambda x: x > 10), "any stops at the first hit")
    assert_that(count_from().to.any(), "non-empty")
    assert_equal(count_from(1).to.first(lambda x: x % 7 == 0), 7, "first matching")
    assert_equal(count_from().take(5).to.count(), 5, "count of a bounded prefix")


@test("first and first_or_default on empty sequences")
def test_first_empty():
    with assert_raises(ValueError):
        empty().to.first()
    assert_equal(empty().to.first_or_default(default=-1), -1, "default")
    assert_that(not empty().to.any(), "empty has nothing")
    assert_equal(P([1, 2]).to.first_or_default(lambda x: x > 5, 'none'), 'none', "no match")
    assert_equal(count_from().to.first_or_default(lambda x: x > 5), 6, "stops at the first match")


@test("first_or_default lets errors found while searching propagate")
def test_first_or_default_errors():
    with assert_raises(UnorderedSequenceError):
        P([2, 1]).ordered.union([]).to.first_or_default(lambda x: x < 1, default='fallback')

    def failing():
        yield 1
        raise ValueError("disk read failed")

    with assert_raises(ValueError) as raised:
        P(failing()).to.first_or_default(lambda x: x > 1, default='fallback')
    assert_equal(str(raised.exception), "disk read failed", "upstream error untouched")
    with assert_raises(ValueError):
        P(failing()).skip(1).to.first_or_default(default='fallback')


@test("dict and set terminals")
def test_dict_set():
    rows = P([{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'}])
    assert_equal(rows.to.dict(lambda r: r['id'], lambda r: r['name']), {1: 'a', 2: 'b'}, "dict")
    assert_equal(P([1, 1, 2]).to.set(), {1, 2}, "set")


if __name__ == "__main__":
    suite.run(title="ordq enumerable test suite")
