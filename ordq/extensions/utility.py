from __future__ import annotations
import logging
import threading
import typing
from ..errors import SequenceCancelledError
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def with_cancellation(items: Iterable[T], cancel_event: Optional[threading.Event]) -> Iterable[T]:
    """
    wraps items so that every pull first checks cancel_event and raises
    SequenceCancelledError once it is set. the check runs before the source is
    asked for its next element, so a cancelled source is never read again.
    with no event the items are returned unchanged.
    """
    require_sequence(items, "items")
    if cancel_event is None:
        return items
    if not callable(getattr(cancel_event, "is_set", None)):
        raise TypeError("cancel_event must provide is_set()")
    return _with_cancellation(items, cancel_event)


def _raise_if_cancelled(cancel_event: threading.Event) -> None:
    if cancel_event.is_set():
        logger.info("enumeration cancelled")
        raise SequenceCancelledError("enumeration was cancelled")


def _with_cancellation(items: Iterable[T], cancel_event: threading.Event) -> Iterator[T]:
    _raise_if_cancelled(cancel_event)
    for item in items:
        yield item
        _raise_if_cancelled(cancel_event)


def pad_right(items: Iterable[T], total_count: int, value: Optional[T] = None) -> Iterator[T]:
    """yield items, then value until at least total_count elements were produced"""
    require_sequence(items, "items")
    return _pad_right(items, total_count, value)


def _pad_right(items: Iterable[T], total_count: int, value: Optional[T]) -> Iterator[T]:
    produced = 0
    for item in items:
        yield item
        produced += 1
    for _ in range(total_count - produced):
        yield value


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def with_cancellation(self, cancel_event: Optional[threading.Event]) -> 'Enumerable[T]':
        """
        stop enumeration with SequenceCancelledError as soon as cancel_event is set.
        combinators built on top pass the error through untouched. no event, no checks.
        """
        from ..enumerable import Enumerable
        if cancel_event is not None:
            require_callable(getattr(cancel_event, "is_set", None), "cancel_event.is_set")
        return Enumerable(lambda: with_cancellation(self._enumerable, cancel_event))

    def pad_right(self, total_count: int, value: Optional[T] = None) -> 'Enumerable[T]':
        """pad the end of the sequence with value up to total_count elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: _pad_right(self._enumerable, total_count, value))

    def side_effect(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs a side-effect action for each element as it passes through the sequence
        without modifying it. primarily used for debugging pipelines, e.g. to watch how
        far a lazy operator has read its input.
        example: .side_effect(seen.append).ordered.union(...)
        """
        from ..enumerable import Enumerable
        require_callable(action, "action")

        def lazy_side_effect_generator():
            for item in self._enumerable:
                action(item)
                yield item

        return Enumerable(lazy_side_effect_generator)
