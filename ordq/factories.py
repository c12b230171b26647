import typing
from itertools import count as itertools_count, repeat as itertools_repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable


def from_iterable(data: Optional[Iterable[T]]) -> 'Enumerable[T]':
    """wrap an iterable without reading it. None is treated as an empty sequence."""
    from .enumerable import Enumerable
    return Enumerable(lambda: touch(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def count_from(start: int = 0, step: int = 1) -> 'Enumerable[int]':
    """an infinite ascending (for positive step) sequence of numbers"""
    from .enumerable import Enumerable
    return Enumerable(lambda: itertools_count(start, step))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item. repeats forever when count is None."""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: itertools_repeat(item))
    return Enumerable(lambda: itertools_repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate sequence using a function, called once per element pulled"""
    from .enumerable import Enumerable
    require_callable(generator_func, "generator_func")

    def generate_data():
        produced = 0
        while count is None or produced < count:
            yield generator_func()
            produced += 1

    return Enumerable(generate_data)

# --- aliases ---
P = from_iterable
p = from_iterable
