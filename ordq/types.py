import collections.abc
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[K, K], int]
Accumulator = Callable[[U, T], U]
Combinator = Callable[[Iterable[T], Iterable[T]], Iterable[T]]


def identity(item: T) -> T:
    return item


def default_comparer(a: Any, b: Any) -> int:
    """natural three-way comparison using the < and > operators"""
    return (a > b) - (a < b)


def require_callable(func: Any, name: str) -> None:
    """raise a TypeError unless func is callable"""
    if func is None:
        raise TypeError(f"{name} is required")
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")


def require_sequence(sequence: Any, name: str) -> None:
    """raise a TypeError unless sequence is an iterable"""
    if sequence is None:
        raise TypeError(f"{name} is required")
    if not isinstance(sequence, collections.abc.Iterable):
        raise TypeError(f"{name} must be iterable, got {type(sequence).__name__}")


def touch(sequence: Optional[Iterable[T]]) -> Iterable[T]:
    """treat a missing sequence as an empty one"""
    return () if sequence is None else sequence


class _Missing:
    """marks the absent side of an outer join row"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"

    def __reduce__(self): return (_Missing, ())


MISSING = _Missing()


class KeyedComparer(Generic[T, K]):
    """pairs a key selector with an ordering comparer over the extracted keys"""

    __slots__ = ('key_selector', 'comparer')

    def __init__(self, key_selector: Optional[KeySelector[T, K]] = None,
                 comparer: Optional[Comparer[K]] = None):
        if key_selector is not None: require_callable(key_selector, "key_selector")
        if comparer is not None: require_callable(comparer, "comparer")
        self.key_selector = key_selector or identity
        self.comparer = comparer or default_comparer

    def key(self, item: T) -> K:
        return self.key_selector(item)

    def compare(self, a: K, b: K) -> int:
        """compare two keys"""
        return self.comparer(a, b)

    def __repr__(self) -> str:
        return f"KeyedComparer(key_selector={self.key_selector!r}, comparer={self.comparer!r})"
