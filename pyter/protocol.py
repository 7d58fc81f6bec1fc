"""
the iterator protocol bridge. every lazy sequence in pyter is an explicit
state object built on `LazySequence`: subclasses implement `_advance`, which
returns the next value or raises `Exhausted`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .errors import Exhausted, InvalidArgument

# distinguishes "no default supplied" from a default of None
_MISSING = object()


def iterate(obj: Iterable[T]) -> Iterator[T]:
    """get an iterator over obj, raising InvalidArgument for non-iterables"""
    try:
        return iter(obj)
    except TypeError:
        raise InvalidArgument(f"'{type(obj).__name__}' object is not iterable") from None


def advance(iterator: Iterator[T], default: Any = _MISSING) -> T:
    """
    produce the next value of iterator. once the iterator is done, returns
    default when one was given, otherwise raises Exhausted.
    """
    try:
        return next(iterator)
    except StopIteration:
        if default is not _MISSING:
            return default
        raise Exhausted("iterator is exhausted") from None


class LazySequence(ABC, Generic[T]):
    """
    single-pass lazy sequence. exhaustion is latched: after Exhausted has been
    raised once, `_advance` is never called again.
    """

    def __init__(self):
        self._exhausted = False

    @abstractmethod
    def _advance(self) -> T:
        """return the next value or raise Exhausted"""
        pass

    def __iter__(self) -> 'LazySequence[T]':
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise Exhausted("iterator is exhausted")
        try:
            return self._advance()
        except Exhausted:
            self._exhausted = True
            raise

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __repr__(self) -> str:
        state = 'exhausted' if self._exhausted else 'live'
        return f"{type(self).__name__}({state})"
