"""
infinite (or optionally bounded) lazy sequences. callers bound consumption
themselves, e.g. with islice or takewhile.
"""
from __future__ import annotations

from ..types import *
from ..errors import Exhausted, InvalidArgument
from ..protocol import LazySequence, iterate, advance


class Count(LazySequence[Union[int, float]]):
    def __init__(self, start: Union[int, float] = 0, step: Union[int, float] = 1):
        super().__init__()
        self._next = start
        self._step = step

    def _advance(self):
        value = self._next
        self._next += self._step
        return value

    def __repr__(self) -> str:
        return f"count({self._next!r}, {self._step!r})"


class Cycle(LazySequence[T]):
    """
    first pass reads the source while saving each value, later passes replay
    the saved values. an empty source ends immediately.
    """

    def __init__(self, iterable: Iterable[T]):
        super().__init__()
        self._source: Optional[Iterator[T]] = iterate(iterable)
        self._saved: List[T] = []
        self._index = 0

    def _advance(self) -> T:
        if self._source is not None:
            try:
                value = advance(self._source)
            except Exhausted:
                self._source = None
            else:
                self._saved.append(value)
                return value
        if not self._saved:
            raise Exhausted("cycle over an empty iterable")
        value = self._saved[self._index]
        self._index = (self._index + 1) % len(self._saved)
        return value


class Repeat(LazySequence[T]):
    def __init__(self, obj: T, times: Optional[int] = None):
        super().__init__()
        if times is not None and (isinstance(times, bool) or not isinstance(times, int)):
            raise InvalidArgument(f"repeat times must be None or an integer, got {type(times).__name__}")
        self._obj = obj
        # none means unbounded
        self._remaining = None if times is None else max(times, 0)

    def _advance(self) -> T:
        if self._remaining is None:
            return self._obj
        if self._remaining <= 0:
            raise Exhausted("repeat finished")
        self._remaining -= 1
        return self._obj

    def __length_hint__(self) -> int:
        if self._remaining is None:
            raise TypeError("len() of unsized repeat")
        return self._remaining

    def __repr__(self) -> str:
        if self._remaining is None:
            return f"repeat({self._obj!r})"
        return f"repeat({self._obj!r}, {self._remaining})"


def count(start: Union[int, float] = 0, step: Union[int, float] = 1) -> Count:
    """start, start + step, start + 2*step, ... forever"""
    return Count(start, step)


def cycle(iterable: Iterable[T]) -> Cycle[T]:
    """the elements of iterable, repeated forever"""
    return Cycle(iterable)


def repeat(obj: T, times: Optional[int] = None) -> Repeat[T]:
    """obj forever, or exactly `times` times"""
    return Repeat(obj, times)
