"""
lazy sequences that end when their input ends. each keeps its cursor state in
fields and pulls from its sources through `advance`.
"""
from __future__ import annotations

import logging
import operator
from ..types import *
from ..errors import Exhausted, InvalidArgument, OutOfRange
from ..protocol import LazySequence, iterate, advance

logger = logging.getLogger(__name__)


class Accumulate(LazySequence[T]):
    def __init__(self, iterable: Iterable[T], func: Accumulator[T, T] = operator.add, initial: Optional[T] = None):
        super().__init__()
        self._source = iterate(iterable)
        self._func = func
        self._total = initial
        # the first value out is either `initial` or the first source element
        self._started = False
        self._has_initial = initial is not None

    def _advance(self) -> T:
        if not self._started:
            self._started = True
            if not self._has_initial:
                self._total = advance(self._source)
            return self._total
        self._total = self._func(self._total, advance(self._source))
        return self._total


class Chain(LazySequence[T]):
    def __init__(self, *iterables: Iterable[T]):
        super().__init__()
        self._sources: Iterator[Iterable[T]] = iter(iterables)
        self._current: Optional[Iterator[T]] = None

    @classmethod
    def from_iterable(cls, iterables: Iterable[Iterable[T]]) -> 'Chain[T]':
        """chain the iterables produced by an outer iterable, read lazily"""
        chained = cls()
        chained._sources = iterate(iterables)
        return chained

    def _advance(self) -> T:
        while True:
            if self._current is None:
                # raises Exhausted once the outer source is done
                self._current = iterate(advance(self._sources))
            try:
                return advance(self._current)
            except Exhausted:
                self._current = None


class Compress(LazySequence[T]):
    def __init__(self, data: Iterable[T], selectors: Iterable[Any]):
        super().__init__()
        self._data = iterate(data)
        self._selectors = iterate(selectors)

    def _advance(self) -> T:
        while True:
            value = advance(self._data)
            if advance(self._selectors):
                return value


class DropWhile(LazySequence[T]):
    def __init__(self, predicate: Predicate[T], iterable: Iterable[T]):
        super().__init__()
        self._predicate = predicate
        self._source = iterate(iterable)
        self._dropping = True

    def _advance(self) -> T:
        value = advance(self._source)
        while self._dropping and self._predicate(value):
            value = advance(self._source)
        self._dropping = False
        return value


class TakeWhile(LazySequence[T]):
    def __init__(self, predicate: Predicate[T], iterable: Iterable[T]):
        super().__init__()
        self._predicate = predicate
        self._source = iterate(iterable)

    def _advance(self) -> T:
        value = advance(self._source)
        if not self._predicate(value):
            # the failing element is consumed and dropped
            raise Exhausted("takewhile predicate failed")
        return value


class FilterFalse(LazySequence[T]):
    def __init__(self, predicate: Optional[Predicate[T]], iterable: Iterable[T]):
        super().__init__()
        self._predicate = bool if predicate is None else predicate
        self._source = iterate(iterable)

    def _advance(self) -> T:
        while True:
            value = advance(self._source)
            if not self._predicate(value):
                return value


def _slice_index(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"islice {name} must be None or an integer, got {type(value).__name__}")
    if value < 0:
        raise OutOfRange(f"islice {name} must be non-negative, got {value}")
    return value


class ISlice(LazySequence[T]):
    """
    yields source positions start, start+step, ... below stop. skipped
    elements are read and discarded; the source is never seeked. once the
    last position has been produced, the source is drained up to stop.
    """

    def __init__(self, iterable: Iterable[T], start: Optional[int], stop: Optional[int], step: Optional[int]):
        super().__init__()
        self._start = _slice_index(start, 'start') or 0
        self._stop = _slice_index(stop, 'stop')
        step = _slice_index(step, 'step')
        if step == 0:
            raise OutOfRange("islice step must be a positive integer")
        self._step = step or 1
        self._source = iterate(iterable)
        self._position = 0
        self._wanted = self._start

    def _discard_until(self, target: int) -> None:
        while self._position < target:
            advance(self._source)
            self._position += 1

    def _advance(self) -> T:
        self._discard_until(self._wanted)
        if self._stop is not None and self._position >= self._stop:
            raise Exhausted("islice finished")
        value = advance(self._source)
        self._position += 1
        self._wanted += self._step
        if self._stop is not None and self._wanted > self._stop:
            # drain up to stop on the next call, then finish
            self._wanted = self._stop
        return value


def _parse_slice_args(args: Tuple[Any, ...]) -> Tuple[Any, Any, Any]:
    if len(args) == 1:
        return None, args[0], None
    if len(args) in (2, 3):
        start, stop = args[0], args[1]
        step = args[2] if len(args) == 3 else None
        return start, stop, step
    raise InvalidArgument(f"islice expected 2 to 4 arguments, got {len(args) + 1}")


class Pairwise(LazySequence[Tuple[T, T]]):
    def __init__(self, iterable: Iterable[T]):
        super().__init__()
        self._source = iterate(iterable)
        self._previous: Any = None
        self._primed = False

    def _advance(self) -> Tuple[T, T]:
        if not self._primed:
            self._previous = advance(self._source)
            self._primed = True
        current = advance(self._source)
        pair = (self._previous, current)
        self._previous = current
        return pair


class StarMap(LazySequence[U]):
    def __init__(self, func: Callable[..., U], iterable: Iterable[Iterable[Any]]):
        super().__init__()
        self._func = func
        self._source = iterate(iterable)

    def _advance(self) -> U:
        return self._func(*advance(self._source))


class _TeeBuffer(Generic[T]):
    """shared, incrementally filled buffer behind a set of tee cursors"""

    def __init__(self, source: Iterator[T]):
        self._source = source
        self._values: List[T] = []
        self._done = False

    def get(self, index: int) -> T:
        while index >= len(self._values):
            if self._done:
                raise Exhausted("tee source exhausted")
            try:
                self._values.append(advance(self._source))
            except Exhausted:
                self._done = True
                raise
        return self._values[index]


class TeeCursor(LazySequence[T]):
    """one independent reader over a tee buffer"""

    def __init__(self, buffer: _TeeBuffer[T], index: int = 0):
        super().__init__()
        self._buffer = buffer
        self._index = index

    def _advance(self) -> T:
        value = self._buffer.get(self._index)
        self._index += 1
        return value

    def copy(self) -> 'TeeCursor[T]':
        """a new cursor starting at this cursor's position"""
        cursor = TeeCursor(self._buffer, self._index)
        cursor._exhausted = self._exhausted
        return cursor

    __copy__ = copy


class ZipLongest(LazySequence[Tuple[Any, ...]]):
    def __init__(self, *iterables: Iterable[Any], fillvalue: Any = None):
        super().__init__()
        self._sources: List[Optional[Iterator[Any]]] = [iterate(it) for it in iterables]
        self._active = len(self._sources)
        self._fillvalue = fillvalue

    def _advance(self) -> Tuple[Any, ...]:
        if not self._active:
            raise Exhausted("zip_longest finished")
        row = []
        for i, source in enumerate(self._sources):
            if source is None:
                row.append(self._fillvalue)
                continue
            try:
                row.append(advance(source))
            except Exhausted:
                self._sources[i] = None
                self._active -= 1
                if not self._active:
                    raise
                row.append(self._fillvalue)
        return tuple(row)


# --- public functions ---

def accumulate(iterable: Iterable[T], func: Accumulator[T, T] = operator.add, *,
               initial: Optional[T] = None) -> Accumulate[T]:
    """running results of func, e.g. running sums with the default operator.add"""
    return Accumulate(iterable, func, initial)


chain = Chain


def compress(data: Iterable[T], selectors: Iterable[Any]) -> Compress[T]:
    return Compress(data, selectors)


def dropwhile(predicate: Predicate[T], iterable: Iterable[T]) -> DropWhile[T]:
    return DropWhile(predicate, iterable)


def takewhile(predicate: Predicate[T], iterable: Iterable[T]) -> TakeWhile[T]:
    return TakeWhile(predicate, iterable)


def filterfalse(predicate: Optional[Predicate[T]], iterable: Iterable[T]) -> FilterFalse[T]:
    """elements for which predicate is false; a None predicate tests truthiness"""
    return FilterFalse(predicate, iterable)


def islice(iterable: Iterable[T], *args: Optional[int]) -> ISlice[T]:
    """
    islice(iterable, stop) or islice(iterable, start, stop[, step]).
    a stop of None reads until the source is exhausted.
    """
    start, stop, step = _parse_slice_args(args)
    return ISlice(iterable, start, stop, step)


def pairwise(iterable: Iterable[T]) -> Pairwise[T]:
    """successive overlapping pairs: (a, b), (b, c), ..."""
    return Pairwise(iterable)


def starmap(func: Callable[..., U], iterable: Iterable[Iterable[Any]]) -> StarMap[U]:
    return StarMap(func, iterable)


def tee(iterable: Iterable[T], n: int = 2) -> Tuple[TeeCursor[T], ...]:
    """
    n independent cursors over one source. values are buffered as the fastest
    cursor reads them, so every cursor sees the complete sequence in order no
    matter how far apart they are.
    """
    if n < 0:
        raise OutOfRange(f"tee n must be >= 0, got {n}")
    buffer = _TeeBuffer(iterate(iterable))
    logger.debug("tee: created shared buffer for %d cursors", n)
    return tuple(TeeCursor(buffer) for _ in range(n))


def zip_longest(*iterables: Iterable[Any], fillvalue: Any = None) -> ZipLongest:
    """tuples across all iterables until the longest is exhausted, padding with fillvalue"""
    return ZipLongest(*iterables, fillvalue=fillvalue)
