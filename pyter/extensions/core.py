from __future__ import annotations
import typing
import operator
from ..types import *
from .. import lazy

if typing.TYPE_CHECKING:
    from ..stream import Stream


class _CoreOperations(Generic[T]):
    def where(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """filter elements based on a predicate"""
        from ..stream import Stream
        return Stream(lambda: filter(predicate, self))

    def where_not(self: 'Stream[T]', predicate: Optional[Predicate[T]] = None) -> 'Stream[T]':
        """keep the elements the predicate rejects (falsy elements when predicate is None)"""
        from ..stream import Stream
        return Stream(lambda: lazy.filterfalse(predicate, self))

    def select(self: 'Stream[T]', selector: Selector[T, U]) -> 'Stream[U]':
        """project each element to a new form"""
        from ..stream import Stream
        return Stream(lambda: map(selector, self))

    def select_many(self: 'Stream[T]', selector: Selector[T, Iterable[U]]) -> 'Stream[U]':
        """project and flatten sequences"""
        from ..stream import Stream
        return Stream(lambda: lazy.chain.from_iterable(self.select(selector)))

    def starmap(self: 'Stream[Iterable[Any]]', func: Callable[..., U]) -> 'Stream[U]':
        """call func with each element unpacked as its arguments"""
        from ..stream import Stream
        return Stream(lambda: lazy.starmap(func, self))

    def take(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """take the first 'count' elements"""
        from ..stream import Stream
        return Stream(lambda: lazy.islice(self, max(count, 0)))

    def skip(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """skip the first 'count' elements"""
        from ..stream import Stream
        return Stream(lambda: lazy.islice(self, max(count, 0), None))

    def slice(self: 'Stream[T]', start: Optional[int], stop: Optional[int], step: Optional[int] = None) -> 'Stream[T]':
        """islice over the stream: positions start, start+step, ... below stop"""
        from ..stream import Stream
        return Stream(lambda: lazy.islice(self, start, stop, step))

    def take_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """take elements while predicate is true"""
        from ..stream import Stream
        return Stream(lambda: lazy.takewhile(predicate, self))

    def skip_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """skip elements while predicate is true"""
        from ..stream import Stream
        return Stream(lambda: lazy.dropwhile(predicate, self))

    def concat(self: 'Stream[T]', *others: Iterable[T]) -> 'Stream[T]':
        """this stream followed by each of the others"""
        from ..stream import Stream
        return Stream(lambda: lazy.chain(self, *others))

    def append(self: 'Stream[T]', element: T) -> 'Stream[T]':
        """appends a value to the end of the sequence"""
        return self.concat((element,))

    def prepend(self: 'Stream[T]', element: T) -> 'Stream[T]':
        """adds a value to the beginning of the sequence"""
        from ..stream import Stream
        return Stream(lambda: lazy.chain((element,), self))

    def accumulate(self: 'Stream[T]', func: Accumulator[T, T] = operator.add,
                   initial: Optional[T] = None) -> 'Stream[T]':
        """running totals (or running results of func)"""
        from ..stream import Stream
        return Stream(lambda: lazy.accumulate(self, func, initial=initial))

    def compress(self: 'Stream[T]', selectors: Iterable[Any]) -> 'Stream[T]':
        """keep elements whose matching selector is truthy"""
        from ..stream import Stream
        return Stream(lambda: lazy.compress(self, selectors))

    def cycle(self: 'Stream[T]') -> 'Stream[T]':
        """repeat the stream forever; bound it with take()"""
        from ..stream import Stream
        return Stream(lambda: lazy.cycle(self))

    def pairwise(self: 'Stream[T]') -> 'Stream[Tuple[T, T]]':
        """return consecutive overlapping pairs"""
        from ..stream import Stream
        return Stream(lambda: lazy.pairwise(self))

    def zip_longest(self: 'Stream[T]', *others: Iterable[Any], fillvalue: Any = None) -> 'Stream[Tuple[Any, ...]]':
        """zip with other iterables, padding the shorter ones with fillvalue"""
        from ..stream import Stream
        return Stream(lambda: lazy.zip_longest(self, *others, fillvalue=fillvalue))

    def tee(self: 'Stream[T]', n: int = 2) -> Tuple['Stream[T]', ...]:
        """
        split into n single-pass streams that share one read of this stream.
        the underlying source is opened once, when tee() is called.
        """
        from ..stream import Stream
        return tuple(Stream(lambda cursor=cursor: cursor) for cursor in lazy.tee(self, n))
