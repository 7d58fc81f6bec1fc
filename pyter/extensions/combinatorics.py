import typing
from ..types import *
from .. import lazy

if typing.TYPE_CHECKING:
    from ..stream import Stream


class CombinatoricsAccessor(Generic[T]):
    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def permutations(self, r: Optional[int] = None) -> 'Stream[Tuple[T, ...]]':
        """r-length arrangements by pool position; all of them when r is None"""
        from ..stream import Stream
        return Stream(lambda: lazy.permutations(self._stream, r))

    def combinations(self, r: int) -> 'Stream[Tuple[T, ...]]':
        """r-length index-increasing subsequences in lexicographic order"""
        from ..stream import Stream
        return Stream(lambda: lazy.combinations(self._stream, r))

    def combinations_with_replacement(self, r: int) -> 'Stream[Tuple[T, ...]]':
        """
        r-length combinations where elements are treated as if they were
        replaced after each pick.
        """
        from ..stream import Stream
        return Stream(lambda: lazy.combinations_with_replacement(self._stream, r))

    def power_set(self) -> 'Stream[Tuple[T, ...]]':
        """
        all subsets of the sequence, shortest first. the source is read once per
        pass and combinations of every length from 0 to n are chained.
        """
        from ..stream import Stream
        def power_set_data():
            data = self._stream.to.immutable()
            return lazy.chain.from_iterable(lazy.combinations(data, r) for r in range(len(data) + 1))

        return Stream(power_set_data)

    def product(self, *others: Iterable[Any], repeat: int = 1) -> 'Stream[Tuple[Any, ...]]':
        """cartesian product with other iterables; the rightmost varies fastest"""
        from ..stream import Stream
        return Stream(lambda: lazy.product(self._stream, *others, repeat=repeat))
