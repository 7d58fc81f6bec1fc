from __future__ import annotations
import typing
from ..types import *
from .. import lazy
from ..containers import ImmutableSequence, OrderedMap, Sequence

if typing.TYPE_CHECKING:
    from ..stream import Stream


class GroupingAccessor(Generic[T]):
    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def runs(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Stream[Tuple[K, ImmutableSequence[T]]]':
        """
        (key, run) for each run of consecutive elements with equal keys. each
        run is materialized before the next is read, so unlike raw groupby the
        groups stay valid after the stream moves on.
        """
        from ..stream import Stream
        return Stream(lambda: ((key, ImmutableSequence(group))
                               for key, group in lazy.groupby(self._stream, key_selector)))

    def group_by(self, key_selector: KeySelector[T, K]) -> OrderedMap[K, Sequence[T]]:
        """full partition by key; keys appear in first-seen order"""
        groups: OrderedMap[K, Sequence[T]] = OrderedMap()
        for item in self._stream:
            key = key_selector(item)
            if key not in groups:
                groups[key] = Sequence()
            groups[key].append(item)
        return groups

    def run_length_encode(self) -> 'Stream[Tuple[T, int]]':
        """
        performs run-length encoding on the sequence. consecutive identical elements
        are grouped into (element, count) tuples.
        """
        from ..stream import Stream
        return Stream(lambda: ((key, sum(1 for _ in group)) for key, group in lazy.groupby(self._stream)))
