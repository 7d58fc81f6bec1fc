from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..containers import Sequence, ImmutableSequence, ImmutableSet, OrderedMap
from ..errors import Exhausted, NotFound
from ..protocol import advance, _MISSING

if typing.TYPE_CHECKING:
    from ..stream import Stream


class TerminalAccessor(Generic[T]):
    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def list(self) -> List[T]:
        """convert to a plain list"""
        return list(self._stream)

    def sequence(self) -> Sequence[T]:
        """convert to a mutable Sequence"""
        return Sequence(self._stream)

    def immutable(self) -> ImmutableSequence[T]:
        """convert to an ImmutableSequence"""
        return ImmutableSequence(self._stream)

    def set(self) -> ImmutableSet[T]:
        """convert to an ImmutableSet"""
        return ImmutableSet(self._stream)

    def ordered_map(self, key_selector: KeySelector[T, K],
                    value_selector: Optional[Selector[T, V]] = None) -> OrderedMap[K, V]:
        """convert to an OrderedMap; later duplicates overwrite earlier values"""
        val_sel = value_selector if value_selector else lambda item: item
        return OrderedMap((key_selector(item), val_sel(item)) for item in self._stream)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, reading the whole stream"""
        if predicate is None: return sum(1 for _ in self._stream)
        return sum(1 for x in self._stream if predicate(x))

    def first(self, default: Any = _MISSING) -> T:
        """first element; NotFound on an empty stream unless a default is given"""
        try:
            return advance(iter(self._stream))
        except Exhausted:
            if default is not _MISSING: return default
            raise NotFound("stream contains no elements") from None
