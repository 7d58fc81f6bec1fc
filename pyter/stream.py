from __future__ import annotations

from .types import *
from .protocol import iterate

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.terminal import TerminalAccessor


class Stream(_CoreOperations[T]):
    """
    a lazy, fluent wrapper over pyter's iterator tools.

    a stream holds a zero-argument source factory rather than data. every
    iteration calls the factory again, so a stream over a list can be walked
    repeatedly, while a stream over a one-shot iterator is single pass.
    nothing is read until a terminal operation (`.to.*`) or a for loop pulls.
    """

    def __init__(self, source_func: Callable[[], Iterable[T]]):
        self._source_func = source_func
        # --- initialize accessors ---
        self.group = GroupingAccessor(self)
        self.comb = CombinatoricsAccessor(self)
        self.to = TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        return iterate(self._source_func())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source_func!r})"
