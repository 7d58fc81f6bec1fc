"""
run-length grouping over a single-pass source.

`groupby` yields (key, group) pairs, one per maximal run of consecutive
elements with equal keys. non-adjacent runs of the same key are separate
groups; sort first if a full partition is wanted.

aliasing hazard: every group is a lazy view over the same underlying source.
advancing the outer groupby bumps its generation counter, and any group
handed out earlier is silently truncated at that moment (it yields nothing
more, even if its run was never read). callers that need a group's contents
after moving on must materialize it first, e.g. `[(k, list(g)) for k, g in groupby(xs)]`.
"""
from __future__ import annotations

import logging
from enum import Enum
from ..types import *
from ..errors import Exhausted
from ..protocol import LazySequence, iterate, advance

logger = logging.getLogger(__name__)

# initial target key; compares unequal to every real key
_NO_KEY = object()


def _same_key(a: Any, b: Any) -> bool:
    """identity first, so keys unequal to themselves (nan) still match their own run"""
    return a is b or a == b


class GroupState(Enum):
    SCANNING = 'scanning'      # no value pulled yet
    IN_GROUP = 'in_group'      # current value/key hold an unconsumed element
    EXHAUSTED = 'exhausted'    # source is done


class GroupBy(LazySequence[Tuple[K, 'Group[T]']]):

    def __init__(self, iterable: Iterable[T], key: Optional[KeySelector[T, K]] = None):
        super().__init__()
        self._keyfunc: KeySelector[T, K] = (lambda x: x) if key is None else key
        self._source = iterate(iterable)
        self._state = GroupState.SCANNING
        self._current_key: Any = _NO_KEY
        self._current_value: Any = None
        self._target_key: Any = _NO_KEY
        self._generation = 0

    @property
    def state(self) -> GroupState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def _pull(self) -> bool:
        """read the next source element into the cursor; False once the source is done"""
        try:
            value = advance(self._source)
        except Exhausted:
            self._state = GroupState.EXHAUSTED
            return False
        self._current_value = value
        self._current_key = self._keyfunc(value)
        self._state = GroupState.IN_GROUP
        return True

    def _advance(self) -> Tuple[K, 'Group[T]']:
        # any group handed out before this point is now stale
        self._generation += 1
        if self._state is GroupState.SCANNING:
            self._pull()
        # skip whatever is left of the previous run
        while self._state is GroupState.IN_GROUP and _same_key(self._current_key, self._target_key):
            self._pull()
        if self._state is GroupState.EXHAUSTED:
            raise Exhausted("groupby source exhausted")
        self._target_key = self._current_key
        return self._current_key, Group(self, self._target_key, self._generation)


class Group(LazySequence[T]):
    """lazy view over one run of a GroupBy; see the module docstring for the truncation hazard"""

    def __init__(self, parent: GroupBy[T], key: K, generation: int):
        super().__init__()
        self._parent = parent
        self._key = key
        self._generation = generation

    @property
    def key(self) -> K:
        return self._key

    @property
    def stale(self) -> bool:
        return self._parent._generation != self._generation

    def _advance(self) -> T:
        parent = self._parent
        if parent._generation != self._generation:
            logger.debug("groupby: group %r invalidated by outer advance", self._key)
            raise Exhausted("group invalidated by outer advance")
        if parent._state is not GroupState.IN_GROUP or not _same_key(parent._current_key, self._key):
            raise Exhausted("group run ended")
        value = parent._current_value
        parent._pull()
        return value


def groupby(iterable: Iterable[T], key: Optional[KeySelector[T, K]] = None) -> GroupBy[T]:
    """(key, group) for each run of consecutive elements sharing a key"""
    return GroupBy(iterable, key)
