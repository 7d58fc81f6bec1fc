"""
seeded pseudo-random generator.

`RandomState` holds a single float in [0, 1). every draw scales the state
by 1e9, truncates it to a 32-bit integer and runs it through a fixed bit
mixer; the mixer output becomes both the returned value and the new state.
identical seeds therefore give identical sequences. not suitable for
anything security related.
"""
from __future__ import annotations

import logging
import math
import random as _ambient
from collections.abc import MutableSequence, Sequence
from .types import *
from .errors import InvalidArgument, OutOfRange

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_SCALE = 1_000_000_000
_TWO_32 = 4294967296


def _mix32(seed: int) -> float:
    """one round of the 32-bit mixer, normalized to [0, 1)"""
    a = (seed + _INCREMENT) & _MASK32
    t = ((a ^ (a >> 15)) * (a | 1)) & _MASK32
    t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32) ^ t
    return ((t ^ (t >> 14)) & _MASK32) / _TWO_32


def _seed_value(value: Any) -> Union[int, float]:
    kind = kind_of(value)
    if kind is Kind.NONE: return _ambient.random()
    if kind is Kind.STRING: return sum(ord(ch) for ch in value)
    if kind is Kind.BOOLEAN: return 1 if value else 0
    if kind is Kind.NUMBER: return value
    raise InvalidArgument(f"cannot seed from {type(value).__name__}; use a str, bool, int, float or None")


def _normalize(seed: Union[int, float]) -> float:
    """shift the decimal point left until the seed is below 1"""
    if isinstance(seed, float) and not math.isfinite(seed):
        raise InvalidArgument(f"seed must be finite, got {seed}")
    while seed >= 1:
        seed = seed / 10
    return float(seed)


def _as_index(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    return value


class RandomState:
    """an explicit, independently seeded random stream"""

    def __init__(self, seed: Any = None):
        self._state = 0.0
        self.seed(seed)

    def seed(self, value: Any = None) -> None:
        """
        reseed. strings seed from the sum of their code points, booleans from
        0/1, numbers directly, and None from ambient process randomness.
        """
        raw = _seed_value(value)
        self._state = _normalize(raw)
        logger.debug("seeded random state from %s %r -> %r", kind_of(value).value, raw, self._state)

    def getstate(self) -> float:
        return self._state

    def setstate(self, state: float) -> None:
        if not isinstance(state, float):
            raise InvalidArgument(f"state must be a float, got {type(state).__name__}")
        self._state = state

    def random(self) -> float:
        """next float in [0, 1)"""
        self._state = _mix32(int(self._state * _SCALE))
        return self._state

    def randint(self, a: int, b: int) -> int:
        """integer in [a, b], both ends included"""
        return math.floor(self.random() * (b - a + 1)) + a

    def uniform(self, a: float, b: float) -> float:
        return self.random() * (b - a) + a

    def randrange(self, start: int, stop: Optional[int] = None, step: int = 1) -> int:
        """
        randrange(stop) or randrange(start, stop[, step]). the sign of step
        picks the direction, so randrange(20, 10, -2) draws from 20, 18, ..., 12.
        """
        start = _as_index(start, 'start')
        if stop is None:
            start, stop = 0, start
        stop = _as_index(stop, 'stop')
        step = _as_index(step, 'step')
        if step == 0:
            raise OutOfRange("zero step for randrange()")
        width = stop - start
        if width == 0 or (width > 0) != (step > 0):
            raise OutOfRange(f"empty range for randrange({start}, {stop}, {step})")
        offset = math.floor(self.random() * abs(width) / abs(step))
        return start + offset * step

    def choice(self, seq: Sequence[T]) -> T:
        if not len(seq):
            raise OutOfRange("cannot choose from an empty sequence")
        return seq[self.randint(0, len(seq) - 1)]

    def choices(self, seq: Sequence[T], k: int = 1) -> List[T]:
        """k independent picks, with replacement"""
        return [self.choice(seq) for _ in range(k)]

    def sample(self, seq: Iterable[T], k: int = 1) -> List[T]:
        """k distinct picks: draw an index into a working copy and remove it"""
        pool = list(seq)
        if not 0 <= k <= len(pool):
            raise OutOfRange(f"sample size {k} outside [0, {len(pool)}]")
        picked = []
        for _ in range(k):
            picked.append(pool.pop(self.randint(0, len(pool) - 1)))
        return picked

    def shuffle(self, seq: MutableSequence) -> None:
        """shuffle in place, swapping each position with a random partner"""
        if not isinstance(seq, MutableSequence):
            raise InvalidArgument(f"cannot shuffle immutable {type(seq).__name__}")
        n = len(seq)
        for i in range(n):
            j = self.randint(0, n - 1)
            seq[i], seq[j] = seq[j], seq[i]

    def __repr__(self) -> str:
        return f"RandomState(state={self._state!r})"


# --- convenience default instance ---
# a single shared, non-reentrant stream for application code. nothing inside
# pyter draws from it; library code takes an explicit RandomState.

_default: Optional[RandomState] = None


def default_state() -> RandomState:
    """the process-wide state, created on first use and seeded from settings"""
    global _default
    if _default is None:
        from .config import load_settings
        _default = RandomState(load_settings().default_seed)
    return _default


def seed(value: Any = None) -> None: default_state().seed(value)
def random() -> float: return default_state().random()
def randint(a: int, b: int) -> int: return default_state().randint(a, b)
def uniform(a: float, b: float) -> float: return default_state().uniform(a, b)
def randrange(start: int, stop: Optional[int] = None, step: int = 1) -> int: return default_state().randrange(start, stop, step)
def choice(seq): return default_state().choice(seq)
def choices(seq, k: int = 1): return default_state().choices(seq, k)
def sample(seq, k: int = 1): return default_state().sample(seq, k)
def shuffle(seq) -> None: default_state().shuffle(seq)
def getstate() -> float: return default_state().getstate()
def setstate(state: float) -> None: default_state().setstate(state)
