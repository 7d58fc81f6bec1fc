"""
combinatorial generators. every input is materialized into a tuple pool up
front because indices into the pool are reused across steps; the results are
a pure function of that pool.
"""
from __future__ import annotations

from ..types import *
from ..errors import Exhausted, InvalidArgument, OutOfRange
from ..protocol import LazySequence, iterate


def _pool(iterable: Iterable[T]) -> Tuple[T, ...]:
    return tuple(iterate(iterable))


def _check_width(r: int, name: str = 'r') -> int:
    if r < 0:
        raise OutOfRange(f"{name} must be non-negative, got {r}")
    return r


class _IndexedGenerator(LazySequence[Tuple[T, ...]]):
    """
    shared shape of the index-advance generators: emit the first index tuple,
    then keep calling `_step` to move to the lexicographic successor.
    """

    def __init__(self, pool: Tuple[T, ...], r: int):
        super().__init__()
        self._pool = pool
        self._r = r
        self._first = True

    def _emit(self) -> Tuple[T, ...]:
        return tuple(self._pool[i] for i in self._indices[:self._r])

    def _advance(self) -> Tuple[T, ...]:
        if self._first:
            self._first = False
            if self._empty():
                raise Exhausted("no arrangements")
            return self._emit()
        if not self._step():
            raise Exhausted("arrangements exhausted")
        return self._emit()

    def _empty(self) -> bool:
        return self._r > len(self._pool)

    def _step(self) -> bool:
        """advance indices in place; False when there is no successor"""
        raise NotImplementedError


class Combinations(_IndexedGenerator[T]):
    def __init__(self, iterable: Iterable[T], r: int):
        super().__init__(_pool(iterable), _check_width(r))
        self._indices = list(range(r))

    def _step(self) -> bool:
        n, r, indices = len(self._pool), self._r, self._indices
        # rightmost index not yet at its ceiling i + n - r
        for i in reversed(range(r)):
            if indices[i] != i + n - r:
                break
        else:
            return False
        indices[i] += 1
        for j in range(i + 1, r):
            indices[j] = indices[j - 1] + 1
        return True


class CombinationsWithReplacement(_IndexedGenerator[T]):
    def __init__(self, iterable: Iterable[T], r: int):
        super().__init__(_pool(iterable), _check_width(r))
        self._indices = [0] * r

    def _empty(self) -> bool:
        return not self._pool and self._r > 0

    def _step(self) -> bool:
        n, r, indices = len(self._pool), self._r, self._indices
        for i in reversed(range(r)):
            if indices[i] != n - 1:
                break
        else:
            return False
        # the incremented value is copied forward
        indices[i:] = [indices[i] + 1] * (r - i)
        return True


class Permutations(_IndexedGenerator[T]):
    """
    uses a countdown `cycles` array: cycles[i] counts how many more values
    position i can take before it rotates back to its starting arrangement.
    """

    def __init__(self, iterable: Iterable[T], r: Optional[int] = None):
        pool = _pool(iterable)
        n = len(pool)
        r = n if r is None else _check_width(r)
        super().__init__(pool, r)
        self._indices = list(range(n))
        self._cycles = list(range(n, n - r, -1))

    def _step(self) -> bool:
        n, r = len(self._pool), self._r
        indices, cycles = self._indices, self._cycles
        if not n:
            return False
        for i in reversed(range(r)):
            cycles[i] -= 1
            if cycles[i] == 0:
                # rotate position i to the end and reset its countdown
                indices[i:] = indices[i + 1:] + indices[i:i + 1]
                cycles[i] = n - i
            else:
                j = cycles[i]
                indices[i], indices[-j] = indices[-j], indices[i]
                return True
        return False


class Product(LazySequence[Tuple[Any, ...]]):
    """
    cartesian product built by iterative accumulation: start from one empty
    tuple and cross every partial result with each pool in turn. the rightmost
    pool varies fastest.
    """

    def __init__(self, iterables: Tuple[Iterable[Any], ...], repeat: int = 1):
        super().__init__()
        if isinstance(repeat, bool) or not isinstance(repeat, int):
            raise InvalidArgument(f"repeat must be an integer, got {type(repeat).__name__}")
        _check_width(repeat, 'repeat')
        pools = [_pool(it) for it in iterables] * repeat
        result: List[Tuple[Any, ...]] = [()]
        for pool in pools:
            result = [partial + (item,) for partial in result for item in pool]
        self._results = result
        self._index = 0

    def _advance(self) -> Tuple[Any, ...]:
        if self._index >= len(self._results):
            raise Exhausted("product exhausted")
        value = self._results[self._index]
        self._index += 1
        return value


def combinations(iterable: Iterable[T], r: int) -> Combinations[T]:
    """r-length index-increasing subsequences in lexicographic index order"""
    return Combinations(iterable, r)


def combinations_with_replacement(iterable: Iterable[T], r: int) -> CombinationsWithReplacement[T]:
    """r-length combinations where an element may be picked more than once"""
    return CombinationsWithReplacement(iterable, r)


def permutations(iterable: Iterable[T], r: Optional[int] = None) -> Permutations[T]:
    """r-length arrangements (all of them when r is None), lexicographic by pool position"""
    return Permutations(iterable, r)


def product(*iterables: Any, repeat: int = 1) -> Product:
    """
    cartesian product of the iterables, with the pool list repeated `repeat`
    times. a leading integer argument is taken as the repeat count, so
    product(2, 'ab') == product('ab', repeat=2).
    """
    if iterables and kind_of(iterables[0]) is Kind.NUMBER:
        if repeat != 1:
            raise InvalidArgument("give the repeat count either as a leading integer or as repeat=, not both")
        repeat, iterables = iterables[0], iterables[1:]
    return Product(iterables, repeat)
