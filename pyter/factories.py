import typing
from .types import *
from .protocol import iterate
from .lazy import count as lazy_count, repeat as lazy_repeat

if typing.TYPE_CHECKING:
    from .stream import Stream


def from_iterable(data: Iterable[T]) -> 'Stream[T]':
    """create a stream over an iterable"""
    from .stream import Stream
    iterate(data)  # fail fast on non-iterables
    return Stream(lambda: data)


def from_range(start: int, count: int) -> 'Stream[int]':
    """create a stream of `count` consecutive integers from start"""
    from .stream import Stream
    return Stream(lambda: range(start, start + count))


def from_count(start: Union[int, float] = 0, step: Union[int, float] = 1) -> 'Stream[Union[int, float]]':
    """create an infinite arithmetic stream; bound it with take() or take_while()"""
    from .stream import Stream
    return Stream(lambda: lazy_count(start, step))


def repeat(item: T, count: Optional[int] = None) -> 'Stream[T]':
    """create a stream repeating item, forever when count is None"""
    from .stream import Stream
    return Stream(lambda: lazy_repeat(item, count))


def empty() -> 'Stream[Any]':
    """create an empty stream"""
    from .stream import Stream
    return Stream(lambda: ())


def generate(generator_func: Callable[[], T], count: int) -> 'Stream[T]':
    """a stream of `count` calls to generator_func, made lazily on each pass"""
    from .stream import Stream
    return Stream(lambda: (generator_func() for _ in range(count)))


# --- aliases ---
stream = from_iterable
P = from_iterable
