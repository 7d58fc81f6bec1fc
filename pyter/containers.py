"""
container adapters. each is a dedicated wrapper type built explicitly from an
iterable; the builtin list/tuple/dict/frozenset types are never patched.
"""
from __future__ import annotations

from collections.abc import MutableSequence, Sequence as AbcSequence, MutableMapping, Set as AbcSet
from functools import total_ordering
from .types import *
from .errors import InvalidArgument, OutOfRange, Immutable, NotFound
from .protocol import iterate, _MISSING


def _materialize(iterable: Optional[Iterable[T]]) -> List[T]:
    """copy an iterable into a fresh list; None means empty"""
    if iterable is None:
        return []
    return list(iterate(iterable))


def _format_items(items: Iterable[Any]) -> str:
    return ', '.join(repr(item) for item in items)


# --- mutable sequence ---

class Sequence(MutableSequence, Generic[T]):
    """mutable, growable, insertion-ordered sequence"""

    def __init__(self, iterable: Optional[Iterable[T]] = None):
        self._items: List[T] = _materialize(iterable)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Sequence(self._items[index])
        try:
            return self._items[index]
        except IndexError:
            raise OutOfRange(f"sequence index {index} out of range") from None

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._items[index] = _materialize(value)
            return
        try:
            self._items[index] = value
        except IndexError:
            raise OutOfRange(f"sequence assignment index {index} out of range") from None

    def __delitem__(self, index) -> None:
        try:
            del self._items[index]
        except IndexError:
            raise OutOfRange(f"sequence deletion index {index} out of range") from None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __eq__(self, other) -> bool:
        if isinstance(other, Sequence): return self._items == other._items
        if isinstance(other, list): return self._items == other
        return NotImplemented

    __hash__ = None

    def __add__(self, other: Iterable[T]) -> 'Sequence[T]':
        return Sequence(self._items + _materialize(other))

    def __repr__(self) -> str:
        return f"[{_format_items(self._items)}]"

    def insert(self, index: int, value: T) -> None:
        self._items.insert(index, value)

    def append(self, value: T) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(_materialize(values))

    def pop(self, index: int = -1) -> T:
        if not self._items:
            raise OutOfRange("pop from empty sequence")
        try:
            return self._items.pop(index)
        except IndexError:
            raise OutOfRange(f"pop index {index} out of range") from None

    def remove(self, value: T) -> None:
        try:
            self._items.remove(value)
        except ValueError:
            raise NotFound(f"{value!r} not in sequence") from None

    def index(self, value: T, start: int = 0, stop: Optional[int] = None) -> int:
        try:
            return self._items.index(value, start, len(self._items) if stop is None else stop)
        except ValueError:
            raise NotFound(f"{value!r} not in sequence") from None

    def count(self, value: T) -> int:
        return self._items.count(value)

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> 'Sequence[T]':
        return Sequence(self._items)

    def reverse(self) -> None:
        self._items.reverse()

    def sort(self, key: Optional[KeySelector[T, Any]] = None, reverse: bool = False) -> None:
        """sort in place. python's sort is stable, so equal keys keep their order."""
        self._items.sort(key=key, reverse=reverse)


# --- immutable sequence ---

@total_ordering
class ImmutableSequence(AbcSequence, Generic[T]):
    """fixed-size sequence frozen at construction; compares element-wise"""

    __slots__ = ('_items',)

    def __init__(self, iterable: Optional[Iterable[T]] = None):
        object.__setattr__(self, '_items', tuple(_materialize(iterable)))

    def __setattr__(self, name, value):
        raise Immutable(f"'{type(self).__name__}' object is immutable")

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ImmutableSequence(self._items[index])
        try:
            return self._items[index]
        except IndexError:
            raise OutOfRange(f"sequence index {index} out of range") from None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __hash__(self) -> int:
        return hash(self._items)

    def _as_tuple(self, other) -> Optional[tuple]:
        if isinstance(other, ImmutableSequence): return other._items
        if isinstance(other, tuple): return other
        return None

    def __eq__(self, other) -> bool:
        other_items = self._as_tuple(other)
        if other_items is None: return NotImplemented
        return self._items == other_items

    def __lt__(self, other) -> bool:
        other_items = self._as_tuple(other)
        if other_items is None: return NotImplemented
        return self._items < other_items

    def __add__(self, other: Iterable[T]) -> 'ImmutableSequence[T]':
        return ImmutableSequence(self._items + tuple(_materialize(other)))

    def __repr__(self) -> str:
        if len(self._items) == 1:
            return f"({self._items[0]!r},)"
        return f"({_format_items(self._items)})"

    def index(self, value: T, start: int = 0, stop: Optional[int] = None) -> int:
        try:
            return self._items.index(value, start, len(self._items) if stop is None else stop)
        except ValueError:
            raise NotFound(f"{value!r} not in sequence") from None

    def count(self, value: T) -> int:
        return self._items.count(value)

    def to_tuple(self) -> Tuple[T, ...]:
        return self._items

    # every mutator fails the same way
    def _frozen(self, *args, **kwargs):
        raise Immutable(f"'{type(self).__name__}' object does not support mutation")

    __setitem__ = __delitem__ = _frozen
    append = extend = insert = remove = pop = clear = sort = reverse = _frozen


# --- ordered map ---

class OrderedMap(MutableMapping, Generic[K, V]):
    """insertion-ordered key/value map with unique keys"""

    def __init__(self, source: Union[Mapping, Iterable[Tuple[K, V]], None] = None, **kwargs: V):
        self._data: Dict[K, V] = {}
        if source is not None:
            self.update(source)
        if kwargs:
            self.update(kwargs)

    @classmethod
    def fromkeys(cls, keys: Iterable[K], value: Optional[V] = None) -> 'OrderedMap[K, V]':
        return cls((key, value) for key in iterate(keys))

    def __getitem__(self, key: K) -> V:
        try:
            return self._data[key]
        except KeyError:
            raise NotFound(f"key {key!r} not found") from None

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        try:
            del self._data[key]
        except KeyError:
            raise NotFound(f"key {key!r} not found") from None

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key) -> bool:
        return key in self._data

    def __eq__(self, other) -> bool:
        if isinstance(other, OrderedMap): return self._data == other._data
        if isinstance(other, dict): return self._data == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return '{' + ', '.join(f"{k!r}: {v!r}" for k, v in self._data.items()) + '}'

    def set_item(self, key: K, value: V) -> None:
        self._data[key] = value

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._data.get(key, default)

    def pop(self, key: K, default: Any = _MISSING) -> V:
        if key in self._data:
            return self._data.pop(key)
        if default is _MISSING:
            raise NotFound(f"key {key!r} not found")
        return default

    def popitem(self) -> Tuple[K, V]:
        """remove and return the most recently inserted pair"""
        if not self._data:
            raise NotFound("popitem(): map is empty")
        return self._data.popitem()

    def update(self, other: Union[Mapping, Iterable[Tuple[K, V]]] = (), **kwargs: V) -> None:
        if isinstance(other, Mapping):
            pairs = other.items()
        else:
            pairs = iterate(other)
        for pair in pairs:
            try:
                key, value = pair
            except (TypeError, ValueError):
                raise InvalidArgument(f"map update element {pair!r} is not a key/value pair") from None
            self._data[key] = value
        for key, value in kwargs.items():
            self._data[key] = value

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'OrderedMap[K, V]':
        """shallow, independently mutable clone"""
        return OrderedMap(self._data)

    def keys(self) -> ImmutableSequence[K]:
        return ImmutableSequence(self._data.keys())

    def values(self) -> ImmutableSequence[V]:
        return ImmutableSequence(self._data.values())

    def items(self) -> Sequence[Tuple[K, V]]:
        return Sequence(self._data.items())

    def to_dict(self) -> Dict[K, V]:
        return dict(self._data)


# --- immutable set ---

class ImmutableSet(AbcSet, Generic[T]):
    """set of unique hashable values, frozen after construction"""

    __slots__ = ('_items',)

    def __init__(self, iterable: Optional[Iterable[T]] = None):
        object.__setattr__(self, '_items', frozenset(_materialize(iterable)))

    def __setattr__(self, name, value):
        raise Immutable(f"'{type(self).__name__}' object is immutable")

    @classmethod
    def _from_iterable(cls, iterable: Iterable[T]) -> 'ImmutableSet[T]':
        # used by the Set mixins to build results of |, &, -, ^
        return cls(iterable)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ImmutableSet({{{_format_items(self._items)}}})" if self._items else "ImmutableSet()"

    def issubset(self, other: Iterable[T]) -> bool:
        return self._items.issubset(_materialize(other))

    def issuperset(self, other: Iterable[T]) -> bool:
        return self._items.issuperset(_materialize(other))

    def union(self, *others: Iterable[T]) -> 'ImmutableSet[T]':
        return ImmutableSet(self._items.union(*(_materialize(o) for o in others)))

    def intersection(self, *others: Iterable[T]) -> 'ImmutableSet[T]':
        return ImmutableSet(self._items.intersection(*(_materialize(o) for o in others)))

    def difference(self, *others: Iterable[T]) -> 'ImmutableSet[T]':
        return ImmutableSet(self._items.difference(*(_materialize(o) for o in others)))

    def to_frozenset(self) -> frozenset:
        return self._items

    def _frozen(self, *args, **kwargs):
        raise Immutable(f"'{type(self).__name__}' object does not support mutation")

    add = discard = remove = clear = update = pop = _frozen
