from enum import Enum
from collections.abc import Mapping
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]


class Kind(Enum):
    """closed set of capability tags used instead of ad-hoc isinstance ladders"""
    NONE = 'none'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    BYTES = 'bytes'
    MAPPING = 'mapping'
    ITERABLE = 'iterable'
    OTHER = 'other'


def is_iterable(value: Any) -> bool:
    try:
        iter(value)
    except TypeError:
        return False
    return True


def kind_of(value: Any) -> Kind:
    """classify a value. bool is checked before int since bool subclasses int."""
    if value is None: return Kind.NONE
    if isinstance(value, bool): return Kind.BOOLEAN
    if isinstance(value, (int, float)): return Kind.NUMBER
    if isinstance(value, str): return Kind.STRING
    if isinstance(value, (bytes, bytearray)): return Kind.BYTES
    if isinstance(value, Mapping): return Kind.MAPPING
    if is_iterable(value): return Kind.ITERABLE
    return Kind.OTHER
