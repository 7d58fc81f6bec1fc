r"""
'    ____  __  __ _____  ____  ____
'   (  _ \(  \/  |_   _)( ___)(  _ \
'    )___/ \    /  | |   )__)  )   /
'   (__)   (__/   |_|  (____)(_)\_)
"""

# expose the lazy iterator tools
from .lazy import (
    accumulate,
    chain,
    combinations,
    combinations_with_replacement,
    compress,
    count,
    cycle,
    dropwhile,
    filterfalse,
    groupby,
    islice,
    pairwise,
    permutations,
    product,
    repeat,
    starmap,
    takewhile,
    tee,
    zip_longest,
)

# expose the protocol bridge
from .protocol import LazySequence, advance, iterate

# expose the container adapters
from .containers import Sequence, ImmutableSequence, OrderedMap, ImmutableSet

# expose the random generator class (module-level helpers live in pyter.rng)
from .rng import RandomState

# expose the fluent stream and its factory functions
from .stream import Stream
from .factories import (
    from_iterable,
    from_range,
    from_count,
    empty,
    generate,
    stream,
    P,
)

from .errors import PyterError, InvalidArgument, OutOfRange, Exhausted, Immutable, NotFound
from .types import Kind, kind_of, is_iterable

# define what `import *` does
__all__ = [
    "accumulate",
    "chain",
    "combinations",
    "combinations_with_replacement",
    "compress",
    "count",
    "cycle",
    "dropwhile",
    "filterfalse",
    "groupby",
    "islice",
    "pairwise",
    "permutations",
    "product",
    "repeat",
    "starmap",
    "takewhile",
    "tee",
    "zip_longest",
    "LazySequence",
    "advance",
    "iterate",
    "Sequence",
    "ImmutableSequence",
    "OrderedMap",
    "ImmutableSet",
    "RandomState",
    "Stream",
    "from_iterable",
    "from_range",
    "from_count",
    "empty",
    "generate",
    "stream",
    "P",
    "PyterError",
    "InvalidArgument",
    "OutOfRange",
    "Exhausted",
    "Immutable",
    "NotFound",
    "Kind",
    "kind_of",
    "is_iterable",
]
