from .infinite import count, cycle, repeat, Count, Cycle, Repeat
from .terminating import (
    accumulate,
    chain,
    compress,
    dropwhile,
    filterfalse,
    islice,
    pairwise,
    starmap,
    takewhile,
    tee,
    zip_longest,
    TeeCursor,
)
from .combinatorics import (
    combinations,
    combinations_with_replacement,
    permutations,
    product,
)
from .grouping import groupby, GroupBy, Group, GroupState

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
    "Count",
    "Cycle",
    "Repeat",
    "TeeCursor",
    "GroupBy",
    "Group",
    "GroupState",
]
