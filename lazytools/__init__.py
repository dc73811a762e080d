"""
A python library of lazy combinatorial generators and iterator tools.

The lazytools package generates combinations, permutations and Cartesian
products of finite inputs without materializing them: each tuple is
computed from the previous one when it is requested, so that very large
sequences can be walked or partially consumed at constant memory cost.

It also provides the usual building blocks to consume and assemble
iterators (accumulate, batched, chain, groupby, islice, tee...) and
unbounded iterators (count, cycle, repeat).

Arguments that set a length are checked when the iterator is created and
raise :class:`InvalidArgumentError` before any value is produced.
"""

from .combinations import combinations, combinations_with_replacement
from .errors import EvaluationError, InvalidArgumentError, seterr
from .grouping import groupby, tee
from .infinite import count, cycle, repeat
from .iterators import (
    accumulate,
    batched,
    chain,
    chain_from_iterable,
    compress,
    dropwhile,
    filterfalse,
    islice,
    pairwise,
    starmap,
    takewhile,
    zip_longest,
)
from .permutations import permutations, permutations_with_replacement
from .product import product
from .utils import length

__all__ = [
    "InvalidArgumentError",
    "EvaluationError",
    "seterr",
    "combinations",
    "combinations_with_replacement",
    "permutations",
    "permutations_with_replacement",
    "product",
    "accumulate",
    "batched",
    "chain",
    "chain_from_iterable",
    "compress",
    "dropwhile",
    "filterfalse",
    "groupby",
    "islice",
    "pairwise",
    "starmap",
    "takewhile",
    "tee",
    "zip_longest",
    "count",
    "cycle",
    "repeat",
    "length",
]
