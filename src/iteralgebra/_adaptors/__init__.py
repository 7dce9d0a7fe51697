from ._combinatorics import (
    combinations,
    combinations_with_replacement,
    permutations,
    product,
)
from ._filters import compress, dropwhile, filter, filterfalse, islice, takewhile
from ._groupby import groupby
from ._infinite import count, cycle, repeat
from ._joins import chain, chain_from_iterable, tee, zip, zip_longest
from ._maps import accumulate, starmap

__all__ = [
    "accumulate",
    "chain",
    "chain_from_iterable",
    "combinations",
    "combinations_with_replacement",
    "compress",
    "count",
    "cycle",
    "dropwhile",
    "filter",
    "filterfalse",
    "groupby",
    "islice",
    "permutations",
    "product",
    "repeat",
    "starmap",
    "takewhile",
    "tee",
    "zip",
    "zip_longest",
]
