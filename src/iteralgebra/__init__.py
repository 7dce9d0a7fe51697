"""Lazy, composable iterator adaptors over restartable sequence views."""

import logging

from ._adaptors import (
    accumulate,
    chain,
    chain_from_iterable,
    combinations,
    combinations_with_replacement,
    compress,
    count,
    cycle,
    dropwhile,
    filter,
    filterfalse,
    groupby,
    islice,
    permutations,
    product,
    repeat,
    starmap,
    takewhile,
    tee,
    zip,
    zip_longest,
)
from ._core import (
    Config,
    CursorExhaustedError,
    InvalidConfigurationError,
    IterAlgebraError,
    StaleGroupError,
    get_config,
    set_config,
)
from ._cursor import (
    UNBOUNDED,
    Cursor,
    End,
    IndexCursor,
    StreamCursor,
    Unbounded,
    distance,
)
from ._types import NO_INITIAL, Group, NoInitial
from ._view import SequenceView, empty, view

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NO_INITIAL",
    "UNBOUNDED",
    "Config",
    "Cursor",
    "CursorExhaustedError",
    "End",
    "Group",
    "IndexCursor",
    "InvalidConfigurationError",
    "IterAlgebraError",
    "NoInitial",
    "SequenceView",
    "StaleGroupError",
    "StreamCursor",
    "Unbounded",
    "accumulate",
    "chain",
    "chain_from_iterable",
    "combinations",
    "combinations_with_replacement",
    "compress",
    "count",
    "cycle",
    "distance",
    "dropwhile",
    "empty",
    "filter",
    "filterfalse",
    "get_config",
    "groupby",
    "islice",
    "permutations",
    "product",
    "repeat",
    "set_config",
    "starmap",
    "takewhile",
    "tee",
    "view",
    "zip",
    "zip_longest",
]
