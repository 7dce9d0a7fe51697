from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

if TYPE_CHECKING:
    from ._view import SequenceView


class Group[K, V](NamedTuple):
    """Represents a run of contiguous elements sharing a common key.

    See `groupby()` for details.

    The `values` view borrows the `groupby()` cursor that produced it, and is only valid until that cursor advances.
    """

    key: K
    """The common key for the group."""
    values: SequenceView[V]
    """A `SequenceView` over the elements of the run."""

    def __repr__(self) -> str:
        return f"({self.key.__repr__()}, {self.values.__repr__()})"


class NoInitial:
    """Marker for an omitted `accumulate()` initial value, since `None` is a valid one."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_INITIAL"


NO_INITIAL: Final = NoInitial()
