from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, override

import cytoolz as cz

from .._core import CursorExhaustedError, StaleGroupError, get_config
from .._cursor import UNBOUNDED, Cursor, End, Unbounded, reached
from .._types import Group
from .._view import SequenceView, view


class _GroupByCursor[K, T](Cursor[Group[K, T]]):
    """Sits on the first element of a run, with a look-ahead cursor on the first element of the next one.

    Each advance bumps a generation counter, which invalidates the `Group` views handed out before.
    """

    __slots__ = ("_key_fn", "_first", "_it", "_last", "_key", "_next_key", "_generation")

    def __init__(self, key_fn: Callable[[T], K], first: Cursor[T], last: End[T]) -> None:
        self._key_fn = key_fn
        self._first = first
        self._it = first.copy()
        self._last = last
        self._key: Any = None
        self._next_key: Any = None
        self._generation = 0
        if not reached(self._it, last):
            self._key = key_fn(self._it.current())
            self._it.advance()
            self._scan()

    def _scan(self) -> None:
        """Move the look-ahead past every element sharing the current key."""
        while not reached(self._it, self._last):
            self._next_key = self._key_fn(self._it.current())
            if self._next_key != self._key:
                break
            self._it.advance()

    @property
    def generation(self) -> int:
        return self._generation

    @override
    def current(self) -> Group[K, T]:
        if reached(self._first, self._last):
            msg = "groupby() cursor is exhausted"
            raise CursorExhaustedError(msg)
        values = SequenceView(
            _GroupCursor(self, self._first.copy(), self._generation),
            _GroupCursor(self, self._it.copy(), self._generation),
        )
        return Group(self._key, values)

    @override
    def advance(self) -> None:
        self._generation += 1
        self._first = self._it.copy()
        if reached(self._it, self._last):
            return
        self._key = self._next_key
        self._it.advance()
        self._scan()

    @override
    def equals(self, other: _GroupByCursor[K, T]) -> bool:
        return reached(self._first, other._first)

    @override
    def copy(self) -> _GroupByCursor[K, T]:
        clone = _GroupByCursor.__new__(_GroupByCursor)
        clone._key_fn = self._key_fn
        clone._first = self._first.copy()
        clone._it = self._it.copy()
        clone._last = self._last
        clone._key = self._key
        clone._next_key = self._next_key
        clone._generation = self._generation
        return clone


class _GroupCursor[T](Cursor[T]):
    """Cursor within one run, valid only while its `groupby()` cursor has not moved."""

    __slots__ = ("_owner", "_it", "_generation")

    def __init__(self, owner: _GroupByCursor[Any, T], it: Cursor[T], generation: int) -> None:
        self._owner = owner
        self._it = it
        self._generation = generation

    def _check(self) -> None:
        if get_config().check_stale_groups and self._owner.generation != self._generation:
            msg = (
                "this group was invalidated when its groupby() cursor advanced; "
                "collect the group before moving on"
            )
            raise StaleGroupError(msg)

    @override
    def current(self) -> T:
        self._check()
        return self._it.current()

    @override
    def advance(self) -> None:
        self._check()
        self._it.advance()

    @override
    def equals(self, other: _GroupCursor[T]) -> bool:
        self._check()
        return self._it.equals(other._it)

    @override
    def copy(self) -> _GroupCursor[T]:
        return _GroupCursor(self._owner, self._it.copy(), self._generation)


def groupby[T, K](
    data: Iterable[T], key: Callable[[T], K] | None = None
) -> SequenceView[Group[K, T]]:
    """Split **data** into runs of consecutive elements sharing the same **key**.

    Each element of the result is a `Group(key, values)`, where `values` is a `SequenceView` over the run.

    A new group starts every time the key changes, so equal keys that are not contiguous give separate groups.
    Sort **data** by the same key beforehand to get a single group per key.

    **Warning** ⚠️
        A group borrows the cursor that produced it: once the iteration moves on to the next group,
        reading a previous one raises `StaleGroupError`. Collect each group before advancing.
        The check can be disabled with `set_config(check_stale_groups=False)`.

    Args:
        data (Iterable[T]): The sequence to split.
        key (Callable[[T], K] | None): Function computing the key of an element. Defaults to the element itself.

    Returns:
        SequenceView[Group[K, T]]: A view of the runs.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> [(g.key, g.values.collect()) for g in ia.groupby([1, 1, 2, 3, 3])]
    [(1, [1, 1]), (2, [2]), (3, [3, 3])]
    >>> [(k, len(g.collect())) for k, g in ia.groupby("aAbB", str.lower)]
    [('a', 2), ('b', 2)]
    >>> ia.groupby([]).collect()
    []

    ```
    Reading a group after moving on fails:
    ```python
    >>> import iteralgebra as ia
    >>> groups = ia.groupby("aabb").collect()
    >>> groups[0].values.collect()
    Traceback (most recent call last):
        ...
    iteralgebra._core._errors.StaleGroupError: this group was invalidated when its groupby() cursor advanced; collect the group before moving on

    ```
    """
    source = view(data)
    key_fn: Callable[[T], Any] = cz.functoolz.identity if key is None else key
    first, last = source.begin(), source.end()
    begin = _GroupByCursor(key_fn, first, last)
    if isinstance(last, Unbounded):
        return SequenceView(begin, UNBOUNDED)
    return SequenceView(begin, _GroupByCursor(key_fn, last.copy(), last))
