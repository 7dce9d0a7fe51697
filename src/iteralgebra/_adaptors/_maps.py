from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, override

from .._cursor import UNBOUNDED, Cursor, End, Unbounded, reached
from .._types import NO_INITIAL, NoInitial
from .._view import SequenceView, view


class _StarmapCursor[R](Cursor[R]):
    __slots__ = ("_func", "_it")

    def __init__(self, func: Callable[..., R], it: Cursor[Iterable[Any]]) -> None:
        self._func = func
        self._it = it

    @override
    def current(self) -> R:
        return self._func(*self._it.current())

    @override
    def advance(self) -> None:
        self._it.advance()

    @override
    def equals(self, other: _StarmapCursor[R]) -> bool:
        return self._it.equals(other._it)

    @override
    def copy(self) -> _StarmapCursor[R]:
        return _StarmapCursor(self._func, self._it.copy())


class _AccumulateCursor[T, S](Cursor[S]):
    """Holds the running total; folds the next element in on each advance."""

    __slots__ = ("_it", "_last", "_func", "_total")

    def __init__(
        self, it: Cursor[T], last: End[T], func: Callable[[S, T], S], total: S
    ) -> None:
        self._it = it
        self._last = last
        self._func = func
        self._total = total

    @override
    def current(self) -> S:
        return self._total

    @override
    def advance(self) -> None:
        self._it.advance()
        if not reached(self._it, self._last):
            self._total = self._func(self._total, self._it.current())

    @override
    def equals(self, other: _AccumulateCursor[T, S]) -> bool:
        return self._it.equals(other._it)

    @override
    def copy(self) -> _AccumulateCursor[T, S]:
        return _AccumulateCursor(self._it.copy(), self._last, self._func, self._total)


def starmap[R](func: Callable[..., R], data: Iterable[Iterable[Any]]) -> SequenceView[R]:
    """Compute `func(*element)` for each element of **data**.

    Args:
        func (Callable[..., R]): Function taking the unpacked elements as arguments.
        data (Iterable[Iterable[Any]]): A sequence of argument tuples.

    Returns:
        SequenceView[R]: A view of the results, computed anew on each read.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.starmap(pow, [(2, 5), (3, 2), (10, 3)]).collect()
    [32, 9, 1000]
    >>> ia.view("ab").zip([1, 2]).starmap(str.__mul__).collect()
    ['a', 'bb']

    ```
    """
    source = view(data)
    begin = _StarmapCursor(func, source.begin())
    end = source.end()
    if isinstance(end, Unbounded):
        return SequenceView(begin, UNBOUNDED)
    return SequenceView(begin, _StarmapCursor(func, end))


def accumulate[T, S](
    data: Iterable[T],
    init: S | NoInitial = NO_INITIAL,
    func: Callable[[S, T], S] = operator.add,
) -> SequenceView[S]:
    """Return the running fold of **data** under **func**.

    With **init**, the first value is `func(init, x0)`, and each next one is `func(previous, x)`.

    Without it, the first value is `x0` itself.

    An empty **data** gives an empty view, whatever **init** is.

    Args:
        data (Iterable[T]): The sequence to fold.
        init (S | NoInitial): Seed of the fold. Omit it to seed with the first element.
        func (Callable[[S, T], S]): Binary fold function. Defaults to `operator.add`.

    Returns:
        SequenceView[S]: A view of the running totals.

    Example:
    ```python
    >>> import operator
    >>> import iteralgebra as ia
    >>> ia.accumulate([1, 2, 3, 4, 5], 0).collect()
    [1, 3, 6, 10, 15]
    >>> ia.accumulate([], 0).collect()
    []
    >>> ia.accumulate([1], 0).collect()
    [1]
    >>> ia.accumulate("abc", "", lambda acc, c: c + acc).collect()
    ['a', 'ba', 'cba']
    >>> ia.accumulate([2, 3, 4], func=operator.mul).collect()
    [2, 6, 24]

    ```
    """
    source = view(data)
    it, last = source.begin(), source.end()
    if reached(it, last):
        total: Any = init
    elif isinstance(init, NoInitial):
        total = it.current()
    else:
        total = func(init, it.current())
    begin = _AccumulateCursor(it, last, func, total)
    if isinstance(last, Unbounded):
        return SequenceView(begin, UNBOUNDED)
    return SequenceView(begin, _AccumulateCursor(source.end(), last, func, total))
