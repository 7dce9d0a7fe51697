from __future__ import annotations

from collections.abc import Iterable
from typing import Any, override

from .._core import InvalidConfigurationError
from .._cursor import UNBOUNDED, Cursor, End, reached
from .._view import SequenceView, view


class _CountCursor[T](Cursor[T]):
    __slots__ = ("_value", "_step")

    def __init__(self, value: T, step: Any) -> None:
        self._value = value
        self._step = step

    @override
    def current(self) -> T:
        return self._value

    @override
    def advance(self) -> None:
        self._value += self._step

    @override
    def equals(self, other: _CountCursor[T]) -> bool:
        return self._value == other._value

    @override
    def copy(self) -> _CountCursor[T]:
        return _CountCursor(self._value, self._step)


class _RepeatCursor[T](Cursor[T]):
    __slots__ = ("_value", "_emitted")

    def __init__(self, value: T, emitted: int) -> None:
        self._value = value
        self._emitted = emitted

    @override
    def current(self) -> T:
        return self._value

    @override
    def advance(self) -> None:
        self._emitted += 1

    @override
    def equals(self, other: _RepeatCursor[T]) -> bool:
        return self._emitted == other._emitted

    @override
    def copy(self) -> _RepeatCursor[T]:
        return _RepeatCursor(self._value, self._emitted)


class _CycleCursor[T](Cursor[T]):
    __slots__ = ("_it", "_first", "_last")

    def __init__(self, it: Cursor[T], first: Cursor[T], last: End[T]) -> None:
        self._it = it
        self._first = first
        self._last = last

    @override
    def current(self) -> T:
        return self._it.current()

    @override
    def advance(self) -> None:
        self._it.advance()
        if reached(self._it, self._last):
            self._it = self._first.copy()

    @override
    def equals(self, other: _CycleCursor[T]) -> bool:
        return self._it.equals(other._it)

    @override
    def copy(self) -> _CycleCursor[T]:
        return _CycleCursor(self._it.copy(), self._first, self._last)


def count[T](start: T = 0, step: Any = 1) -> SequenceView[T]:
    """Create an unbounded view of evenly spaced values.

    **Warning** ⚠️
        This view never ends. Bound it with `islice()`, `takewhile()` or `zip()` before collecting.

    Args:
        start (T): First value. Defaults to 0.
        step (Any): Difference between consecutive values. Defaults to 1.

    Returns:
        SequenceView[T]: An unbounded view of `start, start + step, start + 2 * step, ...`.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.count(10, 2).islice(3).collect()
    [10, 12, 14]
    >>> ia.count(0.5, 0.25).islice(3).collect()
    [0.5, 0.75, 1.0]

    ```
    """
    return SequenceView(_CountCursor(start, step), UNBOUNDED)


def repeat[T](value: T, times: int | None = None) -> SequenceView[T]:
    """Create a view returning **value** over and over again.

    Runs indefinitely unless **times** is given.

    Args:
        value (T): The value to repeat.
        times (int | None): How many times to emit it. Defaults to `None`, for an unbounded view.

    Returns:
        SequenceView[T]: A view of **value** repeated.

    Raises:
        InvalidConfigurationError: If **times** is negative.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.repeat("x", 3).collect()
    ['x', 'x', 'x']
    >>> ia.repeat(7).islice(2).collect()
    [7, 7]
    >>> ia.repeat("x", 0).collect()
    []

    ```
    """
    if times is None:
        return SequenceView(_RepeatCursor(value, 0), UNBOUNDED)
    if times < 0:
        msg = f"repeat() times must be non-negative, got {times}"
        raise InvalidConfigurationError(msg)
    return SequenceView(_RepeatCursor(value, 0), _RepeatCursor(value, times))


def cycle[T](data: Iterable[T]) -> SequenceView[T]:
    """Return the elements of **data** until exhausted, then repeat them indefinitely.

    An empty **data** gives an empty view rather than a view that never produces anything.

    Args:
        data (Iterable[T]): The sequence to replay.

    Returns:
        SequenceView[T]: An unbounded view, or an empty one.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.cycle("ABC").islice(7).collect("".join)
    'ABCABCA'
    >>> ia.cycle([]).collect()
    []

    ```
    """
    source = view(data)
    if source.is_empty():
        return source
    return SequenceView(
        _CycleCursor(source.begin(), source.begin(), source.end()), UNBOUNDED
    )
