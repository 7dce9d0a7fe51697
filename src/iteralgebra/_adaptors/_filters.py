from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import override

from .._core import InvalidConfigurationError
from .._cursor import UNBOUNDED, Cursor, End, Unbounded, copy_end, reached
from .._view import SequenceView, view


class _FilterCursor[T](Cursor[T]):
    """Skips ahead to the next element satisfying the predicate, on construction and after each advance."""

    __slots__ = ("_predicate", "_it", "_last")

    def __init__(
        self, predicate: Callable[[T], object], it: Cursor[T], last: End[T]
    ) -> None:
        self._predicate = predicate
        self._it = it
        self._last = last

    def _seek(self) -> None:
        while not reached(self._it, self._last) and not self._predicate(
            self._it.current()
        ):
            self._it.advance()

    @override
    def current(self) -> T:
        return self._it.current()

    @override
    def advance(self) -> None:
        self._it.advance()
        self._seek()

    @override
    def equals(self, other: _FilterCursor[T]) -> bool:
        return self._it.equals(other._it)

    @override
    def copy(self) -> _FilterCursor[T]:
        return _FilterCursor(self._predicate, self._it.copy(), self._last)


class _TakeWhileCursor[T](Cursor[T]):
    __slots__ = ("_predicate", "_it", "_last", "_stopped")

    def __init__(
        self,
        predicate: Callable[[T], object],
        it: Cursor[T],
        last: End[T],
        *,
        stopped: bool,
    ) -> None:
        self._predicate = predicate
        self._it = it
        self._last = last
        self._stopped = stopped

    def _check(self) -> None:
        if reached(self._it, self._last) or not self._predicate(self._it.current()):
            self._stopped = True

    @override
    def current(self) -> T:
        return self._it.current()

    @override
    def advance(self) -> None:
        self._it.advance()
        self._check()

    @override
    def equals(self, other: _TakeWhileCursor[T]) -> bool:
        if self._stopped or other._stopped:
            return self._stopped and other._stopped
        return self._it.equals(other._it)

    @override
    def copy(self) -> _TakeWhileCursor[T]:
        return _TakeWhileCursor(
            self._predicate, self._it.copy(), self._last, stopped=self._stopped
        )


class _CompressCursor[T](Cursor[T]):
    """Walks data and selectors in lockstep; ends as soon as either one does."""

    __slots__ = ("_data", "_data_last", "_selectors", "_selectors_last")

    def __init__(
        self,
        data: End[T],
        data_last: End[T],
        selectors: End[object],
        selectors_last: End[object],
    ) -> None:
        self._data = data
        self._data_last = data_last
        self._selectors = selectors
        self._selectors_last = selectors_last

    def _exhausted(self) -> bool:
        return reached(self._data, self._data_last) or reached(
            self._selectors, self._selectors_last
        )

    def _seek(self) -> None:
        while not self._exhausted() and not self._selectors.current():  # type: ignore[union-attr]
            self._data.advance()  # type: ignore[union-attr]
            self._selectors.advance()  # type: ignore[union-attr]

    @override
    def current(self) -> T:
        return self._data.current()  # type: ignore[union-attr]

    @override
    def advance(self) -> None:
        self._data.advance()  # type: ignore[union-attr]
        self._selectors.advance()  # type: ignore[union-attr]
        self._seek()

    @override
    def equals(self, other: _CompressCursor[T]) -> bool:
        return reached(self._data, other._data) or reached(
            self._selectors, other._selectors
        )

    @override
    def copy(self) -> _CompressCursor[T]:
        return _CompressCursor(
            copy_end(self._data),
            self._data_last,
            copy_end(self._selectors),
            self._selectors_last,
        )


class _IsliceCursor[T](Cursor[T]):
    __slots__ = ("_it", "_last", "_index", "_stop", "_step")

    def __init__(
        self,
        it: Cursor[T],
        last: End[T],
        index: int,
        stop: int | None,
        step: int,
    ) -> None:
        self._it = it
        self._last = last
        self._index = index
        self._stop = stop
        self._step = step

    def _exhausted(self) -> bool:
        if self._stop is not None and self._index >= self._stop:
            return True
        return reached(self._it, self._last)

    @override
    def current(self) -> T:
        return self._it.current()

    @override
    def advance(self) -> None:
        for _ in range(self._step):
            if self._exhausted():
                break
            self._it.advance()
            self._index += 1

    @override
    def equals(self, other: _IsliceCursor[T]) -> bool:
        done, other_done = self._exhausted(), other._exhausted()
        if done or other_done:
            return done and other_done
        return self._it.equals(other._it)

    @override
    def copy(self) -> _IsliceCursor[T]:
        return _IsliceCursor(
            self._it.copy(), self._last, self._index, self._stop, self._step
        )


def _truthy(value: object) -> bool:
    return bool(value)


def filter[T](
    predicate: Callable[[T], object] | None, data: Iterable[T]
) -> SequenceView[T]:
    """Keep the elements of **data** for which **predicate** is true.

    If **predicate** is `None`, keep the truthy elements.

    The predicate may be called more than once on the same element.

    Args:
        predicate (Callable[[T], object] | None): Selection function.
        data (Iterable[T]): The sequence to filter.

    Returns:
        SequenceView[T]: A view of the selected elements.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.filter(lambda x: x > 2, [1, 4, 2, 5]).collect()
    [4, 5]
    >>> ia.filter(None, [0, 1, False, 3]).collect()
    [1, 3]

    ```
    """
    source = view(data)
    keep = _truthy if predicate is None else predicate
    begin = _FilterCursor(keep, source.begin(), source.end())
    begin._seek()
    end = source.end()
    if isinstance(end, Unbounded):
        return SequenceView(begin, UNBOUNDED)
    return SequenceView(begin, _FilterCursor(keep, end, source.end()))


def filterfalse[T](
    predicate: Callable[[T], object] | None, data: Iterable[T]
) -> SequenceView[T]:
    """Keep the elements of **data** for which **predicate** is false.

    If **predicate** is `None`, keep the falsy elements.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.filterfalse(lambda x: x > 2, [1, 4, 2, 5]).collect()
    [1, 2]
    >>> ia.filterfalse(None, [0, 1, False, 3]).collect()
    [0, False]

    ```
    """
    if predicate is None:
        return filter(operator.not_, data)
    return filter(lambda item: not predicate(item), data)


def dropwhile[T](predicate: Callable[[T], object], data: Iterable[T]) -> SequenceView[T]:
    """Skip the leading elements of **data** while **predicate** holds, then pass the rest through.

    The skipping happens once, here: the result is the remaining range of **data** itself, not a wrapper around it.

    **Warning** ⚠️
        Never returns on an unbounded view whose elements all satisfy **predicate**.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.dropwhile(lambda x: x < 5, [1, 4, 6, 4, 1]).collect()
    [6, 4, 1]
    >>> ia.dropwhile(lambda x: x < 5, ia.count()).islice(2).collect()
    [5, 6]

    ```
    """
    source = view(data)
    it, last = source.begin(), source.end()
    while not reached(it, last) and predicate(it.current()):
        it.advance()
    return SequenceView(it, last)


def takewhile[T](predicate: Callable[[T], object], data: Iterable[T]) -> SequenceView[T]:
    """Return the elements of **data** as long as **predicate** holds, stopping at the first failure.

    The result always has an end cursor, even over an unbounded **data**.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.takewhile(lambda x: x < 5, [1, 4, 6, 4, 1]).collect()
    [1, 4]
    >>> ia.takewhile(lambda x: x * x < 30, ia.count()).collect()
    [0, 1, 2, 3, 4, 5]

    ```
    """
    source = view(data)
    begin = _TakeWhileCursor(predicate, source.begin(), source.end(), stopped=False)
    begin._check()
    end = _TakeWhileCursor(predicate, source.begin(), source.end(), stopped=True)
    return SequenceView(begin, end)


def compress[T](data: Iterable[T], selectors: Iterable[object]) -> SequenceView[T]:
    """Keep the elements of **data** whose corresponding selector is truthy.

    Stops as soon as either **data** or **selectors** is exhausted.

    Args:
        data (Iterable[T]): The elements.
        selectors (Iterable[object]): One selector per element.

    Returns:
        SequenceView[T]: A view of the selected elements.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.compress([1, 2, 3, 4], [False, True, False, True]).collect()
    [2, 4]
    >>> ia.compress("ABCDEF", [1, 1]).collect()
    ['A', 'B']
    >>> ia.compress("AB", ia.cycle([0, 1])).collect()
    ['B']

    ```
    """
    source, mask = view(data), view(selectors)
    data_last, selectors_last = source.end(), mask.end()
    begin = _CompressCursor(source.begin(), data_last, mask.begin(), selectors_last)
    begin._seek()
    if isinstance(data_last, Unbounded) and isinstance(selectors_last, Unbounded):
        return SequenceView(begin, UNBOUNDED)
    end = _CompressCursor(data_last, data_last, selectors_last, selectors_last)
    return SequenceView(begin, end)


def islice[T](data: Iterable[T], *args: int | None) -> SequenceView[T]:
    """Select positions of **data**, like slicing a list.

    Called as `islice(data, stop)` or `islice(data, start, stop[, step])`, where a `None` **stop** runs to the end of
    **data**, a `None` **start** means 0 and a `None` **step** means 1.

    The leading **start** elements are skipped once, when the view is built.

    Args:
        data (Iterable[T]): The sequence to slice.
        *args (int | None): `stop`, or `start, stop[, step]`.

    Returns:
        SequenceView[T]: A view of the selected elements.

    Raises:
        InvalidConfigurationError: If an argument is neither `None` nor an integer, **step** is not positive, or **start** or **stop** is negative.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.islice("ABCDEFG", 0, 7, 3).collect("".join)
    'ADG'
    >>> ia.islice("ABCDEFG", 5, 2).collect()
    []
    >>> ia.islice(ia.count(), 3, None, 10).islice(3).collect()
    [3, 13, 23]
    >>> ia.islice("ABC", 0, 3, 0)
    Traceback (most recent call last):
        ...
    iteralgebra._core._errors.InvalidConfigurationError: islice() step must be positive, got 0

    ```
    """
    if not all(arg is None or (isinstance(arg, int) and not isinstance(arg, bool)) for arg in args):
        msg = f"islice() arguments must be None or integers, got {args!r}"
        raise InvalidConfigurationError(msg)
    bounds = slice(*args)
    start = 0 if bounds.start is None else bounds.start
    stop: int | None = bounds.stop
    step = 1 if bounds.step is None else bounds.step
    if step <= 0:
        msg = f"islice() step must be positive, got {step}"
        raise InvalidConfigurationError(msg)
    if start < 0 or (stop is not None and stop < 0):
        msg = f"islice() indices must be None or non-negative, got start={start}, stop={stop}"
        raise InvalidConfigurationError(msg)
    source = view(data)
    it, last = source.begin(), source.end()
    if stop is not None and start >= stop:
        empty = _IsliceCursor(it, last, stop, stop, step)
        return SequenceView(empty, empty.copy())
    index = 0
    while index < start and not reached(it, last):
        it.advance()
        index += 1
    begin = _IsliceCursor(it, last, start, stop, step)
    match (stop, last):
        case (None, Unbounded()):
            return SequenceView(begin, UNBOUNDED)
        case (None, _):
            return SequenceView(begin, _IsliceCursor(copy_end(last), last, 0, None, step))  # type: ignore[arg-type]
        case _:
            return SequenceView(begin, _IsliceCursor(source.begin(), last, stop, stop, step))
