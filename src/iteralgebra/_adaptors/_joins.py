from __future__ import annotations

import builtins
from collections.abc import Iterable
from typing import Any, override

from .._core import CursorExhaustedError, InvalidConfigurationError
from .._cursor import UNBOUNDED, Cursor, End, Unbounded, copy_end, reached
from .._view import SequenceView, empty, view


class _ChainCursor[T](Cursor[T]):
    """Reads from the first part not yet exhausted."""

    __slots__ = ("_parts", "_lasts", "_index")

    def __init__(
        self, parts: list[End[T]], lasts: tuple[End[T], ...], index: int
    ) -> None:
        self._parts = parts
        self._lasts = lasts
        self._index = index

    def _settle(self) -> None:
        while self._index < len(self._parts) and reached(
            self._parts[self._index], self._lasts[self._index]
        ):
            self._index += 1

    @override
    def current(self) -> T:
        if self._index == len(self._parts):
            msg = "chain() cursor is exhausted"
            raise CursorExhaustedError(msg)
        return self._parts[self._index].current()  # type: ignore[union-attr]

    @override
    def advance(self) -> None:
        self._parts[self._index].advance()  # type: ignore[union-attr]
        self._settle()

    @override
    def equals(self, other: _ChainCursor[T]) -> bool:
        if self._index != other._index:
            return False
        if self._index == len(self._parts):
            return True
        return reached(self._parts[self._index], other._parts[other._index])

    @override
    def copy(self) -> _ChainCursor[T]:
        return _ChainCursor([copy_end(part) for part in self._parts], self._lasts, self._index)


class _ZipCursor(Cursor[tuple[Any, ...]]):
    """Advances every component in lockstep; ends as soon as any component does."""

    __slots__ = ("_its",)

    def __init__(self, its: list[End[Any]]) -> None:
        self._its = its

    @override
    def current(self) -> tuple[Any, ...]:
        return tuple(it.current() for it in self._its)  # type: ignore[union-attr]

    @override
    def advance(self) -> None:
        for it in self._its:
            it.advance()  # type: ignore[union-attr]

    @override
    def equals(self, other: _ZipCursor) -> bool:
        return any(reached(it, o) for it, o in builtins.zip(self._its, other._its, strict=True))

    @override
    def copy(self) -> _ZipCursor:
        return _ZipCursor([copy_end(it) for it in self._its])


class _ZipLongestCursor(Cursor[tuple[Any, ...]]):
    """Advances the components not yet exhausted; ends once all of them are."""

    __slots__ = ("_its", "_lasts", "_fillvalue")

    def __init__(
        self, its: list[Cursor[Any]], lasts: tuple[End[Any], ...], fillvalue: object
    ) -> None:
        self._its = its
        self._lasts = lasts
        self._fillvalue = fillvalue

    @override
    def current(self) -> tuple[Any, ...]:
        if all(reached(it, last) for it, last in builtins.zip(self._its, self._lasts, strict=True)):
            msg = "zip_longest() cursor is exhausted"
            raise CursorExhaustedError(msg)
        return tuple(
            self._fillvalue if reached(it, last) else it.current()
            for it, last in builtins.zip(self._its, self._lasts, strict=True)
        )

    @override
    def advance(self) -> None:
        for it, last in builtins.zip(self._its, self._lasts, strict=True):
            if not reached(it, last):
                it.advance()

    @override
    def equals(self, other: _ZipLongestCursor) -> bool:
        return all(reached(it, o) for it, o in builtins.zip(self._its, other._its, strict=True))

    @override
    def copy(self) -> _ZipLongestCursor:
        return _ZipLongestCursor([it.copy() for it in self._its], self._lasts, self._fillvalue)


def chain[T](*iterables: Iterable[T]) -> SequenceView[T]:
    """Concatenate **iterables**: the elements of the first until it is exhausted, then those of the next, and so on.

    The result is unbounded as soon as one of the parts is.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.chain("ABC", "DEF").collect("".join)
    'ABCDEF'
    >>> ia.chain([], [1], [], [2, 3]).collect()
    [1, 2, 3]
    >>> ia.chain().collect()
    []

    ```
    """
    parts = [view(iterable) for iterable in iterables]
    lasts = tuple(part.end() for part in parts)
    begin = _ChainCursor([part.begin() for part in parts], lasts, 0)
    begin._settle()
    if any(isinstance(last, Unbounded) for last in lasts):
        return SequenceView(begin, UNBOUNDED)
    return SequenceView(begin, _ChainCursor([copy_end(last) for last in lasts], lasts, len(parts)))


def chain_from_iterable[T](iterables: Iterable[Iterable[T]]) -> SequenceView[T]:
    """Like `chain()`, with the parts taken from a single iterable.

    The outer iterable is read in full when the view is built; the parts themselves stay lazy.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.chain_from_iterable(["AB", "C"]).collect()
    ['A', 'B', 'C']

    ```
    """
    return chain(*iterables)


def zip(*iterables: Iterable[Any]) -> SequenceView[tuple[Any, ...]]:
    """Aggregate elements from each of **iterables** into tuples.

    Stops as soon as any one of them is exhausted. With no iterables, the result is empty.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.zip("ABCD", "xy").collect()
    [('A', 'x'), ('B', 'y')]
    >>> ia.zip(ia.count(), "ab").collect()
    [(0, 'a'), (1, 'b')]
    >>> ia.zip().collect()
    []

    ```
    """
    if not iterables:
        return empty()
    parts = [view(iterable) for iterable in iterables]
    lasts: list[End[Any]] = [part.end() for part in parts]
    begin = _ZipCursor([part.begin() for part in parts])
    if all(isinstance(last, Unbounded) for last in lasts):
        return SequenceView(begin, UNBOUNDED)
    return SequenceView(begin, _ZipCursor(lasts))


def zip_longest(
    *iterables: Iterable[Any], fillvalue: object = None
) -> SequenceView[tuple[Any, ...]]:
    """Aggregate elements from each of **iterables** into tuples, filling in for the exhausted ones.

    Iteration continues until the longest iterable is exhausted. With no iterables, the result is empty.

    Args:
        *iterables (Iterable[Any]): The sequences to aggregate.
        fillvalue (object): Stands in for the elements of exhausted sequences. Defaults to `None`.

    Returns:
        SequenceView[tuple[Any, ...]]: A view of tuples, one element per input.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.zip_longest("ABCD", "xy", fillvalue="-").collect()
    [('A', 'x'), ('B', 'y'), ('C', '-'), ('D', '-')]
    >>> ia.zip_longest([1], [], [2, 3]).collect()
    [(1, None, 2), (None, None, 3)]

    ```
    """
    if not iterables:
        return empty()
    parts = [view(iterable) for iterable in iterables]
    lasts = tuple(part.end() for part in parts)
    begin = _ZipLongestCursor([part.begin() for part in parts], lasts, fillvalue)
    if any(isinstance(last, Unbounded) for last in lasts):
        return SequenceView(begin, UNBOUNDED)
    end = _ZipLongestCursor([last.copy() for last in lasts], lasts, fillvalue)  # type: ignore[union-attr]
    return SequenceView(begin, end)


def tee[T](data: Iterable[T], n: int = 2) -> tuple[SequenceView[T], ...]:
    """Return **n** independent views over **data**.

    Each view has its own cursors. Over a one-shot iterable they share one cache, which keeps every element read
    by the most advanced view until all views are dropped.

    Raises:
        InvalidConfigurationError: If **n** is negative.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> first, second = ia.tee(iter("abc"))
    >>> first.islice(1).collect(), second.collect()
    (['a'], ['a', 'b', 'c'])
    >>> ia.tee([1], 0)
    ()

    ```
    """
    if n < 0:
        msg = f"tee() n must be non-negative, got {n}"
        raise InvalidConfigurationError(msg)
    source = view(data)
    return tuple(SequenceView(source.begin(), source.end()) for _ in range(n))
