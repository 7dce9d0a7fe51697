"""Combinatoric adaptors.

All four share one engine, `_Wheel`: an array of level cursors, turned like an odometer.
Advancing turns the rightmost level that can still move, then rewinds every level to its right.
The wheel is exhausted once level 0 reaches its last position.

Subclasses only decide how a level turns and how the levels to its right are rewound.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, Self, override

from .._core import CursorExhaustedError, InvalidConfigurationError
from .._cursor import UNBOUNDED, Cursor, End, Unbounded, advanced, distance, reached
from .._view import SequenceView, empty, view

logger = logging.getLogger(__name__)


class _Wheel(Cursor[tuple[Any, ...]]):
    __slots__ = ("_levels", "_firsts", "_lasts")

    def __init__(
        self,
        levels: list[Cursor[Any]],
        firsts: tuple[Cursor[Any], ...],
        lasts: tuple[End[Any], ...],
    ) -> None:
        self._levels = levels
        self._firsts = firsts
        self._lasts = lasts

    def _turn(self, depth: int) -> bool:
        """Move the level at **depth** forward, returning `False` if it ran out of positions."""
        level = self._levels[depth]
        level.advance()
        return not reached(level, self._lasts[depth])

    @abstractmethod
    def _rewind(self, start: int) -> None:
        """Reset the levels from **start** onwards to their first valid positions."""
        ...

    def _view(self) -> SequenceView[tuple[Any, ...]]:
        last = self._lasts[0]
        if isinstance(last, Unbounded):
            return SequenceView(self, UNBOUNDED)
        end = self.copy()
        end._levels[0] = last.copy()
        end._rewind(1)
        return SequenceView(self, end)

    @override
    def current(self) -> tuple[Any, ...]:
        if reached(self._levels[0], self._lasts[0]):
            msg = f"{self.__class__.__name__} cursor is exhausted"
            raise CursorExhaustedError(msg)
        return tuple(level.current() for level in self._levels)

    @override
    def advance(self) -> None:
        depth = len(self._levels) - 1
        while not self._turn(depth) and depth > 0:
            depth -= 1
        self._rewind(depth + 1)

    @override
    def equals(self, other: Self) -> bool:
        return all(
            reached(level, other_level)
            for level, other_level in zip(self._levels, other._levels, strict=True)
        )

    @override
    def copy(self) -> Self:
        return type(self)(
            [level.copy() for level in self._levels], self._firsts, self._lasts
        )


class _ProductWheel(_Wheel):
    """Each level walks its own sequence, restarting from its first element."""

    __slots__ = ()

    @override
    def _rewind(self, start: int) -> None:
        for depth in range(start, len(self._levels)):
            self._levels[depth] = self._firsts[depth].copy()


class _PermutationWheel(_Wheel):
    """Every level walks the same sequence, skipping the positions held by the levels to its left."""

    __slots__ = ()

    def _skip(self, depth: int) -> None:
        level, last = self._levels[depth], self._lasts[depth]
        while not reached(level, last) and any(
            level.equals(taken) for taken in self._levels[:depth]
        ):
            level.advance()

    @override
    def _turn(self, depth: int) -> bool:
        self._levels[depth].advance()
        self._skip(depth)
        return not reached(self._levels[depth], self._lasts[depth])

    @override
    def _rewind(self, start: int) -> None:
        for depth in range(start, len(self._levels)):
            self._levels[depth] = self._firsts[depth].copy()
            self._skip(depth)


class _CombinationWheel(_Wheel):
    """Levels hold strictly increasing positions; level i never passes position `L - r + i`."""

    __slots__ = ()

    @override
    def _rewind(self, start: int) -> None:
        for depth in range(start, len(self._levels)):
            self._levels[depth] = advanced(self._levels[depth - 1], 1)


class _ReplacementWheel(_Wheel):
    """Levels hold non-decreasing positions."""

    __slots__ = ()

    @override
    def _rewind(self, start: int) -> None:
        for depth in range(start, len(self._levels)):
            self._levels[depth] = self._levels[depth - 1].copy()


def _check_size(name: str, r: int) -> None:
    if r < 0:
        msg = f"{name}() r must be non-negative, got {r}"
        raise InvalidConfigurationError(msg)


def _single_empty_tuple() -> SequenceView[tuple[Any, ...]]:
    return view(((),))


def product(*iterables: Iterable[Any], repeat: int = 1) -> SequenceView[tuple[Any, ...]]:
    """Cartesian product of **iterables**, in lexicographic order of their positions.

    The rightmost element advances on every step, like an odometer.

    With no iterables (or `repeat=0`), the result holds a single empty tuple. If any iterable is empty, the result is empty.

    Only the first iterable may be unbounded: every other one is restarted each time the one to its left moves.

    Args:
        *iterables (Iterable[Any]): The sequences to combine.
        repeat (int): Number of times the whole list of **iterables** is repeated. Defaults to 1.

    Returns:
        SequenceView[tuple[Any, ...]]: A view of tuples, one element per input.

    Raises:
        InvalidConfigurationError: If **repeat** is negative.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.product("AB", "xy").collect()
    [('A', 'x'), ('A', 'y'), ('B', 'x'), ('B', 'y')]
    >>> ia.product(range(2), repeat=3).collect(len)
    8
    >>> ia.product().collect()
    [()]
    >>> ia.product("AB", []).collect()
    []
    >>> ia.product(ia.count(), "ab").islice(3).collect()
    [(0, 'a'), (0, 'b'), (1, 'a')]

    ```
    """
    if repeat < 0:
        msg = f"product() repeat must be non-negative, got {repeat}"
        raise InvalidConfigurationError(msg)
    sources = [view(iterable) for iterable in iterables] * repeat
    if not sources:
        return _single_empty_tuple()
    if any(source.is_empty() for source in sources):
        return empty()
    logger.debug("product of %d sequences", len(sources))
    firsts = tuple(source.begin() for source in sources)
    lasts = tuple(source.end() for source in sources)
    return _ProductWheel([first.copy() for first in firsts], firsts, lasts)._view()


def permutations[T](data: Iterable[T], r: int | None = None) -> SequenceView[tuple[T, ...]]:
    """Successive **r**-length arrangements of the elements of **data**.

    Elements are told apart by position, not by value: repeated values give repeated tuples.

    Tuples are emitted in lexicographic order of positions.

    If **r** is greater than the length of **data**, the result is empty.

    Args:
        data (Iterable[T]): A bounded sequence. Its length is measured when the view is built.
        r (int | None): Length of each arrangement. Defaults to the length of **data**.

    Returns:
        SequenceView[tuple[T, ...]]: A view of `L! / (L - r)!` tuples.

    Raises:
        InvalidConfigurationError: If **r** is negative, or **data** is unbounded.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.permutations("ABC", 2).collect()
    [('A', 'B'), ('A', 'C'), ('B', 'A'), ('B', 'C'), ('C', 'A'), ('C', 'B')]
    >>> ia.permutations(range(3)).collect(len)
    6
    >>> ia.permutations([1, 2], 3).collect()
    []

    ```
    """
    if r is not None:
        _check_size("permutations", r)
    source = view(data)
    first, last = source.begin(), source.end()
    length = distance(first, last)
    size = length if r is None else r
    logger.debug("permutations of %d elements taken %d at a time", length, size)
    if size > length:
        return empty()
    if size == 0:
        return _single_empty_tuple()
    wheel = _PermutationWheel([first.copy() for _ in range(size)], (first,) * size, (last,) * size)
    wheel._rewind(1)
    return wheel._view()


def combinations[T](data: Iterable[T], r: int) -> SequenceView[tuple[T, ...]]:
    """Successive **r**-length subsequences of **data**, keeping the order of its elements.

    If **r** is greater than the length of **data**, the result is empty.

    Raises:
        InvalidConfigurationError: If **r** is negative, or **data** is unbounded.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.combinations("ABCD", 2).collect()
    [('A', 'B'), ('A', 'C'), ('A', 'D'), ('B', 'C'), ('B', 'D'), ('C', 'D')]
    >>> ia.combinations(range(5), 5).collect()
    [(0, 1, 2, 3, 4)]
    >>> ia.combinations(range(2), 3).collect()
    []

    ```
    """
    _check_size("combinations", r)
    source = view(data)
    first = source.begin()
    length = distance(first, source.end())
    logger.debug("combinations of %d elements taken %d at a time", length, r)
    if r > length:
        return empty()
    if r == 0:
        return _single_empty_tuple()
    base_last = advanced(first, length - r + 1)
    lasts = tuple(advanced(base_last, depth) for depth in range(r))
    levels = [advanced(first, depth) for depth in range(r)]
    return _CombinationWheel(levels, (first,) * r, lasts)._view()


def combinations_with_replacement[T](data: Iterable[T], r: int) -> SequenceView[tuple[T, ...]]:
    """Successive **r**-length selections from **data**, allowing an element to be picked more than once.

    Positions within a tuple never decrease. An empty **data** gives an empty result, unless **r** is 0.

    Raises:
        InvalidConfigurationError: If **r** is negative.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.combinations_with_replacement("AB", 3).collect()
    [('A', 'A', 'A'), ('A', 'A', 'B'), ('A', 'B', 'B'), ('B', 'B', 'B')]
    >>> ia.combinations_with_replacement([], 2).collect()
    []
    >>> ia.combinations_with_replacement([], 0).collect()
    [()]

    ```
    """
    _check_size("combinations_with_replacement", r)
    if r == 0:
        return _single_empty_tuple()
    source = view(data)
    if source.is_empty():
        return empty()
    logger.debug("combinations with replacement taken %d at a time", r)
    first, last = source.begin(), source.end()
    levels = [first.copy() for _ in range(r)]
    return _ReplacementWheel(levels, (first,) * r, (last,) * r)._view()
