"""Cursor protocol and backing cursors.

A cursor is an opaque position in a sequence supporting `current()`, `advance()`, `equals()` and `copy()`.

Every adaptor of the package is a cursor wrapping one or more upstream cursors, and every lazy sequence is a `SequenceView`
pairing a begin cursor with an end marker: either an end cursor, or `UNBOUNDED` for sequences that never end.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from typing import Final, Self, final, override

import more_itertools as mit

from ._core import CursorExhaustedError, InvalidConfigurationError


class Cursor[T](ABC):
    """A position within a sequence.

    Two cursors compare equal only if they derive from the same backing sequence, or for composite cursors,
    from structurally matching composite state.

    Cursors are advanced in place and exclusively owned by whoever holds them; use `copy()` to fork one.
    """

    __slots__ = ()

    @abstractmethod
    def current(self) -> T:
        """Return the element under the cursor.

        Raises:
            CursorExhaustedError: If the cursor sits at the end of its sequence.
        """
        ...

    @abstractmethod
    def advance(self) -> None:
        """Move the cursor one position forward."""
        ...

    @abstractmethod
    def equals(self, other: Self) -> bool:
        """Return `True` if both cursors denote the same position."""
        ...

    @abstractmethod
    def copy(self) -> Self:
        """Return an independent cursor at the same position."""
        ...


@final
class Unbounded:
    """End marker of sequences that never end.

    It is not a cursor: nothing ever reaches it, and it never compares equal to a cursor.
    """

    __slots__ = ()

    _instance: Unbounded | None = None

    def __new__(cls) -> Unbounded:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED: Final = Unbounded()

type End[T] = Cursor[T] | Unbounded
"""What a `SequenceView` ends with."""


def reached[T](cursor: End[T], end: End[T]) -> bool:
    """Return `True` if **cursor** and **end** are both cursors at the same position.

    `UNBOUNDED` is never reached.
    """
    if isinstance(cursor, Unbounded) or isinstance(end, Unbounded):
        return False
    return cursor.equals(end)


def copy_end[T](end: End[T]) -> End[T]:
    return end if isinstance(end, Unbounded) else end.copy()


def walk[T](begin: Cursor[T], end: End[T]) -> Iterator[T]:
    """Drive a copy of **begin** until it reaches **end**, yielding each element.

    This is the one driving loop of the package: read, then advance.
    """
    cursor = begin.copy()
    while not reached(cursor, end):
        yield cursor.current()
        cursor.advance()


def _steps[T](begin: Cursor[T], end: Cursor[T]) -> Iterator[None]:
    cursor = begin.copy()
    while not cursor.equals(end):
        yield None
        cursor.advance()


def distance[T](begin: Cursor[T], end: End[T]) -> int:
    """Count the positions between **begin** and **end** with a single forward traversal.

    Elements are not dereferenced, except where the backing sequence must be read to find its own end.

    Raises:
        InvalidConfigurationError: If **end** is `UNBOUNDED`.
    """
    if isinstance(end, Unbounded):
        msg = "cannot measure the length of an unbounded sequence"
        raise InvalidConfigurationError(msg)
    return mit.ilen(_steps(begin, end))


def advanced[T](cursor: Cursor[T], n: int) -> Cursor[T]:
    """Return a copy of **cursor** moved **n** positions forward."""
    moved = cursor.copy()
    for _ in range(n):
        moved.advance()
    return moved


class IndexCursor[T](Cursor[T]):
    """Cursor over a `Sequence`, by index.

    The end cursor is taken at `len(data)` when the view is built: mutating the sequence afterwards is not supported.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: Sequence[T], pos: int) -> None:
        self._data = data
        self._pos = pos

    @override
    def current(self) -> T:
        if self._pos >= len(self._data):
            msg = f"cursor at index {self._pos} is past the end of a sequence of {len(self._data)} elements"
            raise CursorExhaustedError(msg)
        return self._data[self._pos]

    @override
    def advance(self) -> None:
        self._pos += 1

    @override
    def equals(self, other: IndexCursor[T]) -> bool:
        return self._data is other._data and self._pos == other._pos

    @override
    def copy(self) -> IndexCursor[T]:
        return IndexCursor(self._data, self._pos)

    def __repr__(self) -> str:
        return f"IndexCursor({self._pos})"


_MISSING: Final = object()


class StreamSource[T]:
    """Shared, lazily filled cache over an arbitrary iterable.

    Elements are pulled from the iterable only when a cursor first needs them, then kept so that
    several cursors (and restarted views) can traverse the same one-shot data.
    """

    __slots__ = ("_seekable",)

    def __init__(self, data: Iterable[T]) -> None:
        self._seekable = mit.seekable(data)

    def has(self, pos: int) -> bool:
        self._seekable.seek(pos)
        return self._seekable.peek(_MISSING) is not _MISSING

    def get(self, pos: int) -> T:
        self._seekable.seek(pos)
        item = next(self._seekable, _MISSING)
        if item is _MISSING:
            msg = f"cursor at index {pos} is past the end of the stream"
            raise CursorExhaustedError(msg)
        return item  # type: ignore[return-value]


class StreamCursor[T](Cursor[T]):
    """Cursor over a `StreamSource`.

    The end cursor has no index: a cursor equals it once no element exists at the cursor's index.
    """

    __slots__ = ("_source", "_pos")

    def __init__(self, source: StreamSource[T], pos: int | None) -> None:
        self._source = source
        self._pos = pos

    @override
    def current(self) -> T:
        if self._pos is None:
            msg = "the end cursor of a stream cannot be dereferenced"
            raise CursorExhaustedError(msg)
        return self._source.get(self._pos)

    @override
    def advance(self) -> None:
        if self._pos is None:
            msg = "the end cursor of a stream cannot be advanced"
            raise CursorExhaustedError(msg)
        self._pos += 1

    @override
    def equals(self, other: StreamCursor[T]) -> bool:
        if self._source is not other._source:
            return False
        match (self._pos, other._pos):
            case (None, None):
                return True
            case (None, int() as pos) | (int() as pos, None):
                return not self._source.has(pos)
            case _:
                return self._pos == other._pos

    @override
    def copy(self) -> StreamCursor[T]:
        return StreamCursor(self._source, self._pos)

    def __repr__(self) -> str:
        return f"StreamCursor({'end' if self._pos is None else self._pos})"


def bounds[T](data: Iterable[T]) -> tuple[Cursor[T], End[T]]:
    """Build the begin and end cursors of a backing sequence.

    Sequences are traversed by index, without copying. Any other iterable goes through a `StreamSource`.
    """
    match data:
        case Sequence():
            return IndexCursor(data, 0), IndexCursor(data, len(data))
        case _:
            source = StreamSource(data)
            return StreamCursor(source, 0), StreamCursor(source, None)
