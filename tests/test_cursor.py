"""Tests for cursors, end markers and the driving helpers."""

import pytest

import iteralgebra as ia
from iteralgebra._cursor import advanced, reached, walk


def test_index_cursor_reads_and_advances() -> None:
    """Test an index cursor walks a sequence without copying it."""
    data = [10, 20, 30]
    cursor = ia.IndexCursor(data, 0)
    assert cursor.current() == 10  # noqa: PLR2004
    cursor.advance()
    assert cursor.current() == 20  # noqa: PLR2004


def test_index_cursor_equality_needs_same_backing_object() -> None:
    """Test cursors over equal but distinct sequences never compare equal."""
    assert ia.IndexCursor([1, 2], 0).equals(ia.IndexCursor([1, 2], 0)) is False
    data = [1, 2]
    assert ia.IndexCursor(data, 1).equals(ia.IndexCursor(data, 1))
    assert not ia.IndexCursor(data, 0).equals(ia.IndexCursor(data, 1))


def test_copy_is_independent() -> None:
    """Test advancing a copy leaves the original in place."""
    cursor = ia.view("abc").begin()
    fork = cursor.copy()
    fork.advance()
    assert cursor.current() == "a"
    assert fork.current() == "b"


def test_dereferencing_end_raises() -> None:
    """Test reading the end cursor of bounded views is a checked failure."""
    with pytest.raises(ia.CursorExhaustedError):
        ia.view([1]).end().current()  # type: ignore[union-attr]
    with pytest.raises(ia.CursorExhaustedError):
        ia.view(iter([1])).end().current()  # type: ignore[union-attr]


def test_stream_cursor_past_the_end_raises() -> None:
    """Test reading a stream beyond its last element raises."""
    cursor = ia.view(iter([1])).begin()
    cursor.advance()
    with pytest.raises(ia.CursorExhaustedError):
        cursor.current()


def test_unbounded_is_a_singleton() -> None:
    """Test every Unbounded instance is UNBOUNDED."""
    assert ia.Unbounded() is ia.UNBOUNDED
    assert repr(ia.UNBOUNDED) == "UNBOUNDED"


def test_unbounded_is_never_reached() -> None:
    """Test reached() is false whenever either side is UNBOUNDED."""
    cursor = ia.count().begin()
    assert reached(cursor, ia.UNBOUNDED) is False
    assert reached(ia.UNBOUNDED, cursor) is False
    assert reached(ia.UNBOUNDED, ia.UNBOUNDED) is False


def test_walk_does_not_move_begin() -> None:
    """Test the driving loop works on a copy of the begin cursor."""
    source = ia.view([1, 2, 3])
    begin = source.begin()
    assert list(walk(begin, source.end())) == [1, 2, 3]
    assert begin.current() == 1


def test_distance() -> None:
    """Test distance counts positions in one traversal."""
    for data in ([], [1], "abcde", iter(range(7))):
        source = ia.view(data)
        assert ia.distance(source.begin(), source.end()) == len(source.collect())


def test_distance_of_unbounded_raises() -> None:
    """Test measuring an infinite view is invalid."""
    with pytest.raises(ia.InvalidConfigurationError):
        ia.distance(ia.count().begin(), ia.UNBOUNDED)


def test_advanced_returns_a_moved_copy() -> None:
    """Test advanced() leaves its argument untouched."""
    cursor = ia.view("abcd").begin()
    moved = advanced(cursor, 2)
    assert moved.current() == "c"
    assert cursor.current() == "a"
