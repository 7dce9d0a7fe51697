"""Tests for SequenceView and the view() coercion."""

import pytest

import iteralgebra as ia

ADAPTED_VIEWS = (
    ia.view([1, 2, 3]),
    ia.view(iter([1, 2, 3])),
    ia.chain("ab", "cd"),
    ia.zip("abc", range(3)),
    ia.filter(None, [0, 1, 2]),
    ia.islice(range(10), 1, 8, 2),
    ia.product("ab", "xy"),
    ia.permutations("abc", 2),
    ia.combinations("abcd", 2),
    ia.combinations_with_replacement("ab", 2),
    ia.count(),
    ia.cycle("ab"),
)


@pytest.mark.parametrize("sequence", ADAPTED_VIEWS)
def test_begin_and_end_are_idempotent(sequence: ia.SequenceView[object]) -> None:
    """Test re-reading begin()/end() without advancing gives equal cursors."""
    assert sequence.begin().equals(sequence.begin())
    end, other_end = sequence.end(), sequence.end()
    if isinstance(end, ia.Unbounded):
        assert other_end is ia.UNBOUNDED
    else:
        assert end.equals(other_end)  # type: ignore[arg-type]


def test_views_are_restartable() -> None:
    """Test iterating a view twice yields the same elements."""
    squares = ia.view(x * x for x in range(5))
    assert squares.collect() == squares.collect() == [0, 1, 4, 9, 16]
    pairs = ia.zip(iter("abc"), iter([1, 2, 3]))
    assert list(pairs) == list(pairs)


def test_view_returns_views_unchanged() -> None:
    """Test coercing a SequenceView is the identity."""
    source = ia.view([1, 2])
    assert ia.view(source) is source


def test_view_reads_streams_lazily() -> None:
    """Test a one-shot iterable is only pulled as far as needed."""
    pulled: list[int] = []

    def numbers():  # noqa: ANN202
        for n in range(100):
            pulled.append(n)
            yield n

    assert ia.view(numbers()).islice(3).collect() == [0, 1, 2]
    assert len(pulled) <= 4  # noqa: PLR2004


def test_empty_and_unbounded_flags() -> None:
    """Test is_empty() and is_unbounded()."""
    assert ia.empty().is_empty()
    assert not ia.empty().is_unbounded()
    assert ia.count().is_unbounded()
    assert not ia.count().is_empty()
    assert ia.view(iter([])).is_empty()


def test_repr_truncates_unbounded_views() -> None:
    """Test the repr of an infinite view terminates."""
    assert repr(ia.count()).endswith(", ...)")
    assert repr(ia.view([1, 2])) == "SequenceView(1, 2)"
    assert repr(ia.empty()) == "SequenceView()"


def test_collect_into_and_inspect() -> None:
    """Test the pipeline helpers."""
    seen: list[object] = []
    total = ia.view(range(4)).inspect(seen.append).into(lambda v: v.collect(sum))
    assert total == 6  # noqa: PLR2004
    assert len(seen) == 1
    assert ia.view("abc").collect(tuple) == ("a", "b", "c")


def test_from_values() -> None:
    """Test SequenceView.from_ with an iterable and with loose values."""
    assert ia.SequenceView.from_([1, 2]).collect() == [1, 2]
    assert ia.SequenceView.from_(1, 2, 3).collect() == [1, 2, 3]


def test_fluent_methods_compose() -> None:
    """Test chaining adaptors through the view methods."""
    result = (
        ia.count(1)
        .filter(lambda x: x % 2)
        .takewhile(lambda x: x < 12)  # noqa: PLR2004
        .zip("abcdef")
        .starmap(lambda n, c: c * n)
        .collect()
    )
    assert result == ["a", "bbb", "ccccc", "ddddddd", "eeeeeeeee", "fffffffffff"]
