"""Tests for groupby and its stale group check."""

from collections.abc import Iterator

import pytest

import iteralgebra as ia


@pytest.fixture
def unchecked_groups() -> Iterator[None]:
    previous = ia.set_config(check_stale_groups=False)
    yield
    ia.set_config(check_stale_groups=previous.check_stale_groups)


def _runs(groups: ia.SequenceView[ia.Group]) -> list[tuple[object, list[object]]]:
    return [(key, values.collect()) for key, values in groups]


def test_groupby_keeps_runs_contiguous() -> None:
    """Test equal keys that are not adjacent form separate groups."""
    assert _runs(ia.groupby([1, 2, 2, 3, 3, 3, 2, 2, 1])) == [
        (1, [1]),
        (2, [2, 2]),
        (3, [3, 3, 3]),
        (2, [2, 2]),
        (1, [1]),
    ]


def test_groupby_with_key() -> None:
    """Test a key function decides the runs."""
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]
    assert _runs(ia.groupby(words, lambda w: w[0])) == [
        ("a", ["apple", "avocado"]),
        ("b", ["banana", "blueberry"]),
        ("c", ["cherry"]),
    ]


def test_groupby_on_empty_and_single_sources() -> None:
    """Test the degenerate inputs."""
    assert ia.groupby([]).collect() == []
    assert _runs(ia.groupby("x")) == [("x", ["x"])]


def test_groupby_on_stream() -> None:
    """Test grouping a one-shot iterable."""
    assert _runs(ia.groupby(iter("aabccc"))) == [
        ("a", ["a", "a"]),
        ("b", ["b"]),
        ("c", ["c", "c", "c"]),
    ]


def test_groupby_on_unbounded_source() -> None:
    """Test groups are produced lazily from an infinite view."""
    groups = ia.count().groupby(lambda x: x // 3)
    assert groups.is_unbounded()
    assert _runs(groups.islice(2)) == [(0, [0, 1, 2]), (1, [3, 4, 5])]


def test_group_repr() -> None:
    """Test a group renders as a key and its values."""
    group = next(iter(ia.groupby("aab")))
    assert repr(group) == "('a', SequenceView('a', 'a'))"


def test_group_can_be_read_repeatedly_before_advancing() -> None:
    """Test a group view is restartable while it is current."""
    for _, values in ia.groupby("aabb"):
        assert values.collect() == values.collect()


def test_stale_group_raises() -> None:
    """Test reading a group after the groupby cursor moved on fails loudly."""
    groups = ia.groupby("aabb").collect()
    with pytest.raises(ia.StaleGroupError):
        groups[0].values.collect()


@pytest.mark.usefixtures("unchecked_groups")
def test_stale_group_check_can_be_disabled() -> None:
    """Test the generation check is governed by the configuration."""
    groups = ia.groupby("aabb").collect()
    assert groups[0].values.collect() == ["a", "a"]


def test_groupby_view_repr() -> None:
    """Test a whole groupby view can be rendered, each group before the next is read."""
    assert repr(ia.groupby([1, 1, 2])) == "SequenceView((1, SequenceView(1, 1)), (2, SequenceView(2)))"
