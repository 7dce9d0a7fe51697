"""Tests for product, permutations and the two combinations adaptors."""

import itertools
import logging
import math

import pytest

import iteralgebra as ia

SIZES = range(6)


@pytest.mark.parametrize("r", SIZES)
def test_permutations_match_itertools(r: int) -> None:
    """Test order and content of permutations, over a sequence and a stream."""
    expected = list(itertools.permutations("abcd", r))
    assert ia.permutations("abcd", r).collect() == expected
    assert ia.permutations(iter("abcd"), r).collect() == expected


@pytest.mark.parametrize("r", SIZES)
def test_combinations_match_itertools(r: int) -> None:
    """Test order and content of combinations, over a sequence and a stream."""
    expected = list(itertools.combinations("abcd", r))
    assert ia.combinations("abcd", r).collect() == expected
    assert ia.combinations(iter("abcd"), r).collect() == expected


@pytest.mark.parametrize("r", SIZES)
def test_combinations_with_replacement_match_itertools(r: int) -> None:
    """Test order and content of combinations with replacement."""
    expected = list(itertools.combinations_with_replacement("abc", r))
    assert ia.combinations_with_replacement("abc", r).collect() == expected
    assert ia.combinations_with_replacement(iter("abc"), r).collect() == expected


def test_counts() -> None:
    """Test the number of tuples for every source length and selection size."""
    for length, r in itertools.product(range(6), repeat=2):
        data = range(length)
        assert len(ia.permutations(data, r).collect()) == math.perm(length, r)
        assert len(ia.combinations(data, r).collect()) == math.comb(length, r)
        expected = math.comb(length + r - 1, r) if length else int(r == 0)
        assert len(ia.combinations_with_replacement(data, r).collect()) == expected


def test_selections_are_ordered_by_position() -> None:
    """Test index selections are strictly increasing, or non-decreasing with replacement."""
    for combo in ia.combinations(range(6), 3):
        assert list(combo) == sorted(set(combo))
    for combo in ia.combinations_with_replacement(range(4), 3):
        assert list(combo) == sorted(combo)
    for arrangement in ia.permutations(range(5), 3):
        assert len(set(arrangement)) == 3  # noqa: PLR2004


def test_permutations_tell_elements_apart_by_position() -> None:
    """Test repeated values give repeated tuples."""
    assert ia.permutations([1, 1]).collect() == [(1, 1), (1, 1)]


def test_permutations_larger_than_source_are_empty() -> None:
    """Test r greater than the source length yields nothing."""
    assert ia.permutations("ab", 3).is_empty()
    assert ia.combinations("ab", 3).is_empty()


def test_zero_size_selections_yield_one_empty_tuple() -> None:
    """Test r == 0, including over an empty source."""
    assert ia.permutations([], 0).collect() == [()]
    assert ia.permutations([]).collect() == [()]
    assert ia.combinations([], 0).collect() == [()]
    assert ia.combinations_with_replacement([], 0).collect() == [()]


def test_combinations_with_replacement_on_empty_source() -> None:
    """Test an empty source with r > 0 gives an empty result."""
    assert ia.combinations_with_replacement([], 3).collect() == []


def test_combinations_with_replacement_on_unbounded_source() -> None:
    """Test the last level runs forever over an infinite source."""
    pairs = ia.combinations_with_replacement(ia.count(), 2)
    assert pairs.is_unbounded()
    assert pairs.islice(3).collect() == [(0, 0), (0, 1), (0, 2)]


@pytest.mark.parametrize(
    "build",
    [
        lambda: ia.permutations("abc", -1),
        lambda: ia.combinations("abc", -1),
        lambda: ia.combinations_with_replacement("abc", -1),
        lambda: ia.product("abc", repeat=-1),
        lambda: ia.permutations(ia.count(), 2),
        lambda: ia.combinations(ia.count(), 2),
    ],
)
def test_invalid_configurations_raise(build) -> None:  # noqa: ANN001
    """Test negative sizes and unmeasurable sources fail at construction."""
    with pytest.raises(ia.InvalidConfigurationError):
        build()


def test_product_matches_itertools() -> None:
    """Test product order, with the last input varying fastest."""
    inputs = ("ab", range(3), "xy")
    assert ia.product(*inputs).collect() == list(itertools.product(*inputs))
    assert len(ia.product(*inputs).collect()) == 2 * 3 * 2
    assert ia.product("ab", iter([0, 1])).collect() == list(
        itertools.product("ab", [0, 1])
    )


def test_product_repeat() -> None:
    """Test repeating the list of inputs."""
    assert ia.product("ab", range(2), repeat=2).collect() == list(
        itertools.product("ab", range(2), repeat=2)
    )
    assert ia.product("ab", repeat=0).collect() == [()]


def test_product_edge_cases() -> None:
    """Test product with no inputs, and with an empty input."""
    assert ia.product().collect() == [()]
    assert ia.product("ab", [], "cd").collect() == []
    assert ia.product([]).is_empty()


def test_product_with_unbounded_first_input() -> None:
    """Test the outermost input may be infinite."""
    grid = ia.product(ia.count(), "ab")
    assert grid.is_unbounded()
    assert grid.islice(5).collect() == [(0, "a"), (0, "b"), (1, "a"), (1, "b"), (2, "a")]


def test_composition_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test the engine reports the measured length at debug level."""
    with caplog.at_level(logging.DEBUG, logger="iteralgebra"):
        ia.combinations("abc", 2)
    assert "combinations of 3 elements taken 2 at a time" in caplog.text


def test_wheel_subclass_must_define_rewind() -> None:
    """Test a wheel without a rewind rule cannot be instantiated."""
    from iteralgebra._adaptors._combinatorics import _Wheel

    class _NoRewind(_Wheel):
        __slots__ = ()

    with pytest.raises(TypeError):
        _NoRewind([], (), ())  # type: ignore[abstract]
