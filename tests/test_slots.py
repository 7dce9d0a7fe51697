"""Tests for slot usage in iteralgebra classes."""

import iteralgebra as ia


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ia.view([1]))
    assert _check_slots(ia.view([1]).begin())
    assert _check_slots(ia.view(iter([1])).begin())
    assert _check_slots(ia.UNBOUNDED)
    assert _check_slots(ia.NO_INITIAL)
    assert _check_slots(ia.get_config())
    for sequence in (
        ia.count(),
        ia.repeat(1, 2),
        ia.cycle([1]),
        ia.filter(None, [1]),
        ia.takewhile(bool, [1]),
        ia.compress([1], [1]),
        ia.islice([1], 1),
        ia.starmap(pow, [(1, 1)]),
        ia.accumulate([1]),
        ia.chain([1]),
        ia.zip([1]),
        ia.zip_longest([1]),
        ia.product([1], [2]),
        ia.permutations([1, 2]),
        ia.combinations([1, 2], 1),
        ia.combinations_with_replacement([1], 2),
        ia.groupby([1]),
    ):
        assert _check_slots(sequence.begin())
