""" Unit tests for flatten. """

from structural_toolkit.flattening import flatten


def test_flatten() -> None:
    assert flatten([1, [2, [3, 4], 5]]) == [1, 2, 3, 4, 5]
    assert flatten([]) == []
    assert flatten([[], [[]], 1, [[], 2]]) == [1, 2]
    assert flatten([(1, 2), [3, (4, [5])]]) == [1, 2, 3, 4, 5]


def test_non_sequences_are_elements() -> None:
    assert flatten(["ab", [b"cd", {"k": [1]}], None]) == ["ab", b"cd", {"k": [1]}, None]


def test_returns_new_list() -> None:
    flat = [1, 2, 3]
    result = flatten(flat)
    assert result == flat
    assert result is not flat
