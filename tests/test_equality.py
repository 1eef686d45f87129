""" Unit tests for deep_equal. """

import array
import datetime
import re
from collections import deque

import pytest

from structural_toolkit.equality import deep_equal


class Box:
    def __init__(self, value):
        self.value = value


class OtherBox:
    def __init__(self, value):
        self.value = value


def test_nested_records() -> None:
    assert deep_equal({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 2}})
    assert not deep_equal({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}})
    # Key order does not matter, key membership does.
    assert deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert not deep_equal({"a": 1}, {"a": 1, "b": 2})
    assert not deep_equal({"a": 1, "b": 2}, {"a": 1, "c": 2})


def test_primitives() -> None:
    assert deep_equal(1, 1)
    assert deep_equal(1, 1.0)
    assert deep_equal("x", "x")
    assert deep_equal(None, None)
    assert not deep_equal(1, "1")
    assert not deep_equal(True, 1)
    assert not deep_equal(None, {})
    assert not deep_equal(float("nan"), float("nan"))


def test_sequences() -> None:
    assert deep_equal([1, [2, 3]], [1, [2, 3]])
    assert not deep_equal([1, 2], [2, 1])
    assert not deep_equal([1, 2], [1, 2, 3])
    assert not deep_equal([1, 2], (1, 2))
    assert deep_equal({1, 2}, {2, 1})


def test_dates_and_patterns() -> None:
    t = datetime.datetime(2024, 5, 1, 12, 0)
    assert deep_equal(t, datetime.datetime(2024, 5, 1, 12, 0))
    assert not deep_equal(t, datetime.datetime(2024, 5, 1, 12, 1))
    assert deep_equal(re.compile("a.b", re.I), re.compile("a.b", re.I))
    assert not deep_equal(re.compile("a.b", re.I), re.compile("a.b"))
    assert not deep_equal(re.compile("a.b"), re.compile("a.c"))


def test_objects_compare_by_type_and_attributes() -> None:
    assert deep_equal(Box([1]), Box([1]))
    assert not deep_equal(Box([1]), Box([2]))
    # Same shape, different class.
    assert not deep_equal(Box(1), OtherBox(1))
    assert not deep_equal(Box(1), {"value": 1})


def test_same_reference_short_circuits() -> None:
    o = {}
    o["self"] = o
    assert deep_equal(o, o)


def test_cycles_are_not_supported() -> None:
    a = {}
    a["self"] = a
    b = {}
    b["self"] = b
    with pytest.raises(RecursionError):
        deep_equal(a, b)


def test_deques_and_arrays_compare_items() -> None:
    assert deep_equal(deque([1, [2]]), deque([1, [2]]))
    assert not deep_equal(deque([1]), deque([2]))
    assert not deep_equal(deque([1]), deque([1, 2]))
    assert not deep_equal(deque([1], maxlen=3), deque([1]))
    assert deep_equal(bytearray(b"ab"), bytearray(b"ab"))
    assert not deep_equal(bytearray(b"ab"), bytearray(b"ac"))
    assert deep_equal(array.array("i", [1, 2]), array.array("i", [1, 2]))
    assert not deep_equal(array.array("i", [1, 2]), array.array("i", [1, 3]))
    assert not deep_equal(array.array("i", [1]), array.array("l", [1]))


def test_opaque_collections_raise() -> None:
    with pytest.raises(TypeError):
        deep_equal(range(3), range(4))
