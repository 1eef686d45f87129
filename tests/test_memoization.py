""" Unit tests for memoize. """

import random
import threading

import pytest

from structural_toolkit.memoization import cache_key, memoize


def test_second_call_uses_cache() -> None:
    calls = []

    def add(a, b):
        calls.append((a, b))
        return [a + b]

    memo_add = memoize(add)
    first = memo_add(2, 3)
    second = memo_add(2, 3)
    assert first == [5]
    assert first is second
    assert calls == [(2, 3)]
    assert memo_add(3, 2) == [5]
    assert len(calls) == 2
    assert len(memo_add.cache) == 2


def test_non_deterministic_function_is_frozen() -> None:
    roll = memoize(lambda sides: random.random() * sides)
    assert roll(6) == roll(6)


def test_keys_are_structural() -> None:
    calls = []
    f = memoize(lambda *args, **kwargs: calls.append(1) or len(calls))
    assert f({"a": 1, "b": [1, 2]}) == 1
    assert f({"b": [1, 2], "a": 1}) == 1
    assert f(x=1, y=2) == 2
    assert f(y=2, x=1) == 2
    # Lists and tuples serialise the same way and therefore share an entry.
    assert f((1, 2)) == 3
    assert f([1, 2]) == 3


def test_unserialisable_arguments_raise() -> None:
    f = memoize(lambda value: value)
    with pytest.raises(TypeError):
        f(object())
    cyclic = []
    cyclic.append(cyclic)
    with pytest.raises(ValueError):
        f(cyclic)
    assert f.cache == {}


def test_errors_are_not_cached() -> None:
    attempts = []

    def flaky(x):
        attempts.append(x)
        if len(attempts) == 1:
            raise RuntimeError("first attempt fails")
        return x * 2

    f = memoize(flaky)
    with pytest.raises(RuntimeError):
        f(4)
    assert f(4) == 8
    assert f(4) == 8
    assert attempts == [4, 4]


def test_cache_clear_and_metadata() -> None:
    def double(x):
        """Double x."""
        return x * 2

    f = memoize(double)
    f(1)
    assert f.cache == {cache_key((1,), {}): 2}
    f.cache_clear()
    assert f.cache == {}
    assert f.__name__ == "double"
    assert f.__doc__ == "Double x."


def test_concurrent_callers_compute_once() -> None:
    calls = []
    gate = threading.Event()

    def slow(x):
        gate.wait(1)
        calls.append(x)
        return x

    f = memoize(slow)
    threads = [threading.Thread(target=f, args=(7,)) for _ in range(5)]
    for t in threads:
        t.start()
    gate.set()
    for t in threads:
        t.join()
    assert calls == [7]


def test_mixed_dict_key_types() -> None:
    calls = []

    def size(d):
        calls.append(d)
        return len(d)

    f = memoize(size)
    assert f({1: "a", "b": 2}) == 2
    assert f({"b": 2, 1: "a"}) == 2
    assert len(calls) == 1
    # JSON turns the int key into a string, so these share an entry.
    assert f({"1": "a", "b": 2}) == 2
    assert len(calls) == 1
    assert cache_key(({None: 1, 2.5: 2, True: 3},), {}) == '[[{"2.5":2,"null":1,"true":3}],{}]'
