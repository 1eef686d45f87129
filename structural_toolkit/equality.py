from __future__ import annotations

import array
import collections
from typing import Any

from .kinds import (
    DATE_TYPES,
    NUMBER_TYPES,
    SEQUENCE_TYPES,
    Pattern,
    is_atomic,
    is_opaque_collection,
    own_attributes,
    pattern_source,
)


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two values for deep value equality.

    Values are equal when they are the same object, or when they have the same
    concrete type and recursively equal own properties (list items, dict keys,
    instance attributes). Dates compare by instant and compiled patterns by
    their `/pattern/flags` form. Lists, tuples, deques (including `maxlen`),
    bytearrays and arrays compare item by item. Other objects compare by their
    declared fields only (instance `__dict__` and `__slots__`); a collection
    backed by C storage that none of these covers raises TypeError instead of
    reporting its contents equal.

    There is no cycle detection: comparing self-referencing structures raises
    RecursionError.

    >>> deep_equal({'a': 1, 'b': {'c': 2}}, {'a': 1, 'b': {'c': 2}})
    True
    >>> deep_equal({'a': 1, 'b': {'c': 2}}, {'a': 1, 'b': {'c': 3}})
    False
    """
    if a is b:
        return True

    if is_atomic(a) or is_atomic(b):
        return _atomic_equal(a, b)

    if type(a) is not type(b):
        return False

    if isinstance(a, DATE_TYPES):
        return a == b
    if isinstance(a, Pattern):
        return pattern_source(a) == pattern_source(b)

    if isinstance(a, SEQUENCE_TYPES):
        if isinstance(a, collections.deque) and a.maxlen != b.maxlen:
            return False
        if isinstance(a, array.array) and a.typecode != b.typecode:
            return False
        if len(a) != len(b):
            return False
        if not all(deep_equal(x, y) for x, y in zip(a, b)):
            return False
    elif isinstance(a, (set, frozenset)):
        if a != b:
            return False
    elif isinstance(a, dict):
        if not _same_keys(a, b):
            return False
        if not all(deep_equal(a[k], b[k]) for k in a):
            return False
    elif is_opaque_collection(a):
        raise TypeError(f"cannot compare the contents of {type(a).__name__!r} objects")

    attrs_a = dict(own_attributes(a))
    attrs_b = dict(own_attributes(b))
    if not _same_keys(attrs_a, attrs_b):
        return False
    return all(deep_equal(attrs_a[k], attrs_b[k]) for k in attrs_a)


def _atomic_equal(a, b) -> bool:
    if not (is_atomic(a) and is_atomic(b)):
        return False
    # One number kind, as in JSON; bool stays separate.
    if isinstance(a, NUMBER_TYPES) and isinstance(b, NUMBER_TYPES):
        if isinstance(a, bool) or isinstance(b, bool):
            return type(a) is type(b) and a == b
        return a == b
    return type(a) is type(b) and a == b


def _same_keys(a, b) -> bool:
    return len(a) == len(b) and all(k in b for k in a)
