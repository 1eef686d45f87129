from __future__ import annotations

import collections
import copy
import re
from typing import Any, Dict, Optional

from .kinds import DATE_TYPES, SCALAR_ARRAY_TYPES, Pattern, is_atomic, is_opaque_collection, own_attributes


def deep_clone(value: Any, seen: Optional[Dict[int, Any]] = None) -> Any:
    """Recursively copy `value`, preserving cycles and shared references.

    `seen` maps `id(original)` to its clone for the duration of one top-level
    call. Containers are registered before their children are visited, so a
    structure that refers to itself clones to a structure that refers to the
    clone.

    Supported kinds are lists, tuples, dicts, sets, deques, bytearrays,
    arrays, dates, compiled patterns and objects whose state is in their
    instance `__dict__` or `__slots__`. For any other object only those
    declared fields are copied; class-level attributes stay on the class.
    A collection backed by C storage that none of these covers raises
    TypeError rather than coming back empty.

    >>> o = {'a': [1, 2]}
    >>> o['self'] = o
    >>> c = deep_clone(o)
    >>> c['self'] is c, c['a'] is o['a']
    (True, False)
    """
    if is_atomic(value):
        return value

    if seen is None:
        seen = {}
    key = id(value)
    if key in seen:
        return seen[key]

    if isinstance(value, DATE_TYPES):
        # copy.copy rebuilds through __reduce__, giving a new object for the same instant.
        clone = copy.copy(value)
        seen[key] = clone
        return clone

    if isinstance(value, Pattern):
        clone = re.compile(value.pattern, value.flags)
        seen[key] = clone
        return clone

    if isinstance(value, (tuple, frozenset)):
        return _clone_immutable(value, seen)

    cls = type(value)
    if isinstance(value, SCALAR_ARRAY_TYPES):
        # Items are plain numbers; copy.copy keeps the typecode.
        clone = copy.copy(value)
    elif isinstance(value, (list, dict, set, collections.deque)):
        clone = cls.__new__(cls)
    elif is_opaque_collection(value):
        raise TypeError(f"cannot clone the contents of {cls.__name__!r} objects")
    else:
        clone = cls.__new__(cls)
    seen[key] = clone

    if isinstance(value, list):
        list.extend(clone, (deep_clone(item, seen) for item in value))
    elif isinstance(value, dict):
        if isinstance(value, collections.defaultdict):
            clone.default_factory = value.default_factory
        for k, v in value.items():
            clone[k] = deep_clone(v, seen)
    elif isinstance(value, set):
        set.update(clone, (deep_clone(item, seen) for item in value))
    elif isinstance(value, collections.deque):
        collections.deque.__init__(clone, (), value.maxlen)
        collections.deque.extend(clone, (deep_clone(item, seen) for item in value))

    for name, attr in own_attributes(value):
        object.__setattr__(clone, name, deep_clone(attr, seen))

    return clone


def _clone_immutable(value, seen: Dict[int, Any]):
    key = id(value)
    items = [deep_clone(item, seen) for item in value]
    if key in seen:
        # A child reached this container again through a mutable link.
        return seen[key]

    cls = type(value)
    if cls in (tuple, frozenset):
        clone = cls(items)
    elif hasattr(value, '_fields'):
        clone = cls(*items)
    else:
        clone = cls(items)
    seen[key] = clone
    for name, attr in own_attributes(value):
        object.__setattr__(clone, name, deep_clone(attr, seen))
    return clone
