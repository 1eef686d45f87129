from __future__ import annotations

import array
import collections
import collections.abc
import datetime
import re
import types
from decimal import Decimal
from fractions import Fraction
from typing import Any, Iterator, Tuple

# Immutable scalars; returned as-is by deep_clone and compared with == by deep_equal.
PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes, Decimal, Fraction)

# Code objects are shared by reference, never copied.
REFERENCE_TYPES = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)

DATE_TYPES = (datetime.date, datetime.time, datetime.timedelta)

NUMBER_TYPES = (int, float)

# Ordered containers compared item by item.
SEQUENCE_TYPES = (list, tuple, collections.deque, bytearray, array.array)

# Mutable sequences of scalars whose state lives in the constructor (typecode).
SCALAR_ARRAY_TYPES = (bytearray, array.array)

Pattern = re.Pattern


def is_atomic(value: Any) -> bool:
    """True for values that are never traversed: primitives and code objects."""
    return isinstance(value, PRIMITIVE_TYPES) or isinstance(value, REFERENCE_TYPES)


def pattern_source(pattern) -> str:
    """Canonical `/pattern/flags` form of a compiled regular expression."""
    return f"/{pattern.pattern}/{pattern.flags}"


def slot_names(cls: type) -> Iterator[str]:
    """Yield the `__slots__` declared anywhere in the class hierarchy."""
    seen = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ('__dict__', '__weakref__') or name in seen:
                continue
            seen.add(name)
            yield name


def own_attributes(obj: Any) -> Iterator[Tuple[str, Any]]:
    """Yield (name, value) for attributes stored on the instance itself.

    Covers the instance `__dict__` and any assigned `__slots__`; class-level
    attributes are not included.
    """
    for name, value in getattr(obj, '__dict__', {}).items():
        yield name, value
    for name in slot_names(type(obj)):
        try:
            value = object.__getattribute__(obj, name)
        except AttributeError:
            continue
        yield name, value


def is_opaque_collection(value: Any) -> bool:
    """True for collections whose items live in C-level storage.

    A collection that implements `__len__` in Python keeps its items in
    instance attributes, which the attribute walk reaches. One backed by a
    builtin (memoryview, range, a third-party C container, ...) does not, so
    walking its attributes alone would silently ignore its contents.
    """
    if not isinstance(value, collections.abc.Collection):
        return False
    return not isinstance(getattr(type(value), '__len__', None), types.FunctionType)
