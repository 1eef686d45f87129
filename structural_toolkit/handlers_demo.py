"""Gradio callbacks for the demo page.

Each handler runs one utility on a fixed sample input and returns the rendered
result for a code box.
"""
from __future__ import annotations

import datetime
import logging

from .casing import to_camel_case
from .cloning import deep_clone
from .config import Config
from .currying import curry
from .equality import deep_equal
from .flattening import flatten
from .memoization import memoize
from .query import parse_query
from .rendering import show_result
from .timing import debounce

logger = logging.getLogger(__name__)


def _announce_debounced():
    logger.info("Debounced!")


# Shared across clicks so rapid clicking collapses into one log line.
debounced_announce = debounce(_announce_debounced, Config.DEBOUNCE_DELAY_MS)


def deep_clone_handler():
    original = {'a': 1, 'b': {'c': 2}, 'd': datetime.datetime.now()}
    cloned = deep_clone(original)
    return show_result({
        'original': original,
        'cloned': cloned,
        'isSameReference': original['b'] is cloned['b'],
        'isDeepEqual': deep_equal(original, cloned),
    })


def debounce_handler():
    debounced_announce()
    return show_result(f"Check console after {Config.DEBOUNCE_DELAY_MS}ms delay!")


def flatten_handler():
    arr = [1, [2, [3, 4], 5]]
    return show_result({
        'original': arr,
        'flattened': flatten(arr),
    })


def deep_equal_handler():
    obj1 = {'a': 1, 'b': {'c': 2}}
    obj2 = {'a': 1, 'b': {'c': 2}}
    obj3 = {'a': 1, 'b': {'c': 3}}
    return show_result({
        'obj1 vs obj2': deep_equal(obj1, obj2),
        'obj1 vs obj3': deep_equal(obj1, obj3),
    })


def camel_case_handler(text: str = 'hello-world_test'):
    return show_result({
        'original': text,
        'camelCase': to_camel_case(text),
    })


def memoize_handler():
    memo_add = memoize(lambda a, b: a + b)
    first_call = memo_add(2, 3)
    second_call = memo_add(2, 3)
    return show_result({
        'firstCall': first_call,
        'secondCall': second_call,
        'isSame': first_call is second_call,
    })


def parse_query_handler(query: str = '?foo=1&bar=2&name=John%20Doe'):
    return show_result({
        'query': query,
        'parsed': parse_query(query),
    })


def curry_handler():
    curried_add = curry(lambda a, b, c: a + b + c)
    result = curried_add(1)(2)(3)
    return show_result({
        'curriedAdd(1)(2)(3)': result,
    })
