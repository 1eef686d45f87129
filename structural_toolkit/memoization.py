"""Memoization keyed on the JSON form of a call's arguments.

Keys are `json.dumps([args, kwargs])`, so arguments that serialise the same
way share one cache entry: a tuple and a list with the same items collide, and
so do two distinct objects with equal JSON. Dict keys are turned into strings
the way JSON does it (`{1: "a"}` and `{"1": "a"}` share a key) and then
sorted, so key order does not matter. Arguments that JSON cannot encode
(functions, cyclic structures, arbitrary objects) make the key computation
raise; the error reaches the caller and nothing is cached.

The cache is never evicted; it lives as long as the wrapper does.
"""
from __future__ import annotations

import functools
import json
import logging
import threading
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)


def cache_key(args, kwargs) -> str:
    # First pass stringifies dict keys; sorting mixed key types directly fails.
    encoded = json.dumps([list(args), kwargs])
    return json.dumps(json.loads(encoded), sort_keys=True, separators=(',', ':'))


def memoize(func: Callable) -> Callable:
    """Wrap `func` so repeated calls with equal arguments reuse the first result."""
    name = getattr(func, '__qualname__', repr(func))
    cache: Dict[str, Any] = {}
    lock = threading.RLock()

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        key = cache_key(args, kwargs)
        with lock:
            if key in cache:
                logger.debug("memoize hit for %s%s", name, key)
                return cache[key]
            logger.debug("memoize miss for %s%s", name, key)
            result = func(*args, **kwargs)
            cache[key] = result
            return result

    def cache_clear() -> None:
        with lock:
            cache.clear()

    wrapper.cache = cache
    wrapper.cache_clear = cache_clear
    return wrapper
