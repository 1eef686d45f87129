from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)


def required_arity(func: Callable) -> int:
    """Count the positional parameters that must be supplied to `func`.

    Counting stops at the first parameter with a default or at `*args`.
    """
    count = 0
    for param in inspect.signature(func).parameters.values():
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            break
        if param.default is not param.empty:
            break
        count += 1
    return count


class Curried:
    """A partial application of `func` holding the arguments supplied so far.

    Instances are immutable: calling one never changes it, so a partial can be
    completed several times with different remaining arguments.
    """

    __slots__ = ('func', 'arity', 'args')

    def __init__(self, func: Callable, arity: int, args: Tuple[Any, ...] = ()):
        object.__setattr__(self, 'func', func)
        object.__setattr__(self, 'arity', arity)
        object.__setattr__(self, 'args', tuple(args))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __call__(self, *more_args, **kwargs):
        if kwargs:
            raise TypeError("curried functions accept positional arguments only")
        args = self.args + more_args
        if len(args) >= self.arity:
            logger.debug("curry completing %r with %d args", self.func, len(args))
            return self.func(*args)
        return Curried(self.func, self.arity, args)

    @property
    def remaining(self) -> int:
        return max(0, self.arity - len(self.args))

    def __repr__(self) -> str:
        return f"Curried({self.func!r}, arity={self.arity}, args={self.args!r})"


def curry(func: Callable, arity: Optional[int] = None) -> Curried:
    """Allow `func` to be called with its arguments spread over several calls.

    >>> add = curry(lambda a, b, c: a + b + c)
    >>> add(1)(2)(3), add(1, 2)(3)
    (6, 6)
    """
    if arity is None:
        arity = required_arity(func)
    elif arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity!r}")
    return Curried(func, arity)
