"""Debouncing: collapse bursts of calls into one trailing call.

The wrapper keeps at most one pending invocation. Each call cancels it and
schedules a new one `delay_ms` later with that call's arguments, so `func`
runs once per burst, after the quiet period, with the last arguments.

By default invocations are scheduled with `threading.Timer`; exceptions raised
by `func` then surface through `threading.excepthook`, not to the caller.
"""
from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


def timer_scheduler(delay: float, callback: Callable[[], Any]):
    """Run `callback` after `delay` seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


def debounce(
    func: Callable,
    delay_ms: float,
    scheduler: Optional[Callable[[float, Callable[[], Any]], Any]] = None,
) -> Callable:
    """Wrap `func` so it runs `delay_ms` after the last call of a burst.

    `scheduler(delay_seconds, callback)` must return a handle with a
    `cancel()` method. The wrapper returns None; results of `func` are
    discarded.
    """
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be non-negative, got {delay_ms!r}")
    if scheduler is None:
        scheduler = timer_scheduler

    name = getattr(func, '__qualname__', repr(func))
    delay = delay_ms / 1000.0
    lock = threading.RLock()
    state = {'handle': None, 'generation': 0}

    def fire(generation, args, kwargs):
        with lock:
            # A newer call or cancel() superseded this invocation.
            if generation != state['generation']:
                return
            state['handle'] = None
        logger.debug("debounce firing %s", name)
        func(*args, **kwargs)

    def drop_pending():
        state['generation'] += 1
        handle = state['handle']
        state['handle'] = None
        if handle is not None:
            handle.cancel()
            logger.debug("debounce cancelled pending call of %s", name)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with lock:
            drop_pending()
            generation = state['generation']
            state['handle'] = scheduler(delay, lambda: fire(generation, args, kwargs))
        logger.debug("debounce scheduled %s in %sms", name, delay_ms)

    def cancel() -> None:
        with lock:
            drop_pending()

    def pending() -> bool:
        with lock:
            return state['handle'] is not None

    wrapper.cancel = cancel
    wrapper.pending = pending
    return wrapper
