"""Callable adapters.

Small factories that wrap or synthesize callables:

- `bind`: pre-bind leading and/or trailing positional arguments.
- `memoize_no_args`: run a zero-argument callable once and cache its result.
- `constant`: a callable that always returns the same value.
- `identity`: a callable that returns its argument.
"""

import functools
import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def bind(
    fn: Callable[..., T],
    append: Iterable[Any] = (),
    prepend: Iterable[Any] = (),
) -> Callable[..., T]:
    """Wrap `fn` so that extra positional arguments surround each call.

    The wrapper calls ``fn(*prepend, *args, *append, **kwargs)``.

    Args:
        fn: Any callable (function, bound method, class, ``functools.partial``...).
        append: Arguments appended after the call arguments.
        prepend: Arguments inserted before the call arguments.

    Returns:
        Callable: The wrapper. With no bound arguments it forwards the call
        arguments unchanged.
    """
    append = tuple(append)
    prepend = tuple(prepend)

    if not append and not prepend:

        def forward(*args: Any, **kwargs: Any) -> T:
            return fn(*args, **kwargs)

        return forward

    def bound(*args: Any, **kwargs: Any) -> T:
        return fn(*prepend, *args, *append, **kwargs)

    return bound


_UNSET: Any = object()


def memoize_no_args(fn: Callable[[], T]) -> Callable[[], T]:
    """Wrap a zero-argument callable so it runs at most once.

    The first result is cached and returned on every later call, including
    falsy results such as ``0``, ``""`` or None. Concurrent first calls are
    serialized by a lock so `fn` is never invoked twice.

    Args:
        fn: The callable to memoize.

    Returns:
        Callable[[], T]: The caching wrapper.
    """
    lock = threading.Lock()
    result = _UNSET

    @functools.wraps(fn)
    def cached() -> T:
        nonlocal result
        if result is _UNSET:
            with lock:
                if result is _UNSET:
                    logger.debug("Computing memoized value of %r", fn)
                    result = fn()
        return result

    return cached


def constant(value: T) -> Callable[[], T]:
    """Return a callable that always returns `value`."""
    return lambda: value


def identity() -> Callable[[T], T]:
    """Return a callable that returns its single argument unmodified."""
    return lambda value: value
