"""Custom decorators for Operable.

This module provides decorator utilities for the library:
    - @memoize: Cache capability factories by their bound arguments

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Memoize a capability factory on its normalized arguments.

    Arguments are bound against the factory's signature with defaults
    applied, so ``addable()``, ``addable(None)`` and ``addable(operand=None)``
    share one cache entry. Every capability mixin is therefore created once
    per parameter set, which lets the same capability reached through two
    composition paths collapse to a single base class.

    Note: Calls with unhashable arguments bypass the cache.

    Args:
        func: The factory to memoize.

    Returns:
        A memoized version of the factory.

    Examples:
        >>> @memoize
        ... def pair(left, right=None):
        ...     return object()
        >>> pair(1) is pair(1, None) is pair(left=1)
        True
    """
    signature = inspect.signature(func)
    cache: dict[tuple, T] = {}

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        bound = signature.bind(*args, **kwargs)
        bound.apply_defaults()
        key = tuple(bound.arguments.items())
        try:
            hash(key)
        except TypeError:
            # Let the factory's own validation report the argument
            return func(*args, **kwargs)
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "memoize",
]
