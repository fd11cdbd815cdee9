"""Function composition built on the curry engine."""

from __future__ import annotations

import functools
from typing import Any, Callable

from funpy.curry import CurriedFunction, curry


def _pipe(required: Callable[..., Any], *functions: Callable[..., Any]) -> Callable[..., Any]:
    first, rest = required, functions

    @functools.wraps(first)
    def piped(*args: Any) -> Any:
        result = first(*args)
        for fn in rest:
            result = fn(result)
        return result

    return piped


def _compose(required: Callable[..., Any], *functions: Callable[..., Any]) -> Callable[..., Any]:
    chain = (required, *functions)
    return _pipe(*reversed(chain))


def pipe(*functions: Callable[..., Any]) -> CurriedFunction | Any:
    """Left-to-right composition: pipe(f, g)(x) == g(f(x))."""
    return curry(_pipe)(*functions)


def compose(*functions: Callable[..., Any]) -> CurriedFunction | Any:
    """Right-to-left composition: compose(f, g)(x) == f(g(x))."""
    return curry(_compose)(*functions)
