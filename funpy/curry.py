"""Curried functions with placeholder support.

A curried function collects positional arguments over any number of calls and
invokes the wrapped function once every slot up to its arity holds a value.
The placeholder `_` reserves a slot to be filled by a later call:

    build = curry(lambda a, b, c: [a, b, c])
    build(1, 2, 3)           # [1, 2, 3]
    build(1)(2)(3)           # [1, 2, 3]
    build(_, 2)(_, 3)(1)     # [1, 2, 3]
    build(_, _, 3)(_, 2)(1)  # [1, 2, 3]
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable

from funpy.errors import ArityError
from funpy.types.placeholder import Placeholder

Slots = tuple[Any, ...]


def signature_arity(fn: Callable[..., Any]) -> tuple[int, bool]:
    """Return (required positional count, accepts *args) for `fn`.

    Callables without an introspectable signature are treated as variadic
    with no required arguments.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return 0, True
    arity = 0
    variadic = False
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
        elif param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            if param.default is inspect.Parameter.empty:
                arity += 1
            else:
                # Defaulted positionals can still be filled, but are not required
                variadic = True
    return arity, variadic


def merge_arguments(slots: Slots, new_args: Iterable[Any]) -> Slots:
    """Merge `new_args` into `slots`, returning a new tuple.

    Each new argument takes the first placeholder slot at or after the cursor;
    a placeholder argument keeps that slot reserved. Arguments with no open
    slot left are appended.
    """
    merged = list(slots)
    cursor = 0
    for arg in new_args:
        index = _next_open_slot(merged, cursor)
        if index is None:
            merged.append(arg)
            cursor = len(merged)
        else:
            merged[index] = arg
            cursor = index + 1
    return tuple(merged)


def _next_open_slot(slots: list[Any], start: int) -> int | None:
    for i in range(start, len(slots)):
        if slots[i] is Placeholder:
            return i
    return None


class CurriedFunction:
    """A function together with the argument slots bound so far."""

    __slots__ = ("function", "arity", "variadic", "slots")

    def __init__(self, function: Callable[..., Any], arity: int, variadic: bool, slots: Slots = ()):
        self.function = function
        self.arity = arity
        self.variadic = variadic
        self.slots: Slots = slots

    @property
    def pending(self) -> bool:
        """True while a placeholder is bound or required slots are missing."""
        return len(self.slots) < self.arity or any(s is Placeholder for s in self.slots)

    def __call__(self, *args: Any) -> Any:
        slots = merge_arguments(self.slots, args)
        if not self.variadic and len(slots) > self.arity:
            raise ArityError(
                f"{_name(self.function)} takes {self.arity} argument(s), got {len(slots)}"
            )
        curried = CurriedFunction(self.function, self.arity, self.variadic, slots)
        if curried.pending:
            return curried
        return _wrap_result(self.function(*slots))

    def __repr__(self) -> str:
        bound = ", ".join(repr(s) for s in self.slots)
        return f"<curried {_name(self.function)}({bound})>"


def curry(fn: Callable[..., Any], arity: int | None = None) -> CurriedFunction:
    """Wrap `fn` so it can be applied partially and with placeholders."""
    if isinstance(fn, CurriedFunction):
        return fn
    if not callable(fn):
        raise TypeError(f"Cannot curry non-callable {fn!r}")
    declared, variadic = signature_arity(fn)
    if arity is not None:
        declared, variadic = arity, False
    return CurriedFunction(fn, declared, variadic)


def _wrap_result(result: Any) -> Any:
    # Functions returning functions stay curryable (compose, pipe, ...)
    if callable(result) and not isinstance(result, type):
        return curry(result)
    return result


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)
