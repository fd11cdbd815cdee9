"""Curried list helpers. Every argument defaults to the placeholder."""

from __future__ import annotations

import builtins
from typing import Any, Iterable

from funpy.operations import OperationTable
from funpy.types.placeholder import Placeholder as _

_ops = OperationTable("array")


def _array(array: Iterable[Any]) -> list[Any]:
    return list(array)


@_ops.implements("first")
def _first(array):
    items = _array(array)
    return items[0] if items else None


@_ops.implements("last")
def _last(array):
    items = _array(array)
    return items[-1] if items else None


@_ops.implements("join")
def _join(separator, array):
    return str(separator).join(str(x) for x in _array(array))


@_ops.implements("size")
def _size(array):
    return len(_array(array))


@_ops.implements("max")
def _max(array):
    return builtins.max(_array(array), default=None)


@_ops.implements("min")
def _min(array):
    return builtins.min(_array(array), default=None)


def first(array=_):
    """First element, or None for an empty list."""
    return _ops.curried("first", array)


def last(array=_):
    """Last element, or None for an empty list."""
    return _ops.curried("last", array)


def join(separator=_, array=_):
    """join("+", [1, 2, 3]) -> "1+2+3" """
    return _ops.curried("join", separator, array)


def size(array=_):
    return _ops.curried("size", array)


def max(array=_):
    return _ops.curried("max", array)


def min(array=_):
    return _ops.curried("min", array)
