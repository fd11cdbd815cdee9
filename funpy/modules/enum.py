"""Curried helpers over any iterable.

The function comes first and the iterable last, so partially applied helpers
compose: pipe(select(is_even), map(square), reduce(add, 0)).
"""

from __future__ import annotations

import builtins
import functools
from typing import Any, Iterable

from funpy.operations import OperationTable
from funpy.types.placeholder import Placeholder as _

_ops = OperationTable("enum")


def _enum(iterable: Iterable[Any]) -> Iterable[Any]:
    return iter(iterable)


@_ops.implements("all")
def _all(function, iterable):
    return builtins.all(function(x) for x in _enum(iterable))


@_ops.implements("each")
def _each(function, iterable):
    items = list(iterable)
    for x in items:
        function(x)
    return items


@_ops.implements("map")
def _map(function, iterable):
    return [function(x) for x in _enum(iterable)]


@_ops.implements("select")
def _select(function, iterable):
    return [x for x in _enum(iterable) if function(x)]


@_ops.implements("reduce")
def _reduce(function, accumulator, iterable):
    return functools.reduce(function, _enum(iterable), accumulator)


@_ops.implements("count")
def _count(function, iterable):
    return sum(1 for x in _enum(iterable) if function(x))


@_ops.implements("max")
def _max(function, iterable):
    return builtins.max(_enum(iterable), key=function, default=None)


@_ops.implements("min")
def _min(iterable):
    return builtins.min(_enum(iterable), default=None)


def all(function=_, iterable=_):
    return _ops.curried("all", function, iterable)


def each(function=_, iterable=_):
    """Call `function` on every element and return the elements."""
    return _ops.curried("each", function, iterable)


def map(function=_, iterable=_):
    return _ops.curried("map", function, iterable)


def select(function=_, iterable=_):
    return _ops.curried("select", function, iterable)


def reduce(function=_, accumulator=_, iterable=_):
    return _ops.curried("reduce", function, accumulator, iterable)


def count(function=_, iterable=_):
    return _ops.curried("count", function, iterable)


def max(function=_, iterable=_):
    """Element with the largest `function(element)`."""
    return _ops.curried("max", function, iterable)


def min(iterable=_):
    return _ops.curried("min", iterable)
