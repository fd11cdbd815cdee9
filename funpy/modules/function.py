from __future__ import annotations

from funpy.curry import curry as _curry
from funpy.function import _compose, _pipe
from funpy.operations import OperationTable
from funpy.types.placeholder import Placeholder as _

_ops = OperationTable("function")
_ops.implements("compose")(_compose)
_ops.implements("pipe")(_pipe)
_ops.implements("curry")(_curry)


def compose(*functions):
    return _ops.curried("compose", *functions)


def pipe(*functions):
    return _ops.curried("pipe", *functions)


def curry(function=_):
    return _ops.curried("curry", function)
