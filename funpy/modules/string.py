from __future__ import annotations

from funpy.operations import OperationTable
from funpy.types.placeholder import Placeholder as _

_ops = OperationTable("string")


def _string(value) -> str:
    return str(value)


@_ops.implements("split")
def _split(splitter, string):
    return _string(string).split(splitter)


@_ops.implements("concat")
def _concat(first, second):
    return _string(first) + _string(second)


@_ops.implements("size")
def _size(string):
    return len(_string(string))


@_ops.implements("strip")
def _strip(string):
    return _string(string).strip()


@_ops.implements("capitalize")
def _capitalize(string):
    return _string(string).capitalize()


def split(splitter=_, string=_):
    return _ops.curried("split", splitter, string)


def concat(first=_, second=_):
    return _ops.curried("concat", first, second)


def size(string=_):
    return _ops.curried("size", string)


def strip(string=_):
    return _ops.curried("strip", string)


def capitalize(string=_):
    return _ops.curried("capitalize", string)
