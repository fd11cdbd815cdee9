from __future__ import annotations

from pathlib import Path

from funpy.operations import OperationTable
from funpy.types.placeholder import Placeholder as _

_ops = OperationTable("file")


@_ops.implements("write")
def _write(filepath, content):
    return Path(filepath).write_text(content, encoding='utf-8')


def write(filepath=_, content=_):
    """Write `content` to `filepath`, returning the number of characters written."""
    return _ops.curried("write", filepath, content)
