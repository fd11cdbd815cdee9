"""Tables mapping operation names to their implementations.

Catalogue modules fill a table at import time and route every public function
through it:

    _ops = OperationTable("array")

    @_ops.implements("first")
    def _first(array):
        ...

    def first(array=_):
        return _ops.curried("first", array)
"""

from __future__ import annotations

from typing import Any, Callable

from funpy.curry import curry
from funpy.errors import UnknownOperationError


class OperationTable:
    __slots__ = ("name", "_implementations")

    def __init__(self, name: str):
        self.name = name
        self._implementations: dict[str, Callable[..., Any]] = {}

    def implements(self, op: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def register(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._implementations[op] = fn
            return fn
        return register

    def implementation(self, op: str) -> Callable[..., Any]:
        try:
            return self._implementations[op]
        except KeyError:
            raise UnknownOperationError(f"{self.name} has no operation {op!r}") from None

    def curried(self, op: str, *args: Any) -> Any:
        return curry(self.implementation(op))(*args)

    def names(self) -> list[str]:
        return list(self._implementations)

    def __contains__(self, op: object) -> bool:
        return op in self._implementations

    def __repr__(self) -> str:
        return f"<OperationTable {self.name}: {', '.join(self._implementations)}>"
