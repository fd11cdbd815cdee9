"""Classes that give their instances access to registered functions.

    MathOps = mixin({"app.math": "m"}, container=container)
    StringOps = mixin({"app.strings": "s"}, container=container)

    class Report(MathOps, StringOps):
        def total(self, xs):
            return self.f("m.sum")(xs)

Each capability carries its own resolver; when several are inherited they are
tried in method resolution order.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, TYPE_CHECKING

from funpy.container.resolve import Resolve
from funpy.errors import KeyNotFoundError

if TYPE_CHECKING:
    from funpy.container import Container


class Mixin:
    """Base of every capability class built by `Mixin.build`."""

    __slots__ = ()
    _resolve: Optional[Resolve] = None

    @staticmethod
    def build(aliases: Iterable[Any] = (), container: Optional[Container] = None) -> type:
        resolve = Resolve.build(aliases=aliases, container=container)
        return type("Capability", (Mixin,), {"_resolve": resolve, "__slots__": ()})

    @classmethod
    def _resolvers(cls) -> Iterator[Resolve]:
        for klass in cls.__mro__:
            resolve = klass.__dict__.get("_resolve")
            if isinstance(resolve, Resolve):
                yield resolve

    def f(self, key: Any) -> Any:
        for resolve in self._resolvers():
            try:
                return resolve(key)
            except KeyNotFoundError as exc:
                if exc.key != str(key):
                    raise
        raise KeyNotFoundError(str(key))

