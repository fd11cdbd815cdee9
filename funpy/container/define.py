"""Builder used inside definition blocks.

    def definitions(d):
        with d.namespace("app") as app:
            with app.namespace("math") as math:
                math.f("sum", lambda: curry(lambda x, y: x + y))
                math.f("inc", lambda: math.f("sum")(1))

    define(definitions, container=container)

Definitions are stored unevaluated, so one may refer to a key that is only
defined further down. Short references made through a builder are looked up
in the builder's namespace first, then in each enclosing namespace, then as a
full key.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from funpy.container import NAMESPACE_SEPARATOR, Container, Definition
from funpy.container.resolve import Resolve


class Define:
    __slots__ = ("container", "namespaces", "_resolve")

    def __init__(self, container: Container, namespaces: list[str]):
        self.container = container
        self.namespaces = namespaces
        # Every enclosing prefix; Resolve.build puts the innermost first
        prefixes = [
            NAMESPACE_SEPARATOR.join(namespaces[:i]) for i in range(1, len(namespaces) + 1)
        ]
        self._resolve = Resolve.build(aliases=prefixes, container=container)

    @classmethod
    def build(cls, container: Optional[Container] = None, namespaces: Iterable[Any] = ()) -> Define:
        if container is None:
            from funpy.runtime import get_runtime
            container = get_runtime().container
        if not isinstance(container, Container):
            raise TypeError(f"container should be an instance of {Container.__name__}")
        if isinstance(namespaces, str) or not isinstance(namespaces, (list, tuple)):
            raise TypeError("namespaces should be a list")
        return cls(container=container, namespaces=[str(ns) for ns in namespaces])

    @property
    def path(self) -> str:
        return NAMESPACE_SEPARATOR.join(self.namespaces)

    def __call__(self, block: Callable[[Define], Any]) -> Define:
        block(self)
        return self

    define = __call__

    def namespace(self, name: Any, block: Optional[Callable[[Define], Any]] = None) -> Define:
        nested = self.build(container=self.container, namespaces=[*self.namespaces, name])
        if block is not None:
            block(nested)
        return nested

    def function(self, name: Any, definition: Optional[Definition] = None) -> Any:
        """Register `definition` under this namespace, or look `name` up without one."""
        if definition is None:
            return self._resolve(name)
        self.container.define(self.key(name), definition)
        return definition

    f = function

    def register(self, name: Any) -> Callable[[Definition], Definition]:
        """Decorator form of `function`."""
        def decorator(definition: Definition) -> Definition:
            return self.function(name, definition)
        return decorator

    def key(self, name: Any) -> str:
        return NAMESPACE_SEPARATOR.join([*self.namespaces, str(name)])

    def __enter__(self) -> Define:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None

    def __repr__(self) -> str:
        return f"<Define {self.path or '<root>'}>"
