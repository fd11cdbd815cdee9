"""Class level definitions.

    class Geometry(DSL):
        pass

    Geometry.f("area", lambda: lambda w, h: w * h)
    Geometry["area"](2, 3)  # 6

Every DSL subclass owns a container that allows overrides, so redefining a
function on the class replaces the old one.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from funpy.config import ContainerConfig
from funpy.container import Container, Definition
from funpy.container.define import Define
from funpy.container.resolve import Resolve


class _ResolveOnClass(type):
    def __getitem__(cls, key: Any) -> Any:
        return cls.resolve(key)


class DSL(metaclass=_ResolveOnClass):
    _fun_container: Container
    _fun_define: Define
    _fun_resolve: Resolve

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._fun_container = Container(ContainerConfig(override=True))
        cls._fun_define = Define.build(container=cls._fun_container)
        cls._fun_resolve = Resolve.build(container=cls._fun_container)

    @classmethod
    def function(cls, name: Any, definition: Optional[Definition] = None) -> Any:
        return cls._fun_define.function(name, definition)

    f = function

    @classmethod
    def namespace(cls, name: Any, block: Optional[Callable[[Define], Any]] = None) -> Define:
        return cls._fun_define.namespace(name, block)

    @classmethod
    def resolve(cls, key: Any) -> Any:
        return cls._fun_resolve(key)

    @classmethod
    def container(cls) -> Container:
        return cls._fun_container
