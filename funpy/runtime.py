"""Process-wide default container and the entry points that fall back to it.

Every entry point takes an explicit `container=`; the runtime's container is
only used when none is given. The runtime's container can be configured once,
and only before anything has used the default one.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable, Optional

from funpy.config import ContainerConfig
from funpy.container import Container
from funpy.container.define import Define
from funpy.container.mixin import Mixin
from funpy.container.resolve import Resolve
from funpy.errors import GlobalAlreadyConfiguredError

logger = logging.getLogger(__name__)


class Runtime:
    __slots__ = ("config", "_container", "_lock")

    def __init__(self, config: Optional[ContainerConfig] = None):
        self.config: ContainerConfig = config if config is not None else ContainerConfig.from_env()
        self._container: Optional[Container] = None
        self._lock = threading.Lock()

    @property
    def configured(self) -> bool:
        return self._container is not None

    @property
    def container(self) -> Container:
        with self._lock:
            if self._container is None:
                self._container = Container(self.config)
                logger.debug("created default container (override=%s)", self.config.can_override)
            return self._container

    def set_container(self, container: Container) -> None:
        if not isinstance(container, Container):
            raise TypeError(f"container should be an instance of {Container.__name__}")
        with self._lock:
            if self._container is not None:
                raise GlobalAlreadyConfiguredError("the default container is already configured")
            self._container = container


# Module-level singleton
_runtime: Optional[Runtime] = None
_runtime_lock = threading.Lock()


def get_runtime() -> Runtime:
    global _runtime
    with _runtime_lock:
        if _runtime is None:
            _runtime = Runtime()
        return _runtime


def _container_or_default(container: Optional[Container]) -> Container:
    return container if container is not None else get_runtime().container


def define(block: Callable[[Define], Any], container: Optional[Container] = None) -> Define:
    """Run `block` with a root builder and record its file as loaded."""
    target = _container_or_default(container)
    builder = Define.build(container=target)
    builder(block)
    code = getattr(block, "__code__", None)
    if code is not None:
        target.mark_loaded(code.co_filename)
    return builder


def import_(*aliases: Any, container: Optional[Container] = None) -> Resolve:
    """Resolver over `aliases`: import_({"app.math": "m"})("m.sum")."""
    return Resolve.build(aliases=aliases, container=_container_or_default(container))


def mixin(*aliases: Any, container: Optional[Container] = None) -> type:
    """Capability class over `aliases`; see funpy.container.mixin."""
    return Mixin.build(aliases=aliases, container=_container_or_default(container))
