"""Catalogue of curried helpers grouped by the kind of value they work on."""

from __future__ import annotations

import logging
from types import ModuleType
from typing import TYPE_CHECKING

from funpy.modules import array, enum, file, function, hash, string

if TYPE_CHECKING:
    from funpy.container import Container

logger = logging.getLogger(__name__)

CATALOGUE: dict[str, ModuleType] = {
    "array": array,
    "enum": enum,
    "file": file,
    "function": function,
    "hash": hash,
    "string": string,
}


def register(container: Container) -> None:
    """Define every catalogue helper in `container` under `<module>.<name>`."""
    for namespace, module in CATALOGUE.items():
        for name in module._ops.names():
            public = getattr(module, name)
            container.define(f"{namespace}.{name}", lambda fn=public: fn)
        logger.debug("registered %d %s helpers", len(module._ops.names()), namespace)
