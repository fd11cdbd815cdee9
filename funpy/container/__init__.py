"""Lazy registry of named functions.

A Container maps dotted keys such as ``app.math.sum`` to definitions: zero
argument callables that produce the registered value. A definition runs the
first time its key is fetched and its result is kept for every later fetch.
Keys are opaque strings to the container; namespaces only matter to the
resolver and the define builder.
"""

from __future__ import annotations

import inspect
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from funpy.config import ContainerConfig
from funpy.container.definition_path import DefinitionPath
from funpy.errors import (
    CircularDefinitionError,
    DuplicateKeyError,
    InvalidDefinitionError,
    KeyNotFoundError,
)
from funpy.types.unevaluated import Unevaluated

logger = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = "."

Definition = Callable[[], Any]


@dataclass
class Entry:
    definition: Definition
    value: Any = Unevaluated
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    # Thread currently running `definition`, used to spot self references
    evaluating: Optional[int] = field(default=None, repr=False)

    @property
    def evaluated(self) -> bool:
        return self.value is not Unevaluated


def _check_definition(definition: Any) -> None:
    if not callable(definition):
        raise InvalidDefinitionError(f"definition should be callable, got {definition!r}")
    try:
        inspect.signature(definition).bind()
    except ValueError:
        # No signature available (some builtins); trust the caller
        return
    except TypeError:
        raise InvalidDefinitionError(
            f"definition {definition!r} should be callable without arguments"
        ) from None


class Container:
    """Thread-safe mapping from dotted keys to lazily evaluated definitions."""

    def __init__(self, config: Optional[ContainerConfig] = None):
        self.config: ContainerConfig = config if config is not None else ContainerConfig()
        self._storage: dict[str, Entry] = {}
        self._paths: dict[str, DefinitionPath] = {}
        self._lock = threading.Lock()

    @classmethod
    def mixin(cls, *aliases: Any, container: Optional[Container] = None) -> type:
        """Build a class giving its instances `f(key)` over `aliases`."""
        from funpy.container.mixin import Mixin
        return Mixin.build(aliases=aliases, container=container)

    def define(self, key: Any, definition: Definition) -> None:
        """Register `definition` under `key`.

        Raises DuplicateKeyError when `key` exists and the config does not
        allow overrides, and InvalidDefinitionError when `definition` cannot
        be called without arguments.
        """
        key = str(key)
        _check_definition(definition)
        with self._lock:
            if key in self._storage and not self.config.can_override:
                raise DuplicateKeyError(f"{key!r} is already defined")
            replaced = key in self._storage
            self._storage[key] = Entry(definition)
        logger.debug("%s %r", "redefined" if replaced else "defined", key)

    def fetch(self, key: Any) -> Any:
        """Return the value of `key`, evaluating its definition on first use."""
        key = str(key)
        with self._lock:
            entry = self._storage.get(key)
        if entry is None:
            raise KeyNotFoundError(key)
        if entry.evaluated:
            return entry.value
        with entry.lock:
            if entry.evaluated:
                return entry.value
            me = threading.get_ident()
            if entry.evaluating == me:
                raise CircularDefinitionError(f"definition of {key!r} depends on itself")
            entry.evaluating = me
            try:
                value = entry.definition()
            finally:
                entry.evaluating = None
            entry.value = value
        logger.debug("evaluated %r", key)
        return value

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._storage)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return str(key) in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # --- Definition files ---
    def track(self, path: Any, loaded: bool = False) -> DefinitionPath:
        """Start tracking a definition file, keeping an existing entry as is."""
        path = str(path)
        with self._lock:
            tracked = self._paths.get(path)
            if tracked is None:
                tracked = DefinitionPath(path=path, loaded=loaded)
                self._paths[path] = tracked
            return tracked

    def mark_loaded(self, path: Any) -> DefinitionPath:
        path = str(path)
        with self._lock:
            tracked = DefinitionPath(path=path, loaded=True)
            self._paths[path] = tracked
            return tracked

    def is_loaded(self, path: Any) -> bool:
        with self._lock:
            tracked = self._paths.get(str(path))
        return tracked is not None and tracked.loaded

    @property
    def definition_paths(self) -> list[DefinitionPath]:
        with self._lock:
            return list(self._paths.values())

    def __repr__(self) -> str:
        return f"<Container keys={len(self._storage)} override={self.config.can_override}>"
