"""Alias based key resolution.

An alias is either a bare namespace (``"app.math"``), which lets ``"sum"``
resolve to ``"app.math.sum"``, or a namespace with a shortcut
(``{"app.math": "m"}``), which lets ``"m.sum"`` resolve to ``"app.math.sum"``.
Aliases declared later are probed first; the raw key is the last resort.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Iterator, Mapping, Optional, TYPE_CHECKING

from funpy.errors import KeyNotFoundError

if TYPE_CHECKING:
    from funpy.container import Container

logger = logging.getLogger(__name__)

Alias = tuple[str, Optional[str]]


def normalize_aliases(aliases: Iterable[Any]) -> list[Alias]:
    """Flatten alias specs into (namespace, shortcut) pairs, in declaration order."""
    if isinstance(aliases, (str, Mapping)):
        aliases = [aliases]
    pairs: list[Alias] = []
    for spec in aliases:
        if isinstance(spec, Mapping):
            pairs.extend((str(ns), str(shortcut)) for ns, shortcut in spec.items())
        else:
            pairs.append((str(spec), None))
    return pairs


def _segment_pattern(shortcut: str) -> re.Pattern[str]:
    # Match the shortcut only as whole dot-delimited segment(s)
    return re.compile(rf"(?<![^.]){re.escape(shortcut)}(?![^.])")


def expand(key: str, namespace: str, shortcut: Optional[str]) -> Optional[str]:
    """Candidate full key for `key` under one alias, or None when it does not apply."""
    if shortcut is None:
        return f"{namespace}.{key}"
    candidate, count = _segment_pattern(shortcut).subn(lambda _m: namespace, key)
    return candidate if count else None


class Resolve:
    """Looks keys up in a container through an ordered set of aliases."""

    __slots__ = ("aliases", "container")

    def __init__(self, aliases: list[Alias], container: Container):
        self.aliases = aliases
        self.container = container

    @classmethod
    def build(cls, aliases: Iterable[Any] = (), container: Optional[Container] = None) -> Resolve:
        if container is None:
            from funpy.runtime import get_runtime
            container = get_runtime().container
        pairs = normalize_aliases(aliases)
        pairs.reverse()
        return cls(aliases=pairs, container=container)

    def candidates(self, key: Any) -> Iterator[str]:
        """Full keys tried for `key`, most specific alias first, raw key last."""
        key = str(key)
        for namespace, shortcut in self.aliases:
            candidate = expand(key, namespace, shortcut)
            if candidate is not None:
                yield candidate
        yield key

    def resolve(self, key: Any) -> Any:
        key = str(key)
        for candidate in self.candidates(key):
            try:
                return self.container.fetch(candidate)
            except KeyNotFoundError as exc:
                # A missing dependency inside a definition must not look like a miss here
                if exc.key != candidate:
                    raise
                continue
        logger.debug("no alias of %r is registered", key)
        raise KeyNotFoundError(key)

    __call__ = resolve

    def __repr__(self) -> str:
        return f"<Resolve aliases={self.aliases!r}>"
