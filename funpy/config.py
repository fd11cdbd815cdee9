from __future__ import annotations
import os
from dataclasses import dataclass


_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ContainerConfig:
    """Settings of a single container.

    `override` decides whether defining an existing key replaces it or fails.
    """
    override: bool = False

    @property
    def can_override(self) -> bool:
        return self.override

    @classmethod
    def from_env(cls) -> ContainerConfig:
        return cls(override=flag_from_env('FUNPY_ALLOW_OVERRIDE'))
