from __future__ import annotations


class UnevaluatedType:
    """Value of a container entry whose definition has not run yet."""

    __slots__ = ()

    def __repr__(self): return "<unevaluated>"
    def __bool__(self): return False


Unevaluated = UnevaluatedType()
