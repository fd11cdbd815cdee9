from __future__ import annotations


class PlaceholderType:
    """Marks an argument slot that will be filled by a later call."""

    __slots__ = ()
    _instance: PlaceholderType | None = None

    def __new__(cls):
        # One instance per process; comparisons are by identity
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "_"

    def __eq__(self, other):
        return other is self

    def __ne__(self, other):
        return other is not self

    def __hash__(self):
        return id(PlaceholderType)

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return (PlaceholderType, ())


Placeholder = PlaceholderType()


def is_placeholder(value: object) -> bool:
    return value is Placeholder
