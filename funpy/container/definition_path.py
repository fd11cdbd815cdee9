from __future__ import annotations


class DefinitionPath:
    """A file holding definitions and whether it has been loaded.

    Tracking is keyed by `path` alone (see `same_path` and `__hash__`), while
    `==` also compares the loaded state.
    """

    __slots__ = ("path", "loaded")

    def __init__(self, path: str, loaded: bool = False):
        self.path = str(path)
        self.loaded = bool(loaded)

    def same_path(self, other: DefinitionPath) -> bool:
        return isinstance(other, DefinitionPath) and self.path == other.path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefinitionPath):
            return NotImplemented
        return self.same_path(other) and self.loaded == other.loaded

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"DefinitionPath({self.path!r}, loaded={self.loaded})"
