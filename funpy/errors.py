

class FunError(Exception):
    """ Base class for all funpy errors"""
    pass

class DuplicateKeyError(FunError):
    """ Raised when a key is defined twice in a container that does not allow overrides"""

class InvalidDefinitionError(FunError):
    """ Raised when a definition is not a zero-argument callable"""

class KeyNotFoundError(FunError, LookupError):
    """ Raised when no registered key matches a requested key"""

    def __init__(self, key: str, message: str | None = None):
        super().__init__(message or f"key {key!r} has not been registered")
        self.key = key

class CircularDefinitionError(FunError):
    """ Raised when a definition needs its own value to be evaluated"""

class GlobalAlreadyConfiguredError(FunError):
    """ Raised when the process-wide default container is configured twice"""

class ArityError(FunError, TypeError):
    """ Raised when more arguments are passed than a function accepts"""

class UnknownOperationError(FunError, LookupError):
    """ Raised when an operation table has no implementation for a name"""
