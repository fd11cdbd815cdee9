# Core type aliases and the public surface of funpy.
#
# Naming guidance:
# - Definition: a zero-argument callable registered in a container.
# - AliasSpec:  a namespace string, or a {namespace: shortcut} mapping.

from typing import Any, Callable, Mapping, Union

Definition = Callable[[], Any]
AliasSpec = Union[str, Mapping[str, str]]

from funpy.types.placeholder import Placeholder, Placeholder as _
from funpy.curry import CurriedFunction, curry
from funpy.function import compose, pipe
from funpy.config import ContainerConfig
from funpy.container import Container
from funpy.container.define import Define
from funpy.container.dsl import DSL
from funpy.container.resolve import Resolve
from funpy.runtime import Runtime, define, get_runtime, import_, mixin
from funpy.errors import (
    ArityError,
    CircularDefinitionError,
    DuplicateKeyError,
    FunError,
    GlobalAlreadyConfiguredError,
    InvalidDefinitionError,
    KeyNotFoundError,
    UnknownOperationError,
)
