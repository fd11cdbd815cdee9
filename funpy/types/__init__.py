from funpy.types.placeholder import Placeholder, PlaceholderType, is_placeholder
from funpy.types.unevaluated import Unevaluated

__all__ = ["Placeholder", "PlaceholderType", "is_placeholder", "Unevaluated"]
