"""Binding strategies — turn named route values into handler arguments.

Three strategies share one protocol:

- ``NamedBinder``: resolve each parameter by name, then type, default, None
- ``ReorderingBinder``: rekey route values by parameter name, then delegate
- ``PositionalBinder``: route values in pattern order, names ignored
"""

from routebind.binding.named import NamedBinder
from routebind.binding.positional import PositionalBinder
from routebind.binding.protocol import Binder
from routebind.binding.reorder import ReorderingBinder, reorder_route_values

__all__ = [
    "Binder",
    "NamedBinder",
    "PositionalBinder",
    "ReorderingBinder",
    "reorder_route_values",
]
