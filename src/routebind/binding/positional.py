"""Positional binder — strict route-order binding.

Used when name binding is disabled. Route values are passed in the order
the route pattern declares them; handler parameter names are ignored.
"""

from collections.abc import Sequence
from typing import Any

from routebind._internal.types import RouteValues
from routebind.descriptors import ParameterDescriptor
from routebind.resolver import DependencyResolver


class PositionalBinder:
    """Return route values as captured, in pattern order."""

    __slots__ = ()

    def bind(
        self,
        route_values: RouteValues,
        parameters: Sequence[ParameterDescriptor],
        resolver: DependencyResolver | None = None,
    ) -> list[Any]:
        return list(route_values.values())
