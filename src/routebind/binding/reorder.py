"""Reordering binder — reorder route values, then delegate.

Instead of resolving each parameter itself, this variant rewrites the
route values so their keys are the handler's own parameter names, in the
handler's order, and hands the result to a host binder for the rest of
the chain (dependencies, defaults, nullability)::

    reorder_route_values({"post": "2", "user_id": "1"}, describe(show))
    # {"userId": "1", "post": "2"}  for  def show(userId, post)

Name matching goes through the same ``match_route_key`` as
``NamedBinder``, so both variants bind identically.
"""

from collections.abc import Sequence
from typing import Any

from routebind._internal.types import RouteValues
from routebind.binding.named import NamedBinder
from routebind.binding.protocol import Binder
from routebind.descriptors import ParameterDescriptor
from routebind.errors import UnresolvedParameter
from routebind.naming import match_route_key
from routebind.resolver import DependencyResolver


def reorder_route_values(
    route_values: RouteValues,
    parameters: Sequence[ParameterDescriptor],
) -> dict[str, str]:
    """Rekey *route_values* by parameter name, in parameter order.

    Route values that match no parameter are dropped.
    """
    ordered: dict[str, str] = {}
    for param in parameters:
        key = match_route_key(param.name, route_values)
        if key is not None:
            ordered[param.name] = route_values[key]
    return ordered


class ReorderingBinder:
    """Reorder route values to match the handler, then delegate.

    The default host binder matches exact names only, since the values
    are already keyed by parameter name.
    """

    __slots__ = ("_host",)

    def __init__(self, host: Binder | None = None) -> None:
        self._host: Binder = host if host is not None else NamedBinder(normalize=False)

    def bind(
        self,
        route_values: RouteValues,
        parameters: Sequence[ParameterDescriptor],
        resolver: DependencyResolver | None = None,
    ) -> list[Any]:
        ordered = reorder_route_values(route_values, parameters)
        try:
            return self._host.bind(ordered, parameters, resolver)
        except UnresolvedParameter as exc:
            # Report the keys the route actually captured, not the rekeyed subset
            exc.available = tuple(route_values)
            raise
