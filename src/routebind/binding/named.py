"""Name-matching binder — the direct resolution chain.

Each handler parameter is resolved independently, first success wins:

1. Route value under the exact parameter name
2. Route value under the snake_case form of the name
3. Route value under the camelCase form of the name
4. ``resolver.make(declared_type)`` for non-scalar annotations
5. The parameter's default value
6. ``None`` for nullable parameters
7. ``UnresolvedParameter``

Resolver failures in step 4 are logged and skipped so a typed parameter
still reaches its default or ``None``.
"""

import logging
from collections.abc import Sequence
from typing import Any

from routebind._internal.types import RouteValues
from routebind.descriptors import ParameterDescriptor, is_injectable
from routebind.errors import UnresolvedParameter
from routebind.naming import match_route_key
from routebind.resolver import DependencyResolver

logger = logging.getLogger("routebind.binding")

_MISSING = object()


class NamedBinder:
    """Bind route values to parameters by name, regardless of route order.

    With ``normalize=False`` only exact names match (steps 2 and 3 are
    skipped). ``ReorderingBinder`` uses that mode after it has already
    renamed the route values.
    """

    __slots__ = ("_normalize",)

    def __init__(self, *, normalize: bool = True) -> None:
        self._normalize = normalize

    def bind(
        self,
        route_values: RouteValues,
        parameters: Sequence[ParameterDescriptor],
        resolver: DependencyResolver | None = None,
    ) -> list[Any]:
        return [self.resolve(param, route_values, resolver) for param in parameters]

    def resolve(
        self,
        param: ParameterDescriptor,
        route_values: RouteValues,
        resolver: DependencyResolver | None = None,
    ) -> Any:
        """Resolve a single parameter through the fallback chain."""
        value = self._lookup(param.name, route_values)
        if value is not _MISSING:
            return value

        if resolver is not None and param.declared_type is not None:
            value = _make(resolver, param)
            if value is not _MISSING:
                return value

        if param.has_default:
            return param.default

        if param.is_nullable:
            return None

        raise UnresolvedParameter(name=param.name, available=tuple(route_values))

    def _lookup(self, name: str, route_values: RouteValues) -> Any:
        if not self._normalize:
            return route_values.get(name, _MISSING)
        key = match_route_key(name, route_values)
        return _MISSING if key is None else route_values[key]


def _make(resolver: DependencyResolver, param: ParameterDescriptor) -> Any:
    """Ask *resolver* for the parameter's type, or ``_MISSING`` on failure."""
    # Hand-declared scalar types (declared_type=str) never reach the resolver
    if not is_injectable(param.declared_type):
        return _MISSING
    try:
        return resolver.make(param.declared_type)
    except Exception:
        logger.debug(
            "Resolver could not build %r for parameter %r; falling back",
            param.declared_type,
            param.name,
            exc_info=True,
        )
        return _MISSING
