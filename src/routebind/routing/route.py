"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, Self, runtime_checkable

from routebind._internal.types import Handler, RouteValues
from routebind.descriptors import ParameterDescriptor, describe
from routebind.errors import ConfigurationError
from routebind.routing.pattern import parse_pattern


@runtime_checkable
class RouteValueSource(Protocol):
    """Anything that exposes the values captured for the matched route."""

    def parameters(self) -> RouteValues: ...


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Use ``Route.build()`` to introspect the handler once at registration.
    A route built directly with ``descriptors=None`` is described on every
    dispatch instead.
    """

    pattern: str
    handler: Handler
    descriptors: tuple[ParameterDescriptor, ...] | None = None
    param_names: tuple[str, ...] = ()
    name: str | None = None

    @classmethod
    def build(
        cls,
        pattern: str,
        handler: Handler,
        *,
        descriptors: Sequence[ParameterDescriptor] | None = None,
        name: str | None = None,
    ) -> Self:
        """Parse *pattern* and describe *handler* ahead of time.

        Explicit *descriptors* replace signature introspection, for
        handlers whose signature does not tell the whole story.
        """
        return cls(
            pattern=pattern,
            handler=handler,
            descriptors=tuple(descriptors) if descriptors is not None else describe(handler),
            param_names=parse_pattern(pattern),
            name=name,
        )


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``path_params`` keeps the route pattern's declaration order.
    """

    route: Route
    path_params: dict[str, str]

    def parameters(self) -> RouteValues:
        return self.path_params

    @classmethod
    def from_captures(cls, route: Route, captures: Sequence[str]) -> Self:
        """Pair positional *captures* with the route's pattern names."""
        if len(captures) != len(route.param_names):
            msg = (
                f"Route {route.pattern!r} declares {len(route.param_names)} "
                f"parameter(s) but {len(captures)} value(s) were captured."
            )
            raise ConfigurationError(msg)
        return cls(route=route, path_params=dict(zip(route.param_names, captures, strict=True)))
