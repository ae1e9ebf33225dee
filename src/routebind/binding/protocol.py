"""Binder protocol.

A binder turns named route values into the ordered argument list for a
handler::

    binder.bind({"user": "1", "post": "2"}, describe(show), resolver)

No base class required. The dispatcher checks the shape, not the lineage.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from routebind._internal.types import RouteValues
from routebind.descriptors import ParameterDescriptor
from routebind.resolver import DependencyResolver


class Binder(Protocol):
    """Protocol for argument binding strategies.

    Implementations return one value per descriptor, in descriptor order,
    or raise ``UnresolvedParameter``. Positional binding is the exception:
    it ignores descriptors and returns the route values as captured.
    """

    def bind(
        self,
        route_values: RouteValues,
        parameters: Sequence[ParameterDescriptor],
        resolver: DependencyResolver | None = None,
    ) -> list[Any]: ...
