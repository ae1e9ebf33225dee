"""Routing types — routes with pre-built descriptors and their matches.

Matching URLs to routes is the host framework's job. A ``RouteMatch`` is
what that matching produces: the route plus its captured values, in
pattern order.
"""

from routebind.routing.pattern import parse_pattern
from routebind.routing.route import Route, RouteMatch, RouteValueSource

__all__ = ["Route", "RouteMatch", "RouteValueSource", "parse_pattern"]
