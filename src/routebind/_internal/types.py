"""Shared type aliases used across routebind modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Route handler — user-defined function with variable signature
Handler: TypeAlias = Callable[..., Any]

# Values captured from a matched route, keyed by pattern name, in pattern order
RouteValues: TypeAlias = Mapping[str, str]
