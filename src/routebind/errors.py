"""routebind exception hierarchy.

Shared across binders, the container, routes, and the dispatcher so every
module raises and catches the same types.
"""


class RouteBindError(Exception):
    """Base for all routebind-specific errors."""


class ConfigurationError(RouteBindError):
    """Raised when binding configuration or a route pattern is invalid.

    Typically raised at startup, while loading config or building routes.
    """


class ResolutionError(RouteBindError):
    """Raised by ``Container.make()`` when a type cannot be produced."""


class UnresolvedParameter(RouteBindError):
    """A handler parameter matched no route value and had no fallback.

    Carries the parameter name and the route-value keys that were
    available, so the message points at the typo or missing segment.
    Binding is deterministic; retrying cannot change the outcome.
    """

    def __init__(self, name: str, available: tuple[str, ...] = (), handler: str = "") -> None:
        super().__init__(name)
        self.name = name
        self.available = available
        self.handler = handler

    def __str__(self) -> str:
        target = f" for {self.handler}" if self.handler else " for handler"
        keys = ", ".join(self.available) if self.available else "(none)"
        return (
            f"Unable to resolve parameter [{self.name}]{target}. "
            f"Available route parameters: {keys}"
        )
