"""routebind — bind route values to handler parameters by name.

Route segments reach the handler by parameter name instead of by position,
with snake_case/camelCase tolerance, typed dependency resolution, defaults,
and ``None`` for optional parameters.

Basic usage::

    from routebind import Container, Dispatcher, Route, RouteMatch

    def show(post, user):
        return {"user": user, "post": post}

    route = Route.build("/users/{user}/posts/{post}", show)
    match = RouteMatch.from_captures(route, ["123", "456"])

    Dispatcher(Container()).dispatch(match)
    # {"user": "123", "post": "456"}

Set ``NAMED_ROUTE_BINDING_ENABLED=false`` (or ``BindingConfig(enabled=False)``)
to fall back to positional binding.
"""

__version__ = "0.1.0"
__all__ = [
    "Binder",
    "BindingConfig",
    "CallArguments",
    "ConfigurationError",
    "Container",
    "DependencyResolver",
    "Dispatcher",
    "NamedBinder",
    "ParameterDescriptor",
    "PositionalBinder",
    "ReorderingBinder",
    "ResolutionError",
    "Route",
    "RouteBindError",
    "RouteMatch",
    "RouteValueSource",
    "UnresolvedParameter",
    "describe",
    "to_camel_case",
    "to_snake_case",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routebind`` fast while providing a clean top-level API.
    """
    if name in ("Dispatcher", "CallArguments"):
        from routebind import dispatcher as _dispatcher

        return getattr(_dispatcher, name)

    if name == "BindingConfig":
        from routebind.config import BindingConfig

        return BindingConfig

    if name in ("Binder", "NamedBinder", "PositionalBinder", "ReorderingBinder"):
        from routebind import binding as _binding

        return getattr(_binding, name)

    if name in ("Container", "DependencyResolver"):
        from routebind import resolver as _resolver

        return getattr(_resolver, name)

    if name in ("ParameterDescriptor", "describe"):
        from routebind import descriptors as _descriptors

        return getattr(_descriptors, name)

    if name in ("Route", "RouteMatch", "RouteValueSource"):
        from routebind.routing import route as _route

        return getattr(_route, name)

    if name in ("to_camel_case", "to_snake_case"):
        from routebind import naming as _naming

        return getattr(_naming, name)

    if name in ("ConfigurationError", "ResolutionError", "RouteBindError", "UnresolvedParameter"):
        from routebind import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
