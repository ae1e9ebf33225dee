"""Dispatcher — bind route values to a handler and call it.

The dispatcher composes three pieces:

- a ``Binder`` chosen from the current ``BindingConfig`` on every dispatch
  (positional when disabled, otherwise the configured name-matching variant)
- an optional ``DependencyResolver`` for typed parameters
- the invoke helpers, which call sync or async handlers uniformly

Usage::

    container = Container()
    container.provide(Request, get_request)
    dispatcher = Dispatcher(container)

    route = Route.build("/users/{user}/posts/{post}", show_post)
    match = RouteMatch.from_captures(route, ["123", "456"])

    dispatcher.dispatch(match)               # sync handlers
    await dispatcher.dispatch_async(match)   # sync or async handlers

``UnresolvedParameter`` propagates to the caller, which owns turning it
into a failed request.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from routebind._internal.invoke import invoke, invoke_in_thread
from routebind._internal.types import Handler, RouteValues
from routebind.binding import Binder, NamedBinder, PositionalBinder, ReorderingBinder
from routebind.config import BindingConfig
from routebind.descriptors import ParameterDescriptor, describe
from routebind.errors import UnresolvedParameter
from routebind.resolver import DependencyResolver
from routebind.routing.route import RouteMatch, RouteValueSource

logger = logging.getLogger("routebind.dispatch")


@dataclass(frozen=True, slots=True)
class CallArguments:
    """Resolved arguments split for a Python call.

    Keyword-only parameters go in ``kwargs``; everything else is
    positional, in handler declaration order.
    """

    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


def split_arguments(
    values: Sequence[Any],
    parameters: Sequence[ParameterDescriptor],
) -> CallArguments:
    """Pair resolved *values* with *parameters* and split by call style."""
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for param, value in zip(parameters, values, strict=True):
        if param.keyword_only:
            kwargs[param.name] = value
        else:
            args.append(value)
    return CallArguments(args=tuple(args), kwargs=kwargs)


class Dispatcher:
    """Bind and call route handlers.

    Without an explicit *config*, settings come from the
    ``NAMED_ROUTE_BINDING_*`` environment variables at construction.
    The config is read once at the start of every dispatch, so
    ``reconfigure()`` takes effect on the next request without rebuilding
    the dispatcher.
    """

    __slots__ = ("_binders", "_config", "_positional", "_resolver")

    def __init__(
        self,
        resolver: DependencyResolver | None = None,
        *,
        config: BindingConfig | None = None,
    ) -> None:
        self._resolver = resolver
        self._config = config if config is not None else BindingConfig.from_env()
        self._positional = PositionalBinder()
        self._binders: dict[str, Binder] = {
            "direct": NamedBinder(),
            "reorder": ReorderingBinder(),
        }

    @property
    def config(self) -> BindingConfig:
        return self._config

    @property
    def resolver(self) -> DependencyResolver | None:
        return self._resolver

    def reconfigure(self, **changes: Any) -> BindingConfig:
        """Replace config fields, e.g. ``reconfigure(enabled=False)``."""
        self._config = replace(self._config, **changes)
        return self._config

    def select_binder(self, config: BindingConfig | None = None) -> Binder:
        """Return the binder the given (or current) config calls for."""
        config = config if config is not None else self._config
        if not config.enabled:
            return self._positional
        return self._binders[config.strategy]

    # -- Binding --

    def bind(
        self,
        handler: Handler,
        source: RouteValueSource | RouteValues,
        parameters: Sequence[ParameterDescriptor] | None = None,
    ) -> CallArguments:
        """Resolve the arguments for *handler* without calling it."""
        return self._bind(self._config, handler, source, parameters)

    def _bind(
        self,
        config: BindingConfig,
        handler: Handler,
        source: RouteValueSource | RouteValues,
        parameters: Sequence[ParameterDescriptor] | None,
    ) -> CallArguments:
        route_values = source if isinstance(source, Mapping) else source.parameters()
        binder = self.select_binder(config)

        if binder is self._positional:
            logger.debug("Positional binding for %s", _qualname(handler))
            return CallArguments(args=tuple(binder.bind(route_values, ())))

        descriptors = parameters if parameters is not None else describe(handler)
        logger.debug("Binding %s with %s strategy", _qualname(handler), config.strategy)
        try:
            values = binder.bind(route_values, descriptors, self._resolver)
        except UnresolvedParameter as exc:
            if not exc.handler:
                exc.handler = _qualname(handler)
            raise
        return split_arguments(values, descriptors)

    # -- Calling --

    def call(
        self,
        handler: Handler,
        source: RouteValueSource | RouteValues,
        parameters: Sequence[ParameterDescriptor] | None = None,
    ) -> Any:
        """Bind and call *handler* synchronously.

        An awaitable result is returned as-is; use ``call_async()`` for
        async handlers.
        """
        bound = self._bind(self._config, handler, source, parameters)
        return handler(*bound.args, **bound.kwargs)

    async def call_async(
        self,
        handler: Handler,
        source: RouteValueSource | RouteValues,
        parameters: Sequence[ParameterDescriptor] | None = None,
    ) -> Any:
        """Bind and call *handler*, awaiting async handlers.

        Sync handlers run in a worker thread when
        ``config.offload_sync_handlers`` is set.
        """
        config = self._config
        bound = self._bind(config, handler, source, parameters)
        if config.offload_sync_handlers:
            return await invoke_in_thread(handler, *bound.args, **bound.kwargs)
        return await invoke(handler, *bound.args, **bound.kwargs)

    def dispatch(self, match: RouteMatch) -> Any:
        """Call the matched route's handler synchronously."""
        return self.call(match.route.handler, match, match.route.descriptors)

    async def dispatch_async(self, match: RouteMatch) -> Any:
        """Call the matched route's handler, sync or async."""
        return await self.call_async(match.route.handler, match, match.route.descriptors)


def _qualname(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
