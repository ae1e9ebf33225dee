"""Dependency resolution for typed handler parameters.

A resolver is anything with a ``make(type)`` method. The binder asks it for
instances of non-scalar parameter types (the current request, services)
and treats any exception as "no match".

``Container`` is the shipped implementation: a typed registry of
zero-argument factories, in the spirit of ``app.provide()``::

    container = Container()
    container.provide(DocumentStore, get_store)
    container.instance(Settings, settings)

    container.make(DocumentStore)  # calls get_store()
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from routebind.errors import ResolutionError


@runtime_checkable
class DependencyResolver(Protocol):
    """Produces instances for typed handler parameters."""

    def make(self, tp: type) -> Any: ...


class Container:
    """Typed registry of provider factories.

    Lookup walks the requested type's MRO, so a registered base class
    also serves its subclasses. With ``autowire=True`` an unregistered class
    is constructed by calling it with no arguments; a class whose
    constructor needs arguments then fails like any other resolution.
    """

    __slots__ = ("_autowire", "_providers")

    def __init__(self, *, autowire: bool = True) -> None:
        self._providers: dict[type, Callable[[], Any]] = {}
        self._autowire = autowire

    def provide(self, tp: type, factory: Callable[[], Any]) -> None:
        """Register a zero-argument *factory* for *tp*, called on every ``make()``."""
        self._providers[tp] = factory

    def instance(self, tp: type, obj: Any) -> None:
        """Register an existing object returned as-is for *tp*."""
        self._providers[tp] = lambda: obj

    def bound(self, tp: type) -> bool:
        """Return True if *tp* has a registered provider."""
        return tp in self._providers

    def make(self, tp: type) -> Any:
        """Return an instance of *tp*.

        Raises ``ResolutionError`` if *tp* is not registered and cannot be
        autowired. Exceptions raised by a factory or constructor propagate.
        """
        factory = self._find_provider(tp)
        if factory is not None:
            return factory()

        if self._autowire and isinstance(tp, type):
            return tp()

        msg = f"No provider registered for {getattr(tp, '__qualname__', tp)!r}."
        raise ResolutionError(msg)

    def _find_provider(self, tp: type) -> Callable[[], Any] | None:
        """Return the provider for *tp* or its nearest registered base class.

        A handler annotated with a subclass of a registered type (a
        ``JsonRequest`` when ``Request`` is provided) gets the base provider.
        """
        for base in getattr(tp, "__mro__", (tp,)):
            if base is object:
                break
            factory = self._providers.get(base)
            if factory is not None:
                return factory
        return None

    def __len__(self) -> int:
        return len(self._providers)
