"""Handler parameter descriptors.

A ``ParameterDescriptor`` is the static metadata the binder needs about one
handler parameter: its name, the type to ask the resolver for, and what to
fall back to when nothing matches. Descriptors are built once, when a route
is registered, either from the handler signature via ``describe()`` or
declared by hand::

    def show(post_id: str, request: Request, page: int = 1) -> dict: ...

    describe(show)
    # (ParameterDescriptor("post_id"),
    #  ParameterDescriptor("request", declared_type=Request),
    #  ParameterDescriptor("page", has_default=True, default=1))
"""

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin

# Types a resolver is never asked to construct
SCALAR_TYPES: frozenset[type] = frozenset(
    {str, int, float, bool, bytes, complex, list, dict, tuple, set, frozenset, object}
)

_NONE_TYPE = type(None)


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Static metadata about one handler parameter.

    ``declared_type`` is ``None`` for untyped and scalar parameters; only
    non-scalar types are handed to the dependency resolver. ``default`` is
    meaningful only when ``has_default`` is true.
    """

    name: str
    declared_type: type | None = None
    has_default: bool = False
    default: Any = None
    is_nullable: bool = False
    keyword_only: bool = False


def is_injectable(tp: Any) -> bool:
    """Return True if *tp* is a class the resolver may be asked for."""
    return isinstance(tp, type) and tp not in SCALAR_TYPES


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Split ``X | None`` into ``(X, True)``.

    Unions of several non-None members have no single type and come back
    as ``(None, nullable)``.
    """
    if annotation is None or annotation is _NONE_TYPE:
        return None, True

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        members = tuple(arg for arg in args if arg is not _NONE_TYPE)
        nullable = len(members) != len(args)
        if len(members) == 1:
            return members[0], nullable
        return None, nullable

    return annotation, False


def _declared_type(annotation: Any) -> type | None:
    """Reduce an annotation to the class a resolver would be asked for."""
    if annotation is inspect.Parameter.empty or annotation is None or annotation is Any:
        return None

    origin = get_origin(annotation)
    if origin is Annotated:
        return _declared_type(get_args(annotation)[0])

    # Generic aliases (Repository[User]) resolve by their origin class
    target = origin if origin is not None else annotation
    return target if is_injectable(target) else None


def from_parameter(param: inspect.Parameter) -> ParameterDescriptor:
    """Build a descriptor from an ``inspect.Parameter``."""
    annotation = param.annotation
    nullable = False
    if annotation is not inspect.Parameter.empty:
        if get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]
        annotation, nullable = _unwrap_optional(annotation)

    has_default = param.default is not inspect.Parameter.empty
    return ParameterDescriptor(
        name=param.name,
        declared_type=_declared_type(annotation),
        has_default=has_default,
        default=param.default if has_default else None,
        is_nullable=nullable,
        keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
    )


def describe(handler: Callable[..., Any]) -> tuple[ParameterDescriptor, ...]:
    """Build descriptors for every bindable parameter of *handler*.

    Bound methods drop their receiver. ``*args`` and ``**kwargs`` are
    skipped since nothing can be bound to them by name.
    """
    sig = inspect.signature(handler, eval_str=True)
    return tuple(
        from_parameter(param)
        for param in sig.parameters.values()
        if param.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    )
