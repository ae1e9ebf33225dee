"""Binding configuration.

BindingConfig is a frozen dataclass: immutable after creation, read once
per dispatch, no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

from routebind.errors import ConfigurationError

ENV_PREFIX = "NAMED_ROUTE_BINDING_"

STRATEGIES: frozenset[str] = frozenset({"direct", "reorder"})

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True, slots=True)
class BindingConfig:
    """Binding configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BindingConfig(enabled=False)
    """

    # Bind by parameter name; False restores strict positional binding
    enabled: bool = True

    # Name-matching variant: "direct" resolves each parameter itself,
    # "reorder" rekeys route values and delegates to a host binder
    strategy: str = "direct"

    # Run sync handlers in a worker thread from call_async()/dispatch_async()
    offload_sync_handlers: bool = False

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            allowed = ", ".join(sorted(STRATEGIES))
            msg = f"Unknown binding strategy {self.strategy!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build a config from ``NAMED_ROUTE_BINDING_*`` environment variables.

        Unset variables keep their defaults::

            NAMED_ROUTE_BINDING_ENABLED=false
            NAMED_ROUTE_BINDING_STRATEGY=reorder
            NAMED_ROUTE_BINDING_OFFLOAD_SYNC=1
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            enabled=_env_bool(env, "ENABLED", defaults.enabled),
            strategy=env.get(f"{ENV_PREFIX}STRATEGY", "").strip().lower() or defaults.strategy,
            offload_sync_handlers=_env_bool(env, "OFFLOAD_SYNC", defaults.offload_sync_handlers),
        )


def _env_bool(env: Mapping[str, str], suffix: str, default: bool) -> bool:
    key = f"{ENV_PREFIX}{suffix}"
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{key}={raw!r} is not a boolean. Use true/false, 1/0, yes/no, or on/off."
    raise ConfigurationError(msg)
