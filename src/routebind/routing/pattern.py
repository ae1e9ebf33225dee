"""Route pattern parsing.

Extracts parameter names from a route pattern in declaration order::

    parse_pattern("/users/{user}/posts/{post}")   -> ("user", "post")
    parse_pattern("/users/{id:int}")              -> ("id",)
    parse_pattern("/files/{filepath:path}")       -> ("filepath",)
"""

from routebind.errors import ConfigurationError


def parse_pattern(pattern: str) -> tuple[str, ...]:
    """Return the parameter names declared in *pattern*, in order.

    Raises ``ConfigurationError`` for ``<param>`` segments, empty names,
    and names declared twice.
    """
    names: list[str] = []
    for part in pattern.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route {pattern!r} uses <param> syntax. "
                f"Declare parameters as {{param}}, e.g. {{{part[1:-1]}}}."
            )
            raise ConfigurationError(msg)
        if not (part.startswith("{") and part.endswith("}")):
            continue

        name = part[1:-1].split(":", 1)[0]
        if not name:
            msg = f"Route {pattern!r} has a parameter with no name."
            raise ConfigurationError(msg)
        if name in names:
            msg = f"Route {pattern!r} declares parameter {name!r} more than once."
            raise ConfigurationError(msg)
        names.append(name)
    return tuple(names)
