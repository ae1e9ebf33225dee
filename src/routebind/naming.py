"""Name normalization between route segments and handler parameters.

Route patterns and handler signatures often disagree on case style:
``/users/{user_id}`` against ``def show(userId)``, or the reverse. These
helpers are purely syntactic and know nothing about types.

Lookup order for a parameter name (first hit wins):

1. the name itself
2. its snake_case form
3. its camelCase form
"""

import re
from collections.abc import Iterator, Mapping

_UPPER = re.compile(r"(?<!^)([A-Z])")
_WORD_SEP = re.compile(r"[_\- ]")


def to_snake_case(value: str) -> str:
    """Insert ``_`` before each non-leading uppercase letter, then lowercase.

    ``userId`` -> ``user_id``. Already snake_case names come back unchanged.
    """
    return _UPPER.sub(r"_\1", value).lower()


def to_camel_case(value: str) -> str:
    """Split on ``_``/``-``, capitalize each word, lowercase the first letter.

    ``user_id`` -> ``userId``. Already camelCase names come back unchanged.
    """
    joined = "".join(word[:1].upper() + word[1:] for word in _WORD_SEP.split(value))
    return joined[:1].lower() + joined[1:]


def candidate_keys(name: str) -> Iterator[str]:
    """Yield the route keys to try for *name*, in lookup order, without repeats."""
    seen: set[str] = set()
    for key in (name, to_snake_case(name), to_camel_case(name)):
        if key not in seen:
            seen.add(key)
            yield key


def match_route_key(name: str, route_values: Mapping[str, str]) -> str | None:
    """Return the key in *route_values* that binds to parameter *name*.

    Returns ``None`` when neither the exact name nor a normalized form is
    present.
    """
    for key in candidate_keys(name):
        if key in route_values:
            return key
    return None
