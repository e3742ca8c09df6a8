"""General-purpose helpers for use inside templates."""

from __future__ import annotations

from typing import Any

from pkgdoc.errors import MalformedMapArguments


def map_fmt(*kvs: Any) -> dict[str, Any]:
    """Build a dict from alternating key/value arguments.

    Templates use this to hand several values to an included template::

        {% with row = map("pkg", pdoc, "parent", path) %}{% include "row.html" %}{% endwith %}
    """
    if len(kvs) % 2 != 0:
        raise MalformedMapArguments("map requires an even number of arguments")
    result: dict[str, Any] = {}
    for i in range(0, len(kvs), 2):
        key = kvs[i]
        if not isinstance(key, str):
            raise MalformedMapArguments(
                f"map key at position {i} must be a string, got {type(key).__name__}"
            )
        result[key] = kvs[i + 1]
    return result


def equal(a: Any, b: Any) -> bool:
    """Structural equality; template data types define ``__eq__``."""
    return a == b
