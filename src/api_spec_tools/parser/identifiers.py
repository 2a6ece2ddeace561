"""Endpoint identifiers derived from (method, path).

``GET /pet/{petId}`` becomes ``GET__pet__petId``: every character outside
``[A-Za-z0-9]`` turns into ``_`` and trailing underscores are dropped. The
mapping is lossy (``/a-b`` and ``/a_b`` collide), so looking an identifier up
means recomputing it for each candidate path and comparing strings.
"""

import re

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def path_id(path: str) -> str:
    return _NON_ALNUM.sub("_", path).rstrip("_")


def build_endpoint_id(method: str, path: str) -> str:
    """Build the identifier for one operation."""
    return f"{method.upper()}_{path_id(path)}"


def method_from_id(value: str) -> str | None:
    """Return the lowercased method part of an identifier, or None if malformed."""
    parts = value.split("_")
    if len(parts) < 2:
        return None
    return parts[0].lower()
