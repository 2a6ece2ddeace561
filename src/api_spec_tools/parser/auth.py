"""Authentication inventory of an OpenAPI document."""

import logging
from typing import Any

from .base import AuthInfo, AuthScheme

logger = logging.getLogger(__name__)

RECOGNIZED_TYPES = ("apiKey", "http", "oauth2", "openIdConnect")


def detect_auth(document: dict) -> AuthInfo:
    """Summarize the security schemes and global requirements of a document.

    ``$ref`` scheme entries are skipped, not resolved.
    """
    components = document.get("components") or {}
    schemes = []
    for name, entry in (components.get("securitySchemes") or {}).items():
        scheme = _parse_scheme(name, entry)
        if scheme is not None:
            schemes.append(scheme)

    return AuthInfo.model_construct(
        type=_classify(schemes),
        schemes=schemes,
        global_security=document.get("security"),
    )


def _parse_scheme(name: str, entry: Any) -> AuthScheme | None:
    match entry:
        case {"$ref": _}:
            return None
        case {"type": "apiKey"}:
            details = {"in": entry.get("in"), "parameterName": entry.get("name")}
        case {"type": "http"}:
            details = {"scheme": entry.get("scheme"), "bearerFormat": entry.get("bearerFormat")}
        case {"type": "oauth2"}:
            details = {"flows": entry.get("flows")}
        case {"type": "openIdConnect"}:
            details = {"openIdConnectUrl": entry.get("openIdConnectUrl")}
        case {"type": str()}:
            details = {}
        case _:
            logger.debug("Skipping security scheme %r without a type", name)
            return None

    return AuthScheme.model_construct(
        name=name,
        type=entry["type"],
        description=entry.get("description"),
        details={k: v for k, v in details.items() if v is not None},
    )


def _classify(schemes: list[AuthScheme]) -> str:
    if not schemes:
        return "none"
    if len(schemes) > 1:
        return "multiple"
    # A lone scheme of another type (mutualTLS) counts as no auth.
    if schemes[0].type in RECOGNIZED_TYPES:
        return schemes[0].type
    return "none"
