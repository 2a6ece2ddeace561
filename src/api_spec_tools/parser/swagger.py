"""Endpoint index and single-endpoint lookup over an OpenAPI document.

Works on the already-parsed document (a plain mapping). Operations are
keyed by the identifiers from ``identifiers.py``.
"""

import logging
from collections.abc import Mapping

from .base import EndpointDetails, EndpointInfo
from .identifiers import HTTP_METHODS, build_endpoint_id, method_from_id

logger = logging.getLogger(__name__)


def list_endpoints(document: dict) -> list[EndpointInfo]:
    """List every operation in path order, then fixed HTTP method order."""
    endpoints = []
    for path, path_item in _iter_path_items(document):
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, Mapping):
                continue
            endpoints.append(
                EndpointInfo.model_construct(**_summary_fields(build_endpoint_id(method, path), path, method, operation))
            )
    return endpoints


def get_endpoint_by_id(document: dict, endpoint_id: str) -> EndpointDetails | None:
    """Return full details of the operation named by ``endpoint_id``, or None."""
    if not document.get("paths"):
        return None

    method = method_from_id(endpoint_id)
    if method not in HTTP_METHODS:
        logger.debug("Malformed or unsupported endpoint id: %r", endpoint_id)
        return None

    for path, path_item in _iter_path_items(document):
        if build_endpoint_id(method, path) != endpoint_id:
            continue
        operation = path_item.get(method)
        # Distinct paths can normalize to the same id; keep looking.
        if not isinstance(operation, Mapping):
            continue
        return EndpointDetails.model_construct(
            **_summary_fields(endpoint_id, path, method, operation),
            parameters=operation.get("parameters"),
            request_body=operation.get("requestBody"),
            responses=_responses(operation.get("responses")),
            security=operation.get("security"),
        )

    logger.debug("No endpoint matches id %r", endpoint_id)
    return None


def _iter_path_items(document: dict):
    for path, path_item in (document.get("paths") or {}).items():
        if isinstance(path_item, Mapping):
            yield path, path_item


def _responses(responses):
    # YAML loads unquoted status codes (200:) as ints
    if not isinstance(responses, Mapping):
        return responses
    return {str(status_code): resp for status_code, resp in responses.items()}


def _summary_fields(endpoint_id: str, path: str, method: str, operation: Mapping) -> dict:
    return {
        "id": endpoint_id,
        "path": path,
        "method": method.upper(),
        "summary": operation.get("summary"),
        "description": operation.get("description"),
        "operation_id": operation.get("operationId"),
        "tags": operation.get("tags"),
    }
