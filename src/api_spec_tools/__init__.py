"""Structured facts (auth, endpoint index, endpoint details) from parsed OpenAPI documents."""

from api_spec_tools.parser.auth import detect_auth
from api_spec_tools.parser.base import (
    AuthInfo,
    AuthScheme,
    EndpointDetails,
    EndpointInfo,
    json_schema,
    validate_auth_info,
    validate_endpoint_details,
    validate_endpoint_info,
    validate_output,
)
from api_spec_tools.parser.identifiers import build_endpoint_id
from api_spec_tools.parser.swagger import get_endpoint_by_id, list_endpoints
from api_spec_tools.tools import TOOL_DEFINITIONS, run_tool

__all__ = [
    "AuthInfo",
    "AuthScheme",
    "EndpointDetails",
    "EndpointInfo",
    "TOOL_DEFINITIONS",
    "build_endpoint_id",
    "detect_auth",
    "get_endpoint_by_id",
    "json_schema",
    "list_endpoints",
    "run_tool",
    "validate_auth_info",
    "validate_endpoint_details",
    "validate_endpoint_info",
    "validate_output",
]
