"""Agent tool definitions over a loaded OpenAPI document.

``TOOL_DEFINITIONS`` uses the function-calling format understood by litellm;
``run_tool`` executes one call against a document and returns JSON-ready data.
"""

import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from api_spec_tools.errors import ToolArgumentsError, UnknownToolError
from api_spec_tools.parser.auth import detect_auth
from api_spec_tools.parser.swagger import get_endpoint_by_id, list_endpoints


class GetEndpointArgs(BaseModel):
    id: str = Field(description="Endpoint identifier as returned by list_endpoints, e.g. GET__pet__petId")


_NO_ARGS = {"type": "object", "properties": {}}

TOOL_DEFINITIONS = [
    {
        "type": "function",
        "function": {
            "name": "detect_auth",
            "description": "Describe the authentication schemes and global security requirements of the API.",
            "parameters": _NO_ARGS,
        },
    },
    {
        "type": "function",
        "function": {
            "name": "list_endpoints",
            "description": "List all endpoints of the API with their id, method, path, summary and tags.",
            "parameters": _NO_ARGS,
        },
    },
    {
        "type": "function",
        "function": {
            "name": "get_endpoint_by_id",
            "description": (
                "Get parameters, request body, responses and security of one endpoint "
                "by the id from list_endpoints."
            ),
            "parameters": GetEndpointArgs.model_json_schema(),
        },
    },
]


def run_tool(document: dict, name: str, arguments: dict | str | None = None) -> Any:
    """Execute a tool call and return its result as plain JSON-compatible data."""
    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments) if arguments.strip() else {}
        except ValueError as e:
            raise ToolArgumentsError(f"Arguments for {name} are not valid JSON: {e}") from e
    arguments = arguments or {}

    if name == "detect_auth":
        return detect_auth(document).to_dict()
    if name == "list_endpoints":
        return [endpoint.to_dict() for endpoint in list_endpoints(document)]
    if name == "get_endpoint_by_id":
        try:
            args = GetEndpointArgs.model_validate(arguments)
        except ValidationError as e:
            raise ToolArgumentsError(f"Invalid arguments for {name}: {e}") from e
        endpoint = get_endpoint_by_id(document, args.id)
        if endpoint is None:
            return {"error": f"No endpoint with id '{args.id}'"}
        return endpoint.to_dict()
    raise UnknownToolError(name)
