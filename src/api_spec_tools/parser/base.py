"""Output contracts for facts extracted from an OpenAPI document.

The auth inspector, endpoint lister and detail resolver all return these
models. They double as boundary validators for data exchanged with an
agent tool-calling layer.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from api_spec_tools.errors import OutputValidationError

AuthType = Literal["none", "apiKey", "http", "oauth2", "openIdConnect", "multiple"]

SecurityRequirement = dict[str, list[str]]


class _Contract(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        """Dump with camelCase keys, leaving out absent optional fields."""
        # Records from the core are built unvalidated and may hold off-type values.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, warnings=False)


class AuthScheme(_Contract):
    """A single security scheme declared under components.securitySchemes."""

    name: str = Field(description="Name of the authentication scheme")
    type: str = Field(description="Type of authentication (apiKey, oauth2, http, etc.)")
    description: str | None = Field(
        default=None, description="Description of the authentication scheme"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional details specific to the authentication type",
    )


class AuthInfo(_Contract):
    """Authentication summary of a whole document."""

    type: AuthType = Field(
        description='Primary authentication type or "multiple" if multiple schemes exist'
    )
    schemes: list[AuthScheme] = Field(
        description="Array of authentication schemes available in the API"
    )
    global_security: list[SecurityRequirement] | None = Field(
        default=None,
        description="Global security requirements that apply to all operations",
    )


class EndpointInfo(_Contract):
    """Summary view of one operation."""

    id: str = Field(min_length=1, description="Unique identifier for the endpoint (METHOD__path)")
    path: str = Field(min_length=1, description="API path for the endpoint")
    method: str = Field(min_length=1, description="HTTP method (GET, POST, PUT, DELETE, etc.)")
    summary: str | None = Field(default=None, description="Brief summary of what the endpoint does")
    description: str | None = Field(default=None, description="Detailed description of the endpoint")
    operation_id: str | None = Field(default=None, description="Unique operation identifier")
    tags: list[str] | None = Field(default=None, description="Tags associated with the endpoint")


class EndpointDetails(EndpointInfo):
    """Full view of one operation: the summary plus request/response shapes."""

    parameters: list[Any] | None = Field(
        default=None, description="Parameters accepted by the endpoint"
    )
    request_body: Any = Field(default=None, description="Request body schema and requirements")
    responses: dict[str, Any] | None = Field(
        default=None, description="Response schemas by status code"
    )
    security: list[SecurityRequirement] | None = Field(
        default=None, description="Security requirements specific to this endpoint"
    )

    def summary_view(self) -> EndpointInfo:
        """Drop the detail fields, keeping what list_endpoints reports."""
        return EndpointInfo.model_construct(**{name: getattr(self, name) for name in EndpointInfo.model_fields})


CONTRACTS: dict[str, TypeAdapter] = {
    "auth": TypeAdapter(AuthInfo),
    "endpoint": TypeAdapter(EndpointInfo),
    "endpoints": TypeAdapter(list[EndpointInfo]),
    "endpoint-details": TypeAdapter(EndpointDetails),
}


def validate_output(kind: str, data: Any) -> Any:
    """Validate raw data (camelCase keys) against one of the contracts.

    Raises OutputValidationError listing every mismatching field.
    """
    try:
        adapter = CONTRACTS[kind]
    except KeyError:
        raise ValueError(f"Unknown contract '{kind}', expected one of: {', '.join(CONTRACTS)}") from None
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        errors = [
            (".".join(str(part) for part in err["loc"]) or "<root>", err["msg"])
            for err in e.errors()
        ]
        raise OutputValidationError(kind, errors) from e


def validate_auth_info(data: Any) -> AuthInfo:
    return validate_output("auth", data)


def validate_endpoint_info(data: Any) -> EndpointInfo:
    return validate_output("endpoint", data)


def validate_endpoint_details(data: Any) -> EndpointDetails:
    return validate_output("endpoint-details", data)


def json_schema(kind: str) -> dict:
    """JSON Schema of a contract, as used for tool definitions."""
    if kind not in CONTRACTS:
        raise ValueError(f"Unknown contract '{kind}', expected one of: {', '.join(CONTRACTS)}")
    return CONTRACTS[kind].json_schema(by_alias=True)
