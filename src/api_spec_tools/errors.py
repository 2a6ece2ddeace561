"""Exception hierarchy for api-spec-tools.

The extraction functions themselves never raise for a structurally valid
document; these errors come from the layers around them (loading files,
validating data at the boundary, dispatching agent tool calls).
"""


class ApiSpecToolsError(Exception):
    """Base exception for all api-spec-tools errors."""


class DocumentError(ApiSpecToolsError):
    """An API document could not be read or is not a mapping."""


class OutputValidationError(ApiSpecToolsError):
    """Data does not match one of the output contracts.

    ``errors`` holds one ``(location, message)`` pair per mismatching field.
    """

    def __init__(self, kind: str, errors: list[tuple[str, str]]):
        self.kind = kind
        self.errors = errors
        lines = [f"  {loc}: {msg}" for loc, msg in errors]
        super().__init__(f"Invalid {kind} data ({len(errors)} error(s)):\n" + "\n".join(lines))


class ToolError(ApiSpecToolsError):
    """An agent tool call could not be dispatched."""


class UnknownToolError(ToolError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolArgumentsError(ToolError):
    """Tool call arguments are not valid JSON or miss required fields."""


class AssistantError(ApiSpecToolsError):
    """The assistant did not reach an answer."""
