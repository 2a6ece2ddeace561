"""Answers questions about an API by letting an LLM call the extraction tools."""

import json
import logging

from api_spec_tools.errors import AssistantError, ToolError
from api_spec_tools.llm import LlmClient
from api_spec_tools.tools import TOOL_DEFINITIONS, run_tool

logger = logging.getLogger(__name__)

MAX_TOOL_ROUNDS = 8

SYSTEM_PROMPT = """You answer questions about an HTTP API described by an OpenAPI document.
You cannot see the document directly. Use the tools:
- detect_auth: authentication schemes and global security requirements
- list_endpoints: every endpoint with its id, method, path and summary
- get_endpoint_by_id: full details of one endpoint (use an id from list_endpoints)
Answer concisely and only from tool results."""


class ApiAssistant:
    """Tool-calling loop bound to one document."""

    def __init__(self, document: dict, model: str | None = None, max_rounds: int = MAX_TOOL_ROUNDS):
        self.document = document
        self.client = LlmClient(model=model)
        self.max_rounds = max_rounds

    def ask(self, question: str) -> str:
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": question},
        ]
        for _ in range(self.max_rounds):
            message = self.client.chat(messages, tools=TOOL_DEFINITIONS)
            tool_calls = getattr(message, "tool_calls", None)
            if not tool_calls:
                return message.content or ""

            messages.append(
                {
                    "role": "assistant",
                    "content": message.content,
                    "tool_calls": [
                        {
                            "id": call.id,
                            "type": "function",
                            "function": {"name": call.function.name, "arguments": call.function.arguments},
                        }
                        for call in tool_calls
                    ],
                }
            )
            for call in tool_calls:
                messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": call.id,
                        "content": self._run(call.function.name, call.function.arguments),
                    }
                )

        raise AssistantError(f"No answer after {self.max_rounds} tool rounds")

    def _run(self, name: str, arguments: str | None) -> str:
        logger.info("Tool call: %s(%s)", name, arguments or "")
        try:
            result = run_tool(self.document, name, arguments)
        except ToolError as e:
            # Report back to the model so it can correct the call
            logger.warning("Tool call failed: %s", e)
            result = {"error": str(e)}
        return json.dumps(result, ensure_ascii=False)
