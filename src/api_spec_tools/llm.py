"""LLM client wrapper around litellm.

Provides a unified interface for calling any LLM model supported by litellm.
"""

from litellm import completion

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class LlmClient:
    """Wrapper for LLM API calls via litellm."""

    def __init__(self, model: str | None = None):
        self.model = model or DEFAULT_MODEL

    def chat(self, messages: list[dict], tools: list[dict] | None = None):
        """Send a conversation (optionally with tool definitions) and return the reply message."""
        kwargs = {"model": self.model, "messages": messages}
        if tools:
            kwargs["tools"] = tools
        response = completion(**kwargs)
        return response.choices[0].message
