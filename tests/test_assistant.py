import json
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch, MagicMock

import pytest

from api_spec_tools.assistant import ApiAssistant
from api_spec_tools.errors import AssistantError
from api_spec_tools.parser.loader import load_document

FIXTURES = Path(__file__).parent / "fixtures"


def _tool_call(call_id: str, name: str, arguments: str = "{}"):
    return SimpleNamespace(id=call_id, function=SimpleNamespace(name=name, arguments=arguments))


def _message(content=None, tool_calls=None):
    return SimpleNamespace(content=content, tool_calls=tool_calls)


class TestApiAssistant:
    @patch("api_spec_tools.assistant.LlmClient")
    def test_answer_without_tools(self, MockLlmClient):
        mock_client = MagicMock()
        mock_client.chat.return_value = _message("It uses OAuth2.")
        MockLlmClient.return_value = mock_client

        assistant = ApiAssistant(load_document(FIXTURES / "petstore3.yaml"), model="test-model")
        assert assistant.ask("What auth?") == "It uses OAuth2."
        MockLlmClient.assert_called_once_with(model="test-model")

    @patch("api_spec_tools.assistant.LlmClient")
    def test_tool_results_fed_back(self, MockLlmClient):
        mock_client = MagicMock()
        mock_client.chat.side_effect = [
            _message(tool_calls=[_tool_call("call_1", "get_endpoint_by_id", '{"id": "PUT__pet"}')]),
            _message("PUT /pet needs petstore_auth."),
        ]
        MockLlmClient.return_value = mock_client

        assistant = ApiAssistant(load_document(FIXTURES / "petstore31.yaml"))
        answer = assistant.ask("What does PUT /pet need?")

        assert answer == "PUT /pet needs petstore_auth."
        messages = mock_client.chat.call_args_list[1][0][0]
        assert messages[2]["role"] == "assistant"
        assert messages[2]["tool_calls"][0]["function"]["name"] == "get_endpoint_by_id"
        tool_msg = messages[3]
        assert tool_msg["role"] == "tool"
        assert tool_msg["tool_call_id"] == "call_1"
        assert json.loads(tool_msg["content"])["operationId"] == "updatePet"

    @patch("api_spec_tools.assistant.LlmClient")
    def test_tool_error_reported_to_model(self, MockLlmClient):
        mock_client = MagicMock()
        mock_client.chat.side_effect = [
            _message(tool_calls=[_tool_call("call_1", "no_such_tool")]),
            _message("Sorry."),
        ]
        MockLlmClient.return_value = mock_client

        assistant = ApiAssistant(load_document(FIXTURES / "petstore31.yaml"))
        assert assistant.ask("?") == "Sorry."
        tool_msg = mock_client.chat.call_args_list[1][0][0][-1]
        assert "Unknown tool" in json.loads(tool_msg["content"])["error"]

    @patch("api_spec_tools.assistant.LlmClient")
    def test_gives_up_after_max_rounds(self, MockLlmClient):
        mock_client = MagicMock()
        mock_client.chat.return_value = _message(tool_calls=[_tool_call("call_1", "list_endpoints")])
        MockLlmClient.return_value = mock_client

        assistant = ApiAssistant(load_document(FIXTURES / "petstore31.yaml"), max_rounds=2)
        with pytest.raises(AssistantError):
            assistant.ask("loop forever")
        assert mock_client.chat.call_count == 2
