import json

import pytest

from dream_ai import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ERole,
    ResponseFormat,
    ToolDeclaration,
    ToolFunction,
)


def test_message_accepts_enum_and_string_roles():
    assert ChatMessage(role=ERole.SYSTEM, content="x").role == "system"
    assert ChatMessage(role="assistant", content="y").role == "assistant"


def test_default_message_is_empty_user_turn():
    msg = ChatMessage()
    assert msg.role == "user"
    assert msg.content == ""


def test_empty_request_emits_every_field():
    payload = json.loads(ChatRequest().build_string())
    assert list(payload) == [
        "model", "messages", "stream", "max_tokens", "stop", "temperature",
        "top_p", "top_k", "frequency_penalty", "n", "response_format", "tools",
    ]
    assert payload["model"] == ""
    assert payload["messages"] is None
    assert payload["stream"] is False
    assert payload["max_tokens"] == 0
    assert payload["stop"] is None
    assert payload["tools"] is None


def test_compact_wire_form():
    request = ChatRequest(
        model="gpt-x",
        messages=[ChatMessage(role=ERole.USER, content="hi")],
        max_tokens=16,
    )
    wire = request.build_string()
    assert '"model":"gpt-x"' in wire
    assert '"messages":[{"role":"user","content":"hi"}]' in wire
    assert '"max_tokens":16' in wire


def test_tool_parameters_pass_through_untouched():
    params = {
        "type": "object",
        "properties": {"city": {"type": "string"}, "days": {"type": "integer", "minimum": 1}},
        "required": ["city"],
        "additionalProperties": False,
    }
    request = ChatRequest(
        tools=[ToolDeclaration(function=ToolFunction(name="forecast", description="weather", parameters=params, strict=True))],
        response_format=ResponseFormat(),
    )
    payload = request.build_payload()
    function = payload["tools"][0]["function"]
    assert list(function) == ["description", "name", "parameters", "strict"]
    assert function["parameters"] == params
    assert payload["tools"][0]["type"] == "function"
    assert payload["response_format"] == {"type": "text"}


@pytest.mark.parametrize(
    "contents",
    [
        [],
        [("user", "only")],
        [("system", "be brief"), ("user", "one"), ("assistant", "two"), ("user", "three")],
    ],
)
def test_round_trip_preserves_message_order(contents):
    request = ChatRequest(model="m", messages=[ChatMessage(role=r, content=c) for r, c in contents])
    restored = ChatRequest.model_validate_json(request.build_string())
    assert restored == request
    assert [(m.role, m.content) for m in restored.messages] == contents


def test_response_parses_full_shape():
    body = {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "deepseek-r1",
        "choices": [{
            "index": 0,
            "message": {"role": "assistant", "content": "42", "reasoning_content": "thinking"},
            "finish_reason": "stop",
        }],
        "usage": {
            "prompt_tokens": 5,
            "completion_tokens": 7,
            "total_tokens": 12,
            "completion_tokens_details": {"reasoning_tokens": 3},
        },
        "system_fingerprint": "fp_1",
    }
    response = ChatResponse.model_validate_json(json.dumps(body))
    assert response.created == 1700000000
    assert response.choices[0].message.reasoning_content == "thinking"
    assert response.choices[0].finish_reason == "stop"
    assert response.usage.completion_tokens_details.reasoning_tokens == 3
    assert response.system_fingerprint == "fp_1"
    assert response.first_content() == "42"


def test_response_tolerates_missing_fields():
    response = ChatResponse.model_validate_json('{"choices": [{"index": 0}], "extra": true}')
    assert response.usage is None
    assert response.first_content() is None


def test_round_trip_without_message_list():
    request = ChatRequest(model="m")
    wire = request.build_string()
    assert '"messages":null' in wire
    restored = ChatRequest.model_validate_json(wire)
    assert restored == request
    assert restored.messages is None
