"""RESPX-based HTTP mocking fixtures for testing.

Streaming provider responses are served as complete bodies; httpx still
delivers them line by line through ``aiter_lines``.
"""

import json

import httpx
import pytest
import respx


def sse_body(*payloads: dict, done: bool = True) -> bytes:
    """Encode payloads as server-sent ``data:`` events."""
    events = [f"data: {json.dumps(payload)}\n\n" for payload in payloads]
    if done:
        events.append("data: [DONE]\n\n")
    return "".join(events).encode()


def sse_response(*payloads: dict, done: bool = True) -> httpx.Response:
    return httpx.Response(
        200,
        content=sse_body(*payloads, done=done),
        headers={"content-type": "text/event-stream"},
    )


# === OpenAI Response Fixtures ===


@pytest.fixture
def openai_streaming_chunks():
    """OpenAI streaming response chunks."""
    return [
        b'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1677652288,"model":"gpt-4","choices":[{"index":0,"delta":{"role":"assistant","content":""},"finish_reason":null}]}\n\n',
        b'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1677652288,"model":"gpt-4","choices":[{"index":0,"delta":{"content":"Hello"},"finish_reason":null}]}\n\n',
        b'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1677652288,"model":"gpt-4","choices":[{"index":0,"delta":{"content":"!"},"finish_reason":null}]}\n\n',
        b'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1677652288,"model":"gpt-4","choices":[{"index":0,"delta":{},"finish_reason":"stop"}]}\n\n',
        b"data: [DONE]\n\n",
    ]


@pytest.fixture
def openai_streaming_response(openai_streaming_chunks):
    return httpx.Response(
        200,
        content=b"".join(openai_streaming_chunks),
        headers={"content-type": "text/event-stream"},
    )


# === Anthropic Response Fixtures ===


@pytest.fixture
def anthropic_streaming_response():
    """Anthropic Messages API event stream."""
    events = [
        ("message_start", {"type": "message_start", "message": {"id": "msg_test123"}}),
        ("content_block_start", {"type": "content_block_start", "index": 0}),
        (
            "content_block_delta",
            {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "Hello"}},
        ),
        (
            "content_block_delta",
            {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": " there"}},
        ),
        ("message_stop", {"type": "message_stop"}),
    ]
    body = "".join(f"event: {name}\ndata: {json.dumps(data)}\n\n" for name, data in events)
    return httpx.Response(200, content=body.encode(), headers={"content-type": "text/event-stream"})


# === Ollama Response Fixtures ===


@pytest.fixture
def ollama_chat_response():
    lines = [
        {"model": "codellama:7b", "message": {"role": "assistant", "content": "Hi"}, "done": False},
        {"model": "codellama:7b", "message": {"role": "assistant", "content": " there"}, "done": False},
        {"model": "codellama:7b", "message": {"role": "assistant", "content": ""}, "done": True},
    ]
    body = "\n".join(json.dumps(line) for line in lines) + "\n"
    return httpx.Response(200, content=body.encode(), headers={"content-type": "application/x-ndjson"})


# === RESPX Mock Fixtures ===


@pytest.fixture
def mock_openai_api():
    with respx.mock(base_url="https://api.openai.com") as respx_mock:
        yield respx_mock


@pytest.fixture
def mock_anthropic_api():
    with respx.mock(base_url="https://api.anthropic.com") as respx_mock:
        yield respx_mock
