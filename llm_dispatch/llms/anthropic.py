"""Anthropic Messages API."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from llm_dispatch.core.models import ChatMessage, CompletionOptions, ProviderDefaults
from llm_dispatch.llms.base import BaseLLM

ANTHROPIC_VERSION = "2023-06-01"


class Anthropic(BaseLLM):
    provider_name = "anthropic"
    default_options = ProviderDefaults(
        model="claude-3-5-sonnet-latest",
        api_base="https://api.anthropic.com/v1/",
        context_length=200_000,
        completion_options=CompletionOptions(max_tokens=8192),
    )

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "anthropic-version": ANTHROPIC_VERSION,
        }
        if self.api_key:
            headers["x-api-key"] = self.api_key
        headers.update(self.request_options.headers)
        return headers

    def _request_body(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            "model": options.model,
            "max_tokens": options.max_tokens,
            "stream": True,
            "messages": [m.to_dict() for m in messages if m.role != "system"],
        }
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        if system:
            body["system"] = system
        if options.temperature is not None:
            body["temperature"] = options.temperature
        if options.top_p is not None:
            body["top_p"] = options.top_p
        if options.top_k is not None:
            body["top_k"] = options.top_k
        if options.stop:
            body["stop_sequences"] = [s for s in options.stop if s.strip()]
        body.update(options.extra)
        return body

    async def _stream_chat(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        body = self._request_body(messages, options)
        async for event in self._stream_sse(self._url("messages"), body):
            if event.get("type") == "content_block_delta":
                text = event.get("delta", {}).get("text")
                if text:
                    yield text

    async def _stream_complete(
        self, prompt: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        messages = self._with_system_message([ChatMessage(role="user", content=prompt)])
        async for text in self._stream_chat(messages, options):
            yield text
