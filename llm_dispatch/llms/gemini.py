"""Google Gemini generateContent API."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from llm_dispatch.core.models import ChatMessage, CompletionOptions, ProviderDefaults
from llm_dispatch.llms.base import BaseLLM


class Gemini(BaseLLM):
    provider_name = "gemini"
    default_options = ProviderDefaults(
        model="gemini-1.5-pro-latest",
        api_base="https://generativelanguage.googleapis.com/v1beta/",
        context_length=1_048_576,
        completion_options=CompletionOptions(max_tokens=8192),
    )

    def _get_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-goog-api-key"] = self.api_key
        headers.update(self.request_options.headers)
        return headers

    @staticmethod
    def _generation_config(options: CompletionOptions) -> dict[str, Any]:
        config: dict[str, Any] = {"maxOutputTokens": options.max_tokens}
        if options.temperature is not None:
            config["temperature"] = options.temperature
        if options.top_p is not None:
            config["topP"] = options.top_p
        if options.top_k is not None:
            config["topK"] = options.top_k
        if options.stop:
            config["stopSequences"] = list(options.stop)
        config.update(options.extra)
        return config

    def _request_body(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> dict[str, Any]:
        # Gemini names the assistant role "model"
        body: dict[str, Any] = {
            "contents": [
                {
                    "role": "model" if m.role == "assistant" else "user",
                    "parts": [{"text": m.content}],
                }
                for m in messages
                if m.role != "system"
            ],
            "generationConfig": self._generation_config(options),
        }
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        if system:
            body["systemInstruction"] = {"parts": [{"text": system}]}
        return body

    async def _stream_chat(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        url = self._url(f"models/{options.model}:streamGenerateContent") + "?alt=sse"
        async for chunk in self._stream_sse(url, self._request_body(messages, options)):
            for candidate in chunk.get("candidates", [])[:1]:
                for part in candidate.get("content", {}).get("parts", []):
                    text = part.get("text")
                    if text:
                        yield text

    async def _stream_complete(
        self, prompt: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        messages = self._with_system_message([ChatMessage(role="user", content=prompt)])
        async for text in self._stream_chat(messages, options):
            yield text
