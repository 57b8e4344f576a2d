"""OpenAI chat completions API and the family of compatible backends."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any, ClassVar

from llm_dispatch.core.models import ChatMessage, CompletionOptions, ProviderDefaults
from llm_dispatch.llms.base import BaseLLM


class OpenAI(BaseLLM):
    provider_name = "openai"
    default_options = ProviderDefaults(api_base="https://api.openai.com/v1/")

    # Relative to api_base; only used when supports_fim() is True
    fim_endpoint: ClassVar[str] = "fim/completions"

    def _request_body(self, options: CompletionOptions) -> dict[str, Any]:
        params = options.to_request_params()
        params["model"] = options.model
        params["stream"] = True
        return params

    @staticmethod
    def _chunk_text(chunk: dict[str, Any]) -> str:
        choices = chunk.get("choices") or []
        if not choices:
            return ""
        choice = choices[0]
        delta = choice.get("delta")
        if delta is not None:
            return delta.get("content") or ""
        return choice.get("text") or ""

    async def _stream_chat(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        body = self._request_body(options)
        body["messages"] = [message.to_dict() for message in messages]
        async for chunk in self._stream_sse(self._url("chat/completions"), body):
            text = self._chunk_text(chunk)
            if text:
                yield text

    async def _stream_complete(
        self, prompt: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        messages = self._with_system_message([ChatMessage(role="user", content=prompt)])
        async for text in self._stream_chat(messages, options):
            yield text

    async def _stream_fim(
        self, prefix: str, suffix: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        body = self._request_body(options)
        body["prompt"] = prefix
        body["suffix"] = suffix
        async for chunk in self._stream_sse(self._url(self.fim_endpoint), body):
            text = self._chunk_text(chunk)
            if text:
                yield text
