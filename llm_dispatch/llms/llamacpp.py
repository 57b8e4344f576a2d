from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from llm_dispatch.core.models import ChatMessage, CompletionOptions, ProviderDefaults
from llm_dispatch.llms.base import BaseLLM


class LlamaCpp(BaseLLM):
    """llama.cpp server ``/completion`` endpoint; chat is rendered as plain text."""

    provider_name = "llama.cpp"
    default_options = ProviderDefaults(api_base="http://127.0.0.1:8080/")

    def _request_body(self, prompt: str, options: CompletionOptions) -> dict[str, Any]:
        body: dict[str, Any] = {
            "prompt": prompt,
            "n_predict": options.max_tokens,
            "stream": True,
        }
        if options.temperature is not None:
            body["temperature"] = options.temperature
        if options.top_p is not None:
            body["top_p"] = options.top_p
        if options.top_k is not None:
            body["top_k"] = options.top_k
        if options.min_p is not None:
            body["min_p"] = options.min_p
        if options.stop:
            body["stop"] = list(options.stop)
        body.update(options.extra)
        return body

    async def _stream_complete(
        self, prompt: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        body = self._request_body(prompt, options)
        async for event in self._stream_sse(self._url("completion"), body):
            text = event.get("content")
            if text:
                yield text

    async def _stream_chat(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        prompt = "".join(f"{m.role}: {m.content}\n" for m in messages) + "assistant: "
        async for text in self._stream_complete(prompt, options):
            yield text


class Llamafile(LlamaCpp):
    provider_name = "llamafile"
