"""Ollama local inference server (newline-delimited JSON streaming)."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from typing import Any

from llm_dispatch.core.models import ChatMessage, CompletionOptions, ProviderDefaults
from llm_dispatch.llms.base import BaseLLM


class Ollama(BaseLLM):
    provider_name = "ollama"
    default_options = ProviderDefaults(api_base="http://localhost:11434/")

    model_conversion = {
        "mistral-7b": "mistral:7b",
        "deepseek-7b": "deepseek-coder:6.7b",
        "codellama-7b": "codellama:7b",
        "codellama-13b": "codellama:13b",
        "codellama-34b": "codellama:34b",
        "llama3-8b": "llama3:8b",
        "llama3-70b": "llama3:70b",
        "llama3.1-8b": "llama3.1:8b",
        "starcoder2-3b": "starcoder2:3b",
        "qwen2.5-coder-1.5b": "qwen2.5-coder:1.5b",
    }

    def supports_fim(self) -> bool:
        return True

    @staticmethod
    def _model_options(options: CompletionOptions) -> dict[str, Any]:
        model_options: dict[str, Any] = {"num_predict": options.max_tokens}
        if options.temperature is not None:
            model_options["temperature"] = options.temperature
        if options.top_p is not None:
            model_options["top_p"] = options.top_p
        if options.top_k is not None:
            model_options["top_k"] = options.top_k
        if options.min_p is not None:
            model_options["min_p"] = options.min_p
        if options.stop:
            model_options["stop"] = list(options.stop)
        model_options.update(options.extra)
        return model_options

    async def _stream_ndjson(self, path: str, body: dict[str, Any]) -> AsyncGenerator[dict[str, Any], None]:
        async for line in self._stream_lines(self._url(path), body):
            yield json.loads(line)

    async def _stream_chat(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        body = {
            "model": options.model,
            "messages": [m.to_dict() for m in messages],
            "options": self._model_options(options),
            "stream": True,
        }
        async for chunk in self._stream_ndjson("api/chat", body):
            text = chunk.get("message", {}).get("content")
            if text:
                yield text

    async def _stream_complete(
        self, prompt: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        body: dict[str, Any] = {
            "model": options.model,
            "prompt": prompt,
            "raw": True,
            "options": self._model_options(options),
            "stream": True,
        }
        async for chunk in self._stream_ndjson("api/generate", body):
            text = chunk.get("response")
            if text:
                yield text

    async def _stream_fim(
        self, prefix: str, suffix: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        body = {
            "model": options.model,
            "prompt": prefix,
            "suffix": suffix,
            "options": self._model_options(options),
            "stream": True,
        }
        async for chunk in self._stream_ndjson("api/generate", body):
            text = chunk.get("response")
            if text:
                yield text
