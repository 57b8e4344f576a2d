"""Base class for provider implementations.

Every provider exposes the same capability set: completion, chat and
fill-in-middle calls, a FIM capability flag, model alias conversion and
request header construction. Subclasses override only the pieces where
their backend diverges.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import aclosing
from typing import Any, ClassVar

import httpx

from llm_dispatch.core.constants import DEFAULT_CONTEXT_LENGTH, DEFAULT_MAX_TOKENS, FALLBACK_MODEL
from llm_dispatch.core.exceptions import FimNotSupportedError, LLMRequestError
from llm_dispatch.core.models import (
    ChatMessage,
    CompletionOptions,
    LLMOptions,
    ProviderDefaults,
    RequestOptions,
)

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 90.0

LOG_SEPARATOR = "=" * 74


def _error_detail(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or response.reason_phrase


class BaseLLM:
    """Uniform client contract shared by all provider implementations.

    Class attributes:
        provider_name: Unique registry identifier
        default_options: Static defaults applied under explicit options
        model_conversion: Alias table consulted by _convert_model_name
    """

    provider_name: ClassVar[str] = ""
    default_options: ClassVar[ProviderDefaults] = ProviderDefaults()
    # Alias to backend model id; unknown names pass through unchanged
    model_conversion: ClassVar[Mapping[str, str]] = {}

    def __init__(self, options: LLMOptions) -> None:
        defaults = self.default_options
        completion_options = options.completion_options

        requested_model = (
            options.model or completion_options.model or defaults.model or FALLBACK_MODEL
        )
        max_tokens = completion_options.max_tokens
        if max_tokens is None:
            max_tokens = defaults.completion_options.max_tokens
        if max_tokens is None:
            max_tokens = DEFAULT_MAX_TOKENS

        self.model = self._convert_model_name(requested_model)
        self.title = options.title or requested_model
        self.api_key = options.api_key
        self.api_base = options.api_base or defaults.api_base
        self.context_length = (
            options.context_length or defaults.context_length or DEFAULT_CONTEXT_LENGTH
        )
        self.completion_options = dataclasses.replace(
            defaults.completion_options.merged_with(completion_options),
            model=self.model,
            max_tokens=max_tokens,
        )
        self.system_message = options.system_message
        self.capabilities = options.capabilities
        self.request_options = options.request_options or RequestOptions()
        self.unique_id = options.unique_id
        self.write_log = options.write_log

        logger.debug(
            f"Constructed '{self.provider_name}' client | Model: {self.model} | "
            f"Base: {self.api_base or '<default>'}"
        )

    # Capability queries and per-provider hooks

    def supports_fim(self) -> bool:
        return False

    def supports_images(self) -> bool:
        return bool(self.capabilities and self.capabilities.upload_image)

    def _convert_model_name(self, model: str) -> str:
        return self.model_conversion.get(model, model)

    def _get_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        headers.update(self.request_options.headers)
        return headers

    def _url(self, path: str) -> str:
        if not self.api_base:
            raise ValueError(f"No API base configured for provider '{self.provider_name}'")
        return f"{self.api_base.rstrip('/')}/{path.lstrip('/')}"

    def _completion_params(self, overrides: CompletionOptions | None) -> CompletionOptions:
        merged = self.completion_options.merged_with(overrides)
        if overrides is not None and overrides.model:
            merged = dataclasses.replace(merged, model=self._convert_model_name(overrides.model))
        return merged

    def _with_system_message(self, messages: Sequence[ChatMessage]) -> list[ChatMessage]:
        if self.system_message and not any(m.role == "system" for m in messages):
            return [ChatMessage(role="system", content=self.system_message), *messages]
        return list(messages)

    # Transport helpers

    def _http_client(self) -> httpx.AsyncClient:
        verify = True if self.request_options.verify_ssl is None else self.request_options.verify_ssl
        return httpx.AsyncClient(
            timeout=self.request_options.timeout or DEFAULT_REQUEST_TIMEOUT,
            headers=self._get_headers(),
            verify=verify,
        )

    async def _stream_lines(self, url: str, body: dict[str, Any]) -> AsyncGenerator[str, None]:
        async with self._http_client() as client:
            try:
                async with client.stream("POST", url, json=body) as response:
                    if response.is_error:
                        await response.aread()
                        raise LLMRequestError(
                            self.provider_name, response.status_code, _error_detail(response)
                        )
                    async for line in response.aiter_lines():
                        if line.strip():
                            yield line
            except httpx.RequestError as e:
                raise LLMRequestError(self.provider_name, None, str(e)) from e

    async def _stream_sse(self, url: str, body: dict[str, Any]) -> AsyncGenerator[dict[str, Any], None]:
        """Yield decoded JSON payloads of ``data:`` events until ``[DONE]``."""
        async with aclosing(self._stream_lines(url, body)) as lines:
            async for line in lines:
                if not line.startswith("data:"):
                    continue
                data = line[len("data:") :].strip()
                if data == "[DONE]":
                    break
                yield json.loads(data)

    # Prompt log

    async def _log_interaction(self, prompt: str, completion: str, options: CompletionOptions) -> None:
        if self.write_log is None:
            return
        settings = "\n".join(f"{key}: {value}" for key, value in options.explicit_fields().items())
        await self.write_log(
            f"Settings:\n{settings}\n\n############################################\n\n"
            f"{prompt}\n{LOG_SEPARATOR}\n{LOG_SEPARATOR}\nCompletion:\n\n{completion}\n\n"
        )

    # Backend hooks

    def _stream_complete(
        self, prompt: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        raise NotImplementedError

    def _stream_chat(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        raise NotImplementedError

    def _stream_fim(
        self, prefix: str, suffix: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        raise FimNotSupportedError(self.provider_name)

    # Public request API

    async def stream_complete(
        self, prompt: str, options: CompletionOptions | None = None
    ) -> AsyncGenerator[str, None]:
        params = self._completion_params(options)
        chunks: list[str] = []
        async for chunk in self._stream_complete(prompt, params):
            chunks.append(chunk)
            yield chunk
        await self._log_interaction(prompt, "".join(chunks), params)

    async def complete(self, prompt: str, options: CompletionOptions | None = None) -> str:
        return "".join([chunk async for chunk in self.stream_complete(prompt, options)])

    async def stream_chat(
        self, messages: Sequence[ChatMessage], options: CompletionOptions | None = None
    ) -> AsyncGenerator[str, None]:
        params = self._completion_params(options)
        full_messages = self._with_system_message(messages)
        chunks: list[str] = []
        async for chunk in self._stream_chat(full_messages, params):
            chunks.append(chunk)
            yield chunk
        prompt = "\n\n".join(f"<{m.role}>\n{m.content}" for m in full_messages)
        await self._log_interaction(prompt, "".join(chunks), params)

    async def chat(
        self, messages: Sequence[ChatMessage], options: CompletionOptions | None = None
    ) -> ChatMessage:
        content = "".join([chunk async for chunk in self.stream_chat(messages, options)])
        return ChatMessage(role="assistant", content=content)

    async def stream_fim(
        self, prefix: str, suffix: str, options: CompletionOptions | None = None
    ) -> AsyncGenerator[str, None]:
        """Fill the gap between ``prefix`` and ``suffix``.

        Callers should check ``supports_fim()`` first.

        Raises:
            FimNotSupportedError: If the provider has no fill-in-middle support
        """
        if not self.supports_fim():
            raise FimNotSupportedError(self.provider_name)
        params = self._completion_params(options)
        chunks: list[str] = []
        async for chunk in self._stream_fim(prefix, suffix, params):
            chunks.append(chunk)
            yield chunk
        await self._log_interaction(f"{prefix}<FIM>{suffix}", "".join(chunks), params)

    async def fim(self, prefix: str, suffix: str, options: CompletionOptions | None = None) -> str:
        return "".join([chunk async for chunk in self.stream_fim(prefix, suffix, options)])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.provider_name!r}, model={self.model!r})"
