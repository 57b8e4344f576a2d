from __future__ import annotations

from collections.abc import AsyncGenerator

from llm_dispatch.core.models import ChatMessage, CompletionOptions, ProviderDefaults
from llm_dispatch.llms.base import BaseLLM

DEFAULT_MOCK_COMPLETION = "Test Completion"


class Mock(BaseLLM):
    """Network-free provider that answers every call with a canned completion.

    Set ``completionOptions.completion`` to change the answer.
    """

    provider_name = "mock"
    default_options = ProviderDefaults(model="mock-model")

    def supports_fim(self) -> bool:
        return True

    def _canned(self, options: CompletionOptions) -> str:
        return str(options.extra.get("completion", DEFAULT_MOCK_COMPLETION))

    async def _stream_complete(
        self, prompt: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        yield self._canned(options)

    async def _stream_chat(
        self, messages: list[ChatMessage], options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        yield self._canned(options)

    async def _stream_fim(
        self, prefix: str, suffix: str, options: CompletionOptions
    ) -> AsyncGenerator[str, None]:
        yield self._canned(options)
