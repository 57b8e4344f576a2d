"""Client factory turning model descriptions into provider clients."""

import logging

from llm_dispatch.core.models import (
    CompletionOptions,
    IdeSettings,
    LLMOptions,
    ModelDescription,
    ReadFile,
    WriteLog,
)
from llm_dispatch.core.provider.option_merger import merge_completion_options
from llm_dispatch.core.provider.provider_registry import ProviderRegistry, provider_registry
from llm_dispatch.core.provider.proxy_resolver import apply_proxy_session, is_proxy_provider
from llm_dispatch.core.templating import render_templated_string
from llm_dispatch.llms import BaseLLM

logger = logging.getLogger(__name__)


class ClientFactory:
    """Creates provider client instances.

    Responsibilities:
    - Look up the provider implementation in the registry
    - Merge completion options and render the system message
    - Substitute IDE session credentials for the managed proxy provider

    Every call constructs a new, independent client; nothing is cached.
    """

    def __init__(self, registry: ProviderRegistry = provider_registry) -> None:
        self._registry = registry

    async def resolve_from_description(
        self,
        description: ModelDescription,
        read_file: ReadFile,
        unique_id: str,
        ide_settings: IdeSettings,
        write_log: WriteLog,
        completion_options: CompletionOptions | None = None,
        system_message: str | None = None,
    ) -> BaseLLM | None:
        """Resolve a model description into a client.

        Args:
            description: The user-authored model description.
            read_file: Async file reader used to render system message templates.
            unique_id: Session id attached to the client.
            ide_settings: IDE session state, used by the managed proxy provider.
            write_log: Async prompt log writer attached to the client.
            completion_options: Call-site base completion options.
            system_message: System message used when the description has none.

        Returns:
            A new client, or None if the provider is not registered.
        """
        cls = self._registry.find(description.provider)
        if cls is None:
            logger.debug(f"No provider registered for '{description.provider}'")
            return None

        merged = merge_completion_options(description, cls.default_options, completion_options)

        if description.system_message is not None:
            system_message = description.system_message
        if system_message is not None:
            system_message = await render_templated_string(system_message, read_file)

        options = LLMOptions(
            provider=description.provider,
            title=description.title,
            model=merged.model,
            api_key=description.api_key,
            api_base=description.api_base,
            context_length=description.context_length,
            completion_options=merged,
            system_message=system_message,
            capabilities=description.capabilities,
            request_options=description.request_options,
            unique_id=unique_id,
            write_log=write_log,
        )

        if is_proxy_provider(description.provider):
            options = apply_proxy_session(options, ide_settings)

        return cls(options)

    def resolve_from_provider_and_options(self, provider_name: str, options: LLMOptions) -> BaseLLM:
        """Construct a client from fully assembled options.

        Raises:
            UnknownProviderError: If the provider is not registered.
        """
        cls = self._registry.require(provider_name)
        return cls(options)


client_factory = ClientFactory()


async def resolve_from_description(
    description: ModelDescription,
    read_file: ReadFile,
    unique_id: str,
    ide_settings: IdeSettings,
    write_log: WriteLog,
    completion_options: CompletionOptions | None = None,
    system_message: str | None = None,
) -> BaseLLM | None:
    return await client_factory.resolve_from_description(
        description,
        read_file,
        unique_id,
        ide_settings,
        write_log,
        completion_options,
        system_message,
    )


def resolve_from_provider_and_options(provider_name: str, options: LLMOptions) -> BaseLLM:
    return client_factory.resolve_from_provider_and_options(provider_name, options)
