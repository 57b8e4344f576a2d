"""Provider resolution package.

- ProviderRegistry: Ordered lookup of provider implementations by identifier
- merge_completion_options: Pure merge of completion option layers
- apply_proxy_session: Session credential substitution for the managed proxy
- ClientFactory: Turns model descriptions into provider clients
"""

from llm_dispatch.core.provider.client_factory import (
    ClientFactory,
    client_factory,
    resolve_from_description,
    resolve_from_provider_and_options,
)
from llm_dispatch.core.provider.option_merger import merge_completion_options
from llm_dispatch.core.provider.provider_registry import ProviderRegistry, provider_registry
from llm_dispatch.core.provider.proxy_resolver import apply_proxy_session, is_proxy_provider

__all__ = [
    "ClientFactory",
    "ProviderRegistry",
    "apply_proxy_session",
    "client_factory",
    "is_proxy_provider",
    "merge_completion_options",
    "provider_registry",
    "resolve_from_description",
    "resolve_from_provider_and_options",
]
