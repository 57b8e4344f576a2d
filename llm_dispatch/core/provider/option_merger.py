"""Completion option merging.

Layers, lowest to highest precedence: provider defaults, call-site base
options, description-level options. ``model`` and ``max_tokens`` follow
their own fallback chains so that both are always set.
"""

import dataclasses

from llm_dispatch.core.constants import DEFAULT_MAX_TOKENS, FALLBACK_MODEL
from llm_dispatch.core.models import CompletionOptions, ModelDescription, ProviderDefaults


def resolve_model(description: ModelDescription, provider_defaults: ProviderDefaults) -> str:
    # An empty string in the description counts as unset
    return description.model or provider_defaults.model or FALLBACK_MODEL


def resolve_max_tokens(
    call_site: CompletionOptions, provider_defaults: ProviderDefaults
) -> int:
    if call_site.max_tokens is not None:
        return call_site.max_tokens
    if provider_defaults.completion_options.max_tokens is not None:
        return provider_defaults.completion_options.max_tokens
    return DEFAULT_MAX_TOKENS


def merge_completion_options(
    description: ModelDescription,
    provider_defaults: ProviderDefaults,
    base_options: CompletionOptions | None = None,
) -> CompletionOptions:
    """Combine all option sources into one effective CompletionOptions.

    Never mutates its inputs; always returns a new instance with ``model``
    and ``max_tokens`` set.
    """
    call_site = (base_options or CompletionOptions()).merged_with(description.completion_options)
    merged = provider_defaults.completion_options.merged_with(call_site)
    return dataclasses.replace(
        merged,
        model=resolve_model(description, provider_defaults),
        max_tokens=resolve_max_tokens(call_site, provider_defaults),
    )
