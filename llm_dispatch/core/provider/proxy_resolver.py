"""Session credential substitution for the managed proxy provider."""

import dataclasses
from urllib.parse import urljoin

from llm_dispatch.core.constants import PROXY_API_PATH, PROXY_PROVIDER_NAME
from llm_dispatch.core.models import IdeSettings, LLMOptions


def is_proxy_provider(provider_name: str) -> bool:
    return provider_name == PROXY_PROVIDER_NAME


def apply_proxy_session(options: LLMOptions, ide_settings: IdeSettings) -> LLMOptions:
    """Return ``options`` with the session token and relay endpoint applied.

    The session token always replaces the configured API key; a missing
    token yields an empty key. The endpoint is rewritten only when a remote
    config server is configured.
    """
    api_base = options.api_base
    if ide_settings.remote_config_server_url:
        api_base = urljoin(ide_settings.remote_config_server_url, PROXY_API_PATH)
    return dataclasses.replace(
        options,
        api_key=ide_settings.user_token or "",
        api_base=api_base,
    )
