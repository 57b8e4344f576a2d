from __future__ import annotations

from llm_dispatch.core.models import ProviderDefaults
from llm_dispatch.llms.openai import OpenAI


class Cortex(OpenAI):
    """Hosted completion gateway serving versioned Codestral/Mistral models.

    Public ``cortex-*`` aliases are mapped to the backend's model ids. The
    gateway authenticates on ``x-api-key`` in addition to the bearer token.
    """

    provider_name = "cortex"
    default_options = ProviderDefaults(
        api_base="https://fb0hb1aid6.execute-api.us-east-1.amazonaws.com/prod",
    )

    model_conversion = {
        "cortex-tab": "codestral-latest",
        "cortex-tab-2405": "codestral-2405",
        "cortex-chat": "mistral-large-latest",
    }

    def supports_fim(self) -> bool:
        return True

    def _get_headers(self) -> dict[str, str]:
        headers = super()._get_headers()
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers
