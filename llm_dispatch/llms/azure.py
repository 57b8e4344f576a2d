"""Azure OpenAI Service deployments."""

from __future__ import annotations

from llm_dispatch.core.models import ProviderDefaults
from llm_dispatch.llms.openai import OpenAI

AZURE_API_VERSION = "2024-02-15-preview"


class Azure(OpenAI):
    """OpenAI wire format routed through a resource deployment.

    ``apiBase`` is the resource endpoint (``https://<resource>.openai.azure.com``)
    and the model name doubles as the deployment name.
    """

    provider_name = "azure"
    default_options = ProviderDefaults()

    def _get_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["api-key"] = self.api_key
        headers.update(self.request_options.headers)
        return headers

    def _url(self, path: str) -> str:
        url = super()._url(f"openai/deployments/{self.model}/{path.lstrip('/')}")
        return f"{url}?api-version={AZURE_API_VERSION}"
