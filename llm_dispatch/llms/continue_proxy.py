from llm_dispatch.core.constants import PROXY_API_PATH, PROXY_PROVIDER_NAME
from llm_dispatch.core.models import ProviderDefaults
from llm_dispatch.llms.openai import OpenAI


class ContinueProxy(OpenAI):
    """OpenAI-compatible relay authenticated with the IDE session token.

    The client factory replaces ``api_key`` and ``api_base`` from IdeSettings,
    so values in the model description are never used for this provider.
    """

    provider_name = PROXY_PROVIDER_NAME
    default_options = ProviderDefaults(api_base=f"http://localhost:3000{PROXY_API_PATH}/")
