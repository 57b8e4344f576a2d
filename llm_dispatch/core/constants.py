"""Resolution-wide constants."""

# Used when neither the model description nor the provider names a model
FALLBACK_MODEL = "codellama-7b"

DEFAULT_MAX_TOKENS = 4096
DEFAULT_CONTEXT_LENGTH = 8192

# Provider routed through the managed relay; credentials come from the IDE session
PROXY_PROVIDER_NAME = "continue-proxy"
PROXY_API_PATH = "/proxy/v1"
