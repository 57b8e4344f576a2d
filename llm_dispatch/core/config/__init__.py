"""Environment-driven configuration."""

from llm_dispatch.core.config.config import Config
from llm_dispatch.core.config.schema import ConfigSchema, EnvVarSpec
from llm_dispatch.core.config.validation import ConfigError, load_env_var, validate_all

__all__ = [
    "Config",
    "ConfigError",
    "ConfigSchema",
    "EnvVarSpec",
    "load_env_var",
    "validate_all",
]
