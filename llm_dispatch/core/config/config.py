"""Runtime configuration for llm-dispatch.

Values are read from the environment (and a ``.env`` file loaded at
package import) once, when the Config is constructed.
"""

import hashlib

from llm_dispatch.core.config.schema import ConfigSchema
from llm_dispatch.core.config.validation import load_env_var
from llm_dispatch.core.models import IdeSettings


class Config:
    """Configuration with direct property access to all settings.

    Raises ConfigError on construction if any variable fails validation.
    """

    def __init__(self) -> None:
        self._log_level: str = load_env_var(ConfigSchema.LOG_LEVEL)
        self._request_timeout: float = load_env_var(ConfigSchema.REQUEST_TIMEOUT)
        self._log_prompts: bool = load_env_var(ConfigSchema.LLMD_LOG_PROMPTS)
        self._user_token: str | None = load_env_var(ConfigSchema.LLMD_USER_TOKEN)
        self._remote_config_server_url: str | None = load_env_var(
            ConfigSchema.LLMD_REMOTE_CONFIG_SERVER_URL
        )

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def request_timeout(self) -> float:
        return self._request_timeout

    @property
    def log_prompts(self) -> bool:
        return self._log_prompts

    @property
    def ide_settings(self) -> IdeSettings:
        return IdeSettings(
            user_token=self._user_token,
            remote_config_server_url=self._remote_config_server_url,
        )

    @property
    def user_token_hash(self) -> str:
        return (
            "<not-set>"
            if not self._user_token
            else "sha256:" + hashlib.sha256(self._user_token.encode()).hexdigest()[:16] + "..."
        )
