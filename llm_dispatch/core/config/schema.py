"""Declarative schema for environment variable configuration.

Every environment variable the resolver reads is defined here once, with
its default, type and validation rule.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Type for validation (int, str, float, bool)
        description: Human-readable description for docs
        validator: Optional custom validation function
        coerce: Optional function to convert string to target type
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None
    coerce: Callable[[str], Any] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        # First word only, so trailing comments in .env files are tolerated
        coerce=lambda x: (x.split() or [""])[0].upper(),
        validator=lambda x: x in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )

    REQUEST_TIMEOUT = EnvVarSpec(
        name="REQUEST_TIMEOUT",
        default=90.0,
        type_hint=float,
        description="Default timeout in seconds for provider requests",
        validator=lambda x: x > 0,
    )

    LLMD_LOG_PROMPTS = EnvVarSpec(
        name="LLMD_LOG_PROMPTS",
        default=False,
        type_hint=bool,
        description="Write prompts and completions to the CLI log writer",
    )

    # === IDE session settings ===

    LLMD_USER_TOKEN = EnvVarSpec(
        name="LLMD_USER_TOKEN",
        default=None,
        type_hint=str,
        description="Session token substituted as the API key for the managed proxy provider",
    )

    LLMD_REMOTE_CONFIG_SERVER_URL = EnvVarSpec(
        name="LLMD_REMOTE_CONFIG_SERVER_URL",
        default=None,
        type_hint=str,
        description="Remote config server; the managed proxy is reached at its /proxy/v1 path",
        validator=lambda x: x.startswith(("http://", "https://")),
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications."""
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }
