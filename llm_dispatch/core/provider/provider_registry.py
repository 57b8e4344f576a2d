"""Provider registry for looking up provider implementations by identifier."""

from collections.abc import Iterable

from llm_dispatch.core.exceptions import UnknownProviderError
from llm_dispatch.llms import LLMS, BaseLLM


class ProviderRegistry:
    """Ordered, read-only set of provider implementations.

    Responsibilities:
    - Hold the provider classes known at process start
    - Look up a provider class by its ``provider_name``

    There is no mutation API; the set is fixed once constructed.
    """

    def __init__(self, providers: Iterable[type[BaseLLM]] = LLMS) -> None:
        """Initialize the registry.

        Args:
            providers: Provider classes in lookup order.

        Raises:
            ValueError: If two providers share an identifier.
        """
        self._providers: tuple[type[BaseLLM], ...] = tuple(providers)
        seen: set[str] = set()
        for cls in self._providers:
            if not cls.provider_name:
                raise ValueError(f"Provider class '{cls.__name__}' has no provider_name")
            if cls.provider_name in seen:
                raise ValueError(f"Duplicate provider identifier '{cls.provider_name}'")
            seen.add(cls.provider_name)

    def find(self, provider_name: str) -> type[BaseLLM] | None:
        """Get the provider class for an identifier.

        Args:
            provider_name: The identifier to look up.

        Returns:
            The provider class if found, None otherwise.
        """
        for cls in self._providers:
            if cls.provider_name == provider_name:
                return cls
        return None

    def require(self, provider_name: str) -> type[BaseLLM]:
        """Get the provider class for an identifier or fail loudly.

        Raises:
            UnknownProviderError: If no provider has this identifier.
        """
        cls = self.find(provider_name)
        if cls is None:
            raise UnknownProviderError(provider_name)
        return cls

    def exists(self, provider_name: str) -> bool:
        return self.find(provider_name) is not None

    def list_all(self) -> tuple[type[BaseLLM], ...]:
        return self._providers

    def provider_names(self) -> list[str]:
        return [cls.provider_name for cls in self._providers]


provider_registry = ProviderRegistry()
