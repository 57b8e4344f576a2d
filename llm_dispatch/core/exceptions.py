"""
Exception hierarchy for llm-dispatch.

All exceptions inherit from LLMDispatchError, allowing callers to
catch every library-specific error with a single except clause.

Example:
    >>> try:
    ...     llm = resolve_from_provider_and_options("nope", options)
    ... except LLMDispatchError as e:
    ...     print(f"Resolution failed: {e}")
"""

from __future__ import annotations


class LLMDispatchError(Exception):
    """Base exception for all llm-dispatch errors."""

    pass


class UnknownProviderError(LLMDispatchError):
    """Raised when a provider identifier is not in the registry.

    Only the strict entry points raise this. Description-driven resolution
    reports an unknown provider by returning None instead.

    Attributes:
        provider_name: The identifier that failed to resolve
    """

    def __init__(self, provider_name: str) -> None:
        self.provider_name = provider_name
        super().__init__(f'Unknown LLM provider type "{provider_name}"')


class FimNotSupportedError(LLMDispatchError):
    """Raised when fill-in-middle is requested from a provider without it."""

    def __init__(self, provider_name: str) -> None:
        self.provider_name = provider_name
        super().__init__(f"Provider '{provider_name}' does not support fill-in-middle completion")


class LLMRequestError(LLMDispatchError):
    """Raised when an upstream provider request fails.

    Attributes:
        provider_name: Provider that issued the request
        status_code: HTTP status code, or None for transport failures
        detail: Response body or transport error description
    """

    def __init__(self, provider_name: str, status_code: int | None, detail: object) -> None:
        self.provider_name = provider_name
        self.status_code = status_code
        self.detail = detail
        status = f"HTTP {status_code}" if status_code is not None else "transport error"
        super().__init__(f"{provider_name} request failed ({status}): {detail}")

    def __repr__(self) -> str:
        return (
            f"LLMRequestError(provider_name={self.provider_name!r}, "
            f"status_code={self.status_code!r}, detail={self.detail!r})"
        )
