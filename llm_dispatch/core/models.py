"""Data model for model descriptions and resolved provider options.

Configuration arrives from the IDE as camelCase JSON (``apiKey``,
``completionOptions.maxTokens``); the ``from_dict`` constructors accept
either camelCase or snake_case keys and produce immutable dataclasses.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

ReadFile = Callable[[str], Awaitable[str]]
WriteLog = Callable[[str], Awaitable[None]]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case(key: str) -> str:
    """Convert a camelCase configuration key to snake_case."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _normalize_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    return {snake_case(key): value for key, value in data.items()}


@dataclass(frozen=True)
class CompletionOptions:
    """Request parameters for a single completion or chat call.

    ``None`` means "not set" so that partial instances can be layered as
    overrides. Knobs the resolver does not model explicitly travel in
    ``extra`` untouched.
    """

    model: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None
    min_p: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    stop: tuple[str, ...] | None = None
    stream: bool | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CompletionOptions:
        if not data:
            return cls()
        known = {f.name for f in dataclasses.fields(cls)} - {"extra"}
        values: dict[str, Any] = {}
        extra: dict[str, Any] = dict(data.get("extra") or {})
        for key, value in _normalize_keys(data).items():
            if key == "extra":
                continue
            if key in known:
                values[key] = value
            else:
                extra[key] = value
        stop = values.get("stop")
        if isinstance(stop, str):
            values["stop"] = (stop,)
        elif stop is not None:
            values["stop"] = tuple(stop)
        return cls(**values, extra=extra)

    def explicit_fields(self) -> dict[str, Any]:
        """Return the named fields that carry a value."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name != "extra" and getattr(self, f.name) is not None
        }

    def merged_with(self, override: CompletionOptions | None) -> CompletionOptions:
        """Return a new instance where values set on ``override`` win."""
        if override is None:
            return dataclasses.replace(self, extra=dict(self.extra))
        return dataclasses.replace(
            self,
            **override.explicit_fields(),
            extra={**self.extra, **override.extra},
        )

    def to_request_params(self) -> dict[str, Any]:
        params = {key: value for key, value in self.explicit_fields().items() if key != "stream"}
        if "stop" in params:
            params["stop"] = list(params["stop"])
        params.update(self.extra)
        return params


@dataclass(frozen=True)
class ModelCapabilities:
    upload_image: bool | None = None
    tools: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ModelCapabilities | None:
        if data is None:
            return None
        normalized = _normalize_keys(data)
        return cls(upload_image=normalized.get("upload_image"), tools=normalized.get("tools"))


@dataclass(frozen=True)
class RequestOptions:
    """Transport settings attached to every request a client makes."""

    timeout: float | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    verify_ssl: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RequestOptions | None:
        if data is None:
            return None
        normalized = _normalize_keys(data)
        return cls(
            timeout=normalized.get("timeout"),
            headers=dict(normalized.get("headers") or {}),
            verify_ssl=normalized.get("verify_ssl"),
        )


@dataclass(frozen=True)
class ModelDescription:
    """Declarative, user-authored description of which backend and model to use.

    Attributes:
        provider: Registry identifier of the provider implementation
        title: Display name, used by callers as a uniqueness key
        model: Model identifier or provider alias; may be omitted
        api_key: Secret credential for the backend
        api_base: Endpoint override
        context_length: Context window override
        completion_options: Partial completion option overrides
        system_message: System prompt, possibly containing {{ file }} references
        capabilities: Capability hints supplied by the user
        request_options: Transport settings
    """

    provider: str
    title: str | None = None
    model: str | None = None
    api_key: str | None = None
    api_base: str | None = None
    context_length: int | None = None
    completion_options: CompletionOptions | None = None
    system_message: str | None = None
    capabilities: ModelCapabilities | None = None
    request_options: RequestOptions | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModelDescription:
        normalized = _normalize_keys(data)
        provider = normalized.get("provider")
        if not provider:
            raise ValueError("Model description requires a 'provider' field")
        completion_options = normalized.get("completion_options")
        return cls(
            provider=provider,
            title=normalized.get("title"),
            model=normalized.get("model"),
            api_key=normalized.get("api_key"),
            api_base=normalized.get("api_base"),
            context_length=normalized.get("context_length"),
            completion_options=(
                CompletionOptions.from_dict(completion_options)
                if completion_options is not None
                else None
            ),
            system_message=normalized.get("system_message"),
            capabilities=ModelCapabilities.from_dict(normalized.get("capabilities")),
            request_options=RequestOptions.from_dict(normalized.get("request_options")),
        )


@dataclass(frozen=True)
class ProviderDefaults:
    """Static per-provider defaults, one record per provider implementation."""

    model: str | None = None
    api_base: str | None = None
    context_length: int | None = None
    completion_options: CompletionOptions = field(default_factory=CompletionOptions)


@dataclass(frozen=True)
class IdeSettings:
    """IDE-wide session state consumed by the managed proxy provider."""

    user_token: str | None = None
    remote_config_server_url: str | None = None


@dataclass(frozen=True)
class LLMOptions:
    """Fully assembled options a provider implementation is constructed with."""

    provider: str
    title: str | None = None
    model: str | None = None
    api_key: str | None = None
    api_base: str | None = None
    context_length: int | None = None
    completion_options: CompletionOptions = field(default_factory=CompletionOptions)
    system_message: str | None = None
    capabilities: ModelCapabilities | None = None
    request_options: RequestOptions | None = None
    unique_id: str | None = None
    write_log: WriteLog | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}
