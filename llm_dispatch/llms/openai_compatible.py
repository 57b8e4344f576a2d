"""Backends that speak the OpenAI wire format with their own defaults."""

from __future__ import annotations


from llm_dispatch.core.models import CompletionOptions, ProviderDefaults
from llm_dispatch.llms.openai import OpenAI


class Mistral(OpenAI):
    provider_name = "mistral"
    default_options = ProviderDefaults(
        model="codestral-latest",
        api_base="https://api.mistral.ai/v1/",
        completion_options=CompletionOptions(max_tokens=4096),
    )
    model_conversion = {
        "mistral-7b": "open-mistral-7b",
        "mistral-8x7b": "open-mixtral-8x7b",
        "mistral-8x22b": "open-mixtral-8x22b",
        "mistral-small": "mistral-small-latest",
        "mistral-large": "mistral-large-latest",
        "codestral": "codestral-latest",
    }

    def supports_fim(self) -> bool:
        return True


class Deepseek(OpenAI):
    provider_name = "deepseek"
    default_options = ProviderDefaults(
        model="deepseek-coder",
        api_base="https://api.deepseek.com/",
        context_length=128_000,
        completion_options=CompletionOptions(max_tokens=2048),
    )
    fim_endpoint = "beta/completions"

    def supports_fim(self) -> bool:
        return True


class Groq(OpenAI):
    provider_name = "groq"
    default_options = ProviderDefaults(api_base="https://api.groq.com/openai/v1/")
    model_conversion = {
        "mistral-8x7b": "mixtral-8x7b-32768",
        "gemma2-9b-it": "gemma2-9b-it",
        "llama3-8b": "llama3-8b-8192",
        "llama3-70b": "llama3-70b-8192",
        "llama3.1-8b": "llama-3.1-8b-instant",
        "llama3.1-70b": "llama-3.1-70b-versatile",
    }


class Together(OpenAI):
    provider_name = "together"
    default_options = ProviderDefaults(api_base="https://api.together.xyz/v1/")
    model_conversion = {
        "mistral-7b": "mistralai/Mistral-7B-Instruct-v0.1",
        "codellama-7b": "togethercomputer/CodeLlama-7b-Instruct",
        "codellama-13b": "togethercomputer/CodeLlama-13b-Instruct",
        "codellama-34b": "togethercomputer/CodeLlama-34b-Instruct",
        "llama3-8b": "meta-llama/Llama-3-8b-chat-hf",
        "llama3-70b": "meta-llama/Llama-3-70b-chat-hf",
    }


class Fireworks(OpenAI):
    provider_name = "fireworks"
    default_options = ProviderDefaults(api_base="https://api.fireworks.ai/inference/v1/")
    model_conversion = {
        "starcoder-7b": "accounts/fireworks/models/starcoder-7b",
        "starcoder-16b": "accounts/fireworks/models/starcoder-16b",
    }


class OpenRouter(OpenAI):
    provider_name = "openrouter"
    default_options = ProviderDefaults(
        model="gpt-4o-mini",
        api_base="https://openrouter.ai/api/v1/",
    )

    def _get_headers(self) -> dict[str, str]:
        headers = super()._get_headers()
        headers.setdefault("X-Title", "llm-dispatch")
        return headers


class LMStudio(OpenAI):
    provider_name = "lmstudio"
    default_options = ProviderDefaults(api_base="http://localhost:1234/v1/")


class Vllm(OpenAI):
    provider_name = "vllm"


class Nvidia(OpenAI):
    provider_name = "nvidia"
    default_options = ProviderDefaults(api_base="https://integrate.api.nvidia.com/v1/")
    model_conversion = {
        "mistral-large": "mistralai/mistral-large",
        "llama3-70b": "meta/llama3-70b-instruct",
        "llama3-8b": "meta/llama3-8b-instruct",
    }


class DeepInfra(OpenAI):
    provider_name = "deepinfra"
    default_options = ProviderDefaults(api_base="https://api.deepinfra.com/v1/openai/")


class SambaNova(OpenAI):
    provider_name = "sambanova"
    default_options = ProviderDefaults(api_base="https://api.sambanova.ai/v1/")


class Msty(OpenAI):
    provider_name = "msty"
    default_options = ProviderDefaults(api_base="http://localhost:10000/v1/")
