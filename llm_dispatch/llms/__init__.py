"""Provider implementations, in registry order."""

from llm_dispatch.llms.anthropic import Anthropic
from llm_dispatch.llms.azure import Azure
from llm_dispatch.llms.base import BaseLLM
from llm_dispatch.llms.continue_proxy import ContinueProxy
from llm_dispatch.llms.cortex import Cortex
from llm_dispatch.llms.gemini import Gemini
from llm_dispatch.llms.llamacpp import LlamaCpp, Llamafile
from llm_dispatch.llms.mock import Mock
from llm_dispatch.llms.ollama import Ollama
from llm_dispatch.llms.openai import OpenAI
from llm_dispatch.llms.openai_compatible import (
    DeepInfra,
    Deepseek,
    Fireworks,
    Groq,
    LMStudio,
    Mistral,
    Msty,
    Nvidia,
    OpenRouter,
    SambaNova,
    Together,
    Vllm,
)

LLMS: tuple[type[BaseLLM], ...] = (
    Anthropic,
    Llamafile,
    Ollama,
    Together,
    LlamaCpp,
    OpenAI,
    LMStudio,
    Mistral,
    Gemini,
    Azure,
    DeepInfra,
    Groq,
    Fireworks,
    Cortex,
    ContinueProxy,
    Deepseek,
    Msty,
    OpenRouter,
    Nvidia,
    Vllm,
    SambaNova,
    Mock,
)

__all__ = [
    "LLMS",
    "Anthropic",
    "Azure",
    "BaseLLM",
    "ContinueProxy",
    "Cortex",
    "DeepInfra",
    "Deepseek",
    "Fireworks",
    "Gemini",
    "Groq",
    "LMStudio",
    "LlamaCpp",
    "Llamafile",
    "Mistral",
    "Mock",
    "Msty",
    "Nvidia",
    "Ollama",
    "OpenAI",
    "OpenRouter",
    "SambaNova",
    "Together",
    "Vllm",
]
