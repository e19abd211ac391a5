"""
Provider Adapters Layer

This layer contains all provider-specific payload implementations.
Each provider adapter translates the provider-agnostic StructuredPrompt
into the provider's request body and validates payloads of that format.
"""

from .base import BaseProviderAdapter, ProviderAdapter
from .errors import AdapterError, RenderError, ResponseParseError
from .openai.adapter import OpenAIAdapter
from .anthropic.adapter import AnthropicAdapter
from .meta.adapter import MetaAdapter
from .microsoft_copilot.adapter import MicrosoftCopilotAdapter

__all__ = [
    "ProviderAdapter",
    "BaseProviderAdapter",
    "AdapterError",
    "RenderError",
    "ResponseParseError",
    "OpenAIAdapter",
    "AnthropicAdapter",
    "MetaAdapter",
    "MicrosoftCopilotAdapter",
]
