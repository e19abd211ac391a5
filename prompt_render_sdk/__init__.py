"""
Prompt Render SDK - provider-agnostic prompts rendered into provider payloads.

This package turns one StructuredPrompt into the request body of several
LLM providers:
- OpenAI (chat completions)
- Anthropic (Messages API)
- Meta (Llama chat)
- Microsoft Copilot (Azure OpenAI compatible)

Features:
- Capability-aware option validation
- Payload re-validation without the original prompt
- Provider registry with discovery and recommendations
- Response parsing back to plain text
"""

__version__ = "0.1.0"

from .core.registry import (
    DuplicateProviderError,
    ProviderFactory,
    ProviderNotFoundError,
    ProviderRegistry,
    RegistryError,
    create_default_registry,
    get_default_registry,
)
from .core.rendering import PromptRenderer
from .models import (
    ModelInfo,
    ParsedResponse,
    PromptRule,
    PromptVariable,
    ProviderConfiguration,
    ProviderInfo,
    ProviderPayload,
    ProviderRequirements,
    RenderOptions,
    StructuredPrompt,
    ValidationResult,
    VariableType,
)
from .providers import (
    AdapterError,
    AnthropicAdapter,
    BaseProviderAdapter,
    MetaAdapter,
    MicrosoftCopilotAdapter,
    OpenAIAdapter,
    ProviderAdapter,
    RenderError,
    ResponseParseError,
)

__all__ = [
    "__version__",
    "StructuredPrompt",
    "PromptRule",
    "PromptVariable",
    "VariableType",
    "RenderOptions",
    "ProviderPayload",
    "ValidationResult",
    "ParsedResponse",
    "ModelInfo",
    "ProviderConfiguration",
    "ProviderInfo",
    "ProviderRequirements",
    "ProviderAdapter",
    "BaseProviderAdapter",
    "OpenAIAdapter",
    "AnthropicAdapter",
    "MetaAdapter",
    "MicrosoftCopilotAdapter",
    "AdapterError",
    "RenderError",
    "ResponseParseError",
    "ProviderRegistry",
    "ProviderFactory",
    "RegistryError",
    "ProviderNotFoundError",
    "DuplicateProviderError",
    "PromptRenderer",
    "create_default_registry",
    "get_default_registry",
]
