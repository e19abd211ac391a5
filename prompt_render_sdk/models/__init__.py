"""Data models shared by all provider adapters."""

from .prompt import PromptRule, PromptVariable, StructuredPrompt, VariableType
from .provider import (
    ModelDescriptor,
    ProviderConfiguration,
    ProviderInfo,
    ProviderRequirements,
    RateLimits,
)
from .render import ModelInfo, ParsedResponse, ProviderPayload, RenderOptions, ValidationResult

__all__ = [
    "StructuredPrompt",
    "PromptRule",
    "PromptVariable",
    "VariableType",
    "RenderOptions",
    "ProviderPayload",
    "ValidationResult",
    "ParsedResponse",
    "ModelInfo",
    "ModelDescriptor",
    "RateLimits",
    "ProviderConfiguration",
    "ProviderInfo",
    "ProviderRequirements",
]
