"""
Provider capability models for feature detection and option validation.

Defines what each provider's wire format accepts so that option validation
and provider recommendations are driven by declarations instead of
hardcoded conditionals.
"""

from typing import Dict, List
from pydantic import BaseModel, Field, ConfigDict


class ProviderCapabilities(BaseModel):
    """Static capability declaration of a provider adapter."""
    model_config = ConfigDict(extra="forbid")

    # Message structure
    supports_system_messages: bool = Field(True, description="Accepts system instructions")
    supports_multiple_messages: bool = Field(True, description="Accepts multi-turn message lists")

    # Tuning parameters
    supports_temperature: bool = Field(True, description="Supports temperature parameter")
    supports_top_p: bool = Field(True, description="Supports top_p parameter")
    supports_max_tokens: bool = Field(True, description="Supports max_tokens parameter")

    # Limits
    max_context_length: int = Field(..., description="Maximum context window in tokens")

    # Wire format
    supported_message_roles: List[str] = Field(
        default_factory=lambda: ["system", "user", "assistant"],
        description="Roles accepted inside the messages array"
    )


class ModelSpec(BaseModel):
    """Descriptive metadata for one model of one provider."""
    id: str
    display_name: str
    family: str = "unknown"
    context_length: int = 4096
    max_output_tokens: int = 4096
    deprecated: bool = False


PROVIDER_CAPABILITIES: Dict[str, ProviderCapabilities] = {
    "openai": ProviderCapabilities(
        supports_system_messages=True,
        supports_multiple_messages=True,
        supports_temperature=True,
        supports_top_p=True,
        supports_max_tokens=True,
        max_context_length=128000,  # GPT-4 Turbo
        supported_message_roles=["system", "user", "assistant"],
    ),

    "anthropic": ProviderCapabilities(
        supports_system_messages=True,
        supports_multiple_messages=True,
        supports_temperature=True,
        supports_top_p=True,
        supports_max_tokens=True,
        max_context_length=200000,  # Claude 3
        supported_message_roles=["user", "assistant"],  # system is a top-level field
    ),

    "meta": ProviderCapabilities(
        supports_system_messages=True,
        supports_multiple_messages=True,
        supports_temperature=True,
        supports_top_p=True,
        supports_max_tokens=True,
        max_context_length=128000,  # Llama 3.1
        supported_message_roles=["system", "user", "assistant"],
    ),

    "microsoft-copilot": ProviderCapabilities(
        supports_system_messages=True,
        supports_multiple_messages=True,
        supports_temperature=True,
        supports_top_p=True,
        supports_max_tokens=True,
        max_context_length=32768,  # gpt-4-32k
        supported_message_roles=["system", "user", "assistant"],
    ),
}
