from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, List


class RenderOptions(BaseModel):
    """
    Per-render configuration supplied by the caller.

    Numeric ranges are intentionally not enforced here: each adapter declares
    its own ranges and reports violations through validate_render_options().
    CamelCase aliases (topP, maxTokens, ...) are accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True)

    model: str = Field(..., description="Model identifier")
    temperature: Optional[float] = Field(None, description="Sampling temperature")
    top_p: Optional[float] = Field(None, alias="topP", description="Nucleus sampling parameter")
    max_tokens: Optional[int] = Field(None, alias="maxTokens", description="Maximum tokens to generate")
    system_override: Optional[str] = Field(
        None,
        alias="systemOverride",
        description="Replaces the joined system instructions verbatim"
    )
    variables: Optional[Dict[str, Any]] = Field(None, description="Values substituted into the user template")
    presence_penalty: Optional[float] = Field(None, alias="presencePenalty", description="Presence penalty (Copilot)")
    frequency_penalty: Optional[float] = Field(None, alias="frequencyPenalty", description="Frequency penalty (Copilot)")


class ProviderPayload(BaseModel):
    """Rendered request body for one provider, ready to send verbatim."""
    provider: str
    model: str
    content: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


class ValidationResult(BaseModel):
    """Outcome of a validation pass; errors are human-readable strings."""
    is_valid: bool
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        return cls(is_valid=len(errors) == 0, errors=list(errors))


class ParsedResponse(BaseModel):
    """Plain text extracted from a provider response plus its metadata."""
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ModelInfo(BaseModel):
    max_tokens: int
    context_length: int
    supports_system_messages: bool
