from pydantic import BaseModel, Field
from typing import Optional, List

from ..core.capabilities.models import ProviderCapabilities


class ModelDescriptor(BaseModel):
    """Model entry of a provider configuration."""
    id: str
    name: str
    context_length: int
    deprecated: bool = False
    capabilities: ProviderCapabilities


class RateLimits(BaseModel):
    """Informational rate-limit hints."""
    requests_per_minute: int
    tokens_per_minute: int


class ProviderConfiguration(BaseModel):
    """Descriptive provider configuration, built on demand."""
    id: str
    name: str
    default_model: str
    models: List[ModelDescriptor] = Field(default_factory=list)
    rate_limits: Optional[RateLimits] = None


class ProviderInfo(BaseModel):
    """Registry summary of one adapter."""
    id: str
    name: str
    supported_models: List[str]
    default_model: str


class ProviderRequirements(BaseModel):
    """Capability constraints used for provider recommendations."""
    supports_system_messages: Optional[bool] = None
    max_context_length: Optional[int] = None
    supported_roles: Optional[List[str]] = None
