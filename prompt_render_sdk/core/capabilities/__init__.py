"""Capability registry layer.

This layer handles:
- Provider capability declarations
- Static model metadata lookup with fallbacks
"""

from .loader import get_capabilities_for_provider, get_model_spec, get_provider_model_ids
from .models import PROVIDER_CAPABILITIES, ModelSpec, ProviderCapabilities

__all__ = [
    "get_capabilities_for_provider",
    "get_model_spec",
    "get_provider_model_ids",
    "ProviderCapabilities",
    "ModelSpec",
    "PROVIDER_CAPABILITIES",
]
