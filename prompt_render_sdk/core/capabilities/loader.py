from __future__ import annotations

from typing import Dict, List

from ...config.constants import DEFAULT_MODEL_CONTEXT_LENGTH, DEFAULT_MODEL_MAX_TOKENS
from ...config.models import PROVIDER_MODELS
from .models import PROVIDER_CAPABILITIES, ModelSpec, ProviderCapabilities


def get_capabilities_for_provider(provider_id: str) -> ProviderCapabilities:
    """Return a copy of the capability declaration for a built-in provider.

    Raises:
        KeyError: If the provider has no declaration
    """
    return PROVIDER_CAPABILITIES[provider_id].model_copy(deep=True)


def get_provider_model_ids(provider_id: str) -> List[str]:
    """Model ids of a provider's table, in declaration order."""
    return list(PROVIDER_MODELS.get(provider_id, {}).keys())


def get_model_spec(provider_id: str, model_id: str) -> ModelSpec:
    """Return descriptive metadata for a model.

    Unknown models get a fallback spec; this only happens if a provider's
    supported models and its table drift apart.
    """
    table: Dict[str, dict] = PROVIDER_MODELS.get(provider_id, {})
    entry = table.get(model_id)
    if entry is None:
        return ModelSpec(
            id=model_id,
            display_name=model_id,
            context_length=DEFAULT_MODEL_CONTEXT_LENGTH,
            max_output_tokens=DEFAULT_MODEL_MAX_TOKENS,
        )
    return ModelSpec(**entry)
