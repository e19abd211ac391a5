"""Built-in adapter catalogue and default registry wiring."""

import logging
import os
import threading
from typing import Dict, List, Optional, Sequence, Type

from ...config.constants import ENABLED_PROVIDERS_ENV_VAR
from ...providers.anthropic.adapter import AnthropicAdapter
from ...providers.base import ProviderAdapter
from ...providers.meta.adapter import MetaAdapter
from ...providers.microsoft_copilot.adapter import MicrosoftCopilotAdapter
from ...providers.openai.adapter import OpenAIAdapter
from .factory import ProviderFactory
from .registry import ProviderRegistry

logger = logging.getLogger(__name__)

# Registration order; find_best_provider prefers earlier entries
BUILTIN_ADAPTERS: Dict[str, Type[ProviderAdapter]] = {
    "openai": OpenAIAdapter,
    "anthropic": AnthropicAdapter,
    "meta": MetaAdapter,
    "microsoft-copilot": MicrosoftCopilotAdapter,
}

_configured_registry: Optional[ProviderRegistry] = None
_configure_lock = threading.Lock()


def create_builtin_adapters(provider_ids: Optional[Sequence[str]] = None) -> List[ProviderAdapter]:
    """Instantiate built-in adapters in catalogue order.

    Args:
        provider_ids: Ids to include; None means all. Unknown ids are skipped.
    """
    if provider_ids is None:
        return [adapter_cls() for adapter_cls in BUILTIN_ADAPTERS.values()]

    wanted = set(provider_ids)
    for provider_id in wanted - set(BUILTIN_ADAPTERS):
        logger.warning(f"Unknown built-in provider '{provider_id}' skipped")

    return [
        adapter_cls()
        for provider_id, adapter_cls in BUILTIN_ADAPTERS.items()
        if provider_id in wanted
    ]


def enabled_provider_ids() -> Optional[List[str]]:
    """Provider ids enabled through the environment, or None for all."""
    raw = os.getenv(ENABLED_PROVIDERS_ENV_VAR, "")
    ids = [part.strip() for part in raw.split(",") if part.strip()]
    return ids or None


def create_default_registry() -> ProviderRegistry:
    """Fresh registry holding the enabled built-in adapters."""
    registry = ProviderFactory.create_registry()
    for adapter in create_builtin_adapters(enabled_provider_ids()):
        registry.register_adapter(adapter)
    return registry


def get_default_registry() -> ProviderRegistry:
    """Process-wide registry, populated with the enabled built-ins on first use."""
    global _configured_registry

    registry = ProviderFactory.get_registry()
    with _configure_lock:
        if _configured_registry is not registry:
            ProviderFactory.configure_default_registry(create_builtin_adapters(enabled_provider_ids()))
            _configured_registry = registry
    return registry
