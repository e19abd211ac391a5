"""Provider registry.

Holds the adapters available to the process, keyed by provider id. Hosts
register adapters at startup; callers look them up by id or ask which
providers can serve a model or a capability profile.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Union

from ...models.provider import ProviderInfo, ProviderRequirements
from ...providers.base import ProviderAdapter
from .errors import DuplicateProviderError, ProviderNotFoundError

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry of provider adapters.

    Iteration order is registration order. Registration is not idempotent:
    to replace an adapter, unregister it first.
    """

    def __init__(self):
        self._adapters: Dict[str, ProviderAdapter] = {}
        self._lock = threading.RLock()

    def register_adapter(self, adapter: ProviderAdapter) -> None:
        """Register an adapter instance.

        Raises:
            DuplicateProviderError: If an adapter with the same id is registered
        """
        with self._lock:
            if adapter.id in self._adapters:
                raise DuplicateProviderError(adapter.id)

            self._adapters[adapter.id] = adapter
        logger.info(f"Registered provider adapter '{adapter.id}' ({adapter.name})")

    def get_adapter(self, provider_id: str) -> ProviderAdapter:
        """Get a registered adapter by id.

        Raises:
            ProviderNotFoundError: If no adapter is registered under the id
        """
        adapter = self._adapters.get(provider_id)
        if adapter is None:
            raise ProviderNotFoundError(provider_id)
        return adapter

    def unregister_adapter(self, provider_id: str) -> None:
        """Remove an adapter.

        Raises:
            ProviderNotFoundError: If no adapter is registered under the id
        """
        with self._lock:
            if provider_id not in self._adapters:
                raise ProviderNotFoundError(provider_id)
            del self._adapters[provider_id]
        logger.info(f"Unregistered provider adapter '{provider_id}'")

    def has_provider(self, provider_id: str) -> bool:
        return provider_id in self._adapters

    def list_providers(self) -> List[ProviderInfo]:
        """Summaries of every registered adapter.

        The default model is read from the adapter at call time.
        """
        return [self._summarize(adapter) for adapter in self.get_all_adapters()]

    def supports_model(self, model: str) -> List[ProviderInfo]:
        """Summaries of the adapters that support ``model``."""
        return [
            self._summarize(adapter)
            for adapter in self.get_all_adapters()
            if adapter.supports(model)
        ]

    def get_all_adapters(self) -> List[ProviderAdapter]:
        with self._lock:
            return list(self._adapters.values())

    def find_best_provider(self, model: str) -> Optional[ProviderAdapter]:
        """First registered adapter supporting ``model``, or None.

        No scoring is applied; registration order decides.
        """
        for adapter in self.get_all_adapters():
            if adapter.supports(model):
                return adapter
        return None

    def get_recommendations(
        self,
        requirements: Union[ProviderRequirements, Dict[str, Any]]
    ) -> List[ProviderInfo]:
        """Summaries of the adapters whose capabilities satisfy every given constraint.

        Args:
            requirements: Constraints; unset fields are not checked

        Returns:
            Matching provider summaries in registration order
        """
        if isinstance(requirements, dict):
            requirements = ProviderRequirements.model_validate(requirements)

        matches = []
        for adapter in self.get_all_adapters():
            caps = adapter.capabilities

            if (requirements.supports_system_messages is not None
                    and caps.supports_system_messages != requirements.supports_system_messages):
                continue

            if (requirements.max_context_length is not None
                    and caps.max_context_length < requirements.max_context_length):
                continue

            if requirements.supported_roles is not None:
                roles = set(caps.supported_message_roles)
                if not all(role in roles for role in requirements.supported_roles):
                    continue

            matches.append(self._summarize(adapter))
        return matches

    def __len__(self) -> int:
        return len(self._adapters)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._adapters

    @staticmethod
    def _summarize(adapter: ProviderAdapter) -> ProviderInfo:
        return ProviderInfo(
            id=adapter.id,
            name=adapter.name,
            supported_models=list(adapter.supported_models),
            default_model=adapter.get_default_options().model
        )
