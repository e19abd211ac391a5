"""Registry factory.

Owns the process-wide default registry and the safe-registration helpers
used by composition roots. Core code never needs the singleton:
create_registry() returns an independent instance.
"""

import logging
import threading
from typing import Any, ClassVar, Iterable, List, Optional

from ...models.render import ValidationResult
from .registry import ProviderRegistry

logger = logging.getLogger(__name__)

REQUIRED_ADAPTER_METHODS = (
    "render",
    "validate",
    "supports",
    "get_default_options",
    "get_configuration",
)


class ProviderFactory:
    """Factory for provider registries."""

    _registry: ClassVar[Optional[ProviderRegistry]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_registry(cls) -> ProviderRegistry:
        """Get the process-wide registry, creating it on first access."""
        if cls._registry is None:
            with cls._lock:
                if cls._registry is None:
                    cls._registry = ProviderRegistry()
        return cls._registry

    @classmethod
    def create_registry(cls) -> ProviderRegistry:
        """Create a fresh registry, independent of the singleton."""
        return ProviderRegistry()

    @classmethod
    def reset_registry(cls) -> None:
        """Drop the singleton (mainly for testing)."""
        with cls._lock:
            cls._registry = None

    @classmethod
    def configure_default_registry(cls, adapters: Iterable[Any]) -> ProviderRegistry:
        """Register adapters into the singleton registry.

        A failing registration is logged and skipped; the remaining
        adapters are still registered.

        Returns:
            The singleton registry
        """
        registry = cls.get_registry()
        for adapter in adapters:
            try:
                registry.register_adapter(adapter)
            except Exception as e:
                logger.warning(f"Failed to register adapter {getattr(adapter, 'id', adapter)}: {e}")
        return registry

    @staticmethod
    def validate_adapter(adapter: Any) -> ValidationResult:
        """Structural check of an object before registration.

        Nothing is mutated; errors are returned.
        """
        errors: List[str] = []

        adapter_id = getattr(adapter, "id", None)
        if not isinstance(adapter_id, str) or not adapter_id:
            errors.append("Adapter must have a valid string id")

        name = getattr(adapter, "name", None)
        if not isinstance(name, str) or not name:
            errors.append("Adapter must have a valid string name")

        models = getattr(adapter, "supported_models", None)
        if not isinstance(models, (list, tuple)) or not models:
            errors.append("Adapter must have at least one supported model")

        if getattr(adapter, "capabilities", None) is None:
            errors.append("Adapter must define capabilities")

        for method in REQUIRED_ADAPTER_METHODS:
            if not callable(getattr(adapter, method, None)):
                errors.append(f"Adapter must implement {method} method")

        return ValidationResult.from_errors(errors)

    @classmethod
    def register_adapter_safely(cls, registry: ProviderRegistry, adapter: Any) -> bool:
        """Validate then register an adapter.

        Returns:
            True if the adapter was registered, False otherwise
        """
        validation = cls.validate_adapter(adapter)
        if not validation.is_valid:
            logger.error(f"Invalid adapter: {', '.join(validation.errors)}")
            return False

        try:
            registry.register_adapter(adapter)
        except Exception as e:
            logger.error(f"Failed to register adapter {adapter.id}: {e}")
            return False
        return True
