"""Provider registry layer.

This layer handles:
- The registry of adapters keyed by provider id
- The process-wide default registry and safe registration
- The built-in adapter catalogue
"""

from .defaults import (
    BUILTIN_ADAPTERS,
    create_builtin_adapters,
    create_default_registry,
    enabled_provider_ids,
    get_default_registry,
)
from .errors import DuplicateProviderError, ProviderNotFoundError, RegistryError
from .factory import ProviderFactory
from .registry import ProviderRegistry

__all__ = [
    "ProviderRegistry",
    "ProviderFactory",
    "RegistryError",
    "ProviderNotFoundError",
    "DuplicateProviderError",
    "BUILTIN_ADAPTERS",
    "create_builtin_adapters",
    "create_default_registry",
    "enabled_provider_ids",
    "get_default_registry",
]
