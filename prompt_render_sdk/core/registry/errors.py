"""Registry exceptions.

These signal programmer or configuration errors (unknown or duplicate
provider ids) and are not retried.
"""


class RegistryError(Exception):
    """Base exception for provider registry errors."""

    def __init__(self, message: str, provider_id: str):
        super().__init__(message)
        self.message = message
        self.provider_id = provider_id


class ProviderNotFoundError(RegistryError, LookupError):
    """No adapter is registered under the requested id."""

    def __init__(self, provider_id: str):
        super().__init__(f"Provider adapter with id '{provider_id}' not found", provider_id)


class DuplicateProviderError(RegistryError, ValueError):
    """An adapter with the same id is already registered."""

    def __init__(self, provider_id: str):
        super().__init__(f"Provider adapter with id '{provider_id}' is already registered", provider_id)
