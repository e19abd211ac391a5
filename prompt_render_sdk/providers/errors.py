"""
Exception taxonomy for provider adapters.

Validation problems are reported as ValidationResult lists; these exceptions
are raised only at the points where an operation cannot produce a result.
"""

from typing import List, Optional


class AdapterError(Exception):
    """
    Base exception for provider adapter errors.

    Attributes:
        message: Error message
        provider: Provider id, when known
        errors: Individual validation messages that caused the failure
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        errors: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.errors = list(errors) if errors else []


class RenderError(AdapterError, ValueError):
    """
    Raised when a prompt cannot be rendered.

    Messages keep stable prefixes so callers can tell the cause apart:
    - "Invalid render options: ..."
    - "Invalid structured prompt: ..."
    - "Cannot render prompt: ..." / "Invalid render output: ..." (PromptRenderer)
    """


class ResponseParseError(AdapterError):
    """Raised when a provider response carries no extractable content."""
