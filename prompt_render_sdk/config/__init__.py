"""Configuration module for the prompt render SDK."""

from .models import (
    PROVIDER_MODELS,
    PROVIDER_DEFAULTS,
    PROVIDER_RATE_LIMITS,
)

# Import all constants
from .constants import *

__all__ = [
    "PROVIDER_MODELS",
    "PROVIDER_DEFAULTS",
    "PROVIDER_RATE_LIMITS",
]
