"""Core logic layers for the prompt render SDK.

This package contains the provider-agnostic core logic organized into layers:
- capabilities: Provider capability declarations and model metadata
- templating: Template variable extraction and substitution
- registry: Adapter catalogue, registry and factory
- rendering: Registry-backed prompt rendering service
"""

__all__ = []
