# Model family base configurations
from typing import Dict, Any

# Base configurations for model families
MODEL_FAMILIES = {
    "gpt-4": {
        "family": "GPT-4",
        "context_length": 8192,
        "max_output_tokens": 4096,
        "deprecated": False,
    },
    "gpt-4-turbo": {
        "family": "GPT-4 Turbo",
        "context_length": 128000,
        "max_output_tokens": 4096,
        "deprecated": False,
    },
    "gpt-3.5": {
        "family": "GPT-3.5",
        "context_length": 16385,
        "max_output_tokens": 4096,
        "deprecated": False,
    },
    "davinci": {
        "family": "Davinci",
        "context_length": 4097,
        "max_output_tokens": 4097,
        # Legacy completion models
        "deprecated": True,
    },
    "claude-3": {
        "family": "Claude 3",
        # All Claude 3 models share the 200k window
        "context_length": 200000,
        "max_output_tokens": 4096,
        "deprecated": False,
    },
    "claude-3.5": {
        "family": "Claude 3.5",
        "context_length": 200000,
        "max_output_tokens": 8192,
        "deprecated": False,
    },
    "llama-3.1": {
        "family": "Llama 3.1",
        "context_length": 128000,
        "max_output_tokens": 4096,
        "deprecated": False,
    },
    "llama-3": {
        "family": "Llama 3",
        "context_length": 8192,
        "max_output_tokens": 4096,
        "deprecated": False,
    },
    "llama-2": {
        "family": "Llama 2",
        "context_length": 4096,
        "max_output_tokens": 4096,
        "deprecated": False,
    },
}


def create_model_entry(family: str, variant: str, overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Create a model entry by combining family defaults with variant overrides."""
    if family not in MODEL_FAMILIES:
        raise ValueError(f"Unknown model family: {family}")

    base = MODEL_FAMILIES[family].copy()
    base.update(overrides)

    # Ensure required fields
    if "id" not in base:
        base["id"] = variant
    if "display_name" not in base:
        base["display_name"] = variant.replace("-", " ").title()

    return base
