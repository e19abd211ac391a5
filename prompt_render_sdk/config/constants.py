"""
Rendering constants and environment configuration names.

Provider tables live in prompt_render_sdk/config/models.py; this module only
holds values shared across adapters.
"""

# Fallback for models missing from the provider tables
DEFAULT_MODEL_MAX_TOKENS = 4096
DEFAULT_MODEL_CONTEXT_LENGTH = 4096

# Anthropic rejects requests without max_tokens
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096

# Azure OpenAI API version used by the Copilot wire format
COPILOT_API_VERSION = "2024-02-15-preview"

# Heuristic used by estimate_tokens(); not tied to a tokenizer
CHARS_PER_TOKEN = 4

# Joiner for multiple system instructions
SYSTEM_INSTRUCTION_SEPARATOR = "\n\n"

# Environment variables
ENABLED_PROVIDERS_ENV_VAR = "PROMPT_RENDER_PROVIDERS"
LOG_LEVEL_ENV_VAR = "PROMPT_RENDER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
