# Provider model tables using family inheritance
from .model_families import create_model_entry

# Model tables keyed by provider id, then model id.
# Insertion order is the order of each adapter's supported_models list.
PROVIDER_MODELS = {
    "openai": {
        "gpt-4": create_model_entry("gpt-4", "gpt-4", {
            "display_name": "GPT-4",
        }),
        "gpt-4-turbo": create_model_entry("gpt-4-turbo", "gpt-4-turbo", {
            "display_name": "GPT-4 Turbo",
        }),
        "gpt-4-turbo-preview": create_model_entry("gpt-4-turbo", "gpt-4-turbo-preview", {
            "display_name": "GPT-4 Turbo Preview",
        }),
        "gpt-4-0125-preview": create_model_entry("gpt-4-turbo", "gpt-4-0125-preview", {
            "display_name": "GPT-4 Turbo (0125)",
        }),
        "gpt-4-1106-preview": create_model_entry("gpt-4-turbo", "gpt-4-1106-preview", {
            "display_name": "GPT-4 Turbo (1106)",
            "deprecated": True,  # Older preview version
        }),
        "gpt-3.5-turbo": create_model_entry("gpt-3.5", "gpt-3.5-turbo", {
            "display_name": "GPT-3.5 Turbo",
        }),
        "gpt-3.5-turbo-0125": create_model_entry("gpt-3.5", "gpt-3.5-turbo-0125", {
            "display_name": "GPT-3.5 Turbo (0125)",
        }),
        "gpt-3.5-turbo-1106": create_model_entry("gpt-3.5", "gpt-3.5-turbo-1106", {
            "display_name": "GPT-3.5 Turbo (1106)",
            "deprecated": True,
        }),
    },

    "anthropic": {
        "claude-3-5-sonnet-20241022": create_model_entry("claude-3.5", "claude-3-5-sonnet-20241022", {
            "display_name": "Claude 3.5 Sonnet (Latest)",
        }),
        "claude-3-5-sonnet-20240620": create_model_entry("claude-3.5", "claude-3-5-sonnet-20240620", {
            "display_name": "Claude 3.5 Sonnet",
            "deprecated": True,  # Superseded by the 20241022 snapshot
        }),
        "claude-3-opus-20240229": create_model_entry("claude-3", "claude-3-opus-20240229", {
            "display_name": "Claude 3 Opus",
        }),
        "claude-3-sonnet-20240229": create_model_entry("claude-3", "claude-3-sonnet-20240229", {
            "display_name": "Claude 3 Sonnet",
        }),
        "claude-3-haiku-20240307": create_model_entry("claude-3", "claude-3-haiku-20240307", {
            "display_name": "Claude 3 Haiku",
        }),
        "claude-3-5-haiku-20241022": create_model_entry("claude-3.5", "claude-3-5-haiku-20241022", {
            "display_name": "Claude 3.5 Haiku",
        }),
    },

    "meta": {
        "llama-3.1-405b-instruct": create_model_entry("llama-3.1", "llama-3.1-405b-instruct", {
            "display_name": "Llama 3.1 405B Instruct",
        }),
        "llama-3.1-70b-instruct": create_model_entry("llama-3.1", "llama-3.1-70b-instruct", {
            "display_name": "Llama 3.1 70B Instruct",
        }),
        "llama-3.1-8b-instruct": create_model_entry("llama-3.1", "llama-3.1-8b-instruct", {
            "display_name": "Llama 3.1 8B Instruct",
        }),
        "llama-3-70b-instruct": create_model_entry("llama-3", "llama-3-70b-instruct", {
            "display_name": "Llama 3 70B Instruct",
        }),
        "llama-3-8b-instruct": create_model_entry("llama-3", "llama-3-8b-instruct", {
            "display_name": "Llama 3 8B Instruct",
        }),
        "llama-2-70b-chat": create_model_entry("llama-2", "llama-2-70b-chat", {
            "display_name": "Llama 2 70B Chat",
        }),
        "llama-2-13b-chat": create_model_entry("llama-2", "llama-2-13b-chat", {
            "display_name": "Llama 2 13B Chat",
            "deprecated": True,  # Older smaller models
        }),
        "llama-2-7b-chat": create_model_entry("llama-2", "llama-2-7b-chat", {
            "display_name": "Llama 2 7B Chat",
            "deprecated": True,
        }),
    },

    # Azure-hosted deployments use their own model names (gpt-35-*)
    "microsoft-copilot": {
        "gpt-4": create_model_entry("gpt-4", "gpt-4", {
            "display_name": "GPT-4",
        }),
        "gpt-4-turbo": create_model_entry("gpt-4-turbo", "gpt-4-turbo", {
            "display_name": "GPT-4 Turbo",
        }),
        "gpt-4-32k": create_model_entry("gpt-4", "gpt-4-32k", {
            "display_name": "GPT-4 32K",
            "context_length": 32768,
        }),
        "gpt-35-turbo": create_model_entry("gpt-3.5", "gpt-35-turbo", {
            "display_name": "GPT-3.5 Turbo",
            "context_length": 4096,
        }),
        "gpt-35-turbo-16k": create_model_entry("gpt-3.5", "gpt-35-turbo-16k", {
            "display_name": "GPT-3.5 Turbo 16K",
            "context_length": 16384,
        }),
        "text-davinci-003": create_model_entry("davinci", "text-davinci-003", {
            "display_name": "Text Davinci 003",
        }),
        "code-davinci-002": create_model_entry("davinci", "code-davinci-002", {
            "display_name": "Code Davinci 002",
            "context_length": 8001,
            "max_output_tokens": 8001,
        }),
    },
}

# Default render options per provider
PROVIDER_DEFAULTS = {
    "openai": {
        "model": "gpt-4-turbo",
        "temperature": 0.7,
        "max_tokens": 4096,
    },
    "anthropic": {
        "model": "claude-3-5-sonnet-20241022",
        "temperature": 0.7,
        "max_tokens": 4096,
    },
    "meta": {
        "model": "llama-3.1-70b-instruct",
        "temperature": 0.7,
        "max_tokens": 4096,
    },
    "microsoft-copilot": {
        "model": "gpt-4",
        "temperature": 0.7,
        "max_tokens": 4096,
    },
}

# Informational rate-limit hints (provider defaults at the lowest paid tier)
PROVIDER_RATE_LIMITS = {
    "openai": {"requests_per_minute": 3500, "tokens_per_minute": 90000},
    "anthropic": {"requests_per_minute": 1000, "tokens_per_minute": 40000},
    "meta": {"requests_per_minute": 200, "tokens_per_minute": 10000},
    # Azure OpenAI Service default
    "microsoft-copilot": {"requests_per_minute": 1000, "tokens_per_minute": 60000},
}
