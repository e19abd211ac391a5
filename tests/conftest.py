"""Shared pytest fixtures for Prompt Render SDK tests."""

import pytest
from dotenv import load_dotenv
from unittest.mock import Mock
from typing import List, Optional

# Load environment variables from .env file for tests
load_dotenv()

from prompt_render_sdk.core.capabilities import ProviderCapabilities
from prompt_render_sdk.core.registry import ProviderFactory, create_default_registry
from prompt_render_sdk.config.constants import ENABLED_PROVIDERS_ENV_VAR
from prompt_render_sdk.models.prompt import StructuredPrompt
from prompt_render_sdk.models.render import RenderOptions
from prompt_render_sdk.providers import (
    AnthropicAdapter,
    MetaAdapter,
    MicrosoftCopilotAdapter,
    OpenAIAdapter,
)
from prompt_render_sdk.providers.base import ProviderAdapter


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests crossing several layers")
    config.addinivalue_line("markers", "slow: slow tests")


@pytest.fixture(autouse=True)
def reset_default_registry(monkeypatch):
    """Isolate the process-wide registry and provider filter between tests."""
    monkeypatch.delenv(ENABLED_PROVIDERS_ENV_VAR, raising=False)
    ProviderFactory.reset_registry()
    yield
    ProviderFactory.reset_registry()


@pytest.fixture
def sample_prompt():
    """Structured prompt with one system instruction and one variable."""
    return StructuredPrompt(
        system=["Be helpful"],
        user_template="Hello {{name}}"
    )


@pytest.fixture
def declared_prompt():
    """Structured prompt declaring a required variable and a defaulted one."""
    return StructuredPrompt(
        system=["You are a concise technical writer.", "Answer in plain English."],
        user_template="Explain {{ topic }} to a {{audience}}.",
        variables=[
            {"name": "topic", "required": True},
            {"name": "audience", "required": False, "default": "beginner"},
        ]
    )


@pytest.fixture
def openai_adapter():
    return OpenAIAdapter()


@pytest.fixture
def anthropic_adapter():
    return AnthropicAdapter()


@pytest.fixture
def meta_adapter():
    return MetaAdapter()


@pytest.fixture
def copilot_adapter():
    return MicrosoftCopilotAdapter()


@pytest.fixture
def builtin_registry():
    """Fresh registry holding all built-in adapters."""
    return create_default_registry()


@pytest.fixture
def make_adapter():
    """Factory for mock adapters with controllable models and capabilities."""

    def _make(
        provider_id: str,
        models: List[str],
        name: Optional[str] = None,
        **capabilities
    ):
        adapter = Mock(spec=ProviderAdapter)
        adapter.id = provider_id
        adapter.name = name or provider_id.title()
        adapter.supported_models = list(models)
        capabilities.setdefault("max_context_length", 8192)
        adapter.capabilities = ProviderCapabilities(**capabilities)
        adapter.supports.side_effect = lambda model: model in adapter.supported_models
        adapter.get_default_options.return_value = RenderOptions(model=models[0])
        return adapter

    return _make
