"""Unit tests for the built-in catalogue and default registry wiring."""

import logging

import pytest

from prompt_render_sdk.core.registry import (
    BUILTIN_ADAPTERS,
    ProviderFactory,
    create_builtin_adapters,
    create_default_registry,
    enabled_provider_ids,
    get_default_registry,
)
from prompt_render_sdk.providers import (
    AnthropicAdapter,
    MetaAdapter,
    MicrosoftCopilotAdapter,
    OpenAIAdapter,
)


@pytest.mark.unit
class TestBuiltinCatalogue:

    def test_catalogue_order(self):
        assert list(BUILTIN_ADAPTERS) == ["openai", "anthropic", "meta", "microsoft-copilot"]
        assert BUILTIN_ADAPTERS["microsoft-copilot"] is MicrosoftCopilotAdapter

    def test_create_all(self):
        adapters = create_builtin_adapters()
        assert [type(a) for a in adapters] == [OpenAIAdapter, AnthropicAdapter, MetaAdapter, MicrosoftCopilotAdapter]

    def test_create_subset_keeps_catalogue_order(self):
        adapters = create_builtin_adapters(["meta", "openai"])
        assert [a.id for a in adapters] == ["openai", "meta"]

    def test_unknown_ids_are_skipped(self, caplog):
        caplog.set_level(logging.WARNING, logger="prompt_render_sdk.core.registry.defaults")

        adapters = create_builtin_adapters(["openai", "cohere"])

        assert [a.id for a in adapters] == ["openai"]
        assert "Unknown built-in provider 'cohere' skipped" in [r.getMessage() for r in caplog.records]


@pytest.mark.unit
class TestEnvironmentFilter:

    def test_unset_means_all(self):
        assert enabled_provider_ids() is None

    def test_blank_means_all(self, monkeypatch):
        monkeypatch.setenv("PROMPT_RENDER_PROVIDERS", " , ")
        assert enabled_provider_ids() is None

    def test_comma_separated_ids(self, monkeypatch):
        monkeypatch.setenv("PROMPT_RENDER_PROVIDERS", "anthropic, meta ")
        assert enabled_provider_ids() == ["anthropic", "meta"]

    def test_create_default_registry_respects_filter(self, monkeypatch):
        monkeypatch.setenv("PROMPT_RENDER_PROVIDERS", "anthropic")
        registry = create_default_registry()
        assert [p.id for p in registry.list_providers()] == ["anthropic"]


@pytest.mark.unit
class TestDefaultRegistry:

    def test_create_default_registry_is_fresh(self):
        first = create_default_registry()
        second = create_default_registry()
        assert first is not second
        assert len(first) == 4

    def test_populated_on_first_use_only(self, caplog):
        caplog.set_level(logging.WARNING, logger="prompt_render_sdk.core.registry.factory")

        registry = get_default_registry()
        again = get_default_registry()

        assert again is registry
        assert registry is ProviderFactory.get_registry()
        assert len(registry) == 4
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_repopulated_after_reset(self):
        first = get_default_registry()
        first.unregister_adapter("meta")
        ProviderFactory.reset_registry()

        second = get_default_registry()

        assert second is not first
        assert second.has_provider("meta")
