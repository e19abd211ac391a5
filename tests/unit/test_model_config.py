"""Unit tests for the static model tables and capability lookups."""

import pytest

from prompt_render_sdk.config import PROVIDER_DEFAULTS, PROVIDER_MODELS
from prompt_render_sdk.config.model_families import create_model_entry
from prompt_render_sdk.core.capabilities import (
    get_capabilities_for_provider,
    get_model_spec,
    get_provider_model_ids,
)


@pytest.mark.unit
class TestModelTables:

    def test_family_inheritance(self):
        entry = create_model_entry("claude-3.5", "claude-x", {"display_name": "Claude X"})
        assert entry["id"] == "claude-x"
        assert entry["context_length"] == 200000
        assert entry["max_output_tokens"] == 8192
        assert entry["display_name"] == "Claude X"

    def test_unknown_family(self):
        with pytest.raises(ValueError, match="Unknown model family: gpt-9"):
            create_model_entry("gpt-9", "gpt-9", {})

    @pytest.mark.parametrize("provider_id", list(PROVIDER_MODELS))
    def test_default_model_is_in_table(self, provider_id):
        assert PROVIDER_DEFAULTS[provider_id]["model"] in get_provider_model_ids(provider_id)

    def test_model_spec(self):
        spec = get_model_spec("microsoft-copilot", "text-davinci-003")
        assert spec.deprecated is True
        assert spec.context_length == 4097

    def test_model_spec_fallback(self):
        spec = get_model_spec("openai", "not-in-table")
        assert spec.display_name == "not-in-table"
        assert spec.context_length == 4096
        assert spec.max_output_tokens == 4096

    def test_capabilities_are_copies(self):
        caps = get_capabilities_for_provider("anthropic")
        caps.supported_message_roles.append("system")
        assert get_capabilities_for_provider("anthropic").supported_message_roles == ["user", "assistant"]
