"""Unit tests for the Microsoft Copilot adapter."""

import pytest

from prompt_render_sdk.models import ProviderPayload, RenderOptions
from prompt_render_sdk.providers import ResponseParseError


def make_payload(**content):
    base = {"model": "gpt-4", "messages": [{"role": "user", "content": "Hi"}]}
    base.update(content)
    return ProviderPayload(provider="microsoft-copilot", model="gpt-4", content=base)


@pytest.mark.unit
class TestCopilotRender:

    def test_penalties_are_forwarded(self, copilot_adapter, sample_prompt):
        payload = copilot_adapter.render(
            sample_prompt,
            RenderOptions.model_validate({"model": "gpt-4", "presencePenalty": 0.5, "frequency_penalty": -1})
        )
        assert payload.content["presence_penalty"] == 0.5
        assert payload.content["frequency_penalty"] == -1

    def test_penalties_omitted_when_unset(self, copilot_adapter, sample_prompt):
        payload = copilot_adapter.render(sample_prompt, RenderOptions(model="gpt-4"))
        assert "presence_penalty" not in payload.content
        assert "frequency_penalty" not in payload.content

    def test_metadata_api_version(self, copilot_adapter, sample_prompt):
        payload = copilot_adapter.render(sample_prompt, RenderOptions(model="gpt-35-turbo"))
        assert payload.metadata["api_version"] == "2024-02-15-preview"
        assert payload.metadata["has_system_message"] is True


@pytest.mark.unit
class TestCopilotValidate:

    def test_valid_penalties(self, copilot_adapter):
        assert copilot_adapter.validate(make_payload(presence_penalty=-2, frequency_penalty=2)).is_valid

    def test_penalty_ranges(self, copilot_adapter):
        result = copilot_adapter.validate(make_payload(presence_penalty=2.5, frequency_penalty="high"))
        assert result.errors == [
            "presence_penalty must be a number between -2 and 2",
            "frequency_penalty must be a number between -2 and 2",
        ]

    def test_openai_only_model_is_unsupported(self, copilot_adapter):
        result = copilot_adapter.validate(make_payload(model="gpt-3.5-turbo"))
        assert result.errors == ["Unsupported model: gpt-3.5-turbo"]


@pytest.mark.unit
class TestCopilotParseResponse:

    def test_parse_carries_api_version(self, copilot_adapter):
        parsed = copilot_adapter.parse_response({
            "model": "gpt-4",
            "api_version": "2024-02-15-preview",
            "choices": [{"index": 0, "message": {"content": "Hi"}, "finish_reason": "stop"}],
        })
        assert parsed.content == "Hi"
        assert parsed.metadata["api_version"] == "2024-02-15-preview"

    def test_no_choices(self, copilot_adapter):
        with pytest.raises(ResponseParseError, match="Invalid Microsoft Copilot response: no choices found"):
            copilot_adapter.parse_response({})
