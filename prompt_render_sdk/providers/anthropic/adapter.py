from typing import Any, Dict, List, Tuple, Union

from ..base import BaseProviderAdapter
from ..errors import ResponseParseError
from ..payload_checks import check_messages, check_sampling_params, is_number
from ...core.capabilities import get_capabilities_for_provider, get_provider_model_ids
from ...models.prompt import StructuredPrompt
from ...models.render import ParsedResponse, ProviderPayload, RenderOptions, ValidationResult
from .parsers import extract_content_blocks, extract_text_from_blocks, messages_response_metadata
from .payloads import MESSAGE_ROLES, ROLE_HINT, assemble_messages_params, estimation_text

BASE_TEMPERATURE_ERROR = "Temperature must be between 0 and 2"


class AnthropicAdapter(BaseProviderAdapter):
    """
    Anthropic Messages API adapter.

    Differs from the chat-completions adapters in three ways: the system
    prompt is a top-level field, messages only carry user/assistant roles,
    and max_tokens is mandatory. Temperature is limited to [0, 1].
    """

    id = "anthropic"
    name = "Anthropic"
    supported_models = get_provider_model_ids("anthropic")
    capabilities = get_capabilities_for_provider("anthropic")

    def validate_render_options(self, options: RenderOptions) -> ValidationResult:
        validation = super().validate_render_options(options)

        if options.temperature is None or not self.capabilities.supports_temperature:
            return validation

        errors = [e for e in validation.errors if BASE_TEMPERATURE_ERROR not in e]
        if options.temperature < 0 or options.temperature > 1:
            errors.append("Temperature must be between 0 and 1 for Anthropic")
        return ValidationResult.from_errors(errors)

    def build_payload(
        self,
        structured: StructuredPrompt,
        options: RenderOptions
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        content = assemble_messages_params(
            options.model,
            self.build_system_content(structured, options),
            self.build_user_content(structured, options),
            options
        )
        metadata = {
            "message_count": len(content["messages"]),
            "has_system_message": "system" in content,
            "estimated_tokens": self.estimate_tokens(estimation_text(content)),
        }
        return content, metadata

    def validate(self, payload: Union[ProviderPayload, Dict[str, Any]]) -> ValidationResult:
        errors: List[str] = []

        content = self.check_payload_envelope(payload, errors)
        if content is None:
            return ValidationResult.from_errors(errors)

        check_messages(content.get("messages"), errors, MESSAGE_ROLES, role_hint=ROLE_HINT)

        if "max_tokens" not in content:
            errors.append("max_tokens is required for Anthropic API")
        elif not is_number(content["max_tokens"]) or content["max_tokens"] <= 0:
            errors.append("max_tokens must be a positive number")

        sampling = {k: v for k, v in content.items() if k in ("temperature", "top_p")}
        check_sampling_params(
            sampling,
            errors,
            max_temperature=1,
            temperature_error="Temperature must be a number between 0 and 1 for Anthropic"
        )

        if "system" in content and not isinstance(content["system"], str):
            errors.append("System message must be a string")

        return ValidationResult.from_errors(errors)

    def parse_response(self, response: Any) -> ParsedResponse:
        """Concatenate the text blocks of a messages response."""
        blocks = extract_content_blocks(response)
        if blocks is None:
            raise ResponseParseError("Invalid Anthropic response: no content found", provider=self.id)

        return ParsedResponse(
            content=extract_text_from_blocks(blocks),
            metadata=messages_response_metadata(response)
        )
