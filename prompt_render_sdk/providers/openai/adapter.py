from typing import Any, Dict, List, Tuple, Union

from ..base import BaseProviderAdapter
from ..errors import ResponseParseError
from ..payload_checks import check_messages, check_sampling_params
from ...core.capabilities import get_capabilities_for_provider, get_provider_model_ids
from ...models.prompt import StructuredPrompt
from ...models.render import ParsedResponse, ProviderPayload, RenderOptions, ValidationResult
from .parsers import chat_response_metadata, extract_choice_text, extract_first_choice
from .payloads import (
    CHAT_ROLES,
    assemble_chat_params,
    build_chat_messages,
    chat_render_metadata,
    joined_message_text,
)


class OpenAIAdapter(BaseProviderAdapter):
    """OpenAI chat-completions adapter (system, user and assistant roles)."""

    id = "openai"
    name = "OpenAI"
    supported_models = get_provider_model_ids("openai")
    capabilities = get_capabilities_for_provider("openai")

    def build_payload(
        self,
        structured: StructuredPrompt,
        options: RenderOptions
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        messages = build_chat_messages(
            self.build_system_content(structured, options),
            self.build_user_content(structured, options)
        )
        content = assemble_chat_params(options.model, messages, options)
        metadata = chat_render_metadata(
            messages,
            self.estimate_tokens(joined_message_text(messages))
        )
        return content, metadata

    def validate(self, payload: Union[ProviderPayload, Dict[str, Any]]) -> ValidationResult:
        errors: List[str] = []

        content = self.check_payload_envelope(payload, errors)
        if content is None:
            return ValidationResult.from_errors(errors)

        check_messages(content.get("messages"), errors, CHAT_ROLES)
        check_sampling_params(content, errors)

        return ValidationResult.from_errors(errors)

    def parse_response(self, response: Any) -> ParsedResponse:
        """Parse a chat-completions response (dict or SDK object)."""
        extracted = extract_first_choice(response)
        if extracted is None:
            raise ResponseParseError("Invalid OpenAI response: no choices found", provider=self.id)

        data, choice = extracted
        return ParsedResponse(
            content=extract_choice_text(choice),
            metadata=chat_response_metadata(data, choice)
        )
