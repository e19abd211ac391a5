from typing import Any, Dict, List, Tuple, Union

from ..base import BaseProviderAdapter
from ..errors import ResponseParseError
from ..payload_checks import check_messages, check_penalty, check_sampling_params
from ..openai.parsers import chat_response_metadata, extract_choice_text, extract_first_choice
from ..openai.payloads import (
    CHAT_ROLES,
    assemble_chat_params,
    build_chat_messages,
    chat_render_metadata,
    joined_message_text,
)
from ...config.constants import COPILOT_API_VERSION
from ...core.capabilities import get_capabilities_for_provider, get_provider_model_ids
from ...models.prompt import StructuredPrompt
from ...models.render import ParsedResponse, ProviderPayload, RenderOptions, ValidationResult

PENALTY_FIELDS = ("presence_penalty", "frequency_penalty")


class MicrosoftCopilotAdapter(BaseProviderAdapter):
    """
    Microsoft Copilot (Azure OpenAI compatible) adapter.

    Same message shape as OpenAI, plus optional presence/frequency penalties.
    """

    id = "microsoft-copilot"
    name = "Microsoft Copilot"
    supported_models = get_provider_model_ids("microsoft-copilot")
    capabilities = get_capabilities_for_provider("microsoft-copilot")

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
        for field in PENALTY_FIELDS:
            value = getattr(options, field)
            if value is not None:
                content[field] = value

        metadata = chat_render_metadata(
            messages,
            self.estimate_tokens(joined_message_text(messages))
        )
        metadata["api_version"] = COPILOT_API_VERSION
        return content, metadata

    def validate(self, payload: Union[ProviderPayload, Dict[str, Any]]) -> ValidationResult:
        errors: List[str] = []

        content = self.check_payload_envelope(payload, errors)
        if content is None:
            return ValidationResult.from_errors(errors)

        check_messages(content.get("messages"), errors, CHAT_ROLES)
        check_sampling_params(content, errors)
        for field in PENALTY_FIELDS:
            check_penalty(content, field, errors)

        return ValidationResult.from_errors(errors)

    def parse_response(self, response: Any) -> ParsedResponse:
        extracted = extract_first_choice(response)
        if extracted is None:
            raise ResponseParseError("Invalid Microsoft Copilot response: no choices found", provider=self.id)

        data, choice = extracted
        metadata = chat_response_metadata(data, choice)
        metadata["api_version"] = data.get("api_version")
        return ParsedResponse(content=extract_choice_text(choice), metadata=metadata)
