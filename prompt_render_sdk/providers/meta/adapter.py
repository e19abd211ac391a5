from typing import Any, Dict, List, Tuple, Union

from ..base import BaseProviderAdapter
from ..errors import ResponseParseError
from ..payload_checks import check_messages, check_sampling_params
from ..openai.parsers import chat_response_metadata, extract_choice_text, extract_first_choice
from ..openai.payloads import (
    CHAT_ROLES,
    assemble_chat_params,
    build_chat_messages,
    chat_render_metadata,
    joined_message_text,
)
from ...core.capabilities import get_capabilities_for_provider, get_provider_model_ids
from ...models.prompt import StructuredPrompt
from ...models.render import ParsedResponse, ProviderPayload, RenderOptions, ValidationResult

# Most specific prefix first
MODEL_FAMILY_MARKERS = (
    ("llama-3.1", "Llama 3.1"),
    ("llama-3", "Llama 3"),
    ("llama-2", "Llama 2"),
)


def get_model_family(model_id: str) -> str:
    for marker, family in MODEL_FAMILY_MARKERS:
        if marker in model_id:
            return family
    return "Unknown"


class MetaAdapter(BaseProviderAdapter):
    """Meta Llama adapter: chat-completions shape with a single leading system message."""

    id = "meta"
    name = "Meta"
    supported_models = get_provider_model_ids("meta")
    capabilities = get_capabilities_for_provider("meta")

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
        metadata["model_family"] = get_model_family(options.model)
        return content, metadata

    def validate(self, payload: Union[ProviderPayload, Dict[str, Any]]) -> ValidationResult:
        errors: List[str] = []

        content = self.check_payload_envelope(payload, errors)
        if content is None:
            return ValidationResult.from_errors(errors)

        messages = content.get("messages")
        if check_messages(messages, errors, CHAT_ROLES):
            roles = [m.get("role") if isinstance(m, dict) else None for m in messages]
            system_count = roles.count("system")
            if system_count > 1:
                errors.append("Llama models support only one system message")
            if system_count == 1 and roles[0] != "system":
                errors.append("System message must be the first message for Llama models")

        check_sampling_params(content, errors)

        return ValidationResult.from_errors(errors)

    def parse_response(self, response: Any) -> ParsedResponse:
        extracted = extract_first_choice(response)
        if extracted is None:
            raise ResponseParseError("Invalid Meta response: no choices found", provider=self.id)

        data, choice = extracted
        return ParsedResponse(
            content=extract_choice_text(choice),
            metadata=chat_response_metadata(data, choice)
        )
