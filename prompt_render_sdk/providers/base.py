"""
Base Provider Adapter Interface

This module defines the abstract contract for all provider adapters and the
shared behaviour reused by the concrete implementations. All provider
implementations translate the same StructuredPrompt into their provider's
wire payload and validate payloads of that format.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..config.constants import CHARS_PER_TOKEN, DEFAULT_MODEL_MAX_TOKENS, SYSTEM_INSTRUCTION_SEPARATOR
from ..config.models import PROVIDER_DEFAULTS, PROVIDER_RATE_LIMITS
from ..core.capabilities import ProviderCapabilities, get_model_spec
from ..core.templating import substitute_variables
from ..models.prompt import StructuredPrompt
from ..models.provider import ModelDescriptor, ProviderConfiguration, RateLimits
from ..models.render import ModelInfo, ParsedResponse, ProviderPayload, RenderOptions, ValidationResult
from ..observability.logging import ProviderLogger
from .errors import RenderError


class ProviderAdapter(ABC):
    """
    Abstract base class for provider adapters.

    This class defines the standard interface that all provider adapters must implement.
    The registry and the render service only depend on this interface.

    The adapter is responsible for:
    - Validating render options against its declared capabilities
    - Translating a StructuredPrompt into the provider's request body
    - Re-validating payloads of its format without the original prompt
    - Mapping provider responses back to plain text

    Provider adapters should NOT contain:
    - Network calls
    - Persistence or caching
    - Cross-provider logic
    """

    id: str
    name: str
    supported_models: List[str]
    capabilities: ProviderCapabilities

    @abstractmethod
    def render(self, structured: StructuredPrompt, options: RenderOptions) -> ProviderPayload:
        """
        Render a structured prompt into the provider's payload.

        Args:
            structured: Provider-agnostic prompt
            options: Model choice, tuning parameters and variable values

        Returns:
            ProviderPayload ready to send to the provider

        Raises:
            RenderError: If the options or the prompt fail validation
        """
        pass

    @abstractmethod
    def validate(self, payload: Union[ProviderPayload, Dict[str, Any]]) -> ValidationResult:
        """
        Structurally validate an already-built payload.

        Errors are returned, never raised, so callers can inspect payloads of
        unknown provenance.
        """
        pass

    @abstractmethod
    def supports(self, model: str) -> bool:
        """Exact membership test against supported_models."""
        pass

    @abstractmethod
    def get_default_options(self) -> RenderOptions:
        """Render options usable with no other input."""
        pass

    @abstractmethod
    def get_configuration(self) -> ProviderConfiguration:
        """Descriptive provider configuration."""
        pass

    def parse_response(self, response: Any) -> ParsedResponse:
        """
        Map a raw provider response to plain text plus metadata.

        Optional for adapters outside the built-in set; they inherit this
        refusal.
        """
        raise NotImplementedError(f"{self.name} does not parse provider responses")

    def estimate_tokens(self, text: str) -> int:
        """
        Estimate token count of a text.

        Uses ~4 characters per token; not a tokenizer.
        """
        if not text:
            return 0
        return math.ceil(len(text) / CHARS_PER_TOKEN)

    def get_model_info(self, model: str) -> Optional[ModelInfo]:
        """Model limits, or None when the model is not supported."""
        if not self.supports(model):
            return None
        return ModelInfo(
            max_tokens=DEFAULT_MODEL_MAX_TOKENS,
            context_length=self.capabilities.max_context_length,
            supports_system_messages=self.capabilities.supports_system_messages
        )


class BaseProviderAdapter(ProviderAdapter):
    """
    Shared behaviour for the concrete provider adapters.

    Implements capability-aware option validation, variable substitution,
    structured prompt checks and the common render skeleton. Subclasses build
    the provider-specific content in build_payload() and implement validate().
    """

    def __init__(self):
        self._logger = ProviderLogger(self.id)

    def supports(self, model: str) -> bool:
        return model in self.supported_models

    def render(
        self,
        structured: Union[StructuredPrompt, Dict[str, Any]],
        options: Union[RenderOptions, Dict[str, Any]]
    ) -> ProviderPayload:
        """Validate inputs, build the provider content and attach metadata."""
        structured = self._coerce_prompt(structured)
        options = self._coerce_options(options)

        with self._logger.track_request("render", options.model) as request_info:
            self.check_render_inputs(structured, options)

            content, metadata = self.build_payload(structured, options)

            self._logger.log_render_estimate(metadata, options.model, request_info['request_id'])

            return ProviderPayload(
                provider=self.id,
                model=options.model,
                content=content,
                metadata=metadata
            )

    @abstractmethod
    def build_payload(
        self,
        structured: StructuredPrompt,
        options: RenderOptions
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        Build the provider wire content and render metadata.

        Called only after options and prompt passed validation.

        Returns:
            Tuple of (content, metadata)
        """
        pass

    @abstractmethod
    def parse_response(self, response: Any) -> ParsedResponse:
        """
        Map a raw provider response to plain text plus metadata.

        Raises:
            ResponseParseError: If the response carries no usable content
        """
        pass

    def validate_render_options(self, options: RenderOptions) -> ValidationResult:
        """Check options against supported models and declared capabilities."""
        errors: List[str] = []

        if not self.supports(options.model):
            errors.append(f"Model '{options.model}' is not supported by {self.name}")

        if options.temperature is not None:
            if not self.capabilities.supports_temperature:
                errors.append(f"{self.name} does not support temperature parameter")
            elif options.temperature < 0 or options.temperature > 2:
                errors.append("Temperature must be between 0 and 2")

        if options.top_p is not None:
            if not self.capabilities.supports_top_p:
                errors.append(f"{self.name} does not support topP parameter")
            elif options.top_p < 0 or options.top_p > 1:
                errors.append("TopP must be between 0 and 1")

        if options.max_tokens is not None:
            if not self.capabilities.supports_max_tokens:
                errors.append(f"{self.name} does not support maxTokens parameter")
            elif options.max_tokens <= 0:
                errors.append("MaxTokens must be greater than 0")

        return ValidationResult.from_errors(errors)

    def substitute_variables(self, template: str, variables: Mapping[str, Any]) -> str:
        """Replace {{ key }} placeholders for the supplied keys only."""
        return substitute_variables(template, variables)

    def validate_structured_prompt(self, structured: StructuredPrompt) -> ValidationResult:
        errors: List[str] = []

        if not structured.user_template:
            errors.append("User template is required")

        return ValidationResult.from_errors(errors)

    def check_render_inputs(self, structured: StructuredPrompt, options: RenderOptions) -> None:
        """
        Run option and prompt validation, raising on the first failing stage.

        Raises:
            RenderError: "Invalid render options: ..." or "Invalid structured prompt: ..."
        """
        options_validation = self.validate_render_options(options)
        if not options_validation.is_valid:
            raise RenderError(
                f"Invalid render options: {', '.join(options_validation.errors)}",
                provider=self.id,
                errors=options_validation.errors
            )

        prompt_validation = self.validate_structured_prompt(structured)
        if not prompt_validation.is_valid:
            raise RenderError(
                f"Invalid structured prompt: {', '.join(prompt_validation.errors)}",
                provider=self.id,
                errors=prompt_validation.errors
            )

    def build_system_content(self, structured: StructuredPrompt, options: RenderOptions) -> Optional[str]:
        """Joined system instructions, or the override; None without instructions."""
        if not structured.system:
            return None

        if options.system_override:
            return options.system_override
        return SYSTEM_INSTRUCTION_SEPARATOR.join(structured.system)

    def build_user_content(self, structured: StructuredPrompt, options: RenderOptions) -> str:
        """User template with the supplied variables substituted."""
        if options.variables:
            return self.substitute_variables(structured.user_template, options.variables)
        return structured.user_template

    def check_payload_envelope(
        self,
        payload: Union[ProviderPayload, Dict[str, Any]],
        errors: List[str]
    ) -> Optional[Dict[str, Any]]:
        """
        Shared first stage of validate(): provider id and content presence.

        Appends to ``errors`` and returns the content dict, or None when
        there is nothing further to validate. Plain dicts are read as-is so
        malformed payloads are reported rather than raised.
        """
        if isinstance(payload, ProviderPayload):
            provider, content = payload.provider, payload.content
        elif isinstance(payload, dict):
            provider, content = payload.get("provider"), payload.get("content")
        else:
            errors.append("Payload must be an object")
            return None

        if provider != self.id:
            errors.append(f"Expected provider '{self.id}', got '{provider}'")

        if not content:
            errors.append("Payload content is required")
            return None

        if not isinstance(content, dict):
            errors.append("Payload content must be an object")
            return None

        model = content.get("model")
        if not model:
            errors.append("Model is required")
        elif not self.supports(model):
            errors.append(f"Unsupported model: {model}")

        return content

    def get_default_options(self) -> RenderOptions:
        return RenderOptions(**PROVIDER_DEFAULTS[self.id])

    def get_configuration(self) -> ProviderConfiguration:
        rate_limits = PROVIDER_RATE_LIMITS.get(self.id)
        return ProviderConfiguration(
            id=self.id,
            name=self.name,
            default_model=self.get_default_options().model,
            models=[
                ModelDescriptor(
                    id=model_id,
                    name=spec.display_name,
                    context_length=spec.context_length,
                    deprecated=spec.deprecated,
                    capabilities=self.capabilities
                )
                for model_id, spec in ((m, get_model_spec(self.id, m)) for m in self.supported_models)
            ],
            rate_limits=RateLimits(**rate_limits) if rate_limits else None
        )

    def get_model_info(self, model: str) -> Optional[ModelInfo]:
        if not self.supports(model):
            return None

        spec = get_model_spec(self.id, model)
        return ModelInfo(
            max_tokens=spec.max_output_tokens,
            context_length=spec.context_length,
            supports_system_messages=self.capabilities.supports_system_messages
        )

    @staticmethod
    def _coerce_prompt(structured: Union[StructuredPrompt, Dict[str, Any]]) -> StructuredPrompt:
        if isinstance(structured, dict):
            return StructuredPrompt.model_validate(structured)
        return structured

    @staticmethod
    def _coerce_options(options: Union[RenderOptions, Dict[str, Any]]) -> RenderOptions:
        if isinstance(options, dict):
            return RenderOptions.model_validate(options)
        return options
