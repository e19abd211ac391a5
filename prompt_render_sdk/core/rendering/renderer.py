"""
Prompt rendering service.

Wraps the registry and the adapters into the single call used by outer
layers: resolve the adapter, check the prompt's declared variables, fill
defaults, render, and re-validate the produced payload.
"""

import logging
from typing import Any, Dict, List, Union

from ...models.prompt import StructuredPrompt
from ...models.render import ProviderPayload, RenderOptions
from ...providers.errors import RenderError
from ..registry.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class PromptRenderer:
    """Render structured prompts through the adapters of a registry."""

    def __init__(self, registry: ProviderRegistry):
        self.registry = registry

    def render(
        self,
        structured: Union[StructuredPrompt, Dict[str, Any]],
        provider_id: str,
        options: Union[RenderOptions, Dict[str, Any]]
    ) -> ProviderPayload:
        """
        Render a structured prompt for one provider.

        Args:
            structured: Prompt to render
            provider_id: Registered provider id
            options: Render options; variables are checked against the
                prompt's declared variables

        Returns:
            Validated ProviderPayload with ``variables_used`` in its metadata

        Raises:
            ProviderNotFoundError: If the provider is not registered
            RenderError: If the model is unsupported, variables are missing
                or undeclared, or the adapter output fails validation
        """
        if isinstance(structured, dict):
            structured = StructuredPrompt.model_validate(structured)
        if isinstance(options, dict):
            options = RenderOptions.model_validate(options)

        adapter = self.registry.get_adapter(provider_id)

        if not adapter.supports(options.model):
            raise RenderError(
                f"Provider '{provider_id}' does not support model '{options.model}'",
                provider=provider_id
            )

        errors = self.check_variables(structured, options.variables or {})
        if errors:
            raise RenderError(
                f"Cannot render prompt: {', '.join(errors)}",
                provider=provider_id,
                errors=errors
            )

        variables = self.resolve_variables(structured, options.variables or {})
        payload = adapter.render(structured, options.model_copy(update={"variables": variables}))

        validation = adapter.validate(payload)
        if not validation.is_valid:
            raise RenderError(
                f"Invalid render output: {', '.join(validation.errors)}",
                provider=provider_id,
                errors=validation.errors
            )

        metadata = dict(payload.metadata or {})
        metadata["variables_used"] = [
            name for name in structured.template_variables()
            if not _is_missing(variables.get(name))
        ]
        logger.debug(f"Rendered prompt for provider '{provider_id}' model '{options.model}'")
        return payload.model_copy(update={"metadata": metadata})

    def render_best(
        self,
        structured: Union[StructuredPrompt, Dict[str, Any]],
        options: Union[RenderOptions, Dict[str, Any]]
    ) -> ProviderPayload:
        """Render with the first registered provider supporting the model."""
        if isinstance(options, dict):
            options = RenderOptions.model_validate(options)

        adapter = self.registry.find_best_provider(options.model)
        if adapter is None:
            raise RenderError(f"No registered provider supports model '{options.model}'")
        return self.render(structured, adapter.id, options)

    @staticmethod
    def check_variables(structured: StructuredPrompt, supplied: Dict[str, Any]) -> List[str]:
        """Undeclared template references and required variables without a value.

        Prompts that declare no variables are not checked.
        """
        if not structured.variables:
            return []

        errors: List[str] = []
        for name in structured.template_variables():
            if structured.get_variable(name) is None:
                errors.append(f"Template references undefined variable: {name}")

        for variable in structured.variables:
            if not variable.required or variable.default is not None:
                continue
            if _is_missing(supplied.get(variable.name)):
                errors.append(f"Required variable '{variable.name}' has no value")

        return errors

    @staticmethod
    def resolve_variables(structured: StructuredPrompt, supplied: Dict[str, Any]) -> Dict[str, Any]:
        """Supplied values with declared defaults filling the gaps."""
        variables = dict(supplied)
        for variable in structured.variables:
            if variable.default is not None and _is_missing(variables.get(variable.name)):
                variables[variable.name] = variable.default
        return variables
