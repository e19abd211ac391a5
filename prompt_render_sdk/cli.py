"""CLI entry point for the Prompt Render SDK."""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .config.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR
from .core.registry import ProviderNotFoundError, ProviderRegistry, create_default_registry
from .core.rendering import PromptRenderer
from .models.prompt import StructuredPrompt
from .models.provider import ProviderRequirements
from .models.render import RenderOptions
from .providers.errors import AdapterError


class CLIError(Exception):
    """User-facing CLI failure."""


def configure_logging() -> None:
    level_name = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def emit(data: Any) -> None:
    print(json.dumps(data, indent=2))


def load_json_file(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as e:
        raise CLIError(f"Cannot read {path}: {e.strerror}")
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON in {path}: {e}")


def parse_variables(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated --var key=value arguments."""
    variables: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise CLIError(f"Invalid variable '{pair}', expected key=value")
        variables[key.strip()] = value
    return variables


def list_providers(registry: ProviderRegistry, args) -> int:
    emit([info.model_dump() for info in registry.list_providers()])
    return 0


def list_models(registry: ProviderRegistry, args) -> int:
    configuration = registry.get_adapter(args.provider).get_configuration()
    emit([
        {
            "id": model.id,
            "name": model.name,
            "context_length": model.context_length,
            "deprecated": model.deprecated,
        }
        for model in configuration.models
    ])
    return 0


def render_prompt(registry: ProviderRegistry, args) -> int:
    structured = StructuredPrompt.model_validate(load_json_file(args.prompt_file))
    adapter = registry.get_adapter(args.provider)

    options = RenderOptions(
        model=args.model or adapter.get_default_options().model,
        temperature=args.temperature,
        top_p=args.top_p,
        max_tokens=args.max_tokens,
        system_override=args.system_override,
        variables=parse_variables(args.var) or None,
    )
    payload = PromptRenderer(registry).render(structured, args.provider, options)
    emit(payload.model_dump())
    return 0


def validate_payload(registry: ProviderRegistry, args) -> int:
    payload = load_json_file(args.payload_file)
    if not isinstance(payload, dict) or not payload.get("provider"):
        raise CLIError(f"{args.payload_file} has no provider field")
    result = registry.get_adapter(payload["provider"]).validate(payload)
    emit(result.model_dump())
    return 0 if result.is_valid else 1


def recommend(registry: ProviderRegistry, args) -> int:
    requirements = ProviderRequirements(
        supports_system_messages=args.system_messages,
        max_context_length=args.min_context,
        supported_roles=args.role,
    )
    emit([info.model_dump() for info in registry.get_recommendations(requirements)])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prompt Render SDK CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list-providers', help='List registered providers')
    list_parser.set_defaults(handler=list_providers)

    models_parser = subparsers.add_parser('models', help='List the models of a provider')
    models_parser.add_argument('provider', help='Provider id (e.g., "openai")')
    models_parser.set_defaults(handler=list_models)

    render_parser = subparsers.add_parser('render', help='Render a structured prompt JSON file')
    render_parser.add_argument('provider', help='Provider id')
    render_parser.add_argument('prompt_file', help='Path to a structured prompt JSON file')
    render_parser.add_argument('--model', help='Model id (defaults to the provider default)')
    render_parser.add_argument('--var', action='append', metavar='KEY=VALUE', help='Template variable')
    render_parser.add_argument('--temperature', type=float, help='Sampling temperature')
    render_parser.add_argument('--top-p', type=float, help='Nucleus sampling parameter')
    render_parser.add_argument('--max-tokens', type=int, help='Maximum tokens to generate')
    render_parser.add_argument('--system-override', help='Replace the system instructions')
    render_parser.set_defaults(handler=render_prompt)

    validate_parser = subparsers.add_parser('validate', help='Validate a provider payload JSON file')
    validate_parser.add_argument('payload_file', help='Path to a payload JSON file')
    validate_parser.set_defaults(handler=validate_payload)

    recommend_parser = subparsers.add_parser('recommend', help='Recommend providers by capability')
    recommend_parser.add_argument(
        '--system-messages',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Require (or exclude) system message support'
    )
    recommend_parser.add_argument('--min-context', type=int, help='Minimum context length')
    recommend_parser.add_argument('--role', action='append', help='Required message role')
    recommend_parser.set_defaults(handler=recommend)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        registry = create_default_registry()
        return args.handler(registry, args)
    except (CLIError, AdapterError, ProviderNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
