"""
Example: Rendering one prompt for every provider

This example renders a single structured prompt with each registered
provider, validates the result and shows which provider would be picked
for a model.
"""

import json

from prompt_render_sdk import (
    PromptRenderer,
    RenderError,
    StructuredPrompt,
    create_default_registry,
)


def build_prompt() -> StructuredPrompt:
    return StructuredPrompt(
        system=["You are a concise technical writer.", "Answer in plain English."],
        user_template="Explain {{topic}} to a {{audience}}.",
        variables=[
            {"name": "topic", "required": True},
            {"name": "audience", "required": False, "default": "beginner"},
        ],
    )


def example_render_every_provider():
    """Render the same prompt with each provider's default model."""
    print("=== Render Across Providers ===\n")

    registry = create_default_registry()
    renderer = PromptRenderer(registry)
    prompt = build_prompt()

    for info in registry.list_providers():
        payload = renderer.render(
            prompt,
            info.id,
            {"model": info.default_model, "variables": {"topic": "recursion"}},
        )
        print(f"{info.name} ({info.default_model}):")
        print(json.dumps(payload.content, indent=2))
        print(f"Estimated tokens: {payload.metadata['estimated_tokens']}\n")


def example_best_provider():
    """Pick the first provider supporting a model."""
    print("=== Best Provider ===\n")

    registry = create_default_registry()
    adapter = registry.find_best_provider("gpt-4")
    print(f"gpt-4 -> {adapter.name if adapter else 'none'}")

    try:
        PromptRenderer(registry).render_best(build_prompt(), {"model": "unknown-model"})
    except RenderError as e:
        print(f"Expected failure: {e}")


if __name__ == "__main__":
    example_render_every_provider()
    example_best_provider()
