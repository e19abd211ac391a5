"""Prompt rendering service built on the provider registry."""

from .renderer import PromptRenderer

__all__ = ["PromptRenderer"]
