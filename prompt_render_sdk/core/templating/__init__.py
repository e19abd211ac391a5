"""Template variable extraction and substitution."""

from .variables import PLACEHOLDER_PATTERN, extract_template_variables, substitute_variables

__all__ = [
    "PLACEHOLDER_PATTERN",
    "extract_template_variables",
    "substitute_variables",
]
