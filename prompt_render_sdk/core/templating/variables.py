"""
Template variable handling for user templates.

Placeholders use the ``{{ name }}`` form; whitespace inside the braces is
tolerated. Substitution is a single pass over the template so substituted
values are never expanded again.
"""

import re
from typing import Any, Dict, List, Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^}]+)\}\}")


def extract_template_variables(template: str) -> List[str]:
    """Return distinct placeholder names in first-occurrence order."""
    names: List[str] = []
    if not template:
        return names
    for match in PLACEHOLDER_PATTERN.finditer(template):
        name = match.group(1).strip()
        if name and name not in names:
            names.append(name)
    return names


def format_value(value: Any) -> str:
    """Text form of a variable value; booleans and None follow JSON spelling."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def substitute_variables(template: str, variables: Mapping[str, Any]) -> str:
    """
    Replace every ``{{ key }}`` for the keys present in ``variables``.

    Placeholders whose key is not supplied are left untouched, braces included.
    """
    if not variables:
        return template

    keys = sorted((str(key) for key in variables), key=len, reverse=True)
    pattern = re.compile(
        r"\{\{\s*(" + "|".join(re.escape(key) for key in keys) + r")\s*\}\}"
    )
    values: Dict[str, str] = {str(key): format_value(value) for key, value in variables.items()}

    return pattern.sub(lambda match: values[match.group(1)], template)
