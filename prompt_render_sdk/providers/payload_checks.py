from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional


def is_number(value: Any) -> bool:
    """True for int/float values, excluding booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_mapping(value: Any) -> Optional[Dict[str, Any]]:
    """Convert a provider response to a plain dict.

    Accepts dicts, SDK response objects exposing model_dump() and plain
    attribute objects; returns None for anything else.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        return value
    if hasattr(value, "model_dump"):
        dumped = value.model_dump()
        if isinstance(dumped, dict):
            return dumped
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return dict(vars(value))
    return None


def check_messages(
    messages: Any,
    errors: List[str],
    allowed_roles: Iterable[str],
    role_hint: str = "",
) -> bool:
    """Validate a messages array in place.

    Appends to ``errors``; returns False when ``messages`` is not a list so
    callers can skip ordering checks.
    """
    if not isinstance(messages, list):
        errors.append("Messages must be an array")
        return False

    if not messages:
        errors.append("At least one message is required")

    allowed = tuple(allowed_roles)
    for index, message in enumerate(messages):
        message = message if isinstance(message, dict) else {}
        role = message.get("role")
        if not role or role not in allowed:
            errors.append(f"Invalid role at message {index}: {role}{role_hint}")
        if not isinstance(message.get("content"), str):
            errors.append(f"Message content must be string at index {index}")
    return True


def check_sampling_params(
    content: Dict[str, Any],
    errors: List[str],
    max_temperature: float = 2,
    temperature_error: str = "Temperature must be a number between 0 and 2",
) -> None:
    """Range checks for temperature, top_p and (optional) max_tokens."""
    if "temperature" in content:
        temperature = content["temperature"]
        if not is_number(temperature) or temperature < 0 or temperature > max_temperature:
            errors.append(temperature_error)

    if "top_p" in content:
        top_p = content["top_p"]
        if not is_number(top_p) or top_p < 0 or top_p > 1:
            errors.append("top_p must be a number between 0 and 1")

    if "max_tokens" in content:
        max_tokens = content["max_tokens"]
        if not is_number(max_tokens) or max_tokens <= 0:
            errors.append("max_tokens must be a positive number")


def check_penalty(content: Dict[str, Any], field: str, errors: List[str]) -> None:
    """Range check for presence/frequency penalties ([-2, 2])."""
    if field in content:
        value = content[field]
        if not is_number(value) or value < -2 or value > 2:
            errors.append(f"{field} must be a number between -2 and 2")
