from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from ..payload_checks import to_mapping


def extract_first_choice(response: Any) -> Optional[Tuple[Dict[str, Any], Dict[str, Any]]]:
    """Return (response_dict, first_choice_dict) of a chat-completions response.

    Returns None when the response has no choices.
    """
    data = to_mapping(response)
    if not data:
        return None

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None

    choice = to_mapping(choices[0]) or {}
    return data, choice


def extract_choice_text(choice: Dict[str, Any]) -> str:
    """Message content when present, else the legacy completions text field."""
    message = to_mapping(choice.get("message")) or {}
    return message.get("content") or choice.get("text") or ""


def chat_response_metadata(data: Dict[str, Any], choice: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "model": data.get("model"),
        "usage": data.get("usage"),
        "finish_reason": choice.get("finish_reason"),
        "index": choice.get("index"),
    }
