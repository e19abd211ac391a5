from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...models.render import RenderOptions

CHAT_ROLES = ("system", "user", "assistant")


def build_chat_messages(system_content: Optional[str], user_content: str) -> List[Dict[str, str]]:
    """Build a chat-completions messages list.

    The system message, when present, is always the first entry.
    """
    messages: List[Dict[str, str]] = []
    if system_content is not None:
        messages.append({"role": "system", "content": system_content})
    messages.append({"role": "user", "content": user_content})
    return messages


def assemble_chat_params(model: str, messages: List[Dict[str, str]], options: RenderOptions) -> Dict[str, Any]:
    """Assemble a chat-completions body; optional parameters only when set."""
    params: Dict[str, Any] = {
        "model": model,
        "messages": messages,
    }
    if options.temperature is not None:
        params["temperature"] = options.temperature
    if options.top_p is not None:
        params["top_p"] = options.top_p
    if options.max_tokens is not None:
        params["max_tokens"] = options.max_tokens
    return params


def chat_render_metadata(messages: List[Dict[str, str]], estimated_tokens: int) -> Dict[str, Any]:
    """Metadata shared by the chat-completions style adapters."""
    return {
        "message_count": len(messages),
        "has_system_message": any(m["role"] == "system" for m in messages),
        "estimated_tokens": estimated_tokens,
    }


def joined_message_text(messages: List[Dict[str, str]]) -> str:
    """Space-joined message contents, the input of the token estimate."""
    return " ".join(m["content"] for m in messages)
