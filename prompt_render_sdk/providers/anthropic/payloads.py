from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...config.constants import ANTHROPIC_DEFAULT_MAX_TOKENS
from ...models.render import RenderOptions

MESSAGE_ROLES = ("user", "assistant")
ROLE_HINT = ". Anthropic supports only 'user' and 'assistant' roles"


def assemble_messages_params(
    model: str,
    system_content: Optional[str],
    user_content: str,
    options: RenderOptions,
) -> Dict[str, Any]:
    """Build a Messages API body.

    The system prompt is a top-level field, dropped when there is none.
    max_tokens is mandatory for this API and always present.
    """
    params: Dict[str, Any] = {
        "model": model,
        "messages": [{"role": "user", "content": user_content}],
        "max_tokens": options.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
    }
    if system_content is not None:
        params["system"] = system_content
    if options.temperature is not None:
        params["temperature"] = options.temperature
    if options.top_p is not None:
        params["top_p"] = options.top_p
    return params


def estimation_text(params: Dict[str, Any]) -> str:
    messages: List[Dict[str, str]] = params["messages"]
    joined = " ".join(m["content"] for m in messages)
    return f"{params.get('system') or ''} {joined}"
