from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..payload_checks import to_mapping


def extract_content_blocks(response: Any) -> Optional[List[Any]]:
    """Content blocks of a messages response, or None when unusable."""
    data = to_mapping(response)
    if not data:
        return None

    blocks = data.get("content")
    if not isinstance(blocks, list) or not blocks:
        return None
    return blocks


def extract_text_from_blocks(blocks: List[Any]) -> str:
    """Concatenate the text of all "text" blocks."""
    text_content = ""
    for content_block in blocks:
        block = to_mapping(content_block) or {}
        if block.get("type") == "text":
            text_content += block.get("text") or ""
    return text_content


def messages_response_metadata(response: Any) -> Dict[str, Any]:
    data = to_mapping(response) or {}
    return {
        "model": data.get("model"),
        "usage": data.get("usage"),
        "stop_reason": data.get("stop_reason"),
        "stop_sequence": data.get("stop_sequence"),
    }
