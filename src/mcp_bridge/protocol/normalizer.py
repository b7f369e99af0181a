"""Collapse MCP ``content`` blocks into a single canonical JSON value.

MCP tools commonly return their real answer as a JSON string inside a
single text block.  :func:`normalize` unwraps that case and leaves every
other shape for the caller to interpret.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from mcp_bridge.protocol.codec import loads_strict
from mcp_bridge.protocol.models import ContentBlock


def normalize(value: Any) -> Any:
    """Unwrap a ``tools/call`` result.  Never raises.

    - no ``content`` list: *value* unchanged
    - one text block: its string text parsed as JSON, else ``{"text": <raw>}``
    - anything else: the ``content`` list unchanged
    """
    if not isinstance(value, dict):
        return value
    content = value.get("content")
    if not isinstance(content, list):
        return value

    block = _single_text_block(content)
    if block is None:
        return content

    text = block.text
    if not isinstance(text, str):
        return {"text": text}
    try:
        return loads_strict(text)
    except (ValueError, RecursionError):
        return {"text": text}


def _single_text_block(content: list[Any]) -> ContentBlock | None:
    if len(content) != 1 or not isinstance(content[0], dict):
        return None
    try:
        block = ContentBlock.model_validate(content[0])
    except ValidationError:
        return None
    return block if block.type == "text" else None
