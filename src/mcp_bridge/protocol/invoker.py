"""ToolInvoker — executes one MCP tool call (``tools/call``)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp_bridge.protocol.errors import BridgeError, ToolInvocationFailed
from mcp_bridge.protocol.models import JsonRpcRequest
from mcp_bridge.protocol.normalizer import normalize
from mcp_bridge.utils.telemetry import ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from mcp_bridge.protocol.codec import EnvelopeCodec

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ToolInvoker:
    """Calls a tool and normalizes its result.

    Usage::

        invoker = ToolInvoker(codec)
        value = await invoker.invoke("send_message", {"to": "+1555"}, call_sequence=1)
    """

    def __init__(self, codec: EnvelopeCodec) -> None:
        self._codec = codec

    async def invoke(self, tool_id: str, arguments: dict[str, Any], call_sequence: int = 1) -> Any:
        """Send ``tools/call`` for *tool_id* and return the canonical result.

        *call_sequence* becomes the JSON-RPC id; it only aids tracing.

        Raises:
            ToolInvocationFailed: On transport or decode failure, or when
                the server answers with a JSON-RPC error.
        """
        request = JsonRpcRequest(
            method="tools/call",
            id=call_sequence,
            params={"name": tool_id, "arguments": arguments},
        )
        with _tracer.start_as_current_span("mcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, tool_id)
            try:
                response = await self._codec.send(request)
            except BridgeError as exc:
                raise ToolInvocationFailed(tool_id, str(exc)) from exc

        if response.error is not None:
            raise ToolInvocationFailed(
                tool_id, response.error.message or f"error {response.error.code}"
            )

        if response.result is None:
            logger.debug("tools/call %s returned no result; normalizing raw response", tool_id)
            return normalize(response.raw())
        return normalize(response.result)
