"""ToolCatalog — discovers the tools an MCP server exposes (``tools/list``)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp_bridge.protocol.errors import BridgeError, ToolListUnavailable
from mcp_bridge.protocol.models import JsonRpcRequest, ToolDescriptor

if TYPE_CHECKING:
    from mcp_bridge.protocol.codec import EnvelopeCodec

logger = logging.getLogger(__name__)


class ToolCatalog:
    """Fetches and flattens the server's tool list.

    A server exposing zero tools is not an error; any transport, decode or
    JSON-RPC failure is raised as :class:`ToolListUnavailable` and no
    partial list is returned.
    """

    def __init__(self, codec: EnvelopeCodec) -> None:
        self._codec = codec

    async def list_tools(self) -> list[ToolDescriptor]:
        """Send ``tools/list`` and map each entry to a :class:`ToolDescriptor`."""
        try:
            response = await self._codec.send(JsonRpcRequest(method="tools/list", id=1))
        except BridgeError as exc:
            raise ToolListUnavailable(str(exc)) from exc

        if response.error is not None:
            raise ToolListUnavailable(response.error.message or f"error {response.error.code}")

        result = response.result
        raw_tools = result.get("tools") if isinstance(result, dict) else None
        if not isinstance(raw_tools, list):
            return []

        descriptors: list[ToolDescriptor] = []
        seen: set[str] = set()
        for raw in raw_tools:
            descriptor = self._to_descriptor(raw)
            if descriptor is None or descriptor.id in seen:
                continue
            seen.add(descriptor.id)
            descriptors.append(descriptor)
        logger.debug("Discovered %d tool(s)", len(descriptors))
        return descriptors

    @staticmethod
    def _to_descriptor(raw: Any) -> ToolDescriptor | None:
        if not isinstance(raw, dict):
            return None
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            logger.debug("Skipping tool entry without a name: %r", raw)
            return None
        description = raw.get("description")
        return ToolDescriptor(
            id=name,
            label=name,
            description=description if isinstance(description, str) else "",
        )
