"""BridgeNode — the host-facing surface of the MCP bridge.

Wires the HTTP transport, envelope codec, catalog, argument builder and
invoker together, and runs the per-item loop the workflow host drives.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from mcp_bridge.arguments.builder import ArgumentBuilder
from mcp_bridge.arguments.fields import SPECIALIZED_TOOLS, is_host_metadata
from mcp_bridge.node.errors import ItemExecutionError
from mcp_bridge.node.models import ItemResult, NodeParameters
from mcp_bridge.protocol.catalog import ToolCatalog
from mcp_bridge.protocol.codec import EnvelopeCodec
from mcp_bridge.protocol.invoker import ToolInvoker
from mcp_bridge.protocol.transport import HttpTransport
from mcp_bridge.utils.telemetry import (
    ATTR_CONTINUE_ON_FAIL,
    ATTR_ITEM_INDEX,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from mcp_bridge.config import BridgeConfig
    from mcp_bridge.protocol.models import ToolDescriptor
    from mcp_bridge.protocol.transport import MCPTransport

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

ParameterSource = NodeParameters | Callable[[int], NodeParameters]


class BridgeNode:
    """Async context manager exposing tool discovery and per-item execution.

    ``specialized_fields=False`` gives the generic variant, where every
    tool is configured through the name/value parameter table.

    Usage::

        async with BridgeNode(BridgeConfig.from_env()) as node:
            options = await node.tool_options()
            results = await node.execute(
                [{"to": "+15550100"}],
                NodeParameters(tool="send_message", fields={"message": "hi"}),
                continue_on_fail=True,
            )
    """

    def __init__(
        self,
        config: BridgeConfig,
        *,
        specialized_fields: bool = True,
        metadata_filter: Callable[[str], bool] = is_host_metadata,
        transport: MCPTransport | None = None,
    ) -> None:
        self._config = config
        self._transport: MCPTransport = transport or HttpTransport(config)
        codec = EnvelopeCodec(self._transport, path=config.endpoint_path)
        self._catalog = ToolCatalog(codec)
        self._invoker = ToolInvoker(codec)
        self._builder = ArgumentBuilder(
            SPECIALIZED_TOOLS if specialized_fields else {},
            metadata_filter=metadata_filter,
        )

    async def __aenter__(self) -> BridgeNode:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()

    @property
    def builder(self) -> ArgumentBuilder:
        return self._builder

    async def list_tools(self) -> list[ToolDescriptor]:
        """Return the server's tools (raises ``ToolListUnavailable``)."""
        return await self._catalog.list_tools()

    async def tool_options(self) -> list[dict[str, str]]:
        """Return tools as ``{name, value, description}`` picker options."""
        return [tool.as_option() for tool in await self.list_tools()]

    async def test_credentials(self) -> None:
        """Request the credential test path; raises ``TransportError`` on rejection."""
        await self._transport.get(self._config.credential_test_path)

    async def call(self, parameters: NodeParameters, record: Any = None, *, item_index: int = 0) -> Any:
        """Build arguments for one item and invoke the tool."""
        arguments = self._builder.build(
            parameters.tool, parameters.fields, parameters.parameters, record
        )
        logger.debug("Calling %s with %d argument(s)", parameters.tool, len(arguments))
        return await self._invoker.invoke(parameters.tool, arguments, call_sequence=item_index + 1)

    async def execute(
        self,
        items: Sequence[Any],
        parameters: ParameterSource,
        *,
        continue_on_fail: bool = False,
    ) -> list[ItemResult]:
        """Run the selected tool once per item, in order.

        With *continue_on_fail* a failing item yields ``{"error": <message>}``
        at its position; otherwise the first failure raises
        :class:`ItemExecutionError` and later items are not processed.
        """
        results: list[ItemResult] = []
        for index, record in enumerate(items):
            with _tracer.start_as_current_span("bridge.item") as span:
                span.set_attribute(ATTR_ITEM_INDEX, index)
                span.set_attribute(ATTR_CONTINUE_ON_FAIL, continue_on_fail)
                try:
                    params = parameters(index) if callable(parameters) else parameters
                    span.set_attribute(ATTR_TOOL_NAME, params.tool)
                    value = await self.call(params, record, item_index=index)
                except Exception as exc:
                    if not continue_on_fail:
                        raise ItemExecutionError(index, str(exc) or "Unknown error") from exc
                    logger.warning("Item %d failed: %s", index, exc)
                    results.append(
                        ItemResult(json={"error": str(exc) or "Unknown error"}, paired_item=index)
                    )
                    continue
            results.append(ItemResult(json=value, paired_item=index))
        return results
