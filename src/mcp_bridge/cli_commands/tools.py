"""``mcp-bridge tools`` — discover tools exposed by the MCP server."""

from __future__ import annotations

import asyncio
import json
import sys

import click
from rich.markup import escape

from mcp_bridge.cli_commands._output import connection_options, console, print_tools_table


@click.group()
def tools() -> None:
    """Discover and inspect tools."""


@tools.command("list")
@connection_options
@click.option("--json", "as_json", is_flag=True, help="Print picker options as JSON.")
def list_tools(url: str | None, api_key: str | None, as_json: bool) -> None:
    """List the tools the MCP server exposes."""
    from mcp_bridge.config import BridgeConfig
    from mcp_bridge.node.executor import BridgeNode
    from mcp_bridge.protocol.errors import BridgeError
    from mcp_bridge.protocol.models import ToolDescriptor

    async def _list() -> list[ToolDescriptor]:
        async with BridgeNode(config) as node:
            return await node.list_tools()

    try:
        config = BridgeConfig.create(url, api_key)
        descriptors = asyncio.run(_list())
    except BridgeError as exc:
        console.print(f"[red]Discovery error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if as_json:
        console.print_json(json.dumps([d.as_option() for d in descriptors]))
        return

    if not descriptors:
        console.print("[yellow]No tools available.[/yellow]")
        return

    print_tools_table(descriptors)
