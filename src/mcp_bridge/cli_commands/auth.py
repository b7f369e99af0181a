"""``mcp-bridge auth`` — check the configured API key."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.markup import escape

from mcp_bridge.cli_commands._output import connection_options, console


@click.group()
def auth() -> None:
    """Manage and verify credentials."""


@auth.command("test")
@connection_options
def test(url: str | None, api_key: str | None) -> None:
    """Send the credential test request to the MCP server."""
    from mcp_bridge.config import BridgeConfig
    from mcp_bridge.node.executor import BridgeNode
    from mcp_bridge.protocol.errors import BridgeError

    async def _test() -> None:
        async with BridgeNode(config) as node:
            await node.test_credentials()

    try:
        config = BridgeConfig.create(url, api_key)
        asyncio.run(_test())
    except BridgeError as exc:
        console.print(f"[red]Credential test failed:[/red] {escape(str(exc))}")
        sys.exit(1)

    console.print("[green]Credentials accepted.[/green]")
