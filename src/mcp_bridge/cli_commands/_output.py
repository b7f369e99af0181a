"""Shared CLI output formatters and connection options."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click
from rich.console import Console
from rich.table import Table

from mcp_bridge.config import ENV_API_KEY, ENV_BASE_URL

if TYPE_CHECKING:
    from mcp_bridge.node.models import ItemResult
    from mcp_bridge.protocol.models import ToolDescriptor

console = Console()

F = TypeVar("F", bound=Callable[..., Any])


def connection_options(func: F) -> F:
    """Add ``--url`` and ``--api-key`` options backed by environment variables."""
    func = click.option(
        "--api-key",
        envvar=ENV_API_KEY,
        default=None,
        help=f"API key sent as a bearer token [env: {ENV_API_KEY}].",
    )(func)
    func = click.option(
        "--url",
        envvar=ENV_BASE_URL,
        default=None,
        help=f"Base URL of the MCP server [env: {ENV_BASE_URL}].",
    )(func)
    return func


def print_tools_table(tools: list[ToolDescriptor]) -> None:
    """Pretty-print the tool catalog as a table."""
    table = Table(title="Available Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for tool in tools:
        table.add_row(tool.label, _truncate(tool.description))

    console.print(table)


def print_results(results: list[ItemResult]) -> None:
    """Print output records as JSON, one entry per input item."""
    payload = [r.model_dump(by_alias=True) for r in results]
    console.print_json(json.dumps(payload, default=str))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
