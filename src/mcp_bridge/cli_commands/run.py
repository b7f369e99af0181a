"""``mcp-bridge run`` — execute a job file."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.markup import escape

from mcp_bridge.cli_commands._output import connection_options, console, print_results


@click.command()
@click.argument("job", type=click.Path(exists=True))
@connection_options
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--telemetry", is_flag=True, help="Export tracing spans to the console.")
@click.option("--dry-run", is_flag=True, help="Validate the job only, do not execute.")
def run(
    job: str,
    url: str | None,
    api_key: str | None,
    verbose: bool,
    telemetry: bool,
    dry_run: bool,
) -> None:
    """Execute the job defined in JOB (YAML or JSON)."""
    from mcp_bridge.config import BridgeConfig
    from mcp_bridge.node.executor import BridgeNode
    from mcp_bridge.node.loader import JobLoader
    from mcp_bridge.node.models import ItemResult
    from mcp_bridge.protocol.errors import BridgeError

    try:
        spec = JobLoader(Path(job)).load()
    except BridgeError as exc:
        console.print(f"[red]Validation error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if dry_run:
        console.print("[green]Job validated successfully.[/green]")
        console.print(f"  Tool: {spec.tool}")
        console.print(f"  Items: {len(spec.items)}")
        return

    if telemetry:
        from mcp_bridge.utils.telemetry import configure_telemetry

        configure_telemetry()

    if verbose:
        console.print(f"Running {spec.tool} over {len(spec.items)} item(s)")

    async def _run() -> list[ItemResult]:
        async with BridgeNode(config, specialized_fields=not spec.generic) as node:
            return await node.execute(
                spec.items, spec.node_parameters(), continue_on_fail=spec.continue_on_fail
            )

    try:
        config = BridgeConfig.create(url or spec.server.url, api_key or spec.server.api_key)
        results = asyncio.run(_run())
    except BridgeError as exc:
        console.print(f"[red]Execution error:[/red] {escape(str(exc))}")
        sys.exit(1)

    print_results(results)
