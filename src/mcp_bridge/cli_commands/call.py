"""``mcp-bridge call`` — invoke a single tool from the command line."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any

import click
import yaml
from rich.markup import escape

from mcp_bridge.cli_commands._output import connection_options, console, print_results


@click.command()
@click.argument("tool")
@connection_options
@click.option("--field", "-f", "fields", multiple=True, help="Typed tool field as NAME=VALUE.")
@click.option(
    "--param", "-p", "params", multiple=True, help="Generic tool parameter as NAME=VALUE."
)
@click.option(
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML/JSON file with one input record or a list of records.",
)
@click.option("--generic", is_flag=True, help="Ignore typed fields; use generic parameters only.")
@click.option("--continue-on-fail", is_flag=True, help="Emit error records instead of aborting.")
def call(
    tool: str,
    url: str | None,
    api_key: str | None,
    fields: tuple[str, ...],
    params: tuple[str, ...],
    input_file: str | None,
    generic: bool,
    continue_on_fail: bool,
) -> None:
    """Call TOOL on the MCP server and print the normalized result."""
    from mcp_bridge.arguments.models import GenericParameter
    from mcp_bridge.config import BridgeConfig
    from mcp_bridge.node.executor import BridgeNode
    from mcp_bridge.node.models import ItemResult, NodeParameters
    from mcp_bridge.protocol.errors import BridgeError

    try:
        field_values = _coerce_fields(tool, _parse_pairs(fields))
        rows = [GenericParameter(name=k, value=v) for k, v in _parse_pairs(params).items()]
        items = _load_items(Path(input_file)) if input_file else [{}]
    except click.BadParameter as exc:
        console.print(f"[red]Invalid input:[/red] {escape(exc.message)}")
        sys.exit(2)

    parameters = NodeParameters(tool=tool, fields=field_values, parameters=rows)

    async def _call() -> list[ItemResult]:
        async with BridgeNode(config, specialized_fields=not generic) as node:
            return await node.execute(items, parameters, continue_on_fail=continue_on_fail)

    try:
        config = BridgeConfig.create(url, api_key)
        results = asyncio.run(_call())
    except BridgeError as exc:
        console.print(f"[red]Execution error:[/red] {escape(str(exc))}")
        sys.exit(1)

    print_results(results)


def _parse_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            msg = f"expected NAME=VALUE, got {pair!r}"
            raise click.BadParameter(msg)
        parsed[name] = value
    return parsed


def _coerce_fields(tool: str, raw: dict[str, str]) -> dict[str, Any]:
    """Convert command-line strings for boolean and number fields."""
    from mcp_bridge.arguments.coerce import Parsed, try_parse_json
    from mcp_bridge.arguments.fields import SPECIALIZED_TOOLS

    kinds = {spec.name: spec.kind for spec in SPECIALIZED_TOOLS.get(tool, [])}
    coerced: dict[str, Any] = {}
    for name, value in raw.items():
        if kinds.get(name) in ("boolean", "number"):
            outcome = try_parse_json(value)
            coerced[name] = outcome.value if isinstance(outcome, Parsed) else value
        else:
            coerced[name] = value
    return coerced


def _load_items(path: Path) -> list[Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise click.BadParameter(str(exc)) from exc
    if data is None:
        return [{}]
    return data if isinstance(data, list) else [data]
