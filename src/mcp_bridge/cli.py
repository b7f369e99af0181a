"""mcp-bridge CLI entrypoint."""

from __future__ import annotations

import logging

import click

from mcp_bridge import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcp-bridge")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging verbosity.",
)
def main(log_level: str) -> None:
    """mcp-bridge — call MCP server tools over HTTP."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from mcp_bridge.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
