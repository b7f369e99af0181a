"""Argument building — turn UI fields and input records into tool arguments."""

from mcp_bridge.arguments.builder import ArgumentBuilder
from mcp_bridge.arguments.coerce import Parsed, Unparsed, try_parse_json
from mcp_bridge.arguments.fields import SPECIALIZED_TOOLS, is_host_metadata
from mcp_bridge.arguments.models import (
    ArgumentParseSkipped,
    BuildReport,
    GenericParameter,
    ToolFieldSpec,
)

__all__ = [
    "SPECIALIZED_TOOLS",
    "ArgumentBuilder",
    "ArgumentParseSkipped",
    "BuildReport",
    "GenericParameter",
    "Parsed",
    "ToolFieldSpec",
    "Unparsed",
    "is_host_metadata",
    "try_parse_json",
]
