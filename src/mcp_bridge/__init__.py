"""mcp-bridge — invoke tools on a remote MCP server over HTTP JSON-RPC."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from mcp_bridge.config import BridgeConfig as BridgeConfig
    from mcp_bridge.node.executor import BridgeNode as BridgeNode

_LAZY_EXPORTS = {
    "BridgeConfig": "mcp_bridge.config",
    "BridgeNode": "mcp_bridge.node.executor",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'mcp_bridge' has no attribute {name!r}")
