"""Protocol layer — MCP JSON-RPC over HTTP."""

from mcp_bridge.protocol.catalog import ToolCatalog
from mcp_bridge.protocol.codec import EnvelopeCodec, decode_body, encode_request, loads_strict
from mcp_bridge.protocol.errors import (
    BridgeError,
    ConfigurationError,
    ProtocolDecodeError,
    ProtocolEncodeError,
    ToolInvocationFailed,
    ToolListUnavailable,
    TransportError,
)
from mcp_bridge.protocol.invoker import ToolInvoker
from mcp_bridge.protocol.models import (
    ContentBlock,
    HttpReply,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolDescriptor,
)
from mcp_bridge.protocol.normalizer import normalize
from mcp_bridge.protocol.transport import HttpTransport, MCPTransport

__all__ = [
    "BridgeError",
    "ConfigurationError",
    "ContentBlock",
    "EnvelopeCodec",
    "HttpReply",
    "HttpTransport",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPTransport",
    "ProtocolDecodeError",
    "ProtocolEncodeError",
    "ToolCatalog",
    "ToolDescriptor",
    "ToolInvocationFailed",
    "ToolInvoker",
    "ToolListUnavailable",
    "TransportError",
    "decode_body",
    "encode_request",
    "loads_strict",
    "normalize",
]
