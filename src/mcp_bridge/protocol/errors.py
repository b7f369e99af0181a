"""Shared error types for the protocol layer."""

from __future__ import annotations


class BridgeError(Exception):
    """Base error for all bridge failures."""


class ConfigurationError(BridgeError):
    """Required configuration is missing or invalid."""


class TransportError(BridgeError):
    """The HTTP round trip failed (network error or non-2xx status)."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class ProtocolDecodeError(BridgeError):
    """A response body could not be decoded as JSON or SSE-wrapped JSON."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Could not decode MCP response" + (f": {detail}" if detail else ""))


class ToolListUnavailable(BridgeError):
    """Fetching the tool catalog from the MCP server failed."""

    def __init__(self, detail: str = "Unknown error") -> None:
        self.detail = detail
        super().__init__(f"Failed to fetch tools from MCP server: {detail}")


class ToolInvocationFailed(BridgeError):
    """A ``tools/call`` request failed or returned a JSON-RPC error."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool invocation failed: {name}" + (f": {detail}" if detail else ""))


class ProtocolEncodeError(BridgeError):
    """A request could not be serialized as JSON (e.g. a NaN argument)."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Could not encode MCP request" + (f": {detail}" if detail else ""))
