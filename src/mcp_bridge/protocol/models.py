"""MCP models — JSON-RPC 2.0 messages, HTTP replies and tool descriptors.

Implements the message format used by the Model Context Protocol for
tool discovery (``tools/list``) and execution (``tools/call``).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------

McpMethod = Literal["tools/list", "tools/call"]


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    jsonrpc: str = "2.0"
    id: int = 1
    method: McpMethod
    params: dict[str, Any] = Field(default_factory=dict)


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object.

    Defaults are lenient so that a server returning a partial error object
    still surfaces as an error rather than a decode failure.
    """

    model_config = ConfigDict(extra="allow")

    code: int = 0
    message: str = ""
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` / ``error`` is expected but not enforced; a
    response with neither is an empty result.
    """

    model_config = ConfigDict(extra="allow")

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: JsonRpcError | None = None

    def raw(self) -> dict[str, Any]:
        """Return only the keys the server actually sent."""
        data = self.model_dump(exclude_unset=True)
        data.update(self.model_extra or {})
        return data


# ---------------------------------------------------------------------------
# HTTP transport payloads
# ---------------------------------------------------------------------------


class HttpReply(BaseModel):
    """A full HTTP response as handed to the codec."""

    status_code: int = 200
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = ""

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ContentBlock(BaseModel):
    """One block of ``tools/call`` output (``result.content[i]``)."""

    model_config = ConfigDict(extra="allow")

    type: str
    text: Any = None


class ToolDescriptor(BaseModel):
    """A tool as presented to a configuration UI."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    label: str
    description: str = ""

    def as_option(self) -> dict[str, str]:
        """Shape used by option pickers: ``{name, value, description}``."""
        return {"name": self.label, "value": self.id, "description": self.description}
