"""HTTP transport — the authenticated client the envelope codec sends through.

Any object satisfying the :class:`MCPTransport` protocol can stand in for
:class:`HttpTransport`, which keeps the codec independent of httpx.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from mcp_bridge.protocol.errors import TransportError
from mcp_bridge.protocol.models import HttpReply

if TYPE_CHECKING:
    from mcp_bridge.config import BridgeConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class MCPTransport(Protocol):
    """Abstract authenticated HTTP transport for MCP JSON-RPC calls."""

    async def post(self, path: str, content: bytes, headers: dict[str, str]) -> HttpReply: ...
    async def get(self, path: str) -> HttpReply: ...
    async def close(self) -> None: ...


class HttpTransport:
    """Sends requests to the MCP server with a bearer token attached.

    Usage::

        async with HttpTransport(config) as transport:
            reply = await transport.post("/mcp", body, headers)

    The client is created lazily on first use so a transport can be built
    outside an event loop.
    """

    def __init__(
        self,
        config: BridgeConfig,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HttpTransport:
        self._http()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url.rstrip("/"),
                headers={"Authorization": f"Bearer {self._config.api_key.get_secret_value()}"},
                timeout=self._config.timeout,
                transport=self._http_transport,
            )
        return self._client

    async def post(self, path: str, content: bytes, headers: dict[str, str]) -> HttpReply:
        """POST *content* to *path* and return the full reply."""
        return await self._request("POST", path, content=content, headers=headers)

    async def get(self, path: str) -> HttpReply:
        """GET *path* and return the full reply."""
        return await self._request("GET", path)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpReply:
        logger.debug("%s %s", method, path)
        try:
            response = await self._http().request(method, path, content=content, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(str(exc), status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        return HttpReply(
            status_code=response.status_code,
            headers={key.lower(): value for key, value in response.headers.items()},
            body=response.text,
        )
