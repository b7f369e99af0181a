"""EnvelopeCodec — JSON-RPC request encoding and response decoding.

MCP servers may answer a synchronous POST with either a plain JSON body or
a single Server-Sent-Events frame.  Only the first ``data:`` event is read;
this is a compatibility shim, not a streaming reader.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from mcp_bridge.protocol.errors import ProtocolDecodeError, ProtocolEncodeError
from mcp_bridge.protocol.models import JsonRpcRequest, JsonRpcResponse
from mcp_bridge.utils.telemetry import (
    ATTR_CONTENT_TYPE,
    ATTR_RPC_ID,
    ATTR_RPC_METHOD,
    get_tracer,
)

if TYPE_CHECKING:
    from mcp_bridge.protocol.transport import MCPTransport

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

SSE_CONTENT_TYPE = "text/event-stream"

REQUEST_HEADERS = {
    "Accept": "application/json, text/event-stream",
    "Content-Type": "application/json",
}


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def loads_strict(text: str) -> Any:
    """Parse RFC 8259 JSON only.

    Rejects the ``NaN`` and ``Infinity`` tokens :func:`json.loads` accepts.
    Raises ``ValueError`` (including ``JSONDecodeError``) or ``RecursionError``
    for pathologically nested input.
    """
    return json.loads(text, parse_constant=_reject_constant)


def encode_request(request: JsonRpcRequest) -> bytes:
    """Serialize a request to a JSON body.

    Raises:
        ProtocolEncodeError: The params hold a value JSON cannot represent.
    """
    try:
        return json.dumps(request.model_dump(), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise ProtocolEncodeError(str(exc)) from exc


def extract_sse_data(text: str) -> dict[str, Any]:
    """Return the JSON object carried by the first ``data:`` line.

    Lines are scanned individually so braces inside JSON strings cannot
    confuse the match.  A body with no JSON ``data:`` line yields ``{}``.
    """
    for line in text.splitlines():
        if not line.startswith("data:"):
            continue
        payload = line[len("data:") :]
        if payload.startswith(" "):
            payload = payload[1:]
        if not payload.lstrip().startswith("{"):
            continue
        try:
            return loads_strict(payload)  # type: ignore[no-any-return]
        except (ValueError, RecursionError) as exc:
            raise ProtocolDecodeError(f"invalid JSON in SSE data line: {exc}") from exc
    logger.debug("SSE body carried no JSON data line")
    return {}


def decode_body(content_type: str, body: Any) -> dict[str, Any]:
    """Decode a raw HTTP body into a JSON-RPC response object."""
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ProtocolDecodeError(f"body is not valid UTF-8: {exc}") from exc

    if SSE_CONTENT_TYPE in content_type.lower():
        if isinstance(body, dict):
            return body
        return extract_sse_data(str(body))

    if isinstance(body, str):
        try:
            data = loads_strict(body)
        except (ValueError, RecursionError) as exc:
            raise ProtocolDecodeError(str(exc)) from exc
    else:
        data = body

    if not isinstance(data, dict):
        raise ProtocolDecodeError(f"expected a JSON object, got {type(data).__name__}")
    return data


class EnvelopeCodec:
    """Sends JSON-RPC requests through an :class:`MCPTransport`.

    Usage::

        codec = EnvelopeCodec(transport)
        response = await codec.send(JsonRpcRequest(method="tools/list"))
    """

    def __init__(self, transport: MCPTransport, path: str = "/mcp") -> None:
        self._transport = transport
        self._path = path

    async def send(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Encode *request*, POST it, and decode the reply.

        Raises:
            TransportError: The HTTP round trip failed.
            ProtocolEncodeError: The request could not be serialized.
            ProtocolDecodeError: The body was not a JSON-RPC response.
        """
        with _tracer.start_as_current_span("mcp.rpc") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)
            span.set_attribute(ATTR_RPC_ID, request.id)

            reply = await self._transport.post(
                self._path, encode_request(request), dict(REQUEST_HEADERS)
            )
            span.set_attribute(ATTR_CONTENT_TYPE, reply.content_type)
            logger.debug(
                "%s (id=%s) answered with %s", request.method, request.id, reply.content_type
            )

            raw = decode_body(reply.content_type, reply.body)
            try:
                return JsonRpcResponse.model_validate(raw)
            except ValidationError as exc:
                raise ProtocolDecodeError(str(exc)) from exc
