"""Tests for ``mcp-bridge auth`` CLI command."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from mcp_bridge.cli import main
from mcp_bridge.protocol.errors import TransportError

_CONN = ["--url", "https://mcp.example.com", "--api-key", "k"]


class TestAuthTest:
    def test_accepted(self) -> None:
        with patch("mcp_bridge.node.executor.BridgeNode") as mock_node_cls:
            node = mock_node_cls.return_value
            node.__aenter__ = AsyncMock(return_value=node)
            node.__aexit__ = AsyncMock(return_value=False)
            node.test_credentials = AsyncMock()

            result = CliRunner().invoke(main, ["auth", "test", *_CONN])

        assert result.exit_code == 0
        assert "Credentials accepted" in result.output
        node.test_credentials.assert_awaited_once()

    def test_rejected(self) -> None:
        with patch("mcp_bridge.node.executor.BridgeNode") as mock_node_cls:
            node = mock_node_cls.return_value
            node.__aenter__ = AsyncMock(return_value=node)
            node.__aexit__ = AsyncMock(return_value=False)
            node.test_credentials = AsyncMock(
                side_effect=TransportError("401 Unauthorized", status_code=401)
            )

            result = CliRunner().invoke(main, ["auth", "test", *_CONN])

        assert result.exit_code == 1
        assert "401 Unauthorized" in result.output
