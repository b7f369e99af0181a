"""Tests for BridgeConfig."""

import pytest

from mcp_bridge.config import BridgeConfig
from mcp_bridge.protocol.errors import ConfigurationError


class TestBridgeConfig:
    def test_defaults(self) -> None:
        config = BridgeConfig(base_url="https://mcp.example.com", api_key="k")
        assert config.endpoint_path == "/mcp"
        assert config.timeout == 30.0
        assert config.credential_test_path == "/.well-known/oauth-protected-resource"
        assert config.endpoint_url == "https://mcp.example.com/mcp"

    def test_trailing_slash_stripped(self) -> None:
        config = BridgeConfig(base_url="https://mcp.example.com/", api_key="k")
        assert config.base_url == "https://mcp.example.com"

    def test_api_key_hidden_in_repr(self) -> None:
        config = BridgeConfig(base_url="https://mcp.example.com", api_key="top-secret")
        assert "top-secret" not in repr(config)
        assert config.api_key.get_secret_value() == "top-secret"


class TestFromEnv:
    def test_reads_environment(self) -> None:
        config = BridgeConfig.from_env(
            {"MCP_API_URL": "https://mcp.example.com", "MCP_API_KEY": "abc"}
        )
        assert config.base_url == "https://mcp.example.com"
        assert config.api_key.get_secret_value() == "abc"

    def test_uses_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_API_URL", "http://localhost:8080")
        monkeypatch.setenv("MCP_API_KEY", "local")
        assert BridgeConfig.from_env().base_url == "http://localhost:8080"

    def test_missing_url(self) -> None:
        with pytest.raises(ConfigurationError, match="MCP_API_URL"):
            BridgeConfig.from_env({"MCP_API_KEY": "abc"})

    def test_missing_key(self) -> None:
        with pytest.raises(ConfigurationError, match="MCP_API_KEY"):
            BridgeConfig.from_env({"MCP_API_URL": "https://mcp.example.com"})


class TestCreate:
    def test_invalid_url(self) -> None:
        with pytest.raises(ConfigurationError, match="http"):
            BridgeConfig.create("ftp://example.com", "k")

    def test_overrides(self) -> None:
        config = BridgeConfig.create("https://mcp.example.com", "k", timeout=5.0)
        assert config.timeout == 5.0
