"""Bridge configuration — MCP server location, API key and HTTP settings."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, SecretStr, ValidationError, field_validator

from mcp_bridge.protocol.errors import ConfigurationError

ENV_BASE_URL = "MCP_API_URL"
ENV_API_KEY = "MCP_API_KEY"


class BridgeConfig(BaseModel):
    """Where the MCP server lives and how to authenticate against it.

    The base URL is deployment specific and has no built-in default; it is
    normally read from ``MCP_API_URL`` via :meth:`from_env`.
    """

    base_url: str
    api_key: SecretStr
    endpoint_path: str = "/mcp"
    timeout: float = 30.0
    credential_test_path: str = "/.well-known/oauth-protected-resource"

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            msg = f"base_url must be an http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def _check_api_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            msg = "api_key must not be empty"
            raise ValueError(msg)
        return value

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}{self.endpoint_path}"

    @classmethod
    def create(
        cls,
        base_url: str | None,
        api_key: str | None,
        **overrides: object,
    ) -> BridgeConfig:
        """Build a config, raising :class:`ConfigurationError` on bad input."""
        if not base_url:
            msg = f"MCP server URL is not configured (set {ENV_BASE_URL})"
            raise ConfigurationError(msg)
        if not api_key:
            msg = f"MCP API key is not configured (set {ENV_API_KEY})"
            raise ConfigurationError(msg)
        try:
            return cls.model_validate({"base_url": base_url, "api_key": api_key, **overrides})
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BridgeConfig:
        """Read ``MCP_API_URL`` and ``MCP_API_KEY`` from the environment."""
        env = os.environ if environ is None else environ
        return cls.create(env.get(ENV_BASE_URL), env.get(ENV_API_KEY))
