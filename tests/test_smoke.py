"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import mcp_bridge

    assert mcp_bridge.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from mcp_bridge.cli import main

    assert callable(main)


def test_protocol_imports() -> None:
    from mcp_bridge.protocol import (
        EnvelopeCodec,
        HttpTransport,
        ToolCatalog,
        ToolInvoker,
        normalize,
    )

    assert EnvelopeCodec is not None
    assert HttpTransport is not None
    assert ToolCatalog is not None
    assert ToolInvoker is not None
    assert callable(normalize)


def test_lazy_import_from_package() -> None:
    import mcp_bridge

    assert mcp_bridge.BridgeNode is not None
    assert mcp_bridge.BridgeConfig is not None
