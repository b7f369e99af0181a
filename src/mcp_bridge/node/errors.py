"""Node error types."""

from __future__ import annotations

from mcp_bridge.protocol.errors import BridgeError


class ItemExecutionError(BridgeError):
    """Processing an input item failed and continue-on-fail was off."""

    def __init__(self, item_index: int, detail: str) -> None:
        self.item_index = item_index
        self.detail = detail
        super().__init__(f"{detail} [item {item_index}]")


class JobValidationError(BridgeError):
    """Raised when a job file fails parsing or validation."""
