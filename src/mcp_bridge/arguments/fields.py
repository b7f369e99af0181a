"""Typed UI fields for the tools the node knows by name.

Tools missing from :data:`SPECIALIZED_TOOLS` are configured through the
generic parameter table instead.
"""

from __future__ import annotations

from mcp_bridge.arguments.models import ToolFieldSpec

ToolFieldTable = dict[str, list[ToolFieldSpec]]

_TO = ToolFieldSpec(
    name="to",
    description="Recipient phone number (+1234567890, 234-567-8900, (234) 567-8900, ...)",
)
_MESSAGE = ToolFieldSpec(name="message", description="Message content to send")

SPECIALIZED_TOOLS: ToolFieldTable = {
    "send_message": [_TO, _MESSAGE],
    "schedule_message": [
        _TO,
        _MESSAGE,
        ToolFieldSpec(
            name="scheduledTime",
            kind="datetime",
            description="When to send the message (ISO 8601)",
        ),
    ],
    "create_group": [
        ToolFieldSpec(name="name", description="Name of the group to create"),
        ToolFieldSpec(name="description", description="Description of the group"),
        ToolFieldSpec(name="displayName", description="Display name of the group"),
        ToolFieldSpec(name="hidden", kind="boolean", default=False),
        ToolFieldSpec(name="sortOrder", kind="number", default=0),
        ToolFieldSpec(name="isTemporary", kind="boolean", default=False),
        ToolFieldSpec(
            name="settings",
            kind="json",
            description="Adaptive group membership rules",
        ),
    ],
    "add_subscribers": [
        ToolFieldSpec(
            name="subscribers",
            kind="json",
            description='Subscribers to add or update; each needs "number" or "email"',
        ),
        ToolFieldSpec(
            name="createOnly",
            kind="boolean",
            default=False,
            description="Only create new subscribers and skip existing ones",
        ),
    ],
}


def is_host_metadata(key: str) -> bool:
    """Default metadata filter: ``_``-prefixed keys and the literal ``json`` key."""
    return key.startswith("_") or key == "json"
