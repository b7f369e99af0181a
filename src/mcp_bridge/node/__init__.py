"""Host-facing node — tool options, per-item execution, job files."""

from mcp_bridge.node.errors import ItemExecutionError, JobValidationError
from mcp_bridge.node.executor import BridgeNode
from mcp_bridge.node.loader import JobLoader, parse_job
from mcp_bridge.node.models import ItemResult, JobSpec, NodeParameters, ServerSettings

__all__ = [
    "BridgeNode",
    "ItemExecutionError",
    "ItemResult",
    "JobLoader",
    "JobSpec",
    "JobValidationError",
    "NodeParameters",
    "ServerSettings",
    "parse_job",
]
