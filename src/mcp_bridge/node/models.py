"""Pydantic models for the host-facing node and the job file schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mcp_bridge.arguments.models import GenericParameter


class NodeParameters(BaseModel):
    """Parameters the host resolved for one input item."""

    tool: str = Field(min_length=1)
    fields: dict[str, Any] = Field(default_factory=dict)
    parameters: list[GenericParameter] = []


class ItemResult(BaseModel):
    """One output record, paired with the index of the item that produced it."""

    model_config = ConfigDict(populate_by_name=True)

    json_: Any = Field(alias="json")
    paired_item: int


class ServerSettings(BaseModel):
    """Optional connection overrides inside a job file."""

    url: str | None = None
    api_key: str | None = None


class JobSpec(BaseModel):
    """Top-level job specification parsed from YAML or JSON."""

    tool: str = Field(min_length=1)
    fields: dict[str, Any] = Field(default_factory=dict)
    parameters: list[GenericParameter] = []
    items: list[Any] = Field(default_factory=lambda: [{}])
    continue_on_fail: bool = False
    generic: bool = False
    server: ServerSettings = Field(default_factory=ServerSettings)

    def node_parameters(self) -> NodeParameters:
        return NodeParameters(tool=self.tool, fields=self.fields, parameters=self.parameters)
