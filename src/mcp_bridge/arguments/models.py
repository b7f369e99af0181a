"""Argument builder models — typed UI fields, generic rows, build reports."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

FieldKind = Literal["string", "datetime", "boolean", "number", "json"]


class ToolFieldSpec(BaseModel):
    """One typed UI field declared for a specialized tool."""

    name: str
    kind: FieldKind = "string"
    default: Any = ""
    description: str = ""


class GenericParameter(BaseModel):
    """One row of the free-form name/value parameter table."""

    name: str = ""
    value: Any = ""


class ArgumentParseSkipped(BaseModel):
    """A JSON-typed value that degraded to omission or a literal string.

    Recorded for diagnostics only; never raised.
    """

    name: str
    source: Literal["field", "parameter"]
    reason: str


class BuildReport(BaseModel):
    """Arguments for one invocation plus any values that failed to parse."""

    arguments: dict[str, Any] = Field(default_factory=dict)
    skipped: list[ArgumentParseSkipped] = []
