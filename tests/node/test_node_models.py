"""Tests for node models."""

import pytest
from pydantic import ValidationError

from mcp_bridge.node.models import ItemResult, NodeParameters


class TestItemResult:
    def test_dump_uses_json_key(self) -> None:
        result = ItemResult(json={"a": 1}, paired_item=2)
        assert result.model_dump(by_alias=True) == {"json": {"a": 1}, "paired_item": 2}

    def test_populate_by_field_name(self) -> None:
        assert ItemResult(json_=[1], paired_item=0).json_ == [1]


class TestNodeParameters:
    def test_defaults(self) -> None:
        params = NodeParameters(tool="x")
        assert params.fields == {}
        assert params.parameters == []

    def test_tool_required(self) -> None:
        with pytest.raises(ValidationError):
            NodeParameters(tool="")
