"""ArgumentBuilder — merges UI fields, generic parameters and the input record.

Resolution order (later sources overwrite earlier ones):

1. the selected tool's typed UI fields, when the tool is specialized;
2. otherwise the generic name/value table, each value JSON-coerced;
3. every non-metadata key of the incoming data record.

The record overlay lets an upstream caller such as an AI agent supply or
override arguments at run time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from typing import Any

from mcp_bridge.arguments.coerce import Parsed, try_parse_json
from mcp_bridge.arguments.fields import SPECIALIZED_TOOLS, ToolFieldTable, is_host_metadata
from mcp_bridge.arguments.models import (
    ArgumentParseSkipped,
    BuildReport,
    GenericParameter,
    ToolFieldSpec,
)

logger = logging.getLogger(__name__)

ParameterRow = GenericParameter | tuple[str, Any] | Mapping[str, Any]


class ArgumentBuilder:
    """Builds the ``arguments`` object of a ``tools/call`` request.

    Pass ``specialized_tools={}`` for a purely generic builder, and a custom
    ``metadata_filter`` when the host marks its own keys differently.
    """

    def __init__(
        self,
        specialized_tools: ToolFieldTable | None = None,
        *,
        metadata_filter: Callable[[str], bool] = is_host_metadata,
    ) -> None:
        self._tools = SPECIALIZED_TOOLS if specialized_tools is None else specialized_tools
        self._is_metadata = metadata_filter

    def is_specialized(self, tool_id: str) -> bool:
        """Whether *tool_id* has typed UI fields."""
        return tool_id in self._tools

    def build(
        self,
        tool_id: str,
        ui_fields: Mapping[str, Any] | None = None,
        generic_params: Iterable[ParameterRow] | None = None,
        input_record: Any = None,
    ) -> dict[str, Any]:
        """Return the merged argument object for one invocation."""
        return self.build_report(tool_id, ui_fields, generic_params, input_record).arguments

    def build_report(
        self,
        tool_id: str,
        ui_fields: Mapping[str, Any] | None = None,
        generic_params: Iterable[ParameterRow] | None = None,
        input_record: Any = None,
    ) -> BuildReport:
        """Like :meth:`build`, also listing values that failed to parse."""
        report = BuildReport()

        if self.is_specialized(tool_id):
            for spec in self._tools[tool_id]:
                self._apply_field(report, spec, ui_fields or {})
        else:
            for row in generic_params or ():
                self._apply_parameter(report, _as_parameter(row))

        if isinstance(input_record, Mapping):
            for key, value in input_record.items():
                if not self._is_metadata(str(key)):
                    report.arguments[str(key)] = value

        for skip in report.skipped:
            logger.debug("%s: skipped %s %r (%s)", tool_id, skip.source, skip.name, skip.reason)
        return report

    @staticmethod
    def _apply_field(report: BuildReport, spec: ToolFieldSpec, ui_fields: Mapping[str, Any]) -> None:
        value = ui_fields.get(spec.name, spec.default)
        if value is None or value == "":
            return

        if spec.kind == "json" and isinstance(value, str):
            outcome = try_parse_json(value)
            if not isinstance(outcome, Parsed):
                report.skipped.append(
                    ArgumentParseSkipped(name=spec.name, source="field", reason=outcome.reason)
                )
                return
            value = outcome.value
        elif spec.kind == "datetime" and isinstance(value, (datetime, date)):
            value = value.isoformat()

        report.arguments[spec.name] = value

    @staticmethod
    def _apply_parameter(report: BuildReport, param: GenericParameter) -> None:
        if not param.name:
            return
        if not isinstance(param.value, str):
            report.arguments[param.name] = param.value
            return

        outcome = try_parse_json(param.value)
        if isinstance(outcome, Parsed):
            report.arguments[param.name] = outcome.value
        else:
            report.arguments[param.name] = outcome.text
            report.skipped.append(
                ArgumentParseSkipped(name=param.name, source="parameter", reason=outcome.reason)
            )


def _as_parameter(row: ParameterRow) -> GenericParameter:
    if isinstance(row, GenericParameter):
        return row
    if isinstance(row, tuple):
        name, value = row
        return GenericParameter(name=name, value=value)
    return GenericParameter.model_validate(row)
