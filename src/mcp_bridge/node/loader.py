"""Job file loading — drive the node from a YAML or JSON description."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mcp_bridge.node.errors import JobValidationError
from mcp_bridge.node.models import JobSpec


class JobLoader:
    """Load and validate a job file into a :class:`JobSpec`.

    Example::

        tool: send_message
        fields:
          message: Your order has shipped
        continue_on_fail: true
        items:
          - to: "+15550100"
          - to: "+15550101"
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> JobSpec:
        """Read the file, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before parsing.  JSON is accepted
        since it is a subset of YAML.

        Raises:
            JobValidationError: On read, parse, or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise JobValidationError(f"Cannot read {self._path}: {exc}") from exc
        return parse_job(raw)


def parse_job(raw: str) -> JobSpec:
    """Parse job text (YAML or JSON) into a :class:`JobSpec`."""
    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise JobValidationError(f"YAML parse error: {exc}") from exc

    if not isinstance(data, dict):
        raise JobValidationError("Job file must be a mapping")

    try:
        return JobSpec.model_validate(data)
    except ValidationError as exc:
        raise JobValidationError(str(exc)) from exc
