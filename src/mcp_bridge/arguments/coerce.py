"""Best-effort JSON coercion with a tagged result instead of exceptions."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel

from mcp_bridge.protocol.codec import loads_strict


class Parsed(BaseModel):
    """The text was valid JSON."""

    kind: Literal["parsed"] = "parsed"
    value: Any


class Unparsed(BaseModel):
    """The text was not valid JSON; ``text`` is the original string."""

    kind: Literal["unparsed"] = "unparsed"
    text: str
    reason: str


ParseOutcome = Parsed | Unparsed


def try_parse_json(text: str) -> ParseOutcome:
    """Parse *text* as JSON, reporting failure as :class:`Unparsed`."""
    try:
        return Parsed(value=loads_strict(text))
    except json.JSONDecodeError as exc:
        return Unparsed(text=text, reason=exc.msg)
    except RecursionError:
        return Unparsed(text=text, reason="nesting too deep")
    except ValueError as exc:
        return Unparsed(text=text, reason=str(exc))
