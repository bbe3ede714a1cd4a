from __future__ import annotations

import json
from typing import Any

import pyjson5

from .errors import DocumentParseError

INDENT = 2


def _reject_constant(name: str) -> Any:
    raise DocumentParseError(f"{name} is not valid JSON")


def parse_document(text: str, *, relaxed: bool = False) -> Any:
    """Parse *text* into a document tree.

    With ``relaxed`` the text is read as JSON5 (comments, trailing commas,
    unquoted keys); the resulting tree is the same plain JSON structure.
    """
    try:
        if relaxed:
            return pyjson5.decode(text)
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, pyjson5.Json5Exception) as exc:
        raise DocumentParseError(str(exc)) from exc


def serialize_document(document: Any) -> str:
    return json.dumps(document, indent=INDENT, ensure_ascii=False)


__all__ = ["INDENT", "parse_document", "serialize_document"]
