"""Flattened node views and their display form.

A node of a document is presented as an ordered list of :class:`FieldRow`
objects.  Scalar rows can be edited in place; container rows (``array`` and
``object``) only mark where a child node hangs off this one.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Sequence

Kind = Literal["string", "number", "boolean", "null", "array", "object"]
Segment = str | int
Path = tuple[Segment, ...]

CONTAINER_KINDS: frozenset[str] = frozenset({"array", "object"})


@dataclass(frozen=True, slots=True)
class FieldRow:
    """One key/value entry of a node."""

    key: str | None
    value: Any
    kind: Kind


@dataclass(frozen=True, slots=True)
class NodeView:
    """A node's id, its location in the document and its rows."""

    id: str
    path: Path = ()
    rows: tuple[FieldRow, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "rows", tuple(self.rows))


@dataclass(frozen=True, slots=True)
class FieldUpdate:
    """A coerced change to the row at ``row_index``."""

    row_index: int
    key: str
    new_value: Any


def kind_of(value: Any) -> Kind:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list | tuple):
        return "array"
    return "string"


def value_to_text(value: Any) -> str:
    """Render *value* the way it is shown in an edit field."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_editable(row: FieldRow) -> bool:
    return row.kind not in CONTAINER_KINDS and bool(row.key)


def editable_rows(view: NodeView | Iterable[FieldRow]) -> list[FieldRow]:
    rows = view.rows if isinstance(view, NodeView) else view
    return [row for row in rows if is_editable(row)]


def normalize_rows(rows: Sequence[FieldRow]) -> str:
    """Return the display text for a node built from *rows*.

    A single keyless row is a bare scalar and is rendered without quoting.
    Otherwise the scalar rows are collected into an object; container rows
    are left out because their children are separate nodes.
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and not rows[0].key:
        return value_to_text(rows[0].value)

    obj: dict[str, Any] = {}
    for row in editable_rows(rows):
        obj[row.key] = row.value  # type: ignore[index]
    return json.dumps(obj, indent=2, ensure_ascii=False)


__all__ = [
    "CONTAINER_KINDS",
    "FieldRow",
    "FieldUpdate",
    "Kind",
    "NodeView",
    "Path",
    "Segment",
    "editable_rows",
    "is_editable",
    "kind_of",
    "normalize_rows",
    "value_to_text",
]
