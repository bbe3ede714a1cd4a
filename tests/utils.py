from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from nodeedit.rows import FieldRow, FieldUpdate, NodeView, kind_of

CUSTOMER_DOC = '{"customer": {"name": "Bob", "age": 30}}'

CUSTOMER_ROWS = (
    FieldRow("name", "Bob", "string"),
    FieldRow("age", 30, "number"),
)


class RecordingNodeStore:
    """Node store holding a single view and recording every update call."""

    def __init__(self, view: NodeView):
        self.view = view
        self.calls: list[tuple[str, list[FieldUpdate]]] = []

    @property
    def selected_node(self) -> NodeView:
        return self.view

    def update_values(self, node_id: str, updates: Sequence[FieldUpdate]) -> None:
        self.calls.append((node_id, list(updates)))
        rows = list(self.view.rows)
        for u in updates:
            rows[u.row_index] = replace(rows[u.row_index], value=u.new_value, kind=kind_of(u.new_value))
        self.view = replace(self.view, rows=tuple(rows))

    def get_node_by_id(self, node_id: str) -> NodeView | None:
        return self.view if node_id == self.view.id else None
