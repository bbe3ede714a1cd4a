"""Node views built from a document tree.

:func:`build_nodes` flattens a document the way a graph view presents it:
every map is a node whose scalar members are rows, container members become
``array``/``object`` rows pointing at their own child nodes, and scalar items
of a sequence are single keyless nodes.  :class:`GraphNodeStore` keeps those
views and implements the :class:`NodeStore` contract used by the sync
coordinator.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Protocol, Sequence

from .errors import UnknownNodeError
from .jsonpath import path_to_string
from .rows import FieldRow, FieldUpdate, NodeView, Path, Segment, kind_of

logger = logging.getLogger(__name__)


class NodeStore(Protocol):
    """Contract for the owner of node views."""

    @property
    def selected_node(self) -> NodeView | None: ...

    def update_values(self, node_id: str, updates: Sequence[FieldUpdate]) -> None: ...

    def get_node_by_id(self, node_id: str) -> NodeView | None: ...


def _container_row(key: str, value: Any) -> FieldRow:
    return FieldRow(key, len(value), kind_of(value))


def build_nodes(document: Any) -> list[NodeView]:
    nodes: list[NodeView] = []

    def add(path: Path, rows: list[FieldRow]) -> None:
        nodes.append(NodeView(str(len(nodes) + 1), path, tuple(rows)))

    def walk(value: Any, path: Path) -> None:
        if isinstance(value, dict):
            rows: list[FieldRow] = []
            children: list[tuple[Any, Path]] = []
            for key, child in value.items():
                if isinstance(child, dict | list):
                    rows.append(_container_row(key, child))
                    children.append((child, path + (key,)))
                else:
                    rows.append(FieldRow(key, child, kind_of(child)))
            add(path, rows)
            for child, child_path in children:
                walk(child, child_path)
        elif isinstance(value, list):
            for index, item in enumerate(value):
                walk(item, path + (index,))
        else:
            add(path, [FieldRow(None, value, kind_of(value))])

    walk(document, ())
    return nodes


class GraphNodeStore:
    """In-memory :class:`NodeStore` over the nodes of one document."""

    def __init__(self, document: Any = None) -> None:
        self._nodes: dict[str, NodeView] = {}
        self._selected: str | None = None
        if document is not None:
            self.reload(document)

    # -- building ------------------------------------------------------
    def reload(self, document: Any) -> None:
        """Rebuild all views from *document*, keeping the selection if possible."""
        previous = self.selected_node
        self._nodes = {node.id: node for node in build_nodes(document)}
        self._selected = None
        if previous is not None:
            match = self.find_by_path(previous.path)
            if match is not None:
                self._selected = match.id
        logger.debug("built %d nodes", len(self._nodes))

    @property
    def nodes(self) -> list[NodeView]:
        return list(self._nodes.values())

    # -- selection -----------------------------------------------------
    @property
    def selected_node(self) -> NodeView | None:
        if self._selected is None:
            return None
        return self._nodes.get(self._selected)

    def select(self, node_id: str) -> NodeView:
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(f"No node with id {node_id!r}")
        self._selected = node_id
        return node

    def select_path(self, path: Iterable[Segment]) -> NodeView:
        segments = tuple(path)
        node = self.find_by_path(segments)
        if node is None:
            raise UnknownNodeError(f"No node at {path_to_string(segments)}")
        self._selected = node.id
        return node

    def find_by_path(self, path: Iterable[Segment]) -> NodeView | None:
        segments = tuple(path)
        for node in self._nodes.values():
            if node.path == segments:
                return node
        return None

    # -- NodeStore contract ----------------------------------------------
    def get_node_by_id(self, node_id: str) -> NodeView | None:
        return self._nodes.get(node_id)

    def update_values(self, node_id: str, updates: Sequence[FieldUpdate]) -> None:
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(f"No node with id {node_id!r}")
        rows = list(node.rows)
        for update in updates:
            if not 0 <= update.row_index < len(rows):
                logger.warning(
                    "node %s has no row %d; skipping %r",
                    node_id,
                    update.row_index,
                    update.key,
                )
                continue
            rows[update.row_index] = replace(
                rows[update.row_index],
                value=update.new_value,
                kind=kind_of(update.new_value),
            )
        self._nodes[node_id] = replace(node, rows=tuple(rows))


__all__ = ["GraphNodeStore", "NodeStore", "build_nodes"]
