"""Edit/save coordination for a single node.

:class:`SyncCoordinator` owns the view/edit state of one node and carries a
save through to both collaborators: the node store that produced the view and
the document store holding the document text.  It knows nothing about any
widget toolkit; front-ends bind to the callbacks on :class:`EventBus`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal

from .backends import DocumentStore
from .diff import diff_rows
from .document import parse_document
from .errors import DocumentParseError, EditStateError, PathResolutionError, UnknownNodeError
from .graph import NodeStore
from .jsonpath import path_to_string
from .patcher import apply_updates, resolve_path
from .rows import FieldRow, FieldUpdate, NodeView, editable_rows, normalize_rows
from .session import EditSession

logger = logging.getLogger(__name__)

Mode = Literal["viewing", "editing", "saving"]


# ---------------------------------------------------------------------------
# State and results
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class EditorState:
    """In-memory state of the node being viewed or edited."""

    view: NodeView
    mode: Mode = "viewing"
    session: EditSession | None = None


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Outcome of :meth:`SyncCoordinator.save`.

    ``synced`` is ``False`` when the document could not be patched; in that
    case ``error`` describes why and the node store keeps the new values.
    """

    updates: tuple[FieldUpdate, ...] = ()
    synced: bool = True
    error: str | None = None
    view: NodeView | None = None

    @property
    def noop(self) -> bool:
        return not self.updates


# ---------------------------------------------------------------------------
# Event handling
# ---------------------------------------------------------------------------


class EventBus:
    """Simple callback based pub/sub system."""

    def __init__(self) -> None:
        self.on_state_changed: list[Callable[[EditorState], None]] = []
        self.on_error: list[Callable[[str], None]] = []
        self.on_saved: list[Callable[[SaveResult], None]] = []

    def emit_state(self, state: EditorState) -> None:
        for cb in list(self.on_state_changed):
            cb(state)

    def emit_error(self, msg: str) -> None:
        for cb in list(self.on_error):
            cb(msg)

    def emit_saved(self, result: SaveResult) -> None:
        for cb in list(self.on_saved):
            cb(result)


# ---------------------------------------------------------------------------
# Coordinator
# ---------------------------------------------------------------------------


class SyncCoordinator:
    """Viewing → Editing → (Saving →) Viewing for one node view.

    With ``atomic`` the document is parsed and the node path resolved before
    anything is committed, so a save either reaches both stores or neither.
    Without it the node store is updated first and a failed document sync is
    logged and reported, leaving the two stores out of step.
    """

    def __init__(
        self,
        node_store: NodeStore,
        document_store: DocumentStore,
        *,
        view: NodeView | None = None,
        atomic: bool = False,
        relaxed: bool | None = None,
        events: EventBus | None = None,
    ) -> None:
        view = view if view is not None else node_store.selected_node
        if view is None:
            raise UnknownNodeError("no node selected")
        self.node_store = node_store
        self.document_store = document_store
        self.atomic = atomic
        self.relaxed = document_store.relaxed if relaxed is None else relaxed
        self.events = events or EventBus()
        self.state = EditorState(view=view)

    # --- read side ---------------------------------------------------
    @property
    def view(self) -> NodeView:
        return self.state.view

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def session(self) -> EditSession | None:
        return self.state.session

    def preview(self) -> str:
        return normalize_rows(self.view.rows)

    def path_string(self) -> str:
        return path_to_string(self.view.path)

    def fields(self) -> list[FieldRow]:
        """Rows shown in the edit form."""
        return editable_rows(self.view)

    # --- commands ----------------------------------------------------
    def begin_edit(self) -> EditSession:
        if self.state.mode != "viewing":
            raise EditStateError(f"cannot start editing while {self.state.mode}")
        self.state.session = EditSession.from_rows(self.view.rows)
        self.state.mode = "editing"
        self.events.emit_state(self.state)
        return self.state.session

    def set_field(self, key: str, text: str) -> None:
        self._require_session().set(key, text)

    def cancel(self) -> None:
        self._require_session()
        self._finish()

    def save(self) -> SaveResult:
        session = self._require_session()
        self.state.mode = "saving"
        self.events.emit_state(self.state)
        updates = diff_rows(self.view.rows, session)
        if not updates:
            logger.debug("no changes for node %s", self.view.id)
            self._finish()
            result = SaveResult(view=self.view)
            self.events.emit_saved(result)
            return result

        try:
            if self.atomic:
                result = self._save_atomic(updates)
            else:
                result = self._save_partial(updates)
        finally:
            self._finish()
        self.events.emit_saved(result)
        return result

    # --- helpers -----------------------------------------------------
    def _require_session(self) -> EditSession:
        if self.state.mode != "editing" or self.state.session is None:
            raise EditStateError(f"not editing (mode is {self.state.mode})")
        return self.state.session

    def _finish(self) -> None:
        self.state.session = None
        self.state.mode = "viewing"
        self.events.emit_state(self.state)

    def _save_partial(self, updates: list[FieldUpdate]) -> SaveResult:
        node_id = self.view.id
        self.node_store.update_values(node_id, updates)
        error: str | None = None
        try:
            document = parse_document(self.document_store.get_text(), relaxed=self.relaxed)
            text = apply_updates(document, self.view.path, updates)
        except (DocumentParseError, PathResolutionError) as exc:
            error = self._report(exc)
        else:
            self.document_store.set_text(text)
            logger.debug("synced %d update(s) to %s", len(updates), self.path_string())
            self._refresh(node_id)
        return SaveResult(tuple(updates), error is None, error, self.view)

    def _save_atomic(self, updates: list[FieldUpdate]) -> SaveResult:
        node_id = self.view.id
        try:
            document = parse_document(self.document_store.get_text(), relaxed=self.relaxed)
            resolve_path(document, self.view.path)
        except (DocumentParseError, PathResolutionError) as exc:
            error = self._report(exc)
            return SaveResult(tuple(updates), False, error, self.view)
        text = apply_updates(document, self.view.path, updates)
        self.node_store.update_values(node_id, updates)
        self.document_store.set_text(text)
        logger.debug("synced %d update(s) to %s", len(updates), self.path_string())
        self._refresh(node_id)
        return SaveResult(tuple(updates), True, None, self.view)

    def _report(self, exc: Exception) -> str:
        where = self.path_string()
        logger.warning("Failed to sync %s to document: %s", where, exc)
        msg = f"Failed to sync {where} to document: {exc}"
        self.events.emit_error(msg)
        return msg

    def _refresh(self, node_id: str) -> None:
        updated = self.node_store.get_node_by_id(node_id)
        if updated is not None:
            self.state.view = updated


__all__ = [
    "EditorState",
    "EventBus",
    "Mode",
    "SaveResult",
    "SyncCoordinator",
]
