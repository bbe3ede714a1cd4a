from __future__ import annotations

from collections.abc import Mapping
from typing import Sequence

from .coercion import coerce
from .rows import FieldRow, FieldUpdate, is_editable, value_to_text
from .session import EditSession


def diff_rows(
    rows: Sequence[FieldRow], session: EditSession | Mapping[str, str | None]
) -> list[FieldUpdate]:
    """Return the updates needed to bring *rows* in line with *session*.

    Only editable rows whose pending text differs from their current text
    contribute.  Keys in *session* that match no row are ignored.
    """
    pending = session.pending if isinstance(session, EditSession) else session
    updates: list[FieldUpdate] = []
    for index, row in enumerate(rows):
        if not is_editable(row):
            continue
        text = pending.get(row.key)  # type: ignore[arg-type]
        if text is None or text == value_to_text(row.value):
            continue
        updates.append(FieldUpdate(index, row.key, coerce(text)))  # type: ignore[arg-type]
    return updates


__all__ = ["diff_rows"]
