from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable

from .rows import FieldRow, editable_rows, value_to_text


class EditSession:
    """Pending raw text for each editable field while a node is being edited."""

    def __init__(self, pending: Mapping[str, str] | None = None) -> None:
        self._pending: dict[str, str] = dict(pending or {})

    @classmethod
    def from_rows(cls, rows: Iterable[FieldRow]) -> EditSession:
        return cls({row.key: value_to_text(row.value) for row in editable_rows(rows)})  # type: ignore[misc]

    @property
    def pending(self) -> Mapping[str, str]:
        return MappingProxyType(self._pending)

    def get(self, key: str) -> str | None:
        return self._pending.get(key)

    def set(self, key: str, text: str) -> None:
        self._pending[key] = text

    def clear(self) -> None:
        self._pending.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"EditSession({self._pending!r})"


__all__ = ["EditSession"]
