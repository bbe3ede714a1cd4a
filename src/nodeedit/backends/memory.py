from __future__ import annotations

from .base import DocumentStore


class MemoryDocumentStore(DocumentStore):
    """Document text held in memory."""

    def __init__(self, text: str = "{}", *, relaxed: bool = False) -> None:
        self._text = text
        self.relaxed = relaxed
        self.writes = 0

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        self.writes += 1
