from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class DocumentStore(ABC):
    """Holder of a document's raw text."""

    #: Whether the text should be parsed as JSON5 rather than strict JSON.
    relaxed: bool = False

    @abstractmethod
    def get_text(self) -> str:
        pass

    @abstractmethod
    def set_text(self, text: str) -> None:
        pass


class FileDocumentStore(DocumentStore):
    """Document text kept in a file on disk."""

    suffixes: tuple[str, ...] = ()

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def get_text(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def set_text(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as fh:
            fh.write(text)
            if not text.endswith("\n"):
                fh.write("\n")
        tmp.replace(self.path)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"{type(self).__name__}({str(self.path)!r})"
