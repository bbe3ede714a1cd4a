"""Document store registry and factory."""
from __future__ import annotations

from pathlib import Path

from .base import DocumentStore, FileDocumentStore

_REGISTRY: dict[str, type[FileDocumentStore]] = {}

def register_backend(backend: type[FileDocumentStore]) -> type[FileDocumentStore]:
    """Register a file store class and return it for decorator use."""
    for suf in backend.suffixes:
        _REGISTRY[suf.lower()] = backend
    return backend

def get_backend_for_path(path: Path) -> FileDocumentStore:
    path = Path(path)
    backend_cls = _REGISTRY.get(path.suffix.lower())
    if backend_cls is None:
        raise ValueError(f"No backend for {path.suffix or path.name}")
    return backend_cls(path)

# register default backends
from . import json_backend  # noqa: F401,E402
from .memory import MemoryDocumentStore  # noqa: E402

__all__ = [
    "DocumentStore",
    "FileDocumentStore",
    "MemoryDocumentStore",
    "get_backend_for_path",
    "register_backend",
]
