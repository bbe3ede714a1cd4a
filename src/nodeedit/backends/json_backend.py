from __future__ import annotations

from . import register_backend
from .base import FileDocumentStore


@register_backend
class JsonFileStore(FileDocumentStore):
    """Strict JSON document file."""

    suffixes = (".json",)


@register_backend
class Json5FileStore(FileDocumentStore):
    """JSON5 document file; written back as plain JSON."""

    suffixes = (".json5",)
    relaxed = True
