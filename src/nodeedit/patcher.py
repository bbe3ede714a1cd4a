"""Write field updates back into the owning document."""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from typing import Any, Iterable

from .document import serialize_document
from .errors import PathResolutionError
from .jsonpath import path_to_string
from .rows import FieldUpdate, Segment


def resolve_path(document: Any, path: Iterable[Segment]) -> MutableMapping[str, Any]:
    """Follow *path* from the root of *document* and return the map it names.

    String segments are map lookups and integer segments are sequence
    indexes.  Raises :class:`PathResolutionError` if a step hits a scalar, a
    missing key or an out of range index, or if the target is not a map.
    """
    segments = tuple(path)
    target = document
    for depth, seg in enumerate(segments):
        where = path_to_string(segments[: depth + 1])
        if isinstance(seg, int) and not isinstance(seg, bool):
            if not isinstance(target, Sequence) or isinstance(target, str):
                raise PathResolutionError(f"{where}: not a sequence", segments)
            if not 0 <= seg < len(target):
                raise PathResolutionError(f"{where}: index out of range", segments)
            target = target[seg]
        else:
            if not isinstance(target, MutableMapping):
                raise PathResolutionError(f"{where}: not a map", segments)
            if seg not in target:
                raise PathResolutionError(f"{where}: no such key", segments)
            target = target[seg]
    if not isinstance(target, MutableMapping):
        raise PathResolutionError(
            f"{path_to_string(segments)}: target is not a map", segments
        )
    return target


def apply_updates(
    document: Any, path: Iterable[Segment], updates: Iterable[FieldUpdate]
) -> str:
    """Assign each update at *path* in place and return the serialized document.

    Assignment overwrites existing keys, so applying the same updates twice
    leaves the document as applying them once.
    """
    target = resolve_path(document, path)
    for update in updates:
        target[update.key] = update.new_value
    return serialize_document(document)


__all__ = ["apply_updates", "resolve_path"]
