from .coercion import coerce
from .coordinator import EventBus, SaveResult, SyncCoordinator
from .diff import diff_rows
from .errors import DocumentParseError, NodeEditError, PathResolutionError
from .jsonpath import parse_path, path_to_string
from .patcher import apply_updates, resolve_path
from .rows import FieldRow, FieldUpdate, NodeView, normalize_rows
from .session import EditSession


__all__ = [
    "DocumentParseError",
    "EditSession",
    "EventBus",
    "FieldRow",
    "FieldUpdate",
    "NodeEditError",
    "NodeView",
    "PathResolutionError",
    "SaveResult",
    "SyncCoordinator",
    "apply_updates",
    "coerce",
    "diff_rows",
    "normalize_rows",
    "parse_path",
    "path_to_string",
    "resolve_path",
]
