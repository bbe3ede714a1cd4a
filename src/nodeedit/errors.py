class NodeEditError(Exception):
    """Base class for nodeedit errors."""


class PathResolutionError(NodeEditError):
    """Raised when a node path cannot be followed to a map in the document."""

    def __init__(self, message: str, path: tuple = ()) -> None:
        super().__init__(message)
        self.path = tuple(path)


class DocumentParseError(NodeEditError):
    """Raised when document text cannot be parsed into a tree."""


class InvalidPathError(NodeEditError, ValueError):
    """Raised when a bracket path string is malformed."""


class EditStateError(NodeEditError):
    """Raised when an edit command is issued in the wrong mode."""


class UnknownNodeError(NodeEditError):
    """Raised when a node id or path does not match any node."""


class SettingsError(NodeEditError):
    """Raised when a settings value cannot be interpreted."""
