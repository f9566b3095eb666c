"""Exception types raised while generating API reference pages."""


class DocumenterError(Exception):
    """Base class for errors that abort a documentation run."""


class UnsupportedApiItemKindError(DocumenterError):
    """Raised when an API item kind has no heading or body handler."""

    def __init__(self, kind: object) -> None:
        """Store the offending kind."""
        super().__init__(f"Unsupported API item kind: {_kind_name(kind)}")
        self.kind = kind


class UnsupportedDocNodeKindError(DocumenterError):
    """Raised when a doc comment node has no rendering rule."""

    def __init__(self, kind: object) -> None:
        """Store the offending kind."""
        super().__init__(f"Unsupported DocNode kind: {_kind_name(kind)}")
        self.kind = kind


class FilenameCollisionError(DocumenterError):
    """Raised when two API items would be written to the same file."""


class ApiModelError(DocumenterError):
    """Raised when a serialized API model cannot be loaded."""


class ConfigError(DocumenterError):
    """Raised when the documenter configuration is invalid."""


class PluginLoadError(DocumenterError):
    """Raised when a configured plugin cannot be loaded."""


def _kind_name(kind: object) -> str:
    # Enum kinds report their serialized value rather than the member name.
    return str(getattr(kind, "value", kind))
