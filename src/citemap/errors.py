"""Error taxonomy for citation document codecs.

Every decode failure is raised as a subclass of :class:`CodecError`, carrying
the field path where it happened and the raw document value that caused it.
"""

from typing import Any

__all__ = [
    "CodecError",
    "ShapeMismatchError",
    "RangeViolationError",
    "GrammarError",
    "TypeMismatchError",
    "InternalInconsistencyError",
    "DocumentSyntaxError",
    "join_path",
]


class CodecError(Exception):
    """Base class for all codec errors."""

    def __init__(self, message: str, path: str = "", value: Any = None) -> None:
        """Initialize codec error.

        Parameters
        ----------
        message : str
            Human-readable description of the failure.
        path : str, optional
            Field path of the offending node (e.g. ``authors[0].name``).
        value : Any, optional
            Raw document value that failed to decode.
        """
        super().__init__(message)
        self.message = message
        self.path = path
        self.value = value

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class ShapeMismatchError(CodecError):
    """A node does not match any known variant shape."""


class RangeViolationError(CodecError):
    """A numeric component is outside its declared bound."""


class GrammarError(CodecError):
    """A license expression string failed to parse."""


class TypeMismatchError(CodecError):
    """A node is of a different kind than expected (string/map/sequence)."""


class InternalInconsistencyError(CodecError):
    """A decoded value could not be re-synthesized into a valid expression."""


class DocumentSyntaxError(CodecError):
    """The input text is not a well-formed YAML or JSON document."""


def join_path(path: str, key: str | int) -> str:
    """Extend a field path with a mapping key or sequence index.

    Parameters
    ----------
    path : str
        Current path (empty for the document root).
    key : str | int
        Mapping key, or sequence index.

    Returns
    -------
    str
        Extended path, e.g. ``authors[0]`` or ``issued.date-parts``.
    """
    if isinstance(key, int):
        return f"{path}[{key}]"
    if not path:
        return key
    return f"{path}.{key}"
