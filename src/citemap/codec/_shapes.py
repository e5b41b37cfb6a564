"""Scalar and shape primitives for document nodes.

A document node is whatever the YAML/JSON loader produced: a mapping, a
sequence, or a scalar. Its kind is resolved once here, from the loader's own
typing, and never re-sniffed from string content.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from citemap.errors import TypeMismatchError, join_path

__all__ = [
    "ScalarKind",
    "node_kind",
    "expect_mapping",
    "expect_sequence",
    "expect_str",
    "expect_int",
    "optional_str",
]


class ScalarKind(Enum):
    """Closed enumeration of document node kinds."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


def node_kind(node: Any) -> ScalarKind:
    """Classify a raw document node.

    Parameters
    ----------
    node : Any
        Node as produced by the YAML or JSON loader.

    Returns
    -------
    ScalarKind
        The node's kind.

    Raises
    ------
    TypeMismatchError
        If the node is not a type any document loader produces.

    Notes
    -----
    ``bool`` is checked before ``int`` because it is a subclass of it.
    """
    if node is None:
        return ScalarKind.NULL
    if isinstance(node, bool):
        return ScalarKind.BOOLEAN
    if isinstance(node, int):
        return ScalarKind.INTEGER
    if isinstance(node, float):
        return ScalarKind.FLOAT
    if isinstance(node, str):
        return ScalarKind.STRING
    if isinstance(node, Mapping):
        return ScalarKind.MAPPING
    if isinstance(node, (list, tuple)):
        return ScalarKind.SEQUENCE
    raise TypeMismatchError(f"unsupported document node type {type(node).__name__}", value=node)


def _mismatch(expected: str, node: Any, path: str) -> TypeMismatchError:
    kind = node_kind(node).value
    return TypeMismatchError(f"expected {expected}, got {kind}", path=path, value=node)


def expect_mapping(node: Any, path: str) -> Mapping[str, Any]:
    """Return ``node`` if it is a mapping, else raise TypeMismatchError."""
    if node_kind(node) is not ScalarKind.MAPPING:
        raise _mismatch("a mapping", node, path)
    return node


def expect_sequence(node: Any, path: str) -> list[Any]:
    """Return ``node`` as a list if it is a sequence, else raise TypeMismatchError."""
    if node_kind(node) is not ScalarKind.SEQUENCE:
        raise _mismatch("a sequence", node, path)
    return list(node)


def expect_str(node: Any, path: str) -> str:
    """Return ``node`` if it is a string, else raise TypeMismatchError."""
    if node_kind(node) is not ScalarKind.STRING:
        raise _mismatch("a string", node, path)
    return node


def expect_int(node: Any, path: str) -> int:
    """Return ``node`` if it is an integer (not a boolean), else raise TypeMismatchError."""
    if node_kind(node) is not ScalarKind.INTEGER:
        raise _mismatch("an integer", node, path)
    return node


def optional_str(node: Mapping[str, Any], key: str, path: str) -> str | None:
    """Read an optional string field from a mapping.

    Parameters
    ----------
    node : Mapping[str, Any]
        Mapping holding the field.
    key : str
        Document key.
    path : str
        Path of the mapping itself.

    Returns
    -------
    str | None
        The string, or None if the key is absent or null.
    """
    if node.get(key) is None:
        return None
    return expect_str(node[key], join_path(path, key))
