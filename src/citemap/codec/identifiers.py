"""Identifier codec.

Identifiers are explicitly tagged with ``type``, so decoding is a lookup
rather than shape classification.
"""

from typing import Any

from citemap.codec._passthrough import capture_extra, emit_extra
from citemap.codec._shapes import expect_mapping, expect_str, optional_str
from citemap.errors import ShapeMismatchError, join_path
from citemap.models.identifiers import Identifier, IdentifierKind

__all__ = ["IDENTIFIER_KEYS", "decode_identifier", "encode_identifier"]

IDENTIFIER_KEYS = ("type", "value", "description")


def decode_identifier(node: Any, path: str = "") -> Identifier:
    """Decode one entry of an ``identifiers`` list.

    Parameters
    ----------
    node : Any
        Mapping with ``type``, ``value`` and optional ``description``.
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    Identifier
        Decoded identifier.

    Raises
    ------
    ShapeMismatchError
        If ``type`` or ``value`` is missing, or ``type`` is not one of
        doi, url, swh, other.
    """
    mapping = expect_mapping(node, path)
    for key in ("type", "value"):
        if key not in mapping:
            raise ShapeMismatchError(f"missing field '{key}'", path=path, value=node)

    type_path = join_path(path, "type")
    tag = expect_str(mapping["type"], type_path)
    try:
        kind = IdentifierKind(tag)
    except ValueError:
        raise ShapeMismatchError(
            f"unknown identifier type {tag!r}", path=type_path, value=tag
        ) from None

    return Identifier(
        kind=kind,
        value=expect_str(mapping["value"], join_path(path, "value")),
        description=optional_str(mapping, "description", path),
        extra=capture_extra(mapping, IDENTIFIER_KEYS),
    )


def encode_identifier(value: Identifier) -> dict[str, Any]:
    out: dict[str, Any] = {"type": value.kind.value, "value": value.value}
    if value.description is not None:
        out["description"] = value.description
    return emit_extra(out, value.extra, IDENTIFIER_KEYS)
