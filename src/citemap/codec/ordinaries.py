"""OrdinaryValue codec.

The variant is taken from the document's own scalar typing: a JSON/YAML
number is an integer when it was written without a fraction or exponent and
a float otherwise; a string stays a string even if it looks numeric.
"""

from typing import Any

from citemap.codec._shapes import ScalarKind, node_kind
from citemap.errors import TypeMismatchError
from citemap.models.ordinaries import OrdinaryKind, OrdinaryValue

__all__ = ["decode_ordinary", "encode_ordinary"]

_KIND_MAP: dict[ScalarKind, OrdinaryKind] = {
    ScalarKind.STRING: OrdinaryKind.STRING,
    ScalarKind.INTEGER: OrdinaryKind.INTEGER,
    ScalarKind.FLOAT: OrdinaryKind.FLOAT,
}


def decode_ordinary(node: Any, path: str = "") -> OrdinaryValue:
    """Decode a scalar node into an OrdinaryValue.

    Parameters
    ----------
    node : Any
        String, integer, or float node.
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    OrdinaryValue
        Value tagged with the node's scalar kind.

    Raises
    ------
    TypeMismatchError
        If the node is a boolean, null, mapping, or sequence.
    """
    kind = node_kind(node)
    ordinary_kind = _KIND_MAP.get(kind)
    if ordinary_kind is None:
        raise TypeMismatchError(
            f"expected a string or number, got {kind.value}", path=path, value=node
        )
    return OrdinaryValue(ordinary_kind, node)


def encode_ordinary(value: OrdinaryValue) -> str | int | float:
    """Return the stored native scalar unchanged."""
    return value.value
