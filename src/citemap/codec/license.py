"""License codec.

A string node is a single expression; a sequence of strings is a disjunction
written as a list. Members keep their document order on encode.
"""

from typing import Any

from citemap.codec._shapes import ScalarKind, expect_str, node_kind
from citemap.errors import TypeMismatchError, join_path
from citemap.models.license import AnyOfLicense, License, SingleLicense, parse_expression

__all__ = ["decode_license", "encode_license"]


def decode_license(node: Any, path: str = "") -> License:
    """Decode a ``license`` node.

    Parameters
    ----------
    node : Any
        A string, or a (possibly empty) sequence of strings.
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    License
        SingleLicense for a string, AnyOfLicense for a sequence.

    Raises
    ------
    GrammarError
        If any expression fails to parse.
    TypeMismatchError
        If the node is neither a string nor a sequence of strings.
    """
    kind = node_kind(node)
    if kind is ScalarKind.STRING:
        return SingleLicense(parse_expression(node, path))
    if kind is ScalarKind.SEQUENCE:
        expressions = []
        for i, member in enumerate(node):
            member_path = join_path(path, i)
            expressions.append(parse_expression(expect_str(member, member_path), member_path))
        return AnyOfLicense(tuple(expressions))
    raise TypeMismatchError(
        f"expected a string or a sequence of strings, got {kind.value}", path=path, value=node
    )


def encode_license(value: License) -> str | list[str]:
    """Encode a license in the shape it was decoded from."""
    if isinstance(value, SingleLicense):
        return value.expression.text
    if isinstance(value, AnyOfLicense):
        return [expr.text for expr in value.expressions]
    raise TypeError(f"unsupported license value: {value!r}")
