"""Table-driven record assembly.

A record type is described by an ordered tuple of :class:`FieldSpec`. The
same table drives decoding (known keys, then passthrough capture) and
encoding (known non-empty fields in table order, then passthrough).
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from citemap.codec._passthrough import capture_extra, emit_extra
from citemap.codec._shapes import expect_int, expect_mapping, expect_sequence, expect_str
from citemap.codec.dates import (
    decode_calendar_date,
    decode_date,
    encode_calendar_date,
    encode_date,
)
from citemap.codec.identifiers import decode_identifier, encode_identifier
from citemap.codec.license import decode_license, encode_license
from citemap.codec.names import decode_csl_name, encode_csl_name, encode_name, resolve_name
from citemap.codec.ordinaries import decode_ordinary, encode_ordinary
from citemap.errors import ShapeMismatchError, join_path

__all__ = [
    "FieldCodec",
    "FieldSpec",
    "STR",
    "NON_EMPTY_STR",
    "INT",
    "SEMVER",
    "ORDINARY",
    "CALENDAR_DATE",
    "CSL_DATE",
    "LICENSE",
    "NAME",
    "CSL_NAME",
    "IDENTIFIER",
    "list_of",
    "enum_of",
    "record_of",
    "decode_record",
    "encode_record",
]

SEMVER_RE = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")


@dataclass(frozen=True)
class FieldCodec:
    """Decode and encode functions for one field's value."""

    decode: Callable[[Any, str], Any]
    encode: Callable[[Any], Any]


@dataclass(frozen=True)
class FieldSpec:
    """One known field of a record type.

    Attributes
    ----------
    key : str
        Document key, e.g. ``date-released``.
    attr : str
        Dataclass attribute, e.g. ``date_released``.
    codec : FieldCodec
        Value codec.
    required : bool
        Whether decoding fails when the key is absent or null.
    """

    key: str
    attr: str
    codec: FieldCodec
    required: bool = False


def _identity(value: Any) -> Any:
    return value


# ---------------------------------------------------------------------------
# Scalar codecs
# ---------------------------------------------------------------------------


def _decode_non_empty_str(node: Any, path: str) -> str:
    text = expect_str(node, path)
    if not text:
        raise ShapeMismatchError("must not be empty", path=path, value=node)
    return text


def _decode_semver(node: Any, path: str) -> str:
    text = expect_str(node, path)
    if SEMVER_RE.fullmatch(text) is None:
        raise ShapeMismatchError(
            f"expected a semantic version X.Y.Z, got: {text!r}", path=path, value=node
        )
    return text


STR = FieldCodec(expect_str, _identity)
NON_EMPTY_STR = FieldCodec(_decode_non_empty_str, _identity)
INT = FieldCodec(expect_int, _identity)
SEMVER = FieldCodec(_decode_semver, _identity)
ORDINARY = FieldCodec(decode_ordinary, encode_ordinary)
CALENDAR_DATE = FieldCodec(decode_calendar_date, encode_calendar_date)
CSL_DATE = FieldCodec(decode_date, encode_date)
LICENSE = FieldCodec(decode_license, encode_license)
NAME = FieldCodec(resolve_name, encode_name)
CSL_NAME = FieldCodec(decode_csl_name, encode_csl_name)
IDENTIFIER = FieldCodec(decode_identifier, encode_identifier)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def list_of(item: FieldCodec, non_empty: bool = False) -> FieldCodec:
    """Build a codec for a sequence whose members all use ``item``.

    Parameters
    ----------
    item : FieldCodec
        Member codec.
    non_empty : bool, optional
        Reject an empty sequence with ShapeMismatchError.

    Returns
    -------
    FieldCodec
        Codec decoding to a tuple and encoding to a list.
    """

    def decode(node: Any, path: str) -> tuple[Any, ...]:
        members = expect_sequence(node, path)
        if non_empty and not members:
            raise ShapeMismatchError("must contain at least one entry", path=path, value=node)
        return tuple(item.decode(m, join_path(path, i)) for i, m in enumerate(members))

    def encode(values: tuple[Any, ...]) -> list[Any]:
        return [item.encode(v) for v in values]

    return FieldCodec(decode, encode)


def enum_of(enum_cls: type[Enum]) -> FieldCodec:
    """Build a codec for a string field restricted to ``enum_cls`` values."""

    def decode(node: Any, path: str) -> Enum:
        text = expect_str(node, path)
        try:
            return enum_cls(text)
        except ValueError:
            raise ShapeMismatchError(
                f"unknown {enum_cls.__name__} value {text!r}", path=path, value=node
            ) from None

    def encode(value: Enum) -> str:
        return value.value

    return FieldCodec(decode, encode)


def record_of(record_cls: type, fields: tuple[FieldSpec, ...]) -> FieldCodec:
    """Build a codec for a nested record described by ``fields``."""

    def decode(node: Any, path: str) -> Any:
        return decode_record(node, path, record_cls, fields)

    def encode(value: Any) -> dict[str, Any]:
        return encode_record(value, fields)

    return FieldCodec(decode, encode)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def _keys(fields: Iterable[FieldSpec]) -> list[str]:
    return [spec.key for spec in fields]


def decode_record(node: Any, path: str, record_cls: type, fields: tuple[FieldSpec, ...]) -> Any:
    """Decode a mapping into ``record_cls``.

    Known keys are decoded in table order; a null value counts as absent.
    Every other key is captured into the record's ``extra`` bucket.

    Parameters
    ----------
    node : Any
        Document mapping.
    path : str
        Field path of the mapping.
    record_cls : type
        Dataclass to build; must accept ``extra``.
    fields : tuple[FieldSpec, ...]
        Field table.

    Returns
    -------
    Any
        The constructed record.

    Raises
    ------
    ShapeMismatchError
        If a required field is absent.
    """
    mapping = expect_mapping(node, path)
    kwargs: dict[str, Any] = {}
    for spec in fields:
        value = mapping.get(spec.key)
        if value is None:
            if spec.required:
                raise ShapeMismatchError(
                    f"missing required field '{spec.key}'", path=path, value=node
                )
            continue
        kwargs[spec.attr] = spec.codec.decode(value, join_path(path, spec.key))
    kwargs["extra"] = capture_extra(mapping, _keys(fields))
    return record_cls(**kwargs)


def encode_record(value: Any, fields: tuple[FieldSpec, ...]) -> dict[str, Any]:
    """Encode a record, omitting None and empty optional sequences."""
    out: dict[str, Any] = {}
    for spec in fields:
        field_value = getattr(value, spec.attr)
        if field_value is None:
            continue
        if isinstance(field_value, tuple) and not field_value and not spec.required:
            continue
        out[spec.key] = spec.codec.encode(field_value)
    return emit_extra(out, value.extra, _keys(fields))
