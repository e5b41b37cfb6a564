"""Name codecs.

Format A names carry no type tag. :func:`resolve_name` classifies a record
by key presence alone:

1. no ``name`` key: Person
2. ``name: anonymous``: Anonymous, any other keys discarded
3. any other ``name``: Entity

Format B names are a single flat record and are decoded as-is.
"""

import logging
from typing import Any

from citemap.codec._passthrough import capture_extra, emit_extra
from citemap.codec._shapes import expect_mapping, expect_str, optional_str
from citemap.codec.dates import decode_calendar_date, encode_calendar_date
from citemap.errors import join_path
from citemap.models.dates import CalendarDate
from citemap.models.names import (
    ANONYMOUS_NAME,
    Anonymous,
    CslName,
    Entity,
    Name,
    NameMeta,
    Person,
)

logger = logging.getLogger(__name__)

__all__ = [
    "resolve_name",
    "encode_name",
    "decode_csl_name",
    "encode_csl_name",
]

# Document key -> NameMeta attribute, in emit order.
META_FIELDS = {
    "address": "address",
    "alias": "alias",
    "city": "city",
    "country": "country",
    "email": "email",
    "fax": "fax",
    "orcid": "orcid",
    "post-code": "post_code",
    "region": "region",
    "tel": "tel",
    "website": "website",
}

PERSON_FIELDS = {
    "family-names": "family_names",
    "given-names": "given_names",
    "name-particle": "name_particle",
    "name-suffix": "name_suffix",
    "affiliation": "affiliation",
}

ENTITY_KEYS = ("name", "date-start", "date-end")

CSL_NAME_FIELDS = {
    "family": "family",
    "given": "given",
    "dropping-particle": "dropping_particle",
    "non-dropping-particle": "non_dropping_particle",
    "suffix": "suffix",
    "literal": "literal",
}


# ---------------------------------------------------------------------------
# Format A
# ---------------------------------------------------------------------------


def _decode_meta(node: dict[str, Any], path: str) -> NameMeta:
    return NameMeta(**{attr: optional_str(node, key, path) for key, attr in META_FIELDS.items()})


def _encode_meta(meta: NameMeta, out: dict[str, Any]) -> None:
    for key, attr in META_FIELDS.items():
        value = getattr(meta, attr)
        if value is not None:
            out[key] = value


def _optional_calendar_date(node: dict[str, Any], key: str, path: str) -> CalendarDate | None:
    if node.get(key) is None:
        return None
    return decode_calendar_date(node[key], join_path(path, key))


def resolve_name(node: Any, path: str = "") -> Name:
    """Classify and decode a Format A name record.

    Parameters
    ----------
    node : Any
        Name mapping from an ``authors``, ``editors``, ``contact`` (or
        similar) list, or a single-name field such as ``publisher``.
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    Name
        Person, Entity, or Anonymous.

    Raises
    ------
    TypeMismatchError
        If the node is not a mapping, or ``name`` is present but not a
        string.
    """
    mapping = expect_mapping(node, path)

    if "name" not in mapping:
        return Person(
            **{attr: optional_str(mapping, key, path) for key, attr in PERSON_FIELDS.items()},
            meta=_decode_meta(mapping, path),
            extra=capture_extra(mapping, [*PERSON_FIELDS, *META_FIELDS]),
        )

    name = expect_str(mapping["name"], join_path(path, "name"))
    if name == ANONYMOUS_NAME:
        if len(mapping) > 1:
            logger.debug("Discarding %d keys on anonymous name at %s", len(mapping) - 1, path)
        return Anonymous()

    return Entity(
        name=name,
        date_start=_optional_calendar_date(mapping, "date-start", path),
        date_end=_optional_calendar_date(mapping, "date-end", path),
        meta=_decode_meta(mapping, path),
        extra=capture_extra(mapping, [*ENTITY_KEYS, *META_FIELDS]),
    )


def encode_name(value: Name) -> dict[str, Any]:
    """Encode a name; the inverse of :func:`resolve_name`.

    A Person never emits ``name``, so it always re-resolves to a Person.
    """
    if isinstance(value, Anonymous):
        return {"name": ANONYMOUS_NAME}

    out: dict[str, Any] = {}
    if isinstance(value, Person):
        for key, attr in PERSON_FIELDS.items():
            field_value = getattr(value, attr)
            if field_value is not None:
                out[key] = field_value
        _encode_meta(value.meta, out)
        return emit_extra(out, value.extra, [*PERSON_FIELDS, *META_FIELDS, "name"])

    if isinstance(value, Entity):
        out["name"] = value.name
        if value.date_start is not None:
            out["date-start"] = encode_calendar_date(value.date_start)
        if value.date_end is not None:
            out["date-end"] = encode_calendar_date(value.date_end)
        _encode_meta(value.meta, out)
        return emit_extra(out, value.extra, [*ENTITY_KEYS, *META_FIELDS])

    raise TypeError(f"unsupported name value: {value!r}")


# ---------------------------------------------------------------------------
# Format B
# ---------------------------------------------------------------------------


def decode_csl_name(node: Any, path: str = "") -> CslName:
    """Decode a CSL name record; unknown keys such as ``parse-names`` pass through."""
    mapping = expect_mapping(node, path)
    return CslName(
        **{attr: optional_str(mapping, key, path) for key, attr in CSL_NAME_FIELDS.items()},
        extra=capture_extra(mapping, CSL_NAME_FIELDS),
    )


def encode_csl_name(value: CslName) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, attr in CSL_NAME_FIELDS.items():
        field_value = getattr(value, attr)
        if field_value is not None:
            out[key] = field_value
    return emit_extra(out, value.extra, CSL_NAME_FIELDS)
