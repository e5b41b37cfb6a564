"""Date codecs.

Two date encodings are handled here:

- CFF calendar dates, a fixed ``YYYY-MM-DD`` string.
- CSL date objects, which carry no type tag. Their shape is classified by a
  fixed precedence: one ``date-parts`` element, two ``date-parts`` elements,
  an ``edtf`` key, then a ``raw`` key. The first match wins even when later
  keys are also present.
"""

import re
from typing import Any

from citemap.codec._passthrough import capture_extra, emit_extra
from citemap.codec._shapes import (
    ScalarKind,
    expect_mapping,
    expect_sequence,
    expect_str,
    node_kind,
    optional_str,
)
from citemap.errors import (
    RangeViolationError,
    ShapeMismatchError,
    TypeMismatchError,
    join_path,
)
from citemap.models.dates import (
    CalendarDate,
    Circa,
    CircaKind,
    DateMeta,
    DateParts,
    DateRange,
    DateValue,
    EdtfDate,
    RawDate,
    Season,
    SingleDate,
)

__all__ = [
    "DATE_KEYS",
    "decode_calendar_date",
    "encode_calendar_date",
    "decode_date_parts",
    "decode_date",
    "encode_date",
]

# Known CSL date keys, in emit order.
DATE_KEYS = ("date-parts", "season", "circa", "literal", "raw", "edtf")

CALENDAR_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
NUMERIC_STRING_RE = re.compile(r"-?[0-9]+")

_SEASONS_BY_NUMBER = {1: Season.SPRING, 2: Season.SUMMER, 3: Season.AUTUMN, 4: Season.WINTER}


# ---------------------------------------------------------------------------
# Range checks
# ---------------------------------------------------------------------------


def _check_month(month: int, path: str, raw: Any) -> None:
    if not 1 <= month <= 12:
        raise RangeViolationError(
            f"month should be in range 1-12, got: {month}", path=path, value=raw
        )


def _check_day(day: int, path: str, raw: Any) -> None:
    # Flat bound: February 30th is accepted.
    if not 1 <= day <= 31:
        raise RangeViolationError(f"day should be in range 1-31, got: {day}", path=path, value=raw)


# ---------------------------------------------------------------------------
# CFF calendar dates
# ---------------------------------------------------------------------------


def decode_calendar_date(node: Any, path: str = "") -> CalendarDate:
    """Decode a ``YYYY-MM-DD`` string.

    Parameters
    ----------
    node : Any
        Document node; must be a string.
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    CalendarDate
        Decoded date.

    Raises
    ------
    TypeMismatchError
        If the node is not a string.
    ShapeMismatchError
        If the segments are not exactly 4, 2 and 2 digits wide.
    RangeViolationError
        If the month is outside 1-12 or the day outside 1-31.
    """
    text = expect_str(node, path)
    match = CALENDAR_DATE_RE.fullmatch(text)
    if match is None:
        raise ShapeMismatchError(f"expected YYYY-MM-DD, got: {text!r}", path=path, value=node)

    year, month, day = (int(group) for group in match.groups())
    _check_month(month, path, node)
    _check_day(day, path, node)
    return CalendarDate(year=year, month=month, day=day)


def encode_calendar_date(value: CalendarDate) -> str:
    """Encode a calendar date as a zero-padded ``YYYY-MM-DD`` string."""
    return str(value)


# ---------------------------------------------------------------------------
# CSL date-parts
# ---------------------------------------------------------------------------


def _decode_component(node: Any, path: str) -> int:
    kind = node_kind(node)
    if kind is ScalarKind.INTEGER:
        return node
    if kind is ScalarKind.STRING and NUMERIC_STRING_RE.fullmatch(node):
        return int(node)
    raise TypeMismatchError(
        f"expected an integer or numeric string, got {kind.value}", path=path, value=node
    )


def decode_date_parts(node: Any, path: str = "") -> DateParts:
    """Decode one ``date-parts`` element such as ``[2000, 1, 1]``.

    Components may be integers or numeric strings.

    Parameters
    ----------
    node : Any
        Sequence of one to three components (year, month, day).
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    DateParts
        Decoded parts.
    """
    components = expect_sequence(node, path)
    if not 1 <= len(components) <= 3:
        raise ShapeMismatchError(
            f"date-parts element needs 1 to 3 components, got {len(components)}",
            path=path,
            value=node,
        )

    values = [_decode_component(c, join_path(path, i)) for i, c in enumerate(components)]
    year = values[0]
    month = values[1] if len(values) > 1 else None
    day = values[2] if len(values) > 2 else None
    if month is not None:
        _check_month(month, join_path(path, 1), node)
    if day is not None:
        _check_day(day, join_path(path, 2), node)
    return DateParts(year=year, month=month, day=day)


# ---------------------------------------------------------------------------
# CSL date metadata
# ---------------------------------------------------------------------------


def _decode_season(node: Any, path: str) -> Season | str:
    kind = node_kind(node)
    if kind is ScalarKind.STRING:
        try:
            return Season(node.lower())
        except ValueError:
            return node
    if kind is ScalarKind.INTEGER:
        if node not in _SEASONS_BY_NUMBER:
            raise RangeViolationError(
                f"season should be in range 1-4, got: {node}", path=path, value=node
            )
        return _SEASONS_BY_NUMBER[node]
    raise TypeMismatchError(f"expected a season, got {kind.value}", path=path, value=node)


def _decode_circa(node: Any, path: str) -> Circa:
    kind = node_kind(node)
    if kind is ScalarKind.BOOLEAN:
        return Circa.flag(node)
    if kind is ScalarKind.INTEGER:
        return Circa.year(node)
    if kind is ScalarKind.STRING:
        return Circa.arbitrary(node)
    raise TypeMismatchError(
        f"expected a string, integer or boolean, got {kind.value}", path=path, value=node
    )


def _decode_meta(node: dict[str, Any], path: str) -> DateMeta:
    season = None
    season_source = None
    circa = None
    if node.get("season") is not None:
        season_source = node["season"]
        season = _decode_season(season_source, join_path(path, "season"))
    if node.get("circa") is not None:
        circa = _decode_circa(node["circa"], join_path(path, "circa"))
    return DateMeta(
        season=season,
        circa=circa,
        literal=optional_str(node, "literal", path),
        extra=capture_extra(node, DATE_KEYS),
        season_source=season_source,
    )


# ---------------------------------------------------------------------------
# CSL date values
# ---------------------------------------------------------------------------


def decode_date(node: Any, path: str = "") -> DateValue:
    """Classify and decode a CSL date object.

    Parameters
    ----------
    node : Any
        Date mapping, e.g. ``{"date-parts": [[2000, 1, 1]]}``.
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    DateValue
        SingleDate, DateRange, EdtfDate, or RawDate, in that precedence.

    Raises
    ------
    ShapeMismatchError
        If no shape matches ("unknown date format").
    """
    mapping = expect_mapping(node, path)

    elements: list[Any] = []
    if "date-parts" in mapping:
        elements = expect_sequence(mapping["date-parts"], join_path(path, "date-parts"))
    parts_path = join_path(path, "date-parts")

    if len(elements) == 1:
        single = decode_date_parts(elements[0], join_path(parts_path, 0))
        return SingleDate(date=single, meta=_decode_meta(mapping, path))

    if len(elements) == 2:
        start = decode_date_parts(elements[0], join_path(parts_path, 0))
        end = decode_date_parts(elements[1], join_path(parts_path, 1))
        return DateRange(start=start, end=end, meta=_decode_meta(mapping, path))

    if "edtf" in mapping:
        text = expect_str(mapping["edtf"], join_path(path, "edtf"))
        return EdtfDate(date=text, meta=_decode_meta(mapping, path))

    if "raw" in mapping:
        text = expect_str(mapping["raw"], join_path(path, "raw"))
        return RawDate(date=text, meta=_decode_meta(mapping, path))

    raise ShapeMismatchError(f"unknown date format: {dict(mapping)!r}", path=path, value=node)


def _encode_season(meta: DateMeta) -> str | int:
    season = meta.season
    source = meta.season_source
    if isinstance(season, Season):
        if type(source) is int and _SEASONS_BY_NUMBER.get(source) is season:
            return source
        if isinstance(source, str) and source.lower() == season.value:
            return source
        return season.value
    return season


def _encode_circa(circa: Circa) -> str | int | bool:
    if circa.kind is CircaKind.FLAG:
        return bool(circa.value)
    return circa.value


def encode_date(value: DateValue) -> dict[str, Any]:
    """Encode a date value, choosing the key set from its variant.

    Exactly one of ``date-parts``, ``raw`` or ``edtf`` is emitted, followed
    by the metadata keys and the passthrough entries.
    """
    meta = value.meta
    out: dict[str, Any] = {}

    if isinstance(value, SingleDate):
        out["date-parts"] = [value.date.as_list()]
    elif isinstance(value, DateRange):
        out["date-parts"] = [value.start.as_list(), value.end.as_list()]

    if meta.season is not None:
        out["season"] = _encode_season(meta)
    if meta.circa is not None:
        out["circa"] = _encode_circa(meta.circa)
    if meta.literal is not None:
        out["literal"] = meta.literal

    if isinstance(value, RawDate):
        out["raw"] = value.date
    elif isinstance(value, EdtfDate):
        out["edtf"] = value.date

    return emit_extra(out, meta.extra, DATE_KEYS)
