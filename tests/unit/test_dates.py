"""Tests for calendar dates and CSL date shape classification."""

import dataclasses

import pytest

from citemap.codec.dates import (
    decode_calendar_date,
    decode_date,
    decode_date_parts,
    encode_calendar_date,
    encode_date,
)
from citemap.errors import RangeViolationError, ShapeMismatchError, TypeMismatchError
from citemap.models.dates import (
    CalendarDate,
    Circa,
    CircaKind,
    DateMeta,
    DateParts,
    DateRange,
    EdtfDate,
    RawDate,
    Season,
    SingleDate,
)

# ---------------------------------------------------------------------------
# CalendarDate
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_calendar_date_round_trip() -> None:
    """Test the literal YYYY-MM-DD example."""
    date = decode_calendar_date("2018-07-22")

    assert date == CalendarDate(year=2018, month=7, day=22)
    assert encode_calendar_date(date) == "2018-07-22"


@pytest.mark.unit
def test_calendar_date_encode_zero_pads() -> None:
    """Test encode pads every segment to its declared width."""
    assert encode_calendar_date(CalendarDate(year=987, month=1, day=2)) == "0987-01-02"


@pytest.mark.unit
@pytest.mark.parametrize("text", ["2021-13-01", "2021-00-15", "2021-01-00", "2021-01-32"])
def test_calendar_date_range_violations(text: str) -> None:
    """Test month 1-12 and day 1-31 are enforced."""
    with pytest.raises(RangeViolationError) as exc_info:
        decode_calendar_date(text, "date-released")

    assert exc_info.value.path == "date-released"
    assert exc_info.value.value == text


@pytest.mark.unit
def test_calendar_date_accepts_february_30() -> None:
    """Test the day bound is flat: 2021-02-30 is accepted."""
    assert decode_calendar_date("2021-02-30") == CalendarDate(year=2021, month=2, day=30)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text", ["2021-1-01", "21-01-01", "2021-01-001", "2021/01/01", "2021-01-01T00:00", ""]
)
def test_calendar_date_width_mismatch(text: str) -> None:
    """Test segments must be exactly 4, 2 and 2 digits."""
    with pytest.raises(ShapeMismatchError):
        decode_calendar_date(text)


@pytest.mark.unit
def test_calendar_date_requires_string() -> None:
    """Test a non-string node is a type mismatch."""
    with pytest.raises(TypeMismatchError):
        decode_calendar_date(20180722)


# ---------------------------------------------------------------------------
# DateParts
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_date_parts_accept_numeric_strings() -> None:
    """Test integer and numeric-string components decode the same."""
    assert decode_date_parts(["2000", "1", 1]) == DateParts(year=2000, month=1, day=1)
    assert decode_date_parts([-50]) == DateParts(year=-50)


@pytest.mark.unit
def test_date_parts_range_checks() -> None:
    """Test month and day components are range-checked."""
    with pytest.raises(RangeViolationError) as exc_info:
        decode_date_parts([2000, 13], "issued.date-parts[0]")
    assert exc_info.value.path == "issued.date-parts[0][1]"

    with pytest.raises(RangeViolationError):
        decode_date_parts([2000, 1, 32])


@pytest.mark.unit
@pytest.mark.parametrize("node", [[], [2000, 1, 1, 1]])
def test_date_parts_length(node: list) -> None:
    """Test an element needs one to three components."""
    with pytest.raises(ShapeMismatchError):
        decode_date_parts(node)


@pytest.mark.unit
@pytest.mark.parametrize("component", ["spring", 2000.5, None, True])
def test_date_parts_bad_component(component: object) -> None:
    """Test non-numeric components are type mismatches."""
    with pytest.raises(TypeMismatchError):
        decode_date_parts([component])


# ---------------------------------------------------------------------------
# Shape classification
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_single_date() -> None:
    """Test the literal single-date example."""
    value = decode_date({"date-parts": [[2000, 1, 1]]})

    assert value == SingleDate(DateParts(year=2000, month=1, day=1))
    assert encode_date(value) == {"date-parts": [[2000, 1, 1]]}


@pytest.mark.unit
def test_date_range() -> None:
    """Test two date-parts elements decode to a range."""
    value = decode_date({"date-parts": [[2000, 1, 1], [2010, 10, 10]]})

    assert value == DateRange(DateParts(2000, 1, 1), DateParts(2010, 10, 10))
    assert encode_date(value) == {"date-parts": [[2000, 1, 1], [2010, 10, 10]]}


@pytest.mark.unit
def test_date_parts_win_over_raw() -> None:
    """Test a one-element date-parts takes precedence over raw."""
    node = {"date-parts": [[1999]], "raw": "sometime in 1999"}

    value = decode_date(node)

    assert isinstance(value, SingleDate)
    assert encode_date(value) == {"date-parts": [[1999]]}


@pytest.mark.unit
def test_edtf_wins_over_raw() -> None:
    """Test edtf is consulted before raw."""
    value = decode_date({"raw": "June 2004", "edtf": "2004-06"})

    assert value == EdtfDate("2004-06")
    assert encode_date(value) == {"edtf": "2004-06"}


@pytest.mark.unit
def test_three_element_date_parts_fall_through() -> None:
    """Test date-parts with three elements is not a structured date."""
    value = decode_date({"date-parts": [[1], [2], [3]], "raw": "1-3"})

    assert value == RawDate("1-3")


@pytest.mark.unit
def test_raw_date() -> None:
    """Test a raw string is carried uninterpreted."""
    value = decode_date({"raw": "Spring 1999"})

    assert value == RawDate("Spring 1999")
    assert encode_date(value) == {"raw": "Spring 1999"}


@pytest.mark.unit
def test_unknown_date_format() -> None:
    """Test a node with no recognised shape names the node."""
    node = {"literal": "yesterday"}

    with pytest.raises(ShapeMismatchError) as exc_info:
        decode_date(node, "issued")

    assert "unknown date format" in str(exc_info.value)
    assert exc_info.value.path == "issued"
    assert exc_info.value.value == node


@pytest.mark.unit
def test_date_requires_mapping() -> None:
    """Test a scalar date is a type mismatch."""
    with pytest.raises(TypeMismatchError):
        decode_date("2000-01-01")


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_metadata_attached_to_every_shape() -> None:
    """Test season, circa, literal and extras decode for every variant."""
    meta_keys = {"season": "winter", "circa": True, "literal": "c. 1850", "x-source": "catalog"}

    for shape in ({"date-parts": [[1850]]}, {"raw": "1850?"}, {"edtf": "1850~"}):
        value = decode_date({**shape, **meta_keys})
        assert value.meta == DateMeta(
            season=Season.WINTER,
            circa=Circa.flag(True),
            literal="c. 1850",
            extra={"x-source": "catalog"},
        )


@pytest.mark.unit
def test_encode_key_order() -> None:
    """Test the shape key comes first, then metadata, then passthrough."""
    node = {"x-z": 1, "literal": "L", "circa": "about", "date-parts": [[2001, 2]], "season": 1}

    out = encode_date(decode_date(node))

    assert list(out) == ["date-parts", "season", "circa", "literal", "x-z"]
    assert out["season"] == 1
    assert out["circa"] == "about"


@pytest.mark.unit
def test_circa_variants_are_distinct() -> None:
    """Test a circa year of 1 and a circa flag of True stay distinct."""
    year = decode_date({"raw": "x", "circa": 1}).meta.circa
    flag = decode_date({"raw": "x", "circa": True}).meta.circa

    assert year == Circa(CircaKind.YEAR, 1)
    assert flag == Circa(CircaKind.FLAG, True)
    assert year != flag
    assert encode_date(RawDate("x", DateMeta(circa=flag)))["circa"] is True


@pytest.mark.unit
def test_season_forms() -> None:
    """Test numeric, named and free-text seasons."""
    assert decode_date({"raw": "x", "season": 3}).meta.season is Season.AUTUMN
    assert decode_date({"raw": "x", "season": "Summer"}).meta.season is Season.SUMMER
    assert decode_date({"raw": "x", "season": "Trinity term"}).meta.season == "Trinity term"

    with pytest.raises(RangeViolationError):
        decode_date({"raw": "x", "season": 5})


@pytest.mark.unit
def test_string_components_encode_as_integers() -> None:
    """Test numeric-string components are normalized to integers on encode."""
    value = decode_date({"date-parts": [["2001", "02"]]})

    assert encode_date(value) == {"date-parts": [[2001, 2]]}


@pytest.mark.unit
@pytest.mark.parametrize("written", [1, "Spring", "SPRING", "spring"])
def test_season_keeps_its_written_form(written: object) -> None:
    """Test a recognised season re-encodes exactly as it was written."""
    value = decode_date({"raw": "x", "season": written})

    assert value.meta.season is Season.SPRING
    assert encode_date(value)["season"] == written


@pytest.mark.unit
def test_season_written_form_ignored_by_equality() -> None:
    """Test the written season form does not affect equality or hashing."""
    numeric = decode_date({"raw": "x", "season": 4})
    named = decode_date({"raw": "x", "season": "Winter"})
    built = RawDate("x", DateMeta(season=Season.WINTER))

    assert numeric == named == built
    assert hash(numeric) == hash(named) == hash(built)
    assert encode_date(built)["season"] == "winter"


@pytest.mark.unit
def test_changed_season_drops_written_form() -> None:
    """Test a season replaced after decoding encodes from the new value."""
    decoded = decode_date({"raw": "x", "season": 1})
    meta = dataclasses.replace(decoded.meta, season=Season.SUMMER)

    assert encode_date(RawDate("x", meta))["season"] == "summer"


@pytest.mark.unit
def test_date_extra_is_read_only() -> None:
    """Test passthrough keys cannot be changed after decoding."""
    value = decode_date({"raw": "x", "x-source": "catalog"})

    with pytest.raises(TypeError):
        value.meta.extra["x-source"] = "other"  # type: ignore[index]
    assert encode_date(value) == {"raw": "x", "x-source": "catalog"}
