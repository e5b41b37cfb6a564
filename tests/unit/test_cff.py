"""Tests for CITATION.cff decoding and encoding."""

from collections.abc import Callable
from pathlib import Path

import pytest

from citemap.errors import (
    DocumentSyntaxError,
    ShapeMismatchError,
    TypeMismatchError,
)
from citemap.models.cff import Cff, PublicationStatus, RefType, WorkType
from citemap.models.dates import CalendarDate
from citemap.models.identifiers import IdentifierKind
from citemap.models.license import SingleLicense
from citemap.models.names import Anonymous, Entity, NameMeta, Person
from citemap.models.ordinaries import OrdinaryValue
from citemap.parse.base import load_yaml_document
from citemap.parse.cff import decode_cff, decode_reference, parse_cff_text
from citemap.write.cff_writer import encode_cff, encode_reference, format_cff

MINIMAL = {
    "cff-version": "1.2.0",
    "message": "Please cite",
    "title": "Tool",
    "authors": [{"family-names": "Doe"}],
}


def _read(path: Path) -> Cff:
    return parse_cff_text(path.read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Fixtures from disk
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_minimal(cff_fixture: Callable[[str], Path]) -> None:
    """Test the smallest valid document."""
    cff = _read(cff_fixture("minimal"))

    assert cff == Cff(
        cff_version="1.2.0",
        message=(
            "If you use this software in your work, please cite it using the following metadata"
        ),
        title="Ruby CFF Library",
        authors=(Person(family_names="Haines", given_names="Robert"),),
    )


@pytest.mark.unit
def test_short(cff_fixture: Callable[[str], Path]) -> None:
    """Test dates, keywords, licenses and string versions."""
    cff = _read(cff_fixture("short"))

    assert cff.version == OrdinaryValue.of("0.4.0")
    assert cff.date_released == CalendarDate(2018, 7, 22)
    assert cff.keywords == ("ruby", "credit", "citation")
    assert cff.repository_artifact == "https://rubygems.org/gems/cff"
    assert isinstance(cff.license, SingleLicense)
    assert str(cff.license.expression) == "Apache-2.0"
    assert cff.authors[0].affiliation == "The University of Manchester, UK"


@pytest.mark.unit
def test_closed_source(cff_fixture: Callable[[str], Path]) -> None:
    """Test entity contacts and person name suffixes."""
    cff = _read(cff_fixture("closed-source"))

    assert cff.authors == (
        Person(family_names="Vader", given_names='Anakin "Darth"', name_suffix="né Skywalker"),
    )
    assert cff.contact == (
        Entity(
            name="Dark Side Software",
            meta=NameMeta(
                address="DS-1 Orbital Battle Station, near Scarif",
                email="father@imperial-empire.com",
                tel="+850 (0)123-45-666",
            ),
        ),
    )
    assert cff.url == "http://www.opaquity.com"


@pytest.mark.unit
def test_references_document(cff_fixture: Callable[[str], Path]) -> None:
    """Test a document exercising every ambiguous field kind."""
    cff = _read(cff_fixture("references"))

    assert cff.work_type is WorkType.SOFTWARE
    assert cff.version == OrdinaryValue.of(1.4)
    assert cff.date_released == CalendarDate(2021, 2, 30)
    assert isinstance(cff.authors[0], Person)
    assert cff.authors[0].extra == {"x-role": "maintainer"}
    assert cff.authors[1] == Entity(
        name="Sundial Contributors",
        meta=NameMeta(website="https://example.org/sundial", country="NO"),
    )
    assert cff.authors[2] == Anonymous()
    assert [i.kind for i in cff.identifiers] == [IdentifierKind.DOI, IdentifierKind.SWH]
    assert cff.extra == {"x-generator": {"name": "handwritten", "revision": 2}}

    preferred = cff.preferred_citation
    assert preferred.work_type is RefType.ARTICLE
    assert preferred.volume == OrdinaryValue.of(12)
    assert preferred.issue == OrdinaryValue.of("3a")
    assert preferred.year == 2020

    conference_paper, software = cff.references
    assert conference_paper.status is PublicationStatus.IN_PRESS
    assert conference_paper.conference.date_end == CalendarDate(1912, 3, 3)
    assert software.authors == (Anonymous(),)
    assert software.extra == {"x-archived": True}


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_loader_keeps_dates_and_yaml11_words_as_strings() -> None:
    """Test timestamps and yes/no/on/off are not resolved to other types."""
    tree = load_yaml_document("d: 2018-07-22\nc: NO\nf: on\nt: true\n")

    assert tree == {"d": "2018-07-22", "c": "NO", "f": "on", "t": True}


@pytest.mark.unit
def test_dumper_writes_dates_unquoted_and_quotes_ambiguous_words() -> None:
    """Test date strings are plain and YAML 1.1 booleans stay quoted."""
    text = format_cff(
        decode_cff({**MINIMAL, "date-released": "2018-07-22", "abstract": "yes"})
    )

    assert "date-released: 2018-07-22\n" in text
    assert "abstract: 'yes'\n" in text


@pytest.mark.unit
def test_syntax_error() -> None:
    """Test malformed YAML is a document syntax error."""
    with pytest.raises(DocumentSyntaxError) as exc_info:
        parse_cff_text("title: [unclosed\n")

    assert "invalid YAML" in str(exc_info.value)


# ---------------------------------------------------------------------------
# Required fields and validation
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("key", ["cff-version", "message", "title", "authors"])
def test_required_fields(key: str) -> None:
    """Test each required top-level key is enforced."""
    node = {k: v for k, v in MINIMAL.items() if k != key}

    with pytest.raises(ShapeMismatchError) as exc_info:
        decode_cff(node)

    assert key in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("cff-version", "1.2"),
        ("message", ""),
        ("title", ""),
        ("authors", []),
        ("type", "library"),
    ],
)
def test_invalid_top_level_values(key: str, value: object) -> None:
    """Test semver, non-empty and enum constraints."""
    with pytest.raises(ShapeMismatchError) as exc_info:
        decode_cff({**MINIMAL, key: value})

    assert exc_info.value.path == key


@pytest.mark.unit
def test_document_must_be_mapping() -> None:
    """Test a top-level list is a type mismatch."""
    with pytest.raises(TypeMismatchError):
        decode_cff([MINIMAL])


@pytest.mark.unit
def test_nested_error_path() -> None:
    """Test errors deep in the tree carry the full path."""
    node = {
        **MINIMAL,
        "references": [
            {"type": "book", "authors": [{"name": "Acme"}]},
            {"type": "book", "authors": [{"family-names": "A"}, {"name": 7}]},
        ],
    }

    with pytest.raises(TypeMismatchError) as exc_info:
        decode_cff(node)

    assert exc_info.value.path == "references[1].authors[1].name"
    assert exc_info.value.value == 7


@pytest.mark.unit
def test_null_optional_field_is_absent() -> None:
    """Test an explicit null on an optional field decodes as absent."""
    cff = decode_cff({**MINIMAL, "doi": None, "keywords": None})

    assert cff.doi is None
    assert cff.keywords == ()
    assert "doi" not in encode_cff(cff)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_encode_omits_empty_fields_and_orders_known_first() -> None:
    """Test empty optionals are dropped and passthrough trails known keys."""
    node = {"x-first": 1, **MINIMAL, "contact": [], "keywords": ["a"]}

    out = encode_cff(decode_cff(node))

    assert list(out) == ["cff-version", "message", "title", "keywords", "authors", "x-first"]


@pytest.mark.unit
def test_reference_round_trip() -> None:
    """Test a reference with ambiguous scalar fields round-trips exactly."""
    node = {
        "type": "article",
        "authors": [{"family-names": "Leavitt"}],
        "start": 1,
        "end": "iv",
        "month": 3,
        "pages": 21,
        "issue": 2.5,
        "license": ["MIT"],
        "x-custom": {"k": [1, 2]},
    }

    reference = decode_reference(node, "preferred-citation")

    assert reference.end == OrdinaryValue.of("iv")
    assert encode_reference(reference) == node


@pytest.mark.unit
def test_reference_requires_type_and_authors() -> None:
    """Test reference required fields."""
    with pytest.raises(ShapeMismatchError) as exc_info:
        decode_reference({"type": "book"}, "references[0]")

    assert exc_info.value.path == "references[0]"
    assert "authors" in str(exc_info.value)

    with pytest.raises(ShapeMismatchError):
        decode_reference({"type": "novel", "authors": [{"name": "A"}]})


@pytest.mark.unit
def test_full_document_round_trip(cff_fixture: Callable[[str], Path]) -> None:
    """Test decode(encode(decode(doc))) == decode(doc) for the richest fixture."""
    cff = _read(cff_fixture("references"))

    again = parse_cff_text(format_cff(cff))

    assert again == cff
    assert encode_cff(again) == encode_cff(cff)


@pytest.mark.unit
def test_decoded_document_is_hashable(cff_fixture: Callable[[str], Path]) -> None:
    """Test a whole decoded document, passthrough included, can be hashed."""
    first = _read(cff_fixture("references"))
    second = _read(cff_fixture("references"))

    assert first == second
    assert hash(first) == hash(second)
