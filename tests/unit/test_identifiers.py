"""Tests for the tagged identifier codec."""

import pytest

from citemap.codec.identifiers import decode_identifier, encode_identifier
from citemap.errors import ShapeMismatchError, TypeMismatchError
from citemap.models.identifiers import Identifier, IdentifierKind


@pytest.mark.unit
@pytest.mark.parametrize("tag", ["doi", "url", "swh", "other"])
def test_each_kind_round_trips(tag: str) -> None:
    """Test every identifier kind decodes from and encodes to its tag."""
    node = {"type": tag, "value": "some-value"}

    value = decode_identifier(node)

    assert value.kind is IdentifierKind(tag)
    assert encode_identifier(value) == node


@pytest.mark.unit
def test_description_and_passthrough() -> None:
    """Test description is optional and unknown keys are kept."""
    node = {"x-checked": True, "type": "doi", "value": "10.5281/zenodo.1", "description": "v1"}

    value = decode_identifier(node)

    assert value == Identifier(
        kind=IdentifierKind.DOI,
        value="10.5281/zenodo.1",
        description="v1",
        extra={"x-checked": True},
    )
    assert list(encode_identifier(value)) == ["type", "value", "description", "x-checked"]


@pytest.mark.unit
def test_values_are_not_validated() -> None:
    """Test identifier values are carried opaquely."""
    assert decode_identifier({"type": "doi", "value": "not a doi"}).value == "not a doi"


@pytest.mark.unit
def test_unknown_type() -> None:
    """Test an unknown tag is a shape mismatch on the type field."""
    with pytest.raises(ShapeMismatchError) as exc_info:
        decode_identifier({"type": "isbn", "value": "x"}, "identifiers[2]")

    assert exc_info.value.path == "identifiers[2].type"


@pytest.mark.unit
@pytest.mark.parametrize("node", [{"value": "x"}, {"type": "doi"}])
def test_missing_required_keys(node: dict) -> None:
    """Test type and value are both required."""
    with pytest.raises(ShapeMismatchError):
        decode_identifier(node)


@pytest.mark.unit
def test_value_must_be_string() -> None:
    """Test a numeric value is a type mismatch."""
    with pytest.raises(TypeMismatchError) as exc_info:
        decode_identifier({"type": "other", "value": 1234}, "identifiers[0]")

    assert exc_info.value.path == "identifiers[0].value"
