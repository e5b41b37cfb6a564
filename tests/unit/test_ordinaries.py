"""Tests for ordinary (string-or-number) values."""

import pytest

from citemap.codec.ordinaries import decode_ordinary, encode_ordinary
from citemap.errors import TypeMismatchError
from citemap.models.ordinaries import OrdinaryKind, OrdinaryValue


@pytest.mark.unit
@pytest.mark.parametrize(
    ("node", "kind"),
    [
        ("12", OrdinaryKind.STRING),
        ("3.5", OrdinaryKind.STRING),
        (12, OrdinaryKind.INTEGER),
        (3.5, OrdinaryKind.FLOAT),
        (1e3, OrdinaryKind.FLOAT),
    ],
)
def test_decode_uses_document_typing(node: object, kind: OrdinaryKind) -> None:
    """Test numeric-looking strings stay strings; numbers keep their kind."""
    value = decode_ordinary(node)

    assert value.kind is kind
    assert encode_ordinary(value) == node
    assert type(encode_ordinary(value)) is type(node)


@pytest.mark.unit
@pytest.mark.parametrize("node", [None, True, [1], {"a": 1}])
def test_decode_rejects_non_scalars(node: object) -> None:
    """Test booleans, nulls and containers are type mismatches."""
    with pytest.raises(TypeMismatchError) as exc_info:
        decode_ordinary(node, "volume")

    assert exc_info.value.path == "volume"


@pytest.mark.unit
def test_float_equality_is_tolerant() -> None:
    """Test floats that differ by re-parsing jitter compare equal."""
    a = OrdinaryValue.of(0.1 + 0.2)
    b = OrdinaryValue.of(0.3)

    assert a == b
    assert hash(a) == hash(b)
    assert OrdinaryValue.of(0.3) != OrdinaryValue.of(0.31)


@pytest.mark.unit
def test_kinds_never_compare_equal() -> None:
    """Test 1, 1.0 and "1" are distinct values."""
    values = [OrdinaryValue.of(1), OrdinaryValue.of(1.0), OrdinaryValue.of("1")]

    assert len({v.kind for v in values}) == 3
    assert values[0] != values[1]
    assert values[0] != values[2]
    assert values[1] != values[2]


@pytest.mark.unit
def test_constructor_checks_kind() -> None:
    """Test a value must match its declared kind."""
    with pytest.raises(TypeError):
        OrdinaryValue(OrdinaryKind.INTEGER, "1")
    with pytest.raises(TypeError):
        OrdinaryValue.of(True)


@pytest.mark.unit
def test_accessors() -> None:
    """Test typed accessors return None for other kinds."""
    value = OrdinaryValue.of(7)

    assert value.as_int() == 7
    assert value.as_str() is None
    assert value.as_float() == 7.0
    assert str(value) == "7"
    assert OrdinaryValue.of("x").as_float() is None
