"""Ordinary (string-or-number) field values."""

import math
from dataclasses import dataclass
from enum import Enum

__all__ = ["FLOAT_REL_TOL", "OrdinaryKind", "OrdinaryValue"]

# Relative tolerance for float equality; absorbs re-parsing jitter.
FLOAT_REL_TOL = 1e-9


class OrdinaryKind(Enum):
    """Variant tag of an ordinary value."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"


_PYTHON_TYPES: dict[OrdinaryKind, type] = {
    OrdinaryKind.STRING: str,
    OrdinaryKind.INTEGER: int,
    OrdinaryKind.FLOAT: float,
}


@dataclass(frozen=True, eq=False)
class OrdinaryValue:
    """A scalar field value that may be textual or numeric.

    Attributes
    ----------
    kind : OrdinaryKind
        Which variant the value holds.
    value : str | int | float
        The native value, of the Python type matching ``kind``.

    Notes
    -----
    Floats compare with a relative tolerance; integers and strings compare
    exactly. Values of different kinds are never equal, so ``1`` and ``1.0``
    and ``"1"`` are three distinct values.
    """

    kind: OrdinaryKind
    value: str | int | float

    def __post_init__(self) -> None:
        """Check the value matches its kind."""
        expected = _PYTHON_TYPES[self.kind]
        if isinstance(self.value, bool) or not isinstance(self.value, expected):
            raise TypeError(
                f"OrdinaryValue of kind {self.kind.value} needs a {expected.__name__}, "
                f"got {type(self.value).__name__}"
            )

    @classmethod
    def of(cls, value: str | int | float) -> "OrdinaryValue":
        """Build a value, inferring the kind from the Python type."""
        if isinstance(value, bool):
            raise TypeError("booleans are not ordinary values")
        if isinstance(value, str):
            return cls(OrdinaryKind.STRING, value)
        if isinstance(value, int):
            return cls(OrdinaryKind.INTEGER, value)
        if isinstance(value, float):
            return cls(OrdinaryKind.FLOAT, value)
        raise TypeError(f"unsupported ordinary value type {type(value).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrdinaryValue):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is OrdinaryKind.FLOAT:
            return math.isclose(self.value, other.value, rel_tol=FLOAT_REL_TOL)  # type: ignore[arg-type]
        return self.value == other.value

    def __hash__(self) -> int:
        # Tolerant float equality cannot be hashed by value.
        if self.kind is OrdinaryKind.FLOAT:
            return hash(self.kind)
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        return str(self.value)

    def as_str(self) -> str | None:
        """Return the string, or None if this is a number."""
        return self.value if self.kind is OrdinaryKind.STRING else None  # type: ignore[return-value]

    def as_int(self) -> int | None:
        """Return the integer, or None if this is not an integer."""
        return self.value if self.kind is OrdinaryKind.INTEGER else None  # type: ignore[return-value]

    def as_float(self) -> float | None:
        """Return the value as a float for either numeric kind, else None."""
        if self.kind is OrdinaryKind.STRING:
            return None
        return float(self.value)
