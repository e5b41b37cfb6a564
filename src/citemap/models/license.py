"""SPDX license values.

A CFF ``license`` is either a single SPDX expression or a list of them, the
list meaning the members joined with ``OR``. The document shape is kept as
decoded; equality and hashing look only at the combined expression.
"""

from dataclasses import dataclass
from functools import lru_cache

from boolean import Expression as LicenseExpression
from boolean.boolean import DualBase, ParseError
from license_expression import ExpressionError, Licensing, get_spdx_licensing

from citemap.errors import GrammarError, InternalInconsistencyError

__all__ = [
    "SpdxExpression",
    "License",
    "SingleLicense",
    "AnyOfLicense",
    "parse_expression",
    "canonical_expression",
]


@lru_cache(maxsize=1)
def _licensing() -> Licensing:
    # Building the SPDX symbol table is slow; it is read-only once built.
    return get_spdx_licensing()


# boolean.py raises a bare IndexError on empty groups such as "()".
PARSE_FAILURES = (ExpressionError, ParseError, IndexError)


def _parse(text: str) -> LicenseExpression | None:
    return _licensing().parse(text, validate=True, strict=True)


def canonical_expression(expression: LicenseExpression | None) -> LicenseExpression | None:
    """Flatten nested AND/OR groups and drop repeated operands.

    ``(MIT OR Apache-2.0) OR GPL-3.0-only`` and
    ``MIT OR Apache-2.0 OR GPL-3.0-only`` have the same canonical form.
    """
    if not isinstance(expression, DualBase):
        return expression

    operands: list[LicenseExpression] = []
    for arg in expression.args:
        flat = canonical_expression(arg)
        members = flat.args if isinstance(flat, expression.__class__) else (flat,)
        for member in members:
            if member not in operands:
                operands.append(member)

    if len(operands) == 1:
        return operands[0]
    return expression.__class__(*operands)


@dataclass(frozen=True, eq=False)
class SpdxExpression:
    """A parsed SPDX expression together with its source text.

    Attributes
    ----------
    text : str
        Expression exactly as written in the document.
    parsed : LicenseExpression
        Boolean expression over SPDX license symbols.
    """

    text: str
    parsed: LicenseExpression

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpdxExpression):
            return NotImplemented
        return canonical_expression(self.parsed) == canonical_expression(other.parsed)

    def __hash__(self) -> int:
        return hash(canonical_expression(self.parsed))


def parse_expression(text: str, path: str = "") -> SpdxExpression:
    """Parse one SPDX license expression.

    Parameters
    ----------
    text : str
        Expression text, e.g. ``"Apache-2.0 OR MIT"``.
    path : str, optional
        Field path for error reporting.

    Returns
    -------
    SpdxExpression
        Parsed expression.

    Raises
    ------
    GrammarError
        If the text is empty, malformed, or names an unknown license.
    """
    try:
        parsed = _parse(text)
    except PARSE_FAILURES as e:
        raise GrammarError(f"invalid SPDX expression {text!r}: {e}", path=path, value=text) from e
    if parsed is None:
        raise GrammarError("empty SPDX expression", path=path, value=text)
    return SpdxExpression(text, parsed)


class License:
    """Base for the two license shapes.

    Two licenses are equal when their combined expressions are equal under
    the SPDX boolean algebra, so ``Apache-2.0`` and ``[Apache-2.0]`` are the
    same license, as are ``[MIT, Apache-2.0]`` and ``[Apache-2.0, MIT]``.
    """

    def to_expression(self) -> LicenseExpression | None:
        """Return the single combined expression for this license."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, License):
            return NotImplemented
        return canonical_expression(self.to_expression()) == canonical_expression(
            other.to_expression()
        )

    def __hash__(self) -> int:
        return hash(canonical_expression(self.to_expression()))


@dataclass(frozen=True, eq=False)
class SingleLicense(License):
    """A license written as one expression string."""

    expression: SpdxExpression

    def to_expression(self) -> LicenseExpression:
        return self.expression.parsed


@dataclass(frozen=True, eq=False)
class AnyOfLicense(License):
    """A license written as a list of expression strings.

    An empty list is valid and has no combined expression.
    """

    expressions: tuple[SpdxExpression, ...] = ()

    def to_expression(self) -> LicenseExpression | None:
        """Join the members with ``OR``, each in parentheses, and re-parse.

        Raises
        ------
        InternalInconsistencyError
            If the joined text does not parse although every member did.
        """
        if not self.expressions:
            return None
        joined = " OR ".join(f"({expr.text})" for expr in self.expressions)
        try:
            parsed = _parse(joined)
        except PARSE_FAILURES as e:
            raise InternalInconsistencyError(
                f"members parsed individually but their disjunction did not: {e}",
                value=joined,
            ) from e
        if parsed is None:
            raise InternalInconsistencyError("disjunction parsed to nothing", value=joined)
        return parsed
