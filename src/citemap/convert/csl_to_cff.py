"""CSL-JSON item to CFF reference conversion.

The conversion is lossy: fields without a CFF counterpart are dropped, and
values that cannot be represented are logged as warnings and skipped rather
than failing the whole document.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import replace
from enum import Enum

from citemap.convert.type_map import convert_type
from citemap.models.cff import Cff, Reference
from citemap.models.csl import Item
from citemap.models.dates import CalendarDate, DateParts, DateRange, DateValue, SingleDate
from citemap.models.identifiers import Identifier, IdentifierKind
from citemap.models.names import Anonymous, CslName, Entity, Name, Person
from citemap.models.ordinaries import OrdinaryValue

logger = logging.getLogger(__name__)

__all__ = [
    "MergeMode",
    "convert_name",
    "convert_authors",
    "convert_date",
    "split_pages",
    "convert_item",
    "convert_items",
    "merge_references",
]

NUMBER_RE = re.compile(r"[0-9]+")

# Passthrough keys on a CSL item that become ``other`` identifiers.
EXTRA_IDENTIFIER_KEYS: dict[str, str] = {
    "eissn": "EISSN",
    "issnl": "ISSNL",
}


class MergeMode(Enum):
    """How converted references are merged into an existing CFF document."""

    INSERT = "insert"
    REPLACE = "replace"


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _text(value: OrdinaryValue | None) -> str | None:
    return None if value is None else str(value)


def _number_or_text(value: OrdinaryValue | None) -> OrdinaryValue | None:
    """Turn a numeric string into an integer; keep anything else as given."""
    if value is None:
        return None
    text = str(value).strip()
    if NUMBER_RE.fullmatch(text):
        return OrdinaryValue.of(int(text))
    return value


def _page_number(text: str) -> OrdinaryValue | None:
    text = text.strip()
    if NUMBER_RE.fullmatch(text):
        return OrdinaryValue.of(int(text))
    return None


def split_pages(page: OrdinaryValue | None) -> tuple[OrdinaryValue | None, OrdinaryValue | None]:
    """Split a CSL ``page`` value into CFF start and end pages.

    A single number is both start and end; ``"12-34"`` splits on the first
    hyphen. Non-numeric parts are dropped.

    Parameters
    ----------
    page : OrdinaryValue | None
        CSL page value.

    Returns
    -------
    tuple[OrdinaryValue | None, OrdinaryValue | None]
        Start and end pages.
    """
    if page is None:
        return None, None

    single = _page_number(str(page))
    if single is not None:
        return single, single

    start, sep, end = str(page).partition("-")
    return _page_number(start), _page_number(end) if sep else None


def convert_name(name: CslName) -> Name:
    """Convert a CSL name to a CFF Person or Entity."""
    if name.family is not None or name.given is not None:
        return Person(
            family_names=name.family,
            given_names=name.given,
            name_particle=name.non_dropping_particle,
            name_suffix=name.suffix,
        )

    if name.literal is not None:
        return Entity(name=name.literal)

    logger.warning("Could not convert name %r, using its representation", name)
    return Entity(name=repr(name))


def convert_authors(names: Iterable[CslName]) -> tuple[Name, ...]:
    """Convert CSL names to CFF authors; an empty list becomes ``[anonymous]``."""
    authors = tuple(convert_name(name) for name in names)
    return authors or (Anonymous(),)


def convert_date(value: DateValue | None, field: str = "date") -> CalendarDate | None:
    """Collapse a CSL date into a CFF calendar date.

    Single dates convert directly and ranges convert to their start date,
    provided month and day are known. Raw and EDTF dates are not converted.
    """
    if value is None:
        return None

    parts: DateParts
    if isinstance(value, SingleDate):
        parts = value.date
    elif isinstance(value, DateRange):
        parts = value.start
    else:
        logger.warning("Could not convert %s %r, convert it manually", field, value)
        return None

    if parts.month is None or parts.day is None:
        logger.warning("Could not convert %s %s: month and day are required", field, parts)
        return None

    return CalendarDate(year=parts.year, month=parts.month, day=parts.day)


def _issued_year(value: DateValue | None) -> int | None:
    if isinstance(value, SingleDate):
        return value.date.year
    if isinstance(value, DateRange):
        return value.start.year
    return None


def _extra_identifiers(item: Item) -> tuple[Identifier, ...]:
    identifiers = []
    for key, description in EXTRA_IDENTIFIER_KEYS.items():
        value = item.extra.get(key)
        if value is None:
            continue
        identifiers.append(
            Identifier(kind=IdentifierKind.OTHER, value=str(value), description=description)
        )
    return tuple(identifiers)


def _one(value: OrdinaryValue | None) -> tuple[str, ...]:
    return () if value is None else (str(value),)


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


def convert_item(item: Item) -> Reference:
    """Convert one CSL item to a CFF reference.

    Parameters
    ----------
    item : Item
        Decoded CSL item.

    Returns
    -------
    Reference
        Reference with the type looked up from ``ITEM_TO_REF_TYPE`` and
        authors taken from ``author`` followed by ``contributor``.
    """
    start, end = split_pages(item.page)
    issued = convert_date(item.issued, "issued")
    publisher = _text(item.publisher)

    return Reference(
        work_type=convert_type(item.item_type),
        authors=convert_authors([*item.author, *item.contributor]),
        abbreviation=_text(item.title_short),
        abstract=_text(item.abstract),
        collection_title=_text(item.container_title),
        copyright=_text(item.rights) or _text(item.license),
        database=_text(item.source),
        date_accessed=convert_date(item.accessed, "accessed"),
        date_published=convert_date(item.published, "published"),
        doi=_text(item.doi),
        edition=_text(item.edition),
        editors=tuple(convert_name(n) for n in item.editor),
        start=start,
        end=end,
        identifiers=_extra_identifiers(item),
        isbn=_text(item.isbn),
        issn=_text(item.issn),
        issue=item.issue,
        issue_date=None if issued is None else str(issued),
        journal=_text(item.journal_abbreviation),
        keywords=_one(item.keyword),
        languages=_one(item.language),
        notes=_text(item.note),
        number=item.number,
        pmcid=_text(item.pmcid),
        publisher=None if publisher is None else Entity(name=publisher),
        recipients=tuple(convert_name(n) for n in item.recipient),
        title=_text(item.title),
        translators=tuple(convert_name(n) for n in item.translator),
        url=_text(item.url),
        version=item.version,
        volume=_number_or_text(item.volume),
        year=_issued_year(item.issued),
    )


def convert_items(items: Iterable[Item]) -> list[Reference]:
    """Convert CSL items to CFF references, preserving order."""
    references = [convert_item(item) for item in items]
    logger.debug("Converted %d CSL items to CFF references", len(references))
    return references


def merge_references(cff: Cff, references: Iterable[Reference], mode: MergeMode) -> Cff:
    """Return a copy of ``cff`` with ``references`` appended or substituted.

    Parameters
    ----------
    cff : Cff
        Target document.
    references : Iterable[Reference]
        Converted references.
    mode : MergeMode
        INSERT appends after the existing references; REPLACE discards them.

    Returns
    -------
    Cff
        Updated document; ``cff`` itself is unchanged.
    """
    new = tuple(references)
    if mode is MergeMode.INSERT:
        return replace(cff, references=cff.references + new)
    return replace(cff, references=new)
