"""Immutable value types for both citation formats.

Format-specific records:
- Format A (CFF) → citemap.models.cff
- Format B (CSL-JSON) → citemap.models.csl

Shared and ambiguous value types (names, dates, licenses, identifiers,
ordinary values) live in their own modules.
"""

from citemap.models.cff import Cff, PublicationStatus, Reference, RefType, WorkType
from citemap.models.csl import Item, ItemType
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
from citemap.models.identifiers import Identifier, IdentifierKind
from citemap.models.license import AnyOfLicense, License, SingleLicense, SpdxExpression
from citemap.models.names import Anonymous, CslName, Entity, Name, NameMeta, Person
from citemap.models.ordinaries import OrdinaryKind, OrdinaryValue

__all__ = [
    # Format A
    "Cff",
    "Reference",
    "RefType",
    "WorkType",
    "PublicationStatus",
    # Format B
    "Item",
    "ItemType",
    # Names
    "Name",
    "Person",
    "Entity",
    "Anonymous",
    "NameMeta",
    "CslName",
    # Dates
    "CalendarDate",
    "DateParts",
    "DateValue",
    "SingleDate",
    "DateRange",
    "RawDate",
    "EdtfDate",
    "DateMeta",
    "Season",
    "Circa",
    "CircaKind",
    # Scalars
    "OrdinaryValue",
    "OrdinaryKind",
    "License",
    "SingleLicense",
    "AnyOfLicense",
    "SpdxExpression",
    "Identifier",
    "IdentifierKind",
]
