"""Typed identifiers for works (DOI, URL, Software Heritage, other)."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from citemap.models._extra import freeze_extra

__all__ = ["IdentifierKind", "Identifier"]


class IdentifierKind(Enum):
    """The ``type`` tag of a CFF identifier."""

    DOI = "doi"
    URL = "url"
    SWH = "swh"
    OTHER = "other"


@dataclass(frozen=True)
class Identifier:
    """An explicitly tagged identifier.

    The value is carried opaquely; DOIs, SWHIDs and URLs are not validated.

    Attributes
    ----------
    kind : IdentifierKind
        Identifier type.
    value : str
        Identifier value, e.g. ``10.5281/zenodo.1003149``.
    description : str | None
        Optional free-text description.
    extra : Mapping[str, Any]
        Keys outside the known schema, in document order.
    """

    kind: IdentifierKind
    value: str
    description: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        freeze_extra(self)
