"""Name types for authors, editors, contacts and other agents.

Format A distinguishes three kinds of name purely by key presence: a person
(no ``name`` key), an entity (any ``name``), and the anonymous author
(``name: anonymous``). Format B names are a single flat record.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from citemap.models._extra import freeze_extra
from citemap.models.dates import CalendarDate

__all__ = [
    "ANONYMOUS_NAME",
    "NameMeta",
    "Person",
    "Entity",
    "Anonymous",
    "Name",
    "CslName",
]

ANONYMOUS_NAME = "anonymous"


@dataclass(frozen=True)
class NameMeta:
    """Contact and address attributes shared by persons and entities.

    Attributes
    ----------
    orcid : str | None
        ORCID URL.
    address : str | None
        Physical or postal address.
    alias : str | None
        Alias or pseudonym.
    city : str | None
        City.
    country : str | None
        Country code.
    email : str | None
        Email address.
    post_code : str | None
        Post code.
    region : str | None
        Region.
    tel : str | None
        Telephone number.
    fax : str | None
        Fax number.
    website : str | None
        Website URL.
    """

    orcid: str | None = None
    address: str | None = None
    alias: str | None = None
    city: str | None = None
    country: str | None = None
    email: str | None = None
    post_code: str | None = None
    region: str | None = None
    tel: str | None = None
    fax: str | None = None
    website: str | None = None


@dataclass(frozen=True)
class Person:
    """A human person.

    Attributes
    ----------
    family_names : str | None
        Family names, including particles that sit between family names.
    given_names : str | None
        Given or chosen names.
    name_particle : str | None
        Nobiliary particle or preposition, e.g. ``von``.
    name_suffix : str | None
        Suffix, e.g. ``Jr.`` or ``III``.
    affiliation : str | None
        Organisation membership.
    meta : NameMeta
        Shared contact attributes.
    extra : Mapping[str, Any]
        Keys outside the known schema, in document order.
    """

    family_names: str | None = None
    given_names: str | None = None
    name_particle: str | None = None
    name_suffix: str | None = None
    affiliation: str | None = None
    meta: NameMeta = field(default_factory=NameMeta)
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        freeze_extra(self)


@dataclass(frozen=True)
class Entity:
    """An organisation, institution, conference, or other non-person agent.

    Attributes
    ----------
    name : str
        Entity name. Never ``"anonymous"`` for a decoded entity.
    date_start : CalendarDate | None
        Starting date, e.g. of a conference.
    date_end : CalendarDate | None
        Ending date.
    meta : NameMeta
        Shared contact attributes.
    extra : Mapping[str, Any]
        Keys outside the known schema, in document order.
    """

    name: str
    date_start: CalendarDate | None = None
    date_end: CalendarDate | None = None
    meta: NameMeta = field(default_factory=NameMeta)
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        freeze_extra(self)


@dataclass(frozen=True)
class Anonymous:
    """The anonymous author, written ``- name: anonymous``."""


Name = Person | Entity | Anonymous


@dataclass(frozen=True)
class CslName:
    """A CSL name record.

    Should have at least ``family`` (for persons) or ``literal`` (for
    institutions).

    Attributes
    ----------
    family : str | None
        Inherited family name.
    given : str | None
        Given or chosen name.
    dropping_particle : str | None
        Particle before the given name, e.g. ``Rev.``.
    non_dropping_particle : str | None
        Particle before the family name, e.g. ``de las``.
    suffix : str | None
        Elements after the family name, e.g. ``Jr., Ph.D.``.
    literal : str | None
        Whole name of an institution or person.
    extra : Mapping[str, Any]
        Keys outside the known schema, in document order.
    """

    family: str | None = None
    given: str | None = None
    dropping_particle: str | None = None
    non_dropping_particle: str | None = None
    suffix: str | None = None
    literal: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        freeze_extra(self)
