"""Format A (Citation File Format) records."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from citemap.models._extra import freeze_extra
from citemap.models.dates import CalendarDate
from citemap.models.identifiers import Identifier
from citemap.models.license import License
from citemap.models.names import Name
from citemap.models.ordinaries import OrdinaryValue

__all__ = ["WorkType", "RefType", "PublicationStatus", "Reference", "Cff"]


class WorkType(Enum):
    """Type of the work described by a CITATION.cff file."""

    SOFTWARE = "software"
    DATASET = "dataset"


class RefType(Enum):
    """Type of a referenced work."""

    ART = "art"
    ARTICLE = "article"
    AUDIOVISUAL = "audiovisual"
    BILL = "bill"
    BLOG = "blog"
    BOOK = "book"
    CATALOGUE = "catalogue"
    CONFERENCE = "conference"
    CONFERENCE_PAPER = "conference-paper"
    DATA = "data"
    DATABASE = "database"
    DICTIONARY = "dictionary"
    EDITED_WORK = "edited-work"
    ENCYCLOPEDIA = "encyclopedia"
    FILM_BROADCAST = "film-broadcast"
    GENERIC = "generic"
    GOVERNMENT_DOCUMENT = "government-document"
    GRANT = "grant"
    HEARING = "hearing"
    HISTORICAL_WORK = "historical-work"
    LEGAL_CASE = "legal-case"
    LEGAL_RULE = "legal-rule"
    MAGAZINE_ARTICLE = "magazine-article"
    MANUAL = "manual"
    MAP = "map"
    MULTIMEDIA = "multimedia"
    MUSIC = "music"
    NEWSPAPER_ARTICLE = "newspaper-article"
    PAMPHLET = "pamphlet"
    PATENT = "patent"
    PERSONAL_COMMUNICATION = "personal-communication"
    PROCEEDINGS = "proceedings"
    REPORT = "report"
    SERIAL = "serial"
    SLIDES = "slides"
    SOFTWARE = "software"
    SOFTWARE_CODE = "software-code"
    SOFTWARE_CONTAINER = "software-container"
    SOFTWARE_EXECUTABLE = "software-executable"
    SOFTWARE_VIRTUAL_MACHINE = "software-virtual-machine"
    SOUND_RECORDING = "sound-recording"
    STANDARD = "standard"
    STATUTE = "statute"
    THESIS = "thesis"
    UNPUBLISHED = "unpublished"
    VIDEO = "video"
    WEBSITE = "website"


class PublicationStatus(Enum):
    """Publication status of a referenced work."""

    ABSTRACT = "abstract"
    ADVANCE_ONLINE = "advance-online"
    IN_PREPARATION = "in-preparation"
    IN_PRESS = "in-press"
    PREPRINT = "preprint"
    SUBMITTED = "submitted"


@dataclass(frozen=True)
class Reference:
    """A reference to another work, in ``references`` or ``preferred-citation``.

    Only ``work_type`` and ``authors`` are required. Scalar fields whose
    document value may be numeric or textual (``volume``, ``pages`` ...) are
    kept as OrdinaryValue so their written form survives a round trip.

    Attributes
    ----------
    work_type : RefType
        Reference type (document key ``type``).
    authors : tuple[Name, ...]
        Authors, non-empty.
    extra : Mapping[str, Any]
        Keys outside the known schema, in document order.
    """

    work_type: RefType
    authors: tuple[Name, ...]
    abbreviation: str | None = None
    abstract: str | None = None
    collection_doi: str | None = None
    collection_title: str | None = None
    collection_type: str | None = None
    commit: str | None = None
    conference: Name | None = None
    contact: tuple[Name, ...] = ()
    copyright: str | None = None
    data_type: str | None = None
    database_provider: Name | None = None
    database: str | None = None
    date_accessed: CalendarDate | None = None
    date_downloaded: CalendarDate | None = None
    date_published: CalendarDate | None = None
    date_released: CalendarDate | None = None
    department: str | None = None
    doi: str | None = None
    edition: str | None = None
    editors: tuple[Name, ...] = ()
    editors_series: tuple[Name, ...] = ()
    start: OrdinaryValue | None = None
    end: OrdinaryValue | None = None
    entry: str | None = None
    filename: str | None = None
    format: str | None = None
    identifiers: tuple[Identifier, ...] = ()
    institution: Name | None = None
    isbn: str | None = None
    issn: str | None = None
    issue: OrdinaryValue | None = None
    issue_date: str | None = None
    issue_title: str | None = None
    journal: str | None = None
    keywords: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    license: License | None = None
    license_url: str | None = None
    loc_end: OrdinaryValue | None = None
    loc_start: OrdinaryValue | None = None
    location: Name | None = None
    medium: str | None = None
    month: OrdinaryValue | None = None
    nihmsid: str | None = None
    notes: str | None = None
    number: OrdinaryValue | None = None
    number_volumes: OrdinaryValue | None = None
    pages: OrdinaryValue | None = None
    patent_states: tuple[str, ...] = ()
    pmcid: str | None = None
    publisher: Name | None = None
    recipients: tuple[Name, ...] = ()
    repository: str | None = None
    repository_artifact: str | None = None
    repository_code: str | None = None
    scope: str | None = None
    section: OrdinaryValue | None = None
    senders: tuple[Name, ...] = ()
    status: PublicationStatus | None = None
    term: str | None = None
    thesis_type: str | None = None
    title: str | None = None
    translators: tuple[Name, ...] = ()
    url: str | None = None
    version: OrdinaryValue | None = None
    volume: OrdinaryValue | None = None
    volume_title: str | None = None
    year: int | None = None
    year_original: int | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        freeze_extra(self)


@dataclass(frozen=True)
class Cff:
    """Top-level CITATION.cff document.

    Attributes
    ----------
    cff_version : str
        Schema version, ``X.Y.Z``.
    message : str
        Instruction to users on how to cite the work.
    title : str
        Name of the work.
    authors : tuple[Name, ...]
        Authors, non-empty.
    work_type : WorkType | None
        ``software`` or ``dataset`` (document key ``type``).
    version : OrdinaryValue | None
        Version of the work.
    date_released : CalendarDate | None
        Release date.
    license : License | None
        SPDX license or list of licenses.
    preferred_citation : Reference | None
        Reference to cite instead of the work itself.
    references : tuple[Reference, ...]
        Works this work depends on or builds upon.
    extra : Mapping[str, Any]
        Keys outside the known schema, in document order.
    """

    cff_version: str
    message: str
    title: str
    authors: tuple[Name, ...]
    work_type: WorkType | None = None
    version: OrdinaryValue | None = None
    commit: str | None = None
    date_released: CalendarDate | None = None
    abstract: str | None = None
    keywords: tuple[str, ...] = ()
    repository: str | None = None
    repository_artifact: str | None = None
    repository_code: str | None = None
    license: License | None = None
    license_url: str | None = None
    url: str | None = None
    contact: tuple[Name, ...] = ()
    doi: str | None = None
    identifiers: tuple[Identifier, ...] = ()
    preferred_citation: Reference | None = None
    references: tuple[Reference, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        freeze_extra(self)
