"""Format B (CSL-JSON) items."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from citemap.models._extra import freeze_extra
from citemap.models.dates import DateValue
from citemap.models.names import CslName
from citemap.models.ordinaries import OrdinaryValue

__all__ = ["ItemType", "Item"]


class ItemType(Enum):
    """Type of the bibliographic resource, including the CSL-M additions."""

    ARTICLE = "article"
    ARTICLE_JOURNAL = "article-journal"
    ARTICLE_MAGAZINE = "article-magazine"
    ARTICLE_NEWSPAPER = "article-newspaper"
    BILL = "bill"
    BOOK = "book"
    BROADCAST = "broadcast"
    CHAPTER = "chapter"
    CLASSIC = "classic"
    COLLECTION = "collection"
    DATASET = "dataset"
    DOCUMENT = "document"
    ENTRY = "entry"
    ENTRY_DICTIONARY = "entry-dictionary"
    ENTRY_ENCYCLOPEDIA = "entry-encyclopedia"
    EVENT = "event"
    FIGURE = "figure"
    GRAPHIC = "graphic"
    HEARING = "hearing"
    INTERVIEW = "interview"
    LEGAL_CASE = "legal_case"
    LEGISLATION = "legislation"
    MANUSCRIPT = "manuscript"
    MAP = "map"
    MOTION_PICTURE = "motion_picture"
    MUSICAL_SCORE = "musical_score"
    PAMPHLET = "pamphlet"
    PAPER_CONFERENCE = "paper-conference"
    PATENT = "patent"
    PERFORMANCE = "performance"
    PERIODICAL = "periodical"
    PERSONAL_COMMUNICATION = "personal_communication"
    POST = "post"
    POST_WEBLOG = "post-weblog"
    REGULATION = "regulation"
    REPORT = "report"
    REVIEW = "review"
    REVIEW_BOOK = "review-book"
    SOFTWARE = "software"
    SONG = "song"
    SPEECH = "speech"
    STANDARD = "standard"
    THESIS = "thesis"
    TREATY = "treaty"
    WEBPAGE = "webpage"

    # CSL-M
    GAZETTE = "gazette"
    VIDEO = "video"
    LEGAL_COMMENTARY = "legal_commentary"


@dataclass(frozen=True)
class Item:
    """A single bibliographic resource in a CSL-JSON array.

    Fields are grouped by CSL variable kind: name lists, dates, and ordinary
    (string-or-number) variables. Anything else is kept in ``extra``.

    Attributes
    ----------
    id : str
        Item ID, unique within the document.
    item_type : ItemType
        Resource type (document key ``type``).
    extra : Mapping[str, Any]
        Keys outside the known schema, in document order.
    """

    id: str
    item_type: ItemType

    # Names
    author: tuple[CslName, ...] = ()
    contributor: tuple[CslName, ...] = ()
    editor: tuple[CslName, ...] = ()
    translator: tuple[CslName, ...] = ()
    container_author: tuple[CslName, ...] = ()
    collection_editor: tuple[CslName, ...] = ()
    recipient: tuple[CslName, ...] = ()
    interviewer: tuple[CslName, ...] = ()

    # Dates
    issued: DateValue | None = None
    updated: DateValue | None = None
    published: DateValue | None = None
    accessed: DateValue | None = None
    original_date: DateValue | None = None
    event_date: DateValue | None = None
    submitted: DateValue | None = None
    available_date: DateValue | None = None

    # Ordinary variables
    title: OrdinaryValue | None = None
    title_short: OrdinaryValue | None = None
    abstract: OrdinaryValue | None = None
    container_title: OrdinaryValue | None = None
    container_title_short: OrdinaryValue | None = None
    journal_abbreviation: OrdinaryValue | None = None
    collection_title: OrdinaryValue | None = None
    collection_number: OrdinaryValue | None = None
    publisher: OrdinaryValue | None = None
    publisher_place: OrdinaryValue | None = None
    edition: OrdinaryValue | None = None
    volume: OrdinaryValue | None = None
    issue: OrdinaryValue | None = None
    number: OrdinaryValue | None = None
    page: OrdinaryValue | None = None
    number_of_pages: OrdinaryValue | None = None
    doi: OrdinaryValue | None = None
    isbn: OrdinaryValue | None = None
    issn: OrdinaryValue | None = None
    pmid: OrdinaryValue | None = None
    pmcid: OrdinaryValue | None = None
    url: OrdinaryValue | None = None
    language: OrdinaryValue | None = None
    note: OrdinaryValue | None = None
    source: OrdinaryValue | None = None
    version: OrdinaryValue | None = None
    genre: OrdinaryValue | None = None
    medium: OrdinaryValue | None = None
    rights: OrdinaryValue | None = None
    license: OrdinaryValue | None = None
    keyword: OrdinaryValue | None = None

    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        freeze_extra(self)
