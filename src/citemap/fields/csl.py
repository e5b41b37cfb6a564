"""Field tables for Format B (CSL-JSON) items."""

from citemap.codec.records import (
    CSL_DATE,
    CSL_NAME,
    ORDINARY,
    STR,
    FieldSpec,
    enum_of,
    list_of,
)
from citemap.models.csl import ItemType

__all__ = ["ITEM_FIELDS", "NAME_VARIABLES", "DATE_VARIABLES", "ORDINARY_VARIABLES"]

# CSL variable name -> Item attribute
NAME_VARIABLES: dict[str, str] = {
    "author": "author",
    "contributor": "contributor",
    "editor": "editor",
    "translator": "translator",
    "container-author": "container_author",
    "collection-editor": "collection_editor",
    "recipient": "recipient",
    "interviewer": "interviewer",
}

DATE_VARIABLES: dict[str, str] = {
    "issued": "issued",
    "updated": "updated",
    "published": "published",
    "accessed": "accessed",
    "original-date": "original_date",
    "event-date": "event_date",
    "submitted": "submitted",
    "available-date": "available_date",
}

ORDINARY_VARIABLES: dict[str, str] = {
    "title": "title",
    "title-short": "title_short",
    "abstract": "abstract",
    "container-title": "container_title",
    "container-title-short": "container_title_short",
    "journalAbbreviation": "journal_abbreviation",
    "collection-title": "collection_title",
    "collection-number": "collection_number",
    "publisher": "publisher",
    "publisher-place": "publisher_place",
    "edition": "edition",
    "volume": "volume",
    "issue": "issue",
    "number": "number",
    "page": "page",
    "number-of-pages": "number_of_pages",
    "DOI": "doi",
    "ISBN": "isbn",
    "ISSN": "issn",
    "PMID": "pmid",
    "PMCID": "pmcid",
    "URL": "url",
    "language": "language",
    "note": "note",
    "source": "source",
    "version": "version",
    "genre": "genre",
    "medium": "medium",
    "rights": "rights",
    "license": "license",
    "keyword": "keyword",
}

ITEM_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("id", "id", STR, required=True),
    FieldSpec("type", "item_type", enum_of(ItemType), required=True),
    *(FieldSpec(key, attr, list_of(CSL_NAME)) for key, attr in NAME_VARIABLES.items()),
    *(FieldSpec(key, attr, CSL_DATE) for key, attr in DATE_VARIABLES.items()),
    *(FieldSpec(key, attr, ORDINARY) for key, attr in ORDINARY_VARIABLES.items()),
)
