"""Field tables for Format A (CFF) records.

Table order is the order fields are written in. Adding a field requires
only a new entry here and a matching dataclass attribute.
"""

from citemap.codec.records import (
    CALENDAR_DATE,
    IDENTIFIER,
    INT,
    LICENSE,
    NAME,
    NON_EMPTY_STR,
    ORDINARY,
    SEMVER,
    STR,
    FieldSpec,
    enum_of,
    list_of,
    record_of,
)
from citemap.models.cff import PublicationStatus, Reference, RefType, WorkType

__all__ = ["REFERENCE_FIELDS", "CFF_FIELDS"]

NAMES = list_of(NAME)
STRS = list_of(STR)

REFERENCE_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("type", "work_type", enum_of(RefType), required=True),
    FieldSpec("authors", "authors", list_of(NAME, non_empty=True), required=True),
    FieldSpec("abbreviation", "abbreviation", STR),
    FieldSpec("abstract", "abstract", STR),
    FieldSpec("collection-doi", "collection_doi", STR),
    FieldSpec("collection-title", "collection_title", STR),
    FieldSpec("collection-type", "collection_type", STR),
    FieldSpec("commit", "commit", STR),
    FieldSpec("conference", "conference", NAME),
    FieldSpec("contact", "contact", NAMES),
    FieldSpec("copyright", "copyright", STR),
    FieldSpec("data-type", "data_type", STR),
    FieldSpec("database-provider", "database_provider", NAME),
    FieldSpec("database", "database", STR),
    FieldSpec("date-accessed", "date_accessed", CALENDAR_DATE),
    FieldSpec("date-downloaded", "date_downloaded", CALENDAR_DATE),
    FieldSpec("date-published", "date_published", CALENDAR_DATE),
    FieldSpec("date-released", "date_released", CALENDAR_DATE),
    FieldSpec("department", "department", STR),
    FieldSpec("doi", "doi", STR),
    FieldSpec("edition", "edition", STR),
    FieldSpec("editors", "editors", NAMES),
    FieldSpec("editors-series", "editors_series", NAMES),
    FieldSpec("start", "start", ORDINARY),
    FieldSpec("end", "end", ORDINARY),
    FieldSpec("entry", "entry", STR),
    FieldSpec("filename", "filename", STR),
    FieldSpec("format", "format", STR),
    FieldSpec("identifiers", "identifiers", list_of(IDENTIFIER)),
    FieldSpec("institution", "institution", NAME),
    FieldSpec("isbn", "isbn", STR),
    FieldSpec("issn", "issn", STR),
    FieldSpec("issue", "issue", ORDINARY),
    FieldSpec("issue-date", "issue_date", STR),
    FieldSpec("issue-title", "issue_title", STR),
    FieldSpec("journal", "journal", STR),
    FieldSpec("keywords", "keywords", STRS),
    FieldSpec("languages", "languages", STRS),
    FieldSpec("license", "license", LICENSE),
    FieldSpec("license-url", "license_url", STR),
    FieldSpec("loc-end", "loc_end", ORDINARY),
    FieldSpec("loc-start", "loc_start", ORDINARY),
    FieldSpec("location", "location", NAME),
    FieldSpec("medium", "medium", STR),
    FieldSpec("month", "month", ORDINARY),
    FieldSpec("nihmsid", "nihmsid", STR),
    FieldSpec("notes", "notes", STR),
    FieldSpec("number", "number", ORDINARY),
    FieldSpec("number-volumes", "number_volumes", ORDINARY),
    FieldSpec("pages", "pages", ORDINARY),
    FieldSpec("patent-states", "patent_states", STRS),
    FieldSpec("pmcid", "pmcid", STR),
    FieldSpec("publisher", "publisher", NAME),
    FieldSpec("recipients", "recipients", NAMES),
    FieldSpec("repository", "repository", STR),
    FieldSpec("repository-artifact", "repository_artifact", STR),
    FieldSpec("repository-code", "repository_code", STR),
    FieldSpec("scope", "scope", STR),
    FieldSpec("section", "section", ORDINARY),
    FieldSpec("senders", "senders", NAMES),
    FieldSpec("status", "status", enum_of(PublicationStatus)),
    FieldSpec("term", "term", STR),
    FieldSpec("thesis-type", "thesis_type", STR),
    FieldSpec("title", "title", STR),
    FieldSpec("translators", "translators", NAMES),
    FieldSpec("url", "url", STR),
    FieldSpec("version", "version", ORDINARY),
    FieldSpec("volume", "volume", ORDINARY),
    FieldSpec("volume-title", "volume_title", STR),
    FieldSpec("year", "year", INT),
    FieldSpec("year-original", "year_original", INT),
)

CFF_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("cff-version", "cff_version", SEMVER, required=True),
    FieldSpec("message", "message", NON_EMPTY_STR, required=True),
    FieldSpec("title", "title", NON_EMPTY_STR, required=True),
    FieldSpec("type", "work_type", enum_of(WorkType)),
    FieldSpec("version", "version", ORDINARY),
    FieldSpec("commit", "commit", STR),
    FieldSpec("date-released", "date_released", CALENDAR_DATE),
    FieldSpec("abstract", "abstract", STR),
    FieldSpec("keywords", "keywords", STRS),
    FieldSpec("repository", "repository", STR),
    FieldSpec("repository-artifact", "repository_artifact", STR),
    FieldSpec("repository-code", "repository_code", STR),
    FieldSpec("license", "license", LICENSE),
    FieldSpec("license-url", "license_url", STR),
    FieldSpec("url", "url", STR),
    FieldSpec("authors", "authors", list_of(NAME, non_empty=True), required=True),
    FieldSpec("contact", "contact", NAMES),
    FieldSpec("doi", "doi", STR),
    FieldSpec("identifiers", "identifiers", list_of(IDENTIFIER)),
    FieldSpec("preferred-citation", "preferred_citation", record_of(Reference, REFERENCE_FIELDS)),
    FieldSpec("references", "references", list_of(record_of(Reference, REFERENCE_FIELDS))),
)
