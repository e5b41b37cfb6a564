"""CSL item type to CFF reference type lookup.

Item types with no close CFF counterpart map to ``generic``.
"""

from citemap.models.cff import RefType
from citemap.models.csl import ItemType

__all__ = ["ITEM_TO_REF_TYPE", "convert_type"]

ITEM_TO_REF_TYPE: dict[ItemType, RefType] = {
    ItemType.ARTICLE: RefType.ARTICLE,
    ItemType.ARTICLE_JOURNAL: RefType.ARTICLE,
    ItemType.ARTICLE_MAGAZINE: RefType.MAGAZINE_ARTICLE,
    ItemType.ARTICLE_NEWSPAPER: RefType.NEWSPAPER_ARTICLE,
    ItemType.BILL: RefType.BILL,
    ItemType.BOOK: RefType.BOOK,
    ItemType.CHAPTER: RefType.BOOK,
    ItemType.DATASET: RefType.DATA,
    ItemType.ENTRY_DICTIONARY: RefType.DICTIONARY,
    ItemType.ENTRY_ENCYCLOPEDIA: RefType.ENCYCLOPEDIA,
    ItemType.HEARING: RefType.HEARING,
    ItemType.LEGAL_CASE: RefType.LEGAL_CASE,
    ItemType.LEGISLATION: RefType.GOVERNMENT_DOCUMENT,
    ItemType.MAP: RefType.MAP,
    ItemType.MOTION_PICTURE: RefType.VIDEO,
    ItemType.MUSICAL_SCORE: RefType.MUSIC,
    ItemType.PAMPHLET: RefType.PAMPHLET,
    ItemType.PAPER_CONFERENCE: RefType.CONFERENCE_PAPER,
    ItemType.PATENT: RefType.PATENT,
    ItemType.PERSONAL_COMMUNICATION: RefType.PERSONAL_COMMUNICATION,
    ItemType.POST: RefType.BLOG,
    ItemType.POST_WEBLOG: RefType.BLOG,
    ItemType.REGULATION: RefType.STATUTE,
    ItemType.REPORT: RefType.REPORT,
    ItemType.SOFTWARE: RefType.SOFTWARE,
    ItemType.SONG: RefType.MUSIC,
    ItemType.SPEECH: RefType.SOUND_RECORDING,
    ItemType.STANDARD: RefType.STANDARD,
    ItemType.THESIS: RefType.THESIS,
    ItemType.TREATY: RefType.GOVERNMENT_DOCUMENT,
    ItemType.VIDEO: RefType.VIDEO,
    ItemType.WEBPAGE: RefType.WEBSITE,
}


def convert_type(item_type: ItemType) -> RefType:
    """Return the CFF reference type for a CSL item type."""
    return ITEM_TO_REF_TYPE.get(item_type, RefType.GENERIC)
