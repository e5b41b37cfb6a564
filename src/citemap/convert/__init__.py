"""CSL-JSON to CFF conversion."""

from citemap.convert.csl_to_cff import (
    MergeMode,
    convert_authors,
    convert_date,
    convert_item,
    convert_items,
    convert_name,
    merge_references,
    split_pages,
)
from citemap.convert.type_map import ITEM_TO_REF_TYPE, convert_type

__all__ = [
    "ITEM_TO_REF_TYPE",
    "MergeMode",
    "convert_type",
    "convert_name",
    "convert_authors",
    "convert_date",
    "split_pages",
    "convert_item",
    "convert_items",
    "merge_references",
]
