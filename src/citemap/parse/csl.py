"""Format B (CSL-JSON) decoder.

A CSL-JSON document is an array of item records.
"""

import logging
from typing import Any

from citemap.codec._shapes import expect_sequence
from citemap.codec.records import decode_record
from citemap.errors import join_path
from citemap.fields.csl import ITEM_FIELDS
from citemap.models.csl import Item
from citemap.parse.base import load_json_document

logger = logging.getLogger(__name__)

__all__ = ["decode_item", "decode_items", "parse_csl_text"]


def decode_item(node: Any, path: str = "") -> Item:
    """Decode one CSL item; ``id`` and ``type`` are required."""
    return decode_record(node, path, Item, ITEM_FIELDS)


def decode_items(node: Any) -> list[Item]:
    """Decode a CSL-JSON document tree.

    Parameters
    ----------
    node : Any
        Raw document tree from the JSON loader; must be a sequence.

    Returns
    -------
    list[Item]
        Items in document order.

    Raises
    ------
    CodecError
        Any subclass, carrying the failing item's path (e.g. ``[2].issued``).
    """
    elements = expect_sequence(node, "")
    items = [decode_item(element, join_path("", i)) for i, element in enumerate(elements)]
    logger.debug("Decoded %d CSL items", len(items))
    return items


def parse_csl_text(text: str) -> list[Item]:
    """Load JSON text and decode it as a CSL-JSON document."""
    return decode_items(load_json_document(text))
