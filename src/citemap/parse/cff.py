"""Format A (Citation File Format) decoder.

A CITATION.cff file is a single YAML mapping. Decoding is all-or-nothing:
the first failing field raises and no partial record is returned.
"""

import logging
from typing import Any

from citemap.codec.records import decode_record
from citemap.fields.cff import CFF_FIELDS, REFERENCE_FIELDS
from citemap.models.cff import Cff, Reference
from citemap.parse.base import load_yaml_document

logger = logging.getLogger(__name__)

__all__ = ["decode_cff", "decode_reference", "parse_cff_text"]


def decode_reference(node: Any, path: str = "") -> Reference:
    """Decode a single reference mapping (``references[i]`` or ``preferred-citation``)."""
    return decode_record(node, path, Reference, REFERENCE_FIELDS)


def decode_cff(node: Any) -> Cff:
    """Decode a CITATION.cff document tree.

    Parameters
    ----------
    node : Any
        Raw document tree from the YAML loader.

    Returns
    -------
    Cff
        Decoded document.

    Raises
    ------
    CodecError
        Any subclass, carrying the failing field's path.
    """
    cff = decode_record(node, "", Cff, CFF_FIELDS)
    logger.debug(
        "Decoded CFF %s: %d authors, %d references, %d unknown keys",
        cff.cff_version,
        len(cff.authors),
        len(cff.references),
        len(cff.extra),
    )
    return cff


def parse_cff_text(text: str) -> Cff:
    """Load YAML text and decode it as a CITATION.cff document."""
    return decode_cff(load_yaml_document(text))
