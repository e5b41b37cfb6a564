"""Document decoding for both citation formats.

Main entry points:
- parse_cff_text: Decode a CITATION.cff (YAML) document
- parse_csl_text: Decode a CSL-JSON document
"""

from citemap.parse.cff import decode_cff, decode_reference, parse_cff_text
from citemap.parse.csl import decode_item, decode_items, parse_csl_text

__all__ = [
    "decode_cff",
    "decode_reference",
    "parse_cff_text",
    "decode_item",
    "decode_items",
    "parse_csl_text",
]
