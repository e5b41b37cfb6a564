"""Document encoding for both citation formats."""

from citemap.write.cff_writer import (
    dump_yaml,
    encode_cff,
    encode_reference,
    format_cff,
    format_references,
    write_cff_file,
)
from citemap.write.csl_writer import encode_item, encode_items, format_csl, write_csl_file

__all__ = [
    "encode_cff",
    "encode_reference",
    "dump_yaml",
    "format_cff",
    "format_references",
    "write_cff_file",
    "encode_item",
    "encode_items",
    "format_csl",
    "write_csl_file",
]
