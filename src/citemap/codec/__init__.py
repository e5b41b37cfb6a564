"""Codecs for fields whose variant is not tagged in the document.

Each codec is a pair of plain functions, independent of the record walker:
- Names → resolve_name / encode_name, decode_csl_name / encode_csl_name
- Dates → decode_date / encode_date, decode_calendar_date / encode_calendar_date
- Licenses → decode_license / encode_license
- Ordinary values → decode_ordinary / encode_ordinary
- Identifiers → decode_identifier / encode_identifier

Record assembly over field tables lives in citemap.codec.records.
"""

from citemap.codec.dates import (
    decode_calendar_date,
    decode_date,
    decode_date_parts,
    encode_calendar_date,
    encode_date,
)
from citemap.codec.identifiers import decode_identifier, encode_identifier
from citemap.codec.license import decode_license, encode_license
from citemap.codec.names import decode_csl_name, encode_csl_name, encode_name, resolve_name
from citemap.codec.ordinaries import decode_ordinary, encode_ordinary

__all__ = [
    "resolve_name",
    "encode_name",
    "decode_csl_name",
    "encode_csl_name",
    "decode_date",
    "encode_date",
    "decode_date_parts",
    "decode_calendar_date",
    "encode_calendar_date",
    "decode_license",
    "encode_license",
    "decode_ordinary",
    "encode_ordinary",
    "decode_identifier",
    "encode_identifier",
]
