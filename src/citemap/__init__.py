"""Round-trip-faithful codecs for citation metadata.

This package provides:
- Data models (citemap.models): immutable value types for both formats
- Codecs (citemap.codec): names, dates, licenses, identifiers, ordinary values
- Field tables (citemap.fields): known keys per record type
- Parsing (citemap.parse): CITATION.cff and CSL-JSON decoding
- Writing (citemap.write): CITATION.cff and CSL-JSON encoding
- Conversion (citemap.convert): CSL-JSON items to CFF references
- CLI (citemap.cli): command-line interface
- Public API (citemap.api): high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from citemap.api import (
    csl_to_cff_references,
    dump_cff,
    dump_csl,
    load_cff,
    load_csl,
    read_cff,
    read_csl,
    write_cff,
    write_csl,
)
from citemap.config import WriterConfig
from citemap.errors import (
    CodecError,
    DocumentSyntaxError,
    GrammarError,
    InternalInconsistencyError,
    RangeViolationError,
    ShapeMismatchError,
    TypeMismatchError,
)
from citemap.models import Cff, Item, Reference

__all__ = [
    "__version__",
    "__license__",
    "Cff",
    "Reference",
    "Item",
    "WriterConfig",
    "load_cff",
    "dump_cff",
    "read_cff",
    "write_cff",
    "load_csl",
    "dump_csl",
    "read_csl",
    "write_csl",
    "csl_to_cff_references",
    "CodecError",
    "ShapeMismatchError",
    "RangeViolationError",
    "GrammarError",
    "TypeMismatchError",
    "InternalInconsistencyError",
    "DocumentSyntaxError",
]
