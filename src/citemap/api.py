"""Public API for reading and writing citation documents.

This module provides the main public API for citemap, enabling:
- Loading and dumping CITATION.cff documents (YAML)
- Loading and dumping CSL-JSON documents
- Converting CSL-JSON items into CFF references
"""

from pathlib import Path

from citemap.config import WriterConfig
from citemap.convert import convert_items
from citemap.models.cff import Cff, Reference
from citemap.models.csl import Item
from citemap.parse.base import read_document_text
from citemap.parse.cff import parse_cff_text
from citemap.parse.csl import parse_csl_text
from citemap.write.cff_writer import format_cff, write_cff_file
from citemap.write.csl_writer import format_csl, write_csl_file

__all__ = [
    "load_cff",
    "dump_cff",
    "read_cff",
    "write_cff",
    "load_csl",
    "dump_csl",
    "read_csl",
    "write_csl",
    "csl_to_cff_references",
]


def _existing_file(path: str | Path) -> Path:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return file_path


# ---------------------------------------------------------------------------
# Format A
# ---------------------------------------------------------------------------


def load_cff(text: str) -> Cff:
    """Decode CITATION.cff text.

    Parameters
    ----------
    text : str
        YAML document text.

    Returns
    -------
    Cff
        Decoded document.

    Raises
    ------
    DocumentSyntaxError
        If the text is not YAML.
    CodecError
        If the document does not decode; the error names the field path.

    Examples
    --------
        >>> from citemap import load_cff
        >>> cff = load_cff(open("CITATION.cff").read())
        >>> print(cff.title)
    """
    return parse_cff_text(text)


def dump_cff(cff: Cff, config: WriterConfig | None = None) -> str:
    """Encode a document as CITATION.cff text."""
    return format_cff(cff, config)


def read_cff(path: str | Path) -> Cff:
    """Read and decode a CITATION.cff file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    return load_cff(read_document_text(_existing_file(path)))


def write_cff(cff: Cff, path: str | Path, config: WriterConfig | None = None) -> None:
    """Encode and write a CITATION.cff file."""
    write_cff_file(cff, Path(path), config)


# ---------------------------------------------------------------------------
# Format B
# ---------------------------------------------------------------------------


def load_csl(text: str) -> list[Item]:
    """Decode CSL-JSON text into items, in document order.

    Raises
    ------
    DocumentSyntaxError
        If the text is not JSON.
    CodecError
        If any item does not decode; the error path starts with its index.
    """
    return parse_csl_text(text)


def dump_csl(items: list[Item], config: WriterConfig | None = None) -> str:
    """Encode items as CSL-JSON text."""
    return format_csl(items, config)


def read_csl(path: str | Path) -> list[Item]:
    """Read and decode a CSL-JSON file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    return load_csl(read_document_text(_existing_file(path)))


def write_csl(items: list[Item], path: str | Path, config: WriterConfig | None = None) -> None:
    """Encode and write a CSL-JSON file."""
    write_csl_file(items, Path(path), config)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def csl_to_cff_references(items: list[Item]) -> list[Reference]:
    """Convert CSL items to CFF references.

    Lossy conversions (unconvertible names and dates) are logged as
    warnings on the ``citemap.convert`` loggers rather than raised.

    Examples
    --------
        >>> from citemap import read_csl, csl_to_cff_references
        >>> refs = csl_to_cff_references(read_csl("library.json"))
    """
    return convert_items(items)
