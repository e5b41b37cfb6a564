"""Format A (Citation File Format) writer."""

from pathlib import Path
from typing import Any

import yaml

from citemap.codec.records import encode_record
from citemap.config import WriterConfig
from citemap.fields.cff import CFF_FIELDS, REFERENCE_FIELDS
from citemap.models.cff import Cff, Reference
from citemap.parse.base import CffDumper

__all__ = [
    "encode_cff",
    "encode_reference",
    "dump_yaml",
    "format_cff",
    "format_references",
    "write_cff_file",
]


def encode_reference(reference: Reference) -> dict[str, Any]:
    """Encode a reference to its document mapping."""
    return encode_record(reference, REFERENCE_FIELDS)


def encode_cff(cff: Cff) -> dict[str, Any]:
    """Encode a CITATION.cff document to its document tree.

    Known fields are emitted in schema order, omitting empty ones, followed
    by the unknown keys in the order they were decoded.
    """
    return encode_record(cff, CFF_FIELDS)


def dump_yaml(tree: Any, config: WriterConfig | None = None) -> str:
    """Serialize a document tree as YAML, preserving mapping order.

    Parameters
    ----------
    tree : Any
        Document tree of mappings, sequences and scalars.
    config : WriterConfig | None, optional
        Formatting options, by default ``WriterConfig()``.

    Returns
    -------
    str
        YAML text.
    """
    config = config or WriterConfig()
    return yaml.dump(
        tree,
        Dumper=CffDumper,
        sort_keys=False,
        allow_unicode=not config.ensure_ascii,
        indent=config.yaml_indent,
        width=config.yaml_width,
        default_flow_style=False,
    )


def format_cff(cff: Cff, config: WriterConfig | None = None) -> str:
    """Format a CITATION.cff document as YAML text."""
    return dump_yaml(encode_cff(cff), config)


def format_references(references: list[Reference], config: WriterConfig | None = None) -> str:
    """Format references as a bare YAML sequence."""
    return dump_yaml([encode_reference(r) for r in references], config)


def write_cff_file(cff: Cff, output_path: Path, config: WriterConfig | None = None) -> None:
    """Write a CITATION.cff document.

    Parameters
    ----------
    cff : Cff
        Document to write.
    output_path : Path
        Output file path; parent directories are created.
    config : WriterConfig | None, optional
        Formatting options.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(format_cff(cff, config))
