"""Format B (CSL-JSON) writer."""

import json
from pathlib import Path
from typing import Any

from citemap.codec.records import encode_record
from citemap.config import WriterConfig
from citemap.fields.csl import ITEM_FIELDS
from citemap.models.csl import Item

__all__ = ["encode_item", "encode_items", "format_csl", "write_csl_file"]


def encode_item(item: Item) -> dict[str, Any]:
    """Encode one CSL item to its document mapping."""
    return encode_record(item, ITEM_FIELDS)


def encode_items(items: list[Item]) -> list[dict[str, Any]]:
    """Encode items to a CSL-JSON document tree."""
    return [encode_item(item) for item in items]


def format_csl(items: list[Item], config: WriterConfig | None = None) -> str:
    """Format items as CSL-JSON text.

    Parameters
    ----------
    items : list[Item]
        Items to format.
    config : WriterConfig | None, optional
        Formatting options, by default ``WriterConfig()``.

    Returns
    -------
    str
        JSON array text, newline-terminated.
    """
    config = config or WriterConfig()
    text = json.dumps(
        encode_items(items),
        indent=config.json_indent,
        ensure_ascii=config.ensure_ascii,
    )
    return text + "\n"


def write_csl_file(items: list[Item], output_path: Path, config: WriterConfig | None = None) -> None:
    """Write items as a CSL-JSON file, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(format_csl(items, config))
