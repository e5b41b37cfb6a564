"""Document loading: bytes and text to raw document trees."""

import copy
import json
import re
from pathlib import Path
from typing import Any

import yaml

from citemap.errors import DocumentSyntaxError

__all__ = [
    "CffLoader",
    "CffDumper",
    "detect_encoding",
    "normalize_line_endings",
    "read_document_text",
    "load_yaml_document",
    "load_json_document",
]

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
BOOL_TAG = "tag:yaml.org,2002:bool"

# YAML 1.2 booleans only: ``NO`` (Norway) and ``on`` stay strings.
YAML12_BOOL_RE = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")


def _without_tag(resolvers: dict[str, list[tuple[str, Any]]], tag: str) -> dict:
    table = copy.deepcopy(resolvers)
    for first_char, entries in list(table.items()):
        table[first_char] = [entry for entry in entries if entry[0] != tag]
    return table


class CffLoader(yaml.SafeLoader):
    """Safe loader that leaves ``YYYY-MM-DD`` scalars as strings."""


class CffDumper(yaml.SafeDumper):
    """Safe dumper that writes date-like strings unquoted."""


CffLoader.yaml_implicit_resolvers = _without_tag(
    _without_tag(yaml.SafeLoader.yaml_implicit_resolvers, TIMESTAMP_TAG), BOOL_TAG
)
CffLoader.add_implicit_resolver(BOOL_TAG, YAML12_BOOL_RE, list("tTfF"))

# The dumper keeps YAML 1.1 booleans so strings like "yes" stay quoted.
CffDumper.yaml_implicit_resolvers = _without_tag(
    yaml.SafeDumper.yaml_implicit_resolvers, TIMESTAMP_TAG
)


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of document bytes.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content.

    Returns
    -------
    str
        ``utf-8-sig`` when a BOM is present, ``utf-8`` when the bytes decode,
        ``latin-1`` otherwise.
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF."""
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def read_document_text(path: Path) -> str:
    """Read a document file as text with normalized line endings.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    file_bytes = path.read_bytes()
    return normalize_line_endings(file_bytes.decode(detect_encoding(file_bytes)))


def load_yaml_document(text: str) -> Any:
    """Parse YAML text into a raw document tree.

    Raises
    ------
    DocumentSyntaxError
        If the text is not well-formed YAML.
    """
    try:
        return yaml.load(text, Loader=CffLoader)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        where = f" (line {mark.line + 1}, column {mark.column + 1})" if mark else ""
        problem = getattr(e, "problem", None) or str(e)
        raise DocumentSyntaxError(f"invalid YAML{where}: {problem}") from e


def load_json_document(text: str) -> Any:
    """Parse JSON text into a raw document tree.

    Raises
    ------
    DocumentSyntaxError
        If the text is not well-formed JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentSyntaxError(
            f"invalid JSON (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e
